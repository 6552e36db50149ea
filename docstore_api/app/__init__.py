"""
Application package initializer.

The project is organised into small layers: ``core`` holds the
document store, errors, configuration, logging and security helpers;
``services`` wraps the store in a facade used by the HTTP layer;
``schemas`` defines the wire models and ``api`` exposes versioned
routers.  ``main.create_app`` wires them together.
"""
