"""
Service layer abstraction.

Services sit between the HTTP handlers and storage.  By isolating the
store behind a service you can swap the in‑memory store for a
persistent one without changing API handlers.
"""
