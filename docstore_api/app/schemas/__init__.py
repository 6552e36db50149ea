"""
Pydantic schema definitions for API payloads.

Schemas describe the wire representation of documents and the
auxiliary payloads (login, health).  The document store keeps
``Document`` instances directly, so the stored shape and the wire
shape are the same flat object.
"""
