"""
API package containing versioned routes.

Version subpackages such as ``v1`` expose a top‑level ``router``.
Probes that live outside the versioned prefix (health, metrics) are
defined in ``probes``.
"""
