"""
API package containing versioned routes.

A version subpackage exposes a top‑level ``router`` which wires its
endpoint handlers.  New versions can be added by creating a new
subpackage (e.g. ``v2``) with its own ``router``.
"""
