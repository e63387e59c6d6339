"""
Endpoint handlers for API v1.

Handlers here are plain coroutines; ``router.py`` decides which one a
request reaches.
"""
