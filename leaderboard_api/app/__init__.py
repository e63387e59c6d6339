"""
Application package initializer.

The service is split into the usual layers: ``core`` holds settings,
logging, errors and the storage gateway, ``schemas`` the typed record,
``services`` the decode/encode steps and ``api/v1`` the HTTP handlers
and router.  Versioning is handled by grouping routers under the
``api/<version>/`` hierarchy.
"""

from .main import app  # noqa: F401
