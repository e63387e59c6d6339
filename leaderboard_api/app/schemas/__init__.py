"""
Pydantic models used for request decoding and response encoding.
"""

from .record import Record  # noqa: F401
