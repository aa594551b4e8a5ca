"""
Application package for the Rental Registry API.

``core`` holds configuration, logging, identifiers and persistence,
``schemas`` the record models, ``services`` the business logic and
``api`` the versioned HTTP routes.
"""

from .main import app  # noqa: F401
