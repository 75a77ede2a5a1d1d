"""
Application package initializer.

The service is split into a small number of layers: ``core`` holds
configuration, logging and the database client, ``services`` issues
SQL statements, ``schemas`` describes request bodies and ``api``
exposes versioned routers.
"""

from .main import app  # noqa: F401
