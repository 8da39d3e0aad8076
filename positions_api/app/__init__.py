"""
Application package initializer.

The API is split into configuration (``core``), request and response
models (``schemas``), the in‑memory store (``services``) and the HTTP
routes (``api``).  Routes are grouped by version under
``api/<version>/``.
"""

from .main import app  # noqa: F401
