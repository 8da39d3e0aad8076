"""
Top‑level package for the Positions API.

Marks ``positions_api`` as a package so that the application can be
imported with fully qualified names such as
``positions_api.app.main``, both from the project root and from the
test suite.
"""

__all__ = []
