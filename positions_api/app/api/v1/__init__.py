"""
Version 1 of the API.

Breaking changes should go into a new version subpackage (e.g.
``v2``) so existing clients keep working.
"""
