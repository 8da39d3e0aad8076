"""
Pydantic schema definitions for API payloads.

Schemas describe what clients send and receive.  They are kept apart
from the stored records so the public projections can differ from
what the store holds internally.
"""
