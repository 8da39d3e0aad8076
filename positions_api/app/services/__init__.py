"""
Service layer abstraction.

Services hold the business logic behind the API handlers.  The
position store keeps its records in process memory; nothing survives
a restart.
"""
