"""
Schemas module - Request/Response schemas and stored record types.

Everything lives in bridge.schemas.schemas; the store keeps the same
pydantic models it hands back to the routes.
"""
