"""
Pydantic schema definitions for API payloads.

Schemas are kept separate from the service layer so that the API
representation can evolve independently of the catalog internals.
"""
