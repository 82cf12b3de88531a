"""
Pydantic schema definitions for API payloads.

Schemas are separated from the domain entities in ``models`` to
decouple the API representation from the service layer.
"""
