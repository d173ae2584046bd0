"""
Pydantic schema definitions for API payloads.

Schemas are separated from the storage layer to decouple the API
representation (camelCase field names) from column names.
"""
