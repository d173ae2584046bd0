"""
Service layer abstraction.

Validation, update reconciliation and query dispatch for restaurants
live here, independent of the HTTP layer and of the concrete store.
"""
