"""
Application package initializer.

The project is organised into layers: ``schemas`` describe the wire
representation of a restaurant, ``repositories`` talk to the
relational store, ``services`` hold validation, reconciliation and
query dispatch, and ``api/v1/endpoints`` expose the routers.
"""

from .main import app  # noqa: F401
