"""
Top‑level router for version 1 of the API.

Aggregates the domain routers under a unified prefix.  Add new
domains here.
"""

from fastapi import APIRouter

from .endpoints import restaurants

router = APIRouter()

router.include_router(restaurants.router, prefix="/restaurants", tags=["restaurants"])
