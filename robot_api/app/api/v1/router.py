"""
Top-level router for version 1 of the API.

This router aggregates the resource routers under a unified prefix.
When new resources are added, include their routers here.
"""

from fastapi import APIRouter

from .endpoints import health, references, robots

router = APIRouter()

router.include_router(robots.router, prefix="/robots", tags=["robots"])
router.include_router(references.router, prefix="/references", tags=["references"])
# The health router defines its own "/health" path internally.
router.include_router(health.router, tags=["system"])
