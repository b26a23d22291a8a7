"""
Top‑level API router.

Aggregates the per-collection routers.  The application mounts this
router under ``/api``.
"""

from fastapi import APIRouter

from .endpoints import donors, health, inventory, requests

router = APIRouter()

router.include_router(donors.router, prefix="/donors", tags=["donors"])
router.include_router(inventory.router, prefix="/inventory", tags=["inventory"])
router.include_router(requests.router, prefix="/requests", tags=["requests"])
router.include_router(health.router, prefix="/health", tags=["health"])
