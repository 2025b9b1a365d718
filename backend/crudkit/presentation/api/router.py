"""Top-level API router — JSON endpoints live under /api/v1."""

from fastapi import APIRouter

from crudkit.presentation.api.health import router as health_router

router = APIRouter(prefix="/api/v1")
router.include_router(health_router)
