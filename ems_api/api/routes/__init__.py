"""HTTP routes."""

from fastapi import APIRouter

from ems_api.api.routes import auth, health, reports

router = APIRouter()
router.include_router(health.router, tags=["health"])
router.include_router(auth.router, prefix="/api", tags=["auth"])
router.include_router(reports.router, prefix="/api", tags=["reports"])
