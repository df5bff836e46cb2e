"""Top-level API router — aggregates all endpoint routers."""

from fastapi import APIRouter

from user_registry.presentation.api.endpoints.health import router as health_router
from user_registry.presentation.api.endpoints.users import router as users_router

router = APIRouter()
router.include_router(health_router)
router.include_router(users_router)
