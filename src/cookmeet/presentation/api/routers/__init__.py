"""API routers."""

from cookmeet.presentation.api.routers.auth import router as auth_router
from cookmeet.presentation.api.routers.cuisines import router as cuisines_router

__all__ = ["auth_router", "cuisines_router"]
