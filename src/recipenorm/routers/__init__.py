"""API routers for the recipenorm service."""

from recipenorm.routers.normalize import router as normalize_router

__all__ = ["normalize_router"]
