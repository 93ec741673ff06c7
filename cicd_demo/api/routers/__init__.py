"""API routers."""

from cicd_demo.api.routers.meta import router as meta_router

__all__ = ["meta_router"]
