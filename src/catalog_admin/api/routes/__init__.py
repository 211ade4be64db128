from catalog_admin.api.routes.cast_members import router as cast_members_router
from catalog_admin.api.routes.categories import router as categories_router
from catalog_admin.api.routes.genres import router as genres_router

__all__ = ["cast_members_router", "categories_router", "genres_router"]
