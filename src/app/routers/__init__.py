from app.routers.bookmarks import router as bookmarks_router

__all__ = ["bookmarks_router"]
