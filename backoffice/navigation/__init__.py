from .routes import navigation_router

__all__ = ["navigation_router"]
