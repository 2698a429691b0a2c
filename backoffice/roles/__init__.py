from .routes import roles_router, permissions_router

__all__ = ["roles_router", "permissions_router"]
