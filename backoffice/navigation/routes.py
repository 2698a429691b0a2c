"""
Navigation Routes — what the logged-in user may open.

Endpoints:
    GET  /modules     Dashboard tiles unlocked for the caller's role
    GET  /sidebar     Sidebar entries unlocked for the caller's role
"""

from fastapi import APIRouter, Request

from backoffice.utils import success_response
from .service import NavigationService

navigation_router = APIRouter()


@navigation_router.get("/modules")
async def dashboard_modules(request: Request):
    svc = NavigationService(request.state.user_role)
    modules = svc.visible_modules()
    return success_response(
        data={"modules": [m.model_dump() for m in modules], "total": len(modules)}
    )


@navigation_router.get("/sidebar")
async def sidebar(request: Request):
    svc = NavigationService(request.state.user_role)
    entries = svc.visible_sidebar()
    return success_response(data={"entries": [e.model_dump() for e in entries]})
