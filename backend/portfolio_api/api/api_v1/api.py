from __future__ import annotations

from fastapi import APIRouter

from portfolio_api.api.api_v1.endpoints import contact, newsletter, projects

api_router = APIRouter()

api_router.include_router(contact.router)
api_router.include_router(newsletter.router)
api_router.include_router(projects.router)
