from fastapi import APIRouter

from src.portfolio.api.v1 import catalog, projects

api_router = APIRouter(prefix="/api/v1")
api_router.include_router(projects.router)
api_router.include_router(catalog.router)
