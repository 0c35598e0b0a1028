"""Category and technology listings."""

from fastapi import APIRouter

from src.portfolio.api.dependencies import CatalogServiceDep
from src.portfolio.schemas import CategoryRead, TechnologyRead

router = APIRouter(tags=["catalog"])


@router.get("/categories", response_model=list[CategoryRead], summary="List categories")
async def list_categories(catalog: CatalogServiceDep) -> list[CategoryRead]:
    return [CategoryRead.model_validate(c) for c in await catalog.list_categories()]


@router.get("/technologies", response_model=list[TechnologyRead], summary="List technologies")
async def list_technologies(catalog: CatalogServiceDep) -> list[TechnologyRead]:
    return [TechnologyRead.model_validate(t) for t in await catalog.list_technologies()]
