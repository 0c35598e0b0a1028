"""Service factory dependencies."""

from typing import Annotated

from fastapi import Depends

from src.portfolio.api.dependencies.db import DBSession
from src.portfolio.api.dependencies.repositories import (
    CategoryRepo,
    LeadRepo,
    ProjectRepo,
    TechnologyRepo,
)
from src.portfolio.core.storage import LocalBlobStorage, get_storage
from src.portfolio.services import CatalogService, ProjectService

BlobStorage = Annotated[LocalBlobStorage, Depends(get_storage)]


def get_project_service(
    project_repo: ProjectRepo,
    lead_repo: LeadRepo,
    session: DBSession,
    storage: BlobStorage,
) -> ProjectService:
    """Get project workflow service."""
    return ProjectService(project_repo, session, storage, lead_repo)


def get_catalog_service(
    category_repo: CategoryRepo,
    technology_repo: TechnologyRepo,
) -> CatalogService:
    """Get catalog service."""
    return CatalogService(category_repo, technology_repo)


ProjectServiceDep = Annotated[ProjectService, Depends(get_project_service)]
CatalogServiceDep = Annotated[CatalogService, Depends(get_catalog_service)]
