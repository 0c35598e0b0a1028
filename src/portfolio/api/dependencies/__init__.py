"""FastAPI dependency injection definitions.

Re-exports all dependencies for convenient imports.
"""

# Database
from src.portfolio.api.dependencies.db import DBSession, get_db_session

# Repositories
from src.portfolio.api.dependencies.repositories import (
    CategoryRepo,
    LeadRepo,
    ProjectRepo,
    TechnologyRepo,
    get_category_repository,
    get_lead_repository,
    get_project_repository,
    get_technology_repository,
)

# Services
from src.portfolio.api.dependencies.services import (
    BlobStorage,
    CatalogServiceDep,
    ProjectServiceDep,
    get_catalog_service,
    get_project_service,
)

__all__ = [
    # Database
    "DBSession",
    "get_db_session",
    # Repositories
    "CategoryRepo",
    "LeadRepo",
    "ProjectRepo",
    "TechnologyRepo",
    "get_category_repository",
    "get_lead_repository",
    "get_project_repository",
    "get_technology_repository",
    # Services
    "BlobStorage",
    "CatalogServiceDep",
    "ProjectServiceDep",
    "get_catalog_service",
    "get_project_service",
]
