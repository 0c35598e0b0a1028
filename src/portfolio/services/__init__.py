from src.portfolio.services.catalog_service import CatalogService
from src.portfolio.services.project_service import ProjectService

__all__ = ["CatalogService", "ProjectService"]
