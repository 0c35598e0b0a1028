"""Repository layer - data access abstraction."""

from src.portfolio.repositories.base import BaseRepository
from src.portfolio.repositories.catalog import CategoryRepository, TechnologyRepository
from src.portfolio.repositories.lead import LeadRepository
from src.portfolio.repositories.project import ProjectRepository

__all__ = [
    # Base
    "BaseRepository",
    # Catalog
    "CategoryRepository",
    "TechnologyRepository",
    # Projects
    "LeadRepository",
    "ProjectRepository",
]
