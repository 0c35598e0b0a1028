"""Repository factory dependencies."""

from typing import Annotated

from fastapi import Depends

from src.portfolio.api.dependencies.db import DBSession
from src.portfolio.repositories import (
    CategoryRepository,
    LeadRepository,
    ProjectRepository,
    TechnologyRepository,
)


def get_project_repository(session: DBSession) -> ProjectRepository:
    """Get project repository bound to the request session."""
    return ProjectRepository(session)


def get_lead_repository(session: DBSession) -> LeadRepository:
    """Get lead repository bound to the request session."""
    return LeadRepository(session)


def get_category_repository(session: DBSession) -> CategoryRepository:
    """Get category repository bound to the request session."""
    return CategoryRepository(session)


def get_technology_repository(session: DBSession) -> TechnologyRepository:
    """Get technology repository bound to the request session."""
    return TechnologyRepository(session)


ProjectRepo = Annotated[ProjectRepository, Depends(get_project_repository)]
LeadRepo = Annotated[LeadRepository, Depends(get_lead_repository)]
CategoryRepo = Annotated[CategoryRepository, Depends(get_category_repository)]
TechnologyRepo = Annotated[TechnologyRepository, Depends(get_technology_repository)]
