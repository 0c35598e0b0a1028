from src.portfolio.schemas.catalog import CategoryRead, FormOptions, TechnologyRead
from src.portfolio.schemas.project import (
    CoverImage,
    ProjectCreate,
    ProjectRead,
    ProjectUpdate,
)

__all__ = [
    # Catalog
    "CategoryRead",
    "FormOptions",
    "TechnologyRead",
    # Project
    "CoverImage",
    "ProjectCreate",
    "ProjectRead",
    "ProjectUpdate",
]
