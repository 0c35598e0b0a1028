"""Model exports.

Import from here: `from src.portfolio.models import Project, Technology`
"""

from src.portfolio.models.catalog import Category, Technology
from src.portfolio.models.lead import Lead
from src.portfolio.models.project import Project, ProjectTechnologyLink

__all__ = [
    # Catalog
    "Category",
    "Technology",
    # Projects
    "Project",
    "ProjectTechnologyLink",
    # Notifications
    "Lead",
]
