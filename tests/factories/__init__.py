"""Test factories for generating test data.

Re-exports all factories for convenient imports:
    from tests.factories import ProjectFactory, TechnologyFactory, ...
"""

from tests.factories.base import BaseFactory, utc_now
from tests.factories.catalog import CategoryFactory, TechnologyFactory
from tests.factories.project import ProjectFactory

__all__ = [
    # Base
    "BaseFactory",
    "utc_now",
    # Catalog
    "CategoryFactory",
    "TechnologyFactory",
    # Projects
    "ProjectFactory",
]
