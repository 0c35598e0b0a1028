"""Category and technology listings for project forms."""

from src.portfolio.models import Category, Technology
from src.portfolio.repositories import CategoryRepository, TechnologyRepository


class CatalogService:
    """Read-only passthroughs over the lookup tables."""

    def __init__(
        self,
        category_repo: CategoryRepository,
        technology_repo: TechnologyRepository,
    ):
        self.category_repo = category_repo
        self.technology_repo = technology_repo

    async def list_categories(self) -> list[Category]:
        return await self.category_repo.list_by_name()

    async def list_technologies(self) -> list[Technology]:
        return await self.technology_repo.list_by_name()

    async def form_options(self) -> tuple[list[Category], list[Technology]]:
        """Categories and technologies to populate the create/edit form."""
        return await self.list_categories(), await self.list_technologies()
