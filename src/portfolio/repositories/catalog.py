"""Repositories for the category and technology lookup tables."""

from sqlmodel import select

from src.portfolio.models import Category, Technology
from src.portfolio.repositories.base import BaseRepository


class CategoryRepository(BaseRepository[Category]):
    model = Category

    async def list_by_name(self) -> list[Category]:
        result = await self.session.execute(select(Category).order_by(Category.name))
        return list(result.scalars().all())

    async def get_by_name(self, name: str) -> Category | None:
        result = await self.session.execute(select(Category).where(Category.name == name))
        return result.scalar_one_or_none()


class TechnologyRepository(BaseRepository[Technology]):
    model = Technology

    async def list_by_name(self) -> list[Technology]:
        result = await self.session.execute(select(Technology).order_by(Technology.name))
        return list(result.scalars().all())

    async def get_by_name(self, name: str) -> Technology | None:
        result = await self.session.execute(select(Technology).where(Technology.name == name))
        return result.scalar_one_or_none()
