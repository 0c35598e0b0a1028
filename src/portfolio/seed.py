"""Seed the database with fake projects for local development.

Usage: python -m src.portfolio.seed [count]

The schema is migrated to head first, so this also works on an empty database.
"""

import asyncio
import sys

from faker import Faker
from sqlalchemy.ext.asyncio import AsyncSession

from src.portfolio.core.config import get_settings
from src.portfolio.core.db import dispose_engine, get_session, run_migrations_async
from src.portfolio.core.logging import get_logger, setup_logging
from src.portfolio.core.text import make_excerpt, slugify
from src.portfolio.models import Category, Project, Technology
from src.portfolio.repositories import CategoryRepository, TechnologyRepository

logger = get_logger(__name__)

DEFAULT_CATEGORIES = ("Frontend", "Backend", "Full stack")
DEFAULT_TECHNOLOGIES = ("HTML", "CSS", "JavaScript", "Vue", "PHP", "Laravel", "Python")


async def seed_catalog(session: AsyncSession) -> None:
    """Insert the default categories and technologies that are missing."""
    category_repo = CategoryRepository(session)
    technology_repo = TechnologyRepository(session)

    for name in DEFAULT_CATEGORIES:
        if await category_repo.get_by_name(name) is None:
            category_repo.add(Category(name=name))
    for name in DEFAULT_TECHNOLOGIES:
        if await technology_repo.get_by_name(name) is None:
            technology_repo.add(Technology(name=name))
    await session.commit()


async def seed_projects(
    session: AsyncSession, count: int = 10, faker: Faker | None = None
) -> list[Project]:
    """Create ``count`` projects with fake titles and placeholder covers.

    Seeded projects bypass ProjectService, so no notification is sent.
    """
    faker = faker or Faker()
    projects = []
    for _ in range(count):
        title = faker.sentence(nb_words=3)
        description = faker.text()
        project = Project(
            title=title,
            slug=slugify(title),
            description=description,
            excerpt=make_excerpt(description),
            cover_image=faker.image_url(width=600, height=300),
        )
        session.add(project)
        projects.append(project)

    await session.commit()
    logger.info("Seeded projects", count=count)
    return projects


async def main(count: int) -> None:
    setup_logging(get_settings().debug)
    try:
        await run_migrations_async()
        async with get_session() as session:
            await seed_catalog(session)
            await seed_projects(session, count)
    finally:
        await dispose_engine()


if __name__ == "__main__":
    asyncio.run(main(int(sys.argv[1]) if len(sys.argv) > 1 else 10))
