"""Repository for Project entity and its technology join rows."""

from collections.abc import Iterable, Sequence

from sqlalchemy import delete, func
from sqlmodel import col, select

from src.portfolio.models import Project, ProjectTechnologyLink
from src.portfolio.repositories.base import BaseRepository


class ProjectRepository(BaseRepository[Project]):
    """Repository for projects.

    The project_technology join table has no model of its own in the service
    layer; attach/detach/sync here are the only way it is written.
    """

    model = Project

    async def exists_by_slug(self, slug: str, exclude_id: int | None = None) -> bool:
        """Check whether another project already uses this slug."""
        query = select(func.count()).select_from(Project).where(Project.slug == slug)
        if exclude_id is not None:
            query = query.where(Project.id != exclude_id)
        result = await self.session.execute(query)
        return result.scalar_one() > 0

    async def get_by_slug(self, slug: str) -> Project | None:
        """First project with this slug (slugs are not unique)."""
        result = await self.session.execute(
            select(Project).where(Project.slug == slug).order_by(Project.id).limit(1)
        )
        return result.scalar_one_or_none()

    async def technology_ids(self, project_id: int) -> list[int]:
        """Ids of the technologies currently attached to a project."""
        result = await self.session.execute(
            select(ProjectTechnologyLink.technology_id)
            .where(ProjectTechnologyLink.project_id == project_id)
            .order_by(ProjectTechnologyLink.technology_id)
        )
        return list(result.scalars().all())

    async def technology_ids_by_project(
        self, project_ids: Sequence[int]
    ) -> dict[int, list[int]]:
        """Attached technology ids for many projects in one query."""
        mapping: dict[int, list[int]] = {project_id: [] for project_id in project_ids}
        if not project_ids:
            return mapping
        result = await self.session.execute(
            select(ProjectTechnologyLink.project_id, ProjectTechnologyLink.technology_id)
            .where(col(ProjectTechnologyLink.project_id).in_(project_ids))
            .order_by(ProjectTechnologyLink.technology_id)
        )
        for project_id, technology_id in result.all():
            mapping[project_id].append(technology_id)
        return mapping

    def attach_technologies(self, project_id: int, technology_ids: Iterable[int]) -> None:
        """Add join rows (no flush/commit). Unknown ids fail at flush time."""
        self.session.add_all(
            ProjectTechnologyLink(project_id=project_id, technology_id=technology_id)
            for technology_id in technology_ids
        )

    async def detach_technologies(
        self, project_id: int, technology_ids: Iterable[int] | None = None
    ) -> None:
        """Remove join rows for a project; all of them when no ids are given."""
        statement = delete(ProjectTechnologyLink).where(
            col(ProjectTechnologyLink.project_id) == project_id
        )
        if technology_ids is not None:
            ids = list(technology_ids)
            if not ids:
                return
            statement = statement.where(col(ProjectTechnologyLink.technology_id).in_(ids))
        await self.session.execute(statement)

    async def sync_technologies(
        self, project_id: int, technology_ids: Iterable[int]
    ) -> tuple[list[int], list[int]]:
        """Make the attached set exactly technology_ids.

        Rows present in both sets are left untouched.

        Returns:
            Tuple of (attached, detached) technology ids
        """
        requested = list(dict.fromkeys(technology_ids))
        current = set(await self.technology_ids(project_id))

        detached = sorted(current.difference(requested))
        attached = [technology_id for technology_id in requested if technology_id not in current]

        await self.detach_technologies(project_id, detached)
        self.attach_technologies(project_id, attached)
        return attached, detached
