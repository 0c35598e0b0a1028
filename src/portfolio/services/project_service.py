"""Project workflow - create, update and destroy portfolio projects.

Each operation derives slug and excerpt from the submitted form, handles the
cover image, writes the project row and keeps the project_technology join
rows in step. Creation also notifies the operator by email.
"""

import asyncio

from sqlalchemy.ext.asyncio import AsyncSession

from src.portfolio.core.config import Settings, get_settings
from src.portfolio.core.logging import get_logger
from src.portfolio.core.notifications import send_new_project_email
from src.portfolio.core.storage import LocalBlobStorage
from src.portfolio.core.text import make_excerpt, slugify, with_suffix
from src.portfolio.models import Lead, Project
from src.portfolio.models.base import utc_now
from src.portfolio.repositories import LeadRepository, ProjectRepository
from src.portfolio.schemas import CoverImage, ProjectCreate, ProjectUpdate

logger = get_logger(__name__)


class ProjectService:
    """Project workflow - business logic only.

    Not atomic across collaborators: the project row is committed before the
    notification goes out, and a failed send does not undo it.
    """

    def __init__(
        self,
        project_repo: ProjectRepository,
        session: AsyncSession,
        storage: LocalBlobStorage,
        lead_repo: LeadRepository | None = None,
        settings: Settings | None = None,
    ):
        self.project_repo = project_repo
        self.session = session
        self.storage = storage
        self.lead_repo = lead_repo
        self.settings = settings or get_settings()

    async def list_projects(self) -> list[Project]:
        """All projects in insertion order."""
        return await self.project_repo.list_all()

    async def get_project(self, project_id: int) -> Project | None:
        return await self.project_repo.get_by_id(project_id)

    async def get_technology_ids(self, project: Project) -> list[int]:
        return await self.project_repo.technology_ids(project.id)

    async def get_technology_ids_for(self, projects: list[Project]) -> dict[int, list[int]]:
        return await self.project_repo.technology_ids_by_project([p.id for p in projects])

    async def create_project(
        self, data: ProjectCreate, cover_image: CoverImage | None = None
    ) -> Project:
        """Create a project and notify the operator.

        1. Derive slug and excerpt
        2. Store the cover image, if one was uploaded
        3. Insert the project and attach its technologies, then COMMIT
        4. Build a Lead from the project and email it to the operator

        Raises:
            IntegrityError: If a category or technology id does not exist
        """
        project = Project(
            title=data.title,
            slug=await self._make_slug(data.title),
            description=data.description,
            excerpt=make_excerpt(data.description),
            category_id=data.category_id,
        )

        if cover_image is not None:
            project.cover_image = await self._store_cover(cover_image)

        self.project_repo.add(project)
        try:
            # Flush to get the primary key for the join rows
            await self.session.flush()
            if data.technology_ids:
                self.project_repo.attach_technologies(project.id, data.technology_ids)
            await self.session.commit()
            await self.session.refresh(project)
        except Exception:
            await self.session.rollback()
            raise

        logger.info(
            "Project created",
            project_id=project.id,
            slug=project.slug,
            technology_ids=data.technology_ids,
            has_cover=project.cover_image is not None,
        )

        await self._notify_new_project(project)
        return project

    async def update_project(
        self,
        project: Project,
        data: ProjectUpdate,
        cover_image: CoverImage | None = None,
    ) -> Project:
        """Apply an edit form to a project.

        Slug and excerpt are always recomputed. A new cover image replaces
        the stored one. The technology set is synchronized to exactly
        data.technology_ids. No notification is sent.

        Row changes are flushed before the cover is swapped, so an unknown
        category or technology id fails with the old blob still in place.
        """
        slug = await self._make_slug(data.title, exclude_id=project.id)

        project.title = data.title
        project.slug = slug
        project.description = data.description
        project.excerpt = make_excerpt(data.description)
        project.category_id = data.category_id
        # SQLModel has no onupdate hook, so the timestamp is set here
        project.updated_at = utc_now()

        try:
            attached, detached = await self.project_repo.sync_technologies(
                project.id, data.technology_ids
            )
            await self.session.flush()

            if cover_image is not None:
                if project.cover_image:
                    await asyncio.to_thread(self.storage.delete, project.cover_image)
                project.cover_image = await self._store_cover(cover_image)

            await self.session.commit()
            await self.session.refresh(project)
        except Exception:
            await self.session.rollback()
            raise

        logger.info(
            "Project updated",
            project_id=project.id,
            slug=project.slug,
            attached=attached,
            detached=detached,
        )
        return project

    async def destroy_project(self, project: Project) -> None:
        """Delete a project after emptying its technology join rows.

        The stored cover image is kept unless purge_cover_on_destroy is set.
        """
        project_id = project.id
        cover_image = project.cover_image

        try:
            await self.project_repo.detach_technologies(project_id)
            await self.project_repo.delete(project)
            await self.session.commit()
        except Exception:
            await self.session.rollback()
            raise

        if cover_image and self.settings.purge_cover_on_destroy:
            await asyncio.to_thread(self.storage.delete, cover_image)

        logger.info("Project deleted", project_id=project_id, cover_image=cover_image)

    async def _make_slug(self, title: str, exclude_id: int | None = None) -> str:
        """Slug for a title, suffixed -1, -2, ... when slug_unique is on."""
        slug = slugify(title)
        if not self.settings.slug_unique:
            return slug

        base_slug = slug
        counter = 1
        while await self.project_repo.exists_by_slug(slug, exclude_id=exclude_id):
            slug = with_suffix(base_slug, counter)
            counter += 1
        return slug

    async def _store_cover(self, cover_image: CoverImage) -> str:
        return await asyncio.to_thread(
            self.storage.put,
            self.settings.cover_image_namespace,
            cover_image.content,
            cover_image.filename,
        )

    async def _notify_new_project(self, project: Project) -> Lead:
        """Send the new-project email to the operator.

        The Lead is only a message payload unless persist_leads is on. Failures
        here are logged and never undo the committed project.
        """
        lead = Lead(title=project.title, description=project.description, slug=project.slug)

        if self.settings.persist_leads and self.lead_repo is not None:
            try:
                self.lead_repo.add(lead)
                await self.session.commit()
                await self.session.refresh(lead)
            except Exception as e:
                await self.session.rollback()
                # The rollback expired the committed project as well
                await self.session.refresh(project)
                logger.error("Failed to persist lead", slug=lead.slug, error=str(e))

        # Blocks for up to email_send_timeout_seconds
        sent = await asyncio.to_thread(
            send_new_project_email, self.settings.notification_email, lead
        )
        if not sent:
            logger.warning(
                "New project notification not delivered",
                project_id=project.id,
                to=self.settings.notification_email,
            )
        return lead
