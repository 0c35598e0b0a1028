"""ProjectRepository join-table operations."""

import pytest

from src.portfolio.repositories import ProjectRepository
from tests.factories import ProjectFactory

pytestmark = [pytest.mark.integration]


@pytest.fixture
async def project(db_session, technologies):
    project = ProjectFactory.derived(title="Repo Project")
    db_session.add(project)
    await db_session.commit()
    await db_session.refresh(project)
    return project


async def test_sync_reports_attached_and_detached(db_session, project):
    repo = ProjectRepository(db_session)
    repo.attach_technologies(project.id, [5, 7])
    await db_session.commit()

    attached, detached = await repo.sync_technologies(project.id, [7, 9])
    await db_session.commit()

    assert attached == [9]
    assert detached == [5]
    assert await repo.technology_ids(project.id) == [7, 9]


async def test_sync_with_same_set_is_noop(db_session, project):
    repo = ProjectRepository(db_session)
    repo.attach_technologies(project.id, [1, 3])
    await db_session.commit()

    attached, detached = await repo.sync_technologies(project.id, [3, 1])

    assert attached == []
    assert detached == []


async def test_detach_all(db_session, project):
    repo = ProjectRepository(db_session)
    repo.attach_technologies(project.id, [1, 3, 5])
    await db_session.commit()

    await repo.detach_technologies(project.id)
    await db_session.commit()

    assert await repo.technology_ids(project.id) == []


async def test_detach_empty_selection_keeps_rows(db_session, project):
    repo = ProjectRepository(db_session)
    repo.attach_technologies(project.id, [1])
    await db_session.commit()

    await repo.detach_technologies(project.id, [])

    assert await repo.technology_ids(project.id) == [1]


async def test_technology_ids_by_project(db_session, project):
    other = ProjectFactory.derived(title="Other")
    db_session.add(other)
    await db_session.commit()
    await db_session.refresh(other)

    repo = ProjectRepository(db_session)
    repo.attach_technologies(project.id, [9, 1])
    await db_session.commit()

    mapping = await repo.technology_ids_by_project([project.id, other.id])

    assert mapping == {project.id: [1, 9], other.id: []}


async def test_exists_by_slug(db_session, project):
    repo = ProjectRepository(db_session)

    assert await repo.exists_by_slug("repo-project") is True
    assert await repo.exists_by_slug("repo-project", exclude_id=project.id) is False
    assert await repo.exists_by_slug("missing") is False
    assert (await repo.get_by_slug("repo-project")).id == project.id
