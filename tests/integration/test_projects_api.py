"""HTTP tests for the project admin endpoints."""

from uuid import uuid4

import pytest
from httpx import AsyncClient

pytestmark = [pytest.mark.integration]

PROJECTS_URL = "/api/v1/admin/projects"


async def create_project(client: AsyncClient, files=None, **fields) -> dict:
    response = await client.post(PROJECTS_URL, data=fields, files=files)
    assert response.status_code == 201, response.text
    return response.json()


class TestCreateProject:
    async def test_create_minimal(self, client: AsyncClient, sent_emails):
        body = await create_project(client, title="Hello World")

        assert body["title"] == "Hello World"
        assert body["slug"] == "hello-world"
        assert body["description"] == ""
        assert body["excerpt"] == ""
        assert body["cover_image"] is None
        assert body["cover_image_url"] is None
        assert body["technology_ids"] == []

        assert len(sent_emails) == 1
        to, lead = sent_emails[0]
        assert to == "info@boolpress.com"
        assert lead.slug == "hello-world"

    async def test_create_with_technologies_and_category(
        self, client: AsyncClient, technologies, category, sent_emails
    ):
        body = await create_project(
            client,
            title="Stack",
            description="Built with things",
            category_id=str(category.id),
            technology_ids=["7", "5"],
        )

        assert body["category_id"] == category.id
        assert body["technology_ids"] == [5, 7]

    async def test_create_with_cover_image(self, client: AsyncClient, storage, sent_emails):
        body = await create_project(
            client,
            title="Pic",
            files={"cover_image": ("cover.jpg", b"jpeg-bytes", "image/jpeg")},
        )

        assert body["cover_image"].startswith("project_images/")
        assert body["cover_image_url"] == f"/storage/{body['cover_image']}"
        assert storage.read(body["cover_image"]) == b"jpeg-bytes"

    async def test_blank_title_is_rejected(self, client: AsyncClient, sent_emails):
        response = await client.post(PROJECTS_URL, data={"title": "   "})

        assert response.status_code == 422
        body = response.json()
        assert body["detail"][0]["loc"][-1] == "title"
        assert "request_id" in body
        assert sent_emails == []

    async def test_missing_title_is_rejected(self, client: AsyncClient, sent_emails):
        response = await client.post(PROJECTS_URL, data={"description": "no title"})

        assert response.status_code == 422

    async def test_unknown_technology_is_conflict(
        self, client: AsyncClient, technologies, sent_emails
    ):
        response = await client.post(
            PROJECTS_URL, data={"title": "Bad", "technology_ids": ["404"]}
        )

        assert response.status_code == 409
        assert response.json()["detail"] == "Category or technology does not exist"
        assert (await client.get(PROJECTS_URL)).json() == []
        assert sent_emails == []


class TestReadProjects:
    async def test_list_in_insertion_order(self, client: AsyncClient, sent_emails):
        for title in ("One", "Two", "Three"):
            await create_project(client, title=title)

        response = await client.get(PROJECTS_URL)

        assert response.status_code == 200
        assert [p["title"] for p in response.json()] == ["One", "Two", "Three"]

    async def test_get_project(self, client: AsyncClient, technologies, sent_emails):
        created = await create_project(client, title="Detail", technology_ids=["1", "3"])

        response = await client.get(f"{PROJECTS_URL}/{created['id']}")

        assert response.status_code == 200
        assert response.json() == created

    async def test_get_missing_project(self, client: AsyncClient):
        response = await client.get(f"{PROJECTS_URL}/999")

        assert response.status_code == 404
        body = response.json()
        assert body["detail"] == "Project 999 not found"
        assert "request_id" in body

    async def test_form_options(self, client: AsyncClient, technologies, category):
        response = await client.get(f"{PROJECTS_URL}/form-options")

        assert response.status_code == 200
        body = response.json()
        assert [c["name"] for c in body["categories"]] == ["Full stack"]
        assert {t["id"] for t in body["technologies"]} == {1, 3, 5, 7, 9}


class TestUpdateProject:
    async def test_update_replaces_fields_and_technologies(
        self, client: AsyncClient, technologies, sent_emails
    ):
        created = await create_project(client, title="Before", technology_ids=["5", "7"])

        response = await client.put(
            f"{PROJECTS_URL}/{created['id']}",
            data={"title": "After Edit", "description": "z" * 160, "technology_ids": ["7", "9"]},
        )

        assert response.status_code == 200
        body = response.json()
        assert body["slug"] == "after-edit"
        assert len(body["excerpt"]) == 150
        assert body["technology_ids"] == [7, 9]
        assert body["created_at"] == created["created_at"]
        assert len(sent_emails) == 1

    async def test_update_without_cover_keeps_existing(
        self, client: AsyncClient, storage, sent_emails
    ):
        created = await create_project(
            client, title="Pic", files={"cover_image": ("a.png", b"a", "image/png")}
        )

        response = await client.put(f"{PROJECTS_URL}/{created['id']}", data={"title": "Pic"})

        assert response.json()["cover_image"] == created["cover_image"]
        assert storage.exists(created["cover_image"])

    async def test_update_with_cover_replaces_blob(
        self, client: AsyncClient, storage, sent_emails
    ):
        created = await create_project(
            client, title="Pic", files={"cover_image": ("a.png", b"a", "image/png")}
        )

        response = await client.put(
            f"{PROJECTS_URL}/{created['id']}",
            data={"title": "Pic"},
            files={"cover_image": ("b.png", b"b", "image/png")},
        )

        new_path = response.json()["cover_image"]
        assert new_path != created["cover_image"]
        assert not storage.exists(created["cover_image"])
        assert storage.read(new_path) == b"b"

    async def test_update_missing_project(self, client: AsyncClient):
        response = await client.put(f"{PROJECTS_URL}/999", data={"title": "Ghost"})

        assert response.status_code == 404


class TestDeleteProject:
    async def test_delete_project(self, client: AsyncClient, technologies, sent_emails):
        created = await create_project(client, title="Doomed", technology_ids=["1", "9"])

        response = await client.delete(f"{PROJECTS_URL}/{created['id']}")

        assert response.status_code == 204
        assert (await client.get(f"{PROJECTS_URL}/{created['id']}")).status_code == 404
        assert (await client.get(PROJECTS_URL)).json() == []

    async def test_delete_missing_project(self, client: AsyncClient):
        response = await client.delete(f"{PROJECTS_URL}/999")

        assert response.status_code == 404


class TestCatalog:
    async def test_list_categories(self, client: AsyncClient, category):
        response = await client.get("/api/v1/categories")

        assert response.status_code == 200
        assert response.json() == [{"id": category.id, "name": "Full stack"}]

    async def test_list_technologies(self, client: AsyncClient, technologies):
        response = await client.get("/api/v1/technologies")

        assert [t["name"] for t in response.json()] == [
            "CSS",
            "HTML",
            "JavaScript",
            "Laravel",
            "Vue",
        ]


class TestPlumbing:
    async def test_health(self, client: AsyncClient):
        response = await client.get("/health")

        assert response.status_code == 200
        body = response.json()
        assert body["status"] == "healthy"
        assert body["database"] == "healthy"
        assert body["email"] == "log_only"

    async def test_request_id_header(self, client: AsyncClient):
        request_id = str(uuid4())
        response = await client.get(PROJECTS_URL, headers={"X-Request-ID": request_id})

        assert response.headers["X-Request-ID"] == request_id
