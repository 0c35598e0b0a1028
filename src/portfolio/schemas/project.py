"""Project schemas for API request/response."""

from datetime import datetime

from pydantic import BaseModel, Field, field_validator

from src.portfolio.core.config import get_settings
from src.portfolio.models import Project


class ProjectCreate(BaseModel):
    """Schema for creating a project.

    Every optional field has an explicit default, so the workflow never has
    to ask whether a field was submitted.
    """

    title: str = Field(min_length=1, max_length=255)
    description: str = Field(default="")
    category_id: int | None = Field(default=None, ge=1)
    technology_ids: list[int] = Field(default_factory=list)

    @field_validator("title")
    @classmethod
    def validate_title(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError("Project title cannot be empty or whitespace only")
        return v

    @field_validator("description", mode="before")
    @classmethod
    def validate_description(cls, v: str | None) -> str:
        if v is None:
            return ""
        return v.strip()

    @field_validator("technology_ids")
    @classmethod
    def validate_technology_ids(cls, v: list[int]) -> list[int]:
        if any(tech_id < 1 for tech_id in v):
            raise ValueError("Technology ids must be positive integers")
        # Drop duplicates, keep submission order
        return list(dict.fromkeys(v))


class ProjectUpdate(ProjectCreate):
    """Schema for updating a project.

    Updates replace the whole form: title and description are re-derived into
    slug and excerpt, and technology_ids becomes the complete technology set
    (an empty list detaches every technology).
    """


class CoverImage(BaseModel):
    """Uploaded cover image handed to the workflow."""

    filename: str | None = None
    content_type: str | None = None
    content: bytes


class ProjectRead(BaseModel):
    """Schema for reading a project."""

    id: int
    title: str
    slug: str
    description: str
    excerpt: str
    cover_image: str | None
    cover_image_url: str | None
    category_id: int | None
    technology_ids: list[int]
    created_at: datetime
    updated_at: datetime

    @classmethod
    def from_project(cls, project: Project, technology_ids: list[int]) -> "ProjectRead":
        cover_image_url = None
        if project.cover_image and project.cover_image.startswith(("http://", "https://")):
            # Seeded projects point at placeholder images
            cover_image_url = project.cover_image
        elif project.cover_image:
            media_url = get_settings().media_url.rstrip("/")
            cover_image_url = f"{media_url}/{project.cover_image}"
        return cls(
            id=project.id,
            title=project.title,
            slug=project.slug,
            description=project.description,
            excerpt=project.excerpt,
            cover_image=project.cover_image,
            cover_image_url=cover_image_url,
            category_id=project.category_id,
            technology_ids=sorted(technology_ids),
            created_at=project.created_at,
            updated_at=project.updated_at,
        )
