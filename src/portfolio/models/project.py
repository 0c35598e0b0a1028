"""Project model and its technology join table."""

from sqlalchemy import Text
from sqlmodel import Field, SQLModel

from src.portfolio.models.base import TimestampedModel


class ProjectTechnologyLink(SQLModel, table=True):
    """Join row between a project and a technology. No payload columns."""

    __tablename__ = "project_technology"

    project_id: int = Field(foreign_key="projects.id", primary_key=True)
    technology_id: int = Field(foreign_key="technologies.id", primary_key=True)


class Project(TimestampedModel, table=True):
    """Portfolio item managed from the admin back-office.

    Note: slug and excerpt are derived by ProjectService on every write;
    slug is indexed but not unique.
    """

    __tablename__ = "projects"

    id: int | None = Field(default=None, primary_key=True)
    title: str = Field(max_length=255)
    slug: str = Field(max_length=255, index=True)
    description: str = Field(default="", sa_type=Text)
    excerpt: str = Field(default="", max_length=150)
    cover_image: str | None = Field(default=None, max_length=255)
    category_id: int | None = Field(default=None, foreign_key="categories.id", index=True)
