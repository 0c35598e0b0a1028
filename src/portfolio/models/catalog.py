"""Lookup tables used to classify projects."""

from sqlmodel import Field, SQLModel


class Category(SQLModel, table=True):
    """Portfolio category shown on the project form."""

    __tablename__ = "categories"

    id: int | None = Field(default=None, primary_key=True)
    name: str = Field(max_length=100, unique=True)


class Technology(SQLModel, table=True):
    """Technology tag, linked to projects through project_technology."""

    __tablename__ = "technologies"

    id: int | None = Field(default=None, primary_key=True)
    name: str = Field(max_length=100, unique=True)
