"""Category and technology schemas."""

from pydantic import BaseModel


class CategoryRead(BaseModel):
    id: int
    name: str

    model_config = {"from_attributes": True}


class TechnologyRead(BaseModel):
    id: int
    name: str

    model_config = {"from_attributes": True}


class FormOptions(BaseModel):
    """Choices for the project create/edit form."""

    categories: list[CategoryRead]
    technologies: list[TechnologyRead]
