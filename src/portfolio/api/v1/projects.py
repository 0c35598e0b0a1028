"""Project endpoints - admin back-office CRUD.

Create and update take multipart forms so a cover image can travel with
the fields.
"""

from typing import Annotated

from fastapi import APIRouter, File, Form, HTTPException, UploadFile, status
from fastapi.exceptions import RequestValidationError
from pydantic import ValidationError
from sqlalchemy.exc import IntegrityError

from src.portfolio.api.dependencies import CatalogServiceDep, ProjectServiceDep
from src.portfolio.models import Project
from src.portfolio.schemas import (
    CategoryRead,
    CoverImage,
    FormOptions,
    ProjectCreate,
    ProjectRead,
    ProjectUpdate,
    TechnologyRead,
)
from src.portfolio.services import ProjectService

router = APIRouter(prefix="/admin/projects", tags=["projects"])


def _validate_form[SchemaType: ProjectCreate](
    schema: type[SchemaType], **fields: object
) -> SchemaType:
    """Run form fields through the schema, reporting errors as a normal 422."""
    try:
        return schema.model_validate(fields)
    except ValidationError as e:
        raise RequestValidationError(e.errors()) from e


async def _read_cover_image(upload: UploadFile | None) -> CoverImage | None:
    """Turn the multipart file part into workflow input.

    Browsers send an empty part with no filename when nothing was picked.
    """
    if upload is None or not upload.filename:
        return None
    content = await upload.read()
    return CoverImage(filename=upload.filename, content_type=upload.content_type, content=content)


async def _get_project_or_404(service: ProjectService, project_id: int) -> Project:
    project = await service.get_project(project_id)
    if project is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"Project {project_id} not found",
        )
    return project


async def _to_read(service: ProjectService, project: Project) -> ProjectRead:
    return ProjectRead.from_project(project, await service.get_technology_ids(project))


@router.get(
    "",
    response_model=list[ProjectRead],
    summary="List projects",
    description="List every project in insertion order.",
)
async def list_projects(service: ProjectServiceDep) -> list[ProjectRead]:
    """List all projects."""
    projects = await service.list_projects()
    technology_ids = await service.get_technology_ids_for(projects)
    return [ProjectRead.from_project(p, technology_ids[p.id]) for p in projects]


@router.get(
    "/form-options",
    response_model=FormOptions,
    summary="Project form options",
    description="Categories and technologies for the create/edit form.",
)
async def get_form_options(catalog: CatalogServiceDep) -> FormOptions:
    categories, technologies = await catalog.form_options()
    return FormOptions(
        categories=[CategoryRead.model_validate(c) for c in categories],
        technologies=[TechnologyRead.model_validate(t) for t in technologies],
    )


@router.get(
    "/{project_id}",
    response_model=ProjectRead,
    summary="Get project",
    responses={
        200: {"description": "Project details"},
        404: {"description": "Project not found"},
    },
)
async def get_project(project_id: int, service: ProjectServiceDep) -> ProjectRead:
    """Get a project by ID."""
    project = await _get_project_or_404(service, project_id)
    return await _to_read(service, project)


@router.post(
    "",
    response_model=ProjectRead,
    status_code=status.HTTP_201_CREATED,
    summary="Create project",
    description="Create a project and notify the operator by email.",
    responses={
        201: {"description": "Project created"},
        409: {"description": "Unknown category or technology"},
    },
)
async def create_project(
    service: ProjectServiceDep,
    title: Annotated[str, Form()],
    description: Annotated[str, Form()] = "",
    category_id: Annotated[int | None, Form()] = None,
    technology_ids: Annotated[list[int] | None, Form()] = None,
    cover_image: Annotated[UploadFile | None, File()] = None,
) -> ProjectRead:
    """Create a new project."""
    data = _validate_form(
        ProjectCreate,
        title=title,
        description=description,
        category_id=category_id,
        technology_ids=technology_ids or [],
    )

    try:
        project = await service.create_project(data, await _read_cover_image(cover_image))
    except IntegrityError as e:
        raise HTTPException(
            status_code=status.HTTP_409_CONFLICT,
            detail="Category or technology does not exist",
        ) from e

    return await _to_read(service, project)


@router.put(
    "/{project_id}",
    response_model=ProjectRead,
    summary="Update project",
    description="Replace a project's fields, technologies and optionally its cover image.",
    responses={
        200: {"description": "Project updated"},
        404: {"description": "Project not found"},
        409: {"description": "Unknown category or technology"},
    },
)
async def update_project(
    project_id: int,
    service: ProjectServiceDep,
    title: Annotated[str, Form()],
    description: Annotated[str, Form()] = "",
    category_id: Annotated[int | None, Form()] = None,
    technology_ids: Annotated[list[int] | None, Form()] = None,
    cover_image: Annotated[UploadFile | None, File()] = None,
) -> ProjectRead:
    """Update an existing project."""
    project = await _get_project_or_404(service, project_id)
    data = _validate_form(
        ProjectUpdate,
        title=title,
        description=description,
        category_id=category_id,
        technology_ids=technology_ids or [],
    )

    try:
        project = await service.update_project(
            project, data, await _read_cover_image(cover_image)
        )
    except IntegrityError as e:
        raise HTTPException(
            status_code=status.HTTP_409_CONFLICT,
            detail="Category or technology does not exist",
        ) from e

    return await _to_read(service, project)


@router.delete(
    "/{project_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="Delete project",
    responses={
        204: {"description": "Project deleted"},
        404: {"description": "Project not found"},
    },
)
async def delete_project(project_id: int, service: ProjectServiceDep) -> None:
    """Delete a project and its technology links."""
    project = await _get_project_or_404(service, project_id)
    await service.destroy_project(project)
