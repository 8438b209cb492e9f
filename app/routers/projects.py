# app/routers/projects.py

from fastapi import APIRouter, Depends, status

from app.routers.deps import get_project_service, require_student
from app.schemas.project import ProjectCreate, ProjectUpdate
from app.services.project import ProjectService
from app.utils.responses import format_response

router = APIRouter(tags=["projects"])


@router.post("/", status_code=status.HTTP_201_CREATED, summary="Create a project for the current student")
async def create_project(
    req: ProjectCreate,
    current_user: dict = Depends(require_student),
    service: ProjectService = Depends(get_project_service),
):
    project = await service.create(current_user["user_id"], req)
    return format_response(success=True, data={"project": project.model_dump(mode="json")}, message="Project created")


# declared before /{project_id} so "student" is not taken as an id
@router.get("/student", summary="The current student's project")
async def get_student_project(
    current_user: dict = Depends(require_student),
    service: ProjectService = Depends(get_project_service),
):
    project = await service.get_student_project(current_user["user_id"])
    return format_response(success=True, data={"project": project.model_dump(mode="json")})


@router.get("/{project_id}", summary="Get one of the current student's projects")
async def get_project(
    project_id: str,
    current_user: dict = Depends(require_student),
    service: ProjectService = Depends(get_project_service),
):
    project = await service.get(current_user["user_id"], project_id)
    return format_response(success=True, data={"project": project.model_dump(mode="json")})


@router.put("/{project_id}", summary="Update one of the current student's projects")
async def update_project(
    project_id: str,
    req: ProjectUpdate,
    current_user: dict = Depends(require_student),
    service: ProjectService = Depends(get_project_service),
):
    project = await service.update(current_user["user_id"], project_id, req)
    return format_response(success=True, data={"project": project.model_dump(mode="json")}, message="Project updated")
