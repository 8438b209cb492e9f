# app/services/project.py

from app.core.logger import logger
from app.models.project import Project
from app.schemas.project import ProjectCreate, ProjectUpdate
from app.services.project_store import ProjectStore
from app.utils.errors import BadRequestError, NotFoundError


class ProjectService:
    def __init__(self, projects: ProjectStore):
        self.projects = projects

    async def create(self, student_id: str, req: ProjectCreate) -> Project:
        project = await self.projects.insert(Project(student_id=student_id, **req.model_dump()))
        logger.info(f"Project {project.id} created by {student_id}")
        return project

    async def get(self, student_id: str, project_id: str) -> Project:
        project = await self.projects.find_for_student(project_id, student_id)
        if project is None:
            raise NotFoundError("Project not found")
        return project

    async def get_student_project(self, student_id: str) -> Project:
        project = await self.projects.find_latest_for_student(student_id)
        if project is None:
            raise NotFoundError("No project found for this student")
        return project

    async def update(self, student_id: str, project_id: str, req: ProjectUpdate) -> Project:
        fields = {k: v for k, v in req.model_dump(exclude_unset=True).items() if v is not None}
        if not fields:
            raise BadRequestError("No fields to update")

        project = await self.projects.update(project_id, student_id, fields)
        if project is None:
            raise NotFoundError("Project not found")
        return project
