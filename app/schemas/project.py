# app/schemas/project.py
from datetime import datetime
from pydantic import BaseModel, Field
from typing import List, Optional
from app.models.project import ProjectStatus


class ProjectCreate(BaseModel):
    title: str = Field(..., min_length=1)
    description: str = Field(..., min_length=1)
    status: ProjectStatus = "Not Started"
    start_date: datetime
    deadline: datetime
    tech_stack: List[str] = Field(default_factory=list)
    objectives: List[str] = Field(default_factory=list)


class ProjectUpdate(BaseModel):
    """Partial update; only fields that are sent are changed."""
    title: Optional[str] = Field(None, min_length=1)
    description: Optional[str] = Field(None, min_length=1)
    status: Optional[ProjectStatus] = None
    start_date: Optional[datetime] = None
    deadline: Optional[datetime] = None
    tech_stack: Optional[List[str]] = None
    objectives: Optional[List[str]] = None
