# app/models/project.py
from datetime import datetime
from typing import List, Literal, Optional
from pydantic import Field
from app.models.document import DocumentModel
from app.models.mentorship import utcnow

ProjectStatus = Literal["Not Started", "Planning", "In Progress", "Final Stages", "Completed"]


class Project(DocumentModel):
    student_id: str
    title: str
    description: str
    status: ProjectStatus = "Not Started"
    start_date: datetime
    deadline: datetime
    tech_stack: List[str] = Field(default_factory=list)
    objectives: List[str] = Field(default_factory=list)
    mentor_id: Optional[str] = None
    created_at: datetime = Field(default_factory=utcnow)
    updated_at: datetime = Field(default_factory=utcnow)
