# app/models/user.py
from pydantic import BaseModel, Field
from typing import List, Literal, Optional
from datetime import datetime
from app.models.document import DocumentModel


class Student(DocumentModel):
    first_name: str
    last_name: str
    email: str
    program: Optional[str] = None
    created_at: Optional[datetime] = None

    @property
    def name(self) -> str:
        return f"{self.first_name} {self.last_name}"


class Adviser(DocumentModel):
    first_name: str
    last_name: str
    email: str
    specialization: Optional[str] = None
    created_at: Optional[datetime] = None

    @property
    def name(self) -> str:
        return f"{self.first_name} {self.last_name}"


class MentoringSummary(BaseModel):
    students_count: int = 0
    projects_completed: int = 0


class AdviserProfile(DocumentModel):
    adviser_id: str
    title: Optional[str] = None
    company: Optional[str] = None
    bio: str = ""
    expertise: List[str] = Field(default_factory=list)
    availability: Literal["Available", "Busy", "Away"] = "Available"
    profile_image: str = "default-profile.png"
    mentoring_summary: MentoringSummary = Field(default_factory=MentoringSummary)
