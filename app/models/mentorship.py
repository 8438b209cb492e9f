# app/models/mentorship.py
from datetime import datetime, timezone
from typing import List, Literal
from pydantic import Field
from app.models.document import DocumentModel

MentorshipStatus = Literal["pending", "accepted", "rejected"]


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


class MentorshipRelationship(DocumentModel):
    student_id: str
    adviser_id: str
    status: MentorshipStatus = "pending"
    project_tech_stack: List[str] = Field(default_factory=list)
    note: str = ""
    matching_percentage: int = 0
    rejection_note: str = ""
    created_at: datetime = Field(default_factory=utcnow)
    updated_at: datetime = Field(default_factory=utcnow)
