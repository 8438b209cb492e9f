# app/schemas/mentorship.py
from datetime import datetime
from pydantic import BaseModel, Field
from typing import List, Literal, Optional
from app.models.user import MentoringSummary


class MentorshipRequestCreate(BaseModel):
    adviser_id: str = Field(..., description="Adviser the student wants as a mentor")
    project_tech_stack: List[str] = Field(
        default_factory=list,
        description="Technologies used by the student's project; defaults to the stack of their project",
    )
    note: str = ""


class MentorshipDecision(BaseModel):
    status: Literal["accepted", "rejected"]
    rejection_note: str = ""


class AdviserCard(BaseModel):
    id: str
    first_name: str
    last_name: str
    specialization: Optional[str] = None
    expertise: List[str] = Field(default_factory=list)
    bio: str = ""
    profile_image: str = "default-profile.png"
    mentoring_summary: MentoringSummary = Field(default_factory=MentoringSummary)


class CounterpartSummary(BaseModel):
    id: Optional[str] = None
    name: str = "Unknown"
    specialization: Optional[str] = None
    program: Optional[str] = None
    profile_image: Optional[str] = None


class MentorshipRequestView(BaseModel):
    id: str
    status: str
    project_tech_stack: List[str]
    matching_percentage: int
    note: str = ""
    rejection_note: str = ""
    created_at: datetime
    adviser: Optional[CounterpartSummary] = None
    student: Optional[CounterpartSummary] = None
