# app/models/message.py
from datetime import datetime, timezone
from typing import Annotated, Literal, Optional, Union
from pydantic import BaseModel, Field, model_validator
from app.models.document import DocumentModel

PARTICIPANT_ROLES = ("student", "adviser")


class StudentRef(BaseModel):
    kind: Literal["student"] = "student"
    id: str


class AdviserRef(BaseModel):
    kind: Literal["adviser"] = "adviser"
    id: str


Participant = Annotated[Union[StudentRef, AdviserRef], Field(discriminator="kind")]


def participant_for(user_id: str, role: str) -> Union[StudentRef, AdviserRef]:
    if role == "student":
        return StudentRef(id=user_id)
    if role == "adviser":
        return AdviserRef(id=user_id)
    raise ValueError(f"Unsupported participant role: {role}")


def counterpart_of(participant: Union[StudentRef, AdviserRef], counterpart_id: str) -> Union[StudentRef, AdviserRef]:
    """The other side of a mentorship: students talk to advisers and vice versa."""
    if participant.kind == "student":
        return AdviserRef(id=counterpart_id)
    return StudentRef(id=counterpart_id)


class Message(DocumentModel):
    sender: Participant
    receiver: Participant
    content: str = ""
    file_url: Optional[str] = None
    is_read: bool = False
    timestamp: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))

    @model_validator(mode="after")
    def check_body_and_roles(self):
        if not self.content and not self.file_url:
            raise ValueError("Message must contain either text or a file")
        if self.sender.kind == self.receiver.kind:
            raise ValueError("Messages are exchanged between a student and an adviser")
        return self
