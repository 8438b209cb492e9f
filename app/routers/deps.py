# app/routers/deps.py

from fastapi import Depends, Security
from fastapi.security import HTTPBearer, HTTPAuthorizationCredentials
from jose import jwt, JWTError
from app.core.config import settings
from app.db.mongo import (
    adviser_profiles_collection,
    advisers_collection,
    mentorship_requests_collection,
    messages_collection,
    projects_collection,
    students_collection,
)
from app.models.message import PARTICIPANT_ROLES, participant_for
from app.services.conversation import ConversationService
from app.services.directory import UserDirectory
from app.services.live_registry import live_registry
from app.services.mentorship import MentorshipService
from app.services.mentorship_store import MentorshipStore
from app.services.message_store import MessageStore
from app.services.project import ProjectService
from app.services.project_store import ProjectStore
from app.services.relationship_gate import RelationshipGate
from app.utils.errors import ForbiddenError, UnauthorizedRequestError

bearer_scheme = HTTPBearer()

def get_current_user(token: HTTPAuthorizationCredentials = Security(bearer_scheme)) -> dict:
    try:
        payload = jwt.decode(token.credentials, settings.SECRET_KEY, algorithms=[settings.JWT_ALGORITHM])
    except JWTError:
        raise UnauthorizedRequestError("Could not validate credentials")
    user_id: str = payload.get("sub")
    role: str = payload.get("role")
    if user_id is None or role is None:
        raise UnauthorizedRequestError("Invalid token")
    return {"user_id": user_id, "role": role}


def get_participant(current_user: dict = Depends(get_current_user)):
    """The principal as a student or adviser; other roles cannot message."""
    if current_user["role"] not in PARTICIPANT_ROLES:
        raise ForbiddenError(f"Role {current_user['role']} is not allowed to access this resource")
    return participant_for(current_user["user_id"], current_user["role"])


def require_student(current_user: dict = Depends(get_current_user)):
    if current_user["role"] != "student":
        raise ForbiddenError("Student access required")
    return current_user


def require_adviser(current_user: dict = Depends(get_current_user)):
    if current_user["role"] != "adviser":
        raise ForbiddenError("Adviser access required")
    return current_user


def require_admin(current_user: dict = Depends(get_current_user)):
    if current_user["role"] != "admin":
        raise ForbiddenError("Admin access required")
    return current_user


# ---------------------
# Service providers
# ---------------------

def get_directory() -> UserDirectory:
    return UserDirectory(students_collection, advisers_collection, adviser_profiles_collection)


def get_conversation_service() -> ConversationService:
    mentorships = MentorshipStore(mentorship_requests_collection)
    return ConversationService(
        messages=MessageStore(messages_collection),
        gate=RelationshipGate(mentorships),
        registry=live_registry,
        mentorships=mentorships,
        directory=get_directory(),
    )


def get_mentorship_service() -> MentorshipService:
    return MentorshipService(
        MentorshipStore(mentorship_requests_collection),
        get_directory(),
        ProjectStore(projects_collection),
    )


def get_project_service() -> ProjectService:
    return ProjectService(ProjectStore(projects_collection))
