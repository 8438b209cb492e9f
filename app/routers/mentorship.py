# app/routers/mentorship.py

from typing import Optional
from fastapi import APIRouter, Depends, Query, status

from app.routers.deps import (
    get_current_user,
    get_mentorship_service,
    require_adviser,
    require_student,
)
from app.schemas.mentorship import MentorshipDecision, MentorshipRequestCreate
from app.services.mentorship import MentorshipService
from app.utils.responses import format_response

router = APIRouter(tags=["mentorship"])


@router.get("/advisers", summary="List advisers available for mentorship")
async def list_available_advisers(
    search: Optional[str] = Query(None, description="Search by first or last name"),
    technology: Optional[str] = Query(None, description="Filter by expertise"),
    current_user: dict = Depends(get_current_user),
    service: MentorshipService = Depends(get_mentorship_service),
):
    advisers = await service.list_available_advisers(search=search, technology=technology)
    return format_response(
        success=True,
        data={"advisers": [a.model_dump() for a in advisers], "count": len(advisers)},
    )


@router.post("/requests", status_code=status.HTTP_201_CREATED, summary="Request mentorship from an adviser")
async def request_mentorship(
    req: MentorshipRequestCreate,
    current_user: dict = Depends(require_student),
    service: MentorshipService = Depends(get_mentorship_service),
):
    relationship = await service.request_mentorship(
        current_user["user_id"], req.adviser_id, req.project_tech_stack, req.note
    )
    return format_response(success=True, data={"request": relationship.model_dump(mode="json")})


@router.get("/requests/student", summary="Mentorship requests sent by the current student")
async def get_student_requests(
    current_user: dict = Depends(require_student),
    service: MentorshipService = Depends(get_mentorship_service),
):
    requests = await service.list_student_requests(current_user["user_id"])
    return format_response(
        success=True,
        data={"requests": [r.model_dump(mode="json") for r in requests], "count": len(requests)},
    )


@router.get("/requests/adviser", summary="Mentorship requests received by the current adviser")
async def get_adviser_requests(
    current_user: dict = Depends(require_adviser),
    service: MentorshipService = Depends(get_mentorship_service),
):
    requests = await service.list_adviser_requests(current_user["user_id"])
    return format_response(
        success=True,
        data={"requests": [r.model_dump(mode="json") for r in requests], "count": len(requests)},
    )


@router.patch("/requests/{request_id}", summary="Accept or reject a mentorship request")
async def respond_to_request(
    request_id: str,
    decision: MentorshipDecision,
    current_user: dict = Depends(require_adviser),
    service: MentorshipService = Depends(get_mentorship_service),
):
    relationship = await service.respond(
        current_user["user_id"], request_id, decision.status, decision.rejection_note
    )
    return format_response(
        success=True,
        data={"request": relationship.model_dump(mode="json")},
        message=f"Mentorship request {decision.status}",
    )
