# app/services/mentorship.py

from typing import List, Optional

from app.core.logger import logger
from app.models.mentorship import MentorshipRelationship
from app.schemas.mentorship import AdviserCard, CounterpartSummary, MentorshipRequestView
from app.services.directory import UserDirectory
from app.services.matching import calculate_matching_percentage
from app.services.mentorship_store import MentorshipStore
from app.services.project_store import ProjectStore
from app.utils.errors import BadRequestError, ConflictError, NotFoundError


def _view(relationship: MentorshipRelationship, **counterpart) -> MentorshipRequestView:
    return MentorshipRequestView(
        id=relationship.id,
        status=relationship.status,
        project_tech_stack=relationship.project_tech_stack,
        matching_percentage=relationship.matching_percentage,
        note=relationship.note,
        rejection_note=relationship.rejection_note,
        created_at=relationship.created_at,
        **counterpart,
    )


class MentorshipService:
    def __init__(self, mentorships: MentorshipStore, directory: UserDirectory, projects: Optional[ProjectStore] = None):
        self.mentorships = mentorships
        self.directory = directory
        self.projects = projects

    async def list_available_advisers(
        self, search: Optional[str] = None, technology: Optional[str] = None
    ) -> List[AdviserCard]:
        profiles = {p.adviser_id: p for p in await self.directory.list_available_profiles(technology)}
        advisers = await self.directory.find_advisers(list(profiles), search=search)
        return [
            AdviserCard(
                id=adviser.id,
                first_name=adviser.first_name,
                last_name=adviser.last_name,
                specialization=adviser.specialization,
                expertise=profiles[adviser.id].expertise,
                bio=profiles[adviser.id].bio,
                profile_image=profiles[adviser.id].profile_image,
                mentoring_summary=profiles[adviser.id].mentoring_summary,
            )
            for adviser in advisers
        ]

    async def request_mentorship(
        self, student_id: str, adviser_id: str, project_tech_stack: List[str], note: str = ""
    ) -> MentorshipRelationship:
        if not project_tech_stack and self.projects is not None:
            # fall back to the stack of the student's own project
            project = await self.projects.find_latest_for_student(student_id)
            if project is not None:
                project_tech_stack = project.tech_stack

        if not adviser_id or not project_tech_stack:
            raise BadRequestError("Please provide adviser ID and project tech stack")

        profile = await self.directory.get_adviser_profile(adviser_id)
        if profile is None:
            raise NotFoundError("Mentor not found")
        if profile.availability != "Available":
            raise BadRequestError("Mentor is not currently available for new mentorship")

        if await self.mentorships.find_pending(student_id, adviser_id):
            raise ConflictError("You already have a pending request with this mentor")

        relationship = MentorshipRelationship(
            student_id=student_id,
            adviser_id=adviser_id,
            project_tech_stack=project_tech_stack,
            note=note or "",
            matching_percentage=calculate_matching_percentage(project_tech_stack, profile.expertise),
        )
        relationship = await self.mentorships.insert(relationship)
        logger.info(
            f"Mentorship requested by {student_id} with {adviser_id} "
            f"({relationship.matching_percentage}% match)"
        )
        return relationship

    async def list_student_requests(self, student_id: str) -> List[MentorshipRequestView]:
        requests = await self.mentorships.list_for_student(student_id)
        adviser_ids = {r.adviser_id for r in requests}
        advisers = await self.directory.get_advisers(adviser_ids)
        profiles = await self.directory.get_adviser_profiles(adviser_ids)

        views = []
        for r in requests:
            adviser = advisers.get(r.adviser_id)
            profile = profiles.get(r.adviser_id)
            views.append(_view(r, adviser=CounterpartSummary(
                id=r.adviser_id,
                name=adviser.name if adviser else "Unknown",
                specialization=adviser.specialization if adviser else None,
                profile_image=profile.profile_image if profile else "default-profile.png",
            )))
        return views

    async def list_adviser_requests(self, adviser_id: str) -> List[MentorshipRequestView]:
        requests = await self.mentorships.list_for_adviser(adviser_id)
        students = await self.directory.get_students({r.student_id for r in requests})

        views = []
        for r in requests:
            student = students.get(r.student_id)
            views.append(_view(r, student=CounterpartSummary(
                id=r.student_id,
                name=student.name if student else "Unknown",
                program=student.program if student else None,
            )))
        return views

    async def respond(
        self, adviser_id: str, request_id: str, status: str, rejection_note: str = ""
    ) -> MentorshipRelationship:
        if status not in ("accepted", "rejected"):
            raise BadRequestError("Please provide a valid status (accepted or rejected)")

        relationship = await self.mentorships.find_pending_for_adviser(request_id, adviser_id)
        if relationship is None:
            raise NotFoundError("Mentorship request not found or already processed")

        if status == "rejected" and not rejection_note:
            raise BadRequestError("Please provide a rejection note")

        updated = await self.mentorships.resolve_pending(
            relationship.id,
            adviser_id,
            status,
            rejection_note if status == "rejected" else relationship.rejection_note,
        )
        if updated is None:
            raise NotFoundError("Mentorship request not found or already processed")
        logger.info(f"Mentorship request {request_id} {status} by {adviser_id}")
        return updated
