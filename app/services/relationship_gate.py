# app/services/relationship_gate.py

from app.core.logger import logger
from app.models.mentorship import MentorshipRelationship
from app.services.mentorship_store import MentorshipStore
from app.utils.errors import ForbiddenError


class RelationshipGate:
    """Only an accepted mentorship lets a student and an adviser message each other."""

    def __init__(self, mentorships: MentorshipStore):
        self.mentorships = mentorships

    async def authorize(self, requester_id: str, counterpart_id: str) -> MentorshipRelationship:
        relationship = await self.mentorships.find_accepted_between(requester_id, counterpart_id)
        if relationship is None:
            logger.info(f"Messaging refused between {requester_id} and {counterpart_id}: no accepted mentorship")
            raise ForbiddenError("No active mentorship relationship exists between these users")
        return relationship
