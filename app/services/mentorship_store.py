# app/services/mentorship_store.py

from typing import List, Optional
from motor.motor_asyncio import AsyncIOMotorCollection
from pymongo import ReturnDocument

from app.models.document import parse_object_id
from app.models.mentorship import MentorshipRelationship, MentorshipStatus, utcnow
from app.utils.pagination import build_sort


class MentorshipStore:
    """Mentorship requests and accepted relationships (`mentorship_requests` collection)."""

    def __init__(self, collection: AsyncIOMotorCollection):
        self.collection = collection

    async def find_accepted_between(self, first_id: str, second_id: str) -> Optional[MentorshipRelationship]:
        doc = await self.collection.find_one({
            "status": "accepted",
            "$or": [
                {"student_id": first_id, "adviser_id": second_id},
                {"student_id": second_id, "adviser_id": first_id},
            ],
        })
        return MentorshipRelationship.from_document(doc) if doc else None

    async def list_accepted_for(self, participant) -> List[MentorshipRelationship]:
        field = "student_id" if participant.kind == "student" else "adviser_id"
        cursor = self.collection.find({field: participant.id, "status": "accepted"})
        return [MentorshipRelationship.from_document(doc) async for doc in cursor]

    async def find_pending(self, student_id: str, adviser_id: str) -> Optional[MentorshipRelationship]:
        doc = await self.collection.find_one(
            {"student_id": student_id, "adviser_id": adviser_id, "status": "pending"}
        )
        return MentorshipRelationship.from_document(doc) if doc else None

    async def insert(self, relationship: MentorshipRelationship) -> MentorshipRelationship:
        result = await self.collection.insert_one(relationship.to_document())
        return relationship.model_copy(update={"id": str(result.inserted_id)})

    async def list_for_student(self, student_id: str) -> List[MentorshipRelationship]:
        return await self._list({"student_id": student_id})

    async def list_for_adviser(self, adviser_id: str) -> List[MentorshipRelationship]:
        return await self._list({"adviser_id": adviser_id})

    async def _list(self, query: dict) -> List[MentorshipRelationship]:
        cursor = self.collection.find(query).sort(build_sort("created_at", "desc"))
        return [MentorshipRelationship.from_document(doc) async for doc in cursor]

    async def find_pending_for_adviser(self, request_id: str, adviser_id: str) -> Optional[MentorshipRelationship]:
        oid = parse_object_id(request_id)
        if oid is None:
            return None
        doc = await self.collection.find_one({"_id": oid, "adviser_id": adviser_id, "status": "pending"})
        return MentorshipRelationship.from_document(doc) if doc else None

    async def resolve_pending(
        self, request_id: str, adviser_id: str, status: MentorshipStatus, rejection_note: str = ""
    ) -> Optional[MentorshipRelationship]:
        """Move the adviser's pending request to `status`. None if it is no longer pending."""
        oid = parse_object_id(request_id)
        if oid is None:
            return None
        doc = await self.collection.find_one_and_update(
            {"_id": oid, "adviser_id": adviser_id, "status": "pending"},
            {"$set": {"status": status, "rejection_note": rejection_note, "updated_at": utcnow()}},
            return_document=ReturnDocument.AFTER,
        )
        return MentorshipRelationship.from_document(doc) if doc else None
