# app/services/project_store.py

from typing import Optional
from motor.motor_asyncio import AsyncIOMotorCollection
from pymongo import DESCENDING, ReturnDocument

from app.models.mentorship import utcnow
from app.models.project import Project
from app.models.document import parse_object_id


class ProjectStore:
    """Student projects (`projects` collection). Every lookup is scoped to the owning student."""

    def __init__(self, collection: AsyncIOMotorCollection):
        self.collection = collection

    async def insert(self, project: Project) -> Project:
        result = await self.collection.insert_one(project.to_document())
        return project.model_copy(update={"id": str(result.inserted_id)})

    async def find_for_student(self, project_id: str, student_id: str) -> Optional[Project]:
        oid = parse_object_id(project_id)
        if oid is None:
            return None
        doc = await self.collection.find_one({"_id": oid, "student_id": student_id})
        return Project.from_document(doc) if doc else None

    async def find_latest_for_student(self, student_id: str) -> Optional[Project]:
        doc = await self.collection.find_one({"student_id": student_id}, sort=[("created_at", DESCENDING)])
        return Project.from_document(doc) if doc else None

    async def update(self, project_id: str, student_id: str, fields: dict) -> Optional[Project]:
        oid = parse_object_id(project_id)
        if oid is None:
            return None
        doc = await self.collection.find_one_and_update(
            {"_id": oid, "student_id": student_id},
            {"$set": {**fields, "updated_at": utcnow()}},
            return_document=ReturnDocument.AFTER,
        )
        return Project.from_document(doc) if doc else None
