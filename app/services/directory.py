# app/services/directory.py

import re
from typing import Dict, Iterable, List, Optional
from bson import ObjectId
from motor.motor_asyncio import AsyncIOMotorCollection

from app.models.user import Adviser, AdviserProfile, Student


def _object_ids(ids: Iterable[str]) -> List[ObjectId]:
    return [ObjectId(i) for i in ids if ObjectId.is_valid(i)]


def _regex(text: str) -> dict:
    return {"$regex": re.escape(text), "$options": "i"}


class UserDirectory:
    """Read-only lookups of students, advisers and adviser profiles for display purposes."""

    def __init__(
        self,
        students: AsyncIOMotorCollection,
        advisers: AsyncIOMotorCollection,
        profiles: AsyncIOMotorCollection,
    ):
        self.students = students
        self.advisers = advisers
        self.profiles = profiles

    async def get_students(self, ids: Iterable[str]) -> Dict[str, Student]:
        cursor = self.students.find({"_id": {"$in": _object_ids(ids)}}, {"password": 0})
        found = [Student.from_document(doc) async for doc in cursor]
        return {s.id: s for s in found}

    async def get_advisers(self, ids: Iterable[str]) -> Dict[str, Adviser]:
        advisers = await self.find_advisers(ids)
        return {a.id: a for a in advisers}

    async def find_advisers(self, ids: Iterable[str], search: Optional[str] = None) -> List[Adviser]:
        query = {"_id": {"$in": _object_ids(ids)}}
        if search:
            query["$or"] = [{"first_name": _regex(search)}, {"last_name": _regex(search)}]
        cursor = self.advisers.find(query, {"password": 0})
        return [Adviser.from_document(doc) async for doc in cursor]

    async def get_adviser_profile(self, adviser_id: str) -> Optional[AdviserProfile]:
        doc = await self.profiles.find_one({"adviser_id": adviser_id})
        return AdviserProfile.from_document(doc) if doc else None

    async def get_adviser_profiles(self, adviser_ids: Iterable[str]) -> Dict[str, AdviserProfile]:
        cursor = self.profiles.find({"adviser_id": {"$in": list(adviser_ids)}})
        profiles = [AdviserProfile.from_document(doc) async for doc in cursor]
        return {p.adviser_id: p for p in profiles}

    async def list_available_profiles(self, technology: Optional[str] = None) -> List[AdviserProfile]:
        query = {"availability": "Available"}
        if technology:
            query["expertise"] = {"$elemMatch": _regex(technology)}
        cursor = self.profiles.find(query)
        return [AdviserProfile.from_document(doc) async for doc in cursor]
