# tests/fakes.py
"""In-memory stand-ins for the Mongo-backed stores, with the same async methods."""

import itertools
import re
from typing import Dict, List, Optional

from app.models.mentorship import MentorshipRelationship, utcnow
from app.models.message import Message
from app.models.project import Project
from app.models.user import Adviser, AdviserProfile, Student

STUDENT = "student-1"
OTHER_STUDENT = "student-2"
ADVISER = "adviser-1"
BUSY_ADVISER = "adviser-2"
OTHER_ADVISER = "adviser-3"


class RecordingChannel:
    def __init__(self):
        self.frames: List[str] = []
        self.closed = False

    def write(self, frame: str) -> None:
        self.frames.append(frame)

    def close(self) -> None:
        self.closed = True


class BrokenChannel(RecordingChannel):
    def write(self, frame: str) -> None:
        raise OSError("connection reset by peer")


class FakeMessageStore:
    def __init__(self):
        self._ids = itertools.count(1)
        self.rows: List[tuple] = []  # (seq, Message)

    def _pair(self, user_id, partner_id):
        return [
            (seq, m) for seq, m in self.rows
            if {m.sender.id, m.receiver.id} == {user_id, partner_id}
        ]

    def get(self, message_id) -> Message:
        return next(m for _, m in self.rows if m.id == message_id)

    async def insert(self, message: Message) -> Message:
        seq = next(self._ids)
        stored = message.model_copy(update={"id": f"msg-{seq}"})
        self.rows.append((seq, stored))
        return stored

    async def find_conversation(self, user_id, partner_id, skip, limit):
        rows = sorted(self._pair(user_id, partner_id), key=lambda r: (r[1].timestamp, r[0]), reverse=True)
        return [m for _, m in rows[skip:skip + limit]]

    async def count_conversation(self, user_id, partner_id):
        return len(self._pair(user_id, partner_id))

    async def mark_read(self, receiver_id, sender_id):
        marked = 0
        for i, (seq, m) in enumerate(self.rows):
            if m.sender.id == sender_id and m.receiver.id == receiver_id and not m.is_read:
                self.rows[i] = (seq, m.model_copy(update={"is_read": True}))
                marked += 1
        return marked


class FakeMentorshipStore:
    def __init__(self):
        self._ids = itertools.count(1)
        self.relationships: Dict[str, MentorshipRelationship] = {}

    def add(self, student_id, adviser_id, status="accepted", **fields) -> MentorshipRelationship:
        relationship = MentorshipRelationship(
            id=f"req-{next(self._ids)}", student_id=student_id, adviser_id=adviser_id, status=status, **fields
        )
        self.relationships[relationship.id] = relationship
        return relationship

    async def find_accepted_between(self, first_id, second_id) -> Optional[MentorshipRelationship]:
        for r in self.relationships.values():
            if r.status == "accepted" and {r.student_id, r.adviser_id} == {first_id, second_id}:
                return r
        return None

    async def list_accepted_for(self, participant):
        field = "student_id" if participant.kind == "student" else "adviser_id"
        return [r for r in self.relationships.values() if getattr(r, field) == participant.id and r.status == "accepted"]

    async def find_pending(self, student_id, adviser_id):
        for r in self.relationships.values():
            if r.student_id == student_id and r.adviser_id == adviser_id and r.status == "pending":
                return r
        return None

    async def insert(self, relationship):
        stored = relationship.model_copy(update={"id": f"req-{next(self._ids)}"})
        self.relationships[stored.id] = stored
        return stored

    async def list_for_student(self, student_id):
        return self._newest_first(r for r in self.relationships.values() if r.student_id == student_id)

    async def list_for_adviser(self, adviser_id):
        return self._newest_first(r for r in self.relationships.values() if r.adviser_id == adviser_id)

    @staticmethod
    def _newest_first(relationships):
        return sorted(relationships, key=lambda r: r.created_at, reverse=True)

    async def find_pending_for_adviser(self, request_id, adviser_id):
        r = self.relationships.get(request_id)
        if r and r.adviser_id == adviser_id and r.status == "pending":
            return r
        return None

    async def resolve_pending(self, request_id, adviser_id, status, rejection_note=""):
        r = self.relationships.get(request_id)
        if r is None or r.adviser_id != adviser_id or r.status != "pending":
            return None
        updated = r.model_copy(update={"status": status, "rejection_note": rejection_note, "updated_at": utcnow()})
        self.relationships[request_id] = updated
        return updated


class FakeDirectory:
    def __init__(self, students=(), advisers=(), profiles=()):
        self.students = {s.id: s for s in students}
        self.advisers = {a.id: a for a in advisers}
        self.profiles = {p.adviser_id: p for p in profiles}

    @classmethod
    def seeded(cls):
        return cls(
            students=[
                Student(id=STUDENT, first_name="Sara", last_name="Silva", email="sara@uni.edu", program="Computer Science"),
                Student(id=OTHER_STUDENT, first_name="Tom", last_name="Tran", email="tom@uni.edu", program="Data Science"),
            ],
            advisers=[
                Adviser(id=ADVISER, first_name="Max", last_name="Mentor", email="max@corp.io", specialization="Backend"),
                Adviser(id=BUSY_ADVISER, first_name="Bea", last_name="Busy", email="bea@corp.io", specialization="Mobile"),
                Adviser(id=OTHER_ADVISER, first_name="Ada", last_name="Lovelace", email="ada@corp.io", specialization="Frontend"),
            ],
            profiles=[
                AdviserProfile(adviser_id=ADVISER, expertise=["Python", "FastAPI", "MongoDB"], bio="Backend engineer"),
                AdviserProfile(adviser_id=BUSY_ADVISER, expertise=["Kotlin"], availability="Busy"),
                AdviserProfile(adviser_id=OTHER_ADVISER, expertise=["React", "TypeScript"]),
            ],
        )

    async def get_students(self, ids):
        return {i: self.students[i] for i in ids if i in self.students}

    async def get_advisers(self, ids):
        return {i: self.advisers[i] for i in ids if i in self.advisers}

    async def find_advisers(self, ids, search=None):
        found = [self.advisers[i] for i in ids if i in self.advisers]
        if search:
            pattern = re.compile(re.escape(search), re.IGNORECASE)
            found = [a for a in found if pattern.search(a.first_name) or pattern.search(a.last_name)]
        return found

    async def get_adviser_profile(self, adviser_id):
        return self.profiles.get(adviser_id)

    async def get_adviser_profiles(self, adviser_ids):
        return {i: self.profiles[i] for i in adviser_ids if i in self.profiles}

    async def list_available_profiles(self, technology=None):
        profiles = [p for p in self.profiles.values() if p.availability == "Available"]
        if technology:
            pattern = re.compile(re.escape(technology), re.IGNORECASE)
            profiles = [p for p in profiles if any(pattern.search(t) for t in p.expertise)]
        return profiles


class FakeProjectStore:
    def __init__(self):
        self._ids = itertools.count(1)
        self.projects: Dict[str, Project] = {}

    async def insert(self, project):
        stored = project.model_copy(update={"id": f"proj-{next(self._ids)}"})
        self.projects[stored.id] = stored
        return stored

    async def find_for_student(self, project_id, student_id):
        p = self.projects.get(project_id)
        return p if p and p.student_id == student_id else None

    async def find_latest_for_student(self, student_id):
        owned = [p for p in self.projects.values() if p.student_id == student_id]
        return max(owned, key=lambda p: p.created_at) if owned else None

    async def update(self, project_id, student_id, fields):
        p = await self.find_for_student(project_id, student_id)
        if p is None:
            return None
        updated = p.model_copy(update={**fields, "updated_at": utcnow()})
        self.projects[project_id] = updated
        return updated
