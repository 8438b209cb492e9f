# tests/test_mongo_stores.py

from datetime import datetime
from types import SimpleNamespace
from unittest.mock import AsyncMock, MagicMock

import pytest
from bson import ObjectId
from pymongo import DESCENDING, ReturnDocument

from app.models.message import AdviserRef, Message, StudentRef
from app.services.mentorship_store import MentorshipStore
from app.services.message_store import MessageStore, pair_filter
from app.services.project_store import ProjectStore


def message_doc(oid, sender, receiver, content="hi", is_read=False):
    return {
        "_id": oid,
        "sender": sender,
        "receiver": receiver,
        "content": content,
        "file_url": None,
        "is_read": is_read,
        "timestamp": datetime(2025, 1, 1, 12, 0, 0),
    }


@pytest.mark.asyncio
async def test_insert_stores_nested_participants_and_returns_id():
    oid = ObjectId()
    collection = MagicMock()
    collection.insert_one = AsyncMock(return_value=SimpleNamespace(inserted_id=oid))
    store = MessageStore(collection)

    saved = await store.insert(Message(sender=StudentRef(id="s1"), receiver=AdviserRef(id="a1"), content="hi"))

    doc = collection.insert_one.await_args.args[0]
    assert doc["sender"] == {"kind": "student", "id": "s1"}
    assert doc["receiver"] == {"kind": "adviser", "id": "a1"}
    assert doc["is_read"] is False
    assert "id" not in doc
    assert saved.id == str(oid)


@pytest.mark.asyncio
async def test_find_conversation_sorts_newest_first_and_pages():
    oid = ObjectId()
    cursor = MagicMock()
    cursor.sort.return_value = cursor
    cursor.skip.return_value = cursor
    cursor.limit.return_value = cursor
    cursor.to_list = AsyncMock(return_value=[
        message_doc(oid, {"kind": "adviser", "id": "a1"}, {"kind": "student", "id": "s1"}),
    ])
    collection = MagicMock()
    collection.find.return_value = cursor

    messages = await MessageStore(collection).find_conversation("s1", "a1", skip=50, limit=50)

    collection.find.assert_called_once_with(pair_filter("s1", "a1"))
    cursor.sort.assert_called_once_with([("timestamp", DESCENDING), ("_id", DESCENDING)])
    cursor.skip.assert_called_once_with(50)
    cursor.limit.assert_called_once_with(50)
    assert messages[0].id == str(oid)
    assert messages[0].sender == AdviserRef(id="a1")


def test_pair_filter_matches_both_directions():
    assert pair_filter("s1", "a1") == {
        "$or": [
            {"sender.id": "s1", "receiver.id": "a1"},
            {"sender.id": "a1", "receiver.id": "s1"},
        ]
    }


@pytest.mark.asyncio
async def test_mark_read_is_scoped_to_inbound_unread():
    collection = MagicMock()
    collection.update_many = AsyncMock(return_value=SimpleNamespace(modified_count=3))

    marked = await MessageStore(collection).mark_read(receiver_id="s1", sender_id="a1")

    collection.update_many.assert_awaited_once_with(
        {"sender.id": "a1", "receiver.id": "s1", "is_read": False},
        {"$set": {"is_read": True}},
    )
    assert marked == 3


@pytest.mark.asyncio
async def test_find_accepted_between_checks_both_role_orders():
    collection = MagicMock()
    collection.find_one = AsyncMock(return_value=None)

    assert await MentorshipStore(collection).find_accepted_between("x", "y") is None
    collection.find_one.assert_awaited_once_with({
        "status": "accepted",
        "$or": [
            {"student_id": "x", "adviser_id": "y"},
            {"student_id": "y", "adviser_id": "x"},
        ],
    })


@pytest.mark.asyncio
async def test_pending_lookup_with_malformed_id_skips_the_database():
    collection = MagicMock()
    collection.find_one = AsyncMock()

    assert await MentorshipStore(collection).find_pending_for_adviser("not-an-object-id", "a1") is None
    collection.find_one.assert_not_awaited()


@pytest.mark.asyncio
async def test_resolve_pending_only_matches_the_advisers_pending_request():
    oid = ObjectId()
    collection = MagicMock()
    collection.find_one_and_update = AsyncMock(return_value={
        "_id": oid,
        "student_id": "s1",
        "adviser_id": "a1",
        "status": "accepted",
    })

    resolved = await MentorshipStore(collection).resolve_pending(str(oid), "a1", "accepted")

    query, update = collection.find_one_and_update.await_args.args
    assert query == {"_id": oid, "adviser_id": "a1", "status": "pending"}
    assert update["$set"]["status"] == "accepted"
    assert collection.find_one_and_update.await_args.kwargs["return_document"] is ReturnDocument.AFTER
    assert resolved.id == str(oid)
    assert resolved.status == "accepted"


@pytest.mark.asyncio
async def test_resolve_pending_returns_none_once_already_decided():
    collection = MagicMock()
    collection.find_one_and_update = AsyncMock(return_value=None)

    assert await MentorshipStore(collection).resolve_pending(str(ObjectId()), "a1", "rejected", "No time") is None


@pytest.mark.asyncio
async def test_project_update_is_scoped_to_owner():
    oid = ObjectId()
    collection = MagicMock()
    collection.find_one_and_update = AsyncMock(return_value=None)

    assert await ProjectStore(collection).update(str(oid), "s2", {"title": "x"}) is None

    query, update = collection.find_one_and_update.await_args.args
    assert query == {"_id": oid, "student_id": "s2"}
    assert update["$set"]["title"] == "x"
    assert "updated_at" in update["$set"]


@pytest.mark.asyncio
async def test_latest_project_lookup_sorts_newest_first():
    collection = MagicMock()
    collection.find_one = AsyncMock(return_value=None)

    assert await ProjectStore(collection).find_latest_for_student("s1") is None
    collection.find_one.assert_awaited_once_with({"student_id": "s1"}, sort=[("created_at", DESCENDING)])
