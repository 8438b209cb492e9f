# app/services/message_store.py

from typing import List
from motor.motor_asyncio import AsyncIOMotorCollection

from app.models.message import Message
from app.utils.pagination import build_sort


def pair_filter(user_id: str, partner_id: str) -> dict:
    """Messages exchanged between the two users, in either direction."""
    return {
        "$or": [
            {"sender.id": user_id, "receiver.id": partner_id},
            {"sender.id": partner_id, "receiver.id": user_id},
        ]
    }


class MessageStore:
    """Durable message history backed by the `messages` collection."""

    def __init__(self, collection: AsyncIOMotorCollection):
        self.collection = collection

    async def insert(self, message: Message) -> Message:
        result = await self.collection.insert_one(message.to_document())
        return message.model_copy(update={"id": str(result.inserted_id)})

    async def find_conversation(self, user_id: str, partner_id: str, skip: int, limit: int) -> List[Message]:
        cursor = (
            self.collection.find(pair_filter(user_id, partner_id))
            .sort(build_sort("timestamp", "desc"))
            .skip(skip)
            .limit(limit)
        )
        docs = await cursor.to_list(length=limit)
        return [Message.from_document(doc) for doc in docs]

    async def count_conversation(self, user_id: str, partner_id: str) -> int:
        return await self.collection.count_documents(pair_filter(user_id, partner_id))

    async def mark_read(self, receiver_id: str, sender_id: str) -> int:
        # Only the receiver's inbound unread messages; never the receiver's own.
        result = await self.collection.update_many(
            {"sender.id": sender_id, "receiver.id": receiver_id, "is_read": False},
            {"$set": {"is_read": True}},
        )
        return result.modified_count
