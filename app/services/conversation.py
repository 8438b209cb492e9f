# app/services/conversation.py

from typing import List, Optional

from app.core.logger import logger
from app.models.message import Message, counterpart_of
from app.schemas.messaging import Contact, ConversationPage, SendResult
from app.services.directory import UserDirectory
from app.services.live_registry import LiveDeliveryRegistry
from app.services.mentorship_store import MentorshipStore
from app.services.message_store import MessageStore
from app.services.relationship_gate import RelationshipGate
from app.utils.errors import BadRequestError, ForbiddenError
from app.utils.pagination import build_pagination, total_pages


class ConversationService:
    """Sending, listing and reading messages between mentorship partners."""

    def __init__(
        self,
        messages: MessageStore,
        gate: RelationshipGate,
        registry: LiveDeliveryRegistry,
        mentorships: MentorshipStore,
        directory: UserDirectory,
    ):
        self.messages = messages
        self.gate = gate
        self.registry = registry
        self.mentorships = mentorships
        self.directory = directory

    # ---------------------
    # Live stream
    # ---------------------

    def connect(self, principal, user_id: str, channel) -> None:
        if principal.id != user_id:
            logger.info(f"Stream subscription refused: {principal.id} asked for {user_id}")
            raise ForbiddenError("Not authorized to access this stream")
        previous = self.registry.register(user_id, channel)
        if previous is not None and previous is not channel:
            previous.close()

    def disconnect(self, user_id: str, channel) -> None:
        self.registry.unregister(user_id, channel)
        channel.close()

    # ---------------------
    # Messages
    # ---------------------

    async def send(self, sender, receiver_id: str, content: str = "", file_url: Optional[str] = None) -> SendResult:
        content = content or ""
        if not content and not file_url:
            raise BadRequestError("Message must contain either text or a file")

        await self.gate.authorize(sender.id, receiver_id)

        message = Message(
            sender=sender,
            receiver=counterpart_of(sender, receiver_id),
            content=content,
            file_url=file_url or None,
        )
        message = await self.messages.insert(message)

        delivered = self.registry.push(
            receiver_id,
            {"type": "message", "data": message.model_dump(mode="json")},
        )
        logger.info(f"Message {message.id} sent from {sender.id} to {receiver_id} (delivered={delivered})")
        return SendResult(message=message, delivered=delivered)

    async def list_contacts(self, user) -> List[Contact]:
        relationships = await self.mentorships.list_accepted_for(user)
        if user.kind == "student":
            counterpart_ids = list(dict.fromkeys(r.adviser_id for r in relationships))
            people = await self.directory.get_advisers(counterpart_ids)
            kind = "adviser"
        else:
            counterpart_ids = list(dict.fromkeys(r.student_id for r in relationships))
            people = await self.directory.get_students(counterpart_ids)
            kind = "student"

        contacts = []
        for counterpart_id in counterpart_ids:
            person = people.get(counterpart_id)
            if person is None:
                logger.warning(f"Contact {counterpart_id} of {user.id} has no {kind} record")
                continue
            contacts.append(Contact(id=counterpart_id, kind=kind, name=person.name, email=person.email))
        return contacts

    async def get_conversation(self, user, partner_id: str, page: int = 1, page_size: int = 50) -> ConversationPage:
        """
        Return one page of the thread with `partner_id`, newest first, and mark
        the partner's messages to `user` as read.

        The page reflects read flags as they were before opening the thread.
        """
        if page < 1 or page_size < 1:
            raise BadRequestError("page and page_size must be positive")

        await self.gate.authorize(user.id, partner_id)

        skip, limit = build_pagination(page, page_size)
        messages = await self.messages.find_conversation(user.id, partner_id, skip, limit)
        total = await self.messages.count_conversation(user.id, partner_id)

        marked = await self.messages.mark_read(receiver_id=user.id, sender_id=partner_id)
        if marked:
            logger.info(f"Marked {marked} message(s) from {partner_id} to {user.id} as read")

        return ConversationPage(
            messages=messages,
            count=len(messages),
            total=total,
            total_pages=total_pages(total, page_size),
            current_page=page,
        )
