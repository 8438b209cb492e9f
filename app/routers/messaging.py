# app/routers/messaging.py

from fastapi import APIRouter, Depends, Query, status
from fastapi.responses import StreamingResponse

from app.core.config import settings
from app.routers.deps import get_conversation_service, get_participant, require_admin
from app.schemas.messaging import SendMessageRequest
from app.services.conversation import ConversationService
from app.services.live_registry import QueueChannel
from app.utils.responses import format_response

router = APIRouter(tags=["messaging"])

SSE_HEADERS = {
    "Cache-Control": "no-cache",
    "Connection": "keep-alive",
    "X-Accel-Buffering": "no",
}

# ---------------------
# Live stream
# ---------------------

@router.get("/events/{user_id}", summary="Open the live message stream for the current user")
async def connect_to_event_stream(
    user_id: str,
    participant=Depends(get_participant),
    service: ConversationService = Depends(get_conversation_service),
):
    channel = QueueChannel(maxsize=settings.SSE_QUEUE_SIZE)
    service.connect(participant, user_id, channel)

    async def event_stream():
        try:
            async for frame in channel.frames():
                yield frame
        finally:
            service.disconnect(user_id, channel)

    return StreamingResponse(event_stream(), media_type="text/event-stream", headers=SSE_HEADERS)


@router.get("/connected", summary="List users with an open live stream")
async def list_connected(
    current_user: dict = Depends(require_admin),
    service: ConversationService = Depends(get_conversation_service),
):
    connected = sorted(service.registry.list_connected())
    return format_response(success=True, data={"connected": connected, "count": len(connected)})

# ---------------------
# Messages
# ---------------------

@router.post("/send", status_code=status.HTTP_201_CREATED, summary="Send a message to a mentorship partner")
async def send_message(
    req: SendMessageRequest,
    participant=Depends(get_participant),
    service: ConversationService = Depends(get_conversation_service),
):
    result = await service.send(participant, req.receiver_id, req.content, req.file_url)
    return format_response(
        success=True,
        data={"message": result.message.model_dump(mode="json"), "delivered": result.delivered},
        message="Message sent successfully",
    )


@router.get("/contacts", summary="List accepted mentorship partners")
async def get_contacts(
    participant=Depends(get_participant),
    service: ConversationService = Depends(get_conversation_service),
):
    contacts = await service.list_contacts(participant)
    return format_response(
        success=True,
        data={"contacts": [c.model_dump() for c in contacts], "count": len(contacts)},
    )


@router.get("/conversations/{partner_id}", summary="Conversation history with a partner")
async def get_conversation(
    partner_id: str,
    page: int = Query(1, ge=1),
    page_size: int = Query(settings.MESSAGE_PAGE_SIZE, ge=1, le=settings.MESSAGE_MAX_PAGE_SIZE),
    participant=Depends(get_participant),
    service: ConversationService = Depends(get_conversation_service),
):
    conversation = await service.get_conversation(participant, partner_id, page=page, page_size=page_size)
    return format_response(success=True, data=conversation.model_dump(mode="json"))
