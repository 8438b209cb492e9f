# app/schemas/messaging.py
from pydantic import BaseModel, Field
from typing import List, Literal, Optional
from app.models.message import Message

# ---------------------
# Request / Response Models
# ---------------------

class SendMessageRequest(BaseModel):
    receiver_id: str = Field(..., min_length=1, description="Student or adviser on the other side of the mentorship")
    content: str = Field("", description="Message text; may be empty when a file is attached")
    file_url: Optional[str] = Field(None, description="URL path of an already uploaded file")

class SendResult(BaseModel):
    message: Message
    delivered: bool

class Contact(BaseModel):
    id: str
    kind: Literal["student", "adviser"]
    name: str
    email: Optional[str] = None

class ConversationPage(BaseModel):
    messages: List[Message]
    count: int
    total: int
    total_pages: int
    current_page: int
