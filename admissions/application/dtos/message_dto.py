"""Chat and forum message DTOs."""

from datetime import datetime
from typing import Annotated, Optional
from uuid import UUID

from pydantic import Field

from admissions.application.dtos.common import RequestDTO, ResponseDTO

MessageContent = Annotated[str, Field(min_length=1, max_length=1000)]


class CreateMessageDTO(RequestDTO):
    content: MessageContent
    sender_id: UUID
    recipient_id: UUID


class CreateForumMessageDTO(RequestDTO):
    content: MessageContent
    sender_id: UUID
    forum_id: UUID


class MessageSenderDTO(ResponseDTO):
    id: UUID
    email: str
    first_name: str
    last_name: str
    phone_number: Optional[str] = None


class MessageDTO(ResponseDTO):
    id: UUID
    content: str
    sender_id: UUID
    recipient_id: Optional[UUID] = None
    conversation_id: UUID
    sent_at: datetime
    read: bool = False


class ForumMessageDTO(ResponseDTO):
    id: UUID
    content: str
    sender: list[MessageSenderDTO] = []
    conversation_id: UUID
    sent_at: datetime
    read: bool = False
