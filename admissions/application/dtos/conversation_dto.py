"""Conversation DTOs: private chats and forums."""

from typing import Optional
from uuid import UUID

from pydantic import Field

from admissions.application.dtos.common import ResponseDTO
from admissions.application.dtos.message_dto import ForumMessageDTO, MessageDTO
from admissions.domain.enums import ConversationType, Role


class ChatUserDTO(ResponseDTO):
    """Conversation participant."""

    id: UUID
    email: str
    first_name: str
    last_name: str
    phone_number: Optional[str] = None
    roles: list[Role]


class _ConversationBaseDTO(ResponseDTO):
    id: UUID
    title: Optional[str] = None
    participants: list[ChatUserDTO] = []
    type: ConversationType


class ConversationDTO(_ConversationBaseDTO):
    messages: list[MessageDTO] = []


class ForumConversationDTO(_ConversationBaseDTO):
    forum_message: list[ForumMessageDTO] = []


class ConversationWithoutMessagesDTO(_ConversationBaseDTO):
    """Listing shape; ``_count`` carries the unread message count."""

    messages: list[MessageDTO] = []
    count: int = Field(default=0, alias="_count")


class ForumWithoutMessagesDTO(_ConversationBaseDTO):
    messages: list[MessageDTO] = []
    count: int = Field(default=0, alias="_count")
