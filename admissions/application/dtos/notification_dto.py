"""In-app and push notification DTOs."""

from typing import Optional
from uuid import UUID

from admissions.application.dtos.common import NonEmptyStr, RequestDTO, ResponseDTO
from admissions.application.dtos.user_dto import UserForNotificationDTO
from admissions.domain.enums import NotificationType


class CreateNotificationDTO(RequestDTO):
    title: NonEmptyStr
    content: NonEmptyStr
    recipient_id: UUID
    sender_id: Optional[UUID] = None
    type: Optional[NotificationType] = None


class CreateUserNotificationDTO(RequestDTO):
    """Registers a device push token for a user."""

    user_id: UUID
    expo_token: NonEmptyStr


class NotificationDTO(ResponseDTO):
    title: str
    content: str
    sender: Optional[UserForNotificationDTO] = None
    recipient: Optional[UserForNotificationDTO] = None
    type: NotificationType = NotificationType.NORMAL
