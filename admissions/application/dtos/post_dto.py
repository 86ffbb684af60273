"""News feed post DTOs."""

from datetime import datetime
from typing import Optional
from uuid import UUID

from admissions.application.dtos.common import NonEmptyStr, RequestDTO, ResponseDTO


class CreatePostDTO(RequestDTO):
    title: NonEmptyStr
    description: NonEmptyStr
    video_link: Optional[str] = None
    image: Optional[str] = None


class EditPostDTO(RequestDTO):
    id: UUID
    title: Optional[str] = None
    description: Optional[str] = None
    video_link: Optional[str] = None
    image: Optional[str] = None


class PostDTO(ResponseDTO):
    id: UUID
    title: str
    description: str
    image: Optional[str] = None
    video_link: Optional[str] = None
    created_at: datetime
    updated_at: datetime
