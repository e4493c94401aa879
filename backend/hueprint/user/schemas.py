from __future__ import annotations

from datetime import datetime
from typing import Literal, Optional
from uuid import UUID

from pydantic import Field

from hueprint.common.schemas import CamelModel, Hue, OrmModel


class UserCreateRequest(CamelModel):
    email: str = Field(..., min_length=3, max_length=320)
    name: Optional[str] = Field(None, max_length=128)
    # Explicit values skip allocation / derivation.
    initials: Optional[str] = Field(None, min_length=1, max_length=8)
    avatar_hue: Optional[Hue] = None


class UserUpdateRequest(CamelModel):
    """Admin edit. Omitted fields keep their stored value; nothing is recomputed."""

    email: Optional[str] = Field(None, min_length=3, max_length=320)
    name: Optional[str] = Field(None, max_length=128)
    initials: Optional[str] = Field(None, min_length=1, max_length=8)
    avatar_hue: Optional[Hue] = None


class UserResponse(OrmModel):
    id: UUID
    email: str
    name: Optional[str] = None
    initials: str
    avatar_hue: int
    avatar_pattern: str
    created_at: datetime
    updated_at: datetime


class AvatarColorsResponse(CamelModel):
    hue: int
    background: str
    light_background: str
    accent_text: str
    contrast_text: Literal["light", "dark"]
    contrast_text_color: str


class InitialsResponse(CamelModel):
    initials: str
