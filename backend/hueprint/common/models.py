from __future__ import annotations

import uuid

from sqlalchemy import Column, DateTime, Integer, String
from sqlalchemy.dialects.postgresql import UUID

from hueprint.common.time import utcnow


class UuidPrimaryKeyMixin:
    id = Column(UUID(as_uuid=True), primary_key=True, default=uuid.uuid4)


class TimestampMixin:
    created_at = Column(DateTime(timezone=True), nullable=False, default=utcnow)
    updated_at = Column(DateTime(timezone=True), nullable=False, default=utcnow, onupdate=utcnow)


class AvatarIdentityMixin:
    """The three stored avatar fields. Written at creation and by admin overrides only."""

    avatar_hue = Column(Integer, nullable=False)
    avatar_pattern = Column(String(128), nullable=False)
    initials = Column(String(8), nullable=False, default="")
