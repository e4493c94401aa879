from __future__ import annotations

from sqlalchemy import Column, String

from hueprint.common.models import AvatarIdentityMixin, TimestampMixin, UuidPrimaryKeyMixin
from hueprint.database import Base


class User(UuidPrimaryKeyMixin, AvatarIdentityMixin, TimestampMixin, Base):
    __tablename__ = "app_user"

    email = Column(String(320), nullable=False, unique=True)
    name = Column(String(128), nullable=True)
