from __future__ import annotations

import logging
from typing import List, Optional
from uuid import UUID, uuid4

from sqlalchemy import func
from sqlalchemy.orm import Session

from hueprint.common.exceptions import CODE_DUPLICATE, ApiException
from hueprint.config import get_settings
from hueprint.identity.colors import contrast_text_color, derive_colors
from hueprint.identity.hue import allocate_hue
from hueprint.identity.initials import extract_initials
from hueprint.identity.matcher import RosterEntry, match_assignee
from hueprint.identity.pattern import generate_initials_badge, generate_pattern
from hueprint.user.models import User
from hueprint.user.schemas import AvatarColorsResponse, UserCreateRequest, UserUpdateRequest

logger = logging.getLogger(__name__)

# Named pixel sizes for avatar surfaces (compact lists up to profile headers)
AVATAR_SIZE_PRESETS: dict[str, int] = {
    "xs": 20,
    "sm": 24,
    "md": 32,
    "lg": 48,
    "xl": 96,
}


def resolve_size(value: Optional[str]) -> int:
    """Turn a preset name or a pixel count into a size within the configured bounds."""
    settings = get_settings()
    if value is None or not value.strip():
        return settings.avatar_default_size

    raw = value.strip().lower()
    if raw in AVATAR_SIZE_PRESETS:
        return AVATAR_SIZE_PRESETS[raw]
    try:
        size = int(raw)
    except ValueError:
        raise ApiException.invalid_input(
            f"Invalid avatar size: {value}",
            details={"presets": sorted(AVATAR_SIZE_PRESETS)},
        ) from None
    if size <= 0 or size > settings.avatar_max_size:
        raise ApiException.invalid_input(f"Avatar size must be between 1 and {settings.avatar_max_size}")
    return size


class UserService:
    def __init__(self, db: Session):
        self.db = db

    def find_all(self) -> List[User]:
        return self.db.query(User).order_by(User.created_at, User.email).all()

    def find_by_id(self, id: UUID) -> User:
        user = self.db.query(User).filter(User.id == id).first()
        if not user:
            raise ApiException.not_found("User", id)
        return user

    def _ensure_email_free(self, email: str, exclude_id: Optional[UUID] = None) -> None:
        query = self.db.query(User).filter(func.lower(User.email) == email.lower())
        if exclude_id is not None:
            query = query.filter(User.id != exclude_id)
        if query.first():
            raise ApiException(
                status_code=400,
                code=CODE_DUPLICATE,
                message=f"User email already exists: {email}",
            )

    def existing_hues(self) -> List[int]:
        return [hue for (hue,) in self.db.query(User.avatar_hue).all()]

    def create(self, request: UserCreateRequest) -> User:
        email = request.email.strip()
        self._ensure_email_free(email)

        hue = request.avatar_hue
        if hue is None:
            hues = self.existing_hues()
            hue = allocate_hue(hues)
            logger.info("hue_allocated email=%s hue=%s existing=%s", email, hue, len(hues))

        initials = request.initials
        if initials is None:
            initials = extract_initials(request.name, email)

        user_id = uuid4()
        user = User(
            id=user_id,
            email=email,
            name=request.name,
            avatar_hue=hue,
            # The glyph seed is the user's own id and never changes afterwards.
            avatar_pattern=str(user_id),
            initials=initials,
        )
        self.db.add(user)
        self.db.commit()
        self.db.refresh(user)
        logger.info("user_created id=%s hue=%s initials=%s", user.id, user.avatar_hue, user.initials)
        return user

    def update(self, id: UUID, request: UserUpdateRequest) -> User:
        user = self.find_by_id(id)

        if request.email is not None:
            email = request.email.strip()
            if email.lower() != user.email.lower():
                self._ensure_email_free(email, exclude_id=user.id)
            user.email = email
        if request.name is not None:
            user.name = request.name
        if request.initials is not None:
            user.initials = request.initials
        if request.avatar_hue is not None and request.avatar_hue != user.avatar_hue:
            logger.info("hue_overridden id=%s old=%s new=%s", user.id, user.avatar_hue, request.avatar_hue)
            user.avatar_hue = request.avatar_hue

        self.db.commit()
        self.db.refresh(user)
        return user

    def delete(self, id: UUID) -> None:
        user = self.find_by_id(id)
        self.db.delete(user)
        self.db.commit()

    def colors(self, id: UUID) -> AvatarColorsResponse:
        user = self.find_by_id(id)
        colors = derive_colors(user.avatar_hue)
        return AvatarColorsResponse(
            hue=colors.hue,
            background=colors.background,
            light_background=colors.light_background,
            accent_text=colors.accent_text,
            contrast_text=colors.contrast_text,
            contrast_text_color=contrast_text_color(colors.hue),
        )

    def render_avatar(self, id: UUID, size: int, style: str = "pattern") -> str:
        user = self.find_by_id(id)
        try:
            if style == "initials":
                return generate_initials_badge(user.initials, user.avatar_hue, size)
            return generate_pattern(user.avatar_pattern, user.avatar_hue, size)
        except ValueError as exc:
            raise ApiException.invalid_input(str(exc)) from exc

    def match(self, text: Optional[str]) -> Optional[User]:
        users = self.find_all()
        roster = [
            RosterEntry(id=user.id, name=user.name, initials=user.initials, hue=user.avatar_hue)
            for user in users
        ]
        found = match_assignee(text, roster)
        if found is None:
            logger.debug("assignee_unmatched text=%r roster=%s", text, len(roster))
            return None
        return next(user for user in users if user.id == found.id)
