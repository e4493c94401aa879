from __future__ import annotations

from typing import Literal, Optional
from uuid import UUID

from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session

from hueprint.common.exceptions import ApiException
from hueprint.common.responses import ApiResponse, SvgResponse
from hueprint.database import get_db
from hueprint.identity.initials import extract_initials
from hueprint.identity.pattern import generate_pattern
from hueprint.user.schemas import InitialsResponse, UserCreateRequest, UserResponse, UserUpdateRequest
from hueprint.user.service import UserService, resolve_size

router = APIRouter(prefix="/api/users", tags=["users"])
identity_router = APIRouter(prefix="/api/identity", tags=["identity"])


def _dump(user) -> dict:
    return UserResponse.model_validate(user).model_dump(by_alias=True, mode="json")


@router.get("", response_model=ApiResponse)
def list_users(db: Session = Depends(get_db)) -> ApiResponse:
    service = UserService(db)
    return ApiResponse.ok([_dump(user) for user in service.find_all()])


@router.get("/match", response_model=ApiResponse)
def match_user(q: str = Query(default=""), db: Session = Depends(get_db)) -> ApiResponse:
    service = UserService(db)
    user = service.match(q)
    return ApiResponse.ok(_dump(user) if user is not None else None)


@router.get("/{id}", response_model=ApiResponse)
def get_user(id: UUID, db: Session = Depends(get_db)) -> ApiResponse:
    service = UserService(db)
    return ApiResponse.ok(_dump(service.find_by_id(id)))


@router.post("", response_model=ApiResponse)
def create_user(request: UserCreateRequest, db: Session = Depends(get_db)) -> ApiResponse:
    service = UserService(db)
    return ApiResponse.ok(_dump(service.create(request)))


@router.put("/{id}", response_model=ApiResponse)
def update_user(id: UUID, request: UserUpdateRequest, db: Session = Depends(get_db)) -> ApiResponse:
    service = UserService(db)
    return ApiResponse.ok(_dump(service.update(id, request)))


@router.delete("/{id}", response_model=ApiResponse)
def delete_user(id: UUID, db: Session = Depends(get_db)) -> ApiResponse:
    service = UserService(db)
    service.delete(id)
    return ApiResponse.ok(None, "User deleted successfully")


@router.get("/{id}/colors", response_model=ApiResponse)
def get_user_colors(id: UUID, db: Session = Depends(get_db)) -> ApiResponse:
    service = UserService(db)
    return ApiResponse.ok(service.colors(id).model_dump(by_alias=True))


@router.get("/{id}/avatar.svg", response_class=SvgResponse)
def get_user_avatar(
    id: UUID,
    size: Optional[str] = Query(default=None),
    style: Literal["pattern", "initials"] = Query(default="pattern"),
    db: Session = Depends(get_db),
) -> SvgResponse:
    service = UserService(db)
    return SvgResponse(service.render_avatar(id, resolve_size(size), style=style))


@identity_router.get("/preview.svg", response_class=SvgResponse)
def preview_pattern(
    seed: str = Query(..., min_length=1, max_length=256),
    hue: int = Query(..., ge=0, lt=360),
    size: Optional[str] = Query(default=None),
) -> SvgResponse:
    try:
        markup = generate_pattern(seed, hue, resolve_size(size))
    except ValueError as exc:
        raise ApiException.invalid_input(str(exc)) from exc
    return SvgResponse(markup)


@identity_router.get("/initials", response_model=ApiResponse)
def preview_initials(
    name: Optional[str] = Query(default=None),
    email: Optional[str] = Query(default=None),
) -> ApiResponse:
    return ApiResponse.ok(InitialsResponse(initials=extract_initials(name, email)).model_dump(by_alias=True))
