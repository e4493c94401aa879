from __future__ import annotations

from typing import Any, Optional

from fastapi.responses import Response
from pydantic import BaseModel

SVG_MEDIA_TYPE = "image/svg+xml"


class ApiResponse(BaseModel):
    success: bool
    code: int
    message: str
    data: Optional[Any] = None

    @classmethod
    def ok(cls, data: Any = None, message: str = "OK") -> "ApiResponse":
        return cls(success=True, code=0, message=message, data=data)

    @classmethod
    def fail(
        cls,
        code: int,
        message: str,
        data: Any = None,
    ) -> "ApiResponse":
        return cls(success=False, code=code, message=message, data=data)


class SvgResponse(Response):
    """Raw SVG markup. Glyphs are pure functions of stored fields, so clients may cache them."""

    media_type = SVG_MEDIA_TYPE

    def __init__(self, content: str, max_age: int = 86400, **kwargs: Any) -> None:
        headers = dict(kwargs.pop("headers", None) or {})
        headers.setdefault("cache-control", f"public, max-age={max_age}")
        super().__init__(content=content, headers=headers, **kwargs)
