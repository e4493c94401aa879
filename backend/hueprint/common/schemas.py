from __future__ import annotations

from typing import Annotated

from pydantic import BaseModel, ConfigDict, Field

# Stored hue domain; the engine itself folds anything else modulo 360.
Hue = Annotated[int, Field(ge=0, lt=360)]


def to_camel(value: str) -> str:
    head, *rest = value.split("_")
    return head + "".join(word[:1].upper() + word[1:] for word in rest if word)


class CamelModel(BaseModel):
    model_config = ConfigDict(
        populate_by_name=True,
        alias_generator=to_camel,
    )


class OrmModel(CamelModel):
    model_config = ConfigDict(
        from_attributes=True,
        populate_by_name=True,
        alias_generator=to_camel,
    )
