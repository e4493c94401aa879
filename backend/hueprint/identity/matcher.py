"""Resolve free-text assignee input to a known user."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
from typing import Any, Optional, Protocol, TypeVar


class RosterMember(Protocol):
    id: Any
    name: Optional[str]
    initials: Optional[str]
    hue: int


@dataclass(frozen=True)
class RosterEntry:
    id: Any
    name: Optional[str]
    initials: Optional[str]
    hue: int


M = TypeVar("M", bound=RosterMember)


def _fold(value: str | None) -> str:
    return (value or "").strip().casefold()


def match_assignee(text: str | None, roster: Iterable[M]) -> M | None:
    """
    Return the roster member ``text`` most plausibly refers to, or ``None``.

    Exact (case-insensitive) initials beat name substrings; the substring test runs
    both ways so a fragment ("jo") and an over-typed name ("John Smith Jr") both
    resolve. No scoring: ambiguity beyond these two rules is left unresolved.
    """
    needle = _fold(text)
    if not needle:
        return None

    members = list(roster)
    for member in members:
        if _fold(member.initials) == needle:
            return member
    for member in members:
        name = _fold(member.name)
        if name and (needle in name or name in needle):
            return member
    return None
