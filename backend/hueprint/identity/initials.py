"""Default initials for a user, from display name or email."""

from __future__ import annotations

import re

# CJK Unified Ideographs, Hiragana, Katakana
_CJK_RE = re.compile(r"[\u4e00-\u9fff\u3040-\u309f\u30a0-\u30ff]")


def is_cjk(text: str) -> bool:
    return bool(_CJK_RE.search(text))


def _from_name(name: str) -> str:
    if is_cjk(name):
        # CJK names read character by character; the leading pair is usually the surname.
        return "".join(ch for ch in name if not ch.isspace())[:2]
    words = name.split()
    # upper() can expand a letter ("ß" -> "SS"); keep one character per word.
    return "".join(word[0].upper()[:1] for word in words[:2])


def _from_email(email: str) -> str:
    local = email.split("@", 1)[0]
    return "".join(ch.upper()[:1] for ch in local if ch.isalnum())[:2]


def extract_initials(name: str | None, email: str | None = None) -> str:
    """
    Derive a short uppercase label for an avatar.

    The display name wins over the email; an empty string means neither gave
    anything usable and the caller should show a neutral placeholder.
    """
    cleaned = (name or "").strip()
    if cleaned:
        return _from_name(cleaned)
    cleaned_email = (email or "").strip()
    if cleaned_email:
        return _from_email(cleaned_email)
    return ""
