"""
Pre-write checks for blog fields.
"""

from __future__ import annotations

from typing import Any

from core.validation import FieldError, is_blank, nul_character_errors

REQUIRED_FIELDS = ("title", "url")


def validate_new_blog(fields: dict[str, Any]) -> list[FieldError]:
    errors = [
        FieldError(name, f"{name} is required")
        for name in REQUIRED_FIELDS
        if is_blank(fields.get(name))
    ]
    return errors + nul_character_errors(fields)


def validate_blog_update(fields: dict[str, Any]) -> list[FieldError]:
    """
    Only supplied fields are checked; a supplied title/url may not be blank.
    """
    errors = [
        FieldError(name, f"{name} cannot be empty")
        for name in REQUIRED_FIELDS
        if name in fields and is_blank(fields[name])
    ]
    if "likes" in fields and fields["likes"] is None:
        errors.append(FieldError("likes", "likes cannot be null"))
    return errors + nul_character_errors(fields)


def validate_comment(comment: str | None) -> list[FieldError]:
    if is_blank(comment):
        return [FieldError("comment", "comment is required")]
    return nul_character_errors({"comment": comment})
