"""
Typed validation results shared by the feature packages.

Validators are plain functions returning a list of `FieldError`; an empty list
means the input may be written. Services raise `ValidationFailed` to turn a
non-empty list into a 400 response (handler registered in `core/errors.py`).
"""

from __future__ import annotations

from dataclasses import asdict, dataclass
from typing import Any


@dataclass(frozen=True)
class FieldError:
    field: str
    message: str

    def to_dict(self) -> dict[str, str]:
        return asdict(self)


class ValidationFailed(Exception):
    def __init__(self, errors: list[FieldError]) -> None:
        if not errors:
            raise ValueError("ValidationFailed needs at least one FieldError.")
        super().__init__(errors[0].message)
        self.errors = list(errors)


def is_blank(value: str | None) -> bool:
    return value is None or not value.strip()


def nul_character_errors(fields: dict[str, Any]) -> list[FieldError]:
    """
    PostgreSQL text columns cannot store NUL.
    """
    return [
        FieldError(name, f"{name} cannot contain NUL characters")
        for name, value in fields.items()
        if isinstance(value, str) and "\x00" in value
    ]


def raise_if_invalid(errors: list[FieldError]) -> None:
    if errors:
        raise ValidationFailed(errors)
