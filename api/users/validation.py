"""
Pre-write checks for new users.
"""

from __future__ import annotations

from core.validation import FieldError, is_blank, nul_character_errors

MIN_USERNAME_LENGTH = 3
MIN_PASSWORD_LENGTH = 3
MAX_PASSWORD_BYTES = 72


def validate_password(password: str | None) -> list[FieldError]:
    if password is None or password == "":
        return [FieldError("password", "password is required")]
    if len(password) < MIN_PASSWORD_LENGTH:
        return [
            FieldError(
                "password",
                f"password must be at least {MIN_PASSWORD_LENGTH} characters long",
            )
        ]
    # bcrypt only looks at the first 72 bytes.
    if len(password.encode("utf-8")) > MAX_PASSWORD_BYTES:
        return [FieldError("password", f"password must be at most {MAX_PASSWORD_BYTES} bytes long")]
    return nul_character_errors({"password": password})


def validate_username(username: str | None) -> list[FieldError]:
    if is_blank(username):
        return [FieldError("username", "username is required")]
    if len(username) < MIN_USERNAME_LENGTH:
        return [
            FieldError(
                "username",
                f"username must be at least {MIN_USERNAME_LENGTH} characters long",
            )
        ]
    return nul_character_errors({"username": username})


def validate_name(name: str | None) -> list[FieldError]:
    return nul_character_errors({"name": name})


def username_taken() -> list[FieldError]:
    return [FieldError("username", "username must be unique")]
