"""Null / empty argument checks shared by every layer."""

from __future__ import annotations

from typing import TypeVar

from javaeda.exceptions import InvalidArgumentError

T = TypeVar("T")


def require_non_null(value: T | None, name: str) -> T:
    """Return *value* unchanged, or raise if it is ``None``."""
    if value is None:
        raise InvalidArgumentError(f"{name} must not be null")
    return value


def require_non_empty(value: object, name: str) -> str:
    """Return *value* unchanged, or raise if it is ``None``, blank or not a string.

    Whitespace-only strings count as empty.
    """
    if value is None or (isinstance(value, str) and not value.strip()):
        raise InvalidArgumentError(f"{name} must not be empty")
    if not isinstance(value, str):
        raise InvalidArgumentError(f"{name} must be a string, got {type(value).__name__}")
    return value
