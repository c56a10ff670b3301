"""
Shared helpers for the fixture_kernel package.

These are pure-Python helpers with no dependencies on the specification
modules.
"""

from __future__ import annotations

from typing import Any, TypeVar

from .exceptions import InvalidArgumentError

T = TypeVar("T")


def require(value: T | None, argument: str) -> T:
    """Return ``value`` unchanged, raising ``InvalidArgumentError`` if it is None."""
    if value is None:
        raise InvalidArgumentError(argument)
    return value


def type_name(value: Any) -> str:
    """Readable name of a type or type hint, used in reprs and messages."""
    if isinstance(value, type):
        return value.__qualname__
    return repr(value)
