"""
Request specification exception hierarchy.

All exceptions inherit from ``SpecificationError`` and provide
``to_dict()`` for structured error reporting.
"""

from __future__ import annotations

from difflib import get_close_matches
from typing import Any


class SpecificationError(Exception):
    """Base exception for all request specification errors."""

    def to_dict(self) -> dict[str, Any]:
        return {
            "error": self.__class__.__name__,
            "message": str(self),
        }


class InvalidArgumentError(SpecificationError, ValueError):
    """A required argument was ``None``."""

    def __init__(self, argument: str, message: str | None = None) -> None:
        self.argument = argument
        self.message = message or f"Argument '{argument}' must not be None."
        super().__init__(self.message)

    def to_dict(self) -> dict[str, Any]:
        return {
            "error": "INVALID_ARGUMENT",
            "argument": self.argument,
            "message": self.message,
        }


class MemberNotFoundError(SpecificationError, LookupError):
    """
    Unknown parameter, property or field name.

    Uses fuzzy matching to suggest similar member names.

    Example error message::

        No parameter 'parmeter' on 'SingleParameterType'.
        Did you mean: parameter?
        Available: parameter
    """

    def __init__(
        self,
        member: str,
        owner: str,
        available: list[str],
        kind: str = "member",
    ) -> None:
        self.member = member
        self.owner = owner
        self.available = available
        self.kind = kind
        self.suggestions = get_close_matches(member, available, n=3, cutoff=0.6)
        super().__init__(self._build_message())

    def _build_message(self) -> str:
        lines = [f"No {self.kind} '{self.member}' on '{self.owner}'."]
        if self.suggestions:
            lines.append(f"Did you mean: {', '.join(self.suggestions)}?")
        lines.append(f"Available: {', '.join(sorted(self.available)) or '<none>'}")
        return "\n".join(lines)

    def to_dict(self) -> dict[str, Any]:
        return {
            "error": "MEMBER_NOT_FOUND",
            "kind": self.kind,
            "member": self.member,
            "owner": self.owner,
            "suggestions": self.suggestions,
            "available": sorted(self.available),
        }
