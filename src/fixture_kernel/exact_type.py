"""Specification satisfied by one exact type."""

from __future__ import annotations

from typing import Any

from .base import BaseRequestSpecification
from .utils import require, type_name


class ExactTypeSpecification(BaseRequestSpecification):
    """
    Satisfied only when the request is ``target_type`` itself.

    Subclasses, instances and member descriptors of that type do not
    match.
    """

    def __init__(self, target_type: Any) -> None:
        self.target_type = require(target_type, "target_type")

    def is_satisfied_by(self, request: Any) -> bool:
        require(request, "request")
        return request is self.target_type

    def __repr__(self) -> str:
        return f"ExactTypeSpecification({type_name(self.target_type)})"
