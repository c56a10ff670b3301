"""Request specification protocol and logical composites."""

from __future__ import annotations

from typing import Any, Protocol, runtime_checkable

from .utils import require


@runtime_checkable
class IRequestSpecification(Protocol):
    """
    Protocol for request specifications.

    A request is any object presented while a value is being resolved:
    a parameter, property or field descriptor, a type, or something else
    entirely.
    """

    def is_satisfied_by(self, request: Any) -> bool:
        """
        Return True if ``request`` matches this specification.

        Raises:
            InvalidArgumentError: If ``request`` is None.
        """
        ...


class BaseRequestSpecification(IRequestSpecification):
    """Base class for request specifications with logic operator support."""

    def __and__(self, other: IRequestSpecification) -> AndRequestSpecification:
        return AndRequestSpecification(self, other)

    def __or__(self, other: IRequestSpecification) -> OrRequestSpecification:
        return OrRequestSpecification(self, other)

    def __invert__(self) -> NotRequestSpecification:
        return NotRequestSpecification(self)


class AndRequestSpecification(BaseRequestSpecification):
    """Logical AND composite. Satisfied by every request when empty."""

    def __init__(self, *specifications: IRequestSpecification) -> None:
        for index, spec in enumerate(specifications):
            require(spec, f"specifications[{index}]")
        self.specifications = specifications

    def is_satisfied_by(self, request: Any) -> bool:
        require(request, "request")
        return all(spec.is_satisfied_by(request) for spec in self.specifications)

    def __repr__(self) -> str:
        return " & ".join(repr(s) for s in self.specifications) or "<all>"


class OrRequestSpecification(BaseRequestSpecification):
    """Logical OR composite. Satisfied by no request when empty."""

    def __init__(self, *specifications: IRequestSpecification) -> None:
        for index, spec in enumerate(specifications):
            require(spec, f"specifications[{index}]")
        self.specifications = specifications

    def is_satisfied_by(self, request: Any) -> bool:
        require(request, "request")
        return any(spec.is_satisfied_by(request) for spec in self.specifications)

    def __repr__(self) -> str:
        return " | ".join(repr(s) for s in self.specifications) or "<none>"


class NotRequestSpecification(BaseRequestSpecification):
    """Logical NOT composite."""

    def __init__(self, specification: IRequestSpecification) -> None:
        self.specification = require(specification, "specification")

    def is_satisfied_by(self, request: Any) -> bool:
        require(request, "request")
        return not self.specification.is_satisfied_by(request)

    def __repr__(self) -> str:
        return f"~{self.specification!r}"
