"""
Criteria: a target value paired with a pluggable equality function.

Specifications delegate their match decision to an ``Equatable``.
``Criterion`` is the general-purpose implementation; the
``*TypeAndNameCriterion`` classes combine two criteria over the type and
the name of a member descriptor.
"""

from __future__ import annotations

import operator
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, Generic, Protocol, TypeVar, runtime_checkable

from .utils import require

if TYPE_CHECKING:
    from collections.abc import Callable

    from .reflection import FieldLike, ParameterLike, PropertyLike

T = TypeVar("T")
T_contra = TypeVar("T_contra", contravariant=True)


@runtime_checkable
class Equatable(Protocol[T_contra]):
    """Anything that can decide whether a value equals its own target."""

    def equals(self, other: T_contra) -> bool:
        ...


@dataclass(frozen=True)
class Criterion(Generic[T]):
    """
    A target value together with the function used to compare against it.

    ``equals(other)`` always calls ``comparer(target, other)``: the target
    is the first argument and the candidate the second.  Comparers need not
    be symmetric.

    Two criteria are equal when both their targets and comparers are equal.
    """

    target: T
    comparer: Callable[[T, T], bool] = operator.eq

    def equals(self, other: T) -> bool:
        return bool(self.comparer(self.target, other))

    def __repr__(self) -> str:
        comparer = getattr(self.comparer, "__name__", repr(self.comparer))
        return f"Criterion({self.target!r}, comparer={comparer})"


class _TypeAndNameCriterion:
    """Shared logic for criteria matching a descriptor's type and name."""

    _type_attribute: str

    def __init__(
        self,
        type_criterion: Equatable[Any],
        name_criterion: Equatable[str],
    ) -> None:
        self.type_criterion = require(type_criterion, "type_criterion")
        self.name_criterion = require(name_criterion, "name_criterion")

    def equals(self, other: Any) -> bool:
        return self.type_criterion.equals(
            getattr(other, self._type_attribute)
        ) and self.name_criterion.equals(other.name)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, self.__class__):
            return NotImplemented
        return (
            self.type_criterion == other.type_criterion
            and self.name_criterion == other.name_criterion
        )

    def __hash__(self) -> int:
        return hash((self.__class__, self.type_criterion, self.name_criterion))

    def __repr__(self) -> str:
        return (
            f"{self.__class__.__name__}("
            f"{self.type_criterion!r}, {self.name_criterion!r})"
        )


class ParameterTypeAndNameCriterion(_TypeAndNameCriterion):
    """Matches a parameter descriptor on ``parameter_type`` and ``name``."""

    _type_attribute = "parameter_type"

    def equals(self, other: ParameterLike) -> bool:
        return super().equals(other)


class PropertyTypeAndNameCriterion(_TypeAndNameCriterion):
    """Matches a property descriptor on ``property_type`` and ``name``."""

    _type_attribute = "property_type"

    def equals(self, other: PropertyLike) -> bool:
        return super().equals(other)


class FieldTypeAndNameCriterion(_TypeAndNameCriterion):
    """Matches a field descriptor on ``field_type`` and ``name``."""

    _type_attribute = "field_type"

    def equals(self, other: FieldLike) -> bool:
        return super().equals(other)

