"""
Specifications matching member descriptors by declared type and name.

A member specification recognises requests by shape: a request that does
not look like the member kind it describes is never satisfied, whatever
its name or type.  Recognised requests are handed unchanged to the
specification's criterion.
"""

from __future__ import annotations

import logging
from typing import Any, ClassVar, overload

from .base import BaseRequestSpecification
from .criterion import (
    Criterion,
    Equatable,
    FieldTypeAndNameCriterion,
    PropertyTypeAndNameCriterion,
)
from .exceptions import InvalidArgumentError
from .reflection import FieldLike, PropertyLike
from .utils import require, type_name

logger = logging.getLogger("fixture_kernel.specifications")

_UNSET: Any = object()


def _require_criterion(target: Any) -> Equatable[Any]:
    require(target, "target")
    if not isinstance(target, Equatable):
        raise InvalidArgumentError(
            "target", f"Argument 'target' must provide equals(), got {target!r}."
        )
    return target


class MemberSpecification(BaseRequestSpecification):
    """
    Base for specifications over one kind of member descriptor.

    Subclasses set ``shape`` (the runtime-checkable protocol requests must
    satisfy) and ``default_criterion`` (built from a target type and name).

    Two construction forms are supported::

        PropertySpecification(str, "name")  # exact type, exact name
        PropertySpecification(criterion)    # custom matching rule

    The first argument may also be passed by keyword, as ``target`` or,
    for the type-and-name form, as ``target_type``.
    """

    shape: ClassVar[type[Any]]
    default_criterion: ClassVar[type[Any]]

    @overload
    def __init__(self, target: Equatable[Any]) -> None:
        ...

    @overload
    def __init__(self, target: Any, target_name: str) -> None:
        ...

    @overload
    def __init__(self, *, target_type: Any, target_name: str) -> None:
        ...

    def __init__(
        self,
        target: Any = _UNSET,
        target_name: Any = _UNSET,
        *,
        target_type: Any = _UNSET,
    ) -> None:
        self._target_type: Any
        self._target_name: str | None
        self._criterion: Equatable[Any]
        if target_type is not _UNSET:
            if target is not _UNSET:
                raise TypeError(
                    f"{self.__class__.__name__}() got values for both "
                    "'target' and 'target_type'"
                )
            target = target_type
            if target_name is _UNSET:
                raise InvalidArgumentError("target_name")
        elif target is _UNSET:
            raise TypeError(
                f"{self.__class__.__name__}() missing required argument: 'target'"
            )

        if target_name is _UNSET:
            self._criterion = _require_criterion(target)
            self._target_type = None
            self._target_name = None
        else:
            self._target_type = require(target, "target_type")
            self._target_name = require(target_name, "target_name")
            self._criterion = self.default_criterion(
                Criterion(self._target_type), Criterion(self._target_name)
            )

    @property
    def target_type(self) -> Any:
        """Expected declared type, or None when built from a criterion."""
        return self._target_type

    @property
    def target_name(self) -> str | None:
        """Expected member name, or None when built from a criterion."""
        return self._target_name

    @property
    def criterion(self) -> Equatable[Any]:
        return self._criterion

    def is_satisfied_by(self, request: Any) -> bool:
        require(request, "request")
        # A class is never a descriptor, whatever attributes it declares.
        if isinstance(request, type) or not isinstance(request, self.shape):
            logger.debug(
                "%s: %r is not a %s request",
                self.__class__.__name__,
                request,
                self.shape.__name__,
            )
            return False
        return bool(self._criterion.equals(request))

    def __repr__(self) -> str:
        if self._target_name is None:
            return f"{self.__class__.__name__}({self._criterion!r})"
        return (
            f"{self.__class__.__name__}("
            f"{type_name(self._target_type)}, {self._target_name!r})"
        )


class PropertySpecification(MemberSpecification):
    """Satisfied by property descriptors with the target type and name."""

    shape = PropertyLike
    default_criterion = PropertyTypeAndNameCriterion


class FieldSpecification(MemberSpecification):
    """Satisfied by field descriptors with the target type and name."""

    shape = FieldLike
    default_criterion = FieldTypeAndNameCriterion
