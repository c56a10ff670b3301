"""
Member descriptors: parameter, property and field metadata.

Descriptors are immutable value objects built from ``inspect`` and
``typing.get_type_hints``.  Specifications never depend on these concrete
classes; they recognise requests through the runtime-checkable ``*Like``
protocols, so any object exposing the same attributes is accepted.
"""

from __future__ import annotations

import inspect
import logging
from typing import (
    TYPE_CHECKING,
    Any,
    ClassVar,
    Protocol,
    get_origin,
    get_type_hints,
    runtime_checkable,
)

from pydantic import BaseModel, ConfigDict

from .exceptions import MemberNotFoundError
from .utils import require, type_name

if TYPE_CHECKING:
    from collections.abc import Callable

logger = logging.getLogger("fixture_kernel.reflection")


# ---------------------------------------------------------------------------
# Shape protocols
# ---------------------------------------------------------------------------


@runtime_checkable
class ParameterLike(Protocol):
    """Anything describing one parameter of a callable."""

    member: Any
    name: str
    parameter_type: Any


@runtime_checkable
class PropertyLike(Protocol):
    """Anything describing a property of a class."""

    owner: Any
    name: str
    property_type: Any


@runtime_checkable
class FieldLike(Protocol):
    """Anything describing an annotated attribute of a class."""

    owner: Any
    name: str
    field_type: Any


# ---------------------------------------------------------------------------
# Descriptors
# ---------------------------------------------------------------------------


class _Descriptor(BaseModel):
    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)


class ParameterInfo(_Descriptor):
    """
    One parameter of a function, method or class constructor.

    Attributes:
        member: The declaring callable (the class itself for constructors).
        name: Parameter name.
        parameter_type: Resolved type hint, ``object`` when unannotated.
        position: Zero-based index in the signature.
        kind: Name of the ``inspect.Parameter`` kind,
            e.g. ``"POSITIONAL_OR_KEYWORD"``.
    """

    member: Any
    name: str
    parameter_type: Any = object
    position: int = 0
    kind: str = inspect.Parameter.POSITIONAL_OR_KEYWORD.name

    def __repr__(self) -> str:
        owner = getattr(self.member, "__qualname__", repr(self.member))
        return (
            f"ParameterInfo({owner}.{self.name}: {type_name(self.parameter_type)})"
        )


class PropertyInfo(_Descriptor):
    """A ``property`` of a class; ``property_type`` is the getter's return hint."""

    owner: type[Any]
    name: str
    property_type: Any = object

    def __repr__(self) -> str:
        return (
            f"PropertyInfo({self.owner.__qualname__}.{self.name}: "
            f"{type_name(self.property_type)})"
        )


class FieldInfo(_Descriptor):
    """An annotated class attribute."""

    owner: type[Any]
    name: str
    field_type: Any = object

    def __repr__(self) -> str:
        return (
            f"FieldInfo({self.owner.__qualname__}.{self.name}: "
            f"{type_name(self.field_type)})"
        )


# ---------------------------------------------------------------------------
# Introspection
# ---------------------------------------------------------------------------


def _type_hints(obj: Any) -> dict[str, Any]:
    if inspect.isclass(obj):
        return get_type_hints(obj)
    # Builtins and slot wrappers carry no annotations.
    target = getattr(obj, "__func__", obj)
    if not getattr(target, "__annotations__", None):
        return {}
    return get_type_hints(target)


def _annotation(parameter: inspect.Parameter) -> Any:
    if parameter.annotation is inspect.Parameter.empty:
        return object
    return parameter.annotation


def _is_class_var(hint: Any) -> bool:
    return hint is ClassVar or get_origin(hint) is ClassVar


def _owner_name(member: Any) -> str:
    return getattr(member, "__qualname__", type(member).__name__)


def parameters_of(member: Callable[..., Any]) -> tuple[ParameterInfo, ...]:
    """
    Describe the parameters of ``member``.

    A class yields its constructor parameters (without ``self``).

    Raises:
        InvalidArgumentError: If ``member`` is None.
        NameError: If a type hint references an undefined name.
    """
    require(member, "member")
    # The signature may come from __init__, __new__ or a synthesized
    # __signature__; annotations are read from whichever one it is.
    signature = inspect.signature(member, eval_str=True)

    parameters = tuple(
        ParameterInfo(
            member=member,
            name=parameter.name,
            parameter_type=_annotation(parameter),
            position=position,
            kind=parameter.kind.name,
        )
        for position, parameter in enumerate(signature.parameters.values())
    )
    logger.debug(
        "Introspected %d parameter(s) of %s", len(parameters), _owner_name(member)
    )
    return parameters


def parameter_of(member: Callable[..., Any], name: str) -> ParameterInfo:
    """Return the parameter of ``member`` called ``name``."""
    require(name, "name")
    parameters = parameters_of(member)
    for parameter in parameters:
        if parameter.name == name:
            return parameter
    raise MemberNotFoundError(
        name,
        _owner_name(member),
        [p.name for p in parameters],
        kind="parameter",
    )


def properties_of(cls: type[Any]) -> tuple[PropertyInfo, ...]:
    """Describe every ``property`` on ``cls``, inherited ones included."""
    require(cls, "cls")
    return tuple(
        PropertyInfo(
            owner=cls,
            name=name,
            property_type=_type_hints(value.fget).get("return", object),
        )
        for name, value in inspect.getmembers(cls)
        if isinstance(value, property)
    )


def property_of(cls: type[Any], name: str) -> PropertyInfo:
    """Return the property of ``cls`` called ``name``."""
    require(name, "name")
    properties = properties_of(cls)
    for prop in properties:
        if prop.name == name:
            return prop
    raise MemberNotFoundError(
        name, cls.__qualname__, [p.name for p in properties], kind="property"
    )


def fields_of(cls: type[Any]) -> tuple[FieldInfo, ...]:
    """
    Describe the annotated attributes of ``cls``.

    ``ClassVar`` annotations and names shadowed by a property are skipped.
    """
    require(cls, "cls")
    properties = {p.name for p in properties_of(cls)}
    return tuple(
        FieldInfo(owner=cls, name=name, field_type=hint)
        for name, hint in _type_hints(cls).items()
        if not _is_class_var(hint) and name not in properties
    )


def field_of(cls: type[Any], name: str) -> FieldInfo:
    """Return the annotated attribute of ``cls`` called ``name``."""
    require(name, "name")
    fields = fields_of(cls)
    for f in fields:
        if f.name == name:
            return f
    raise MemberNotFoundError(
        name, cls.__qualname__, [f.name for f in fields], kind="field"
    )
