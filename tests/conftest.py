"""Shared sample types, descriptors and test doubles."""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

import pytest

from fixture_kernel import (
    ParameterInfo,
    PropertyInfo,
    parameter_of,
    property_of,
)

# -- Sample types -------------------------------------------------------------


class SingleParameterType:
    def __init__(self, parameter: object) -> None:
        self._parameter = parameter

    @property
    def parameter(self) -> object:
        return self._parameter


class SingleIntParameterType:
    def __init__(self, parameter: int) -> None:
        self._parameter = parameter

    @property
    def parameter(self) -> int:
        return self._parameter


# -- Test doubles -------------------------------------------------------------


class DelegatingCriterion:
    """Criterion double whose verdict comes from ``on_equals``."""

    def __init__(self, on_equals: Callable[[Any], bool] | None = None) -> None:
        self.on_equals = on_equals or (lambda other: False)
        self.received: list[Any] = []

    def equals(self, other: Any) -> bool:
        self.received.append(other)
        return self.on_equals(other)


class DelegatingRequestSpecification:
    """Request specification double whose verdict comes from ``on_is_satisfied_by``."""

    def __init__(self, on_is_satisfied_by: Callable[[Any], bool] | None = None) -> None:
        self.on_is_satisfied_by = on_is_satisfied_by or (lambda request: False)
        self.received: list[Any] = []

    def is_satisfied_by(self, request: Any) -> bool:
        self.received.append(request)
        return self.on_is_satisfied_by(request)


# -- Fixtures -----------------------------------------------------------------


@pytest.fixture
def object_parameter() -> ParameterInfo:
    """``parameter: object`` of ``SingleParameterType.__init__``."""
    return parameter_of(SingleParameterType, "parameter")


@pytest.fixture
def int_parameter() -> ParameterInfo:
    """``parameter: int`` of ``SingleIntParameterType.__init__``."""
    return parameter_of(SingleIntParameterType, "parameter")


@pytest.fixture
def parameter_property() -> PropertyInfo:
    """The ``parameter`` property of ``SingleParameterType``."""
    return property_of(SingleParameterType, "parameter")


@pytest.fixture
def delegating_criterion() -> DelegatingCriterion:
    return DelegatingCriterion()


@pytest.fixture
def delegating_specification() -> type[DelegatingRequestSpecification]:
    return DelegatingRequestSpecification
