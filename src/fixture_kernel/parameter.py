"""Parameter specification."""

from __future__ import annotations

from .criterion import ParameterTypeAndNameCriterion
from .members import MemberSpecification
from .reflection import ParameterLike


class ParameterSpecification(MemberSpecification):
    """
    Satisfied by the descriptor of a constructor or method parameter.

    Built from a target type and name, a parameter matches only when its
    declared type equals ``target_type`` exactly (subclasses and
    superclasses do not match) and its name equals ``target_name``
    exactly, case included::

        spec = ParameterSpecification(object, "parameter")
        spec.is_satisfied_by(parameter_of(SingleParameterType, "parameter"))

    Built from a criterion, the matching rule is entirely the criterion's:
    ``is_satisfied_by`` returns ``criterion.equals(request)`` for every
    parameter-shaped request, passing the request object itself.

    Requests that are not parameter-shaped (properties, fields, strings,
    numbers, types, ...) are never satisfied and never raise.
    """

    shape = ParameterLike
    default_criterion = ParameterTypeAndNameCriterion
