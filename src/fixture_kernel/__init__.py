from .base import (
    AndRequestSpecification,
    BaseRequestSpecification,
    IRequestSpecification,
    NotRequestSpecification,
    OrRequestSpecification,
)
from .criterion import (
    Criterion,
    Equatable,
    FieldTypeAndNameCriterion,
    ParameterTypeAndNameCriterion,
    PropertyTypeAndNameCriterion,
)
from .exact_type import ExactTypeSpecification
from .exceptions import InvalidArgumentError, MemberNotFoundError, SpecificationError
from .members import FieldSpecification, MemberSpecification, PropertySpecification
from .parameter import ParameterSpecification
from .reflection import (
    FieldInfo,
    FieldLike,
    ParameterInfo,
    ParameterLike,
    PropertyInfo,
    PropertyLike,
    field_of,
    fields_of,
    parameter_of,
    parameters_of,
    properties_of,
    property_of,
)

__all__ = [
    # Core types
    "IRequestSpecification",
    "BaseRequestSpecification",
    "AndRequestSpecification",
    "OrRequestSpecification",
    "NotRequestSpecification",
    # Member specifications
    "MemberSpecification",
    "ParameterSpecification",
    "PropertySpecification",
    "FieldSpecification",
    "ExactTypeSpecification",
    # Criteria
    "Equatable",
    "Criterion",
    "ParameterTypeAndNameCriterion",
    "PropertyTypeAndNameCriterion",
    "FieldTypeAndNameCriterion",
    # Descriptors
    "ParameterLike",
    "PropertyLike",
    "FieldLike",
    "ParameterInfo",
    "PropertyInfo",
    "FieldInfo",
    "parameters_of",
    "parameter_of",
    "properties_of",
    "property_of",
    "fields_of",
    "field_of",
    # Exceptions
    "SpecificationError",
    "InvalidArgumentError",
    "MemberNotFoundError",
]
