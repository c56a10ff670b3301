"""Tests for member descriptor introspection."""

from __future__ import annotations

from dataclasses import dataclass
from typing import ClassVar, Optional

import pytest
from pydantic import BaseModel, ValidationError

from fixture_kernel import (
    FieldInfo,
    FieldLike,
    InvalidArgumentError,
    MemberNotFoundError,
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


@dataclass
class Customer:
    instances: ClassVar[int] = 0

    name: str
    tags: list[str]
    nickname: Optional[str] = None

    @property
    def display_name(self) -> str:
        return self.nickname or self.name

    @property
    def untyped(self):
        return None

    def rename(self, new_name: str, *, notify: bool = False) -> None:
        self.name = new_name


class VipCustomer(Customer):
    level: int = 1


def untyped(value, *args, key=None, **kwargs):
    pass


def forward_reference(value: Undefined) -> None:  # noqa: F821
    pass


class PlaceOrder(BaseModel):
    quantity: int
    reference: Optional[str] = None


class Point:
    def __new__(cls, x: int, y: float = 0.0) -> Point:
        return super().__new__(cls)


# -- parameters_of ------------------------------------------------------------


class TestParametersOf:
    def test_function(self):
        params = parameters_of(Customer.rename)
        assert [p.name for p in params] == ["self", "new_name", "notify"]
        assert [p.position for p in params] == [0, 1, 2]
        assert params[1].parameter_type is str
        assert params[2].parameter_type is bool
        assert params[2].kind == "KEYWORD_ONLY"
        assert all(p.member is Customer.rename for p in params)

    def test_unannotated_parameter_is_object(self):
        params = parameters_of(untyped)
        assert [p.parameter_type for p in params] == [object] * 4
        assert [p.kind for p in params] == [
            "POSITIONAL_OR_KEYWORD",
            "VAR_POSITIONAL",
            "KEYWORD_ONLY",
            "VAR_KEYWORD",
        ]

    def test_class_yields_constructor_parameters(self):
        params = parameters_of(Customer)
        assert [p.name for p in params] == ["name", "tags", "nickname"]
        assert params[1].parameter_type == list[str]
        assert params[2].parameter_type == Optional[str]
        assert all(p.member is Customer for p in params)

    def test_pydantic_model_uses_field_types(self):
        params = {p.name: p for p in parameters_of(PlaceOrder)}
        assert params["quantity"].parameter_type is int
        assert params["reference"].parameter_type == Optional[str]
        assert params["quantity"].member is PlaceOrder

    def test_class_with_only_new_uses_new_annotations(self):
        params = parameters_of(Point)
        assert [p.name for p in params] == ["x", "y"]
        assert parameter_of(Point, "x").parameter_type is int
        assert parameter_of(Point, "y").parameter_type is float

    def test_bound_method_excludes_self(self):
        customer = Customer(name="Ada", tags=[])
        params = parameters_of(customer.rename)
        assert [p.name for p in params] == ["new_name", "notify"]
        assert params[0].parameter_type is str

    def test_unresolvable_hint_propagates(self):
        with pytest.raises(NameError):
            parameters_of(forward_reference)

    def test_null_member_raises(self):
        with pytest.raises(InvalidArgumentError):
            parameters_of(None)


class TestParameterOf:
    def test_found(self):
        param = parameter_of(Customer, "tags")
        assert isinstance(param, ParameterInfo)
        assert param.position == 1

    def test_missing_name_suggests(self):
        with pytest.raises(MemberNotFoundError) as exc_info:
            parameter_of(Customer, "nme")
        err = exc_info.value
        assert err.kind == "parameter"
        assert err.owner == "Customer"
        assert "name" in err.suggestions


# -- properties / fields -------------------------------------------------------


class TestProperties:
    def test_properties_of(self):
        props = {p.name: p for p in properties_of(Customer)}
        assert set(props) == {"display_name", "untyped"}
        assert props["display_name"].property_type is str
        assert props["untyped"].property_type is object

    def test_inherited_properties(self):
        prop = property_of(VipCustomer, "display_name")
        assert prop.owner is VipCustomer

    def test_missing_property(self):
        with pytest.raises(MemberNotFoundError) as exc_info:
            property_of(Customer, "display")
        assert exc_info.value.kind == "property"
        assert "display_name" in exc_info.value.suggestions


class TestFields:
    def test_fields_skip_class_vars_and_properties(self):
        names = [f.name for f in fields_of(Customer)]
        assert names == ["name", "tags", "nickname"]

    def test_inherited_fields(self):
        fields = {f.name: f.field_type for f in fields_of(VipCustomer)}
        assert fields == {
            "name": str,
            "tags": list[str],
            "nickname": Optional[str],
            "level": int,
        }

    def test_field_of(self):
        assert field_of(Customer, "name") == FieldInfo(
            owner=Customer, name="name", field_type=str
        )

    def test_missing_field(self):
        with pytest.raises(MemberNotFoundError):
            field_of(Customer, "instances")


# -- Descriptor value semantics -----------------------------------------------


class TestDescriptors:
    def test_descriptors_satisfy_their_shape_only(self):
        param = parameter_of(Customer, "name")
        prop = property_of(Customer, "display_name")
        field = field_of(Customer, "name")

        assert isinstance(param, ParameterLike)
        assert not isinstance(param, PropertyLike)
        assert not isinstance(param, FieldLike)
        assert isinstance(prop, PropertyLike)
        assert not isinstance(prop, ParameterLike)
        assert not isinstance(prop, FieldLike)
        assert isinstance(field, FieldLike)
        assert not isinstance(field, ParameterLike)
        assert not isinstance(field, PropertyLike)

    def test_descriptors_are_frozen_and_hashable(self):
        param = parameter_of(Customer, "name")
        with pytest.raises(ValidationError):
            param.name = "other"  # type: ignore[misc]
        assert param == parameter_of(Customer, "name")
        assert hash(param) == hash(parameter_of(Customer, "name"))

    def test_property_info_repr(self):
        prop = PropertyInfo(owner=Customer, name="display_name", property_type=str)
        assert repr(prop) == "PropertyInfo(Customer.display_name: str)"
