# Copyright 2026 UMLExtract Contributors
# SPDX-License-Identifier: Apache-2.0

"""Tests for the ParsedModel store and its entities."""

import pytest
from pydantic import TypeAdapter, ValidationError

from umlextract.model import (
    Cardinality,
    ClassEntry,
    FieldEntry,
    InjectedField,
    ParsedModel,
    RegularField,
    TypeEntry,
)

# ###############
# Helpers
# ###############


def _model_with_class() -> ParsedModel:
    model = ParsedModel()
    model.add_class("c1", ClassEntry(id="c1", name="Order"))
    return model


def _injected(field_id: str = "f2") -> InjectedField:
    return InjectedField(
        id=field_id,
        name="customer",
        type_id="c2",
        association_id="a1",
        owner_class_id="c1",
        cardinality=Cardinality.MANY_TO_ONE,
    )


# ###############
# Store operations
# ###############


class TestStore:
    def test_empty_model(self) -> None:
        model = ParsedModel()
        assert model.types == {}
        assert model.fields == {}
        assert model.user_class_id is None

    def test_add_and_get_type(self) -> None:
        model = ParsedModel()
        model.add_type("t1", TypeEntry(id="t1", name="String"))
        assert model.get_type("t1") == TypeEntry(id="t1", name="String")
        assert model.get_type("missing") is None

    def test_reinserting_an_id_overwrites(self) -> None:
        model = ParsedModel()
        model.add_type("t1", TypeEntry(id="t1", name="String"))
        model.add_type("t1", TypeEntry(id="t1", name="Integer"))
        assert len(model.types) == 1
        assert model.types["t1"].name == "Integer"

    def test_fields_are_linked_to_their_class(self) -> None:
        model = _model_with_class()
        model.add_field("f1", RegularField(id="f1", name="total", type_id="t1"))
        model.add_field_to_class("c1", "f1")
        model.add_injected_field("f2", _injected())
        model.add_injected_field_to_class("c1", "f2")

        assert model.classes["c1"].fields == ["f1"]
        assert model.classes["c1"].injected_fields == ["f2"]

    def test_regular_and_injected_fields_share_one_id_space(self) -> None:
        model = _model_with_class()
        model.add_field("f1", RegularField(id="f1", name="total", type_id="t1"))
        model.add_injected_field("f1", _injected("f1"))

        assert isinstance(model.get_field("f1"), InjectedField)
        assert model.regular_fields == {}
        assert list(model.injected_fields) == ["f1"]

    def test_field_id_is_linked_once_under_its_latest_kind(self) -> None:
        model = _model_with_class()
        model.add_field("f1", RegularField(id="f1", name="total", type_id="t1"))
        model.add_field_to_class("c1", "f1")
        model.add_field_to_class("c1", "f1")
        assert model.classes["c1"].fields == ["f1"]

        model.add_injected_field("f1", _injected("f1"))
        model.add_injected_field_to_class("c1", "f1")
        assert model.classes["c1"].fields == []
        assert model.classes["c1"].injected_fields == ["f1"]

    def test_add_validation_to_field(self) -> None:
        model = _model_with_class()
        model.add_field("f1", RegularField(id="f1", name="title", type_id="t1"))
        model.add_validation_to_field("f1", "minlength", "3")
        model.add_validation_to_field("f1", "required", None)

        field = model.get_field("f1")
        assert field is not None
        assert field.validations == {"minlength": "3", "required": None}


# ###############
# Field variants
# ###############


class TestFieldEntry:
    def test_kind_discriminates_regular_fields(self) -> None:
        adapter = TypeAdapter(FieldEntry)
        field = adapter.validate_python({"kind": "regular", "id": "f1", "name": "total", "type_id": "t1"})
        assert isinstance(field, RegularField)

    def test_kind_discriminates_injected_fields(self) -> None:
        adapter = TypeAdapter(FieldEntry)
        field = adapter.validate_python(
            {
                "kind": "injected",
                "id": "f2",
                "name": "orders",
                "type_id": "c2",
                "association_id": "a1",
                "owner_class_id": "c1",
                "cardinality": "one-to-many",
            }
        )
        assert isinstance(field, InjectedField)
        assert field.cardinality == Cardinality.ONE_TO_MANY

    def test_unknown_kind_is_rejected(self) -> None:
        with pytest.raises(ValidationError):
            TypeAdapter(FieldEntry).validate_python({"kind": "computed", "id": "f1", "name": "x"})
