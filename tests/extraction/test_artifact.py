# Copyright 2026 UMLExtract Contributors
# SPDX-License-Identifier: Apache-2.0

"""Tests for the JSON artifact format."""

import json
from pathlib import Path

import pytest

from umlextract.extraction.artifact import deserialize, read_artifact, serialize, write_artifact
from umlextract.model import (
    AssociationEntry,
    Cardinality,
    ClassEntry,
    EnumEntry,
    InjectedField,
    ParsedModel,
    RegularField,
    TypeEntry,
)

# ###############
# Helpers
# ###############


def _model() -> ParsedModel:
    """Return a small model covering every entry kind."""
    model = ParsedModel(user_class_id="c_user")
    model.add_type("t1", TypeEntry(id="t1", name="String"))
    model.add_enum("e1", EnumEntry(id="e1", name="Role", values=["ADMIN", "GUEST"]))
    model.add_association("a1", AssociationEntry(id="a1", name="user", type_id="c_user"))
    model.add_class("c_user", ClassEntry(id="c_user", name="User", comment="Account holder"))
    model.add_field("f1", RegularField(id="f1", name="login", type_id="t1", validations={"maxlength": "20"}))
    model.add_field_to_class("c_user", "f1")
    model.add_injected_field(
        "f2",
        InjectedField(
            id="f2",
            name="roles",
            type_id="c_role",
            association_id="a1",
            owner_class_id="c_user",
            has_upper_multiplicity=True,
            cardinality=Cardinality.ONE_TO_MANY,
        ),
    )
    model.add_injected_field_to_class("c_user", "f2")
    return model


# ###############
# Tests
# ###############


def test_roundtrip_preserves_the_model() -> None:
    model = _model()
    restored = deserialize(serialize(model))

    assert restored == model
    assert isinstance(restored.fields["f2"], InjectedField)


def test_json_layout() -> None:
    obj = json.loads(serialize(_model()))

    assert obj["v"] == "1"
    assert obj["user_class_id"] == "c_user"
    assert obj["fields"]["f1"]["kind"] == "regular"
    assert obj["fields"]["f2"]["kind"] == "injected"
    assert obj["fields"]["f2"]["cardinality"] == "one-to-many"
    assert list(obj["classes"]) == ["c_user"]


def test_unknown_version_is_rejected() -> None:
    with pytest.raises(ValueError, match="Unsupported artifact format version"):
        deserialize('{"v": "0"}')


def test_write_and_read(tmp_path: Path) -> None:
    path = tmp_path / "out" / "shop.model.json"
    write_artifact(_model(), path)

    assert path.exists()
    assert read_artifact(path) == _model()
