# Copyright 2026 UMLExtract Contributors
# SPDX-License-Identifier: Apache-2.0

"""Normalized, cross-referenced result of a model extraction run."""

from __future__ import annotations

from enum import Enum
from typing import Annotated, Literal

from pydantic import BaseModel
from pydantic import Field as _Field

# ###############
# Public Interface
# ###############


class Cardinality(Enum):
    """Multiplicity classification of a relationship."""

    ONE_TO_ONE = "one-to-one"
    ONE_TO_MANY = "one-to-many"
    MANY_TO_ONE = "many-to-one"
    MANY_TO_MANY = "many-to-many"


class TypeEntry(BaseModel):
    """A primitive type supported by the type registry."""

    id: str
    name: str


class EnumEntry(BaseModel):
    """An enumeration and its upper-cased literal values."""

    id: str
    name: str
    values: list[str] = _Field(default_factory=list)


class AssociationEntry(BaseModel):
    """An association, described by its navigable end."""

    id: str
    name: str = ""
    type_id: str = ""
    has_upper_multiplicity: bool = False


class ClassEntry(BaseModel):
    """A class and the ids of the fields it owns, in declaration order."""

    id: str
    name: str
    comment: str | None = None
    fields: list[str] = _Field(default_factory=list)
    injected_fields: list[str] = _Field(default_factory=list)


class RegularField(BaseModel):
    """A scalar or enum-valued class attribute."""

    kind: Literal["regular"] = "regular"
    id: str
    name: str
    type_id: str
    comment: str | None = None
    validations: dict[str, str | None] = _Field(default_factory=dict)


class InjectedField(BaseModel):
    """A class attribute backed by an association end."""

    kind: Literal["injected"] = "injected"
    id: str
    name: str
    type_id: str | None = None
    association_id: str
    owner_class_id: str
    has_upper_multiplicity: bool | None = None
    cardinality: Cardinality
    comment: str | None = None
    validations: dict[str, str | None] = _Field(default_factory=dict)


# A field is either regular or injected; ``kind`` tells them apart.
FieldEntry = Annotated[RegularField | InjectedField, _Field(discriminator="kind")]


class ParsedModel(BaseModel):
    """Accumulates every entity extracted in one run, keyed by element id.

    Re-inserting an id overwrites the previous entry. Regular and injected
    fields share a single id space; a field id is linked to its class at most
    once, under the kind of its latest entry.
    """

    types: dict[str, TypeEntry] = _Field(default_factory=dict)
    enums: dict[str, EnumEntry] = _Field(default_factory=dict)
    associations: dict[str, AssociationEntry] = _Field(default_factory=dict)
    classes: dict[str, ClassEntry] = _Field(default_factory=dict)
    fields: dict[str, FieldEntry] = _Field(default_factory=dict)
    user_class_id: str | None = None

    def add_type(self, type_id: str, entry: TypeEntry) -> None:
        self.types[type_id] = entry

    def add_enum(self, enum_id: str, entry: EnumEntry) -> None:
        self.enums[enum_id] = entry

    def add_association(self, association_id: str, entry: AssociationEntry) -> None:
        self.associations[association_id] = entry

    def add_class(self, class_id: str, entry: ClassEntry) -> None:
        self.classes[class_id] = entry

    def add_field(self, field_id: str, entry: RegularField) -> None:
        self.fields[field_id] = entry

    def add_injected_field(self, field_id: str, entry: InjectedField) -> None:
        self.fields[field_id] = entry

    def add_field_to_class(self, class_id: str, field_id: str) -> None:
        _link(self.classes[class_id].fields, self.classes[class_id].injected_fields, field_id)

    def add_injected_field_to_class(self, class_id: str, field_id: str) -> None:
        _link(self.classes[class_id].injected_fields, self.classes[class_id].fields, field_id)

    def add_validation_to_field(self, field_id: str, name: str, value: str | None) -> None:
        self.fields[field_id].validations[name] = value

    def get_type(self, type_id: str) -> TypeEntry | None:
        return self.types.get(type_id)

    def get_field(self, field_id: str) -> RegularField | InjectedField | None:
        return self.fields.get(field_id)

    @property
    def regular_fields(self) -> dict[str, RegularField]:
        """Regular fields only, in insertion order."""
        return {k: f for k, f in self.fields.items() if isinstance(f, RegularField)}

    @property
    def injected_fields(self) -> dict[str, InjectedField]:
        """Injected fields only, in insertion order."""
        return {k: f for k, f in self.fields.items() if isinstance(f, InjectedField)}


# ################
# Implementation
# ################


def _link(target: list[str], other: list[str], field_id: str) -> None:
    if field_id in other:
        other.remove(field_id)
    if field_id not in target:
        target.append(field_id)
