# Copyright 2026 UMLExtract Contributors
# SPDX-License-Identifier: Apache-2.0

"""In-memory element tree of a UML object model document.

The tree mirrors the structure of an XMI export: a root exposing its packaged
elements and its owned rules. Every node carries its ``xmi:id`` and, for
packaged elements and rules, a ``kind`` discriminant (``uml:Class``,
``uml:Constraint``, ...).
"""

from __future__ import annotations

from pydantic import BaseModel
from pydantic import Field as _Field

# ###############
# Public Interface
# ###############

PRIMITIVE_TYPE_KIND = "uml:PrimitiveType"
ENUMERATION_KIND = "uml:Enumeration"
CLASS_KIND = "uml:Class"
ASSOCIATION_KIND = "uml:Association"
PACKAGE_KIND = "uml:Package"
CONSTRAINT_KIND = "uml:Constraint"


class Comment(BaseModel):
    """An owned comment; only its body is of interest."""

    body: str | None = None


class UpperValue(BaseModel):
    """An upper-bound multiplicity marker (``*`` for unbounded)."""

    value: str | None = None


class TypeReference(BaseModel):
    """A link to a type defined outside the document, e.g. a UML primitive library."""

    href: str


class OwnedLiteral(BaseModel):
    """A literal of an enumeration."""

    id: str = ""
    name: str | None = None


class OwnedEnd(BaseModel):
    """A navigable end owned by an association."""

    id: str = ""
    name: str | None = None
    type: str | None = None
    upper_value: UpperValue | None = None


class OwnedAttribute(BaseModel):
    """An attribute of a class.

    ``type`` holds an inline type id; ``type_ref`` an external type link.
    An attribute with an ``association`` id is one end of a relationship.
    """

    id: str = ""
    name: str | None = None
    type: str | None = None
    association: str | None = None
    type_ref: TypeReference | None = None
    upper_value: UpperValue | None = None
    comments: list[Comment] = _Field(default_factory=list)


class OwnedRule(BaseModel):
    """A rule owned by the model or a package; constraints bind validations."""

    kind: str
    id: str = ""
    name: str | None = None
    constrained_element: str | None = None
    specification: str | None = None


class PackagedElement(BaseModel):
    """A packaged element; which sub-lists are populated depends on its kind."""

    kind: str
    id: str = ""
    name: str | None = None
    attributes: list[OwnedAttribute] = _Field(default_factory=list)
    literals: list[OwnedLiteral] = _Field(default_factory=list)
    comments: list[Comment] = _Field(default_factory=list)
    ends: list[OwnedEnd] = _Field(default_factory=list)
    elements: list[PackagedElement] = _Field(default_factory=list)
    rules: list[OwnedRule] = _Field(default_factory=list)


class ModelDocument(BaseModel):
    """Root of the element tree."""

    name: str | None = None
    elements: list[PackagedElement] = _Field(default_factory=list)
    rules: list[OwnedRule] = _Field(default_factory=list)


# Resolve forward references in self-referential models.
PackagedElement.model_rebuild()
