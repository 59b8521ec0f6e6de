# Copyright 2026 UMLExtract Contributors
# SPDX-License-Identifier: Apache-2.0

"""Tests for element classification by kind."""

from umlextract.extraction.indexer import index_elements
from umlextract.model import (
    ASSOCIATION_KIND,
    CLASS_KIND,
    CONSTRAINT_KIND,
    ENUMERATION_KIND,
    PACKAGE_KIND,
    PRIMITIVE_TYPE_KIND,
    ModelDocument,
    OwnedRule,
    PackagedElement,
)

# ###############
# Helpers
# ###############


def _element(
    kind: str, element_id: str, *children: PackagedElement, rules: list[OwnedRule] | None = None
) -> PackagedElement:
    """Build an element of the given kind with nested children."""
    return PackagedElement(kind=kind, id=element_id, elements=list(children), rules=rules or [])


def _ids(elements: list[PackagedElement] | list[OwnedRule]) -> list[str]:
    """Return the ids of the given elements."""
    return [e.id for e in elements]


# ###############
# Tests
# ###############


def test_empty_document() -> None:
    index = index_elements(ModelDocument())
    assert index.types == []
    assert index.classes == []
    assert index.constraints == []


def test_elements_are_bucketed_in_order() -> None:
    document = ModelDocument(
        elements=[
            _element(CLASS_KIND, "c1"),
            _element(PRIMITIVE_TYPE_KIND, "t1"),
            _element(ENUMERATION_KIND, "e1"),
            _element(CLASS_KIND, "c2"),
            _element(ASSOCIATION_KIND, "a1"),
        ]
    )
    index = index_elements(document)

    assert _ids(index.types) == ["t1"]
    assert _ids(index.enums) == ["e1"]
    assert _ids(index.classes) == ["c1", "c2"]
    assert _ids(index.associations) == ["a1"]


def test_other_kinds_are_ignored() -> None:
    document = ModelDocument(elements=[_element("uml:Interface", "i1"), _element("uml:Dependency", "d1")])
    index = index_elements(document)
    assert index.classes == [] and index.types == [] and index.enums == [] and index.associations == []


def test_nested_packages_are_traversed_depth_first() -> None:
    document = ModelDocument(
        elements=[
            _element(CLASS_KIND, "c1"),
            _element(
                PACKAGE_KIND,
                "p1",
                _element(CLASS_KIND, "c2"),
                _element(PACKAGE_KIND, "p2", _element(CLASS_KIND, "c3"), _element(ENUMERATION_KIND, "e1")),
                _element(CLASS_KIND, "c4"),
            ),
            _element(CLASS_KIND, "c5"),
        ]
    )
    index = index_elements(document)

    assert _ids(index.classes) == ["c1", "c2", "c3", "c4", "c5"]
    assert _ids(index.enums) == ["e1"]


def test_only_constraints_are_selected_from_rules() -> None:
    document = ModelDocument(
        rules=[
            OwnedRule(kind=CONSTRAINT_KIND, id="r1", name="required"),
            OwnedRule(kind="uml:InteractionConstraint", id="r2", name="guard"),
            OwnedRule(kind=CONSTRAINT_KIND, id="r3", name="maxlength"),
        ]
    )
    assert _ids(index_elements(document).constraints) == ["r1", "r3"]


def test_constraints_of_nested_packages_are_collected() -> None:
    nested_rule = OwnedRule(kind=CONSTRAINT_KIND, id="r2", name="min")
    document = ModelDocument(
        elements=[_element(PACKAGE_KIND, "p1", rules=[nested_rule])],
        rules=[OwnedRule(kind=CONSTRAINT_KIND, id="r1", name="required")],
    )
    assert _ids(index_elements(document).constraints) == ["r2", "r1"]
