# Copyright 2026 UMLExtract Contributors
# SPDX-License-Identifier: Apache-2.0

"""Classification of a document's elements by declared kind."""

from __future__ import annotations

from dataclasses import dataclass, field

from umlextract.model.document import (
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
# Public Interface
# ###############


@dataclass
class ElementIndex:
    """Elements of interest, bucketed by kind, in document order."""

    types: list[PackagedElement] = field(default_factory=list)
    enums: list[PackagedElement] = field(default_factory=list)
    classes: list[PackagedElement] = field(default_factory=list)
    associations: list[PackagedElement] = field(default_factory=list)
    constraints: list[OwnedRule] = field(default_factory=list)


def index_elements(document: ModelDocument) -> ElementIndex:
    """Bucket every element of *document*, descending into nested packages.

    Packages are visited depth-first at the position they appear in, with the
    same rules as the top level; their owned rules are collected as well.
    Elements of any other kind are ignored. No validation happens here.
    """
    index = ElementIndex()
    _index_packaged(document.elements, index)
    _index_rules(document.rules, index)
    return index


# ################
# Implementation
# ################

_BUCKETS = {
    PRIMITIVE_TYPE_KIND: "types",
    ENUMERATION_KIND: "enums",
    CLASS_KIND: "classes",
    ASSOCIATION_KIND: "associations",
}


def _index_packaged(elements: list[PackagedElement], index: ElementIndex) -> None:
    for element in elements:
        if element.kind == PACKAGE_KIND:
            _index_packaged(element.elements, index)
            _index_rules(element.rules, index)
            continue
        bucket = _BUCKETS.get(element.kind)
        if bucket is not None:
            getattr(index, bucket).append(element)


def _index_rules(rules: list[OwnedRule], index: ElementIndex) -> None:
    index.constraints.extend(rule for rule in rules if rule.kind == CONSTRAINT_KIND)
