# Copyright 2026 UMLExtract Contributors
# SPDX-License-Identifier: Apache-2.0

"""Input element tree and extraction result model."""

from umlextract.model.document import (
    ASSOCIATION_KIND,
    CLASS_KIND,
    CONSTRAINT_KIND,
    ENUMERATION_KIND,
    PACKAGE_KIND,
    PRIMITIVE_TYPE_KIND,
    Comment,
    ModelDocument,
    OwnedAttribute,
    OwnedEnd,
    OwnedLiteral,
    OwnedRule,
    PackagedElement,
    TypeReference,
    UpperValue,
)
from umlextract.model.parsed import (
    AssociationEntry,
    Cardinality,
    ClassEntry,
    EnumEntry,
    FieldEntry,
    InjectedField,
    ParsedModel,
    RegularField,
    TypeEntry,
)

__all__ = [
    # Element kinds
    "PRIMITIVE_TYPE_KIND",
    "ENUMERATION_KIND",
    "CLASS_KIND",
    "ASSOCIATION_KIND",
    "PACKAGE_KIND",
    "CONSTRAINT_KIND",
    # Element tree
    "Comment",
    "UpperValue",
    "TypeReference",
    "OwnedLiteral",
    "OwnedEnd",
    "OwnedAttribute",
    "PackagedElement",
    "OwnedRule",
    "ModelDocument",
    # Extraction result
    "Cardinality",
    "TypeEntry",
    "EnumEntry",
    "AssociationEntry",
    "ClassEntry",
    "RegularField",
    "InjectedField",
    "FieldEntry",
    "ParsedModel",
]
