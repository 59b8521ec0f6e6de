# Copyright 2026 UMLExtract Contributors
# SPDX-License-Identifier: Apache-2.0

"""Naming and relationship rules shared by the extraction phases."""

import re

from umlextract.model.parsed import Cardinality

# ###############
# Public Interface
# ###############


def capitalize(name: str) -> str:
    """Upper-case the first character, leaving the rest untouched."""
    return name[:1].upper() + name[1:]


def decapitalize(name: str) -> str:
    """Lower-case the first character, leaving the rest untouched."""
    return name[:1].lower() + name[1:]


def is_an_id(attribute_name: str, class_name: str) -> bool:
    """Return True if *attribute_name* names an identifier of *class_name*.

    Matches ``id``, ``<class>Id`` and ``<class>_id`` regardless of case, and
    any camelCase or snake_case id reference such as ``customerId``.
    """
    lowered = attribute_name.lower()
    if lowered in {"id", f"{class_name.lower()}id", f"{class_name.lower()}_id"}:
        return True
    return _ID_REFERENCE.match(attribute_name) is not None


def type_name_from_url(url: str) -> str:
    """Return the type name a type reference URL points to.

    ``http://www.omg.org/spec/UML/20110701/PrimitiveTypes.xmi#String`` gives
    ``String``; without a fragment, the last path segment is used.
    """
    if "#" in url:
        return url.rsplit("#", 1)[1]
    return url.rstrip("/").rsplit("/", 1)[-1]


def cardinality(field_has_upper: bool | None, end_has_upper: bool) -> Cardinality:
    """Combine the multiplicity markers of a field and its association's end."""
    if field_has_upper and end_has_upper:
        return Cardinality.MANY_TO_MANY
    if field_has_upper:
        return Cardinality.ONE_TO_MANY
    if end_has_upper:
        return Cardinality.MANY_TO_ONE
    return Cardinality.ONE_TO_ONE


# ################
# Implementation
# ################

_ID_REFERENCE = re.compile(r"^(?:[a-z][A-Za-z0-9]*Id|[A-Za-z][A-Za-z0-9]*_(?:id|ID))$")
