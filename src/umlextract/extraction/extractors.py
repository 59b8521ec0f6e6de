# Copyright 2026 UMLExtract Contributors
# SPDX-License-Identifier: Apache-2.0

"""Extraction phases building types, enums, associations, classes and fields.

Each ``fill_*`` function makes a single pass over its bucket of the element
index and writes into the :class:`ParsedModel`. Failures are returned, not
raised: the first :class:`ExtractionError` stops the pass.
"""

from __future__ import annotations

import logging

from umlextract.extraction.errors import ErrorKind, ExtractionError
from umlextract.extraction.helpers import capitalize, cardinality, decapitalize, is_an_id, type_name_from_url
from umlextract.extraction.indexer import ElementIndex
from umlextract.model.document import Comment, OwnedAttribute, PackagedElement
from umlextract.model.parsed import (
    AssociationEntry,
    ClassEntry,
    EnumEntry,
    InjectedField,
    ParsedModel,
    RegularField,
    TypeEntry,
)
from umlextract.registry.types import TypeRegistry

logger = logging.getLogger(__name__)

# ###############
# Public Interface
# ###############


def register_type(model: ParsedModel, registry: TypeRegistry, name: str, type_id: str) -> ExtractionError | None:
    """Register a primitive type under *type_id* if the registry supports it.

    Registering the same id and name again leaves the model unchanged.
    """
    type_name = capitalize(name)
    if not registry.contains(type_name):
        return ExtractionError(
            ErrorKind.UNSUPPORTED_TYPE,
            f"The type '{type_name}' isn't supported by the '{_registry_label(registry)}' registry.",
            type_id,
        )
    model.add_type(type_id, TypeEntry(id=type_id, name=type_name))
    return None


def fill_types(index: ElementIndex, model: ParsedModel, registry: TypeRegistry) -> ExtractionError | None:
    """Register every primitive type declared in the document."""
    for element in index.types:
        error = register_type(model, registry, element.name or "", element.id)
        if error is not None:
            return error
    logger.debug("Registered %d primitive type(s)", len(model.types))
    return None


def fill_enums(index: ElementIndex, model: ParsedModel) -> ExtractionError | None:
    """Build every enumeration from its literals."""
    for element in index.enums:
        if not element.name:
            return ExtractionError(ErrorKind.MISSING_NAME, "The enumeration's name can't be empty.", element.id)
        values: list[str] = []
        for literal in element.literals:
            if not literal.name:
                return ExtractionError(
                    ErrorKind.MISSING_NAME,
                    f"The values of enumeration '{element.name}' can't be empty.",
                    literal.id or element.id,
                )
            values.append(literal.name.upper())
        model.add_enum(element.id, EnumEntry(id=element.id, name=element.name, values=values))
    logger.debug("Extracted %d enumeration(s)", len(model.enums))
    return None


def fill_associations(index: ElementIndex, model: ParsedModel) -> None:
    """Record each association's first owned end; an association without one is kept with defaults."""
    for element in index.associations:
        entry = AssociationEntry(id=element.id)
        if element.ends:
            end = element.ends[0]
            entry.name = end.name or ""
            entry.type_id = end.type or ""
            entry.has_upper_multiplicity = end.upper_value is not None
        model.add_association(element.id, entry)
    logger.debug("Extracted %d association(s)", len(model.associations))


def fill_classes_and_fields(
    index: ElementIndex,
    model: ParsedModel,
    registry: TypeRegistry,
) -> ExtractionError | None:
    """Build every class and route its attributes to regular or injected fields.

    Identifier attributes are skipped. The first class named ``user``
    (ignoring case) becomes the model's user class.
    """
    for element in index.classes:
        if not element.name:
            return ExtractionError(ErrorKind.MISSING_NAME, "Classes must have a name.", element.id)
        if model.user_class_id is None and element.name.lower() == "user":
            model.user_class_id = element.id
        model.add_class(
            element.id,
            ClassEntry(id=element.id, name=element.name, comment=_first_comment(element.comments)),
        )
        error = _handle_attributes(element, model, registry)
        if error is not None:
            return error
    logger.debug(
        "Extracted %d class(es), %d regular and %d injected field(s)",
        len(model.classes),
        len(model.regular_fields),
        len(model.injected_fields),
    )
    return None


# ################
# Implementation
# ################


def _registry_label(registry: TypeRegistry) -> str:
    return getattr(registry, "name", type(registry).__name__)


def _first_comment(comments: list[Comment]) -> str | None:
    if comments and comments[0].body:
        return comments[0].body
    return None


def _handle_attributes(element: PackagedElement, model: ParsedModel, registry: TypeRegistry) -> ExtractionError | None:
    for attribute in element.attributes:
        if not attribute.name:
            return ExtractionError(
                ErrorKind.MISSING_NAME,
                f"No name is defined for the passed attribute, for class '{element.name}'.",
                attribute.id or element.id,
            )
        if is_an_id(attribute.name, element.name or ""):
            continue
        if attribute.association:
            error = _add_injected_field(attribute, element.id, model)
        else:
            error = _add_regular_field(attribute, element, model, registry)
        if error is not None:
            return error
    return None


def _add_regular_field(
    attribute: OwnedAttribute,
    owner: PackagedElement,
    model: ParsedModel,
    registry: TypeRegistry,
) -> ExtractionError | None:
    assert attribute.name is not None
    if attribute.type:
        type_id = attribute.type
    elif attribute.type_ref is not None:
        # An externally referenced type is registered under its own name.
        type_id = capitalize(type_name_from_url(attribute.type_ref.href))
        error = register_type(model, registry, type_id, type_id)
        if error is not None:
            return error
    else:
        return ExtractionError(
            ErrorKind.MISSING_FIELD_TYPE,
            f"The field '{attribute.name}' of class '{owner.name}' does not possess any type.",
            attribute.id,
        )

    model.add_field(
        attribute.id,
        RegularField(
            id=attribute.id,
            name=decapitalize(attribute.name),
            type_id=type_id,
            comment=_first_comment(attribute.comments),
        ),
    )
    model.add_field_to_class(owner.id, attribute.id)
    return None


def _add_injected_field(attribute: OwnedAttribute, class_id: str, model: ParsedModel) -> ExtractionError | None:
    assert attribute.name is not None and attribute.association is not None
    association = model.associations.get(attribute.association)
    if association is None:
        return ExtractionError(
            ErrorKind.UNRESOLVED_REFERENCE,
            f"The field '{attribute.name}' refers to the unknown association '{attribute.association}'.",
            attribute.id,
        )

    has_upper: bool | None = None
    if attribute.upper_value is not None and attribute.upper_value.value:
        has_upper = attribute.upper_value.value == "*"

    model.add_injected_field(
        attribute.id,
        InjectedField(
            id=attribute.id,
            name=decapitalize(attribute.name),
            type_id=attribute.type,
            association_id=attribute.association,
            owner_class_id=class_id,
            has_upper_multiplicity=has_upper,
            cardinality=cardinality(has_upper, association.has_upper_multiplicity),
            comment=_first_comment(attribute.comments),
        ),
    )
    model.add_injected_field_to_class(class_id, attribute.id)
    return None
