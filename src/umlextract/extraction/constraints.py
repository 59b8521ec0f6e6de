# Copyright 2026 UMLExtract Contributors
# SPDX-License-Identifier: Apache-2.0

"""Binding of constraint declarations onto previously extracted fields."""

from __future__ import annotations

import logging

from umlextract.extraction.errors import ErrorKind, ExtractionError
from umlextract.extraction.indexer import ElementIndex
from umlextract.model.document import OwnedRule
from umlextract.model.parsed import ParsedModel
from umlextract.registry.types import TypeRegistry

logger = logging.getLogger(__name__)

# ###############
# Public Interface
# ###############

ENUM_TYPE_NAME = "Enum"


def bind_constraints(index: ElementIndex, model: ParsedModel, registry: TypeRegistry) -> ExtractionError | None:
    """Attach each constraint as a ``(name, value)`` validation on its field.

    Must run after fields are extracted. The validation name has to be
    supported by the registry for the field's resolved type; a rejected
    constraint leaves the field untouched.
    """
    for rule in index.constraints:
        error = _bind(rule, model, registry)
        if error is not None:
            return error
    logger.debug("Bound %d constraint(s)", len(index.constraints))
    return None


def resolve_type_name(model: ParsedModel, type_id: str | None) -> str | None:
    """Return the type name behind *type_id*, or None if it is neither a type nor an enum."""
    if type_id is None:
        return None
    entry = model.get_type(type_id)
    if entry is not None:
        return entry.name
    if type_id in model.enums:
        return ENUM_TYPE_NAME
    return None


# ################
# Implementation
# ################


def _bind(rule: OwnedRule, model: ParsedModel, registry: TypeRegistry) -> ExtractionError | None:
    name = rule.name
    if not name:
        return ExtractionError(
            ErrorKind.MISSING_VALIDATION_NAME,
            f"The constraint '{rule.id}' has no validation name.",
            rule.id,
        )

    field_id = rule.constrained_element or ""
    target = model.get_field(field_id)
    if target is None:
        return ExtractionError(
            ErrorKind.UNRESOLVED_REFERENCE,
            f"The validation '{name}' constrains '{field_id}', which is not a known field.",
            rule.id,
        )

    type_name = resolve_type_name(model, target.type_id)
    if type_name is None:
        return ExtractionError(
            ErrorKind.UNRESOLVED_REFERENCE,
            f"The type of field '{target.name}' could not be resolved for validation '{name}'.",
            rule.id,
        )

    if not registry.is_validation_supported_for_type(type_name, name):
        return ExtractionError(
            ErrorKind.UNSUPPORTED_VALIDATION,
            f"The validation '{name}' isn't supported for the type '{type_name}'.",
            rule.id,
        )

    # An empty specification value is kept; only a missing specification is None.
    model.add_validation_to_field(field_id, name, rule.specification)
    return None
