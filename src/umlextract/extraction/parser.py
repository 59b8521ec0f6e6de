# Copyright 2026 UMLExtract Contributors
# SPDX-License-Identifier: Apache-2.0

"""Model extraction pipeline for UML element trees.

Converts a :class:`ModelDocument` into a :class:`ParsedModel` in one pass per
phase. The phases run in a fixed order because each reads what the previous
ones wrote:

1. indexing of elements by kind,
2. primitive type registration,
3. enumerations,
4. associations,
5. classes and their fields,
6. constraint binding.
"""

from __future__ import annotations

import logging
from typing import Protocol

from umlextract.extraction.constraints import bind_constraints
from umlextract.extraction.errors import ExtractionResult
from umlextract.extraction.extractors import fill_associations, fill_classes_and_fields, fill_enums, fill_types
from umlextract.extraction.indexer import index_elements
from umlextract.model.document import ModelDocument
from umlextract.model.parsed import ParsedModel
from umlextract.registry.types import TypeRegistry

logger = logging.getLogger(__name__)

# ###############
# Public Interface
# ###############


class ModelParser(Protocol):
    """A parser for the element tree exported by one modelling tool."""

    def parse(self) -> ExtractionResult: ...


class ModelioParser:
    """Parser for element trees exported by Modelio."""

    def __init__(self, document: ModelDocument, registry: TypeRegistry) -> None:
        self._document = document
        self._registry = registry

    def parse(self) -> ExtractionResult:
        """Run every phase; the first error aborts the run and discards the model."""
        index = index_elements(self._document)
        logger.debug(
            "Indexed %d type(s), %d enum(s), %d class(es), %d association(s), %d constraint(s)",
            len(index.types),
            len(index.enums),
            len(index.classes),
            len(index.associations),
            len(index.constraints),
        )

        model = ParsedModel()
        error = fill_types(index, model, self._registry) or fill_enums(index, model)
        if error is None:
            fill_associations(index, model)
            error = fill_classes_and_fields(index, model, self._registry) or bind_constraints(
                index, model, self._registry
            )

        if error is not None:
            logger.info("Extraction failed (%s): %s", error.kind.value, error.message)
            return ExtractionResult(error=error)
        return ExtractionResult(model=model)


PARSERS: dict[str, type[ModelParser]] = {
    "modelio": ModelioParser,
}


def get_parser(editor: str, document: ModelDocument, registry: TypeRegistry) -> ModelParser:
    """Return the parser for *editor* (case-insensitive).

    Raises:
        ValueError: If no parser handles that editor.
    """
    try:
        parser_class = PARSERS[editor.lower()]
    except KeyError:
        known = ", ".join(sorted(PARSERS))
        raise ValueError(f"Unsupported editor '{editor}' (expected one of: {known})") from None
    return parser_class(document, registry)


def extract(document: ModelDocument, registry: TypeRegistry, *, editor: str = "modelio") -> ParsedModel:
    """Extract *document* and return the model.

    Raises:
        ExtractionFailed: If the document is malformed or not supported by
            *registry*.
        ValueError: If *editor* has no parser.
    """
    return get_parser(editor, document, registry).parse().unwrap()
