# Copyright 2026 UMLExtract Contributors
# SPDX-License-Identifier: Apache-2.0

"""Error taxonomy and result type of the extraction pipeline.

Phases report failure by returning an :class:`ExtractionError` rather than
raising; the first error ends the run and no partial model is handed out.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from umlextract.model.parsed import ParsedModel

# ###############
# Public Interface
# ###############


class ErrorKind(Enum):
    """Kinds of fatal extraction errors."""

    UNSUPPORTED_TYPE = "UnsupportedType"
    MISSING_NAME = "MissingName"
    MISSING_FIELD_TYPE = "MissingFieldType"
    MISSING_VALIDATION_NAME = "MissingValidationName"
    UNSUPPORTED_VALIDATION = "UnsupportedValidation"
    UNRESOLVED_REFERENCE = "UnresolvedReference"


@dataclass(frozen=True)
class ExtractionError:
    """A fatal error detected while extracting the model.

    Attributes:
        kind: Category of the error.
        message: Human-readable description, meant to be shown verbatim.
        element_id: Id of the offending element, when it has one.
    """

    kind: ErrorKind
    message: str
    element_id: str | None = None


class ExtractionFailed(Exception):
    """Raised by :meth:`ExtractionResult.unwrap` when the run failed."""

    def __init__(self, error: ExtractionError) -> None:
        super().__init__(error.message)
        self.error = error


@dataclass
class ExtractionResult:
    """Outcome of one extraction run: either a model or an error, never both."""

    model: ParsedModel | None = None
    error: ExtractionError | None = None

    @property
    def ok(self) -> bool:
        """Return True if the run produced a model."""
        return self.error is None

    def unwrap(self) -> ParsedModel:
        """Return the model, raising :class:`ExtractionFailed` if the run failed."""
        if self.error is not None:
            raise ExtractionFailed(self.error)
        assert self.model is not None
        return self.model
