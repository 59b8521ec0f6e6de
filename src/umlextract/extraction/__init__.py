# Copyright 2026 UMLExtract Contributors
# SPDX-License-Identifier: Apache-2.0

"""Extraction pipeline: element indexing, entity extraction, and constraint binding."""

from umlextract.extraction.artifact import ARTIFACT_SUFFIX, deserialize, read_artifact, serialize, write_artifact
from umlextract.extraction.errors import ErrorKind, ExtractionError, ExtractionFailed, ExtractionResult
from umlextract.extraction.indexer import ElementIndex, index_elements
from umlextract.extraction.parser import ModelioParser, ModelParser, extract, get_parser

__all__ = [
    "ARTIFACT_SUFFIX",
    "ElementIndex",
    "ErrorKind",
    "ExtractionError",
    "ExtractionFailed",
    "ExtractionResult",
    "ModelParser",
    "ModelioParser",
    "deserialize",
    "extract",
    "get_parser",
    "index_elements",
    "read_artifact",
    "serialize",
    "write_artifact",
]
