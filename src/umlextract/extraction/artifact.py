# Copyright 2026 UMLExtract Contributors
# SPDX-License-Identifier: Apache-2.0

"""Serialization of extracted models as versioned JSON artifacts."""

from __future__ import annotations

import json
from pathlib import Path

from umlextract.model.parsed import ParsedModel

# ###############
# Public Interface
# ###############

ARTIFACT_FORMAT_VERSION = "1"
ARTIFACT_SUFFIX = ".model.json"


def serialize(model: ParsedModel, *, indent: int | None = None) -> str:
    """Serialize a ParsedModel to a JSON string."""
    obj = {"v": ARTIFACT_FORMAT_VERSION, **model.model_dump(mode="json")}
    if indent is None:
        return json.dumps(obj, separators=(",", ":"))
    return json.dumps(obj, indent=indent)


def deserialize(data: str) -> ParsedModel:
    """Deserialize a ParsedModel from a JSON string.

    Raises:
        ValueError: If the artifact format version is not recognised.
    """
    obj = json.loads(data)
    version = obj.pop("v", None)
    if version != ARTIFACT_FORMAT_VERSION:
        raise ValueError(f"Unsupported artifact format version: {version!r}")
    return ParsedModel.model_validate(obj)


def write_artifact(model: ParsedModel, path: Path) -> None:
    """Write an artifact to *path*, creating parent directories as needed."""
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(serialize(model, indent=2), encoding="utf-8")


def read_artifact(path: Path) -> ParsedModel:
    """Read and deserialize an artifact from *path*."""
    return deserialize(path.read_text(encoding="utf-8"))
