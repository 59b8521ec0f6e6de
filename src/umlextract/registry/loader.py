# Copyright 2026 UMLExtract Contributors
# SPDX-License-Identifier: Apache-2.0

"""Loading custom type registries from YAML files.

A registry file names the registry and maps each supported type to the
validations allowed on it::

    name: warehouse
    types:
      String: [required, minlength, maxlength]
      Integer: [required, min, max]
      Boolean: [required]
"""

from pathlib import Path

import yaml
from pydantic import ValidationError

from umlextract.registry.types import DatabaseTypes, RegistryError

# ###############
# Public Interface
# ###############


def load_database_types(path: Path) -> DatabaseTypes:
    """Load and validate a registry file.

    A type mapped to nothing (``Boolean:``) supports no validations.

    Raises:
        RegistryError: If the file cannot be read, contains invalid YAML,
            or does not conform to the expected schema.
    """
    try:
        raw = path.read_text(encoding="utf-8")
    except OSError as exc:
        raise RegistryError(f"Cannot read type registry '{path}': {exc}") from exc

    try:
        data = yaml.safe_load(raw)
    except yaml.YAMLError as exc:
        raise RegistryError(f"Invalid YAML in type registry '{path}': {exc}") from exc

    if not isinstance(data, dict):
        raise RegistryError(f"{path}: type registry must be a YAML mapping")

    types = data.get("types")
    if isinstance(types, dict):
        data = {**data, "types": {name: validations or [] for name, validations in types.items()}}

    try:
        return DatabaseTypes.model_validate(data)
    except ValidationError as exc:
        raise RegistryError(f"Invalid type registry '{path}': {exc}") from exc
