# Copyright 2026 UMLExtract Contributors
# SPDX-License-Identifier: Apache-2.0

"""Type-support registries consulted during extraction."""

from umlextract.registry.loader import load_database_types
from umlextract.registry.types import (
    DatabaseTypes,
    RegistryError,
    TypeRegistry,
    builtin_database_types,
    get_database_types,
)

__all__ = [
    "DatabaseTypes",
    "RegistryError",
    "TypeRegistry",
    "builtin_database_types",
    "get_database_types",
    "load_database_types",
]
