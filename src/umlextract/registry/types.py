# Copyright 2026 UMLExtract Contributors
# SPDX-License-Identifier: Apache-2.0

"""Type-support registries: which primitive types and validations are permitted."""

from __future__ import annotations

from typing import Protocol

from pydantic import BaseModel, ConfigDict
from pydantic import Field as _Field

# ###############
# Public Interface
# ###############


class RegistryError(Exception):
    """Raised when a registry cannot be found, read, or is invalid."""


class TypeRegistry(Protocol):
    """Read-only policy consulted by the extraction pipeline."""

    def contains(self, type_name: str) -> bool: ...

    def is_validation_supported_for_type(self, type_name: str, validation_name: str) -> bool: ...


class DatabaseTypes(BaseModel):
    """A registry backed by a mapping from type name to its supported validations."""

    model_config = ConfigDict(frozen=True)

    name: str
    types: dict[str, list[str]] = _Field(default_factory=dict)

    def contains(self, type_name: str) -> bool:
        return type_name in self.types

    def is_validation_supported_for_type(self, type_name: str, validation_name: str) -> bool:
        return validation_name in self.types.get(type_name, [])


def builtin_database_types() -> list[str]:
    """Return the names of the built-in registries, sorted."""
    return sorted(_BUILTINS)


def get_database_types(name: str) -> DatabaseTypes:
    """Return the built-in registry called *name* (case-insensitive).

    Raises:
        RegistryError: If no built-in registry has that name.
    """
    try:
        return _BUILTINS[name.lower()]
    except KeyError:
        known = ", ".join(builtin_database_types())
        raise RegistryError(f"Unknown database type '{name}' (expected one of: {known})") from None


# ################
# Implementation
# ################

_TEXT = ["required", "minlength", "maxlength", "pattern"]
_NUMERIC = ["required", "min", "max"]
_REQUIRED = ["required"]
_BINARY = ["required", "minbytes", "maxbytes"]

_COMMON: dict[str, list[str]] = {
    "String": _TEXT,
    "Integer": _NUMERIC,
    "Long": _NUMERIC,
    "BigDecimal": _NUMERIC,
    "Float": _NUMERIC,
    "Double": _NUMERIC,
    "Boolean": _REQUIRED,
}

_SQL_AND_DOCUMENT: dict[str, list[str]] = {
    **_COMMON,
    "Enum": _REQUIRED,
    "LocalDate": _REQUIRED,
    "ZonedDateTime": _REQUIRED,
    "Blob": _BINARY,
    "AnyBlob": _BINARY,
    "ImageBlob": _BINARY,
}

_BUILTINS: dict[str, DatabaseTypes] = {
    "sql": DatabaseTypes(name="sql", types=_SQL_AND_DOCUMENT),
    "mongodb": DatabaseTypes(name="mongodb", types=_SQL_AND_DOCUMENT),
    "cassandra": DatabaseTypes(
        name="cassandra",
        types={**_COMMON, "Date": _REQUIRED, "UUID": _REQUIRED},
    ),
}
