# Copyright 2026 UMLExtract Contributors
# SPDX-License-Identifier: Apache-2.0

"""Reading XMI exports into the in-memory element tree."""

from umlextract.xmi.reader import XmiReadError, parse_xmi, read_xmi

__all__ = [
    "XmiReadError",
    "parse_xmi",
    "read_xmi",
]
