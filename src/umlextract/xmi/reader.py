# Copyright 2026 UMLExtract Contributors
# SPDX-License-Identifier: Apache-2.0

"""Reader turning an XMI export into a :class:`ModelDocument`.

Tags and attributes are matched by local name, so ``xmi:id``, ``{uri}id``
and a bare ``id`` all read the same. Only the parts of the export the
extraction pipeline uses are kept.
"""

from __future__ import annotations

import xml.etree.ElementTree as ET
from pathlib import Path

from umlextract.model.document import (
    Comment,
    ModelDocument,
    OwnedAttribute,
    OwnedEnd,
    OwnedLiteral,
    OwnedRule,
    PackagedElement,
    TypeReference,
    UpperValue,
)

# ###############
# Public Interface
# ###############


class XmiReadError(Exception):
    """Raised when an XMI file cannot be read or is not well-formed."""


def read_xmi(path: Path) -> ModelDocument:
    """Read the XMI file at *path*.

    Raises:
        XmiReadError: If the file cannot be read or parsed.
    """
    try:
        data = path.read_bytes()
    except OSError as exc:
        raise XmiReadError(f"Cannot read XMI file '{path}': {exc}") from exc
    # The XML declaration decides the encoding.
    return parse_xmi(data, source_label=str(path))


def parse_xmi(text: str | bytes, source_label: str = "<string>") -> ModelDocument:
    """Parse XMI text into a ModelDocument.

    The model root is the first ``Model`` element below an ``XMI`` wrapper,
    or the document element itself when there is no wrapper.

    Raises:
        XmiReadError: If the text is not well-formed XML or holds no model.
    """
    try:
        root = ET.fromstring(text)
    except ET.ParseError as exc:
        raise XmiReadError(f"Invalid XML in {source_label}: {exc}") from exc

    if _local(root.tag) == "XMI":
        model = next((child for child in root if _local(child.tag) == "Model"), None)
        if model is None:
            raise XmiReadError(f"{source_label}: no UML model found in XMI document")
        root = model

    return ModelDocument(
        name=_attr(root, "name"),
        elements=[_packaged_element(child) for child in _children(root, "packagedElement")],
        rules=[_owned_rule(child) for child in _children(root, "ownedRule")],
    )


# ################
# Implementation
# ################


def _local(name: str) -> str:
    """Strip a ``{uri}`` or ``prefix:`` qualifier from a tag or attribute name."""
    if name.startswith("{"):
        name = name.split("}", 1)[1]
    return name.rsplit(":", 1)[-1]


def _attr(element: ET.Element, name: str) -> str | None:
    """Return an unqualified attribute such as ``name`` or ``type`` (an inline type id)."""
    return element.get(name)


def _xmi_attr(element: ET.Element, local_name: str) -> str | None:
    """Return a namespace-qualified attribute such as ``xmi:type``."""
    for key, value in element.attrib.items():
        if key != local_name and _local(key) == local_name:
            return value
    return None


def _xmi_id(element: ET.Element) -> str:
    return _xmi_attr(element, "id") or element.get("id") or ""


def _children(element: ET.Element, local_name: str) -> list[ET.Element]:
    return [child for child in element if _local(child.tag) == local_name]


def _first_child(element: ET.Element, local_name: str) -> ET.Element | None:
    children = _children(element, local_name)
    return children[0] if children else None


def _comments(element: ET.Element) -> list[Comment]:
    comments: list[Comment] = []
    for child in _children(element, "ownedComment"):
        # The body is either a nested <body> element or an attribute.
        body_el = _first_child(child, "body")
        body = body_el.text if body_el is not None else _attr(child, "body")
        comments.append(Comment(body=body))
    return comments


def _upper_value(element: ET.Element) -> UpperValue | None:
    child = _first_child(element, "upperValue")
    if child is None:
        return None
    return UpperValue(value=_attr(child, "value"))


def _owned_attribute(element: ET.Element) -> OwnedAttribute:
    type_el = _first_child(element, "type")
    href = _attr(type_el, "href") if type_el is not None else None
    return OwnedAttribute(
        id=_xmi_id(element),
        name=_attr(element, "name"),
        type=_attr(element, "type"),
        association=_attr(element, "association"),
        type_ref=TypeReference(href=href) if href else None,
        upper_value=_upper_value(element),
        comments=_comments(element),
    )


def _packaged_element(element: ET.Element) -> PackagedElement:
    return PackagedElement(
        kind=_xmi_attr(element, "type") or "",
        id=_xmi_id(element),
        name=_attr(element, "name"),
        attributes=[_owned_attribute(child) for child in _children(element, "ownedAttribute")],
        literals=[
            OwnedLiteral(id=_xmi_id(child), name=_attr(child, "name"))
            for child in _children(element, "ownedLiteral")
        ],
        comments=_comments(element),
        ends=[
            OwnedEnd(
                id=_xmi_id(child),
                name=_attr(child, "name"),
                type=_attr(child, "type"),
                upper_value=_upper_value(child),
            )
            for child in _children(element, "ownedEnd")
        ],
        elements=[_packaged_element(child) for child in _children(element, "packagedElement")],
        rules=[_owned_rule(child) for child in _children(element, "ownedRule")],
    )


def _owned_rule(element: ET.Element) -> OwnedRule:
    specification = _first_child(element, "specification")
    value: str | None = None
    if specification is not None:
        value = _attr(specification, "value")
        if value is None:
            body_el = _first_child(specification, "body")
            if body_el is not None:
                value = body_el.text or ""
    return OwnedRule(
        kind=_xmi_attr(element, "type") or "",
        id=_xmi_id(element),
        name=_attr(element, "name"),
        constrained_element=_attr(element, "constrainedElement"),
        specification=value,
    )
