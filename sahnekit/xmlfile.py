"""Loading XML documents into a simple node tree."""

from __future__ import annotations

import xml.etree.ElementTree as ET
from dataclasses import dataclass, field
from os import PathLike


class XmlError(ValueError):
    """The document is malformed or has no root element."""


@dataclass
class XmlNode:
    """An element with its local name, attributes, children and text."""

    name: str
    attributes: list[tuple[str, str]] = field(default_factory=list)
    children: list["XmlNode"] = field(default_factory=list)
    text: str | None = None


def _local(name: str) -> str:
    return name.rpartition("}")[2]


def _collect(text: str | None, buffer: list[str]) -> None:
    # Whitespace-only runs between tags are not character data.
    if text and text.strip():
        buffer.append(text)


def _build(elem: ET.Element, buffer: list[str]) -> XmlNode:
    node = XmlNode(
        name=_local(elem.tag),
        attributes=[(_local(key), value) for key, value in elem.attrib.items()],
    )
    _collect(elem.text, buffer)
    for child in elem:
        node.children.append(_build(child, buffer))
        _collect(child.tail, buffer)
    # Pending character data goes to the element that closes next.
    if buffer:
        node.text = "".join(buffer).strip()
        buffer.clear()
    return node


@dataclass
class XmlFile:
    """A parsed XML document."""

    root: XmlNode

    @classmethod
    def from_string(cls, text: str | bytes) -> "XmlFile":
        try:
            element = ET.fromstring(text)
        except ET.ParseError as exc:
            raise XmlError(f"malformed XML: {exc}") from exc
        return cls(_build(element, []))

    @classmethod
    def read_from_file(cls, path: str | PathLike[str]) -> "XmlFile":
        with open(path, "rb") as handle:
            return cls.from_string(handle.read())