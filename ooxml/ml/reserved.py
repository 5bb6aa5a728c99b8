"""Containers that keep unrecognised XML content as it was read."""

from __future__ import annotations

import xml.etree.ElementTree as ET
from dataclasses import dataclass, field
from xml.sax.saxutils import escape

from ooxml.index import Code, hash_string
from ooxml.ml.namespaces import NAMESPACE_PREFIXES, XmlAttr, XmlName, apply_namespace_prefix


def _split_name(tag: str) -> XmlName:
    if tag.startswith("{"):
        space, _, local = tag[1:].partition("}")
        return XmlName(space=space, local=local)
    return XmlName(local=tag)


def _join_name(name: XmlName) -> str:
    return f"{{{name.space}}}{name.local}" if name.space else name.local


def _inner_xml(element: ET.Element) -> str:
    parts = [escape(element.text or "")]
    parts.extend(ET.tostring(child, encoding="unicode") for child in element)
    return "".join(parts).replace(" />", "/>")


def _wrapper_open() -> str:
    declarations = " ".join(
        f'xmlns:{prefix}="{namespace}"' for namespace, prefix in NAMESPACE_PREFIXES.items()
    )
    return f"<_inner {declarations}>"


@dataclass
class ReservedAttributes:
    """Attributes that no field captured, kept as they were read."""

    attrs: list[XmlAttr] = field(default_factory=list)

    def resolve_namespace_prefixes(self) -> None:
        """Replace known attribute namespaces with their prefixes."""
        self.attrs[:] = [
            XmlAttr(apply_namespace_prefix(attr.name.space, attr.name), attr.value)
            for attr in self.attrs
        ]


@dataclass
class Reserved(ReservedAttributes):
    """An element kept whole: its name, attributes and inner markup."""

    name: XmlName = field(default_factory=XmlName)
    inner_xml: str = ""

    def hash(self) -> Code:
        """Hash of the inner markup and attributes; the name is ignored."""
        return reserved_hash(self)

    @classmethod
    def from_element(cls, element: ET.Element) -> Reserved:
        """Capture an element read by ElementTree."""
        attrs = [XmlAttr(_split_name(key), value) for key, value in element.attrib.items()]
        return cls(attrs=attrs, name=_split_name(element.tag), inner_xml=_inner_xml(element))

    def to_element(self) -> ET.Element:
        """Rebuild an ElementTree element from the captured content."""
        element = ET.Element(
            _join_name(self.name),
            {_join_name(attr.name): attr.value for attr in self.attrs},
        )
        if self.inner_xml:
            wrapper = ET.fromstring(_wrapper_open() + self.inner_xml + "</_inner>")
            element.text = wrapper.text
            element.extend(list(wrapper))
        return element


@dataclass
class ReservedElements:
    """Child elements that no field captured, kept as they were read."""

    nodes: list[Reserved] = field(default_factory=list)

    def resolve_namespace_prefixes(self) -> None:
        """Replace known namespaces of nodes and their attributes with prefixes."""
        for node in self.nodes:
            node.name = apply_namespace_prefix(node.name.space, node.name)
            node.resolve_namespace_prefixes()


def reserved_hash(reserved: Reserved | None) -> Code:
    """Hash a reserved element; None hashes like an empty one."""
    if reserved is None:
        reserved = Reserved()
    parts = [reserved.inner_xml]
    for attr in reserved.attrs:
        parts.extend((attr.name.space, attr.name.local, attr.value))
    return hash_string(":".join(parts))