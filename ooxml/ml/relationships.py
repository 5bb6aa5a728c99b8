"""The package relationships part and helpers for r:id references."""

from __future__ import annotations

import xml.etree.ElementTree as ET
from dataclasses import dataclass, field
from enum import IntEnum
from xml.sax.saxutils import escape

from ooxml.ml.namespaces import (
    NAMESPACE_RELATIONSHIPS,
    UnknownNamespaceError,
    XmlAttr,
    XmlName,
    apply_namespace_prefix,
    resolve_namespace_prefix,
)

NAMESPACE_PACKAGE_RELATIONSHIPS = "http://schemas.openxmlformats.org/package/2006/relationships"

_ROOT_TAG = f"{{{NAMESPACE_PACKAGE_RELATIONSHIPS}}}Relationships"
_ATTR_ENTITIES = {'"': "&#34;", "'": "&#39;", "\t": "&#x9;", "\n": "&#xA;", "\r": "&#xD;"}


def _attr(name: str, value: str) -> str:
    return f'{name}="{escape(value, _ATTR_ENTITIES)}"'


def _local(tag: str) -> str:
    return tag.rpartition("}")[2]


class TargetMode(IntEnum):
    """Whether a relationship points inside the package or outside of it."""

    INTERNAL = 0
    EXTERNAL = 1


def _parse_target_mode(text: str) -> TargetMode:
    return TargetMode.EXTERNAL if text == "External" else TargetMode.INTERNAL


@dataclass
class Relation:
    """A single relationship of a part."""

    id: str
    target: str
    type: str
    target_mode: TargetMode = TargetMode.INTERNAL


@dataclass
class RelationshipsXml:
    """The content of a relationships part."""

    relationships: list[Relation] = field(default_factory=list)

    def before_marshal(self) -> RelationshipsXml | None:
        """Return None when there is nothing to write, so the part is left out."""
        return self if self.relationships else None

    def to_xml(self) -> bytes:
        """Serialize the relationships, without an XML declaration."""
        parts = [f'<Relationships xmlns="{NAMESPACE_PACKAGE_RELATIONSHIPS}">']
        for rel in self.relationships:
            attrs = [_attr("Id", rel.id), _attr("Target", rel.target), _attr("Type", rel.type)]
            if rel.target_mode is TargetMode.EXTERNAL:
                attrs.append(_attr("TargetMode", "External"))
            parts.append(f"<Relationship {' '.join(attrs)}></Relationship>")
        parts.append("</Relationships>")
        return "".join(parts).encode("utf-8")

    @classmethod
    def from_xml(cls, data: bytes | str) -> RelationshipsXml:
        """Parse a relationships part."""
        root = ET.fromstring(data)
        if root.tag != _ROOT_TAG:
            raise ValueError(
                f"expected element <Relationships> in namespace "
                f"{NAMESPACE_PACKAGE_RELATIONSHIPS}, but have <{root.tag}>"
            )
        return cls(
            [
                Relation(
                    id=child.get("Id", ""),
                    target=child.get("Target", ""),
                    type=child.get("Type", ""),
                    target_mode=_parse_target_mode(child.get("TargetMode", "")),
                )
                for child in root
                if _local(child.tag) == "Relationship"
            ]
        )


def rid_attribute(name: XmlName | str, rid: str) -> XmlAttr:
    """Return a relationship reference attribute such as r:id="rId1"."""
    if isinstance(name, str):
        name = XmlName(local=name)
    return XmlAttr(apply_namespace_prefix(NAMESPACE_RELATIONSHIPS, name), rid)


def rid_namespace_attribute() -> XmlAttr:
    """Return the xmlns declaration for the relationships namespace prefix."""
    prefix = resolve_namespace_prefix(NAMESPACE_RELATIONSHIPS)
    if prefix is None:
        raise UnknownNamespaceError(NAMESPACE_RELATIONSHIPS)
    return XmlAttr(XmlName(local=f"xmlns:{prefix}"), NAMESPACE_RELATIONSHIPS)