"""The [Content_Types].xml part of a package."""

from __future__ import annotations

import xml.etree.ElementTree as ET
from dataclasses import dataclass, field
from xml.sax.saxutils import escape

NAMESPACE_CONTENT_TYPES = "http://schemas.openxmlformats.org/package/2006/content-types"

_ROOT_TAG = f"{{{NAMESPACE_CONTENT_TYPES}}}Types"
_ATTR_ENTITIES = {'"': "&#34;", "'": "&#39;", "\t": "&#x9;", "\n": "&#xA;", "\r": "&#xD;"}


def _attr(name: str, value: str) -> str:
    return f'{name}="{escape(value, _ATTR_ENTITIES)}"'


def _local(tag: str) -> str:
    return tag.rpartition("}")[2]


@dataclass
class TypeOverride:
    """Content type of a single part."""

    part_name: str
    content_type: str


@dataclass
class TypeDefault:
    """Content type of all parts with a file extension."""

    extension: str
    content_type: str


@dataclass
class ContentTypesXml:
    """The content of [Content_Types].xml."""

    overrides: list[TypeOverride] = field(default_factory=list)
    defaults: list[TypeDefault] = field(default_factory=list)

    def to_xml(self) -> bytes:
        """Serialize the content types, without an XML declaration."""
        parts = [f'<Types xmlns="{NAMESPACE_CONTENT_TYPES}">']
        parts.extend(
            f"<Override {_attr('PartName', item.part_name)} "
            f"{_attr('ContentType', item.content_type)}></Override>"
            for item in self.overrides
        )
        parts.extend(
            f"<Default {_attr('Extension', item.extension)} "
            f"{_attr('ContentType', item.content_type)}></Default>"
            for item in self.defaults
        )
        parts.append("</Types>")
        return "".join(parts).encode("utf-8")

    @classmethod
    def from_xml(cls, data: bytes | str) -> ContentTypesXml:
        """Parse a content types part."""
        root = ET.fromstring(data)
        if root.tag != _ROOT_TAG:
            raise ValueError(
                f"expected element <Types> in namespace {NAMESPACE_CONTENT_TYPES}, "
                f"but have <{root.tag}>"
            )
        result = cls()
        for child in root:
            name = _local(child.tag)
            if name == "Override":
                result.overrides.append(
                    TypeOverride(child.get("PartName", ""), child.get("ContentType", ""))
                )
            elif name == "Default":
                result.defaults.append(
                    TypeDefault(child.get("Extension", ""), child.get("ContentType", ""))
                )
        return result