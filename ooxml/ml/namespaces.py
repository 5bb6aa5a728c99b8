"""Well-known OOXML namespaces and their conventional prefixes."""

from __future__ import annotations

from dataclasses import dataclass
from types import MappingProxyType

NAMESPACE_XML = "http://www.w3.org/XML/1998/namespace"
NAMESPACE_RELATIONSHIPS = "http://schemas.openxmlformats.org/officeDocument/2006/relationships"
NAMESPACE_VML = "urn:schemas-microsoft-com:vml"
NAMESPACE_VML_OFFICE = "urn:schemas-microsoft-com:office:office"
NAMESPACE_VML_EXCEL = "urn:schemas-microsoft-com:office:excel"
NAMESPACE_VML_WORD = "urn:schemas-microsoft-com:office:word"
NAMESPACE_VML_POWERPOINT = "urn:schemas-microsoft-com:office:powerpoint"
NAMESPACE_DRAWING = "http://schemas.openxmlformats.org/drawingml/2006/main"
NAMESPACE_DRAWING_EXCEL = "http://schemas.openxmlformats.org/drawingml/2006/spreadsheetDrawing"
NAMESPACE_DRAWING_WORD = "http://schemas.openxmlformats.org/drawingml/2006/wordprocessingDrawing"
NAMESPACE_DRAWING_CHART = "http://schemas.openxmlformats.org/drawingml/2006/chart"

NAMESPACE_PREFIXES = MappingProxyType(
    {
        NAMESPACE_RELATIONSHIPS: "r",
        NAMESPACE_VML: "v",
        NAMESPACE_VML_OFFICE: "o",
        NAMESPACE_VML_EXCEL: "x",
        NAMESPACE_VML_WORD: "w",
        NAMESPACE_VML_POWERPOINT: "p",
        NAMESPACE_DRAWING: "a",
        NAMESPACE_DRAWING_EXCEL: "xdr",
        NAMESPACE_DRAWING_WORD: "wp",
        NAMESPACE_DRAWING_CHART: "c",
    }
)


@dataclass(frozen=True)
class XmlName:
    """A qualified XML name: namespace URI and local part."""

    space: str = ""
    local: str = ""


@dataclass(frozen=True)
class XmlAttr:
    """An XML attribute with a qualified name."""

    name: XmlName
    value: str = ""


class UnknownNamespaceError(LookupError):
    """Raised when no prefix is known for a namespace."""

    def __init__(self, namespace: str) -> None:
        super().__init__(f"can't resolve prefix for: {namespace}")
        self.namespace = namespace


def resolve_namespace_prefix(namespace: str) -> str | None:
    """Return the conventional prefix of a namespace, or None if unknown."""
    return NAMESPACE_PREFIXES.get(namespace)


def apply_namespace_prefix(namespace: str, name: XmlName) -> XmlName:
    """Prefix the local name for a known namespace and drop the namespace URI."""
    prefix = resolve_namespace_prefix(namespace)
    if prefix is None:
        return name
    return XmlName(local=f"{prefix}:{name.local}")


def namespaces(*args: str) -> list[XmlAttr]:
    """Return xmlns declarations for the known namespaces among args."""
    return [
        XmlAttr(XmlName(local=f"xmlns:{prefix}"), namespace)
        for namespace in args
        if (prefix := resolve_namespace_prefix(namespace)) is not None
    ]