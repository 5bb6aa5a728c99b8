"""Value properties of the form <name val="..."/>."""

from __future__ import annotations

import math
import re
import xml.etree.ElementTree as ET
from decimal import Decimal

from ooxml.ml.namespaces import NAMESPACE_XML, XmlAttr, XmlName
from ooxml.ml.tri_state import parse_bool

_INT_RE = re.compile(r"[+-]?[0-9]+")
_INT_MIN = -(2**63)
_INT_MAX = 2**63 - 1


def format_property_value(value: str | bool | int | float) -> str:
    """Format a property value the way it is written into a val attribute."""
    if isinstance(value, str):
        return value
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, int):
        return str(value)
    if isinstance(value, float):
        if math.isnan(value):
            return "NaN"
        if math.isinf(value):
            return "+Inf" if value > 0 else "-Inf"
        text = format(Decimal(repr(value)), "f")
        if "." in text:
            text = text.rstrip("0").rstrip(".")
        return text
    raise TypeError(f"unsupported property value: {value!r}")


def property_element(tag: str, value: str | bool | int | float) -> ET.Element:
    """Build an element carrying the value in its val attribute."""
    return ET.Element(tag, {"val": format_property_value(value)})


def _first_attr(element: ET.Element) -> str | None:
    return next(iter(element.attrib.values()), None)


def parse_property(element: ET.Element) -> str:
    """Return the string value of a property element."""
    value = _first_attr(element)
    return "" if value is None else value


def parse_property_bool(element: ET.Element) -> bool:
    """Return the boolean value of a property; a bare element means True."""
    value = _first_attr(element)
    if value is None:
        return True
    try:
        return parse_bool(value)
    except ValueError:
        return False


def parse_property_int(element: ET.Element) -> int:
    """Return the integer value of a property, 0 if absent or invalid."""
    value = _first_attr(element)
    if value is None or not _INT_RE.fullmatch(value):
        return 0
    number = int(value)
    if not _INT_MIN <= number <= _INT_MAX:
        return 0
    return number


def parse_property_double(element: ET.Element) -> float:
    """Return the float value of a property, 0.0 if absent or invalid."""
    value = _first_attr(element)
    if value is None or value != value.strip() or "_" in value:
        return 0.0
    try:
        return float(value)
    except ValueError:
        return 0.0


def preserve_space_attr() -> XmlAttr:
    """Return the xml:space="preserve" attribute."""
    return XmlAttr(XmlName(space=NAMESPACE_XML, local="space"), "preserve")