import xml.etree.ElementTree as ET

import pytest

from ooxml.ml.tri_state import TriState, parse_bool, parse_tri_state, tri_state


def test_string_forms():
    assert str(parse_tri_state("")) == ""
    assert str(tri_state(True)) == "true"
    assert str(tri_state(False)) == "false"


def test_attr_persist_blank():
    element = ET.Element("Element", {"state": str(TriState.BLANK)})
    encoded = ET.tostring(element, encoding="unicode", short_empty_elements=False)
    assert encoded == '<Element state=""></Element>'
    decoded = ET.fromstring(encoded)
    assert parse_tri_state(decoded.get("state")) is TriState.BLANK


@pytest.mark.parametrize("state", list(TriState))
def test_attr_omit_empty(state):
    attrs = {"state": str(state)} if state else {}
    encoded = ET.tostring(ET.Element("Element", attrs), encoding="unicode",
                          short_empty_elements=False)
    if state is TriState.BLANK:
        assert encoded == "<Element></Element>"
    else:
        assert encoded == f'<Element state="{state}"></Element>'
    decoded = ET.fromstring(encoded)
    assert parse_tri_state(decoded.get("state", "")) is state


def test_element_persist_blank():
    root = ET.Element("Element")
    ET.SubElement(root, "state").text = str(TriState.BLANK)
    encoded = ET.tostring(root, encoding="unicode", short_empty_elements=False)
    assert encoded == "<Element><state></state></Element>"
    text = ET.fromstring(encoded).find("state").text or ""
    assert parse_tri_state(text) is TriState.BLANK


@pytest.mark.parametrize("state", [TriState.TRUE, TriState.FALSE])
def test_element_round_trip(state):
    root = ET.Element("Element")
    ET.SubElement(root, "state").text = str(state)
    encoded = ET.tostring(root, encoding="unicode")
    assert encoded == f"<Element><state>{state}</state></Element>"
    assert parse_tri_state(ET.fromstring(encoded).find("state").text) is state


def test_blank_variants():
    assert parse_tri_state("", TriState.TRUE) is TriState.TRUE
    assert parse_tri_state("", TriState.FALSE) is TriState.FALSE
    assert parse_tri_state("0", TriState.TRUE) is TriState.FALSE


def test_parse_invalid_raises():
    with pytest.raises(ValueError):
        parse_tri_state("yes")


def test_parse_bool_words():
    assert parse_bool("T") is True
    assert parse_bool("1") is True
    assert parse_bool("False") is False
    with pytest.raises(ValueError):
        parse_bool("tRuE")


@pytest.mark.parametrize(
    "value,expected",
    [
        (True, TriState.TRUE),
        (False, TriState.FALSE),
        ("true", TriState.TRUE),
        ("0", TriState.FALSE),
        ("", TriState.FALSE),
        ("junk", TriState.FALSE),
        (1, TriState.FALSE),
    ],
)
def test_tri_state(value, expected):
    assert tri_state(value) is expected