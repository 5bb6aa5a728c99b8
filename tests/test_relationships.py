import io
import zipfile

import pytest

from ooxml.content_types import CONTENT_TYPE_RELATIONSHIPS, ContentTypes
from ooxml.ml.content import TypeOverride
from ooxml.ml.relationships import Relation, RelationshipsXml, TargetMode
from ooxml.relationships import Relationships

RELS = "_rels/.rels"
SHEET_TYPE = "http://schemas.openxmlformats.org/officeDocument/2006/relationships/worksheet"
LINK_TYPE = "http://schemas.openxmlformats.org/officeDocument/2006/relationships/hyperlink"


class _Pkg:
    def __init__(self):
        self.parts = {}
        self.content_types = ContentTypes("[Content_Types].xml", self)

    def add(self, name, content):
        self.parts[name] = content


def _loaded(relations):
    buffer = io.BytesIO()
    with zipfile.ZipFile(buffer, "w") as archive:
        archive.writestr(RELS, RelationshipsXml(relations).to_xml())
    buffer.seek(0)
    archive = zipfile.ZipFile(buffer)
    pkg = _Pkg()
    return Relationships(archive.getinfo(RELS), pkg, archive=archive), pkg


def test_new_relationships_register_content_type():
    pkg = _Pkg()
    rels = Relationships(RELS, pkg)
    assert rels.file_name == RELS
    assert TypeOverride("/" + RELS, CONTENT_TYPE_RELATIONSHIPS) in pkg.content_types.ml.overrides
    assert pkg.parts[RELS] is rels.ml
    assert len(rels) == 0


def test_add_file_and_lookup():
    rels = Relationships(RELS, _Pkg())
    previous, rid = rels.add_file(SHEET_TYPE, "xl/worksheets/sheet1.xml")
    assert rid == "rId1"
    assert previous == 0
    assert rels.target_by_id(rid) == "/xl/worksheets/sheet1.xml"
    assert rels.target_by_type(SHEET_TYPE) == "/xl/worksheets/sheet1.xml"
    assert rels.id_by_target("worksheets/sheet1.xml") == rid
    assert rels.ml.relationships[0].target_mode is TargetMode.INTERNAL


def test_add_link_is_external_and_matched_exactly():
    rels = Relationships(RELS, _Pkg())
    _, rid = rels.add_link(LINK_TYPE, "https://example.com/page")
    assert rels.ml.relationships[0].target_mode is TargetMode.EXTERNAL
    assert rels.id_by_target("https://example.com/page") == rid
    assert rels.id_by_target("example.com") == ""


def test_ids_follow_the_largest_existing_number():
    rels, _ = _loaded([Relation("rId7", "worksheets/sheet1.xml", SHEET_TYPE)])
    previous, rid = rels.add_file(SHEET_TYPE, "/xl/worksheets/sheet2.xml")
    assert previous == 7
    assert rid == "rId8"
    assert len(rels) == 2


def test_relative_internal_target_is_resolved_under_xl():
    rels, _ = _loaded([Relation("rId3", "worksheets/sheet1.xml", SHEET_TYPE)])
    assert rels.id_by_target("/xl/worksheets/sheet1.xml") == "rId3"


def test_missing_lookups_return_empty():
    rels = Relationships(RELS, _Pkg())
    assert rels.target_by_id("rId9") == ""
    assert rels.target_by_type(SHEET_TYPE) == ""
    assert rels.id_by_target("/xl/nothing.xml") == ""


def test_remove():
    rels = Relationships(RELS, _Pkg())
    _, first = rels.add_file(SHEET_TYPE, "xl/a.xml")
    _, second = rels.add_file(SHEET_TYPE, "xl/b.xml")
    rels.remove(first)
    assert [r.id for r in rels.ml.relationships] == [second]
    rels.remove("unknown")
    assert len(rels) == 1


def test_change_of_loaded_part_is_registered():
    rels, pkg = _loaded([Relation("rId1", "xl/workbook.xml", SHEET_TYPE)])
    assert RELS not in pkg.parts
    rels.remove("rId1")
    assert pkg.parts[RELS].relationships == []


def test_add_file_rejects_empty_target():
    rels = Relationships(RELS, _Pkg())
    with pytest.raises(ValueError):
        rels.add_file(SHEET_TYPE, "")