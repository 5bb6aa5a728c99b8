"""Relationships of a package or a part, with lookup and editing."""

from __future__ import annotations

import re
import zipfile
from typing import Any

from ooxml.content_types import CONTENT_TYPE_RELATIONSHIPS
from ooxml.ml.relationships import Relation, RelationshipsXml, TargetMode
from ooxml.package_file import PackageFile

_DIGITS = re.compile(r"[0-9]+")
_UINT32_MAX = 0xFFFFFFFF


class Relationships:
    """A relationships part bound to a package."""

    def __init__(
        self,
        f: zipfile.ZipInfo | str,
        pkg: Any,
        *,
        archive: zipfile.ZipFile | None = None,
    ) -> None:
        self._pkg = pkg
        self._file = PackageFile(pkg, f, RelationshipsXml(), archive=archive)
        self._file.load_if_required()
        if self._file.is_new:
            pkg.content_types.register_content(self._file.file_name, CONTENT_TYPE_RELATIONSHIPS)
            self._file.mark_as_updated()

    @property
    def file_name(self) -> str:
        """Name of the part inside the package."""
        return self._file.file_name

    @property
    def ml(self) -> RelationshipsXml:
        """The underlying content of the part."""
        return self._file.target

    def __len__(self) -> int:
        return len(self.ml.relationships)

    def target_by_id(self, rid: str) -> str:
        """Return the target of the relation with the id, or an empty string."""
        return next((r.target for r in self.ml.relationships if r.id == rid), "")

    def target_by_type(self, rel_type: str) -> str:
        """Return the target of the first relation of the type, or an empty string."""
        return next((r.target for r in self.ml.relationships if r.type == rel_type), "")

    def id_by_target(self, target: str) -> str:
        """Return the id of the first relation pointing at target, or an empty string."""
        for rel in self.ml.relationships:
            if rel.target_mode is TargetMode.INTERNAL:
                rel_target = rel.target
                if not rel_target.startswith("/"):
                    rel_target = "/xl/" + rel_target
                if target in rel_target:
                    return rel.id
            elif rel.target == target:
                return rel.id
        return ""

    def add_link(self, rel_type: str, target: str) -> tuple[int, str]:
        """Add a relation to an external target such as a URL."""
        return self._add(rel_type, target, TargetMode.EXTERNAL)

    def add_file(self, rel_type: str, target: str) -> tuple[int, str]:
        """Add a relation to a part inside the package; the path is made absolute."""
        if not target:
            raise ValueError("target of a relation can't be empty")
        if not target.startswith("/"):
            target = "/" + target
        return self._add(rel_type, target, TargetMode.INTERNAL)

    def _add(self, rel_type: str, target: str, mode: TargetMode) -> tuple[int, str]:
        last = 0
        for rel in self.ml.relationships:
            match = _DIGITS.search(rel.id)
            if match is not None:
                number = int(match.group())
                if number <= _UINT32_MAX:
                    last = max(last, number)

        rid = f"rId{last + 1}"
        self.ml.relationships.append(Relation(id=rid, target=target, type=rel_type, target_mode=mode))
        self._file.mark_as_updated()
        return last, rid

    def remove(self, rid: str) -> None:
        """Remove the first relation with the id."""
        for position, rel in enumerate(self.ml.relationships):
            if rel.id == rid:
                del self.ml.relationships[position]
                break
        self._file.mark_as_updated()