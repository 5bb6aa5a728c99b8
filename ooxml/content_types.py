"""Content types of the parts of a package."""

from __future__ import annotations

import zipfile
from typing import Any

from ooxml.ml.content import ContentTypesXml, TypeDefault, TypeOverride
from ooxml.package_file import PackageFile

CONTENT_TYPE_VML_DRAWING = "application/vnd.openxmlformats-officedocument.vmlDrawing"
CONTENT_TYPE_RELATIONSHIPS = "application/vnd.openxmlformats-package.relationships+xml"


def _part_name(name: str) -> str:
    return name if name.startswith("/") else "/" + name


class ContentTypes:
    """The [Content_Types].xml part: default types by extension and per-part overrides."""

    def __init__(
        self,
        f: zipfile.ZipInfo | str,
        pkg: Any,
        *,
        archive: zipfile.ZipFile | None = None,
    ) -> None:
        self._file = PackageFile(pkg, f, ContentTypesXml(), archive=archive)
        self._file.load_if_required()
        if self._file.is_new:
            self._file.mark_as_updated()

    @property
    def file_name(self) -> str:
        """Name of the part inside the package."""
        return self._file.file_name

    @property
    def ml(self) -> ContentTypesXml:
        """The underlying content of the part."""
        return self._file.target

    def register_type(self, extension: str, content_type: str) -> None:
        """Set the default content type for parts with the extension."""
        for default in self.ml.defaults:
            if default.extension == extension:
                default.content_type = content_type
                break
        else:
            self.ml.defaults.append(TypeDefault(extension, content_type))
        self._file.mark_as_updated()

    def register_content(self, part_name: str, content_type: str) -> None:
        """Set the content type of a single part."""
        name = _part_name(part_name)
        for override in self.ml.overrides:
            if override.part_name == name:
                override.content_type = content_type
                break
        else:
            self.ml.overrides.append(TypeOverride(name, content_type))
        self._file.mark_as_updated()

    def remove_content(self, part_name: str) -> None:
        """Forget the content type of a single part."""
        name = _part_name(part_name)
        self.ml.overrides[:] = [o for o in self.ml.overrides if o.part_name != name]
        self._file.mark_as_updated()