"""An OOXML package: a zip archive of parts with content types and relationships."""

from __future__ import annotations

import io
import os
import re
import tempfile
import zipfile
from collections.abc import Callable
from typing import IO, Any

from ooxml.content_types import CONTENT_TYPE_RELATIONSHIPS, CONTENT_TYPE_VML_DRAWING, ContentTypes
from ooxml.helpers import copy_zip_file, marshal_zip_file
from ooxml.relationships import Relationships
from ooxml.streams import StreamFileReader, StreamFileWriter

_CONTENT_TYPES_NAME = "[Content_Types].xml"
_RELATIONSHIPS_NAME = "_rels/.rels"


class PackageError(Exception):
    """Raised when a package can't be saved as requested."""


class PackageInfo:
    """Holds the parts of a package, read from an archive or created new."""

    def __init__(self, reader: zipfile.ZipFile | None = None) -> None:
        self.validator: Callable[[], None] | None = None
        self.file_name = ""
        self._archive = reader
        self._files: dict[str, Any] = {}
        self.content_types: ContentTypes | None = None
        self.relationships: Relationships | None = None

        if reader is None:
            self._init_package()
            return

        for info in reader.infolist():
            self._files[info.filename] = info
            if info.filename == _RELATIONSHIPS_NAME:
                self.relationships = Relationships(info, self, archive=reader)
            elif info.filename == _CONTENT_TYPES_NAME:
                self.content_types = ContentTypes(info, self, archive=reader)

    def _init_package(self) -> None:
        self.content_types = ContentTypes(_CONTENT_TYPES_NAME, self)
        self.relationships = Relationships(_RELATIONSHIPS_NAME, self)
        for extension, content_type in (
            ("rels", CONTENT_TYPE_RELATIONSHIPS),
            ("vml", CONTENT_TYPE_VML_DRAWING),
            ("png", "image/png"),
            ("jpeg", "image/jpeg"),
            ("jpg", "image/jpeg"),
            ("gif", "image/gif"),
            ("xml", "application/xml"),
        ):
            self.content_types.register_type(extension, content_type)

    @property
    def is_new(self) -> bool:
        """True if the package was not read from an archive."""
        return self._archive is None

    def close(self) -> None:
        """Close open read streams and the archive."""
        for content in self._files.values():
            if isinstance(content, StreamFileReader):
                content.close()
        if self._archive is not None:
            self._archive.close()

    def __enter__(self) -> PackageInfo:
        return self

    def __exit__(self, *args: object) -> None:
        self.close()

    def save(self) -> None:
        """Write the package back to the file it was opened from."""
        if not self.file_name:
            raise PackageError("no filename defined for file. Try to use save_as")
        directory = os.path.dirname(self.file_name) or "."
        fd, tmp_name = tempfile.mkstemp(dir=directory, prefix=os.path.basename(self.file_name))
        try:
            with os.fdopen(fd, "wb") as tmp:
                self.save_package(tmp)
        except BaseException:
            os.remove(tmp_name)
            raise
        os.replace(tmp_name, self.file_name)

    def save_as(self, target: str | os.PathLike[str] | IO[bytes]) -> None:
        """Write the package to a file name or a binary writer."""
        if isinstance(target, (str, os.PathLike)):
            with open(target, "wb") as f:
                self.save_package(f)
        elif hasattr(target, "write"):
            self.save_package(target)
        else:
            raise TypeError("unsupported type of target. It must be name of file or a binary writer")

    def add(self, file_name: str, content: Any) -> None:
        """Put content into the package under file_name."""
        self._files[file_name] = content

    def file(self, file_name: str) -> Any:
        """Return the content stored under file_name, or None."""
        return self._files.get(file_name)

    def remove(self, file_name: str) -> None:
        """Remove a part and its content type override."""
        if file_name in self._files:
            del self._files[file_name]
            if self.content_types is not None:
                self.content_types.remove_content(file_name)

    def files(self, pattern: str | re.Pattern[str] | None = None) -> dict[str, Any]:
        """Return all parts, or those whose names match the pattern."""
        if pattern is None:
            return self._files
        regex = re.compile(pattern) if isinstance(pattern, str) else pattern
        return {name: content for name, content in self._files.items() if regex.search(name)}

    def save_package(self, f: IO[bytes]) -> None:
        """Validate the package and write it as a zip archive to f."""
        if self.validator is not None:
            self.validator()

        with zipfile.ZipFile(f, "w", zipfile.ZIP_DEFLATED) as zipper:
            for file_name, content in self._files.items():
                if isinstance(content, zipfile.ZipInfo):
                    if self._archive is None:
                        raise PackageError(f"no archive to copy {file_name} from")
                    copy_zip_file(self._archive, content, zipper)
                elif isinstance(content, StreamFileWriter):
                    content.save(zipper)
                else:
                    marshal_zip_file(file_name, content, zipper)


def open_package(
    f: str | os.PathLike[str] | IO[bytes],
    factory: Callable[[PackageInfo], Any],
) -> Any:
    """Open a package from a file name or a binary reader and build a document from it."""
    if isinstance(f, (str, os.PathLike)):
        archive = zipfile.ZipFile(f)
        pkg = PackageInfo(archive)
        pkg.file_name = os.fspath(f)
    elif hasattr(f, "read"):
        archive = zipfile.ZipFile(io.BytesIO(f.read()))
        pkg = PackageInfo(archive)
    else:
        raise TypeError("unsupported type of f. It must be name of file or a binary reader")

    try:
        return factory(pkg)
    except BaseException:
        pkg.close()
        raise