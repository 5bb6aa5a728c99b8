"""A part of a package with lazy loading and update tracking."""

from __future__ import annotations

import zipfile
from collections.abc import Callable
from typing import Any, Protocol

from ooxml.helpers import read_zip_file
from ooxml.streams import StreamFileReader, StreamFileWriter


class _Package(Protocol):
    def add(self, file_name: str, content: Any) -> None: ...


class PackageFileError(Exception):
    """Raised when a part is used in a way its state does not allow."""


class PackageFile:
    """A part of a package, either read from an archive or new.

    ``target`` receives the content when the part is loaded; it must provide a
    ``from_xml`` class method. ``source`` is what gets written when the part is
    marked as updated, and defaults to ``target``.
    """

    def __init__(
        self,
        pkg: _Package,
        f: zipfile.ZipInfo | str | None,
        target: Any,
        source: Any = None,
        *,
        archive: zipfile.ZipFile | None = None,
    ) -> None:
        self._pkg = pkg
        self._source_is_target = source is None or source is target
        self.target = target
        self.source = target if source is None else source
        self.file_name = ""
        self.is_new = True
        self._archive: zipfile.ZipFile | None = None
        self._zip_info: zipfile.ZipInfo | None = None

        if isinstance(f, zipfile.ZipInfo):
            if archive is None:
                raise PackageFileError("an archive is required to use an existing file")
            self.file_name = f.filename
            self._zip_info = f
            self._archive = archive
            self.is_new = False
        elif isinstance(f, str):
            self.file_name = f

        if not self.file_name:
            raise PackageFileError(
                "You must provide a file to use - zip member for existing or filename for a new one."
            )

    def mark_as_updated(self) -> None:
        """Register the source with the package, for new or fully loaded parts only."""
        if self._zip_info is None:
            self._pkg.add(self.file_name, self.source)

    def load_if_required(self, callback: Callable[[], None] | None = None) -> None:
        """Load the content into target on first request and call callback then."""
        if self.is_new or self._zip_info is None or self._archive is None:
            return
        loaded = type(self.target).from_xml(read_zip_file(self._archive, self._zip_info))
        self.target = loaded
        if self._source_is_target:
            self.source = loaded
        self._zip_info = None
        if callback is not None:
            callback()

    def read_stream(self) -> StreamFileReader:
        """Open an existing, not yet loaded part for streamed reading."""
        if self.is_new:
            raise PackageFileError("can't open a new file as stream")
        if self._zip_info is None or self._archive is None:
            raise PackageFileError("can't open as stream file that was already fully loaded")
        return StreamFileReader(self._archive, self._zip_info)

    def write_stream(
        self, memory: bool, finalizer: Callable[[], None] | None = None
    ) -> StreamFileWriter:
        """Create the part as a write stream; later calls return the same stream."""
        if not self.is_new:
            raise PackageFileError("can't overwrite already existing file")
        if isinstance(self.source, StreamFileWriter):
            return self.source
        stream = StreamFileWriter(self.file_name, memory, finalizer)
        self.source = stream
        self._source_is_target = False
        self._pkg.add(self.file_name, stream)
        return stream