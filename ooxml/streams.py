"""Streaming access to package parts that are too large to load whole."""

from __future__ import annotations

import io
import posixpath
import shutil
import tempfile
import xml.etree.ElementTree as ET
import zipfile
from collections.abc import Callable, Iterator
from typing import IO

from ooxml.helpers import XML_HEADER


class StreamFileReader:
    """Reads a zip member as a stream of (event, element) pairs."""

    def __init__(self, archive: zipfile.ZipFile, info: zipfile.ZipInfo) -> None:
        self.file_name = info.filename
        self._stream: IO[bytes] | None = archive.open(info)

    def __iter__(self) -> Iterator[tuple[str, ET.Element]]:
        if self._stream is None:
            raise ValueError("stream is closed")
        return ET.iterparse(self._stream, events=("start", "end"))

    def close(self) -> None:
        """Close the member; closing twice does nothing."""
        if self._stream is not None:
            stream, self._stream = self._stream, None
            stream.close()

    def __enter__(self) -> StreamFileReader:
        return self

    def __exit__(self, *args: object) -> None:
        self.close()


class StreamFileWriter:
    """Collects the content of a new part, in memory or in a temporary file."""

    def __init__(
        self,
        file_name: str,
        memory: bool,
        finalizer: Callable[[], None] | None = None,
    ) -> None:
        self.file_name = file_name
        self._finalizer = finalizer
        self._buffer: IO[bytes] | None = (
            io.BytesIO() if memory else tempfile.TemporaryFile(prefix=posixpath.basename(file_name))
        )
        self._open = True
        self._buffer.write(XML_HEADER.encode("utf-8"))

    def write(self, data: bytes | str | ET.Element) -> None:
        """Append markup: raw bytes, text, or an element."""
        if not self._open or self._buffer is None:
            raise ValueError("stream is closed")
        if isinstance(data, ET.Element):
            data = ET.tostring(data, encoding="unicode")
        if isinstance(data, str):
            data = data.encode("utf-8")
        self._buffer.write(data)

    def close(self) -> None:
        """Run the finalizer and stop accepting writes; closing twice does nothing."""
        if not self._open:
            return
        if self._finalizer is not None:
            self._finalizer()
        if self._buffer is not None:
            self._buffer.flush()
        self._open = False

    def save(self, to: zipfile.ZipFile) -> None:
        """Close the stream and add its content to the zip; later saves add nothing."""
        self.close()
        if self._buffer is None:
            return
        buffer, self._buffer = self._buffer, None
        try:
            buffer.seek(0)
            with to.open(self.file_name, "w") as writer:
                shutil.copyfileobj(buffer, writer)
        finally:
            buffer.close()