"""Helpers shared by package parts: zip member handling and naming."""

from __future__ import annotations

import re
import shutil
import xml.etree.ElementTree as ET
import zipfile
from collections.abc import Iterable, Sized

XML_HEADER = '<?xml version="1.0" encoding="UTF-8"?>\n'

_TRAILING_DIGITS = re.compile(r"[0-9]+\Z")


def letters_of(text: str) -> str:
    """Return the ASCII letters of text, upper-cased."""
    return "".join(ch.upper() for ch in text if "A" <= ch <= "Z" or "a" <= ch <= "z")


def numbers_of(text: str) -> str:
    """Return the ASCII digits of text."""
    return "".join(ch for ch in text if "0" <= ch <= "9")


def read_zip_file(archive: zipfile.ZipFile, info: zipfile.ZipInfo) -> bytes:
    """Return the whole content of a zip member."""
    return archive.read(info)


def _serialize(source: object) -> bytes:
    if isinstance(source, ET.Element):
        return ET.tostring(source, encoding="unicode").encode("utf-8")
    to_xml = getattr(source, "to_xml", None)
    if to_xml is None:
        raise TypeError(f"can't serialize {type(source).__name__} to XML")
    content = to_xml()
    return content.encode("utf-8") if isinstance(content, str) else content


def marshal_zip_file(file_name: str, source: object, to: zipfile.ZipFile) -> bool:
    """Serialize source and add it to the zip under file_name.

    A source whose before_marshal() returns None is left out; returns whether
    a member was written.
    """
    before = getattr(source, "before_marshal", None)
    if before is not None:
        source = before()
        if source is None:
            return False

    content = _serialize(source)
    after = getattr(source, "after_marshal", None)
    if after is not None:
        content = after(content)

    to.writestr(file_name, XML_HEADER.encode("utf-8") + content)
    return True


def copy_zip_file(archive: zipfile.ZipFile, info: zipfile.ZipInfo, to: zipfile.ZipFile) -> None:
    """Copy a zip member as is into another zip."""
    with archive.open(info) as reader, to.open(info.filename, "w") as writer:
        shutil.copyfileobj(reader, writer)


def unique_name(name: str, names: Iterable[str], name_limit: int) -> str:
    """Return name, shortened and numbered as needed to be unique among names."""
    taken = set(names)
    stable_rounds = 0
    counter = 1
    while stable_rounds < 2:
        stable_rounds += 1

        if len(name) > name_limit:
            name = name[:name_limit]
            stable_rounds = 0

        if name in taken:
            stable_rounds = 0
            suffix = str(counter)
            title = _TRAILING_DIGITS.sub("", name)
            if len(title + suffix) > name_limit:
                title = title[: name_limit - len(suffix)]
            name = title + suffix

        counter += 1

    return name


def is_empty_value(value: object) -> bool:
    """Return True for None, False, zero and empty containers."""
    if value is None:
        return True
    if isinstance(value, bool):
        return not value
    if isinstance(value, (int, float, complex)):
        return value == 0
    if isinstance(value, Sized):
        return len(value) == 0
    return False