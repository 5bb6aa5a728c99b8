# ooxml

Building blocks for working with Office Open XML packages (the zip
containers behind `.xlsx`, `.docx` and `.pptx` files). The package handles
the container itself: content types, package-level relationships, lazily
loaded parts, streamed parts and saving. Document-specific models are built
on top of it.

## Installing

```
pip install .
```

## Opening and saving a package

`open_package` accepts a file name or a binary file object and hands the
resulting `PackageInfo` to a factory of your choice, which returns the
document object:

```python
from ooxml.package import open_package

with open_package("report.xlsx", lambda pkg: pkg) as pkg:
    for name in pkg.files(None):
        print(name)
    pkg.save_as("copy.xlsx")
```

`PackageInfo.save()` writes back to the file the package was opened from,
via a temporary file in the same directory. `save_as()` takes a file name or
a writable binary stream. A validator set on the package is run before
saving and stops the save by raising.

Parts can be listed with a compiled regular expression
(`pkg.files(re.compile(r"^xl/worksheets/"))`), fetched with `file()`,
added with `add()` and dropped with `remove()`, which also forgets the
part's content-type override.

## Relationships and content types

```python
from ooxml.relationships import Relationships

rels = pkg.relationships
rid = rels.add_file(
    "http://schemas.openxmlformats.org/officeDocument/2006/relationships/officeDocument",
    "xl/workbook.xml",
)
print(rels.target_by_id(rid))
```

`ContentTypes.register_type()` maps an extension to a content type, and
`register_content()` sets an override for one part.

## Streams

Large parts can be read and written without loading them whole:
`StreamFileReader` iterates over XML events of a part, and
`StreamFileWriter` collects written XML in memory or in a temporary file and
copies it into the target archive on `save()`.

## Smaller pieces

- `ooxml.index`: FNV-1a 64-bit hashing (`hash_string`) and an `Index` that
  refuses duplicate hashes.
- `ooxml.ml.namespaces`: known namespace prefixes and helpers to apply them.
- `ooxml.ml.tri_state`: the `TriState` type for optional booleans.
- `ooxml.ml.general`: `val`-attribute properties such as
  `<b val="true"/>`.
- `ooxml.ml.reserved`: keeps unknown elements and attributes untouched so
  that they survive a round trip.
- `ooxml.helpers`: `unique_name` and other small utilities.

## Running the tests

```
pip install ".[test]"
pytest
```