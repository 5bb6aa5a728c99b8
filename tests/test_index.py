import pytest

from ooxml.index import Code, DuplicateHashError, Index, hash_string


class Value:
    def __init__(self, number):
        self.number = number

    def hash(self):
        return hash_string(str(self.number))


class Text:
    def __init__(self, text):
        self.text = text

    def hash(self):
        return hash_string(self.text)


def test_hash_is_stable():
    s = "just a string"
    first = hash_string(s)
    second = hash_string(s)
    assert int(first) == 0xE7BFFDF20D5B21AD
    assert int(second) == int(first)


def test_hash_differs_for_different_values():
    codes = {int(hash_string("just a string")), int(hash_string("another string"))}
    assert len(codes) == 2

    idx = Index()
    idx.add(Text("just a string"), 0)
    idx.add(Text("another string"), 1)
    assert len(idx) == 2
    assert idx.get(Text("another string")) == 1


def test_hash_string_form():
    assert str(hash_string("just a string")) == "0xe7bffdf20d5b21ad"


def test_code_str_has_no_padding():
    assert str(Code(0x1F)) == "0x1f"


def test_index_add_remove_get():
    idx = Index()
    idx.add(Value(1), 1)
    with pytest.raises(DuplicateHashError):
        idx.add(Value(1), 1)
    assert len(idx) == 1

    idx.remove(Value(1))
    assert len(idx) == 0
    idx.add(Value(1), 1)
    assert len(idx) == 1

    assert idx.get(Value(1)) == 1
    assert idx.has(Value(1)) is True

    assert idx.get(Value(2)) is None
    assert idx.has(Value(2)) is False


def test_duplicate_error_message_names_index():
    idx = Index()
    idx.add(Value(5), 3)
    with pytest.raises(DuplicateHashError, match="index=7"):
        idx.add(Value(5), 7)


def test_remove_missing_is_harmless():
    idx = Index()
    idx.add(Value(1), 0)
    idx.remove(Value(9))
    assert len(idx) == 1