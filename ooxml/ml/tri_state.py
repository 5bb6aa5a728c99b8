"""Optional booleans that distinguish true, false and unset."""

from __future__ import annotations

from enum import IntEnum

_TRUE_WORDS = frozenset({"1", "t", "T", "TRUE", "true", "True"})
_FALSE_WORDS = frozenset({"0", "f", "F", "FALSE", "false", "False"})


class TriState(IntEnum):
    """A boolean that may also be left blank; BLANK is falsy so it can be omitted."""

    BLANK = 0
    TRUE = 1
    FALSE = 2

    def __str__(self) -> str:
        if self is TriState.TRUE:
            return "true"
        if self is TriState.FALSE:
            return "false"
        return ""


def parse_bool(text: str) -> bool:
    """Parse a boolean word such as 'true', 'F' or '1'."""
    if text in _TRUE_WORDS:
        return True
    if text in _FALSE_WORDS:
        return False
    raise ValueError(f"invalid boolean value: {text!r}")


def parse_tri_state(text: str, blank: TriState = TriState.BLANK) -> TriState:
    """Parse a tri-state value; an empty string becomes blank."""
    if not text:
        return blank
    return TriState.TRUE if parse_bool(text) else TriState.FALSE


def tri_state(state: object) -> TriState:
    """Convert a bool or a boolean word to TRUE or FALSE."""
    if isinstance(state, str):
        try:
            return parse_tri_state(state, TriState.FALSE)
        except ValueError:
            return TriState.FALSE
    if isinstance(state, bool) and state:
        return TriState.TRUE
    return TriState.FALSE