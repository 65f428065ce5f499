"""Exceptions raised while decoding STL data."""

from __future__ import annotations

__all__ = [
    "STLEncodingError",
    "STLIncompleteError",
    "STLNumberError",
    "STLParseError",
    "STLStructureError",
    "STLTokenError",
]

import typing as t


class STLParseError(Exception):
    """Base class for all STL decoding failures."""

    #: The byte or character offset at which decoding failed, if known.
    position: int | None

    def __init__(self, message: str, position: int | None = None) -> None:
        super().__init__(message)
        self.position = position


class STLIncompleteError(STLParseError, EOFError):
    """The input ended before a required field or token could be read.

    A caller receiving this error may retry with more data, whereas any other
    :class:`STLParseError` means the input is not valid STL at all.
    """

    #: The minimum number of additional bytes or characters required, if known.
    needed: int | None

    def __init__(self, message: str, needed: int | None = None, position: int | None = None) -> None:
        super().__init__(message, position)
        self.needed = needed


class STLTokenError(STLParseError):
    """A required keyword, delimiter, or name was not found."""

    #: The literal (or token kind) that was expected.
    expected: str

    #: A short excerpt of what was found instead.
    found: str

    def __init__(self, expected: str, found: str, position: int | None = None) -> None:
        super().__init__(f"Expected {expected!r}, found {found!r}", position)
        self.expected = expected
        self.found = found


class STLNumberError(STLParseError):
    """A numeric field could not be parsed."""


class STLStructureError(STLParseError):
    """A cardinality constraint was violated (e.g., a facet without exactly 3 vertices)."""


class STLEncodingError(STLParseError):
    """An unsupported STL encoding was requested."""

    #: The requested encoding.
    encoding: str

    #: The encodings that are supported.
    supported: tuple[str, ...]

    def __init__(self, encoding: str, supported: t.Iterable[str]) -> None:
        self.encoding = encoding
        self.supported = tuple(supported)
        super().__init__(f"Unsupported encoding '{encoding}'. Supported: {', '.join(self.supported)}")
