"""Token-level cursor over ASCII STL text."""

from __future__ import annotations

__all__ = ["TextScanner"]

import re
import typing as t

from stldecode.exceptions import STLIncompleteError, STLNumberError, STLTokenError

#: Signed decimal number with optional fraction and exponent.
_FLOAT_PATTERN: t.Final = re.compile(r"[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?")

#: One or more ASCII alphanumeric characters.
_NAME_PATTERN: t.Final = re.compile(r"[A-Za-z0-9]+")

#: Any run of whitespace, including newlines.
_WHITESPACE_PATTERN: t.Final = re.compile(r"\s*")

#: An exponent marker with no digits, cut off by the end of the input.
_PARTIAL_EXPONENT_PATTERN: t.Final = re.compile(r"[eE][+-]?\Z")

#: Maximum number of characters quoted back in error messages.
_EXCERPT_LENGTH: t.Final = 16


class TextScanner:
    """A cursor over a string that treats whitespace between tokens as insignificant.

    Every ``read_*`` and :meth:`expect` call skips the whitespace before the token it
    consumes and the whitespace following it, so the cursor always rests on the start
    of the next token (or at the end of the input).
    """

    def __init__(self, text: str) -> None:
        """Initialize the scanner.

        :param text: The text to scan.
        """
        self._text = text
        self._pos = 0
        self.skip_whitespace()

    @property
    def position(self) -> int:
        """The current character offset into the text."""
        return self._pos

    @property
    def remaining(self) -> str:
        """The unread text."""
        return self._text[self._pos :]

    def is_eof(self) -> bool:
        """Check whether all characters have been consumed."""
        return self._pos >= len(self._text)

    def skip_whitespace(self) -> None:
        """Advance the cursor past any whitespace."""
        self._pos = _WHITESPACE_PATTERN.match(self._text, self._pos).end()

    def at(self, literal: str) -> bool:
        """Check whether the next token starts with ``literal``.

        :param literal: The literal to look for.
        :return: ``True`` if the unread text starts with ``literal``.
        """
        return self._text.startswith(literal, self._pos)

    def at_partial(self, literal: str) -> bool:
        """Check whether the input ends partway through ``literal``.

        :param literal: The literal to look for.
        :return: ``True`` if the unread text is a proper prefix of ``literal`` (including empty).
        """
        rest = self.remaining
        return len(rest) < len(literal) and literal.startswith(rest)

    def expect(self, literal: str) -> None:
        """Consume a case-sensitive literal.

        :param literal: The keyword or delimiter to consume.
        :raises STLIncompleteError: If the input ends before the literal is complete.
        :raises STLTokenError: If the input does not match the literal.
        """
        if self.at(literal):
            self._pos += len(literal)
            self.skip_whitespace()
            return

        if self.at_partial(literal):
            needed = len(literal) - len(self.remaining)
            raise STLIncompleteError(
                f"Unexpected end of input while reading {literal!r}",
                needed=needed,
                position=self._pos,
            )

        raise STLTokenError(literal, self._excerpt(), position=self._pos)

    def read_float(self) -> float:
        """Consume a signed decimal number.

        :return: The parsed number as a double-precision float.
        :raises STLIncompleteError: If the input ends before a number starts or inside its exponent.
        :raises STLNumberError: If the next token is not a number.
        """
        match = _FLOAT_PATTERN.match(self._text, self._pos)
        if match is None:
            if self.remaining in ("", "+", "-", ".", "+.", "-."):
                raise STLIncompleteError("Unexpected end of input while reading a number", needed=1, position=self._pos)

            raise STLNumberError(f"Expected a number, found {self._excerpt()!r}", position=self._pos)

        if _PARTIAL_EXPONENT_PATTERN.match(self._text, match.end()):
            raise STLIncompleteError(
                "Unexpected end of input while reading an exponent", needed=1, position=match.end()
            )

        try:
            value = float(match.group())
        except ValueError as e:
            raise STLNumberError(f"Invalid number {match.group()!r}", position=self._pos) from e

        self._pos = match.end()
        self.skip_whitespace()
        return value

    def read_name(self) -> str:
        """Consume a name made of ASCII letters and digits.

        :return: The name.
        :raises STLIncompleteError: If the input ends before a name starts.
        :raises STLTokenError: If the next token is not alphanumeric.
        """
        match = _NAME_PATTERN.match(self._text, self._pos)
        if match is None:
            if self.is_eof():
                raise STLIncompleteError("Unexpected end of input while reading a name", needed=1, position=self._pos)

            raise STLTokenError("name", self._excerpt(), position=self._pos)

        self._pos = match.end()
        self.skip_whitespace()
        return match.group()

    def _excerpt(self) -> str:
        """A short excerpt of the unread text for error messages."""
        return self._text[self._pos : self._pos + _EXCERPT_LENGTH]
