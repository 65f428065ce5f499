"""Entry points for decoding STL data."""

from __future__ import annotations

__all__ = ["decode", "decode_binary", "decode_text"]

import typing as t

from stldecode.decoders import get_decoder
from stldecode.decoders.binary import BinaryDecoder
from stldecode.decoders.text import TextDecoder
from stldecode.exceptions import STLParseError

if t.TYPE_CHECKING:
    from stldecode.decoders.base import EncodingType
    from stldecode.mesh import Solid


def decode_binary(data: bytes | bytearray | memoryview, *, check_count: bool = False) -> tuple[Solid, bytes]:
    """Decode a solid from binary STL data.

    :param data: The binary STL data.
    :param check_count: Whether to reject a declared triangle count that does not match
        the number of records. Default is ``False``.
    :return: A tuple containing the decoded solid and any bytes after the last complete record.
    :raises STLParseError: If the data is not a valid binary STL solid.

    .. code-block:: python

        solid, rest = decode_binary(Path("model.stl").read_bytes())
        print(f"Loaded '{solid.name}' with {solid.num_faces} facets.")

    """
    result = BinaryDecoder(check_count=check_count).decode(data)
    return result.solid, result.remaining


def decode_text(text: str, *, check_end_name: bool = False) -> tuple[Solid, str]:
    """Decode a solid from text STL data.

    :param text: The STL text.
    :param check_end_name: Whether to reject an ``endsolid`` name that differs from the
        ``solid`` name. Default is ``False``.
    :return: A tuple containing the decoded solid and any text after the closing name.
    :raises STLParseError: If the text is not a valid STL solid.
    """
    result = TextDecoder(check_end_name=check_end_name).decode(text)
    return result.solid, result.remaining


def decode(
    data: str | bytes | bytearray | memoryview,
    encoding: EncodingType | None = None,
    **options: t.Any,
) -> tuple[Solid, str | bytes]:
    """Decode a solid using the decoder for the given encoding.

    The input's content is never inspected to guess its encoding. If ``encoding`` is
    omitted, strings are decoded as text and bytes-like objects as binary.

    :param data: The STL data.
    :param encoding: The encoding of the data ("binary" or "text").
    :param options: Keyword arguments forwarded to the decoder (e.g., ``check_count``).
    :return: A tuple containing the decoded solid and any unconsumed input.
    :raises STLEncodingError: If the encoding is not supported.
    :raises STLParseError: If the data is not a valid STL solid.
    :raises TypeError: If a string is passed for the binary encoding.
    """
    if encoding is None:
        encoding = "text" if isinstance(data, str) else "binary"

    decoder = get_decoder(encoding, **options)

    if decoder.encoding == "text" and not isinstance(data, str):
        try:
            data = bytes(data).decode("utf-8")
        except UnicodeDecodeError as e:
            raise STLParseError(f"Text STL data is not valid UTF-8: {e}", position=e.start) from e
    elif decoder.encoding == "binary" and isinstance(data, str):
        raise TypeError("Binary STL data must be bytes-like, not str")

    result = decoder.decode(data)
    return result.solid, result.remaining
