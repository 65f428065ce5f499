"""Decoders for the binary and text STL encodings."""

from __future__ import annotations

__all__ = [
    "SUPPORTED_ENCODINGS",
    "BaseDecoder",
    "BinaryDecoder",
    "DecodeResult",
    "EncodingType",
    "TextDecoder",
    "get_decoder",
]

import typing as t

from stldecode.decoders.base import BaseDecoder, DecodeResult, EncodingType
from stldecode.decoders.binary import BinaryDecoder
from stldecode.decoders.text import TextDecoder
from stldecode.exceptions import STLEncodingError

#: Tuple of all supported STL encodings.
SUPPORTED_ENCODINGS: t.Final[tuple[EncodingType, ...]] = ("binary", "text")

#: Mapping of encoding identifiers to their respective decoder classes.
_DECODERS: t.Final[t.Dict[EncodingType, t.Type[BaseDecoder]]] = {
    "binary": BinaryDecoder,
    "text": TextDecoder,
}


def get_decoder(encoding: EncodingType, **options: t.Any) -> BaseDecoder:
    """Get the decoder for the specified STL encoding.

    :param encoding: The encoding identifier ("binary" or "text").
    :param options: Keyword arguments forwarded to the decoder's constructor.
    :return: An instance of the corresponding decoder.
    :raises STLEncodingError: If the encoding is not supported.
    """
    try:
        decoder_class = _DECODERS[encoding]
    except KeyError:
        raise STLEncodingError(encoding, SUPPORTED_ENCODINGS) from None

    return decoder_class(**options)
