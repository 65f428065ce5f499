"""Base decoder definitions for STL decoding."""

from __future__ import annotations

__all__ = ["BaseDecoder", "DecodeResult", "EncodingType"]

import abc
import dataclasses
import typing as t

if t.TYPE_CHECKING:
    from stldecode.mesh import Solid


EncodingType: t.TypeAlias = t.Literal["binary", "text"]

InputT = t.TypeVar("InputT", bytes, str)


@dataclasses.dataclass(frozen=True)
class DecodeResult(t.Generic[InputT]):
    """Result of decoding STL data."""

    #: The decoded solid.
    solid: Solid

    #: The input left unconsumed after the solid.
    remaining: InputT


class BaseDecoder(abc.ABC, t.Generic[InputT]):
    """Abstract base class for STL decoders."""

    #: The encoding handled by this decoder.
    encoding: t.ClassVar[EncodingType]

    @abc.abstractmethod
    def decode(self, data: InputT) -> DecodeResult[InputT]:
        """Decode a solid from the start of the input.

        :param data: The encoded STL data.
        :return: The decoded solid and any unconsumed input.
        :raises STLParseError: If the input is not a valid STL solid.
        """
        pass
