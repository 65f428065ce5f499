"""Decoder for the binary STL encoding."""

from __future__ import annotations

__all__ = ["BinaryDecoder", "decode_header_name"]

import logging
import re
import typing as t

import numpy as np

from stldecode.binary import BinaryReader
from stldecode.decoders.base import BaseDecoder, DecodeResult
from stldecode.exceptions import STLIncompleteError, STLStructureError
from stldecode.mesh import Facet, Solid, Vector3D

logger = logging.getLogger(__name__)


#: Size of the header that precedes the triangle count.
HEADER_SIZE: t.Final = 80

#: Name used when the header is not valid UTF-8.
UNNAMED: t.Final = "unnamed"

#: Whitespace (including Unicode whitespace) and NUL padding at either end of the header text.
_PADDING_PATTERN: t.Final = re.compile(r"^[\s\0]+|[\s\0]+\Z")

#: Layout of a single triangle record: normal, 3 vertices, attribute byte count.
RECORD_DTYPE: t.Final = np.dtype(
    [
        ("normal", "<f4", (3,)),
        ("vertices", "<f4", (3, 3)),
        ("attribute", "<u2"),
    ]
)

#: Size of a single triangle record in bytes.
RECORD_SIZE: t.Final = RECORD_DTYPE.itemsize


def decode_header_name(header: bytes) -> str:
    """Derive the solid name from an 80-byte header.

    Headers are advisory; text that is not valid UTF-8 yields ``"unnamed"``.

    :param header: The raw header bytes.
    :return: The header text with surrounding whitespace and NUL padding removed.
    """
    try:
        text = header.decode("utf-8")
    except UnicodeDecodeError:
        logger.debug("Binary STL header is not valid UTF-8; using '%s'", UNNAMED)
        return UNNAMED

    return _PADDING_PATTERN.sub("", text)


class BinaryDecoder(BaseDecoder[bytes]):
    """Decode the binary STL encoding.

    The triangle count in the header is advisory: records are decoded until fewer
    than :data:`RECORD_SIZE` bytes remain, and those bytes are returned unconsumed.
    """

    encoding = "binary"

    #: Whether to reject input whose declared triangle count differs from the decoded count.
    check_count: bool

    def __init__(self, check_count: bool = False) -> None:
        """Initialize the binary decoder.

        :param check_count: Whether to raise if the declared triangle count does not match
            the number of records decoded. Default is ``False``.
        """
        self.check_count = check_count

    def decode(self, data: bytes | bytearray | memoryview) -> DecodeResult[bytes]:
        """Decode a binary STL solid.

        :param data: The binary STL data.
        :return: The decoded solid and the bytes following the last complete record.
        :raises STLIncompleteError: If the input ends before the first complete record.
        :raises STLStructureError: If ``check_count`` is set and the declared count does not match.
        """
        reader = BinaryReader(data)

        name = decode_header_name(reader.read_bytes(HEADER_SIZE))
        declared_count = reader.read_uint32()

        num_records = reader.remaining // RECORD_SIZE
        if num_records == 0:
            raise STLIncompleteError(
                f"Unexpected end of stream. Expected {RECORD_SIZE} bytes, got {reader.remaining}",
                needed=RECORD_SIZE - reader.remaining,
                position=reader.position,
            )

        records = np.frombuffer(reader.data, dtype=RECORD_DTYPE, count=num_records, offset=reader.position)
        reader.skip(num_records * RECORD_SIZE)

        if declared_count != num_records:
            if self.check_count:
                raise STLStructureError(
                    f"Triangle count mismatch: expected {declared_count}, got {num_records}",
                    position=reader.position,
                )

            logger.debug("Binary STL declares %d triangles but contains %d", declared_count, num_records)

        faces = tuple(self._build_facets(records))
        remaining = reader.read_remaining()
        if remaining:
            logger.debug("%d trailing bytes left after the last triangle record", len(remaining))

        logger.debug("Decoded binary STL solid '%s' with %d facets", name, len(faces))
        return DecodeResult(Solid(name=name, faces=faces), remaining)

    @staticmethod
    def _build_facets(records: np.ndarray) -> t.Iterator[Facet]:
        """Convert raw triangle records to facets.

        :param records: The structured array of records.
        :return: An iterator over the facets, in record order.
        """
        normals = records["normal"].astype(np.float64).tolist()
        vertices = records["vertices"].astype(np.float64).tolist()
        attributes = records["attribute"].tolist()

        for normal, (v0, v1, v2), attribute in zip(normals, vertices, attributes):
            yield Facet(
                normal=Vector3D(*normal),
                vertices=(Vector3D(*v0), Vector3D(*v1), Vector3D(*v2)),
                attribute=attribute,
            )
