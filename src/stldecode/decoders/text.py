"""Decoder for the ASCII text STL encoding."""

from __future__ import annotations

__all__ = ["TextDecoder"]

import logging

from stldecode.decoders.base import BaseDecoder, DecodeResult
from stldecode.exceptions import STLIncompleteError, STLStructureError
from stldecode.mesh import Facet, Solid, Vector3D
from stldecode.scanner import TextScanner

logger = logging.getLogger(__name__)


class TextDecoder(BaseDecoder[str]):
    """Decode the ASCII text STL encoding.

    .. code-block:: text

        solid  := "solid" NAME facet+ "endsolid" NAME
        facet  := "facet" "normal" FLOAT FLOAT FLOAT
                  "outer" "loop" vertex vertex vertex "endloop" "endfacet"
        vertex := "vertex" FLOAT "," FLOAT "," FLOAT

    Keywords are case-sensitive and whitespace between tokens is insignificant.
    Normal components are separated by whitespace only; vertex components by commas.
    """

    encoding = "text"

    #: Whether to reject input whose ``endsolid`` name differs from the ``solid`` name.
    check_end_name: bool

    def __init__(self, check_end_name: bool = False) -> None:
        """Initialize the text decoder.

        :param check_end_name: Whether to raise if the name after ``endsolid`` does not
            match the name after ``solid``. Default is ``False``.
        """
        self.check_end_name = check_end_name

    def decode(self, data: str) -> DecodeResult[str]:
        """Decode a text STL solid.

        :param data: The STL text.
        :return: The decoded solid and the text following the closing name.
        :raises STLIncompleteError: If the text ends before the solid is complete.
        :raises STLTokenError: If a keyword, delimiter, or name is missing.
        :raises STLNumberError: If a coordinate is not a valid number.
        :raises STLStructureError: If the solid has no facets or a facet does not have
            exactly 3 vertices.
        """
        scanner = TextScanner(data)
        solid = self.parse_solid(scanner)

        remaining = scanner.remaining
        if remaining:
            logger.debug("%d trailing characters left after 'endsolid'", len(remaining))

        logger.debug("Decoded text STL solid '%s' with %d facets", solid.name, solid.num_faces)
        return DecodeResult(solid, remaining)

    def parse_solid(self, scanner: TextScanner) -> Solid:
        """Parse ``solid NAME facet+ endsolid NAME``.

        :param scanner: The scanner positioned at ``solid``.
        :return: The parsed solid.
        """
        scanner.expect("solid")
        name = scanner.read_name()

        faces: list[Facet] = []
        while scanner.at("facet"):
            faces.append(self.parse_facet(scanner))

        if not faces:
            if not scanner.at("endsolid"):
                # Always raises here: the next token is neither 'facet' nor 'endsolid'.
                scanner.expect("facet")

            raise STLStructureError(f"Solid '{name}' has no facets", position=scanner.position)

        if scanner.at_partial("facet") and not scanner.is_eof():
            raise STLIncompleteError(
                "Unexpected end of input while reading 'facet'",
                needed=len("facet") - len(scanner.remaining),
                position=scanner.position,
            )

        scanner.expect("endsolid")
        end_position = scanner.position
        end_name = scanner.read_name()

        if end_name != name:
            if self.check_end_name:
                raise STLStructureError(
                    f"Solid name mismatch: 'solid {name}' closed by 'endsolid {end_name}'",
                    position=end_position,
                )

            logger.debug("Solid '%s' closed by 'endsolid %s'", name, end_name)

        return Solid(name=name, faces=tuple(faces))

    def parse_facet(self, scanner: TextScanner) -> Facet:
        """Parse a single ``facet normal ... endfacet`` block.

        :param scanner: The scanner positioned at ``facet``.
        :return: The parsed facet, with an attribute of 0.
        """
        scanner.expect("facet")
        scanner.expect("normal")
        normal = Vector3D(scanner.read_float(), scanner.read_float(), scanner.read_float())

        scanner.expect("outer")
        scanner.expect("loop")

        vertices: list[Vector3D] = []
        while scanner.at("vertex"):
            vertices.append(self.parse_vertex(scanner))

        if len(vertices) < 3 and not scanner.at("endloop"):
            # Always raises here: the next token is neither 'vertex' nor 'endloop'.
            scanner.expect("vertex")

        if len(vertices) != 3:
            raise STLStructureError(
                f"A facet must have exactly 3 vertices, got {len(vertices)}",
                position=scanner.position,
            )

        scanner.expect("endloop")
        scanner.expect("endfacet")

        return Facet(normal=normal, vertices=(vertices[0], vertices[1], vertices[2]), attribute=0)

    @staticmethod
    def parse_vertex(scanner: TextScanner) -> Vector3D:
        """Parse ``vertex X, Y, Z``.

        :param scanner: The scanner positioned at ``vertex``.
        :return: The parsed vertex.
        """
        scanner.expect("vertex")
        x = scanner.read_float()
        scanner.expect(",")
        y = scanner.read_float()
        scanner.expect(",")
        z = scanner.read_float()

        return Vector3D(x, y, z)
