"""Mesh data structures for decoded STL content."""

from __future__ import annotations

__all__ = ["Facet", "Solid", "Vector3D"]

import dataclasses
import typing as t

import numpy as np

from stldecode.exceptions import STLStructureError

if t.TYPE_CHECKING:
    import numpy.typing as npt


@dataclasses.dataclass(frozen=True)
class Vector3D:
    """A point or direction in 3D space."""

    #: The X coordinate.
    x: float

    #: The Y coordinate.
    y: float

    #: The Z coordinate.
    z: float

    def __iter__(self) -> t.Iterator[float]:
        yield self.x
        yield self.y
        yield self.z

    def to_array(self) -> npt.NDArray[np.float64]:
        """Convert the vector to a numpy array.

        :return: A float64 array of shape (3,).
        """
        return np.array([self.x, self.y, self.z], dtype=np.float64)


@dataclasses.dataclass(frozen=True)
class Facet:
    """A single triangle of a mesh."""

    #: The facet normal as stored in the input (not recomputed).
    normal: Vector3D

    #: The three corners of the triangle, in winding order.
    vertices: tuple[Vector3D, Vector3D, Vector3D]

    #: The 16-bit attribute field of a binary record. Always 0 for text input.
    attribute: int = 0

    def __post_init__(self) -> None:
        if len(self.vertices) != 3:
            raise STLStructureError(f"A facet must have exactly 3 vertices, got {len(self.vertices)}")


@dataclasses.dataclass(frozen=True)
class Solid:
    """A named triangle mesh."""

    #: The name of the solid.
    name: str

    #: The facets of the solid, in input order.
    faces: tuple[Facet, ...]

    def __post_init__(self) -> None:
        if not self.faces:
            raise STLStructureError(f"Solid '{self.name}' has no facets")

    @property
    def num_faces(self) -> int:
        """Number of facets in the solid."""
        return len(self.faces)

    @property
    def normals(self) -> npt.NDArray[np.float64]:
        """Facet normals as an (M, 3) float64 array."""
        return np.array([tuple(face.normal) for face in self.faces], dtype=np.float64)

    @property
    def triangles(self) -> npt.NDArray[np.float64]:
        """Facet vertices as an (M, 3, 3) float64 array."""
        return np.array(
            [[tuple(vertex) for vertex in face.vertices] for face in self.faces],
            dtype=np.float64,
        )

    @property
    def attributes(self) -> npt.NDArray[np.uint16]:
        """Facet attribute fields as an (M,) uint16 array."""
        return np.array([face.attribute for face in self.faces], dtype=np.uint16)
