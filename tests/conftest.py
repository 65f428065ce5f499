import struct
import typing as t

import pytest

#: A triangle as (normal, (v0, v1, v2), attribute).
Triangle = t.Tuple[
    t.Tuple[float, float, float],
    t.Tuple[t.Tuple[float, float, float], t.Tuple[float, float, float], t.Tuple[float, float, float]],
    int,
]

CAR_TRIANGLE: Triangle = (
    (0.0, 1.0, 0.0),
    ((1.0, 2.0, 3.5), (4.5, -5.0, 6.0), (-7.0, 8.5, 9.5)),
    12345,
)

TRAIN_TRIANGLE: Triangle = (
    (1.0, 1.0, 0.0),
    ((9.0, 6.0, 3.5), (8.5, -5.0, 2.0), (7.0, 4.0, -1.0)),
    55555,
)


def pack_record(triangle: Triangle) -> bytes:
    """Pack a triangle into a 50-byte binary STL record."""
    normal, vertices, attribute = triangle
    data = struct.pack("<3f", *normal)
    for vertex in vertices:
        data += struct.pack("<3f", *vertex)

    return data + struct.pack("<H", attribute)


def pack_binary_stl(header: bytes, triangles: t.Sequence[Triangle], count: int | None = None) -> bytes:
    """Pack a complete binary STL buffer."""
    if count is None:
        count = len(triangles)

    return header.ljust(80, b" ") + struct.pack("<I", count) + b"".join(pack_record(tri) for tri in triangles)


@pytest.fixture
def make_binary_stl() -> t.Callable[..., bytes]:
    """A factory building binary STL buffers from a header and triangles."""
    return pack_binary_stl


@pytest.fixture
def car_triangle() -> Triangle:
    """The single triangle of the 'car' solid."""
    return CAR_TRIANGLE


@pytest.fixture
def train_triangle() -> Triangle:
    """A second triangle used for multi-facet solids."""
    return TRAIN_TRIANGLE


@pytest.fixture
def car_stl() -> bytes:
    """A binary STL named 'car' with a single triangle."""
    return pack_binary_stl(b"car", [CAR_TRIANGLE])


@pytest.fixture
def train_stl() -> bytes:
    """A binary STL named 'train' with two triangles."""
    return pack_binary_stl(b"train", [CAR_TRIANGLE, TRAIN_TRIANGLE])


@pytest.fixture
def plane_text() -> str:
    """A text STL named 'plane' with a single facet."""
    return """
        solid plane
            facet normal 0.0 0.0 1.0
                outer loop
                    vertex 3.0, 2.0, 1.0
                    vertex 6.0, 5.0, 4.0
                    vertex 9.0, 8.0, 7.0
                endloop
            endfacet
        endsolid plane
    """


@pytest.fixture
def plane2_text() -> str:
    """A text STL named 'plane2' with two facets."""
    return """
        solid plane2
            facet normal 0.0 0.0 1.0
                outer loop
                    vertex 3.0, 2.0, 1.0
                    vertex 6.0, 5.0, 4.0
                    vertex 9.0, 8.0, 7.0
                endloop
            endfacet

            facet normal 0.0 1.0 1.0
                outer loop
                    vertex 3.5, -2.0, 0.0
                    vertex 2.2, 8.0, -9.0
                    vertex -3.0, 8.0, 1.5
                endloop
            endfacet
        endsolid plane2
    """
