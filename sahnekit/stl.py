"""Reading binary STL meshes."""

from __future__ import annotations

import struct
from dataclasses import dataclass, field
from os import PathLike

HEADER_SIZE = 80
_COUNT = struct.Struct("<I")
_TRIANGLE = struct.Struct("<12fH")

Vector = tuple[float, float, float]


@dataclass(frozen=True)
class Triangle:
    """One facet: its normal, three vertices and the attribute byte count."""

    normal: Vector
    vertices: tuple[Vector, Vector, Vector]
    attribute_byte_count: int


@dataclass
class Stl:
    """A binary STL mesh."""

    triangles: list[Triangle] = field(default_factory=list)

    @classmethod
    def from_bytes(cls, data: bytes) -> "Stl":
        """Parse a binary STL image.

        Raises ValueError if the data ends before the header, the triangle
        count or the announced triangles are complete.
        """
        view = memoryview(bytes(data))
        count_end = HEADER_SIZE + _COUNT.size
        if len(view) < count_end:
            raise ValueError("unexpected end of STL data in header")
        (count,) = _COUNT.unpack_from(view, HEADER_SIZE)
        needed = count_end + count * _TRIANGLE.size
        if len(view) < needed:
            raise ValueError(
                f"unexpected end of STL data: {count} triangles need "
                f"{needed} bytes, got {len(view)}"
            )
        triangles = []
        for values in _TRIANGLE.iter_unpack(view[count_end:needed]):
            nx, ny, nz, *coords, attribute = values
            vertices = (
                tuple(coords[0:3]),
                tuple(coords[3:6]),
                tuple(coords[6:9]),
            )
            triangles.append(Triangle((nx, ny, nz), vertices, attribute))
        return cls(triangles)

    @classmethod
    def from_file(cls, path: str | PathLike[str]) -> "Stl":
        """Read and parse a binary STL file."""
        with open(path, "rb") as handle:
            return cls.from_bytes(handle.read())