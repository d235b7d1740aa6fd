"""Vertex formats, index buffers and CPU-side mesh data."""

from __future__ import annotations

import struct
from dataclasses import dataclass
from enum import Enum
from typing import ClassVar, Iterable, Sequence, Union


class VertexFormat(Enum):
    """Format of a single vertex attribute."""

    F32X2 = "f32x2"
    F32X3 = "f32x3"
    UNORM8X4 = "unorm8x4"

    def size(self) -> int:
        """Size of the attribute in bytes."""
        return _FORMAT_SIZES[self]


_FORMAT_SIZES = {
    VertexFormat.F32X2: 8,
    VertexFormat.F32X3: 12,
    VertexFormat.UNORM8X4: 4,
}


class IndexFormat(Enum):
    """Element type of an index buffer."""

    UINT16 = "uint16"
    UINT32 = "uint32"


_INDEX_CODES = {IndexFormat.UINT16: "H", IndexFormat.UINT32: "I"}
_INDEX_MAX = {IndexFormat.UINT16: 0xFFFF, IndexFormat.UINT32: 0xFFFF_FFFF}


@dataclass(frozen=True)
class VertexAttributeDesc:
    """Location, byte offset and format of one attribute inside a vertex."""

    location: int
    offset: int
    format: VertexFormat


@dataclass(frozen=True)
class VertexLayoutDesc:
    """Stride and attributes of a vertex buffer."""

    stride: int
    attributes: tuple[VertexAttributeDesc, ...]

    def __post_init__(self) -> None:
        object.__setattr__(self, "attributes", tuple(self.attributes))


def _floats(values: Iterable[float], count: int, name: str) -> tuple[float, ...]:
    result = tuple(float(v) for v in values)
    if len(result) != count:
        raise ValueError(f"{name} needs {count} components, got {len(result)}")
    return result


def _color(values: Iterable[int]) -> tuple[int, ...]:
    result = tuple(int(v) for v in values)
    if len(result) != 4:
        raise ValueError(f"color needs 4 components, got {len(result)}")
    if any(not 0 <= c <= 255 for c in result):
        raise ValueError(f"color components must be in 0..255: {result}")
    return result


_VERTEX2D_PACKING = struct.Struct("<2f4B")
_VERTEX3D_PACKING = struct.Struct("<3f4B")

_VERTEX2D_ATTRIBUTES = (
    VertexAttributeDesc(location=0, offset=0, format=VertexFormat.F32X2),
    VertexAttributeDesc(location=1, offset=8, format=VertexFormat.UNORM8X4),
)
_VERTEX3D_ATTRIBUTES = (
    VertexAttributeDesc(location=0, offset=0, format=VertexFormat.F32X3),
    VertexAttributeDesc(location=1, offset=12, format=VertexFormat.UNORM8X4),
)


@dataclass(frozen=True)
class Vertex2D:
    """Vertex with a 2D position and an RGBA8 color."""

    pos: tuple[float, float]
    color: tuple[int, int, int, int]

    _POS_LEN: ClassVar[int] = 2

    def __post_init__(self) -> None:
        object.__setattr__(self, "pos", _floats(self.pos, self._POS_LEN, "pos"))
        object.__setattr__(self, "color", _color(self.color))

    @classmethod
    def stride(cls) -> int:
        """Size of one packed vertex in bytes."""
        return _VERTEX2D_PACKING.size

    @classmethod
    def attributes(cls) -> tuple[VertexAttributeDesc, ...]:
        """Attribute layout of the vertex."""
        return _VERTEX2D_ATTRIBUTES

    def to_bytes(self) -> bytes:
        """Pack the vertex as little-endian bytes."""
        return _VERTEX2D_PACKING.pack(*self.pos, *self.color)


@dataclass(frozen=True)
class Vertex3D:
    """Vertex with a 3D position and an RGBA8 color."""

    pos: tuple[float, float, float]
    color: tuple[int, int, int, int]

    _POS_LEN: ClassVar[int] = 3

    def __post_init__(self) -> None:
        object.__setattr__(self, "pos", _floats(self.pos, self._POS_LEN, "pos"))
        object.__setattr__(self, "color", _color(self.color))

    @classmethod
    def stride(cls) -> int:
        """Size of one packed vertex in bytes."""
        return _VERTEX3D_PACKING.size

    @classmethod
    def attributes(cls) -> tuple[VertexAttributeDesc, ...]:
        """Attribute layout of the vertex."""
        return _VERTEX3D_ATTRIBUTES

    def to_bytes(self) -> bytes:
        """Pack the vertex as little-endian bytes."""
        return _VERTEX3D_PACKING.pack(*self.pos, *self.color)


_VERTEX_TYPES = (Vertex2D, Vertex3D)
_Vertex = Union[Vertex2D, Vertex3D]


@dataclass(frozen=True)
class Indices:
    """An index buffer of 16- or 32-bit indices."""

    format: IndexFormat
    values: tuple[int, ...]

    def __post_init__(self) -> None:
        values = tuple(int(v) for v in self.values)
        limit = _INDEX_MAX[self.format]
        for value in values:
            if not 0 <= value <= limit:
                raise ValueError(
                    f"index {value} out of range for {self.format.value}"
                )
        object.__setattr__(self, "values", values)

    @classmethod
    def u16(cls, values: Iterable[int]) -> Indices:
        return cls(IndexFormat.UINT16, tuple(values))

    @classmethod
    def u32(cls, values: Iterable[int]) -> Indices:
        return cls(IndexFormat.UINT32, tuple(values))

    def __len__(self) -> int:
        return len(self.values)

    def as_bytes_format_count(self) -> tuple[bytes, IndexFormat, int]:
        """Packed little-endian bytes, the index format and the index count."""
        code = _INDEX_CODES[self.format]
        data = struct.pack(f"<{len(self.values)}{code}", *self.values)
        return data, self.format, len(self.values)


@dataclass(frozen=True)
class MeshData:
    """Packed vertex bytes, their layout and the index buffer."""

    vertex_bytes: bytes
    layout: VertexLayoutDesc
    indices: Indices

    @classmethod
    def from_vertices(cls, vertices: Sequence[_Vertex], indices: Indices) -> MeshData:
        """Pack vertices of a single type together with their indices."""
        vertices = list(vertices)
        if not vertices:
            raise ValueError("a mesh needs at least one vertex")
        kind = type(vertices[0])
        if kind not in _VERTEX_TYPES:
            raise TypeError(f"not a vertex type: {kind.__name__}")
        if any(type(v) is not kind for v in vertices):
            raise TypeError("all vertices of a mesh must have the same type")
        if not isinstance(indices, Indices):
            raise TypeError("indices must be an Indices instance")
        return cls(
            vertex_bytes=b"".join(v.to_bytes() for v in vertices),
            layout=VertexLayoutDesc(kind.stride(), kind.attributes()),
            indices=indices,
        )

    @classmethod
    def make_square(cls, size: float, color: Sequence[int]) -> MeshData:
        """A square of the given side centred on the origin."""
        h = size * 0.5
        corners = [(-h, -h), (h, -h), (h, h), (-h, h)]
        verts = [Vertex2D(pos, tuple(color)) for pos in corners]
        return cls.from_vertices(verts, Indices.u16([0, 1, 2, 0, 2, 3]))

    @classmethod
    def make_cube(cls, size: float, color: Sequence[int]) -> MeshData:
        """A cube of the given edge length centred on the origin."""
        h = size * 0.5
        corners = [
            (-h, -h, h),
            (h, -h, h),
            (h, h, h),
            (-h, h, h),
            (-h, -h, -h),
            (h, -h, -h),
            (h, h, -h),
            (-h, h, -h),
        ]
        verts = [Vertex3D(pos, tuple(color)) for pos in corners]
        idx = [
            0, 1, 2, 0, 2, 3, 4, 6, 5, 4, 7, 6, 4, 5, 1, 4, 1, 0,
            3, 2, 6, 3, 6, 7, 1, 5, 6, 1, 6, 2, 4, 0, 3, 4, 3, 7,
        ]
        return cls.from_vertices(verts, Indices.u16(idx))