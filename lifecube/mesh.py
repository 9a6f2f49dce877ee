"""Vertex data for the unit cube, laid out as interleaved float buffers."""

from __future__ import annotations

from collections.abc import Iterator, Sequence
from dataclasses import dataclass

INV_SQRT3 = 0.577333

Vertex = tuple[float, ...]
Triangle = tuple[Vertex, Vertex, Vertex]


@dataclass(frozen=True)
class VertexAttribute:
    """One attribute inside an interleaved vertex: shader location, float count and offset in floats."""

    name: str
    location: int
    size: int
    offset: int


@dataclass(frozen=True)
class Mesh:
    """Interleaved vertex data, optionally drawn through an index list."""

    data: tuple[float, ...]
    stride: int
    attributes: tuple[VertexAttribute, ...]
    indices: tuple[int, ...] | None = None

    def __post_init__(self) -> None:
        object.__setattr__(self, "data", tuple(float(v) for v in self.data))
        object.__setattr__(self, "attributes", tuple(self.attributes))
        if self.stride <= 0:
            raise ValueError("stride must be positive")
        if len(self.data) % self.stride:
            raise ValueError("vertex data length is not a multiple of the stride")
        for attribute in self.attributes:
            if attribute.size <= 0 or attribute.offset < 0:
                raise ValueError(f"attribute {attribute.name!r} has a bad size or offset")
            if attribute.offset + attribute.size > self.stride:
                raise ValueError(f"attribute {attribute.name!r} does not fit in the stride")
        count = len(self)
        if self.indices is None:
            if count % 3:
                raise ValueError("vertex count is not a multiple of three")
        else:
            object.__setattr__(self, "indices", tuple(int(i) for i in self.indices))
            if len(self.indices) % 3:
                raise ValueError("index count is not a multiple of three")
            bad = [i for i in self.indices if not 0 <= i < count]
            if bad:
                raise ValueError(f"indices out of range: {bad}")

    def __len__(self) -> int:
        return len(self.data) // self.stride

    def vertex(self, index: int) -> Vertex:
        """Return every float of the vertex at ``index``."""
        if not 0 <= index < len(self):
            raise IndexError(f"vertex index {index} out of range")
        start = index * self.stride
        return self.data[start : start + self.stride]

    def triangles(self) -> Iterator[Triangle]:
        """Yield the triangles in draw order, each as three vertices."""
        order: Sequence[int] = self.indices if self.indices is not None else range(len(self))
        it = iter(order)
        for a, b, c in zip(it, it, it):
            yield self.vertex(a), self.vertex(b), self.vertex(c)


_CUBE_DATA = (
    -0.5, -0.5, 0.5, 0.0, 0.0, 0.0, 0.0, 1.0,
    0.5, -0.5, 0.5, 1.0, 0.0, 0.0, 0.0, 1.0,
    0.5, 0.5, 0.5, 1.0, 1.0, 0.0, 0.0, 1.0,
    0.5, 0.5, 0.5, 1.0, 1.0, 0.0, 0.0, 1.0,
    -0.5, 0.5, 0.5, 0.0, 1.0, 0.0, 0.0, 1.0,
    -0.5, -0.5, 0.5, 0.0, 0.0, 0.0, 0.0, 1.0,
    0.5, 0.5, -0.5, 1.0, 1.0, 0.0, 0.0, -1.0,
    0.5, -0.5, -0.5, 1.0, 0.0, 0.0, 0.0, -1.0,
    -0.5, -0.5, -0.5, 0.0, 0.0, 0.0, 0.0, -1.0,
    -0.5, -0.5, -0.5, 0.0, 0.0, 0.0, 0.0, -1.0,
    -0.5, 0.5, -0.5, 0.0, 1.0, 0.0, 0.0, -1.0,
    0.5, 0.5, -0.5, 1.0, 1.0, 0.0, 0.0, -1.0,
    -0.5, 0.5, -0.5, 0.0, 1.0, -1.0, 0.0, 0.0,
    -0.5, -0.5, -0.5, 0.0, 0.0, -1.0, 0.0, 0.0,
    -0.5, -0.5, 0.5, 1.0, 0.0, -1.0, 0.0, 0.0,
    -0.5, -0.5, 0.5, 1.0, 0.0, -1.0, 0.0, 0.0,
    -0.5, 0.5, 0.5, 0.0, 1.0, -1.0, 0.0, 0.0,
    -0.5, 0.5, -0.5, 0.0, 1.0, -1.0, 0.0, 0.0,
    0.5, -0.5, 0.5, 1.0, 0.0, 1.0, 0.0, 0.0,
    0.5, -0.5, -0.5, 0.0, 0.0, 1.0, 0.0, 0.0,
    0.5, 0.5, -0.5, 0.0, 1.0, 1.0, 0.0, 0.0,
    0.5, 0.5, -0.5, 0.0, 1.0, 1.0, 0.0, 0.0,
    0.5, 0.5, 0.5, 1.0, 1.0, 1.0, 0.0, 0.0,
    0.5, -0.5, 0.5, 1.0, 0.0, 1.0, 0.0, 0.0,
    -0.5, -0.5, -0.5, 0.0, 0.0, 0.0, -1.0, 0.0,
    0.5, -0.5, -0.5, 1.0, 0.0, 0.0, -1.0, 0.0,
    0.5, -0.5, 0.5, 1.0, 1.0, 0.0, -1.0, 0.0,
    0.5, -0.5, 0.5, 1.0, 1.0, 0.0, -1.0, 0.0,
    -0.5, -0.5, 0.5, 1.0, 0.0, 0.0, -1.0, 0.0,
    -0.5, -0.5, -0.5, 0.0, 0.0, 0.0, -1.0, 0.0,
    -0.5, 0.5, -0.5, 0.0, 0.0, 0.0, 1.0, 0.0,
    -0.5, 0.5, 0.5, 0.0, 1.0, 0.0, 1.0, 0.0,
    0.5, 0.5, 0.5, 1.0, 1.0, 0.0, 1.0, 0.0,
    0.5, 0.5, 0.5, 1.0, 1.0, 0.0, 1.0, 0.0,
    0.5, 0.5, -0.5, 0.0, 1.0, 0.0, 1.0, 0.0,
    -0.5, 0.5, -0.5, 0.0, 0.0, 0.0, 1.0, 0.0,
)

_INDEXED_DATA = (
    -0.5, -0.5, 0.5, 0.0, 0.0,
    0.5, -0.5, 0.5, 1.0, 0.0,
    0.5, 0.5, 0.5, 1.0, 1.0,
    -0.5, 0.5, 0.5, 0.0, 1.0,
    -0.5, -0.5, -0.5, 0.0, 0.0,
    0.5, -0.5, -0.5, 1.0, 0.0,
    0.5, 0.5, -0.5, 1.0, 1.0,
    -0.5, 0.5, -0.5, 0.0, 1.0,
)

_INDICES = (
    0, 1, 2, 2, 3, 0,
    6, 5, 4, 4, 7, 6,
    7, 4, 0, 0, 3, 7,
    1, 5, 6, 6, 2, 1,
    4, 5, 1, 1, 0, 4,
    7, 3, 2, 2, 6, 7,
)

_POSITION = VertexAttribute("position", 0, 3, 0)
_TEXCOORD = VertexAttribute("texcoord", 1, 2, 3)
_NORMAL = VertexAttribute("normal", 2, 3, 5)


def cube_mesh() -> Mesh:
    """The 36-vertex cube with position, texture coordinate and face normal per vertex."""
    return Mesh(_CUBE_DATA, 8, (_POSITION, _TEXCOORD, _NORMAL))


def indexed_cube_mesh() -> Mesh:
    """The 8-corner cube with position and texture coordinate, drawn through 36 indices."""
    return Mesh(_INDEXED_DATA, 5, (_POSITION, _TEXCOORD), _INDICES)


def indexed_cube_normals() -> tuple[tuple[float, float, float], ...]:
    """Per-corner normals of the indexed cube, pointing diagonally outwards."""
    corners = indexed_cube_mesh()
    return tuple(
        tuple(INV_SQRT3 if c > 0 else -INV_SQRT3 for c in corners.vertex(i)[:3])
        for i in range(len(corners))
    )