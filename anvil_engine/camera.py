"""Cameras, projections and the camera uniform block."""

from __future__ import annotations

import math
import struct
from dataclasses import dataclass, field
from typing import Sequence, Union

# Matrices are stored column-major: matrix[column][row].
Matrix4 = tuple[tuple[float, float, float, float], ...]
Vec3 = tuple[float, float, float]

_ZERO_MATRIX: Matrix4 = tuple((0.0, 0.0, 0.0, 0.0) for _ in range(4))
_UNIFORM_PACKING = struct.Struct("<16f")


def _as_matrix(matrix: Sequence[Sequence[float]]) -> Matrix4:
    columns = tuple(tuple(float(v) for v in column) for column in matrix)
    if len(columns) != 4 or any(len(column) != 4 for column in columns):
        raise ValueError("a 4x4 matrix is required")
    return columns


def _sub(a: Vec3, b: Vec3) -> Vec3:
    return (a[0] - b[0], a[1] - b[1], a[2] - b[2])


def _dot(a: Vec3, b: Vec3) -> float:
    return a[0] * b[0] + a[1] * b[1] + a[2] * b[2]


def _cross(a: Vec3, b: Vec3) -> Vec3:
    return (
        a[1] * b[2] - a[2] * b[1],
        a[2] * b[0] - a[0] * b[2],
        a[0] * b[1] - a[1] * b[0],
    )


def _normalize(v: Vec3, what: str) -> Vec3:
    length = math.sqrt(_dot(v, v))
    if length == 0.0:
        raise ValueError(f"cannot normalize a zero-length {what}")
    return (v[0] / length, v[1] / length, v[2] / length)


def _mat_mul(a: Matrix4, b: Matrix4) -> Matrix4:
    return tuple(
        tuple(sum(a[k][row] * b_col[k] for k in range(4)) for row in range(4))
        for b_col in b
    )


@dataclass
class CameraUniform:
    """The view-projection matrix as uploaded to the GPU."""

    view_proj: Matrix4 = field(default_factory=lambda: _ZERO_MATRIX)

    def __post_init__(self) -> None:
        self.view_proj = _as_matrix(self.view_proj)

    def update_from_matrix(self, matrix: Sequence[Sequence[float]]) -> None:
        self.view_proj = _as_matrix(matrix)

    def to_bytes(self) -> bytes:
        """Column-major little-endian 32-bit floats."""
        return _UNIFORM_PACKING.pack(*(v for column in self.view_proj for v in column))


@dataclass(frozen=True)
class Perspective:
    """Right-handed perspective projection with a vertical field of view in radians."""

    fov_y: float
    aspect: float
    near: float
    far: float

    def _matrix(self) -> Matrix4:
        if not 0.0 < self.fov_y < math.pi:
            raise ValueError(f"field of view must be in (0, pi): {self.fov_y}")
        if self.aspect == 0.0:
            raise ValueError("aspect ratio must be non-zero")
        if self.near <= 0.0 or self.far <= 0.0:
            raise ValueError("near and far planes must be positive")
        if self.near == self.far:
            raise ValueError("near and far planes must differ")
        f = 1.0 / math.tan(self.fov_y / 2.0)
        depth = self.near - self.far
        return (
            (f / self.aspect, 0.0, 0.0, 0.0),
            (0.0, f, 0.0, 0.0),
            (0.0, 0.0, (self.far + self.near) / depth, -1.0),
            (0.0, 0.0, 2.0 * self.far * self.near / depth, 0.0),
        )


@dataclass(frozen=True)
class Ortho:
    """Orthographic projection bounded by the given planes."""

    left: float
    right: float
    bottom: float
    top: float
    near: float
    far: float

    def _matrix(self) -> Matrix4:
        width = self.right - self.left
        height = self.top - self.bottom
        depth = self.far - self.near
        if width == 0.0 or height == 0.0 or depth == 0.0:
            raise ValueError("orthographic bounds must not be degenerate")
        return (
            (2.0 / width, 0.0, 0.0, -(self.right + self.left) / width),
            (0.0, 2.0 / height, 0.0, -(self.top + self.bottom) / height),
            (0.0, 0.0, -2.0 / depth, -(self.far + self.near) / depth),
            (0.0, 0.0, 0.0, 1.0),
        )


Projection = Union[Perspective, Ortho]


@dataclass
class Camera:
    """A camera looking from position towards target."""

    position: Vec3
    target: Vec3
    up: Vec3
    proj: Projection

    @classmethod
    def new_persp(cls) -> Camera:
        return cls(
            position=(0.0, 0.0, 3.0),
            target=(0.0, 0.0, 0.0),
            up=(0.0, 1.0, 0.0),
            proj=Perspective(fov_y=math.radians(60.0), aspect=1.0, near=0.1, far=100.0),
        )

    @classmethod
    def new_ortho(cls) -> Camera:
        return cls(
            position=(0.0, 0.0, 3.0),
            target=(0.0, 0.0, 0.0),
            up=(0.0, 1.0, 0.0),
            proj=Ortho(left=-1.0, right=1.0, bottom=-1.0, top=1.0, near=0.1, far=100.0),
        )

    def view(self) -> Matrix4:
        """Right-handed look-at view matrix."""
        eye = tuple(float(v) for v in self.position)
        forward = _normalize(_sub(tuple(self.target), eye), "view direction")
        side = _normalize(_cross(forward, tuple(self.up)), "side vector")
        up = _cross(side, forward)
        return (
            (side[0], up[0], -forward[0], 0.0),
            (side[1], up[1], -forward[1], 0.0),
            (side[2], up[2], -forward[2], 0.0),
            (-_dot(eye, side), -_dot(eye, up), _dot(eye, forward), 1.0),
        )

    def projection(self) -> Matrix4:
        return self.proj._matrix()

    def build_uniform(self) -> CameraUniform:
        return CameraUniform(view_proj=_mat_mul(self.projection(), self.view()))