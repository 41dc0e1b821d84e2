"""3x3 matrices for affine transforms in the plane."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Iterable, Iterator, Optional, Sequence, Tuple

from dudes_in_space.geom.rect import Rect
from dudes_in_space.geom.vectors import Complex, Point, Size, Vector

# Row-major layout of the nine cells.
SCALE_X = 0
SKEW_X = 1
TRANS_X = 2
SKEW_Y = 3
SCALE_Y = 4
TRANS_Y = 5
PERSP0 = 6
PERSP1 = 7
PERSP2 = 8

_SIDE = 3


def det2x2(values: Sequence[Any]) -> Any:
    """Determinant of a 2x2 matrix given row-major as four values."""
    a, b, c, d = values
    return a * d - b * c


@dataclass(frozen=True)
class Matrix:
    """A row-major 3x3 matrix."""

    values: Tuple[Any, ...]

    def __post_init__(self) -> None:
        values = tuple(self.values)
        if len(values) != _SIDE * _SIDE:
            raise ValueError(f"a matrix needs 9 values, got {len(values)}")
        object.__setattr__(self, "values", values)

    @classmethod
    def identity(cls) -> "Matrix":
        """The identity matrix."""
        return cls((1.0, 0.0, 0.0, 0.0, 1.0, 0.0, 0.0, 0.0, 1.0))

    @classmethod
    def scale(cls, x: Any, y: Any) -> "Matrix":
        """A matrix scaling by ``x`` horizontally and ``y`` vertically."""
        return cls((x, 0.0, 0.0, 0.0, y, 0.0, 0.0, 0.0, 1.0))

    @classmethod
    def translate(cls, offset: Vector) -> "Matrix":
        """A matrix translating by ``offset``."""
        return cls((1.0, 0.0, offset.x, 0.0, 1.0, offset.y, 0.0, 0.0, 1.0))

    @classmethod
    def rotate(cls, rotor: Complex) -> "Matrix":
        """A rotation matrix built from a unit complex number."""
        return cls(
            (rotor.real, -rotor.imag, 0.0, rotor.imag, rotor.real, 0.0, 0.0, 0.0, 1.0)
        )

    def scale_x(self) -> Any:
        return self.values[SCALE_X]

    def scale_y(self) -> Any:
        return self.values[SCALE_Y]

    def average_scale(self) -> Any:
        """Mean of the horizontal and vertical scale factors."""
        return (self.values[SCALE_X] + self.values[SCALE_Y]) / 2

    def translation(self) -> Vector:
        return Vector(self.values[TRANS_X], self.values[TRANS_Y])

    def rotation(self) -> Complex:
        v = self.values
        return Complex(v[SCALE_X] / v[SCALE_Y], -v[SKEW_X] / v[SKEW_Y])

    def apply_to_vector3(self, vec: Iterable[Any]) -> Tuple[Any, Any, Any]:
        """Multiply the matrix by a column vector of three values."""
        x, y, z = vec
        a, b, c, d, e, f, g, h, i = self.values
        return (a * x + b * y + c * z, d * x + e * y + f * z, g * x + h * y + i * z)

    def apply_to_point(self, point: Point) -> Point:
        """Transform a point, dividing by the homogeneous coordinate."""
        rx, ry, rz = self.apply_to_vector3((point.x, point.y, 1.0))
        return Point(rx / rz, ry / rz)

    def apply_to_rect(self, rect: Rect) -> Rect:
        """Bounding box of the transformed corners of a rectangle."""
        corners = (
            rect.left_top(),
            rect.right_top(),
            rect.right_bottom(),
            rect.left_bottom(),
        )
        result = Rect.aabb_from_points(self.apply_to_point(p) for p in corners)
        assert result is not None
        return result

    def apply_without_translation(self, point: Point) -> Point:
        """Transform a point treating the translation as zero."""
        a, b, _, d, e, _, g, h, i = self.values
        stripped = Matrix((a, b, 0.0, d, e, 0.0, g, h, i))
        return stripped.apply_to_point(point)

    def apply_only_scale(self, size: Size) -> Size:
        """Scale a size by the matrix's scale factors only."""
        return Size(size.w * self.values[SCALE_X], size.h * self.values[SCALE_Y])

    def transposed(self) -> "Matrix":
        """The matrix reflected about its main diagonal."""
        a, b, c, d, e, f, g, h, i = self.values
        return Matrix((a, d, g, b, e, h, c, f, i))

    def minor(self, i: int, j: int) -> Tuple[Any, Any, Any, Any]:
        """The 2x2 matrix left after removing column ``i`` and row ``j``."""
        if not (0 <= i < _SIDE and 0 <= j < _SIDE):
            raise IndexError(f"minor index ({i}, {j}) out of range")
        return tuple(
            self.values[x + y * _SIDE]
            for y in range(_SIDE)
            for x in range(_SIDE)
            if x != i and y != j
        )

    def det(self) -> Any:
        """Determinant."""
        a, b, c, d, e, f, g, h, i = self.values
        return a * e * i + b * f * g + c * d * h - c * e * g - b * d * i - a * f * h

    def inverted(self) -> Optional["Matrix"]:
        """The inverse matrix, or None if the matrix is singular."""
        det = self.det()
        if det == 0:
            return None
        t = self.transposed()
        cells = []
        for row in range(_SIDE):
            for col in range(_SIDE):
                cofactor = det2x2(t.minor(col, row))
                if (row + col) % 2:
                    cofactor = -cofactor
                cells.append(cofactor / det)
        return Matrix(tuple(cells))

    def __matmul__(self, other: Any) -> Any:
        if isinstance(other, Matrix):
            l, r = self.values, other.values
            return Matrix(
                tuple(
                    l[row * 3] * r[col] + l[row * 3 + 1] * r[3 + col] + l[row * 3 + 2] * r[6 + col]
                    for row in range(_SIDE)
                    for col in range(_SIDE)
                )
            )
        if isinstance(other, Point):
            return self.apply_to_point(other)
        if isinstance(other, Size):
            return self.apply_only_scale(other)
        if isinstance(other, Rect):
            return self.apply_to_rect(other)
        if isinstance(other, (tuple, list)) and len(other) == _SIDE:
            return self.apply_to_vector3(other)
        return NotImplemented

    def __iter__(self) -> Iterator[Any]:
        return iter(self.values)