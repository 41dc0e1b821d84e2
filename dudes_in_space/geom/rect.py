"""Axis-aligned rectangles."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Iterable, Optional

from dudes_in_space.geom.noneg import NoNeg
from dudes_in_space.geom.vectors import Point, Size, Vector
from dudes_in_space.utils.ranges import Range


def _bounding(bounds: Iterable[tuple]) -> Optional[tuple]:
    result: Optional[list] = None
    for left, right, top, bottom in bounds:
        if result is None:
            result = [left, right, top, bottom]
            continue
        if left < result[0]:
            result[0] = left
        if right > result[1]:
            result[1] = right
        if top < result[2]:
            result[2] = top
        if bottom > result[3]:
            result[3] = bottom
    return None if result is None else tuple(result)


@dataclass(frozen=True)
class Rect:
    """A rectangle given by its top-left corner and its size."""

    x: Any
    y: Any
    w: Any
    h: Any

    def left(self) -> Any:
        return self.x

    def right(self) -> Any:
        return self.x + self.w

    def top(self) -> Any:
        return self.y

    def bottom(self) -> Any:
        return self.y + self.h

    def left_top(self) -> Point:
        return Point(self.left(), self.top())

    def right_top(self) -> Point:
        return Point(self.right(), self.top())

    def right_bottom(self) -> Point:
        return Point(self.right(), self.bottom())

    def left_bottom(self) -> Point:
        return Point(self.left(), self.bottom())

    @classmethod
    def from_lrtb(cls, left: Any, right: Any, top: Any, bottom: Any) -> "Rect":
        """Build from edges, swapping them so width and height are non-negative."""
        lo_x, hi_x = (left, right) if left < right else (right, left)
        lo_y, hi_y = (top, bottom) if top < bottom else (bottom, top)
        return cls(lo_x, lo_y, hi_x - lo_x, hi_y - lo_y)

    @classmethod
    def from_lrtb_unchecked(cls, left: Any, right: Any, top: Any, bottom: Any) -> "Rect":
        """Build from edges as given."""
        return cls(left, top, right - left, bottom - top)

    @classmethod
    def aabb(cls, rects: Iterable["Rect"]) -> Optional["Rect"]:
        """Bounding box of rectangles, or None if there are none."""
        edges = _bounding((r.left(), r.right(), r.top(), r.bottom()) for r in rects)
        return None if edges is None else cls.from_lrtb_unchecked(*edges)

    @classmethod
    def aabb_from_points(cls, points: Iterable[Point]) -> Optional["Rect"]:
        """Bounding box of points, or None if there are none."""
        edges = _bounding((p.x, p.x, p.y, p.y) for p in points)
        return None if edges is None else cls.from_lrtb_unchecked(*edges)

    @classmethod
    def from_center(cls, center: Point, size: Size) -> "Rect":
        return cls(center.x - size.w / 2, center.y - size.h / 2, size.w, size.h)

    @classmethod
    def from_point_size(cls, point: Point, size: Size) -> "Rect":
        return cls(point.x, point.y, size.w, size.h)

    def center(self) -> Point:
        return Point(self.x + self.w / 2, self.y + self.h / 2)

    def x_range(self) -> Range:
        return Range(self.x, self.w + self.x)

    def y_range(self) -> Range:
        return Range(self.y, self.h + self.y)

    def contains(self, other: "Rect") -> bool:
        """True if ``other`` lies entirely within this rectangle."""
        return (
            other.left() >= self.left()
            and other.right() <= self.right()
            and other.top() >= self.top()
            and other.bottom() <= self.bottom()
        )

    def contains_point(self, point: Point) -> bool:
        """True if the point lies within or on the edge of this rectangle."""
        return (
            self.left() <= point.x <= self.right()
            and self.top() <= point.y <= self.bottom()
        )

    def intersects(self, other: "Rect") -> bool:
        """True if the interiors of the rectangles overlap."""
        left = max(self.left(), other.left())
        right = min(self.right(), other.right())
        top = max(self.top(), other.top())
        bottom = min(self.bottom(), other.bottom())
        return left < right and top < bottom

    def intersects_circle(self, center: Point, radius: Any) -> bool:
        """True if a circle touches or overlaps this rectangle."""
        r = radius.unwrap() if isinstance(radius, NoNeg) else NoNeg(radius).unwrap()
        cx, cy = center.x, center.y
        test_x, test_y = cx, cy
        if cx < self.x:
            test_x = self.x
        elif cx > self.x + self.w:
            test_x = self.x + self.w
        if cy < self.y:
            test_y = self.y
        elif cy > self.y + self.h:
            test_y = self.y + self.h
        dx = cx - test_x
        dy = cy - test_y
        return dx * dx + dy * dy <= r * r

    def extended(self, vec: Vector) -> "Rect":
        """Grow by ``vec`` on every side."""
        dx, dy = vec
        return Rect(self.x - dx, self.y - dy, self.w + dx * 2, self.h + dy * 2)

    def size(self) -> Size:
        return Size(self.w, self.h)

    def __truediv__(self, divisor: Any) -> "Rect":
        """Shrink around the centre by ``divisor``."""
        return Rect.from_center(self.center(), self.size() / divisor)