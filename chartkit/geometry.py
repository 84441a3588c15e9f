"""Points and boxes in integer pixel space."""

import math
from dataclasses import dataclass, field, replace


def _mean_int(a, b):
    total = a + b
    quotient = abs(total) // 2
    return quotient if total >= 0 else -quotient


def _rotate_coordinate(cx, cy, x, y, theta_radians):
    dx, dy = float(x - cx), float(y - cy)
    cos_t, sin_t = math.cos(theta_radians), math.sin(theta_radians)
    rotated_x = dx * cos_t - dy * sin_t
    rotated_y = dx * sin_t + dy * cos_t
    return int(rotated_x) + cx, int(rotated_y) + cy


@dataclass(frozen=True)
class Point:
    """An x, y pair."""

    x: int
    y: int

    def distance_to(self, other):
        """Euclidean distance to another point."""
        return math.hypot(self.x - other.x, self.y - other.y)

    def __str__(self):
        return f"P{{{self.x},{self.y}}}"


@dataclass(frozen=True)
class Box:
    """The four edges of a rectangle.

    ``is_set`` marks a box whose zero edges are meant, rather than unset;
    it takes no part in equality.
    """

    top: int = 0
    left: int = 0
    right: int = 0
    bottom: int = 0
    is_set: bool = field(default=False, compare=False)

    def is_zero(self):
        """True if the box is unset and all edges are zero."""
        if self.is_set:
            return False
        return self.top == 0 and self.left == 0 and self.right == 0 and self.bottom == 0

    def __str__(self):
        return f"box({self.top},{self.left},{self.right},{self.bottom})"

    def _coalesce(self, value, default):
        if not self.is_set and value == 0:
            return default
        return value

    def get_top(self, default=0):
        return self._coalesce(self.top, default)

    def get_left(self, default=0):
        return self._coalesce(self.left, default)

    def get_right(self, default=0):
        return self._coalesce(self.right, default)

    def get_bottom(self, default=0):
        return self._coalesce(self.bottom, default)

    def width(self):
        return abs(self.right - self.left)

    def height(self):
        return abs(self.bottom - self.top)

    def center(self):
        """The (x, y) center of the box."""
        return self.left + (self.width() >> 1), self.top + (self.height() >> 1)

    def aspect(self):
        """Width divided by height; infinite or NaN for a flat box."""
        width, height = self.width(), self.height()
        if height == 0:
            return math.inf if width > 0 else math.nan
        return width / height

    def is_bigger_than(self, other):
        return (
            self.top < other.top
            or self.bottom > other.bottom
            or self.left < other.left
            or self.right > other.right
        )

    def is_smaller_than(self, other):
        return (
            self.top > other.top
            and self.bottom < other.bottom
            and self.left > other.left
            and self.right < other.right
        )

    def grow(self, other):
        """The smallest box holding both boxes."""
        return Box(
            top=min(self.top, other.top),
            left=min(self.left, other.left),
            right=max(self.right, other.right),
            bottom=max(self.bottom, other.bottom),
        )

    def shift(self, x, y):
        return Box(
            top=self.top + y,
            left=self.left + x,
            right=self.right + x,
            bottom=self.bottom + y,
        )

    def corners(self):
        return BoxCorners(
            top_left=Point(self.left, self.top),
            top_right=Point(self.right, self.top),
            bottom_right=Point(self.right, self.bottom),
            bottom_left=Point(self.left, self.bottom),
        )

    def fit(self, other):
        """Keep the aspect ratio of ``other`` but fit it inside this box."""
        ba = self.aspect()
        oa = other.aspect()
        if oa == ba:
            return replace(self)

        bw, bh = float(self.width()), float(self.height())
        bw2 = int(bw) >> 1
        bh2 = int(bh) >> 1
        if oa > ba:
            noh2 = (int(bw / oa) if oa > 1.0 else int(bh * oa)) >> 1
            return Box(
                top=(self.top + bh2) - noh2,
                left=self.left,
                right=self.right,
                bottom=(self.top + bh2) + noh2,
            )
        now2 = (int(bh / oa) if oa > 1.0 else int(bw * oa)) >> 1
        return Box(
            top=self.top,
            left=(self.left + bw2) - now2,
            right=(self.left + bw2) + now2,
            bottom=self.bottom,
        )

    def constrain(self, other):
        """The part of this box that lies inside ``other``."""
        return replace(
            self,
            top=max(self.top, other.top),
            left=max(self.left, other.left),
            right=min(self.right, other.right),
            bottom=min(self.bottom, other.bottom),
        )

    def outer_constrain(self, bounds, other):
        """Shrink this box by however far ``other`` sticks out of ``bounds``."""
        top, left, right, bottom = self.top, self.left, self.right, self.bottom
        if other.top < bounds.top:
            top = self.top + (bounds.top - other.top)
        if other.left < bounds.left:
            left = self.left + (bounds.left - other.left)
        if other.right > bounds.right:
            right = self.right - (other.right - bounds.right)
        if other.bottom > bounds.bottom:
            bottom = self.bottom - (other.bottom - bounds.bottom)
        return replace(self, top=top, left=left, right=right, bottom=bottom)


BOX_ZERO = Box(is_set=True)


@dataclass(frozen=True)
class BoxCorners:
    """A quadrilateral given by four independent corners."""

    top_left: Point
    top_right: Point
    bottom_right: Point
    bottom_left: Point

    def box(self):
        """The bounding box of the corners."""
        return Box(
            top=min(self.top_left.y, self.top_right.y),
            left=min(self.top_left.x, self.bottom_left.x),
            right=max(self.top_right.x, self.bottom_right.x),
            bottom=max(self.bottom_left.y, self.bottom_right.y),
        )

    def width(self):
        min_left = min(self.top_left.x, self.bottom_left.x)
        max_right = max(self.top_right.x, self.bottom_right.x)
        return max_right - min_left

    def height(self):
        min_top = min(self.top_left.y, self.top_right.y)
        max_bottom = max(self.bottom_left.y, self.bottom_right.y)
        return max_bottom - min_top

    def center(self):
        left = _mean_int(self.top_left.x, self.bottom_left.x)
        right = _mean_int(self.top_right.x, self.bottom_right.x)
        top = _mean_int(self.top_left.y, self.top_right.y)
        bottom = _mean_int(self.bottom_left.y, self.bottom_right.y)
        return ((right - left) >> 1) + left, ((bottom - top) >> 1) + top

    def rotate(self, theta_degrees):
        """Rotate every corner about the center by ``theta_degrees``."""
        cx, cy = self.center()
        theta = math.radians(theta_degrees)

        def turn(point):
            return Point(*_rotate_coordinate(cx, cy, point.x, point.y, theta))

        return BoxCorners(
            top_left=turn(self.top_left),
            top_right=turn(self.top_right),
            bottom_right=turn(self.bottom_right),
            bottom_left=turn(self.bottom_left),
        )

    def __str__(self):
        return (
            f"BoxC{{{self.top_left},{self.top_right},"
            f"{self.bottom_right},{self.bottom_left}}}"
        )