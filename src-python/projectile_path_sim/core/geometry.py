"""
Copyright 2026 projectile-path-sim authors and contributors

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at

    http://www.apache.org/licenses/LICENSE-2.0

Unless required by applicable law or agreed to in writing, software
distributed under the License is distributed on an "AS IS" BASIS,
WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
See the License for the specific language governing permissions and
limitations under the License.
"""

import math
from dataclasses import dataclass
from typing import Any, Dict, Iterator

from shapely.geometry import Point as ShapelyPoint


@dataclass(frozen=True)
class Vector2:
    """
    A pair of floats used both as a position and, normalized, as a direction.
    Can be converted to/from Shapely Point objects.
    """
    x: float
    y: float

    def to_shapely(self) -> ShapelyPoint:
        """Convert to Shapely Point."""
        return ShapelyPoint(self.x, self.y)

    @classmethod
    def from_shapely(cls, sp: ShapelyPoint) -> 'Vector2':
        """Create Vector2 from Shapely Point."""
        return cls(sp.x, sp.y)

    def to_dict(self) -> Dict[str, float]:
        """Convert to dictionary representation."""
        return {'x': self.x, 'y': self.y}

    def to_tuple(self):
        return (self.x, self.y)

    def __iter__(self) -> Iterator[float]:
        yield self.x
        yield self.y

    def __add__(self, other: 'Vector2') -> 'Vector2':
        return Vector2(self.x + other.x, self.y + other.y)

    def __sub__(self, other: 'Vector2') -> 'Vector2':
        return Vector2(self.x - other.x, self.y - other.y)

    def scaled(self, factor: float) -> 'Vector2':
        return Vector2(self.x * factor, self.y * factor)

    def length(self) -> float:
        """Euclidean length."""
        return math.hypot(self.x, self.y)

    def normalized(self) -> 'Vector2':
        """
        Unit vector with the same direction.

        Raises:
            ValueError: If the vector has zero length.
        """
        length = self.length()
        if length == 0.0:
            raise ValueError("Direction vector must not be zero")
        return Vector2(self.x / length, self.y / length)

    def advanced(self, direction: 'Vector2', distance: float) -> 'Vector2':
        """Point reached by travelling ``distance`` along ``direction``."""
        return Vector2(self.x + direction.x * distance, self.y + direction.y * distance)

    def reflected(self, flip_x: bool, flip_y: bool) -> 'Vector2':
        """Copy with the selected components negated."""
        return Vector2(-self.x if flip_x else self.x, -self.y if flip_y else self.y)

    def distance_to(self, other: 'Vector2') -> float:
        return math.hypot(self.x - other.x, self.y - other.y)

    def is_finite(self) -> bool:
        return math.isfinite(self.x) and math.isfinite(self.y)

    def __repr__(self) -> str:
        return f"Vector2(x={self.x}, y={self.y})"


def as_vector2(value: Any) -> Vector2:
    """
    Coerce a point-like value to a Vector2.

    Accepts Vector2, a Shapely Point, a {'x': .., 'y': ..} dict, any object
    with x/y attributes, or an (x, y) sequence.

    Raises:
        ValueError: If the value cannot be interpreted as a 2-D point.
    """
    if isinstance(value, Vector2):
        return value
    if isinstance(value, ShapelyPoint):
        return Vector2.from_shapely(value)
    if isinstance(value, dict):
        if 'x' in value and 'y' in value:
            return Vector2(float(value['x']), float(value['y']))
        raise ValueError(f"Point dict must have 'x' and 'y' keys, got {value}")
    if hasattr(value, 'x') and hasattr(value, 'y'):
        return Vector2(float(value.x), float(value.y))
    try:
        x, y = value
    except (TypeError, ValueError):
        raise ValueError(f"Cannot interpret {value!r} as a 2-D point") from None
    return Vector2(float(x), float(y))


def polyline_length(vertices) -> float:
    """Total Euclidean length of the polyline through ``vertices``."""
    total = 0.0
    for a, b in zip(vertices, vertices[1:]):
        total += a.distance_to(b)
    return total
