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

from dataclasses import dataclass
from enum import Enum
from typing import Iterable, List, Optional

from .behavior import Behavior
from .geometry import Vector2
from .tolerances import Tolerances
from .wall import Wall


class FaceAxis(Enum):
    """Orientation of a struck wall face."""
    VERTICAL = 'vertical'      # x = const; a reflection flips the X component
    HORIZONTAL = 'horizontal'  # y = const; a reflection flips the Y component


@dataclass(frozen=True)
class CandidateHit:
    """
    One intersection of the current ray with one wall face.

    Attributes:
        distance: Travel distance along the (unit) ray to the impact
        point: Impact point
        axis: Orientation of the struck face
        behavior: Behavior of the wall owning the face
        wall: The wall owning the face
    """
    distance: float
    point: Vector2
    axis: FaceAxis
    behavior: Behavior
    wall: Optional[Wall] = None

    @property
    def vertical(self) -> bool:
        return self.axis is FaceAxis.VERTICAL

    @property
    def horizontal(self) -> bool:
        return self.axis is FaceAxis.HORIZONTAL


def _within(value: float, lo: float, hi: float, eps: float) -> bool:
    return lo - eps <= value <= hi + eps


def _hit_vertical_face(
    x_face: float,
    wall: Wall,
    origin: Vector2,
    direction: Vector2,
    max_distance: float,
    tol: Tolerances,
) -> Optional[CandidateHit]:
    if abs(direction.x) <= tol.direction:
        return None  # parallel
    s = (x_face - origin.x) / direction.x
    if s <= tol.distance or s > max_distance + tol.distance:
        return None  # behind, already on the face, or beyond this step
    y = origin.y + direction.y * s
    if not _within(y, wall.ymin, wall.ymax, tol.face):
        return None
    return CandidateHit(s, Vector2(x_face, y), FaceAxis.VERTICAL, wall.behavior, wall)


def _hit_horizontal_face(
    y_face: float,
    wall: Wall,
    origin: Vector2,
    direction: Vector2,
    max_distance: float,
    tol: Tolerances,
) -> Optional[CandidateHit]:
    if abs(direction.y) <= tol.direction:
        return None
    s = (y_face - origin.y) / direction.y
    if s <= tol.distance or s > max_distance + tol.distance:
        return None
    x = origin.x + direction.x * s
    if not _within(x, wall.xmin, wall.xmax, tol.face):
        return None
    return CandidateHit(s, Vector2(x, y_face), FaceAxis.HORIZONTAL, wall.behavior, wall)


def cast_ray(
    origin: Vector2,
    direction: Vector2,
    max_distance: float,
    walls: Iterable[Wall],
    tol: Tolerances,
) -> List[CandidateHit]:
    """
    Find every wall face the ray reaches within ``max_distance``.

    Each wall contributes up to four candidates: its two vertical faces
    (x = xmin, x = xmax) and its two horizontal faces (y = ymin, y = ymax).
    A face on which the origin already stands is not reported, so a ray
    starting inside a wall only sees the wall's exit face.

    Args:
        origin: Current position
        direction: Unit direction of travel
        max_distance: Distance left in the current tick
        walls: Walls to test, in a fixed order
        tol: Tolerances for this step

    Returns:
        list: Unordered CandidateHit objects (wall order, then face order)
    """
    candidates: List[CandidateHit] = []
    for wall in walls:
        for x_face in wall.vertical_faces:
            hit = _hit_vertical_face(x_face, wall, origin, direction, max_distance, tol)
            if hit is not None:
                candidates.append(hit)
        for y_face in wall.horizontal_faces:
            hit = _hit_horizontal_face(y_face, wall, origin, direction, max_distance, tol)
            if hit is not None:
                candidates.append(hit)
    return candidates
