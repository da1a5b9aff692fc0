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

===============================================================================
Wall / Path Geometry Queries
===============================================================================
Shapely-backed helpers for asking questions about a scene after (or before)
a run: which walls contain a point, which walls a traced path touches.
These are analysis utilities; the collision engine itself does not use them.
===============================================================================
"""

from typing import Any, Iterable, List, Sequence, Union

from shapely.geometry import LineString, Point, box
from shapely.geometry.base import BaseGeometry

from ..core.behavior import Behavior
from ..core.geometry import Vector2, as_vector2
from ..core.wall import Wall


def wall_to_polygon(wall: Wall) -> BaseGeometry:
    """
    Convert a wall to a Shapely geometry.

    Returns:
        A Polygon (box) for a wall with area, or a LineString for a wall
        with zero width or zero height.
    """
    if wall.width == 0.0 or wall.height == 0.0:
        return LineString([(wall.xmin, wall.ymin), (wall.xmax, wall.ymax)])
    return box(wall.xmin, wall.ymin, wall.xmax, wall.ymax)


def walls_containing_point(
    walls: Iterable[Wall],
    point: Any,
    include_boundary: bool = False,
) -> List[Wall]:
    """
    Walls whose interior (optionally including the boundary) contains ``point``.

    Useful to tell in advance whether a start position lies inside a wall,
    in which case only the wall's exit face is recorded.

    Args:
        walls: Walls to test
        point: Point-like value (see core.geometry.as_vector2)
        include_boundary: If True, points on a face also count

    Returns:
        list: Matching walls, in input order
    """
    p = as_vector2(point).to_shapely()
    result = []
    for wall in walls:
        geom = wall_to_polygon(wall)
        if include_boundary:
            if geom.covers(p):
                result.append(wall)
        elif geom.contains(p):
            result.append(wall)
    return result


def walls_touched_by_path(
    walls: Iterable[Wall],
    vertices: Sequence[Vector2],
    behavior: Union[Behavior, str, None] = None,
) -> List[Wall]:
    """
    Walls that the polyline through ``vertices`` intersects.

    Args:
        walls: Walls to test
        vertices: Path vertices
        behavior: If given, only walls with this behavior are returned

    Returns:
        list: Matching walls, in input order
    """
    if not vertices:
        return []
    if len(vertices) == 1:
        path_geom = Point(vertices[0].x, vertices[0].y)
    else:
        path_geom = LineString([(v.x, v.y) for v in vertices])
    wanted = Behavior.parse(behavior) if behavior is not None else None
    return [
        wall for wall in walls
        if (wanted is None or wall.behavior is wanted)
        and wall_to_polygon(wall).intersects(path_geom)
    ]
