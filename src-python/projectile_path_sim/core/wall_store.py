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

from typing import Any, Iterable, Iterator, List, Optional, Union

from .behavior import Behavior
from .wall import Wall


class WallStore:
    """
    The obstacle set for one simulation run.

    Walls are kept in insertion order so that candidate hits, and therefore
    the resulting path, are deterministic. There is no removal or mutation;
    a store is built once and then read by the ray caster.

    Attributes:
        walls (list): Stored walls, normalized and non-degenerate
        dropped_count (int): Number of zero-area walls discarded on insertion
    """

    def __init__(self) -> None:
        self._walls: List[Wall] = []
        self.dropped_count: int = 0

    def add_wall(
        self,
        x1: float,
        y1: float,
        x2: float,
        y2: float,
        behavior: Union[Behavior, str],
    ) -> Optional[Wall]:
        """
        Add a wall given two opposite corners in any order.

        A wall whose width and height are both (nearly) zero is silently
        discarded; this is noise suppression, not a validation failure.

        Returns:
            Wall or None: The stored wall, or None if it was discarded
        """
        wall = Wall.normalized(x1, y1, x2, y2, behavior)
        if wall is None:
            self.dropped_count += 1
            return None
        self._walls.append(wall)
        return wall

    def add(self, wall: Any) -> Optional[Wall]:
        """
        Add a Wall instance or an (x1, y1, x2, y2, behavior) tuple.

        Wall instances are re-normalized, so hand-built walls with swapped
        corners are accepted too.
        """
        if isinstance(wall, Wall):
            return self.add_wall(wall.xmin, wall.ymin, wall.xmax, wall.ymax, wall.behavior)
        try:
            x1, y1, x2, y2, behavior = wall
        except (TypeError, ValueError):
            raise ValueError(
                f"Wall must be a Wall or an (x1, y1, x2, y2, behavior) tuple, got {wall!r}"
            ) from None
        return self.add_wall(float(x1), float(y1), float(x2), float(y2), behavior)

    @classmethod
    def from_walls(cls, walls: Iterable[Any]) -> 'WallStore':
        """Build a store from Wall instances and/or 5-tuples."""
        store = cls()
        for wall in walls:
            store.add(wall)
        return store

    @property
    def walls(self) -> List[Wall]:
        return list(self._walls)

    def __iter__(self) -> Iterator[Wall]:
        return iter(self._walls)

    def __len__(self) -> int:
        return len(self._walls)

    def __repr__(self) -> str:
        return f"WallStore({len(self._walls)} walls, dropped={self.dropped_count})"
