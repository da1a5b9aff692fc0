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
from typing import Optional, Tuple, Union

from .behavior import Behavior
from .constants import WALL_DEGENERACY_TOLERANCE


@dataclass(frozen=True)
class Wall:
    """
    Axis-aligned rectangular obstacle.

    A wall is normalized so that xmin <= xmax and ymin <= ymax. A wall may be
    a line segment (zero width or zero height) but never a single point; use
    Wall.normalized() or WallStore.add_wall() to build one from arbitrary
    corners.

    Attributes:
        xmin, ymin: Lower-left corner
        xmax, ymax: Upper-right corner
        behavior: What happens when the projectile strikes a face
    """
    xmin: float
    ymin: float
    xmax: float
    ymax: float
    behavior: Behavior

    @classmethod
    def normalized(
        cls,
        x1: float,
        y1: float,
        x2: float,
        y2: float,
        behavior: Union[Behavior, str],
    ) -> Optional['Wall']:
        """
        Build a wall from two opposite corners in any order.

        Returns:
            Wall or None: None if the corners coincide (zero-area point wall)
        """
        if abs(x1 - x2) < WALL_DEGENERACY_TOLERANCE and abs(y1 - y2) < WALL_DEGENERACY_TOLERANCE:
            return None
        return cls(min(x1, x2), min(y1, y2), max(x1, x2), max(y1, y2), Behavior.parse(behavior))

    @property
    def width(self) -> float:
        return self.xmax - self.xmin

    @property
    def height(self) -> float:
        return self.ymax - self.ymin

    @property
    def vertical_faces(self) -> Tuple[float, ...]:
        """x coordinates of the vertical faces (one for a zero-width wall)."""
        if self.width <= WALL_DEGENERACY_TOLERANCE:
            return (self.xmin,)
        return (self.xmin, self.xmax)

    @property
    def horizontal_faces(self) -> Tuple[float, ...]:
        """y coordinates of the horizontal faces (one for a zero-height wall)."""
        if self.height <= WALL_DEGENERACY_TOLERANCE:
            return (self.ymin,)
        return (self.ymin, self.ymax)

    @property
    def bounds(self) -> Tuple[float, float, float, float]:
        """Bounding box as (minx, miny, maxx, maxy), Shapely order."""
        return (self.xmin, self.ymin, self.xmax, self.ymax)

    def __repr__(self) -> str:
        return (f"Wall(({self.xmin}, {self.ymin})-({self.xmax}, {self.ymax}), "
                f"{self.behavior.name})")
