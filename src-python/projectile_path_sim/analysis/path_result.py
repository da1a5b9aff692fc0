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
Path Result Container
===============================================================================
Wraps the vertices returned by a simulation run together with the inputs
that produced them and how the run ended, so that several runs can be
compared and exported.
===============================================================================
"""

import uuid as uuid_module
from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, Dict, Iterable, List, Optional, Tuple, Union

import numpy as np
from shapely.geometry import LineString

from ..core.geometry import Vector2, as_vector2
from ..core.simulator import ProjectilePathSimulator, TracerStatus
from ..core.tolerances import ToleranceConfig
from ..core.wall_store import WallStore


@dataclass
class PathResult:
    """
    Container for one simulation run.

    Attributes:
        vertices: Path vertices; the first is the start position
        start: Start position
        direction: Unit direction at the start
        speed: Tick length used for the run
        distance_budget: Distance budget used for the run
        status: How the run ended
        wall_count: Number of walls in the run (after zero-area filtering)
        tick_count: Ticks run
        event_count: Vertices recorded at wall faces
        travelled_distance: Distance consumed from the budget
        warning: Iteration-limit warning, if any
        uuid: Unique identifier for this run
        name: Optional human-readable name
        timestamp: ISO format timestamp when the run completed
    """
    vertices: List[Vector2]
    start: Vector2
    direction: Vector2
    speed: float
    distance_budget: float
    status: TracerStatus
    wall_count: int = 0
    tick_count: int = 0
    event_count: int = 0
    travelled_distance: float = 0.0
    warning: Optional[str] = None
    uuid: str = field(default_factory=lambda: str(uuid_module.uuid4()))
    name: Optional[str] = None
    timestamp: str = field(default_factory=lambda: datetime.now().isoformat())

    @property
    def stopped(self) -> bool:
        return self.status is TracerStatus.STOPPED

    @property
    def end(self) -> Vector2:
        return self.vertices[-1]

    def to_linestring(self) -> Optional[LineString]:
        """
        The path as a Shapely LineString.

        Returns:
            LineString or None: None if the path has a single vertex
        """
        if len(self.vertices) < 2:
            return None
        return LineString([(v.x, v.y) for v in self.vertices])

    def as_array(self) -> np.ndarray:
        """Vertices as an (n, 2) float array."""
        return np.array([[v.x, v.y] for v in self.vertices], dtype=float).reshape(-1, 2)

    def segment_lengths(self) -> np.ndarray:
        """Length of each polyline segment, in order."""
        coords = self.as_array()
        if len(coords) < 2:
            return np.zeros(0)
        deltas = np.diff(coords, axis=0)
        return np.hypot(deltas[:, 0], deltas[:, 1])

    def cumulative_lengths(self) -> np.ndarray:
        """Distance travelled when each vertex is reached (0 for the start)."""
        return np.concatenate(([0.0], np.cumsum(self.segment_lengths())))

    @property
    def length(self) -> float:
        """Euclidean length of the polyline through the vertices."""
        line = self.to_linestring()
        return 0.0 if line is None else float(line.length)

    @property
    def bounds(self) -> Tuple[float, float, float, float]:
        """Bounding box (minx, miny, maxx, maxy) of the vertices."""
        coords = self.as_array()
        return (float(coords[:, 0].min()), float(coords[:, 1].min()),
                float(coords[:, 0].max()), float(coords[:, 1].max()))

    def summary(self) -> Dict[str, Any]:
        """JSON-friendly description of the run (without the vertex list)."""
        return {
            'uuid': self.uuid,
            'name': self.name,
            'timestamp': self.timestamp,
            'start': self.start.to_dict(),
            'direction': self.direction.to_dict(),
            'speed': self.speed,
            'distance_budget': self.distance_budget,
            'status': self.status.value,
            'vertex_count': len(self.vertices),
            'wall_count': self.wall_count,
            'tick_count': self.tick_count,
            'event_count': self.event_count,
            'travelled_distance': self.travelled_distance,
            'path_length': self.length,
            'warning': self.warning,
        }

    def __repr__(self) -> str:
        return (f"PathResult(vertices={len(self.vertices)}, status={self.status.value}, "
                f"length={self.length:.6g}, uuid={self.uuid[:8]}...)")


def run_simulation(
    start: Any,
    direction: Any,
    speed: float,
    distance_budget: float,
    walls: Union[WallStore, Iterable[Any]] = (),
    tolerance_config: Optional[ToleranceConfig] = None,
    name: Optional[str] = None,
    verbose: int = 0,
) -> PathResult:
    """
    Run a simulation and wrap its output in a PathResult.

    Arguments are the same as core.simulator.simulate().

    Raises:
        ValueError: On invalid speed, budget or direction.
    """
    sim = ProjectilePathSimulator(speed, distance_budget, tolerance_config, verbose)
    sim.wall_store = walls if isinstance(walls, WallStore) else WallStore.from_walls(walls)
    vertices = sim.simulate(start, direction)
    return PathResult(
        vertices=vertices,
        start=as_vector2(start),
        direction=as_vector2(direction).normalized(),
        speed=speed,
        distance_budget=distance_budget,
        status=sim.status,
        wall_count=len(sim.wall_store),
        tick_count=sim.tick_count,
        event_count=sim.event_count,
        travelled_distance=sim.travelled_distance,
        warning=sim.warning,
        name=name,
    )
