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

Projectile Path Sim
===================

Traces a point moving at constant speed through axis-aligned rectangular
walls that stop, reflect, or let it pass through.

Main modules:
- core: Collision engine (WallStore, ray caster, event resolver, path tracer)
- analysis: Path analysis and export utilities (Shapely, NumPy)
- examples: Example simulations and demonstrations

Quick start:
    from projectile_path_sim import simulate, Behavior
    path = simulate((0, 0), (1, 0), speed=1.0, distance_budget=5.0,
                    walls=[(2, -10, 2, 10, Behavior.REFLECT)])
"""

__version__ = "0.1.0"

# Convenience imports for common usage
from .core.behavior import Behavior
from .core.geometry import Vector2
from .core.wall import Wall
from .core.wall_store import WallStore
from .core.simulator import ProjectilePathSimulator, TracerStatus, simulate

__all__ = [
    'Behavior',
    'Vector2',
    'Wall',
    'WallStore',
    'ProjectilePathSimulator',
    'TracerStatus',
    'simulate',
    '__version__',
]
