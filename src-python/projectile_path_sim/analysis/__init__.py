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
Analysis Utilities
===============================================================================
Utilities for inspecting and exporting simulated paths:

- PathResult: run container with Shapely/NumPy length and bounds queries
- Geometry queries: walls containing a point, walls touched by a path
- Export: CSV and JSON
===============================================================================
"""

from .path_result import (
    PathResult,
    run_simulation,
)
from .geometry_queries import (
    wall_to_polygon,
    walls_containing_point,
    walls_touched_by_path,
)
from .saving import (
    save_path_csv,
    path_to_json,
    save_path_json,
    walls_to_dicts,
)

__all__ = [
    'PathResult',
    'run_simulation',
    'wall_to_polygon',
    'walls_containing_point',
    'walls_touched_by_path',
    'save_path_csv',
    'path_to_json',
    'save_path_json',
    'walls_to_dicts',
]
