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
Path Data Export Utilities
===============================================================================
Export of simulated paths to file formats:

- CSV: One row per vertex with segment and cumulative lengths
- JSON: Run summary plus the vertex list
===============================================================================
"""

import csv
import json
import math
from pathlib import Path
from typing import Iterable, List, Optional, Union

from ..core.geometry import Vector2
from ..core.wall import Wall
from .path_result import PathResult


def save_path_csv(
    vertices: List[Vector2],
    output_path: Union[str, Path],
    filename: str = "path.csv",
    precision_coords: int = 9,
) -> Path:
    """
    Export path vertices to a CSV file.

    Args:
        vertices: Path vertices, in order.
        output_path: Directory where the CSV file will be saved.
        filename: Name of the output CSV file (default: "path.csv").
        precision_coords: Decimal places for coordinates and lengths (default: 9).

    Returns:
        Path: Full path to the created CSV file.

    Raises:
        OSError: If the output directory cannot be created or file cannot be written.
    """
    output_dir = Path(output_path)
    output_dir.mkdir(parents=True, exist_ok=True)

    csv_file = output_dir / filename
    coord_fmt = f"{{:.{precision_coords}f}}"

    with open(csv_file, 'w', newline='', encoding='utf-8') as f:
        writer = csv.writer(f)
        writer.writerow(['vertex_index', 'x', 'y', 'segment_length', 'cumulative_length'])

        cumulative = 0.0
        previous: Optional[Vector2] = None
        for i, v in enumerate(vertices):
            segment = 0.0 if previous is None else math.hypot(v.x - previous.x, v.y - previous.y)
            cumulative += segment
            writer.writerow([
                i,
                coord_fmt.format(v.x),
                coord_fmt.format(v.y),
                coord_fmt.format(segment),
                coord_fmt.format(cumulative),
            ])
            previous = v

    return csv_file


def walls_to_dicts(walls: Iterable[Wall]) -> List[dict]:
    """Walls as JSON-friendly dicts."""
    return [
        {
            'xmin': w.xmin,
            'ymin': w.ymin,
            'xmax': w.xmax,
            'ymax': w.ymax,
            'behavior': w.behavior.value,
        }
        for w in walls
    ]


def path_to_json(
    result: PathResult,
    walls: Optional[Iterable[Wall]] = None,
    indent: Optional[int] = 2,
) -> str:
    """
    Serialize a PathResult (and optionally its walls) to a JSON string.

    Args:
        result: The run to serialize
        walls: Walls to embed under the 'walls' key (optional)
        indent: JSON indentation (default: 2)
    """
    data = result.summary()
    data['vertices'] = [v.to_dict() for v in result.vertices]
    if walls is not None:
        data['walls'] = walls_to_dicts(walls)
    return json.dumps(data, indent=indent)


def save_path_json(
    result: PathResult,
    output_path: Union[str, Path],
    filename: str = "path.json",
    walls: Optional[Iterable[Wall]] = None,
) -> Path:
    """
    Write path_to_json() output to a file.

    Returns:
        Path: Full path to the created JSON file.
    """
    output_dir = Path(output_path)
    output_dir.mkdir(parents=True, exist_ok=True)
    json_file = output_dir / filename
    json_file.write_text(path_to_json(result, walls), encoding='utf-8')
    return json_file
