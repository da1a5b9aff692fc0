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

"""
Bounce Demo - Projectile in a Walled Room

A projectile starts near the lower-left corner of a square room whose
four walls reflect. A pass-through curtain crosses the room and a small
stop block sits near the upper-right corner.

Setup:
- Reflecting walls forming the room [0, 10] x [0, 10]
- Pass-through curtain at x = 5
- Stop block at (8, 8)-(9, 9)

Expected behavior:
- The path bounces off the room walls
- Every crossing of the curtain is recorded as a vertex
- The run ends either when the block is hit or the budget is spent
"""

import sys
import os

# Add parent directories to path to import projectile_path_sim
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..', '..', '..'))

from projectile_path_sim.core.behavior import Behavior
from projectile_path_sim.core.wall_store import WallStore
from projectile_path_sim.core.svg_renderer import SVGRenderer
from projectile_path_sim.analysis import run_simulation, save_path_csv


def build_room() -> WallStore:
    store = WallStore()
    # Room walls (thin rectangles just outside [0, 10] x [0, 10])
    store.add_wall(-1, -1, 0, 11, Behavior.REFLECT)
    store.add_wall(10, -1, 11, 11, Behavior.REFLECT)
    store.add_wall(-1, -1, 11, 0, Behavior.REFLECT)
    store.add_wall(-1, 10, 11, 11, Behavior.REFLECT)
    # Curtain and target
    store.add_wall(5, 0, 5, 10, Behavior.PASS_THROUGH)
    store.add_wall(8, 8, 9, 9, Behavior.STOP)
    return store


def main():
    """Run the bounce demonstration."""

    print("Bounce Demo - Projectile in a Walled Room")
    print("=" * 60)

    store = build_room()
    result = run_simulation(
        start=(1.0, 1.5),
        direction=(1.0, 0.37),
        speed=2.0,
        distance_budget=60.0,
        walls=store,
        name='bounce_demo',
    )

    print(f"  Walls: {len(store)}")
    print(f"  Status: {result.status.value}")
    print(f"  Vertices: {len(result.vertices)}")
    print(f"  Path length: {result.length:.6f} (budget {result.distance_budget})")
    for i, v in enumerate(result.vertices):
        print(f"    {i:3d}: ({v.x:.4f}, {v.y:.4f})")

    output_dir = os.path.dirname(os.path.abspath(__file__))

    renderer = SVGRenderer.for_scene(store, result.vertices, width=600, height=600)
    renderer.draw_scene(store, result.vertices, label_indices=True)
    svg_path = os.path.join(output_dir, 'bounce_demo.svg')
    renderer.save(svg_path)
    print(f"\n  SVG saved to: {svg_path}")

    csv_path = save_path_csv(result.vertices, output_dir, 'bounce_demo.csv')
    print(f"  CSV saved to: {csv_path}")


if __name__ == '__main__':
    main()
