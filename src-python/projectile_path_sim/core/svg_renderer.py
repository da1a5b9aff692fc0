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
from typing import Dict, Iterable, List, Optional, Sequence, Tuple

import svgwrite

from .behavior import Behavior
from .geometry import Vector2
from .wall import Wall


# Stroke/fill colors per wall behavior
BEHAVIOR_COLORS: Dict[Behavior, str] = {
    Behavior.STOP: 'rgb(200, 30, 30)',
    Behavior.REFLECT: 'rgb(30, 60, 200)',
    Behavior.PASS_THROUGH: 'rgb(120, 120, 120)',
}


def fit_viewbox(
    walls: Iterable[Wall],
    vertices: Sequence[Vector2],
    margin: float = 0.05,
) -> Tuple[float, float, float, float]:
    """
    Y-up viewbox (min_x, min_y, width, height) enclosing the walls and the path.

    Args:
        walls: Walls to include
        vertices: Path vertices to include
        margin: Fraction of the larger extent added on every side

    Returns:
        tuple: (min_x, min_y, width, height); a 2x2 box around the origin if empty
    """
    xs: List[float] = []
    ys: List[float] = []
    for wall in walls:
        xs.extend((wall.xmin, wall.xmax))
        ys.extend((wall.ymin, wall.ymax))
    for v in vertices:
        xs.append(v.x)
        ys.append(v.y)
    if not xs:
        return (-1.0, -1.0, 2.0, 2.0)
    min_x, max_x = min(xs), max(xs)
    min_y, max_y = min(ys), max(ys)
    extent = max(max_x - min_x, max_y - min_y, 1e-9)
    pad = extent * margin
    return (min_x - pad, min_y - pad, (max_x - min_x) + 2 * pad, (max_y - min_y) + 2 * pad)


class SVGRenderer:
    """
    SVG renderer for simulated paths.

    The SVG is organized into three layers (bottom to top):
    - walls: Obstacles, colored by behavior
    - path: The traced polyline and its vertices
    - labels: Text annotations

    Coordinate System:
        The renderer uses a Y-up coordinate system (positive Y points upward),
        which matches mathematical convention. This is achieved by applying
        a vertical flip transformation to each layer.

    Attributes:
        width (int): Canvas width in pixels
        height (int): Canvas height in pixels
        viewbox (tuple): SVG viewBox (min_x, min_y, width, height), Y-down
        dwg (svgwrite.Drawing): The SVG drawing object
        layer_walls (svgwrite.Group): Group for wall elements
        layer_path (svgwrite.Group): Group for path elements
        layer_labels (svgwrite.Group): Group for label elements
    """

    def __init__(self, width=800, height=600, viewbox=None, metadata_level='full'):
        """
        Initialize the SVG renderer.

        Args:
            width (int): Canvas width in pixels (default: 800)
            height (int): Canvas height in pixels (default: 600)
            viewbox (tuple or None): Y-up viewBox as (min_x, min_y, width, height).
                If None, uses (0, 0, width, height)
            metadata_level (str): Controls how much simulation metadata to embed.
                - 'none': No metadata
                - 'standard': id + class
                - 'full': All of 'standard' plus data-* attributes
        """
        if metadata_level not in ('none', 'standard', 'full'):
            raise ValueError(
                f"Invalid metadata_level '{metadata_level}'. "
                f"Valid options: ('none', 'standard', 'full')"
            )
        self.width = width
        self.height = height
        self.metadata_level = metadata_level
        self.user_viewbox = viewbox if viewbox is not None else (0, 0, width, height)

        # SVG's Y axis points down: flip the user's Y-up viewbox
        min_x, min_y, vb_width, vb_height = self.user_viewbox
        self.viewbox = (min_x, -(min_y + vb_height), vb_width, vb_height)

        # debug=False so that data-* and inkscape attributes are accepted
        self.dwg = svgwrite.Drawing(size=(f'{width}px', f'{height}px'),
                                    profile='full', debug=False)
        self.dwg.viewbox(*self.viewbox)
        self.dwg['xmlns:inkscape'] = 'http://www.inkscape.org/namespaces/inkscape'

        self.dwg.add(self.dwg.rect(
            insert=(self.viewbox[0], self.viewbox[1]),
            size=(self.viewbox[2], self.viewbox[3]),
            fill='white'
        ))

        self.layer_walls = self.dwg.add(self.dwg.g(
            id='layer-walls',
            transform='scale(1, -1)',
            **{'inkscape:groupmode': 'layer', 'inkscape:label': 'Walls'}
        ))
        self.layer_path = self.dwg.add(self.dwg.g(
            id='layer-path',
            transform='scale(1, -1)',
            **{'inkscape:groupmode': 'layer', 'inkscape:label': 'Path'}
        ))
        self.layer_labels = self.dwg.add(self.dwg.g(
            id='layer-labels',
            transform='scale(1, -1)',
            **{'inkscape:groupmode': 'layer', 'inkscape:label': 'Labels'}
        ))

        self._wall_counter = 0

    @classmethod
    def for_scene(cls, walls: Iterable[Wall], vertices: Sequence[Vector2],
                  width=800, height=600, margin=0.05, metadata_level='full') -> 'SVGRenderer':
        """Create a renderer whose viewbox fits the given walls and path."""
        walls = list(walls)
        return cls(width=width, height=height,
                   viewbox=fit_viewbox(walls, vertices, margin),
                   metadata_level=metadata_level)

    def _normalize_coord(self, value):
        """
        Normalize a coordinate value: -0.0 and values below 1e-10 become 0.0.
        """
        if value == 0.0 or abs(value) < 1e-10:
            return 0.0
        return value

    def _stroke_width(self, fraction=0.004):
        """Stroke width proportional to the viewbox, so scenes of any scale look alike."""
        return max(self.viewbox[2], self.viewbox[3]) * fraction

    def draw_wall(self, wall: Wall, fill_opacity=0.25, stroke_width=None, label=None):
        """
        Draw a wall as a rectangle, or as a line if it has zero width or height.

        Args:
            wall (Wall): The wall to draw
            fill_opacity (float): Fill opacity of rectangular walls (default: 0.25)
            stroke_width (float or None): Outline width; None scales with the viewbox
            label (str or None): Optional text label placed at the wall center
        """
        color = BEHAVIOR_COLORS[wall.behavior]
        if stroke_width is None:
            stroke_width = self._stroke_width()
        x0 = self._normalize_coord(wall.xmin)
        y0 = self._normalize_coord(wall.ymin)
        x1 = self._normalize_coord(wall.xmax)
        y1 = self._normalize_coord(wall.ymax)

        if wall.width == 0.0 or wall.height == 0.0:
            element = self.dwg.line(start=(x0, y0), end=(x1, y1),
                                    stroke=color, stroke_width=stroke_width)
        else:
            element = self.dwg.rect(insert=(x0, y0), size=(x1 - x0, y1 - y0),
                                    fill=color, fill_opacity=fill_opacity,
                                    stroke=color, stroke_width=stroke_width)

        if self.metadata_level != 'none':
            element['id'] = f'wall-{self._wall_counter}'
            element['class'] = f'wall wall-{wall.behavior.value}'
            element['inkscape:label'] = f'{wall.behavior.value} wall {self._wall_counter}'
        if self.metadata_level == 'full':
            element['data-behavior'] = wall.behavior.value
            element['data-bounds'] = ','.join(f'{v:.6g}' for v in wall.bounds)
        self._wall_counter += 1
        self.layer_walls.add(element)

        if label:
            self._draw_label(label, (x0 + x1) / 2, (y0 + y1) / 2, color)

    def draw_walls(self, walls: Iterable[Wall], **kwargs):
        for wall in walls:
            self.draw_wall(wall, **kwargs)

    def draw_path(self, vertices: Sequence[Vector2], color='black', stroke_width=None,
                  opacity=1.0):
        """
        Draw the traced path as a polyline.

        Vertices with non-finite coordinates are skipped.

        Args:
            vertices (list): Path vertices in order
            color (str): Stroke color (default: 'black')
            stroke_width (float or None): Line width; None scales with the viewbox
            opacity (float): Stroke opacity (default: 1.0)
        """
        points = [
            (self._normalize_coord(v.x), self._normalize_coord(v.y))
            for v in vertices
            if math.isfinite(v.x) and math.isfinite(v.y)
        ]
        if len(points) < 2:
            return
        if stroke_width is None:
            stroke_width = self._stroke_width()
        polyline = self.dwg.polyline(points=points, fill='none', stroke=color,
                                     stroke_width=stroke_width, stroke_opacity=opacity)
        if self.metadata_level != 'none':
            polyline['id'] = 'path'
            polyline['class'] = 'path'
        if self.metadata_level == 'full':
            polyline['data-vertex-count'] = str(len(points))
        self.layer_path.add(polyline)

    def draw_vertices(self, vertices: Sequence[Vector2], color='black', radius=None,
                      label_indices=False):
        """
        Draw a dot at every vertex; the start is drawn hollow.

        Args:
            vertices (list): Path vertices
            color (str): Dot color (default: 'black')
            radius (float or None): Dot radius; None scales with the viewbox
            label_indices (bool): If True, write each vertex index next to it
        """
        if radius is None:
            radius = self._stroke_width(0.008)
        for i, v in enumerate(vertices):
            if not (math.isfinite(v.x) and math.isfinite(v.y)):
                continue
            cx = self._normalize_coord(v.x)
            cy = self._normalize_coord(v.y)
            if i == 0:
                circle = self.dwg.circle(center=(cx, cy), r=radius, fill='white',
                                         stroke=color, stroke_width=radius / 2)
            else:
                circle = self.dwg.circle(center=(cx, cy), r=radius, fill=color)
            if self.metadata_level != 'none':
                circle['id'] = f'vertex-{i}'
                circle['class'] = 'vertex'
            if self.metadata_level == 'full':
                circle['data-x'] = f'{v.x:.9g}'
                circle['data-y'] = f'{v.y:.9g}'
            self.layer_path.add(circle)
            if label_indices:
                self._draw_label(str(i), cx + 2 * radius, cy + 2 * radius, color)

    def _draw_label(self, text, x, y, color):
        font_size = self._stroke_width(0.03)
        label = self.dwg.text(
            text,
            insert=(x, -y),
            fill=color,
            font_size=f'{font_size:.4g}px',
            font_family='sans-serif',
            text_anchor='middle',
            transform='scale(1, -1)'  # Flip text back to be readable
        )
        self.layer_labels.add(label)

    def draw_scene(self, walls: Iterable[Wall], vertices: Optional[Sequence[Vector2]] = None,
                   draw_vertices: bool = True, label_indices: bool = False):
        """
        Draw walls and, if given, the path through them.

        Args:
            walls: Walls to draw
            vertices: Path vertices (optional)
            draw_vertices: Also draw a dot at every vertex (default: True)
            label_indices: Label each vertex with its index (default: False)
        """
        self.draw_walls(walls)
        if vertices:
            self.draw_path(vertices)
            if draw_vertices:
                self.draw_vertices(vertices, label_indices=label_indices)

    def save(self, filename: str = None):
        """
        Save the SVG to a file.

        Args:
            filename (str): Output filename (default: 'path.svg')
        """
        if filename is None:
            filename = "path.svg"
        self.dwg.saveas(filename)

    def to_string(self):
        """
        Get the SVG as a string.

        Returns:
            str: SVG content as XML string
        """
        return self.dwg.tostring()
