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

from . import constants
from .behavior import Behavior, behavior_precedence, dominant_behavior
from .geometry import Vector2, as_vector2, polyline_length
from .tolerances import ToleranceConfig, Tolerances, DEFAULT_TOLERANCE_CONFIG
from .wall import Wall
from .wall_store import WallStore
from .ray_caster import CandidateHit, FaceAxis, cast_ray
from .event_resolver import ResolvedEvent, SimulationInvariantError, resolve_event
from .simulator import (
    ProjectilePathSimulator,
    SimulationState,
    StepOutcome,
    TracerStatus,
    advance,
    run_tick,
    simulate,
    start_tick,
)
from .svg_renderer import SVGRenderer

__all__ = [
    'constants',
    'Behavior', 'behavior_precedence', 'dominant_behavior',
    'Vector2', 'as_vector2', 'polyline_length',
    'ToleranceConfig', 'Tolerances', 'DEFAULT_TOLERANCE_CONFIG',
    'Wall', 'WallStore',
    'CandidateHit', 'FaceAxis', 'cast_ray',
    'ResolvedEvent', 'SimulationInvariantError', 'resolve_event',
    'ProjectilePathSimulator', 'SimulationState', 'StepOutcome', 'TracerStatus',
    'advance', 'run_tick', 'simulate', 'start_tick',
    'SVGRenderer',
]
