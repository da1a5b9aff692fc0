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
Scale-aware numerical tolerances.

Every epsilon used by the ray caster, the event resolver and the path tracer
is computed here. Coordinate-like tolerances grow with the magnitude of the
coordinates involved, distance-like tolerances grow with the step length.
"""

import math
from dataclasses import dataclass
from typing import TYPE_CHECKING

from . import constants

if TYPE_CHECKING:
    from .geometry import Vector2


def scale_for(*values: float) -> float:
    """
    Magnitude used to scale coordinate tolerances.

    Returns:
        float: max(1, |v| for v in values)
    """
    return max([1.0] + [abs(v) for v in values])


@dataclass(frozen=True)
class ToleranceConfig:
    """
    Calibrated multipliers for the tolerance model.

    All multipliers are in units of machine epsilon. The defaults come from
    constants.py; pass a custom instance to recalibrate for a scene whose
    coordinates or step lengths are far from unity.

    Attributes:
        face: Multiplier for the wall-span check (times coordinate scale)
        direction: Multiplier for the parallel-direction check
        distance: Multiplier for the minimum travel distance (times 1 + speed)
        tie: Multiplier for the simultaneous-hit window (times 1 + speed)
        push: Multiplier for the post-event nudge (times 1 + speed)
        final_scale: Multiplier for the final de-duplication (times coordinate scale)
        final_push: Factor applied to the push tolerance for the final de-duplication
        continue_factor: Travel continues after an event only above this many eps_dist
        max_inner_iterations: Safety cap on events per tick
    """
    face: float = constants.FACE_EPS_MULTIPLIER
    direction: float = constants.DIRECTION_EPS_MULTIPLIER
    distance: float = constants.DISTANCE_EPS_MULTIPLIER
    tie: float = constants.TIE_EPS_MULTIPLIER
    push: float = constants.PUSH_EPS_MULTIPLIER
    final_scale: float = constants.FINAL_SCALE_EPS_MULTIPLIER
    final_push: float = constants.FINAL_PUSH_FACTOR
    continue_factor: float = constants.CONTINUE_DISTANCE_FACTOR
    max_inner_iterations: int = constants.MAX_INNER_ITERATIONS_PER_TICK

    def __post_init__(self) -> None:
        for name in ('face', 'direction', 'distance', 'tie', 'push',
                     'final_scale', 'final_push', 'continue_factor'):
            value = getattr(self, name)
            if not math.isfinite(value) or value <= 0:
                raise ValueError(f"Tolerance multiplier '{name}' must be > 0, got {value}")
        if self.max_inner_iterations < 1:
            raise ValueError(
                f"max_inner_iterations must be >= 1, got {self.max_inner_iterations}"
            )


DEFAULT_TOLERANCE_CONFIG = ToleranceConfig()


@dataclass(frozen=True)
class Tolerances:
    """
    Tolerances for one inner step of the path tracer.

    Attributes:
        face: Allowed overshoot of an impact coordinate past a wall's span
        direction: Direction components at or below this are parallel
        distance: Hits at or below this travel distance are ignored
        tie: Hits within this distance of each other are simultaneous
        push: Distance of the nudge applied after an event
        continue_threshold: Travel continues after an event only above this
    """
    face: float
    direction: float
    distance: float
    tie: float
    push: float
    continue_threshold: float

    @classmethod
    def for_step(
        cls,
        position: 'Vector2',
        direction: 'Vector2',
        speed: float,
        config: ToleranceConfig = DEFAULT_TOLERANCE_CONFIG,
    ) -> 'Tolerances':
        """
        Compute the tolerances for a step starting at ``position``.

        The coordinate scale covers the current position and the point one
        full tick (at least one unit) ahead along ``direction``.
        """
        eps = constants.MACHINE_EPSILON
        reach = max(1.0, speed)
        coord_scale = scale_for(
            position.x,
            position.y,
            position.x + direction.x * reach,
            position.y + direction.y * reach,
        )
        step_scale = 1.0 + speed
        distance = config.distance * eps * step_scale
        return cls(
            face=config.face * eps * coord_scale,
            direction=config.direction * eps,
            distance=distance,
            tie=config.tie * eps * step_scale,
            push=config.push * eps * step_scale,
            continue_threshold=config.continue_factor * distance,
        )

    @staticmethod
    def final_output(
        position: 'Vector2',
        speed: float,
        config: ToleranceConfig = DEFAULT_TOLERANCE_CONFIG,
    ) -> float:
        """
        Tolerance for deciding whether the rest point duplicates the last vertex.

        Returns:
            float: max(final_scale * eps * scale(position), final_push * push)
        """
        eps = constants.MACHINE_EPSILON
        push = config.push * eps * (1.0 + speed)
        return max(
            config.final_scale * eps * scale_for(position.x, position.y),
            config.final_push * push,
        )
