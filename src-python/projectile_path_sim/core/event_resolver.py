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
from dataclasses import dataclass
from typing import List, Sequence, Tuple

from .behavior import Behavior, behavior_precedence, dominant_behavior
from .geometry import Vector2
from .ray_caster import CandidateHit


class SimulationInvariantError(RuntimeError):
    """
    Raised when the engine reaches a state that correct geometry cannot produce.

    This signals a logic defect, not a recoverable condition.
    """


@dataclass(frozen=True)
class ResolvedEvent:
    """
    Aggregate effect of all hits that happen at the resolved distance.

    Attributes:
        distance: Resolved travel distance to the event
        point: Mean of the simultaneous hits' impact points
        hits: The simultaneous hit set
        stop: True if any simultaneous hit is STOP (terminal)
        reflect_x: True if a REFLECT hit lies on a vertical face
        reflect_y: True if a REFLECT hit lies on a horizontal face
        pass_recorded: Batching flag to carry into the next resolution
    """
    distance: float
    point: Vector2
    hits: Tuple[CandidateHit, ...]
    stop: bool
    reflect_x: bool
    reflect_y: bool
    pass_recorded: bool

    @property
    def is_blocking(self) -> bool:
        return self.stop or self.reflect_x or self.reflect_y

    @property
    def behavior(self) -> Behavior:
        """Highest-precedence behavior among the simultaneous hits."""
        return dominant_behavior(hit.behavior for hit in self.hits)


def earliest_distances(candidates: Sequence[CandidateHit]) -> Tuple[float, float]:
    """
    Earliest blocking (STOP/REFLECT) and earliest PASS_THROUGH distances.

    Returns:
        tuple: (s_blocking, s_pass); math.inf where no such hit exists
    """
    s_blocking = math.inf
    s_pass = math.inf
    for hit in candidates:
        if hit.behavior.is_blocking:
            s_blocking = min(s_blocking, hit.distance)
        else:
            s_pass = min(s_pass, hit.distance)
    return s_blocking, s_pass


def select_event_distance(
    s_blocking: float,
    s_pass: float,
    pass_recorded: bool,
    eps_tie: float,
) -> float:
    """
    Distance of the next event under the pass-through batching rule.

    With a blocking hit ahead, at most one pass-through is stopped at before
    it: the earliest pass-through is chosen only if it is strictly earlier
    (beyond the tie window) and none has been recorded since the last
    blocking event. Otherwise the blocking hit is chosen and any closer
    pass-throughs are skipped. Without a blocking hit the earliest
    pass-through is chosen.
    """
    if math.isfinite(s_blocking):
        if not pass_recorded and math.isfinite(s_pass) and s_pass + eps_tie < s_blocking:
            return s_pass
        return s_blocking
    return s_pass


def resolve_event(
    candidates: Sequence[CandidateHit],
    pass_recorded: bool,
    eps_tie: float,
) -> ResolvedEvent:
    """
    Resolve the candidate hits of one step into a single event.

    Args:
        candidates: Hits reported by cast_ray() for this step
        pass_recorded: True if a pass-through was recorded since the last
            blocking event in the current tick
        eps_tie: Hits within this distance of the resolved one are simultaneous

    Returns:
        ResolvedEvent

    Raises:
        SimulationInvariantError: If there is no candidate to resolve.
    """
    if not candidates:
        raise SimulationInvariantError("resolve_event() called without candidate hits")

    s_blocking, s_pass = earliest_distances(candidates)
    s_min = select_event_distance(s_blocking, s_pass, pass_recorded, eps_tie)

    hits: List[CandidateHit] = [h for h in candidates if abs(h.distance - s_min) <= eps_tie]
    if not hits:
        raise SimulationInvariantError(
            f"No candidate hit within {eps_tie} of resolved distance {s_min}"
        )

    # Faces that should coincide may differ by a few ulps
    ix = sum(h.point.x for h in hits) / len(hits)
    iy = sum(h.point.y for h in hits) / len(hits)

    strongest = max(behavior_precedence(h.behavior) for h in hits)
    stop = strongest == behavior_precedence(Behavior.STOP)
    reflect_x = False
    reflect_y = False
    if not stop:
        for h in hits:
            if h.behavior is Behavior.REFLECT:
                reflect_x = reflect_x or h.vertical
                reflect_y = reflect_y or h.horizontal

    blocking = stop or reflect_x or reflect_y
    return ResolvedEvent(
        distance=s_min,
        point=Vector2(ix, iy),
        hits=tuple(hits),
        stop=stop,
        reflect_x=reflect_x,
        reflect_y=reflect_y,
        pass_recorded=not blocking,
    )
