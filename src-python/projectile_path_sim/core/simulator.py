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
from dataclasses import dataclass, replace
from enum import Enum
from typing import Any, Iterable, List, Optional, Tuple, Union

from . import constants
from .behavior import Behavior
from .event_resolver import ResolvedEvent, resolve_event
from .geometry import Vector2, as_vector2
from .ray_caster import cast_ray
from .tolerances import DEFAULT_TOLERANCE_CONFIG, ToleranceConfig, Tolerances
from .wall import Wall
from .wall_store import WallStore


class TracerStatus(Enum):
    """State of the path tracer."""
    TRAVELING = 'traveling'
    STOPPED = 'stopped'
    BUDGET_EXHAUSTED = 'budget_exhausted'


@dataclass(frozen=True)
class SimulationState:
    """
    Everything that changes while a path is traced.

    A new state is produced by every step; nothing is mutated in place.

    Attributes:
        position: Current position
        direction: Current unit direction
        remaining_budget: Distance left for the whole run
        remaining_in_tick: Distance left in the current tick
        pass_recorded: True if a pass-through was recorded since the last
            blocking event in the current tick
        status: TRAVELING until a STOP is hit or the budget runs out
    """
    position: Vector2
    direction: Vector2
    remaining_budget: float
    remaining_in_tick: float = 0.0
    pass_recorded: bool = False
    status: TracerStatus = TracerStatus.TRAVELING

    @property
    def is_terminal(self) -> bool:
        return self.status is not TracerStatus.TRAVELING


@dataclass(frozen=True)
class StepOutcome:
    """
    Result of one inner step.

    Attributes:
        state: State after the step
        vertex: Point to append to the path, or None for a silent glide
        event: The resolved event, or None if no face was reached
        tick_done: True if the current tick has no distance left
    """
    state: SimulationState
    vertex: Optional[Vector2]
    event: Optional[ResolvedEvent]
    tick_done: bool


def start_tick(state: SimulationState, speed: float) -> SimulationState:
    """Begin a tick: its length is min(speed, remaining budget) and batching restarts."""
    return replace(
        state,
        remaining_in_tick=min(speed, state.remaining_budget),
        pass_recorded=False,
    )


def advance(
    state: SimulationState,
    walls: Iterable[Wall],
    speed: float,
    config: ToleranceConfig = DEFAULT_TOLERANCE_CONFIG,
    verbose: int = 0,
) -> StepOutcome:
    """
    Travel from ``state`` to the next event, or to the end of the tick.

    Args:
        state: Current state (must be TRAVELING with distance left in the tick)
        walls: Obstacles, in a fixed order
        speed: Tick length, used to scale the tolerances
        config: Tolerance multipliers
        verbose: Verbosity level (0 = silent, 1 = events, 2 = candidates)

    Returns:
        StepOutcome
    """
    tol = Tolerances.for_step(state.position, state.direction, speed, config)
    candidates = cast_ray(state.position, state.direction, state.remaining_in_tick, walls, tol)

    if verbose >= 2:
        print(f"  step from ({state.position.x:.6g}, {state.position.y:.6g}) "
              f"dir=({state.direction.x:.6g}, {state.direction.y:.6g}) "
              f"tick_left={state.remaining_in_tick:.6g} eps_d={tol.distance:.3g} "
              f"eps_face={tol.face:.3g}")
        for hit in candidates:
            print(f"    candidate s={hit.distance:.9g} at ({hit.point.x:.6g}, {hit.point.y:.6g}) "
                  f"{hit.axis.value} {hit.behavior.value}")

    if not candidates:
        remaining = state.remaining_in_tick
        position = state.position
        if remaining > tol.distance:
            position = position.advanced(state.direction, remaining)
        # A remainder at or below eps_d is consumed without moving
        new_state = replace(
            state,
            position=position,
            remaining_budget=state.remaining_budget - remaining,
            remaining_in_tick=0.0,
        )
        return StepOutcome(new_state, None, None, True)

    event = resolve_event(candidates, state.pass_recorded, tol.tie)
    step_used = min(event.distance, state.remaining_in_tick)
    remaining_in_tick = state.remaining_in_tick - step_used
    remaining_budget = state.remaining_budget - step_used

    if verbose >= 1:
        print(f"  event at ({event.point.x:.6g}, {event.point.y:.6g}) s={event.distance:.6g} "
              f"behavior={event.behavior.value} hits={len(event.hits)}")

    if event.stop:
        new_state = replace(
            state,
            position=event.point,
            remaining_budget=remaining_budget,
            remaining_in_tick=remaining_in_tick,
            pass_recorded=False,
            status=TracerStatus.STOPPED,
        )
        return StepOutcome(new_state, event.point, event, True)

    direction = state.direction.reflected(event.reflect_x, event.reflect_y)
    position = event.point
    # Step off the face so the next cast does not find it again
    if remaining_in_tick > tol.continue_threshold and remaining_budget > tol.continue_threshold:
        position = position.advanced(direction, tol.push)

    new_state = replace(
        state,
        position=position,
        direction=direction,
        remaining_budget=remaining_budget,
        remaining_in_tick=remaining_in_tick,
        pass_recorded=event.pass_recorded,
    )
    return StepOutcome(new_state, event.point, event, not remaining_in_tick > 0.0)


def run_tick(
    state: SimulationState,
    walls: Iterable[Wall],
    speed: float,
    config: ToleranceConfig = DEFAULT_TOLERANCE_CONFIG,
    verbose: int = 0,
) -> Tuple[SimulationState, List[Vector2], int]:
    """
    Run one tick: repeated steps until the tick's distance is used up or a STOP.

    Returns:
        tuple: (state after the tick, vertices recorded during the tick,
                number of inner steps taken)
    """
    walls = list(walls)
    state = start_tick(state, speed)
    vertices: List[Vector2] = []
    steps = 0
    while steps < config.max_inner_iterations and state.remaining_in_tick > 0.0:
        outcome = advance(state, walls, speed, config, verbose)
        steps += 1
        state = outcome.state
        if outcome.vertex is not None:
            vertices.append(outcome.vertex)
        if outcome.tick_done or state.is_terminal:
            break
    return state, vertices, steps


def validate_inputs(
    start: Vector2,
    direction: Vector2,
    speed: float,
    distance_budget: float,
) -> Vector2:
    """
    Check the arguments of a run before any state is built.

    Returns:
        Vector2: The normalized direction

    Raises:
        ValueError: On a non-positive speed, a negative budget, a zero
            direction, or any non-finite value.
    """
    if not math.isfinite(speed) or speed <= 0:
        raise ValueError(f"Speed must be positive, got {speed}")
    if not math.isfinite(distance_budget) or distance_budget < 0:
        raise ValueError(f"Distance budget must be non-negative, got {distance_budget}")
    if not start.is_finite():
        raise ValueError(f"Start position must be finite, got {start}")
    if not direction.is_finite():
        raise ValueError(f"Direction must be finite, got {direction}")
    return direction.normalized()


class ProjectilePathSimulator:
    """
    Traces a point moving at constant speed through axis-aligned walls.

    The simulator owns a configuration (tick length, distance budget,
    tolerances) and a WallStore. Each call to simulate() is independent:
    the walls are read, never modified, and the returned path depends only
    on the arguments. After a run, the attributes below describe how it
    ended.

    Attributes:
        speed (float): Distance travelled per tick
        distance_budget (float): Total distance allowed per run
        tolerance_config (ToleranceConfig): Tolerance multipliers
        verbose (int): Verbosity level
        status (TracerStatus): Final status of the last run
        tick_count (int): Ticks run in the last run
        event_count (int): Events (recorded vertices other than start/rest) in the last run
        travelled_distance (float): Distance consumed in the last run
        warning (str or None): Set if the last run hit an iteration limit
    """

    def __init__(
        self,
        speed: float,
        distance_budget: float,
        tolerance_config: Optional[ToleranceConfig] = None,
        verbose: int = 0,
    ) -> None:
        """
        Initialize the simulator.

        Args:
            speed (float): Distance per tick, must be > 0
            distance_budget (float): Total travel distance, must be >= 0
            tolerance_config (ToleranceConfig or None): Tolerance multipliers
                (default: calibrated constants)
            verbose (int): Verbosity level (default: 0)
                0 = silent (no debug output)
                1 = verbose (one line per tick and per event)
                2 = very verbose/debug (candidate hits and tolerances)

        Raises:
            ValueError: If speed <= 0 or distance_budget < 0.
        """
        if not math.isfinite(speed) or speed <= 0:
            raise ValueError(f"Speed must be positive, got {speed}")
        if not math.isfinite(distance_budget) or distance_budget < 0:
            raise ValueError(f"Distance budget must be non-negative, got {distance_budget}")
        self.speed: float = speed
        self.distance_budget: float = distance_budget
        self.tolerance_config: ToleranceConfig = tolerance_config or DEFAULT_TOLERANCE_CONFIG
        self.verbose: int = verbose
        self.wall_store: WallStore = WallStore()
        self._reset_run_info()

    def _reset_run_info(self) -> None:
        self.status: TracerStatus = TracerStatus.TRAVELING
        self.tick_count: int = 0
        self.event_count: int = 0
        self.travelled_distance: float = 0.0
        self.warning: Optional[str] = None

    def add_wall(
        self,
        x1: float,
        y1: float,
        x2: float,
        y2: float,
        behavior: Union[Behavior, str],
    ) -> Optional[Wall]:
        """Add a wall; zero-area walls are silently dropped (see WallStore.add_wall)."""
        return self.wall_store.add_wall(x1, y1, x2, y2, behavior)

    @property
    def walls(self) -> List[Wall]:
        return self.wall_store.walls

    def simulate(self, start: Any, direction: Any) -> List[Vector2]:
        """
        Trace the path from ``start`` along ``direction``.

        Args:
            start: Start position (Vector2, (x, y), or {'x', 'y'} dict)
            direction: Direction of travel, any non-zero length

        Returns:
            list: Vertices of the path; the first is ``start``

        Raises:
            ValueError: On a zero or non-finite direction or start.
        """
        self._reset_run_info()
        start = as_vector2(start)
        unit = validate_inputs(start, as_vector2(direction), self.speed, self.distance_budget)
        walls = list(self.wall_store)
        config = self.tolerance_config

        path: List[Vector2] = [start]
        state = SimulationState(position=start, direction=unit,
                                remaining_budget=self.distance_budget)

        if self.verbose >= 1:
            print(f"\n### SIMULATOR start=({start.x:.6g}, {start.y:.6g}) "
                  f"dir=({unit.x:.6g}, {unit.y:.6g}) speed={self.speed} "
                  f"budget={self.distance_budget} walls={len(walls)}")

        max_outer = (int(math.ceil(self.distance_budget
                                   / max(constants.MIN_SPEED_FOR_BOUND, self.speed)))
                     + constants.EXTRA_OUTER_ITERATIONS)

        for _ in range(max_outer):
            if not state.remaining_budget > 0.0:
                break
            if self.verbose >= 1:
                print(f"### tick {self.tick_count}: budget left {state.remaining_budget:.9g}")
            state, vertices, steps = run_tick(state, walls, self.speed, config, self.verbose)
            self.tick_count += 1
            self.event_count += len(vertices)
            path.extend(vertices)
            if steps >= config.max_inner_iterations and state.remaining_in_tick > 0.0:
                self.warning = (f"Tick {self.tick_count} stopped after "
                                f"{config.max_inner_iterations} events")
            if state.status is TracerStatus.STOPPED:
                self.status = TracerStatus.STOPPED
                self.travelled_distance = self.distance_budget - state.remaining_budget
                if self.verbose >= 1:
                    print(f"### stopped at ({state.position.x:.6g}, {state.position.y:.6g})")
                return path
        else:
            if state.remaining_budget > 0.0:
                self.warning = f"Simulation stopped: maximum tick count ({max_outer}) reached"

        # Skip the rest point if the run ended on an already-recorded vertex
        eps_out = Tolerances.final_output(state.position, self.speed, config)
        last = path[-1]
        if (abs(state.position.x - last.x) > eps_out
                or abs(state.position.y - last.y) > eps_out):
            path.append(state.position)

        self.status = (TracerStatus.BUDGET_EXHAUSTED if state.remaining_budget <= 0.0
                       else TracerStatus.TRAVELING)
        self.travelled_distance = self.distance_budget - max(0.0, state.remaining_budget)
        if self.verbose >= 1:
            print(f"### finished with {len(path)} vertices, status={self.status.value}")
            if self.warning:
                print(f"### warning: {self.warning}")
        return path


def simulate(
    start: Any,
    direction: Any,
    speed: float,
    distance_budget: float,
    walls: Union[WallStore, Iterable[Any]] = (),
    tolerance_config: Optional[ToleranceConfig] = None,
    verbose: int = 0,
) -> List[Vector2]:
    """
    Trace a path through a set of walls.

    Arguments are validated before any state is built.

    Args:
        start: Start position (Vector2, (x, y), or {'x', 'y'} dict)
        direction: Direction of travel, normalized internally
        speed: Distance per tick, must be > 0
        distance_budget: Total travel distance, must be >= 0
        walls: A WallStore, or Wall instances / (x1, y1, x2, y2, behavior) tuples;
            zero-area walls are ignored
        tolerance_config: Optional tolerance multipliers
        verbose: Verbosity level

    Returns:
        list: Path vertices; [start] when distance_budget is 0

    Raises:
        ValueError: If speed <= 0, distance_budget < 0, or direction is zero.
    """
    start_v = as_vector2(start)
    validate_inputs(start_v, as_vector2(direction), speed, distance_budget)

    sim = ProjectilePathSimulator(speed, distance_budget, tolerance_config, verbose)
    store = walls if isinstance(walls, WallStore) else WallStore.from_walls(walls)
    sim.wall_store = store
    return sim.simulate(start_v, direction)
