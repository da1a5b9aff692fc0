"""
===============================================================================
CORE COMPONENT TESTS - Walls, Behaviors, Tolerances, Vectors
===============================================================================

Unit tests for the building blocks of the path tracer:

1. Behavior parsing and STOP > REFLECT > PASS_THROUGH precedence
2. Wall normalization, zero-area filtering and face enumeration
3. WallStore insertion order and input shapes
4. Tolerance scaling and validation
5. Vector2 helpers

Run with:
    python developer_tests/test_core_components.py

Or with pytest:
    pytest developer_tests/test_core_components.py -v
===============================================================================
"""

import itertools
import math
import sys
from pathlib import Path

# Add the src-python directory to the path
src_path = Path(__file__).parent.parent.parent
if str(src_path) not in sys.path:
    sys.path.insert(0, str(src_path))

from shapely.geometry import Point

from projectile_path_sim.core import constants
from projectile_path_sim.core.behavior import (
    Behavior,
    behavior_precedence,
    dominant_behavior,
)
from projectile_path_sim.core.geometry import Vector2, as_vector2, polyline_length
from projectile_path_sim.core.tolerances import (
    DEFAULT_TOLERANCE_CONFIG,
    ToleranceConfig,
    Tolerances,
    scale_for,
)
from projectile_path_sim.core.wall import Wall
from projectile_path_sim.core.wall_store import WallStore


TOLERANCE = 1e-12


def assert_close(actual, expected, tol=TOLERANCE, msg=""):
    """Assert that two values are close within tolerance."""
    if abs(actual - expected) > tol:
        raise AssertionError(
            f"{msg}: expected {expected}, got {actual} (diff: {abs(actual - expected)})"
        )


def assert_raises_value_error(func, *args, **kwargs):
    try:
        func(*args, **kwargs)
    except ValueError:
        return
    raise AssertionError(f"Expected ValueError from {func.__name__}{args}")


# =============================================================================
# BEHAVIOR
# =============================================================================

def test_behavior_parse():
    assert Behavior.parse('stop') is Behavior.STOP
    assert Behavior.parse('REFLECT') is Behavior.REFLECT
    assert Behavior.parse('pass_through') is Behavior.PASS_THROUGH
    assert Behavior.parse('pass-through') is Behavior.PASS_THROUGH
    assert Behavior.parse('PassThrough') is Behavior.PASS_THROUGH
    assert Behavior.parse(Behavior.STOP) is Behavior.STOP
    assert_raises_value_error(Behavior.parse, 'bounce')
    assert_raises_value_error(Behavior.parse, 3)


def test_behavior_blocking():
    assert Behavior.STOP.is_blocking
    assert Behavior.REFLECT.is_blocking
    assert not Behavior.PASS_THROUGH.is_blocking


def test_precedence_total_order():
    assert behavior_precedence(Behavior.STOP) > behavior_precedence(Behavior.REFLECT)
    assert behavior_precedence(Behavior.REFLECT) > behavior_precedence(Behavior.PASS_THROUGH)


def test_dominant_behavior_order_independent():
    members = [Behavior.PASS_THROUGH, Behavior.REFLECT, Behavior.STOP]
    for perm in itertools.permutations(members):
        assert dominant_behavior(perm) is Behavior.STOP
    for perm in itertools.permutations([Behavior.PASS_THROUGH, Behavior.REFLECT]):
        assert dominant_behavior(perm) is Behavior.REFLECT
    assert dominant_behavior([Behavior.PASS_THROUGH]) is Behavior.PASS_THROUGH
    assert dominant_behavior([]) is None


# =============================================================================
# WALL AND WALL STORE
# =============================================================================

def test_wall_normalizes_corners():
    wall = Wall.normalized(3.0, 5.0, 1.0, -2.0, 'reflect')
    assert wall == Wall(1.0, -2.0, 3.0, 5.0, Behavior.REFLECT)
    assert wall.width == 2.0
    assert wall.height == 7.0
    assert wall.vertical_faces == (1.0, 3.0)
    assert wall.horizontal_faces == (-2.0, 5.0)
    assert wall.bounds == (1.0, -2.0, 3.0, 5.0)


def test_wall_line_segment_has_single_face():
    vertical = Wall.normalized(2.0, 10.0, 2.0, -10.0, Behavior.STOP)
    assert vertical.vertical_faces == (2.0,)
    assert vertical.horizontal_faces == (-10.0, 10.0)

    horizontal = Wall.normalized(-1.0, 4.0, 1.0, 4.0, Behavior.STOP)
    assert horizontal.horizontal_faces == (4.0,)
    assert horizontal.vertical_faces == (-1.0, 1.0)


def test_zero_area_wall_is_dropped():
    assert Wall.normalized(2.0, 0.0, 2.0, 0.0, Behavior.STOP) is None
    assert Wall.normalized(2.0, 0.0, 2.0 + 1e-13, 1e-13, Behavior.STOP) is None

    store = WallStore()
    assert store.add_wall(2.0, 0.0, 2.0, 0.0, 'stop') is None
    assert len(store) == 0
    assert store.dropped_count == 1


def test_wall_store_keeps_insertion_order():
    store = WallStore()
    store.add_wall(0, 0, 1, 1, 'stop')
    store.add((5, 5, 4, 4, Behavior.REFLECT))
    store.add(Wall(3.0, 3.0, 2.0, 2.0, Behavior.PASS_THROUGH))  # swapped corners
    behaviors = [w.behavior for w in store]
    assert behaviors == [Behavior.STOP, Behavior.REFLECT, Behavior.PASS_THROUGH]
    assert store.walls[1] == Wall(4.0, 4.0, 5.0, 5.0, Behavior.REFLECT)
    assert store.walls[2] == Wall(2.0, 2.0, 3.0, 3.0, Behavior.PASS_THROUGH)


def test_wall_store_rejects_malformed_input():
    store = WallStore()
    assert_raises_value_error(store.add, (0, 0, 1, 1))
    assert_raises_value_error(store.add, 'wall')
    assert_raises_value_error(store.add, (0, 0, 1, 1, 'sticky'))
    assert len(store) == 0


def test_wall_store_walls_is_a_copy():
    store = WallStore.from_walls([(0, 0, 1, 1, 'stop'), (1, 1, 1, 1, 'stop')])
    assert len(store) == 1
    assert store.dropped_count == 1
    walls = store.walls
    walls.clear()
    assert len(store) == 1


# =============================================================================
# TOLERANCES
# =============================================================================

def test_scale_for():
    assert scale_for() == 1.0
    assert scale_for(0.1, -0.5) == 1.0
    assert scale_for(3.0, -7.0, 2.0) == 7.0


def test_tolerances_scale_with_coordinates():
    eps = constants.MACHINE_EPSILON
    near = Tolerances.for_step(Vector2(0.0, 0.0), Vector2(1.0, 0.0), 1.0)
    far = Tolerances.for_step(Vector2(1e9, 1e9), Vector2(1.0, 0.0), 1.0)

    assert_close(near.face, 64 * eps * 1.0, msg="face near origin")
    assert_close(far.face / near.face, 1e9 + 1.0, 1.0, msg="face scale ratio")
    # Distance-like tolerances depend on the step length only
    assert near.distance == far.distance
    assert near.tie == far.tie
    assert near.push == far.push
    assert near.direction == far.direction == 64 * eps


def test_tolerances_scale_with_speed():
    eps = constants.MACHINE_EPSILON
    tol = Tolerances.for_step(Vector2(0.0, 0.0), Vector2(1.0, 0.0), 9.0)
    assert_close(tol.distance, 64 * eps * 10.0, msg="distance")
    assert_close(tol.tie, 128 * eps * 10.0, msg="tie")
    assert_close(tol.push, 1024 * eps * 10.0, msg="push")
    assert_close(tol.continue_threshold, 10 * tol.distance, msg="continue threshold")
    # The reach ahead covers a full tick
    assert_close(tol.face, 64 * eps * 9.0, msg="face over a long tick")


def test_tolerance_ordering():
    tol = Tolerances.for_step(Vector2(0.5, 0.5), Vector2(0.6, 0.8), 1.0)
    assert tol.distance < tol.tie < tol.push
    assert tol.continue_threshold < tol.push


def test_final_output_tolerance():
    eps = constants.MACHINE_EPSILON
    near = Tolerances.final_output(Vector2(0.0, 0.0), 1.0)
    assert_close(near, 16 * 1024 * eps * 2.0, msg="push dominated")
    far = Tolerances.final_output(Vector2(1e9, 0.0), 1.0)
    assert_close(far, 64 * eps * 1e9, 1e-12, msg="scale dominated")


def test_tolerance_config_validation():
    assert DEFAULT_TOLERANCE_CONFIG.face == constants.FACE_EPS_MULTIPLIER
    assert_raises_value_error(ToleranceConfig, face=0)
    assert_raises_value_error(ToleranceConfig, push=-1.0)
    assert_raises_value_error(ToleranceConfig, tie=math.nan)
    assert_raises_value_error(ToleranceConfig, max_inner_iterations=0)

    custom = ToleranceConfig(push=2048)
    tol = Tolerances.for_step(Vector2(0.0, 0.0), Vector2(1.0, 0.0), 1.0, custom)
    assert_close(tol.push, 2048 * constants.MACHINE_EPSILON * 2.0, msg="custom push")


# =============================================================================
# VECTOR2
# =============================================================================

def test_normalized_is_unit_length():
    for x, y in [(3.0, 4.0), (1e-300, 1e-300), (1e300, -1e300), (0.0, -7.0),
                 (0.70710678118, 0.70710678119)]:
        v = Vector2(x, y).normalized()
        assert abs(v.length() - 1.0) <= 4 * constants.MACHINE_EPSILON, f"|{v}| != 1"
    assert_raises_value_error(Vector2(0.0, 0.0).normalized)


def test_reflected_and_advanced():
    d = Vector2(0.6, -0.8)
    assert d.reflected(True, False) == Vector2(-0.6, -0.8)
    assert d.reflected(False, True) == Vector2(0.6, 0.8)
    assert d.reflected(True, True) == Vector2(-0.6, 0.8)
    assert d.reflected(False, False) == d

    p = Vector2(1.0, 1.0).advanced(Vector2(1.0, 0.0), 2.5)
    assert p == Vector2(3.5, 1.0)


def test_as_vector2_inputs():
    assert as_vector2((1, 2)) == Vector2(1.0, 2.0)
    assert as_vector2([1.5, -2]) == Vector2(1.5, -2.0)
    assert as_vector2({'x': 3, 'y': 4}) == Vector2(3.0, 4.0)
    assert as_vector2(Point(5, 6)) == Vector2(5.0, 6.0)
    v = Vector2(7.0, 8.0)
    assert as_vector2(v) is v
    assert_raises_value_error(as_vector2, (1, 2, 3))
    assert_raises_value_error(as_vector2, {'x': 1})
    assert_raises_value_error(as_vector2, 5)


def test_vector_conversions():
    v = Vector2(1.25, -3.5)
    assert v.to_dict() == {'x': 1.25, 'y': -3.5}
    assert v.to_tuple() == (1.25, -3.5)
    assert tuple(v) == (1.25, -3.5)
    assert Vector2.from_shapely(v.to_shapely()) == v
    assert v + Vector2(1.0, 1.0) == Vector2(2.25, -2.5)
    assert v - v == Vector2(0.0, 0.0)


def test_polyline_length():
    pts = [Vector2(0, 0), Vector2(3, 4), Vector2(3, 0)]
    assert_close(polyline_length(pts), 9.0, msg="polyline")
    assert polyline_length(pts[:1]) == 0.0
    assert polyline_length([]) == 0.0


# =============================================================================
# MAIN
# =============================================================================

def run_all_tests():
    tests = [(name, func) for name, func in sorted(globals().items())
             if name.startswith('test_') and callable(func)]

    passed = 0
    errors = []
    for name, test_func in tests:
        try:
            test_func()
            passed += 1
            print(f"  [PASS] {name}")
        except Exception as e:
            errors.append((name, str(e)))
            print(f"  [FAIL] {name}: {e}")

    print("\n" + "=" * 78)
    print(f"SUMMARY: {passed}/{len(tests)} tests passed")
    print("=" * 78)
    return not errors


if __name__ == "__main__":
    success = run_all_tests()
    sys.exit(0 if success else 1)
