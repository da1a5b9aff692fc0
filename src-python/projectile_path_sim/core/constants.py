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
Constants used throughout the path simulation.

These are extracted here so that the ray caster, the event resolver and the
path tracer read the same calibrated values without circular imports.
The multipliers are expressed in units of machine epsilon; see
tolerances.ToleranceConfig for the hook that lets a caller override them.
"""

import sys

# Machine epsilon of the float type used for all coordinates
MACHINE_EPSILON = sys.float_info.epsilon

# Walls whose width AND height are both below this are dropped on insertion.
# A wall with only one zero dimension is a line segment and is kept.
WALL_DEGENERACY_TOLERANCE = 1e-12

# Per-step tolerance multipliers (times MACHINE_EPSILON)
FACE_EPS_MULTIPLIER = 64.0        # impact coordinate vs. wall span, times coordinate scale
DIRECTION_EPS_MULTIPLIER = 64.0   # direction component treated as parallel
DISTANCE_EPS_MULTIPLIER = 64.0    # minimum positive travel distance, times (1 + speed)
TIE_EPS_MULTIPLIER = 128.0        # window for simultaneous hits, times (1 + speed)
PUSH_EPS_MULTIPLIER = 1024.0      # nudge after an event, times (1 + speed)

# Final de-duplication of the rest point
FINAL_SCALE_EPS_MULTIPLIER = 64.0
FINAL_PUSH_FACTOR = 16.0

# Travel continues after an event only if tick and budget exceed this many eps_dist
CONTINUE_DISTANCE_FACTOR = 10.0

# Iteration bounds
MAX_INNER_ITERATIONS_PER_TICK = 256
EXTRA_OUTER_ITERATIONS = 2

# Smallest speed used when computing the outer iteration bound
MIN_SPEED_FOR_BOUND = 1e-12
