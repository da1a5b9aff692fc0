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

from enum import Enum
from typing import Iterable, Optional, Union


class Behavior(Enum):
    """
    Effect a wall has on the trajectory when one of its faces is struck.

    - STOP: the projectile halts at the impact point (terminal)
    - REFLECT: the direction component normal to the struck face flips sign
    - PASS_THROUGH: the impact point is recorded and travel continues unchanged

    The enum values are labels only. Simultaneous hits are ranked with
    behavior_precedence(), never by comparing values.
    """
    STOP = 'stop'
    REFLECT = 'reflect'
    PASS_THROUGH = 'pass_through'

    @property
    def is_blocking(self) -> bool:
        """True for behaviors that end a pass-through batch (STOP and REFLECT)."""
        return self is not Behavior.PASS_THROUGH

    @classmethod
    def parse(cls, value: Union['Behavior', str]) -> 'Behavior':
        """
        Convert a Behavior or its name/value string to a Behavior.

        Accepts 'stop', 'STOP', 'reflect', 'pass_through', 'PASS_THROUGH',
        'pass-through' and 'passthrough'.

        Raises:
            ValueError: If the value does not name a behavior.
        """
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            key = value.strip().lower().replace('-', '_')
            if key == 'passthrough':
                key = 'pass_through'
            for member in cls:
                if member.value == key:
                    return member
        raise ValueError(
            f"Invalid behavior {value!r}. "
            f"Valid options: {[member.value for member in cls]}"
        )


# Explicit ranking used when several walls are struck at the same instant.
# Higher wins.
_PRECEDENCE = {
    Behavior.PASS_THROUGH: 0,
    Behavior.REFLECT: 1,
    Behavior.STOP: 2,
}


def behavior_precedence(behavior: Behavior) -> int:
    """
    Rank of a behavior in the total order STOP > REFLECT > PASS_THROUGH.

    Args:
        behavior: The behavior to rank

    Returns:
        int: Larger values take precedence
    """
    return _PRECEDENCE[behavior]


def dominant_behavior(behaviors: Iterable[Behavior]) -> Optional[Behavior]:
    """
    Highest-precedence behavior among ``behaviors``.

    The result does not depend on the order of the input.

    Returns:
        Behavior or None: None if ``behaviors`` is empty
    """
    best = None
    for behavior in behaviors:
        if best is None or behavior_precedence(behavior) > behavior_precedence(best):
            best = behavior
    return best
