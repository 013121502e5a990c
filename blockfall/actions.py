"""Input enumerations.

Defines the closed :class:`Input` enum consumed by :func:`blockfall.step.step`
(one command per step) and a stable integer :class:`GymAction` mapping for
Gymnasium compatibility.

``SHIFT_INPUTS`` and ``ROTATE_INPUTS`` group the inputs that move the active
piece before gravity; ``OTHER`` only lets gravity act.
"""

from enum import IntEnum, StrEnum, auto


class Input(StrEnum):
    """String enum of player inputs.

    Members:
        LEFT, RIGHT: Shift the active piece one column.
        RROT, LROT: Rotate clockwise / counter-clockwise in place.
        UP: Hard drop and lock.
        OTHER: No movement; gravity only.
    """

    LEFT = auto()
    RIGHT = auto()
    RROT = auto()
    LROT = auto()
    UP = auto()
    OTHER = auto()


SHIFT_INPUTS = [Input.LEFT, Input.RIGHT]
ROTATE_INPUTS = [Input.RROT, Input.LROT]
MOVE_INPUTS = SHIFT_INPUTS + ROTATE_INPUTS


class GymAction(IntEnum):
    """Stable integer mapping for integration with Gymnasium ``Discrete`` spaces."""

    LEFT = 0  # start at 0 for explicitness
    RIGHT = auto()
    RROT = auto()
    LROT = auto()
    UP = auto()
    OTHER = auto()
