"""Line clear system (enabled by ``config.clear_lines``)."""

from dataclasses import replace

from blockfall.config import LINE_CLEAR_SCORES
from blockfall.playfield import clear_rows, full_rows
from blockfall.state import State


def line_clear_system(state: State) -> State:
    """Remove full rows from the world and add the matching score."""
    if not state.config.clear_lines:
        return state

    rows = full_rows(state.world)
    if not rows:
        return state

    reward = LINE_CLEAR_SCORES[min(len(rows), len(LINE_CLEAR_SCORES) - 1)]
    return replace(
        state,
        world=clear_rows(state.world, rows),
        score=state.score + reward,
    )
