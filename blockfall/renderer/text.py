"""Plain text rendering of a state (status line + composite rows)."""

from blockfall.grid import to_strings
from blockfall.renderer.composite import renderable_composite
from blockfall.state import State


def status_line(state: State) -> str:
    status = f" {state.message or 'Dead'} " if state.is_dead else ""
    return f"Score:{state.score} -- {status}"


def render_text(state: State) -> str:
    """Return the status line followed by the composite grid, one row per line."""
    rows = to_strings(renderable_composite(state))
    return "\n".join([status_line(state), *rows])
