"""Gymnasium environment wrapper for blockfall.

Provides a structured observation that pairs a rendered RGBA image with an
info dictionary (status and config). Reward is the delta of ``state.score``
per step. ``terminated`` is ``True`` once the player is dead; the game has no
forced end, so ``truncated`` is always ``False`` (wrap with
``gymnasium.wrappers.TimeLimit`` for bounded episodes).

Observation schema:

``{"image": np.ndarray(H,W,4), "info": {"status": {...}, "config": {...}}}``

Usage:

``env = BlockfallEnv(config_name="classic")``

The environment is purposely *not* vectorized; wrap externally if needed.
"""

from dataclasses import replace
from typing import Any, Dict, Optional, Tuple

import gymnasium as gym
import numpy as np
from gymnasium import spaces
from PIL.Image import Image as PILImage

from blockfall.actions import GymAction, Input
from blockfall.config import GameConfig, get_config
from blockfall.levels import initial_state
from blockfall.renderer.composite import PANEL_WIDTH
from blockfall.renderer.image import DEFAULT_CELL_SIZE, ImageRenderer
from blockfall.state import State
from blockfall.step import step

ObsType = Dict[str, Any]

GYM_TO_INPUT: Dict[GymAction, Input] = {
    gym_action: Input[gym_action.name] for gym_action in GymAction
}


def env_status_observation_dict(state: State) -> Dict[str, Any]:
    """Status portion of observation (score, phase, next block)."""
    return {
        "score": int(state.score),
        "phase": "dead" if state.is_dead else "alive",
        "block": state.block.kind.name,
        "next_block": state.next_block.kind.name,
    }


def env_config_observation_dict(state: State) -> Dict[str, Any]:
    """Config portion of observation (dimensions, seed, rule flags)."""
    config = state.config
    return {
        "width": config.width,
        "height": config.height,
        "seed": config.seed,
        "lock_delay": -1 if config.lock_delay is None else config.lock_delay,
        "detect_top_out": int(config.detect_top_out),
        "clear_lines": int(config.clear_lines),
    }


class BlockfallEnv(gym.Env[ObsType, np.integer]):
    """Gymnasium ``Env`` implementation for blockfall.

    The action space is ``Discrete(len(Input))`` following :class:`GymAction`.
    """

    metadata = {"render_modes": ["human", "texture"]}

    def __init__(
        self,
        render_mode: str = "texture",
        cell_size: int = DEFAULT_CELL_SIZE,
        config: Optional[GameConfig] = None,
        config_name: str = "default",
    ):
        """Create a new environment instance.

        Arguments:
            render_mode: "texture" to return PIL image frames, "human" to open a window.
            cell_size: Pixel size of one grid cell in rendered images.
            config: Explicit game config; overrides ``config_name``.
            config_name: Preset looked up in ``CONFIG_REGISTRY``.
        """
        self.config: GameConfig = config or get_config(config_name)
        self.state: Optional[State] = None
        self._render_mode = render_mode
        self._renderer = ImageRenderer(cell_size=cell_size)

        image_height = (self.config.height + 2) * cell_size
        image_width = (self.config.width + 2 + PANEL_WIDTH) * cell_size

        text_space_short = spaces.Text(max_length=32)

        def int_box(low: int, high: int) -> spaces.Box:
            return spaces.Box(
                low=np.array(low, dtype=np.int64),
                high=np.array(high, dtype=np.int64),
                shape=(),
                dtype=np.int64,
            )

        self.observation_space = spaces.Dict(
            {
                "image": spaces.Box(
                    low=0,
                    high=255,
                    shape=(image_height, image_width, 4),
                    dtype=np.uint8,
                ),
                "info": spaces.Dict(
                    {
                        "status": spaces.Dict(
                            {
                                "score": int_box(0, 1_000_000_000),
                                "phase": text_space_short,  # "alive" / "dead"
                                "block": text_space_short,
                                "next_block": text_space_short,
                            }
                        ),
                        "config": spaces.Dict(
                            {
                                "width": int_box(1, 10_000),
                                "height": int_box(1, 10_000),
                                "seed": int_box(0, 2**32),
                                "lock_delay": int_box(-1, 1_000_000),
                                "detect_top_out": int_box(0, 1),
                                "clear_lines": int_box(0, 1),
                            }
                        ),
                    }
                ),
            }
        )

        self.action_space = spaces.Discrete(len(GymAction))

        self.reset()

    def reset(
        self, *, seed: Optional[int] = None, options: Optional[Dict[str, object]] = None
    ) -> Tuple[ObsType, Dict[str, object]]:
        """Start a new episode.

        Arguments:
            seed: If given, replaces the block generator seed for this and later episodes.
            options: Gymnasium options (unused).

        Returns:
            Observation dict and empty info dict per Gymnasium API.
        """
        super().reset(seed=seed)
        if seed is not None:
            self.config = replace(self.config, seed=seed)
        self.state = initial_state(self.config)
        return self._get_obs(), self._get_info()

    def step(
        self, action: np.integer
    ) -> Tuple[ObsType, float, bool, bool, Dict[str, object]]:
        """Apply one environment step.

        Arguments:
            action: Integer index into :class:`GymAction`.

        Returns:
            (observation, reward, terminated, truncated, info)

        Raises:
            ValueError: If ``action`` is outside the action space.
        """
        assert self.state is not None

        if not 0 <= int(action) < len(GymAction):
            raise ValueError(f"Invalid action: {action}")
        step_input = GYM_TO_INPUT[GymAction(int(action))]

        prev_score = self.state.score
        self.state = step(self.state, step_input)
        reward = float(self.state.score - prev_score)
        terminated = self.state.is_dead
        return self._get_obs(), reward, terminated, False, self._get_info()

    def render(self, mode: Optional[str] = None) -> Optional[PILImage]:  # type: ignore
        """Render the current state.

        Args:
            mode: "human" to display, "texture" to return PIL image. Defaults to
                instance's configured render mode.
        """
        render_mode = mode or self._render_mode
        assert self.state is not None
        img = self._renderer.render(self.state)
        if render_mode == "human":
            img.show()
            return None
        elif render_mode == "texture":
            return img
        else:
            raise NotImplementedError(f"Render mode '{render_mode}' not supported.")

    def state_info(self) -> Dict[str, Dict[str, Any]]:
        """Return structured ``info`` sub-dict used in observations."""
        assert self.state is not None
        return {
            "status": env_status_observation_dict(self.state),
            "config": env_config_observation_dict(self.state),
        }

    def _get_obs(self) -> ObsType:
        assert self.state is not None
        img = self._renderer.render(self.state)
        return {"image": np.array(img), "info": self.state_info()}

    def _get_info(self) -> Dict[str, object]:
        """Return the step info (empty placeholder for compatibility)."""
        return {}

    def close(self) -> None:
        """Release any renderer resources (no-op placeholder)."""
        pass
