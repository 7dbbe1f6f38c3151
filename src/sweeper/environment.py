"""
Gymnasium environment wrapper for the hazard grid.

Exposes a GameSession through the standard RL interface so agents and
scripted players can drive it.
"""
from typing import Any, Dict, Optional, Tuple, SupportsFloat

import gymnasium as gym
import numpy as np
from gymnasium import spaces

from .cell import OBS_EXPLODED, OBS_MARKED
from .config import BoardConfig
from .generator import make_rng
from .session import GameSession


# ============================================================================
# Sweeper Environment
# ============================================================================

class SweeperEnv(gym.Env):
    """
    Gymnasium environment for the hazard grid.

    Observation:
        2D array of shape (rows, columns) where:
        - -1 = concealed cell
        - -2 = marked cell
        - 0-8 = revealed cell with adjacency count
        - 9 = exploded hazard

    Actions:
        Discrete action space of size 2 * columns * rows.
        Action i < columns * rows is a primary action on cell
        (i % columns, i // columns); the second half repeats the cells
        as secondary (mark) actions.

    Rewards:
        - +1 for revealing a safe cell
        - +10 for winning the game
        - -10 for uncovering a hazard
        - 0 for toggling a mark
        - -0.1 for an action that changes nothing
    """

    metadata = {"render_modes": ["human", "ansi"], "render_fps": 4}

    def __init__(
        self,
        config: Optional[BoardConfig] = None,
        render_mode: Optional[str] = None,
    ) -> None:
        """
        Initialize the environment.

        Args:
            config: Board configuration (default: 9x9 with 10 hazards).
            render_mode: How to render the environment.
        """
        super().__init__()

        self.config = config or BoardConfig()
        self.session = GameSession(self.config)
        self.render_mode = render_mode

        self.observation_space = spaces.Box(
            low=OBS_MARKED,
            high=OBS_EXPLODED,
            shape=(self.config.rows, self.config.columns),
            dtype=np.int8,
        )
        self._cells = self.config.total_cells
        self.action_space = spaces.Discrete(2 * self._cells)

        self._steps = 0

    def reset(
        self,
        *,
        seed: Optional[int] = None,
        options: Optional[Dict[str, Any]] = None,
    ) -> Tuple[np.ndarray, Dict[str, Any]]:
        """
        Reset the environment for a new episode.

        Args:
            seed: Seeds the board generator for reproducible boards.
            options: Additional options (unused).

        Returns:
            Tuple of (observation, info dict).
        """
        super().reset(seed=seed)
        if seed is not None:
            self.session.rng = make_rng(seed)
        self.session.reset()
        self._steps = 0

        return self.session.get_observation(), self._get_info()

    def step(
        self, action: int
    ) -> Tuple[np.ndarray, SupportsFloat, bool, bool, Dict[str, Any]]:
        """
        Execute one action in the environment.

        Returns:
            Tuple of (observation, reward, terminated, truncated, info).
        """
        secondary, x, y = self._decode_action(int(action))
        self._steps += 1

        reward = self._apply(secondary, x, y)

        observation = self.session.get_observation()
        terminated = not self.session.is_playing
        truncated = False

        return observation, reward, terminated, truncated, self._get_info()

    def _decode_action(self, action: int) -> Tuple[bool, int, int]:
        """Convert flat action index to (secondary, x, y)."""
        secondary = action >= self._cells
        index = action % self._cells
        return secondary, index % self.config.columns, index // self.config.columns

    def _apply(self, secondary: bool, x: int, y: int) -> float:
        """Perform the action and score it."""
        if secondary:
            return 0.0 if self.session.secondary_action(x, y) else -0.1

        if not self.session.primary_action(x, y):
            return -0.1
        if self.session.is_won:
            return 10.0
        if self.session.is_lost:
            return -10.0
        return 1.0

    def _get_info(self) -> Dict[str, Any]:
        """Get info dictionary for current state."""
        return {
            "steps": self._steps,
            "game_state": self.session.outcome.name,
            "remaining_hazards": self.session.remaining_hazards,
            "valid_actions": len(self.session.get_valid_actions()),
        }

    def render(self) -> Optional[str]:
        """Render the current board state."""
        if self.render_mode == "ansi":
            return self.session.snapshot().to_text()
        if self.render_mode == "human":
            print(self.session.snapshot().to_text())
        return None

    def get_action_mask(self) -> np.ndarray:
        """
        Get mask of actions that change the session.

        Returns:
            Boolean array where True = valid action.
        """
        mask = np.zeros(self.action_space.n, dtype=bool)
        if not self.session.is_playing:
            return mask
        for x, y in self.session.get_valid_actions():
            index = y * self.config.columns + x
            mask[index] = True
            mask[self._cells + index] = True
        for y in range(self.config.rows):
            for x in range(self.config.columns):
                if self.session.get_cell(x, y).is_marked:
                    mask[self._cells + y * self.config.columns + x] = True
        return mask
