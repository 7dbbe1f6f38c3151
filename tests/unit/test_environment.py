"""
Unit tests for the Gymnasium environment wrapper.
"""
import pytest
import numpy as np
from sweeper import BoardConfig, SweeperEnv


@pytest.fixture
def env() -> SweeperEnv:
    """3x3 environment with one hazard in the bottom-right corner."""
    environment = SweeperEnv(BoardConfig(3, 3, 1))
    environment.reset(seed=0)
    environment.session.apply_layout([
        [False, False, False],
        [False, False, False],
        [False, False, True],
    ])
    return environment


class TestSpaces:
    """Test observation and action spaces."""

    def test_action_space_covers_both_actions(self) -> None:
        env = SweeperEnv(BoardConfig(4, 3, 2))
        assert env.action_space.n == 24

    def test_reset_observation(self) -> None:
        env = SweeperEnv(BoardConfig(4, 3, 2))
        obs, info = env.reset(seed=7)
        assert obs.shape == (3, 4)
        assert np.all(obs == -1)
        assert env.observation_space.contains(obs)
        assert info["game_state"] == "IN_PROGRESS"
        assert info["remaining_hazards"] == 2

    def test_seeded_reset_is_reproducible(self) -> None:
        env = SweeperEnv(BoardConfig(9, 9, 10))
        env.reset(seed=3)
        first = env.session.grid.hazard_positions()
        env.reset(seed=3)
        assert env.session.grid.hazard_positions() == first


class TestStep:
    """Test rewards and termination."""

    def test_revealing_safe_cell(self, env: SweeperEnv) -> None:
        # (1, 1) borders the hazard, so no cascade
        obs, reward, terminated, truncated, _ = env.step(4)
        assert reward == 1.0
        assert obs[1, 1] == 1
        assert not terminated and not truncated

    def test_cascade_win(self, env: SweeperEnv) -> None:
        obs, reward, terminated, _, info = env.step(0)
        assert reward == 10.0
        assert terminated
        assert info["game_state"] == "WON"
        assert obs[2, 2] == -2

    def test_hazard_loses(self, env: SweeperEnv) -> None:
        obs, reward, terminated, _, info = env.step(8)
        assert reward == -10.0
        assert terminated
        assert info["game_state"] == "LOST"
        assert obs[2, 2] == 9

    def test_mark_action(self, env: SweeperEnv) -> None:
        obs, reward, terminated, _, info = env.step(9 + 8)
        assert reward == 0.0
        assert obs[2, 2] == -2
        assert info["remaining_hazards"] == 0
        assert not terminated

    def test_noop_action_penalized(self, env: SweeperEnv) -> None:
        env.step(4)
        _, reward, _, _, _ = env.step(4)
        assert reward == pytest.approx(-0.1)


class TestActionMask:
    """Test action masking."""

    def test_fresh_board_all_valid(self, env: SweeperEnv) -> None:
        assert env.get_action_mask().all()

    def test_revealed_cell_masked(self, env: SweeperEnv) -> None:
        env.step(4)
        mask = env.get_action_mask()
        assert not mask[4]
        assert not mask[9 + 4]
        assert mask[0]

    def test_marked_cell_can_only_be_unmarked(self, env: SweeperEnv) -> None:
        env.step(9 + 8)
        mask = env.get_action_mask()
        assert not mask[8]
        assert mask[9 + 8]

    def test_game_over_masks_everything(self, env: SweeperEnv) -> None:
        env.step(8)
        assert not env.get_action_mask().any()


class TestRender:
    """Test text rendering."""

    def test_ansi_render(self) -> None:
        env = SweeperEnv(BoardConfig(2, 2, 1), render_mode="ansi")
        env.reset(seed=0)
        assert env.render() == ". .\n. .\nHazards left: 1  [IN_PROGRESS]"
