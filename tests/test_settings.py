# tests/test_settings.py

"""Tests for game settings validation."""

import pytest
from pydantic import ValidationError

from snaketerm.core.settings import DEFAULT_SETTINGS, GameSettings, load_settings
from snaketerm.exceptions import ConfigurationError


class TestGameSettings:
    """Test the GameSettings model."""

    def test_defaults_match_classic_board(self):
        """Test the default board is 40 x 20 with a 100ms tick."""
        settings = GameSettings()
        assert settings.width == 40
        assert settings.height == 20
        assert settings.tick_seconds == pytest.approx(0.1)
        assert settings.input_timeout_ms == 100
        assert settings.frame_rows == 21
        assert settings.frame_cols == 41
        assert settings.start_food == (10, 10)

    def test_settings_are_frozen(self):
        """Test the board cannot change once a game has its settings."""
        with pytest.raises(ValidationError):
            DEFAULT_SETTINGS.width = 80

    def test_color_names_are_normalized(self):
        settings = GameSettings(snake_color=" Green ", food_color="RED")
        assert settings.snake_color == "green"
        assert settings.food_color == "red"

    def test_unknown_color_rejected(self):
        with pytest.raises(ConfigurationError, match="Unknown color"):
            GameSettings(food_color="orange")

    def test_quit_key_must_be_one_character(self):
        with pytest.raises(ConfigurationError):
            GameSettings(quit_key="quit")

    def test_non_positive_dimensions_rejected(self):
        with pytest.raises(ConfigurationError, match="positive"):
            GameSettings(width=0)

    def test_start_food_must_fit_board(self):
        """Test a board too small for the default food cell is rejected."""
        with pytest.raises(ConfigurationError, match="outside"):
            GameSettings(width=8, height=8)

    def test_small_board_with_matching_start(self):
        settings = GameSettings(width=8, height=8, start_food=(6, 6))
        assert settings.contains((7, 7))
        assert not settings.contains((8, 7))
        assert not settings.contains((-1, 0))

    def test_start_snake_must_be_contiguous(self):
        with pytest.raises(ConfigurationError, match="contiguous"):
            GameSettings(start_snake=[(5, 2), (3, 2), (2, 2)])

    def test_start_snake_head_must_lead_rightwards(self):
        """Test a snake whose head is on the left is rejected."""
        with pytest.raises(ConfigurationError, match="contiguous"):
            GameSettings(start_snake=[(2, 2), (3, 2), (4, 2)])


class TestLoadSettings:
    """Test the load_settings helper."""

    def test_no_overrides_returns_defaults(self):
        assert load_settings() is DEFAULT_SETTINGS

    def test_overrides_applied(self):
        settings = load_settings(tick_ms=50)
        assert settings.tick_seconds == pytest.approx(0.05)

    def test_range_errors_become_configuration_errors(self):
        with pytest.raises(ConfigurationError, match="Invalid game settings"):
            load_settings(tick_ms=0)
