"""
Unit tests for GameSession.

Tests the config -> playing -> lost/won -> config loop, pointer
mapping and terminal commands.
"""
import math

import pytest
from minefield import FieldConfig
from minefield.frontend import Button, ConfigMenu, GameSession, Mode


@pytest.fixture
def session() -> GameSession:
    """Session on a 5x5 single-mine field."""
    return GameSession(ConfigMenu(5, 5, 1), seed=0)


@pytest.fixture
def planted_session(session: GameSession) -> GameSession:
    """Playing session with the mine in the bottom-right corner."""
    session.start()
    session.field.plant([(4, 4)])
    return session


class TestModes:
    """Test presentation mode transitions."""

    def test_starts_in_config(self, session: GameSession) -> None:
        assert session.mode == Mode.CONFIG
        assert session.running is True

    def test_enter_starts_game(self, session: GameSession) -> None:
        session.key("enter")
        assert session.mode == Mode.PLAYING
        assert session.field.config == FieldConfig(5, 5, 1)
        assert session.field.generated is False

    def test_menu_keys_change_config(self, session: GameSession) -> None:
        session.key("right")
        session.key("enter")
        assert session.field.width == 6
        assert session.geometry.width == 6

    def test_escape_stops_session(self, session: GameSession) -> None:
        session.key("escape")
        assert session.running is False

    def test_loss_then_back_to_config(
        self, planted_session: GameSession
    ) -> None:
        assert planted_session.reveal(4, 4) is True
        assert planted_session.mode == Mode.LOST
        planted_session.key("enter")
        assert planted_session.mode == Mode.CONFIG

    def test_win(self, planted_session: GameSession) -> None:
        planted_session.reveal(0, 0)
        assert planted_session.mode == Mode.WON

    def test_new_game_resets_loss(self, planted_session: GameSession) -> None:
        planted_session.reveal(4, 4)
        planted_session.key("enter")
        planted_session.key("enter")
        assert planted_session.mode == Mode.PLAYING
        assert planted_session.field.lost is False

    def test_input_ignored_after_loss(
        self, planted_session: GameSession
    ) -> None:
        planted_session.reveal(4, 4)
        assert planted_session.reveal(0, 0) is False
        assert planted_session.flag(0, 0) is False
        assert planted_session.field.get_cell(0, 0).is_revealed is False


class TestClicks:
    """Test pointer input mapped through geometry."""

    def test_left_click_reveals(self, planted_session: GameSession) -> None:
        assert planted_session.click(0.1, 0.1, Button.LEFT) == (0, 0)
        assert planted_session.mode == Mode.WON

    @pytest.mark.parametrize("button", [Button.RIGHT, Button.MIDDLE])
    def test_other_buttons_flag(
        self, planted_session: GameSession, button: Button
    ) -> None:
        assert planted_session.click(0.5, 0.5, button) == (2, 2)
        assert planted_session.field.get_cell(2, 2).is_flagged is True

    def test_click_on_mine_loses(self, planted_session: GameSession) -> None:
        planted_session.click(0.9, 0.9)
        assert planted_session.mode == Mode.LOST

    def test_click_outside_is_ignored(
        self, planted_session: GameSession
    ) -> None:
        assert planted_session.click(1.5, 0.5) is None
        assert planted_session.field.lost is False

    def test_nan_click_is_ignored(
        self, planted_session: GameSession
    ) -> None:
        assert planted_session.click(math.nan, 0.5) is None
        assert planted_session.field.get_cell(0, 2).is_revealed is False

    def test_click_ignored_in_config(self, session: GameSession) -> None:
        assert session.click(0.1, 0.1) is None
        assert session.field.generated is False


class TestCommands:
    """Test terminal command parsing."""

    def test_reveal_command(self, planted_session: GameSession) -> None:
        assert planted_session.command("r 4 4") == ""
        assert planted_session.mode == Mode.LOST

    def test_flag_command(self, planted_session: GameSession) -> None:
        planted_session.command("f 1 2")
        assert planted_session.field.get_cell(1, 2).is_flagged is True

    def test_out_of_range_command(self, planted_session: GameSession) -> None:
        message = planted_session.command("r 9 9")
        assert "outside" in message

    def test_non_integer_command(self, planted_session: GameSession) -> None:
        assert "integers" in planted_session.command("r a b")

    def test_wrong_arity_shows_help(
        self, planted_session: GameSession
    ) -> None:
        assert "Commands" in planted_session.command("r 1")

    def test_unknown_command(self, session: GameSession) -> None:
        assert "Unknown command" in session.command("xyzzy")

    def test_blank_line_is_enter(self, session: GameSession) -> None:
        session.command("")
        assert session.mode == Mode.PLAYING

    def test_quit_command(self, planted_session: GameSession) -> None:
        planted_session.command("q")
        assert planted_session.running is False


class TestFrame:
    """Test text rendering of each screen."""

    def test_config_frame_shows_menu(self, session: GameSession) -> None:
        assert "> Width: 5" in session.frame()

    def test_playing_frame(self, planted_session: GameSession) -> None:
        planted_session.command("f 0 0")
        frame = planted_session.frame()
        assert "Mines left: 0" in frame
        assert "F # # # #" in frame

    def test_lost_frame_shows_mine(self, planted_session: GameSession) -> None:
        planted_session.reveal(4, 4)
        frame = planted_session.frame()
        assert "*" in frame
        assert "You hit a mine" in frame

    def test_won_frame(self, planted_session: GameSession) -> None:
        planted_session.reveal(0, 0)
        assert "cleared the field" in planted_session.frame()
