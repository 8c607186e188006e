"""Basic tests for the ShiftLab player module."""

import logging

import pytest

from shiftlab.car.transmission import TransmissionConfig, TransmissionState
from shiftlab.player.player import Player, PlayerConfig
from shiftlab.errors import EmptyStackError, RedoNotImplementedError


class TestPlayer:
    """Test player shifting and undo."""

    def test_cannot_undo_when_nothing_done(self):
        """Test a new player is idle and has nothing to undo."""
        player = Player()

        assert player.shifter.get_transmission_state() == "Idle"
        with pytest.raises(EmptyStackError):
            player.undo()
        assert player.shifter.get_transmission_state() == "Idle"

    def test_shift_down_and_undo(self):
        """Test shifting down then undoing returns to idle."""
        player = Player()
        player.shift_down()
        assert player.shifter.get_transmission_state() == "Shifting Down"

        assert player.undo() is None
        assert player.shifter.get_transmission_state() == "Idle"

    def test_shift_up_and_undo(self):
        """Test shifting up then undoing returns to idle."""
        player = Player()
        player.shift_up()
        assert player.shifter.get_transmission_state() == "Shifting Up"

        player.undo()
        assert player.shifter.get_transmission_state() == "Idle"

    def test_redo_after_undo(self):
        """Test redo fails after an undo and leaves state alone."""
        player = Player()
        player.shift_up()
        player.undo()

        with pytest.raises(RedoNotImplementedError):
            player.redo()
        assert player.state is TransmissionState.IDLE

    def test_redo_without_undo(self):
        """Test redo fails even with nothing undone."""
        player = Player()
        player.shift_down()

        with pytest.raises(RedoNotImplementedError):
            player.redo()
        assert player.state is TransmissionState.SHIFTING_DOWN
        assert len(player.commands) == 1

    def test_undo_sequence(self):
        """Test two undos reverse two shifts and a third fails."""
        player = Player()
        player.shift_up()
        player.shift_down()

        player.undo()
        assert player.state is TransmissionState.SHIFTING_UP
        player.undo()
        assert player.state is TransmissionState.IDLE

        with pytest.raises(EmptyStackError):
            player.undo()
        assert player.state is TransmissionState.IDLE

    def test_players_are_isolated(self):
        """Test players do not share transmissions or command lists."""
        first = Player(PlayerConfig(player_id=1))
        second = Player(PlayerConfig(player_id=2))

        first.shift_up()

        assert second.state is TransmissionState.IDLE
        assert len(second.commands) == 0
        assert first.shifter.transmission is not second.shifter.transmission

    def test_player_transmission_config(self):
        """Test player passes its transmission config through."""
        config = PlayerConfig(
            transmission=TransmissionConfig(initial_state=TransmissionState.SHIFTING_UP),
        )
        player = Player(config)

        assert player.state is TransmissionState.SHIFTING_UP

    def test_player_telemetry(self):
        """Test player telemetry dictionary."""
        player = Player(PlayerConfig(player_id=7))
        player.shift_up()
        player.shift_down()
        telemetry = player.get_telemetry()

        assert telemetry["player_id"] == 7
        assert telemetry["transmission"]["state"] == "Shifting Down"
        assert telemetry["transmission"]["history_depth"] == 2
        assert telemetry["commands"]["commands"] == ["ShiftUpCommand", "ShiftDownCommand"]

    def test_shifts_are_logged(self, caplog):
        """Test shifts and undos log at debug level."""
        player = Player()

        with caplog.at_level(logging.DEBUG, logger="shiftlab"):
            player.shift_up()
            player.undo()

        messages = [record.getMessage() for record in caplog.records]
        assert any("shifted up" in m for m in messages)
        assert any("Undoing ShiftUpCommand" in m for m in messages)

    def test_failed_undo_is_logged(self, caplog):
        """Test an undo with nothing to undo logs before raising."""
        player = Player()

        with caplog.at_level(logging.DEBUG, logger="shiftlab"):
            with pytest.raises(EmptyStackError):
                player.undo()

        messages = [record.getMessage() for record in caplog.records]
        assert any("command list is empty" in m for m in messages)

    def test_failed_transmission_undo_is_logged(self, caplog):
        """Test an empty transmission history logs before raising."""
        player = Player()

        with caplog.at_level(logging.DEBUG, logger="shiftlab"):
            with pytest.raises(EmptyStackError):
                player.shifter.transmission.undo()

        messages = [record.getMessage() for record in caplog.records]
        assert any("transmission history is empty" in m for m in messages)

    def test_reset(self):
        """Test reset clears both the transmission and the command list."""
        player = Player()
        player.shift_up()
        player.shift_down()

        player.reset()

        assert player.state is TransmissionState.IDLE
        assert len(player.commands) == 0
        assert player.shifter.transmission.history_depth == 0

        with pytest.raises(EmptyStackError):
            player.undo()
        assert player.state is TransmissionState.IDLE
        assert len(player.commands) == 0

    def test_failed_undo_keeps_command(self):
        """Test a command whose undo fails stays on the list."""
        player = Player()
        player.shift_up()
        player.shifter.transmission.reset()

        with pytest.raises(EmptyStackError):
            player.undo()

        assert len(player.commands) == 1
        assert player.state is TransmissionState.IDLE
