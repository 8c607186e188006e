"""
Shift controller - Mediates between a player and a transmission.

Owns one transmission and the shift up/down commands bound to it, and
records every executed shift into the caller's command list.
"""

import logging

from shiftlab.car.shift_commands import ShiftDownCommand, ShiftUpCommand
from shiftlab.car.transmission import Transmission, TransmissionConfig, TransmissionState
from shiftlab.command.command_list import CommandList
from shiftlab.errors import RedoNotImplementedError

logger = logging.getLogger(__name__)


class ShiftController:
    """Handles shift actions for one transmission.

    The transmission is created here and shared by both commands; each
    player gets its own controller.
    """

    def __init__(self, config: TransmissionConfig | None = None):
        """Initialize controller with a new transmission.

        Args:
            config: Configuration for the controlled transmission
        """
        self.transmission = Transmission(config)
        self.shift_up_command = ShiftUpCommand(self.transmission)
        self.shift_down_command = ShiftDownCommand(self.transmission)

    @property
    def state(self) -> TransmissionState:
        """Current transmission state."""
        return self.transmission.state

    def shift_up_action(self, command_list: CommandList) -> None:
        """Shift up and record the command.

        Args:
            command_list: List the executed command is pushed onto
        """
        self.shift_up_command.execute()
        command_list.push_command(self.shift_up_command)

    def shift_down_action(self, command_list: CommandList) -> None:
        """Shift down and record the command.

        Args:
            command_list: List the executed command is pushed onto
        """
        self.shift_down_command.execute()
        command_list.push_command(self.shift_down_command)

    def undo_last_action(self, command_list: CommandList) -> None:
        """Undo the last recorded shift.

        Args:
            command_list: List holding the shifts to undo

        Raises:
            EmptyStackError: If there is nothing to undo
        """
        command_list.undo_last_command()

    def redo_last_undo_action(self) -> None:
        """Redo is not supported.

        Raises:
            RedoNotImplementedError: Always
        """
        logger.debug("Redo requested on shift controller")
        raise RedoNotImplementedError()

    def get_transmission_state(self) -> str:
        """Display string of the current transmission state."""
        return self.transmission.state.value
