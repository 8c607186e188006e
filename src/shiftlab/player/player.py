"""
Player - External-facing actor that shifts and undoes.

Each player owns its own command list and shift controller, so players
never share state.
"""

import logging
from dataclasses import dataclass
from typing import Any, Dict

from shiftlab.car.controllers.shift_controller import ShiftController
from shiftlab.car.transmission import TransmissionConfig, TransmissionState
from shiftlab.command.command_list import CommandList
from shiftlab.errors import RedoNotImplementedError

logger = logging.getLogger(__name__)


@dataclass
class PlayerConfig:
    """Player configuration."""
    player_id: int = 0
    transmission: TransmissionConfig | None = None


class Player:
    """A single player driving one transmission.

    Usage:
        player = Player()
        player.shift_up()
        player.undo()
        telemetry = player.get_telemetry()
    """

    def __init__(self, config: PlayerConfig | None = None):
        """Initialize player with a fresh command list and controller.

        Args:
            config: Player configuration. Uses defaults if None.
        """
        self.config = config or PlayerConfig()
        self.player_id = self.config.player_id

        self.commands = CommandList()
        self.shifter = ShiftController(self.config.transmission)

    @property
    def state(self) -> TransmissionState:
        """Current transmission state."""
        return self.shifter.state

    def shift_up(self) -> None:
        """Shift up through the shift controller."""
        self.shifter.shift_up_action(self.commands)

    def shift_down(self) -> None:
        """Shift down through the shift controller."""
        self.shifter.shift_down_action(self.commands)

    def undo(self) -> None:
        """Undo the last command.

        Raises:
            EmptyStackError: If there is nothing to undo
        """
        self.commands.undo_last_command()
        logger.debug("Player %d undid to %s", self.player_id, self.state)

    def redo(self) -> None:
        """Redo is not supported.

        Raises:
            RedoNotImplementedError: Always
        """
        logger.debug("Player %d requested redo", self.player_id)
        raise RedoNotImplementedError()

    def reset(self) -> None:
        """Reset the transmission and drop the recorded commands."""
        self.shifter.transmission.reset()
        self.commands.clear()
        logger.debug("Player %d reset", self.player_id)

    def get_telemetry(self) -> Dict[str, Any]:
        """Get player telemetry.

        Returns:
            Dictionary with transmission and command list state
        """
        return {
            "player_id": self.player_id,
            "transmission": self.shifter.transmission.get_state(),
            "commands": self.commands.get_state(),
        }
