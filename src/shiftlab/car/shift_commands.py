"""
Shift commands - Command wrappers around transmission shifts.

Each command holds a shared reference to one transmission. Undo on either
command restores the transmission's last recorded state, so undoing a shift
up and undoing a shift down are the same operation on the transmission.
"""

from shiftlab.car.transmission import Transmission
from shiftlab.command.command_list import Command


class ShiftCommand(Command):
    """Base for commands that act on a shared transmission."""

    def __init__(self, transmission: Transmission):
        """Bind the command to a transmission.

        Args:
            transmission: Transmission shared with the other shift commands
        """
        self.transmission = transmission

    def undo(self) -> None:
        """Restore the transmission's previous state.

        Raises:
            EmptyStackError: If the transmission history is empty
        """
        self.transmission.undo()


class ShiftUpCommand(ShiftCommand):
    """Shifts the transmission up."""

    def execute(self) -> None:
        """Shift the shared transmission up."""
        self.transmission.shift_up()


class ShiftDownCommand(ShiftCommand):
    """Shifts the transmission down."""

    def execute(self) -> None:
        """Shift the shared transmission down."""
        self.transmission.shift_down()
