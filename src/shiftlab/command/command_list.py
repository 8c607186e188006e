"""
Command list - Undo stack of executed commands.

Provides:
- The Command interface every undoable action implements
- A lock-guarded LIFO list of executed commands
- Undo of the most recent command
"""

import logging
import threading
from abc import ABC, abstractmethod
from typing import List, Tuple

from shiftlab.errors import EmptyStackError, RedoNotImplementedError

logger = logging.getLogger(__name__)


class Command(ABC):
    """An executable, undoable unit of work bound to a target."""

    @abstractmethod
    def execute(self) -> None:
        """Perform the action."""

    @abstractmethod
    def undo(self) -> None:
        """Reverse the action.

        Raises:
            EmptyStackError: If the target has nothing to restore.
        """


class CommandList:
    """LIFO list of executed commands.

    push_command and undo_last_command hold the list's lock for their whole
    operation, so one list can be shared between threads.

    Usage:
        commands = CommandList()
        command.execute()
        commands.push_command(command)
        commands.undo_last_command()
    """

    def __init__(self):
        self._commands: List[Command] = []
        self._lock = threading.Lock()

    def __len__(self) -> int:
        return len(self._commands)

    @property
    def commands(self) -> Tuple[Command, ...]:
        """Snapshot of the recorded commands, oldest first."""
        with self._lock:
            return tuple(self._commands)

    def push_command(self, command: Command) -> None:
        """Record an executed command.

        Args:
            command: Command that has already been executed
        """
        with self._lock:
            self._commands.append(command)
            depth = len(self._commands)
        logger.debug("Pushed %s (depth %d)", type(command).__name__, depth)

    def pop_last_command(self) -> Command:
        """Remove and return the most recent command.

        Takes no lock: only call this while already holding the list's lock,
        as undo_last_command does.

        Returns:
            The most recently pushed command

        Raises:
            EmptyStackError: If the list is empty
        """
        if not self._commands:
            logger.debug("Pop failed: command list is empty")
            raise EmptyStackError("Nothing to pop off the command list")
        return self._commands.pop()

    def undo_last_command(self) -> None:
        """Pop the most recent command and undo it.

        If the command's undo fails, the command goes back on the list.

        Raises:
            EmptyStackError: If the list is empty, or if the command's own
                undo has nothing to restore
        """
        with self._lock:
            command = self.pop_last_command()
            logger.debug("Undoing %s", type(command).__name__)
            try:
                command.undo()
            except Exception:
                self._commands.append(command)
                raise

    def clear(self) -> None:
        """Drop every recorded command."""
        with self._lock:
            self._commands.clear()
        logger.debug("Command list cleared")

    def redo_last_command(self) -> None:
        """Redo is not supported; there is no redo buffer.

        Raises:
            RedoNotImplementedError: Always
        """
        logger.debug("Redo requested on command list")
        raise RedoNotImplementedError()

    def get_state(self) -> dict:
        """Get command list state for telemetry.

        Returns:
            Dictionary with depth and command names, oldest first
        """
        commands = self.commands
        return {
            "depth": len(commands),
            "commands": [type(c).__name__ for c in commands],
        }
