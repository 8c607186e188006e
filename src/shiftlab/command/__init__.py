"""
Command module - Command pattern and undo stack.

This module contains:
- Command: Interface for executable, undoable actions
- CommandList: Lock-guarded LIFO of executed commands
"""

from shiftlab.command.command_list import Command, CommandList

__all__ = [
    "Command",
    "CommandList",
]
