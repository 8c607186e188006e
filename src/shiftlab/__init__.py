"""
ShiftLab - A transmission shift simulation with command-pattern undo.

This package provides:
- A shift state machine transmission with its own undo history
- Shift commands recorded on a lock-guarded undo stack
- A shift controller and player composing the two
- Observation/action encodings for learning agents
"""

__version__ = "0.1.0"

from shiftlab.car.transmission import Transmission, TransmissionState
from shiftlab.command.command_list import CommandList
from shiftlab.player.player import Player
from shiftlab.errors import EmptyStackError, RedoNotImplementedError, ShiftLabError

__all__ = [
    "Transmission",
    "TransmissionState",
    "CommandList",
    "Player",
    "EmptyStackError",
    "RedoNotImplementedError",
    "ShiftLabError",
    "__version__",
]
