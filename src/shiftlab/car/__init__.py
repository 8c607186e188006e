"""
Car module - Transmission shift simulation.

This module contains all car-related components:
- Transmission: Shift state machine with undo history
- Shift commands: Command wrappers around shifts
- ShiftController: Runs shifts for a player and records them
"""

from shiftlab.car.transmission import Transmission, TransmissionConfig, TransmissionState
from shiftlab.car.shift_commands import ShiftCommand, ShiftUpCommand, ShiftDownCommand
from shiftlab.car.controllers.shift_controller import ShiftController

__all__ = [
    "Transmission",
    "TransmissionConfig",
    "TransmissionState",
    "ShiftCommand",
    "ShiftUpCommand",
    "ShiftDownCommand",
    "ShiftController",
]
