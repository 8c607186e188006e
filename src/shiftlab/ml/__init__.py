"""
ML module - Encoding players for learning agents.

This module contains:
- ObservationSpace: Player telemetry to observation vectors
- ActionSpace: Discrete shift actions
"""

from shiftlab.ml.spaces import (
    ObservationSpace,
    ObservationConfig,
    ActionSpace,
    ShiftAction,
)

__all__ = [
    "ObservationSpace",
    "ObservationConfig",
    "ActionSpace",
    "ShiftAction",
]
