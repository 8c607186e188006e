"""
Transmission component - Shift state machine with undo history.

Simulates:
- Three shift states (idle, shifting up, shifting down)
- A LIFO history of every state the transmission has left
- Undo back through that history
"""

import logging
from dataclasses import dataclass
from enum import Enum
from typing import List, Tuple

from shiftlab.errors import EmptyStackError

logger = logging.getLogger(__name__)


class TransmissionState(Enum):
    """Shift states. Values are the display strings."""
    IDLE = "Idle"
    SHIFTING_UP = "Shifting Up"
    SHIFTING_DOWN = "Shifting Down"

    def __str__(self) -> str:
        return self.value


@dataclass
class TransmissionConfig:
    """Configuration for a transmission."""
    # State a new (or reset) transmission starts in
    initial_state: TransmissionState = TransmissionState.IDLE


class Transmission:
    """Unconditional shift state machine.

    Every shift is always legal, whatever the current state. The only
    guarded operation is undo, which needs a non-empty history.

    Usage:
        trans = Transmission()
        trans.shift_up()
        trans.undo()
        assert trans.state is TransmissionState.IDLE
    """

    def __init__(self, config: TransmissionConfig | None = None):
        """Initialize transmission with optional custom configuration.

        Args:
            config: Transmission configuration. Starts idle if None.
        """
        self.config = config or TransmissionConfig()

        self._state: TransmissionState = self.config.initial_state
        self._previous_states: List[TransmissionState] = []

    @property
    def state(self) -> TransmissionState:
        """Current shift state."""
        return self._state

    @property
    def previous_states(self) -> Tuple[TransmissionState, ...]:
        """Prior states, oldest first."""
        return tuple(self._previous_states)

    @property
    def history_depth(self) -> int:
        """Number of states that can be undone."""
        return len(self._previous_states)

    def shift_up(self) -> None:
        """Shift up, recording the current state in the history."""
        self._push_current_state()
        self._state = TransmissionState.SHIFTING_UP
        logger.debug("Transmission shifted up (history depth %d)", self.history_depth)

    def shift_down(self) -> None:
        """Shift down, recording the current state in the history."""
        self._push_current_state()
        self._state = TransmissionState.SHIFTING_DOWN
        logger.debug("Transmission shifted down (history depth %d)", self.history_depth)

    def _push_current_state(self) -> None:
        self._previous_states.append(self._state)

    def undo(self) -> None:
        """Restore the most recent state from the history.

        Raises:
            EmptyStackError: If there is nothing to undo. State is unchanged.
        """
        if not self._previous_states:
            logger.debug("Undo failed: transmission history is empty")
            raise EmptyStackError("Nothing to pop off the transmission history")

        self._state = self._previous_states.pop()
        logger.debug("Transmission restored to %s", self._state)

    def reset(self) -> None:
        """Reset transmission to its initial state and clear the history."""
        self._state = self.config.initial_state
        self._previous_states = []

    def get_state(self) -> dict:
        """Get current transmission state for telemetry.

        Returns:
            Dictionary containing transmission state values
        """
        return {
            "state": self._state.value,
            "history_depth": self.history_depth,
            "previous_states": [s.value for s in self._previous_states],
        }
