"""
Observation and action spaces for ML integration.

Provides:
- Observation vector extraction from player telemetry
- Discrete shift action space
- Applying decoded actions to a player
"""

from dataclasses import dataclass
from enum import IntEnum
from typing import Any, Dict, List, Tuple
import numpy as np

from shiftlab.car.transmission import TransmissionState
from shiftlab.errors import EmptyStackError

# One-hot slot order for the current transmission state
STATE_ORDER: List[TransmissionState] = list(TransmissionState)


@dataclass
class ObservationConfig:
    """Configuration for observation space."""
    include_state: bool = True
    include_history_depth: bool = True

    # History depth that maps to 1.0
    max_history_depth: int = 32


class ObservationSpace:
    """Defines the observation space for ML agents.

    Turns player telemetry into a normalized float32 vector.
    """

    def __init__(self, config: ObservationConfig | None = None):
        """Initialize observation space.

        Args:
            config: Observation configuration
        """
        self.config = config or ObservationConfig()
        if self.config.max_history_depth <= 0:
            raise ValueError("max_history_depth must be positive")

        self._dimension = self._calculate_dimension()

    def _calculate_dimension(self) -> int:
        dim = 0

        if self.config.include_state:
            dim += len(STATE_ORDER)  # one-hot state

        if self.config.include_history_depth:
            dim += 1

        return dim

    @property
    def dimension(self) -> int:
        """Observation vector dimension."""
        return self._dimension

    @property
    def shape(self) -> Tuple[int]:
        """Observation shape."""
        return (self._dimension,)

    def get_low(self) -> np.ndarray:
        """Get lower bounds for observations."""
        return np.zeros(self._dimension, dtype=np.float32)

    def get_high(self) -> np.ndarray:
        """Get upper bounds for observations."""
        return np.ones(self._dimension, dtype=np.float32)

    def extract(self, telemetry: Dict[str, Any]) -> np.ndarray:
        """Extract observation from player telemetry.

        Args:
            telemetry: Dictionary from Player.get_telemetry()

        Returns:
            Normalized observation vector
        """
        transmission = telemetry.get("transmission", {})
        obs = []

        if self.config.include_state:
            one_hot = np.zeros(len(STATE_ORDER), dtype=np.float32)
            state = TransmissionState(transmission.get("state", TransmissionState.IDLE.value))
            one_hot[STATE_ORDER.index(state)] = 1.0
            obs.extend(one_hot)

        if self.config.include_history_depth:
            depth = transmission.get("history_depth", 0) / self.config.max_history_depth
            obs.append(np.clip(depth, 0.0, 1.0))

        return np.array(obs, dtype=np.float32)


class ShiftAction(IntEnum):
    """Discrete actions a player can take."""
    NONE = 0
    SHIFT_UP = 1
    SHIFT_DOWN = 2
    UNDO = 3


class ActionSpace:
    """Discrete action space over ShiftAction."""

    @property
    def dimension(self) -> int:
        """Number of discrete actions."""
        return len(ShiftAction)

    def decode(self, action: np.ndarray | int) -> ShiftAction:
        """Decode an action index.

        Args:
            action: Action index from agent

        Returns:
            Decoded shift action

        Raises:
            ValueError: If the index is out of range
        """
        flat = np.asarray(action).reshape(-1)
        if flat.size == 0:
            raise ValueError("Empty action")
        index = int(flat[0])
        if index < 0 or index >= self.dimension:
            raise ValueError(f"Action {index} out of range [0, {self.dimension})")
        return ShiftAction(index)

    def apply(self, player, action: np.ndarray | int) -> bool:
        """Perform an action on a player.

        Args:
            player: Player to act on
            action: Action index from agent

        Returns:
            False if an undo found nothing to undo, True otherwise
        """
        decoded = self.decode(action)

        if decoded == ShiftAction.SHIFT_UP:
            player.shift_up()
        elif decoded == ShiftAction.SHIFT_DOWN:
            player.shift_down()
        elif decoded == ShiftAction.UNDO:
            try:
                player.undo()
            except EmptyStackError:
                return False

        return True

    def sample(self, rng: np.random.Generator | None = None) -> np.ndarray:
        """Sample random action.

        Args:
            rng: Random generator. Uses a fresh default generator if None.

        Returns:
            Random action
        """
        rng = rng or np.random.default_rng()
        return np.array([rng.integers(0, self.dimension)])
