"""Player module - Actors that drive a transmission."""

from shiftlab.player.player import Player, PlayerConfig

__all__ = ["Player", "PlayerConfig"]
