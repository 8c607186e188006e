"""Controllers that mediate between players and car components."""

from shiftlab.car.controllers.shift_controller import ShiftController

__all__ = ["ShiftController"]
