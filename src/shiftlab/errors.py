"""
Errors raised by ShiftLab components.

Only two things can go wrong:
- Popping an empty stack (transmission history or command list)
- Asking for a redo, which is not supported
"""


class ShiftLabError(Exception):
    """Base class for all ShiftLab errors."""


class EmptyStackError(ShiftLabError, IndexError):
    """Raised when popping from an empty history or command list."""


class RedoNotImplementedError(ShiftLabError, NotImplementedError):
    """Raised by every redo call."""

    def __init__(self, message: str = "redo not implemented yet"):
        super().__init__(message)
