"""
errors.py
---------
Exception types raised by the simulation core.

Only programmer errors raise. Expected gameplay edge cases (empty clicks,
zero ammunition, exhausted spawn caps, repeated detonation) are silent
no-ops and never reach this module.
"""


class PopshotError(Exception):
    """Base class for all simulation core errors."""


class RoundNotStartedError(PopshotError):
    """Raised when ticking, attacking, retrying or advancing before any round was started."""

    def __init__(self, operation: str):
        super().__init__(f"Cannot {operation}: no round has been started")
        self.operation = operation


class ConfigError(PopshotError):
    """Raised when a round or spawn table is structurally invalid."""
