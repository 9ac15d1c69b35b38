"""
Errors raised by the shift split core. Callers (CLI, API) report them; nothing retries.
"""


class ShiftSplitError(ValueError):
    """Base class for every error the partition core raises."""


class InvalidFormat(ShiftSplitError):
    """Time string is not two colon-separated integers (HH:MM)."""

    def __init__(self, value):
        self.value = value
        super().__init__(f"Invalid time format: {value!r} (expected HH:MM)")


class DegenerateShiftCount(ShiftSplitError):
    """Shift count below 1."""

    def __init__(self, shift_count):
        self.shift_count = shift_count
        super().__init__(f"Shift count must be at least 1, got {shift_count}")


class InvalidRemainderSplit(ShiftSplitError):
    """first_extra outside [0, remainder] or off the granularity step."""


class NameStoreError(ShiftSplitError):
    """Name store file is unreadable or not a JSON object."""


class NameListError(ShiftSplitError):
    """Uploaded or local name list cannot be read."""
