"""Exception hierarchy for weighted_picker.

- PickerError (base)
- InvalidPriorityError
- CountMismatchError
- MixedPriorityKindError
- PercentageOverflowError
- InvalidCountError
- NotEnoughValuesError
- InvalidArgumentError
- IllegalCallOrderError
- SamplingExhaustedError

Everything except :class:`SamplingExhaustedError` signals bad caller input and also
derives from :class:`ValueError`. :class:`SamplingExhaustedError` indicates a broken
internal invariant and derives from :class:`RuntimeError`.
"""

from __future__ import annotations

from typing import Any, Optional


class PickerError(Exception):
    """Base class for all weighted_picker errors.

    Attributes:
        message: Human readable description.
        details: Structured context about the failing input.
    """

    def __init__(self, message: str, *, details: Optional[dict[str, Any]] = None) -> None:
        super().__init__(message)
        self.message = message
        self.details = details or {}

    def __str__(self) -> str:
        if not self.details:
            return self.message
        context = ", ".join(f"{key}={value!r}" for key, value in self.details.items())
        return f"{self.message} ({context})"


class InvalidPriorityError(PickerError, ValueError):
    """A priority of zero, a negative number, or a non-integer was supplied."""

    def __init__(self, priority: object, message: Optional[str] = None) -> None:
        super().__init__(
            message or "Value priorities must be larger than 0",
            details={"priority": priority},
        )
        self.priority = priority


class CountMismatchError(PickerError, ValueError):
    """The number of priorities does not match the number of values."""

    def __init__(self, expected: int, actual: int) -> None:
        super().__init__(
            "Number of priorities does not match number of values",
            details={"values": expected, "priorities": actual},
        )
        self.expected = expected
        self.actual = actual


class MixedPriorityKindError(PickerError, ValueError):
    """Weights and percentages were combined in one request."""

    def __init__(self, existing: object, requested: object) -> None:
        super().__init__(
            "Weights and percentages cannot be mixed in one selection",
            details={"existing": str(existing), "requested": str(requested)},
        )
        self.existing = existing
        self.requested = requested


class PercentageOverflowError(PickerError, ValueError):
    """Percentage priorities add up to more than 100."""

    def __init__(self, total: int) -> None:
        super().__init__(
            "Percentages must not add up to more than 100",
            details={"total": total},
        )
        self.total = total


class InvalidCountError(PickerError, ValueError):
    """A draw count of zero or less was requested."""

    def __init__(self, count: object) -> None:
        super().__init__("Number of values to pick must be larger than 0", details={"count": count})
        self.count = count


class NotEnoughValuesError(PickerError, ValueError):
    """More values were requested than are available."""

    def __init__(self, requested: int, available: int, message: Optional[str] = None) -> None:
        super().__init__(
            message or "Not enough values to pick from",
            details={"requested": requested, "available": available},
        )
        self.requested = requested
        self.available = available


class InvalidArgumentError(PickerError, ValueError):
    """A random source was asked for an empty or out-of-range interval."""


class IllegalCallOrderError(PickerError, ValueError):
    """A builder method was called in a state where it is not allowed."""

    def __init__(self, method: str, state: str, message: Optional[str] = None) -> None:
        super().__init__(
            message or f"{method}() cannot be called here",
            details={"method": method, "state": state},
        )
        self.method = method
        self.state = state


class SamplingExhaustedError(PickerError, RuntimeError):
    """A draw ran against a table without any selectable entries.

    Validation at registration time makes this unreachable for well-formed input, so
    seeing it points at a defect rather than a caller mistake.
    """


__all__ = [
    "CountMismatchError",
    "IllegalCallOrderError",
    "InvalidArgumentError",
    "InvalidCountError",
    "InvalidPriorityError",
    "MixedPriorityKindError",
    "NotEnoughValuesError",
    "PercentageOverflowError",
    "PickerError",
    "SamplingExhaustedError",
]
