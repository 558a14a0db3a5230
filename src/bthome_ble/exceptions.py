"""Errors raised while encoding BTHome payloads.

Every encode call either returns a byte count or raises one of these.
A partially written buffer is never a valid payload.
"""
from __future__ import annotations


class BTHomeError(Exception):
    """Base class for all BTHome encoding errors."""


class BufferOverflowError(BTHomeError):
    """Output or scratch buffer is too small for the payload."""

    def __init__(self, needed: int, remaining: int) -> None:
        super().__init__(
            f"Buffer overflow: need {needed} byte(s), {remaining} remaining"
        )
        self.needed = needed
        self.remaining = remaining


class _ValueRangeError(BTHomeError, ValueError):
    """A measurement does not fit its wire representation."""

    def __init__(self, field: str, value: float | int) -> None:
        super().__init__(f"{field}: scaled value {value!r} out of range")
        self.field = field
        self.value = value


class ValueOverflowError(_ValueRangeError):
    """Scaled value exceeds the maximum of its encoding width."""


class ValueUnderflowError(_ValueRangeError):
    """Scaled value is below the minimum of its encoding width."""


class EncryptError(BTHomeError):
    """The AES-CCM primitive rejected its inputs."""


class ValueTypeError(BTHomeError, TypeError):
    """A count slot holds something other than an int."""

    def __init__(self, field: str, value: object) -> None:
        super().__init__(f"{field}: expected int, got {type(value).__name__}")
        self.field = field
        self.value = value
