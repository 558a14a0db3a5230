"""Payload serializers for BTHome v2 advertisements.

Each serializer writes a complete service-data payload (device info byte
followed by the measurement objects) into a caller-owned buffer through
a BoundedWriter. The encrypted variant lives in ``encryption``.

Payload layout (unencrypted):
  - byte 0: device info 0x40
  - then, per present field in registry order: object id + value (LE)

This module has no dependency on any BLE stack.
"""
from __future__ import annotations

import math
import struct
from abc import ABC, abstractmethod
from typing import Callable

from .const import (
    DEFAULT_BUFFER_SIZE,
    DEVICE_INFO_UNENCRYPTED,
    I16_MAX,
    I16_MIN,
    U16_MAX,
    U24_LIMIT,
    U8_MAX,
)
from .data import BTHomeData
from .exceptions import ValueOverflowError, ValueTypeError, ValueUnderflowError
from .fields import FIELD_REGISTRY, FieldKind, FieldSpec
from .writer import BoundedWriter

# ---------------------------------------------------------------------------
# Helper functions
# ---------------------------------------------------------------------------

def _to_f32(value: float) -> float:
    """Round to IEEE-754 binary32, saturating to +/-inf like a float cast."""
    try:
        return struct.unpack("<f", struct.pack("<f", value))[0]
    except OverflowError:
        return math.inf if value > 0 else -math.inf


def _scale(spec: FieldSpec, value: float) -> float:
    """Divide by the field factor in single precision."""
    scaled = _to_f32(_to_f32(value) / _to_f32(spec.factor))
    if math.isnan(scaled):
        raise ValueOverflowError(spec.attr, scaled)
    return scaled


def _check_range(spec: FieldSpec, value: float | int, low: int, high: float) -> None:
    """Raise if value is outside [low, high]."""
    if value > high:
        raise ValueOverflowError(spec.attr, value)
    if value < low:
        raise ValueUnderflowError(spec.attr, value)


def _check_int(spec: FieldSpec, value: object) -> None:
    """Count slots take ints only; struct would reject anything else."""
    if not isinstance(value, int):
        raise ValueTypeError(spec.attr, value)


def _add_u8(writer: BoundedWriter, spec: FieldSpec, value: int) -> None:
    _check_int(spec, value)
    _check_range(spec, value, 0, U8_MAX)
    writer.extend(struct.pack("<BB", spec.object_id, value))


def _add_u16(writer: BoundedWriter, spec: FieldSpec, value: int) -> None:
    _check_int(spec, value)
    _check_range(spec, value, 0, U16_MAX)
    writer.extend(struct.pack("<BH", spec.object_id, value))


def _add_i16_from_f32(writer: BoundedWriter, spec: FieldSpec, value: float) -> None:
    scaled = _scale(spec, value)
    _check_range(spec, scaled, I16_MIN, I16_MAX)
    writer.extend(struct.pack("<Bh", spec.object_id, int(scaled)))


def _add_u16_from_f32(writer: BoundedWriter, spec: FieldSpec, value: float) -> None:
    scaled = _scale(spec, value)
    _check_range(spec, scaled, 0, U16_MAX)
    writer.extend(struct.pack("<BH", spec.object_id, int(scaled)))


def _add_u24_from_f32(writer: BoundedWriter, spec: FieldSpec, value: float) -> None:
    scaled = _scale(spec, value)
    # Upper bound is exclusive: 2**24 itself does not fit in 3 bytes
    if scaled >= U24_LIMIT:
        raise ValueOverflowError(spec.attr, scaled)
    if scaled < 0:
        raise ValueUnderflowError(spec.attr, scaled)
    # Low 3 bytes of the little-endian u32
    writer.extend(struct.pack("<BI", spec.object_id, int(scaled))[:4])


_ENCODERS: dict[FieldKind, Callable[[BoundedWriter, FieldSpec, float], None]] = {
    FieldKind.U8: _add_u8,
    FieldKind.S16_SCALED: _add_i16_from_f32,
    FieldKind.U16_SCALED: _add_u16_from_f32,
    FieldKind.U24_SCALED: _add_u24_from_f32,
    FieldKind.U16: _add_u16,
}


def add_payload(data: BTHomeData, writer: BoundedWriter) -> int:
    """Write every present field of data in registry order.

    Returns the number of bytes written. Raises ValueOverflowError,
    ValueUnderflowError, ValueTypeError (non-int in a count slot) or
    BufferOverflowError; on error the writer contents are invalid.
    """
    start = writer.length
    for spec in FIELD_REGISTRY:
        value = getattr(data, spec.attr)
        if value is None:
            continue
        _ENCODERS[spec.kind](writer, spec, value)
    return writer.length - start


# ---------------------------------------------------------------------------
# Abstract base class
# ---------------------------------------------------------------------------

class BTHomeSerializer(ABC):
    """Abstract base class for BTHome payload serializers."""

    device_info: int = 0
    name: str = "Unknown"

    @abstractmethod
    def serialize_to(self, data: BTHomeData, buffer: bytearray | memoryview) -> int:
        """Write a complete payload into buffer.

        Returns:
            Number of bytes written, starting at buffer[0].
        Raises:
            BTHomeError subclass; the buffer must then be discarded.
        """

    def serialize(self, data: BTHomeData) -> bytes:
        """Serialize into a fresh bytes object.

        Convenience adapter over serialize_to() using a fixed working buffer.
        """
        buffer = bytearray(DEFAULT_BUFFER_SIZE)
        size = self.serialize_to(data, buffer)
        return bytes(buffer[:size])


# ---------------------------------------------------------------------------
# Serializer implementations
# ---------------------------------------------------------------------------

class BTHomeUnencryptedSerializer(BTHomeSerializer):
    """BTHome v2 without encryption (device info 0x40)."""

    device_info = DEVICE_INFO_UNENCRYPTED
    name = "BTHome v2"

    def serialize_to(self, data: BTHomeData, buffer: bytearray | memoryview) -> int:
        writer = BoundedWriter(buffer)
        writer.push(self.device_info)
        add_payload(data, writer)
        return writer.length
