"""Field registry: how each measurement slot maps onto the wire.

The order of FIELD_REGISTRY is the emission order. Receivers rely on it,
so it is part of the format rather than an iteration detail.
"""
from __future__ import annotations

import enum
from dataclasses import dataclass
from typing import Final

from .const import (
    BATTERY_OBJECT_ID,
    CO2_OBJECT_ID,
    FACTOR_0_01,
    HUMIDITY_OBJECT_ID,
    ILLUMINANCE_OBJECT_ID,
    MASS_KG_OBJECT_ID,
    MASS_LB_OBJECT_ID,
    PM10_OBJECT_ID,
    PM2_5_OBJECT_ID,
    POWER_OBJECT_ID,
    PRESSURE_OBJECT_ID,
    TEMPERATURE_OBJECT_ID,
    TVOC_OBJECT_ID,
)


class FieldKind(enum.Enum):
    """Value encoding, with its width in bytes."""

    U8 = 1
    S16_SCALED = 2
    U16_SCALED = 3
    U24_SCALED = 4
    U16 = 5

    @property
    def width(self) -> int:
        return _WIDTHS[self]


_WIDTHS = {
    FieldKind.U8: 1,
    FieldKind.S16_SCALED: 2,
    FieldKind.U16_SCALED: 2,
    FieldKind.U24_SCALED: 3,
    FieldKind.U16: 2,
}


@dataclass(frozen=True)
class FieldSpec:
    """One registry entry."""

    attr: str
    object_id: int
    kind: FieldKind
    factor: float = 1.0

    @property
    def size(self) -> int:
        """Bytes emitted for this field: object id plus value."""
        return 1 + self.kind.width


FIELD_REGISTRY: Final[tuple[FieldSpec, ...]] = (
    FieldSpec("battery", BATTERY_OBJECT_ID, FieldKind.U8),
    FieldSpec("temperature", TEMPERATURE_OBJECT_ID, FieldKind.S16_SCALED, FACTOR_0_01),
    FieldSpec("humidity", HUMIDITY_OBJECT_ID, FieldKind.U16_SCALED, FACTOR_0_01),
    FieldSpec("pressure", PRESSURE_OBJECT_ID, FieldKind.U24_SCALED, FACTOR_0_01),
    FieldSpec("illuminance", ILLUMINANCE_OBJECT_ID, FieldKind.U24_SCALED, FACTOR_0_01),
    FieldSpec("mass_kg", MASS_KG_OBJECT_ID, FieldKind.U16_SCALED, FACTOR_0_01),
    FieldSpec("mass_lb", MASS_LB_OBJECT_ID, FieldKind.U16_SCALED, FACTOR_0_01),
    FieldSpec("power", POWER_OBJECT_ID, FieldKind.U24_SCALED, FACTOR_0_01),
    FieldSpec("pm2_5", PM2_5_OBJECT_ID, FieldKind.U16),
    FieldSpec("pm10", PM10_OBJECT_ID, FieldKind.U16),
    FieldSpec("co2", CO2_OBJECT_ID, FieldKind.U16),
    FieldSpec("tvoc", TVOC_OBJECT_ID, FieldKind.U16),
)

# Largest possible plaintext payload (every slot present)
MAX_PAYLOAD_LENGTH: Final = sum(spec.size for spec in FIELD_REGISTRY)
