"""Measurement record encoded into a BTHome payload."""
from __future__ import annotations

from dataclasses import dataclass, replace


@dataclass(frozen=True)
class BTHomeData:
    """Set of optional measurements.

    Records are immutable; each ``with_*`` method returns a modified copy,
    so one record can be reused across many encode calls::

        data = BTHomeData().with_temperature(18.6).with_co2(428)

    Values are not range-checked here. Out-of-range values are rejected
    when the record is encoded.
    """

    battery: int | None = None  # %
    temperature: float | None = None  # °C
    humidity: float | None = None  # %
    pressure: float | None = None  # hPa
    illuminance: float | None = None  # lux
    mass_kg: float | None = None
    mass_lb: float | None = None
    power: float | None = None  # W
    pm2_5: int | None = None  # µg/m³
    pm10: int | None = None  # µg/m³
    co2: int | None = None  # ppm
    tvoc: int | None = None  # µg/m³

    def with_battery(self, value: int) -> BTHomeData:
        return replace(self, battery=value)

    def with_temperature(self, value: float) -> BTHomeData:
        return replace(self, temperature=value)

    def with_humidity(self, value: float) -> BTHomeData:
        return replace(self, humidity=value)

    def with_pressure(self, value: float) -> BTHomeData:
        return replace(self, pressure=value)

    def with_illuminance(self, value: float) -> BTHomeData:
        return replace(self, illuminance=value)

    def with_mass_kg(self, value: float) -> BTHomeData:
        return replace(self, mass_kg=value)

    def with_mass_lb(self, value: float) -> BTHomeData:
        return replace(self, mass_lb=value)

    def with_power(self, value: float) -> BTHomeData:
        return replace(self, power=value)

    def with_pm2_5(self, value: int) -> BTHomeData:
        return replace(self, pm2_5=value)

    def with_pm10(self, value: int) -> BTHomeData:
        return replace(self, pm10=value)

    def with_co2(self, value: int) -> BTHomeData:
        return replace(self, co2=value)

    def with_tvoc(self, value: int) -> BTHomeData:
        return replace(self, tvoc=value)
