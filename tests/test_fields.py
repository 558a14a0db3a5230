"""Tests for the field registry and the measurement record."""
from __future__ import annotations

import dataclasses

import pytest

from bthome_ble import FIELD_REGISTRY, MAX_PAYLOAD_LENGTH, BTHomeData, FieldKind


class TestFieldRegistry:

    def test_object_ids_in_order(self):
        assert [spec.object_id for spec in FIELD_REGISTRY] == [
            0x01, 0x02, 0x03, 0x04, 0x05, 0x06, 0x06, 0x0B, 0x0D, 0x0E, 0x12, 0x13,
        ]

    def test_covers_every_record_slot(self):
        slots = [field.name for field in dataclasses.fields(BTHomeData)]
        assert [spec.attr for spec in FIELD_REGISTRY] == slots

    def test_kinds(self):
        kinds = {spec.attr: spec.kind for spec in FIELD_REGISTRY}
        assert kinds["battery"] is FieldKind.U8
        assert kinds["temperature"] is FieldKind.S16_SCALED
        assert kinds["humidity"] is FieldKind.U16_SCALED
        assert kinds["pressure"] is FieldKind.U24_SCALED
        assert kinds["power"] is FieldKind.U24_SCALED
        assert kinds["co2"] is FieldKind.U16

    def test_scaled_fields_use_hundredths(self):
        for spec in FIELD_REGISTRY:
            if spec.kind in (FieldKind.U8, FieldKind.U16):
                assert spec.factor == 1.0
            else:
                assert spec.factor == 0.01

    def test_sizes(self):
        sizes = {spec.attr: spec.size for spec in FIELD_REGISTRY}
        assert sizes["battery"] == 2
        assert sizes["temperature"] == 3
        assert sizes["illuminance"] == 4
        assert sizes["tvoc"] == 3

    def test_max_payload_length(self):
        assert MAX_PAYLOAD_LENGTH == 38


class TestBTHomeData:

    def test_defaults_empty(self):
        data = BTHomeData()
        assert all(getattr(data, f.name) is None for f in dataclasses.fields(data))

    def test_with_returns_copy(self):
        base = BTHomeData()
        updated = base.with_co2(428)
        assert updated.co2 == 428
        assert base.co2 is None
        assert updated is not base

    def test_chaining(self):
        data = BTHomeData().with_temperature(18.6).with_humidity(20.5).with_pm2_5(49)
        assert data.temperature == 18.6
        assert data.humidity == 20.5
        assert data.pm2_5 == 49

    def test_every_slot_has_builder(self):
        for field in dataclasses.fields(BTHomeData):
            builder = getattr(BTHomeData(), f"with_{field.name}")
            assert getattr(builder(1), field.name) == 1

    def test_overwrite(self):
        data = BTHomeData().with_battery(10).with_battery(20)
        assert data.battery == 20

    def test_frozen(self):
        with pytest.raises(dataclasses.FrozenInstanceError):
            BTHomeData().battery = 5

    def test_equality(self):
        assert BTHomeData().with_co2(1) == BTHomeData(co2=1)
