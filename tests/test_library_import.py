"""Verify the package exports and its wire constants."""
from __future__ import annotations

import bthome_ble
from bthome_ble import (
    SERVICE_UUID,
    BTHomeEncryptedSerializer,
    BTHomeError,
    BTHomeSerializer,
    BTHomeUnencryptedSerializer,
    BufferOverflowError,
    EncryptError,
    ValueOverflowError,
    ValueUnderflowError,
)
from bthome_ble.const import (
    DEVICE_INFO_ENCRYPTED,
    DEVICE_INFO_UNENCRYPTED,
    ENCRYPTION_OVERHEAD,
    NONCE_LENGTH,
)


class TestLibraryExports:
    """Verify the library exports all expected symbols."""

    def test_all_names_resolve(self):
        for name in bthome_ble.__all__:
            assert getattr(bthome_ble, name) is not None

    def test_serializers(self):
        assert issubclass(BTHomeUnencryptedSerializer, BTHomeSerializer)
        assert issubclass(BTHomeEncryptedSerializer, BTHomeSerializer)
        assert BTHomeUnencryptedSerializer.device_info == DEVICE_INFO_UNENCRYPTED
        assert BTHomeEncryptedSerializer.device_info == DEVICE_INFO_ENCRYPTED

    def test_error_hierarchy(self):
        for error in (BufferOverflowError, ValueOverflowError, ValueUnderflowError, EncryptError):
            assert issubclass(error, BTHomeError)
        assert issubclass(ValueOverflowError, ValueError)
        assert not issubclass(BufferOverflowError, ValueError)


class TestLibraryConstants:
    """Verify wire constants are correct."""

    def test_service_uuid(self):
        assert SERVICE_UUID == 0xFCD2

    def test_device_info(self):
        assert DEVICE_INFO_UNENCRYPTED == 0x40
        assert DEVICE_INFO_ENCRYPTED == 0x41

    def test_encryption_sizes(self):
        assert NONCE_LENGTH == 13
        assert ENCRYPTION_OVERHEAD == 9
