"""bthome-ble: BTHome v2 advertising payload encoder.

Encodes sensor measurements into BTHome v2 service data (UUID 0xFCD2)
for broadcast over Bluetooth Low Energy. No dependency on any BLE stack.

Payload formats supported:
  - unencrypted (device info 0x40)
  - AES-128-CCM encrypted (device info 0x41, +9 bytes)
"""
from .const import SERVICE_UUID
from .data import BTHomeData
from .encryption import BTHomeEncryptedSerializer
from .exceptions import (
    BTHomeError,
    BufferOverflowError,
    EncryptError,
    ValueOverflowError,
    ValueTypeError,
    ValueUnderflowError,
)
from .fields import FIELD_REGISTRY, MAX_PAYLOAD_LENGTH, FieldKind, FieldSpec
from .protocol import BTHomeSerializer, BTHomeUnencryptedSerializer, add_payload
from .writer import BoundedWriter

__all__ = [
    "SERVICE_UUID",
    "BTHomeData",
    "BTHomeEncryptedSerializer",
    "BTHomeError",
    "BTHomeSerializer",
    "BTHomeUnencryptedSerializer",
    "BoundedWriter",
    "BufferOverflowError",
    "EncryptError",
    "FIELD_REGISTRY",
    "FieldKind",
    "FieldSpec",
    "MAX_PAYLOAD_LENGTH",
    "ValueOverflowError",
    "ValueTypeError",
    "ValueUnderflowError",
    "add_payload",
]
