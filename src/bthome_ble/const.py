"""Wire constants for BTHome v2 advertising payloads.

These values are an interoperability contract with BTHome receivers
(Home Assistant, ESPHome, Theengs, ...) and must not change.
"""
from typing import Final

# Service UUID advertised alongside the payload
SERVICE_UUID: Final = 0xFCD2

# Device information byte (first payload byte)
DEVICE_INFO_UNENCRYPTED: Final = 0x40  # BTHome v2, no encryption
DEVICE_INFO_ENCRYPTED: Final = 0x41  # BTHome v2, AES-CCM

# Object IDs
BATTERY_OBJECT_ID: Final = 0x01
TEMPERATURE_OBJECT_ID: Final = 0x02
HUMIDITY_OBJECT_ID: Final = 0x03
PRESSURE_OBJECT_ID: Final = 0x04
ILLUMINANCE_OBJECT_ID: Final = 0x05
MASS_KG_OBJECT_ID: Final = 0x06
MASS_LB_OBJECT_ID: Final = 0x06  # shares the kg id
POWER_OBJECT_ID: Final = 0x0B
PM2_5_OBJECT_ID: Final = 0x0D
PM10_OBJECT_ID: Final = 0x0E
CO2_OBJECT_ID: Final = 0x12
TVOC_OBJECT_ID: Final = 0x13

# Scale factor shared by all fixed-point fields
FACTOR_0_01: Final = 0.01

# Value limits
U8_MAX: Final = 0xFF
U16_MAX: Final = 0xFFFF
I16_MIN: Final = -0x8000
I16_MAX: Final = 0x7FFF
U24_LIMIT: Final = 1 << 24  # exclusive
U32_MAX: Final = 0xFFFFFFFF

# Encryption
KEY_LENGTH: Final = 16
MAC_LENGTH: Final = 6
NONCE_LENGTH: Final = 13
COUNTER_LENGTH: Final = 4
MIC_LENGTH: Final = 4
ENCRYPTION_OVERHEAD: Final = 1 + COUNTER_LENGTH + MIC_LENGTH

# Working buffer used by the serialize() convenience adapters
DEFAULT_BUFFER_SIZE: Final = 256
