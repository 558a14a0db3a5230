"""Encrypted BTHome v2 payloads (AES-128-CCM, 4-byte MIC).

Payload layout (device info 0x41):
  - byte 0: device info 0x41
  - ciphertext of the measurement objects (same length as plaintext)
  - 4-byte counter, little-endian, in clear
  - 4-byte MIC

Nonce (13 bytes): MAC (6) + service UUID 0xFCD2 little-endian (d2 fc)
+ device info 0x41 + counter (4, LE).

The counter advances by one after every successful serialize and wraps
to 0 after 0xFFFFFFFF. It is never advanced when serializing fails, so a
failed call can be retried without skipping a nonce. Instances are not
thread-safe; callers sharing one must serialize access.
"""
from __future__ import annotations

import logging
import struct
from collections.abc import Mapping
from typing import Any

from cryptography.hazmat.primitives.ciphers.aead import AESCCM

from .config import validate_encryption_config
from .const import (
    DEVICE_INFO_ENCRYPTED,
    KEY_LENGTH,
    MAC_LENGTH,
    MIC_LENGTH,
    NONCE_LENGTH,
    SERVICE_UUID,
    U32_MAX,
)
from .data import BTHomeData
from .exceptions import EncryptError
from .fields import MAX_PAYLOAD_LENGTH
from .protocol import BTHomeSerializer, add_payload
from .writer import BoundedWriter

_LOGGER = logging.getLogger(__name__)

_SERVICE_UUID_LE = struct.pack("<H", SERVICE_UUID)


class BTHomeEncryptedSerializer(BTHomeSerializer):
    """BTHome v2 with AES-CCM encryption (device info 0x41)."""

    device_info = DEVICE_INFO_ENCRYPTED
    name = "BTHome v2 encrypted"

    def __init__(
        self, encryption_key: bytes, mac_address: bytes, counter_seed: int = 0
    ) -> None:
        if len(encryption_key) != KEY_LENGTH:
            raise ValueError(
                f"Encryption key must be {KEY_LENGTH} bytes, got {len(encryption_key)}"
            )
        if len(mac_address) != MAC_LENGTH:
            raise ValueError(
                f"MAC address must be {MAC_LENGTH} bytes, got {len(mac_address)}"
            )
        if not 0 <= counter_seed <= U32_MAX:
            raise ValueError(f"Counter seed {counter_seed} outside 0..{U32_MAX}")

        self._cipher = AESCCM(bytes(encryption_key), tag_length=MIC_LENGTH)
        self._mac_address = bytes(mac_address)
        self._counter = counter_seed
        # Plaintext scratch, sized for a record with every field present
        self._scratch = bytearray(MAX_PAYLOAD_LENGTH)

    @classmethod
    def from_config(cls, config: Mapping[str, Any]) -> BTHomeEncryptedSerializer:
        """Build a serializer from a provisioning mapping.

        Accepts ``key`` (hex string or bytes), ``mac`` (``AA:BB:CC:DD:EE:FF``
        or bytes) and an optional ``counter``. Raises ``vol.Invalid``.
        """
        conf = validate_encryption_config(config)
        _LOGGER.debug(
            "Encrypted serializer for %s, counter seed %d",
            conf["mac"].hex(":"),
            conf["counter"],
        )
        return cls(conf["key"], conf["mac"], conf["counter"])

    @property
    def mac_address(self) -> bytes:
        return self._mac_address

    @property
    def counter(self) -> int:
        """Counter value the next successful serialize will use."""
        return self._counter

    def build_nonce(self, counter: int) -> bytes:
        """Assemble the 13-byte CCM nonce for a counter value."""
        nonce = (
            self._mac_address
            + _SERVICE_UUID_LE
            + bytes([self.device_info])
            + struct.pack("<I", counter)
        )
        if len(nonce) != NONCE_LENGTH:
            raise EncryptError(f"Nonce must be {NONCE_LENGTH} bytes, got {len(nonce)}")
        return nonce

    def serialize_to(self, data: BTHomeData, buffer: bytearray | memoryview) -> int:
        scratch = BoundedWriter(self._scratch)
        add_payload(data, scratch)
        plaintext = scratch.getvalue()

        counter = self._counter
        nonce = self.build_nonce(counter)
        try:
            sealed = self._cipher.encrypt(nonce, plaintext, None)
        except (ValueError, TypeError, OverflowError) as err:
            raise EncryptError(f"AES-CCM encryption failed: {err}") from err
        ciphertext, mic = sealed[:-MIC_LENGTH], sealed[-MIC_LENGTH:]

        writer = BoundedWriter(buffer)
        writer.push(self.device_info)
        writer.extend(ciphertext)
        writer.extend(struct.pack("<I", counter))
        writer.extend(mic)

        self._advance_counter()
        _LOGGER.debug(
            "%s payload: %d byte(s) plaintext, counter %d",
            self.name,
            len(plaintext),
            counter,
        )
        return writer.length

    def _advance_counter(self) -> None:
        self._counter = (self._counter + 1) & U32_MAX
        if self._counter == 0:
            _LOGGER.warning(
                "Encryption counter for %s wrapped to 0; rotate the key to keep nonces unique",
                self._mac_address.hex(":"),
            )
