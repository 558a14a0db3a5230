"""Validation of encryption provisioning settings.

Keys, MAC addresses and counter seeds are provisioned out of band (a
config file, an environment variable, a factory database). This module
turns such a mapping into the exact types the encrypted serializer needs.
"""
from __future__ import annotations

from collections.abc import Callable, Mapping
from typing import Any

import voluptuous as vol

from .const import KEY_LENGTH, MAC_LENGTH, U32_MAX

CONF_KEY = "key"
CONF_MAC = "mac"
CONF_COUNTER = "counter"


def _fixed_bytes(length: int, separators: str = "") -> Callable[[Any], bytes]:
    """Validator for raw bytes or a hex string decoding to length bytes."""

    def validate(value: Any) -> bytes:
        if isinstance(value, (bytes, bytearray)):
            raw = bytes(value)
        elif isinstance(value, str):
            text = value.strip()
            for sep in separators:
                text = text.replace(sep, "")
            try:
                raw = bytes.fromhex(text)
            except ValueError as err:
                raise vol.Invalid(f"Not a hex string: {value!r}") from err
        else:
            raise vol.Invalid(f"Expected bytes or hex string, got {type(value).__name__}")
        if len(raw) != length:
            raise vol.Invalid(f"Expected {length} bytes, got {len(raw)}")
        return raw

    return validate


encryption_key = _fixed_bytes(KEY_LENGTH)
mac_address = _fixed_bytes(MAC_LENGTH, separators=":-")

ENCRYPTION_CONFIG_SCHEMA = vol.Schema({
    vol.Required(CONF_KEY): encryption_key,
    vol.Required(CONF_MAC): mac_address,
    vol.Optional(CONF_COUNTER, default=0): vol.All(
        vol.Coerce(int), vol.Range(min=0, max=U32_MAX)
    ),
})


def validate_encryption_config(config: Mapping[str, Any]) -> dict[str, Any]:
    """Return the normalized config, or raise vol.Invalid."""
    return ENCRYPTION_CONFIG_SCHEMA(dict(config))
