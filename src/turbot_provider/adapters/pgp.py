"""PGP encryption of values written to resource state.

Uses pgpy (pure Python). Keys are accepted ASCII-armored or as base64-encoded
binary; ciphertext is returned as base64-encoded binary PGP messages.
"""

from __future__ import annotations

import base64
from typing import TYPE_CHECKING, Final

import pgpy
from pgpy.errors import PGPError

from turbot_provider.domain.errors import EncryptionError
from turbot_provider.domain.ports import EncryptedValue, ValueEncryptor

KEYBASE_PREFIX: Final[str] = "keybase:"
_ARMOR_MARKER: Final[str] = "-----BEGIN PGP"


def load_public_key(encoded_key: str) -> pgpy.PGPKey:
    value = encoded_key.strip()
    if value.startswith(KEYBASE_PREFIX):
        raise EncryptionError(
            "keybase key references are not supported; supply an ASCII-armored or "
            "base64-encoded public key"
        )

    try:
        if _ARMOR_MARKER in value:
            key, _ = pgpy.PGPKey.from_blob(value)
        else:
            key, _ = pgpy.PGPKey.from_blob(base64.b64decode(value, validate=True))
    except (ValueError, PGPError) as exc:
        raise EncryptionError(f"Unable to parse PGP public key: {exc}") from exc

    return key if key.is_public else key.pubkey


def key_fingerprint(key: pgpy.PGPKey) -> str:
    return str(key.fingerprint).replace(" ", "").upper()


def encrypt_value(public_key: str, plaintext: str) -> EncryptedValue:
    key = load_public_key(public_key)
    message = pgpy.PGPMessage.new(plaintext)
    try:
        encrypted = key.encrypt(message)
    except PGPError as exc:
        raise EncryptionError(f"Unable to encrypt value with PGP key: {exc}") from exc

    return EncryptedValue(
        fingerprint=key_fingerprint(key),
        ciphertext=base64.b64encode(bytes(encrypted)).decode("ascii"),
    )


if TYPE_CHECKING:
    _encryptor_check: ValueEncryptor = encrypt_value

__all__ = ["encrypt_value", "key_fingerprint", "load_public_key"]
