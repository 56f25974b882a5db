from __future__ import annotations

from typing import TYPE_CHECKING

import pgpy
import pytest
from pgpy.constants import (
    CompressionAlgorithm,
    HashAlgorithm,
    KeyFlags,
    PubKeyAlgorithm,
    SymmetricKeyAlgorithm,
)

from turbot_provider.config.credentials import CREDENTIAL_KEYS, ENV_CREDENTIALS_PATH, ENV_PROFILE
from turbot_provider.config.provider import ENV_TIMEOUT_SECONDS

if TYPE_CHECKING:
    from pathlib import Path

TURBOT_ENV_VARS = (
    *(key.upper() for key in CREDENTIAL_KEYS.values()),
    ENV_PROFILE,
    ENV_CREDENTIALS_PATH,
    ENV_TIMEOUT_SECONDS,
)

CREDENTIALS_FILE = """\
[default]
turbot_access_key_id = file-access-key
turbot_secret_access_key = file-secret-key
turbot_workspace = https://acme.turbot.io

[invalid-keys]
turbot_access_key_id = invalid-access-key
turbot_secret_access_key = invalid-secret-key
turbot_workspace = https://bananaman-turbot.putney.turbot.io

[invalid-workspace]
turbot_access_key_id = file-access-key
turbot_secret_access_key = file-secret-key
turbot_workspace = https://bananaman-turbot.putney.turbot.io_invalid

[partial]
turbot_access_key_id = partial-access-key
"""


@pytest.fixture(autouse=True)
def _isolated_turbot_environment(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    for name in TURBOT_ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    # never fall back to a real ~/.config/turbot/credentials
    monkeypatch.setenv("HOME", str(tmp_path / "home"))


@pytest.fixture
def credentials_file(tmp_path: Path) -> Path:
    path = tmp_path / "credentials"
    path.write_text(CREDENTIALS_FILE, encoding="utf-8")
    return path


@pytest.fixture(scope="session")
def pgp_private_key() -> pgpy.PGPKey:
    key = pgpy.PGPKey.new(PubKeyAlgorithm.RSAEncryptOrSign, 2048)
    uid = pgpy.PGPUID.new("Provider Tests", email="provider-tests@example.com")
    key.add_uid(
        uid,
        usage={KeyFlags.Sign, KeyFlags.Certify},
        hashes=[HashAlgorithm.SHA256],
        ciphers=[SymmetricKeyAlgorithm.AES256],
        compression=[CompressionAlgorithm.Uncompressed],
    )
    subkey = pgpy.PGPKey.new(PubKeyAlgorithm.RSAEncryptOrSign, 2048)
    key.add_subkey(subkey, usage={KeyFlags.EncryptCommunications, KeyFlags.EncryptStorage})
    return key


@pytest.fixture(scope="session")
def pgp_public_key(pgp_private_key: pgpy.PGPKey) -> str:
    return str(pgp_private_key.pubkey)
