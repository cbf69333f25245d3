# tests/conftest.py
import pytest

from symcrypt.providers import SymmetricCryptProvider

ALL_PROVIDERS = list(SymmetricCryptProvider)


@pytest.fixture(autouse=True)
def clean_symcrypt_env(monkeypatch):
    """Keep developer shell/.env settings out of the tests."""
    for name in ("SYMCRYPT_KDF_ITERATIONS", "SYMCRYPT_KDF_HASH", "SYMCRYPT_LOG_LEVEL"):
        monkeypatch.delenv(name, raising=False)


@pytest.fixture(params=ALL_PROVIDERS, ids=lambda p: p.name)
def provider(request):
    return request.param
