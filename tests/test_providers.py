# tests/test_providers.py
import pytest

from symcrypt.exceptions import ConfigurationError, ProviderOutOfRangeError
from symcrypt.providers import (
    FIXED_IV_64,
    FIXED_IV_128,
    CipherBackend,
    KeySizes,
    SymmetricCryptProvider,
    _CryptographyBackend,
    backend_for,
    decryptor_for,
    encryptor_for,
    iv_for,
    legal_key_sizes,
)


@pytest.mark.parametrize("value, expected", [
    (SymmetricCryptProvider.RC2, SymmetricCryptProvider.RC2),
    ("rijndael", SymmetricCryptProvider.RIJNDAEL),
    ("TripleDES", SymmetricCryptProvider.TRIPLE_DES),
    ("triple_des", SymmetricCryptProvider.TRIPLE_DES),
    (" des ", SymmetricCryptProvider.DES),
])
def test_coerce_accepts_members_values_and_names(value, expected):
    assert SymmetricCryptProvider.coerce(value) is expected


@pytest.mark.parametrize("value", ["aes", "", 0, 3, None, 1.5])
def test_coerce_rejects_everything_else(value):
    with pytest.raises(ProviderOutOfRangeError) as exc:
        SymmetricCryptProvider.coerce(value)
    assert isinstance(exc.value, ConfigurationError)
    assert exc.value.value == value


@pytest.mark.parametrize("provider, block_size, sizes", [
    (SymmetricCryptProvider.RIJNDAEL, 128, KeySizes(128, 256, 64)),
    (SymmetricCryptProvider.RC2, 64, KeySizes(40, 128, 8)),
    (SymmetricCryptProvider.DES, 64, KeySizes(64, 64, 0)),
    (SymmetricCryptProvider.TRIPLE_DES, 64, KeySizes(128, 192, 64)),
])
def test_provider_table(provider, block_size, sizes):
    assert backend_for(provider).block_size == block_size
    assert legal_key_sizes(provider) == (sizes,)


def test_iv_is_fixed_per_block_size():
    assert iv_for(SymmetricCryptProvider.RIJNDAEL) == FIXED_IV_128
    assert len(FIXED_IV_128) == 16
    for provider in (SymmetricCryptProvider.RC2, SymmetricCryptProvider.DES, SymmetricCryptProvider.TRIPLE_DES):
        assert iv_for(provider) == FIXED_IV_64
    assert FIXED_IV_64 == bytes([0x0F, 0x6F, 0x13, 0x2E, 0x35, 0xC2, 0xCD, 0xF9])


@pytest.mark.parametrize("provider, key_len", [
    (SymmetricCryptProvider.RIJNDAEL, 16),
    (SymmetricCryptProvider.RIJNDAEL, 32),
    (SymmetricCryptProvider.RC2, 5),
    (SymmetricCryptProvider.RC2, 16),
    (SymmetricCryptProvider.DES, 8),
    (SymmetricCryptProvider.TRIPLE_DES, 16),
    (SymmetricCryptProvider.TRIPLE_DES, 24),
])
def test_transforms_invert_each_other(provider, key_len):
    key = bytes(range(1, key_len + 1))
    block = backend_for(provider).block_size // 8
    data = bytes(range(block * 3))

    enc = encryptor_for(provider, key)
    ct = enc.update(data[:5]) + enc.update(data[5:]) + enc.finalize()
    assert len(ct) == len(data)
    assert ct != data

    dec = decryptor_for(provider, key)
    assert dec.update(ct) + dec.finalize() == data


@pytest.mark.parametrize("provider, key_len", [
    (SymmetricCryptProvider.DES, 16),
    (SymmetricCryptProvider.TRIPLE_DES, 8),
    (SymmetricCryptProvider.RIJNDAEL, 20),
    (SymmetricCryptProvider.RC2, 4),
])
def test_bad_key_length_is_rejected(provider, key_len):
    with pytest.raises(ValueError):
        encryptor_for(provider, b"k" * key_len)


def test_rc2_context_rejects_partial_block():
    enc = encryptor_for(SymmetricCryptProvider.RC2, b"0123456789")
    assert enc.update(b"abc") == b""
    with pytest.raises(ValueError):
        enc.finalize()


def test_incomplete_backend_cannot_be_built():
    class EncryptOnly(CipherBackend):
        def encryptor(self, key, iv):
            return None

    class NoAlgorithm(_CryptographyBackend):
        pass

    with pytest.raises(TypeError):
        EncryptOnly()
    with pytest.raises(TypeError):
        NoAlgorithm()
