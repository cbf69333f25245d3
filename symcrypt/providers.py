# symcrypt/providers.py
"""
Supported block ciphers and everything that varies per cipher: legal key
sizes, block size, the fixed CBC initialization vector, and how to build the
encrypting/decrypting transform from key bytes.

AES, DES and TripleDES come from `cryptography`. RC2 comes from
`pycryptodome`, because `cryptography` only ships RC2 with a 128-bit key.
"""

from __future__ import annotations
import abc
import enum
from dataclasses import dataclass
from typing import Callable, Dict, Tuple

from cryptography.hazmat.primitives.ciphers import Cipher, algorithms, modes
from cryptography.hazmat.decrepit.ciphers.algorithms import TripleDES
from Crypto.Cipher import ARC2

from .exceptions import ProviderOutOfRangeError

# Constant IVs shared by every instance and message.
FIXED_IV_128 = bytes([
    0x0F, 0x6F, 0x13, 0x2E, 0x35, 0xC2, 0xCD, 0xF9,
    0x05, 0x46, 0x9C, 0xEA, 0xA8, 0x4B, 0x73, 0xCC,
])
FIXED_IV_64 = FIXED_IV_128[:8]


class SymmetricCryptProvider(enum.Enum):
    RIJNDAEL = "rijndael"
    RC2 = "rc2"
    DES = "des"
    TRIPLE_DES = "tripledes"

    @classmethod
    def coerce(cls, value) -> SymmetricCryptProvider:
        """Accept a member, its value or its name; anything else is out of range."""
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            key = value.strip()
            try:
                return cls(key.lower())
            except ValueError:
                pass
            try:
                return cls[key.upper()]
            except KeyError:
                pass
        raise ProviderOutOfRangeError(value)


@dataclass(frozen=True)
class KeySizes:
    """Legal key lengths in bits: min_size..max_size in steps of skip_size."""
    min_size: int
    max_size: int
    skip_size: int

    def is_legal(self, bits: int) -> bool:
        if bits < self.min_size or bits > self.max_size:
            return False
        if self.skip_size == 0:
            return bits == self.min_size
        return (bits - self.min_size) % self.skip_size == 0


class _BlockModeContext:
    """
    update()/finalize() wrapper around a pycryptodome cipher so it reads like a
    `cryptography` CipherContext. Only whole blocks are handed to the cipher.
    """

    def __init__(self, transform: Callable[[bytes], bytes], block_bytes: int):
        self._transform = transform
        self._block_bytes = block_bytes
        self._buffer = b""

    def update(self, data: bytes) -> bytes:
        self._buffer += data
        usable = len(self._buffer) - len(self._buffer) % self._block_bytes
        if not usable:
            return b""
        chunk, self._buffer = self._buffer[:usable], self._buffer[usable:]
        return self._transform(chunk)

    def finalize(self) -> bytes:
        if self._buffer:
            raise ValueError("The length of the provided data is not a multiple of the block length.")
        return b""


class CipherBackend(abc.ABC):
    name: str = ""
    block_size: int = 0  # bits
    legal_key_sizes: Tuple[KeySizes, ...] = ()
    legacy: bool = False

    @property
    def iv(self) -> bytes:
        return FIXED_IV_128 if self.block_size == 128 else FIXED_IV_64

    @abc.abstractmethod
    def encryptor(self, key: bytes, iv: bytes):
        ...

    @abc.abstractmethod
    def decryptor(self, key: bytes, iv: bytes):
        ...


class _CryptographyBackend(CipherBackend):
    @abc.abstractmethod
    def algorithm(self, key: bytes):
        ...

    def _cipher(self, key: bytes, iv: bytes) -> Cipher:
        return Cipher(self.algorithm(key), modes.CBC(iv))

    def encryptor(self, key: bytes, iv: bytes):
        return self._cipher(key, iv).encryptor()

    def decryptor(self, key: bytes, iv: bytes):
        return self._cipher(key, iv).decryptor()


class RijndaelBackend(_CryptographyBackend):
    name = "Rijndael"
    block_size = 128
    legal_key_sizes = (KeySizes(128, 256, 64),)

    def algorithm(self, key: bytes):
        return algorithms.AES(key)


class TripleDESBackend(_CryptographyBackend):
    name = "TripleDES"
    block_size = 64
    legal_key_sizes = (KeySizes(128, 192, 64),)
    legacy = True

    def algorithm(self, key: bytes):
        if len(key) not in (16, 24):
            raise ValueError(f"Invalid key size ({len(key) * 8}) for {self.name}.")
        return TripleDES(key)


class DESBackend(_CryptographyBackend):
    name = "DES"
    block_size = 64
    legal_key_sizes = (KeySizes(64, 64, 0),)
    legacy = True

    def algorithm(self, key: bytes):
        # an 8-byte TripleDES key is K1 == K2 == K3, i.e. single DES
        if len(key) != 8:
            raise ValueError(f"Invalid key size ({len(key) * 8}) for {self.name}.")
        return TripleDES(key)


class RC2Backend(CipherBackend):
    name = "RC2"
    block_size = 64
    legal_key_sizes = (KeySizes(40, 128, 8),)
    legacy = True

    def _cipher(self, key: bytes, iv: bytes):
        # effective key length follows the actual key length
        return ARC2.new(key, ARC2.MODE_CBC, iv=iv, effective_keylen=len(key) * 8)

    def encryptor(self, key: bytes, iv: bytes):
        return _BlockModeContext(self._cipher(key, iv).encrypt, self.block_size // 8)

    def decryptor(self, key: bytes, iv: bytes):
        return _BlockModeContext(self._cipher(key, iv).decrypt, self.block_size // 8)


_BACKENDS: Dict[SymmetricCryptProvider, CipherBackend] = {
    SymmetricCryptProvider.RIJNDAEL: RijndaelBackend(),
    SymmetricCryptProvider.RC2: RC2Backend(),
    SymmetricCryptProvider.DES: DESBackend(),
    SymmetricCryptProvider.TRIPLE_DES: TripleDESBackend(),
}


def backend_for(provider) -> CipherBackend:
    return _BACKENDS[SymmetricCryptProvider.coerce(provider)]


def legal_key_sizes(provider) -> Tuple[KeySizes, ...]:
    return backend_for(provider).legal_key_sizes


def iv_for(provider) -> bytes:
    return backend_for(provider).iv


def encryptor_for(provider, key: bytes, iv: bytes | None = None):
    backend = backend_for(provider)
    return backend.encryptor(key, backend.iv if iv is None else iv)


def decryptor_for(provider, key: bytes, iv: bytes | None = None):
    backend = backend_for(provider)
    return backend.decryptor(key, backend.iv if iv is None else iv)
