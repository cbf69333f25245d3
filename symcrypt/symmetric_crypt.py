# symcrypt/symmetric_crypt.py
"""
SymmetricCrypt: passphrase-based CBC encryption to and from Base64 text.

Glues the provider table (cipher, block size, fixed IV), the key deriver and
the Base64 codec together. Encrypt failures raise; decrypt failures come back
as an absent result with no detail.
"""

from __future__ import annotations
import logging
from typing import Optional, Tuple

from cryptography.hazmat.primitives import padding

from .exceptions import FatalTransformError
from .key_derivation import KeyDeriver, normalize_and_derive
from .providers import KeySizes, SymmetricCryptProvider, backend_for
from .results import FAILED, DecryptResult, Ok
from .utils import from_base64, to_base64, to_utf8

logger = logging.getLogger(__name__)


class SymmetricCrypt:
    MODE = "CBC"

    def __init__(
        self,
        provider=SymmetricCryptProvider.RIJNDAEL,
        *,
        iterations: int | None = None,
        hash_name: str | None = None,
    ):
        """
        provider may be a SymmetricCryptProvider, its value or its name.
        Raises ProviderOutOfRangeError for anything else.
        """
        self._provider = SymmetricCryptProvider.coerce(provider)
        self._backend = backend_for(self._provider)
        self._deriver = KeyDeriver(iterations, hash_name)
        self.passphrase: str = ""

        if self._backend.legacy:
            logger.warning("%s is a legacy cipher; keep it for compatibility only", self._backend.name)

    @property
    def provider(self) -> SymmetricCryptProvider:
        return self._provider

    @property
    def mode(self) -> str:
        return self.MODE

    @property
    def block_size(self) -> int:
        return self._backend.block_size

    @property
    def legal_key_sizes(self) -> Tuple[KeySizes, ...]:
        return self._backend.legal_key_sizes

    @property
    def iv(self) -> bytes:
        return self._backend.iv

    def get_key(self) -> bytes:
        """
        Derive the cipher key from the current passphrase. The normalized
        (truncated or '*'-padded) passphrase replaces self.passphrase.
        """
        self.passphrase, key = normalize_and_derive(self.passphrase, self._provider, self._deriver)
        return key

    def encrypt(self, plaintext: str) -> str:
        plain_bytes = to_utf8(plaintext)
        key = self.get_key()
        try:
            encryptor = self._backend.encryptor(key, self.iv)
            padder = padding.PKCS7(self.block_size).padder()
            padded = padder.update(plain_bytes) + padder.finalize()
            cipher_bytes = encryptor.update(padded) + encryptor.finalize()
        except Exception as e:
            raise FatalTransformError(f"{self._backend.name} encryption failed: {e}") from e

        logger.debug("%s: encrypted %d bytes", self._backend.name, len(plain_bytes))
        return to_base64(cipher_bytes)

    def try_decrypt(self, encrypted_text: str) -> DecryptResult:
        try:
            cipher_bytes = from_base64(encrypted_text)
            key = self.get_key()
            decryptor = self._backend.decryptor(key, self.iv)
            padded = decryptor.update(cipher_bytes) + decryptor.finalize()
            unpadder = padding.PKCS7(self.block_size).unpadder()
            plain_bytes = unpadder.update(padded) + unpadder.finalize()
            # read as text: a leading BOM is dropped, invalid sequences become U+FFFD
            plaintext = plain_bytes.decode("utf-8-sig", errors="replace")
        except Exception:
            return FAILED

        logger.debug("%s: decrypted %d bytes", self._backend.name, len(plain_bytes))
        return Ok(plaintext)

    def decrypt(self, encrypted_text: str) -> Optional[str]:
        """Plaintext, or None if the text could not be decrypted for any reason."""
        return self.try_decrypt(encrypted_text).unwrap_or_none()
