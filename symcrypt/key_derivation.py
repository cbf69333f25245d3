# symcrypt/key_derivation.py
"""
Passphrase -> cipher key.

The passphrase is first length-normalized against the cipher's legal key
sizes (truncated, or right-padded with '*'), then stretched with PBKDF2 and
an empty salt. The number of key bytes requested is the character count of
the normalized passphrase, not a size picked from the legal table, so a
passphrase between two step boundaries yields a key one step longer.
"""

from __future__ import annotations
import logging
from typing import Sequence, Tuple

from cryptography.hazmat.primitives.kdf.pbkdf2 import PBKDF2HMAC

from . import config
from .exceptions import ConfigurationError
from .providers import KeySizes, legal_key_sizes
from .utils import to_utf8

logger = logging.getLogger(__name__)

PAD_CHAR = "*"
EMPTY_SALT = b""


def normalize(passphrase: str, legal_sizes: Sequence[KeySizes]) -> str:
    if not legal_sizes:
        return passphrase

    sizes = legal_sizes[0]
    key_bits = len(passphrase) * 8

    if key_bits > sizes.max_size:
        return passphrase[: sizes.max_size // 8]

    if key_bits < sizes.max_size:
        if key_bits <= sizes.min_size:
            valid_bits = sizes.min_size
        else:
            valid_bits = key_bits - (key_bits % sizes.skip_size) + sizes.skip_size
        if key_bits < valid_bits:
            return passphrase.ljust(valid_bits // 8, PAD_CHAR)

    return passphrase


class KeyDeriver:
    def __init__(self, iterations: int | None = None, hash_name: str | None = None):
        self.iterations = config.get_kdf_iterations() if iterations is None else iterations
        self.hash_name = config.get_kdf_hash() if hash_name is None else hash_name
        if self.iterations < 1:
            raise ConfigurationError(f"KDF iterations must be positive, got {self.iterations}")
        # resolve now so a bad name fails at construction
        config.hash_algorithm(self.hash_name)

    def derive_key(self, passphrase: str, length: int) -> bytes:
        kdf = PBKDF2HMAC(
            algorithm=config.hash_algorithm(self.hash_name),
            length=length,
            salt=EMPTY_SALT,
            iterations=self.iterations,
        )
        return kdf.derive(to_utf8(passphrase))


def derive_key(normalized: str, iterations: int | None = None, hash_name: str | None = None) -> bytes:
    return KeyDeriver(iterations, hash_name).derive_key(normalized, len(normalized))


def normalize_and_derive(
    passphrase: str,
    provider,
    deriver: KeyDeriver | None = None,
) -> Tuple[str, bytes]:
    """
    Returns (normalized_passphrase, key). The caller decides whether to keep
    the normalized passphrase.
    """
    normalized = normalize(passphrase, legal_key_sizes(provider))
    if len(normalized) != len(passphrase):
        logger.debug(
            "Passphrase length normalized from %d to %d characters",
            len(passphrase), len(normalized),
        )
    deriver = deriver or KeyDeriver()
    return normalized, deriver.derive_key(normalized, len(normalized))
