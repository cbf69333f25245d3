# symcrypt/config.py
import os
import logging
from dotenv import load_dotenv
from cryptography.hazmat.primitives import hashes

from .exceptions import ConfigurationError

load_dotenv()

DEFAULT_KDF_ITERATIONS = 100
DEFAULT_KDF_HASH = "sha1"
DEFAULT_LOG_LEVEL = "WARNING"

KDF_HASHES = {
    "md5": hashes.MD5,
    "sha1": hashes.SHA1,
    "sha256": hashes.SHA256,
    "sha384": hashes.SHA384,
    "sha512": hashes.SHA512,
}


def get_kdf_iterations() -> int:
    raw = os.getenv("SYMCRYPT_KDF_ITERATIONS", str(DEFAULT_KDF_ITERATIONS))
    try:
        iterations = int(raw)
    except ValueError:
        raise ConfigurationError(f"SYMCRYPT_KDF_ITERATIONS must be an integer, got {raw!r}")
    if iterations < 1:
        raise ConfigurationError(f"SYMCRYPT_KDF_ITERATIONS must be positive, got {iterations}")
    return iterations


def get_kdf_hash() -> str:
    name = os.getenv("SYMCRYPT_KDF_HASH", DEFAULT_KDF_HASH).strip().lower()
    if name not in KDF_HASHES:
        raise ConfigurationError(
            f"SYMCRYPT_KDF_HASH must be one of {sorted(KDF_HASHES)}, got {name!r}"
        )
    return name


def get_log_level() -> int:
    name = os.getenv("SYMCRYPT_LOG_LEVEL", DEFAULT_LOG_LEVEL).strip().upper()
    level = logging.getLevelName(name)
    if not isinstance(level, int):
        raise ConfigurationError(f"SYMCRYPT_LOG_LEVEL is not a logging level: {name!r}")
    return level


def hash_algorithm(name: str) -> hashes.HashAlgorithm:
    try:
        return KDF_HASHES[name.lower()]()
    except KeyError:
        raise ConfigurationError(f"Unsupported KDF hash: {name!r}")
