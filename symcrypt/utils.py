# symcrypt/utils.py
import base64
import binascii
import logging
import re

from .config import get_log_level

# whitespace a Base64 reader skips anywhere in the text
_BASE64_WHITESPACE = re.compile(r"[ \t\r\n]")


def to_utf8(text: str) -> bytes:
    """
    UTF-8 bytes of text. Paired surrogates are joined into one code point and
    lone surrogates become U+FFFD instead of raising.
    """
    repaired = text.encode("utf-16-le", "surrogatepass").decode("utf-16-le", "replace")
    return repaired.encode("utf-8")


def to_base64(data: bytes) -> str:
    return base64.b64encode(data).decode("ascii")


def from_base64(text: str) -> bytes:
    """
    Strict standard-alphabet decode. Space, tab, CR and LF are skipped wherever
    they appear; anything else outside the alphabet, or bad padding, raises
    binascii.Error.
    """
    if not isinstance(text, str):
        raise TypeError("from_base64 expects str")
    try:
        return base64.b64decode(_BASE64_WHITESPACE.sub("", text), validate=True)
    except ValueError as e:
        if isinstance(e, binascii.Error):
            raise
        # non-ASCII input surfaces as a plain ValueError
        raise binascii.Error(str(e)) from e


def configure_logging(level: int | None = None) -> logging.Logger:
    """Attach a basic stream handler to the package logger (idempotent)."""
    logger = logging.getLogger("symcrypt")
    logger.setLevel(get_log_level() if level is None else level)
    if not logger.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter("[%(levelname)s] %(name)s: %(message)s"))
        logger.addHandler(handler)
    return logger
