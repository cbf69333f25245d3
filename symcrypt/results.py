# symcrypt/results.py
"""
Outcome of a decrypt. Failure carries no detail: a caller only learns that the
text could not be decrypted, never why.
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import Optional, Union


@dataclass(frozen=True)
class Ok:
    plaintext: str

    @property
    def ok(self) -> bool:
        return True

    def unwrap_or_none(self) -> Optional[str]:
        return self.plaintext


class Failed:
    _instance = None

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    @property
    def ok(self) -> bool:
        return False

    def unwrap_or_none(self) -> Optional[str]:
        return None

    def __repr__(self):
        return "FAILED"


FAILED = Failed()

DecryptResult = Union[Ok, Failed]
