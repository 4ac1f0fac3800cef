from __future__ import annotations
import hashlib
from typing import Protocol

KEY_BYTES = 24


class Hasher(Protocol):
    def digest(self, data: bytes) -> bytes: ...


class Sha256Hasher:
    def digest(self, data: bytes) -> bytes:
        return hashlib.sha256(data).digest()


def truncated_hex(digest: bytes, key_bytes: int = KEY_BYTES) -> str:
    """Lowercase hex of the first ``key_bytes`` bytes of ``digest``."""
    return digest[:key_bytes].hex()
