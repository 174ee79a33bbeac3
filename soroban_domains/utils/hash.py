from __future__ import annotations

from typing import Union

from Crypto.Hash import keccak as _keccak

from .bytes import BytesLike, ensure_bytes, to_hex


# --- Keccak-256 (pre-FIPS padding, not NIST SHA3) ------------------------------
# hashlib only ships the FIPS-202 variants, which differ in padding from the
# Keccak-256 used by Soroban contracts. pycryptodome provides the real thing.

def _new_keccak256():
    return _keccak.new(digest_bits=256)


def keccak256(data: Union[BytesLike, str]) -> bytes:
    """Return Keccak-256 digest of *data* (str is hashed as UTF-8)."""
    h = _new_keccak256()
    h.update(ensure_bytes(data))
    return h.digest()


def keccak256_hex(data: Union[BytesLike, str], *, prefix: bool = False) -> str:
    """Return hex string of Keccak-256 digest (unprefixed by default)."""
    return to_hex(keccak256(data), prefix=prefix)


class Keccak256:
    """Streaming Keccak-256 hasher with update()/digest()/hexdigest()."""

    __slots__ = ("_h",)

    def __init__(self) -> None:
        self._h = _new_keccak256()

    def update(self, data: Union[BytesLike, str]) -> "Keccak256":
        self._h.update(ensure_bytes(data))
        return self

    def digest(self) -> bytes:
        return self._h.digest()

    def hexdigest(self, *, prefix: bool = False) -> str:
        return to_hex(self._h.digest(), prefix=prefix)


__all__ = [
    "keccak256",
    "keccak256_hex",
    "Keccak256",
]
