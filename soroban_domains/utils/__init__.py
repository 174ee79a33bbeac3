"""
Small helpers shared across the SDK: hex conversion and Keccak-256 hashing.
"""

from .bytes import BytesLike, ensure_bytes, from_hex, to_hex  # noqa: F401
from .hash import Keccak256, keccak256, keccak256_hex  # noqa: F401

__all__ = [
    "BytesLike",
    "ensure_bytes",
    "from_hex",
    "to_hex",
    "Keccak256",
    "keccak256",
    "keccak256_hex",
]
