"""
Domain node derivation.

A *node* is the 32-byte key under which the naming contract stores a record.
It is a two-level Keccak-256 commitment:

    root = K( K("xlm") || K(domain) )
    sub  = K( K(root)  || K(sub_domain) )

where each ``||`` is a separate ``update()`` on one streaming hasher. Nodes are
rendered as 64 lowercase hex characters without a ``0x`` prefix.

This module performs no validation of domain syntax: any string hashes.
"""

from __future__ import annotations

from typing import Optional, Union

from .utils.hash import Keccak256, keccak256

ROOT_LABEL = "xlm"


def _commit(parent: Union[bytes, str], label: str) -> Keccak256:
    return Keccak256().update(keccak256(parent)).update(keccak256(label))


def root_digest(domain: str) -> bytes:
    """Raw 32-byte node of a top-level domain."""
    return _commit(ROOT_LABEL, domain).digest()


def parse_domain(domain: str, sub_domain: Optional[str] = None) -> str:
    """
    Return the node hex for ``domain`` or, when ``sub_domain`` is given and
    non-empty, for ``sub_domain`` under it.
    """
    root = root_digest(domain)
    if not sub_domain:
        return root.hex()
    return _commit(root, sub_domain).hexdigest()


__all__ = ["ROOT_LABEL", "root_digest", "parse_domain"]
