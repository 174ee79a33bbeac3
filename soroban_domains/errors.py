"""
Typed error classes for the Soroban Domains SDK.

Callers can catch a specific failure mode (missing configuration, unknown
domain, unknown key, bad value, failed simulation) or the base
`SorobanDomainsError` for all of them. Errors raised by the RPC transport
itself are not wrapped and propagate unchanged.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Optional

__all__ = [
    "SorobanDomainsError",
    "ConfigurationMissingError",
    "DomainNotFoundError",
    "DomainDataNotFoundError",
    "UnsupportedValueTypeError",
    "SimulationError",
    "CodecError",
]


class SorobanDomainsError(Exception):
    """Base class for all SDK errors."""


@dataclass(slots=True)
class ConfigurationMissingError(SorobanDomainsError):
    """A contract id required by the operation was not configured."""

    option: str
    description: Optional[str] = None

    def __str__(self) -> str:  # pragma: no cover - trivial
        what = self.description or self.option
        return f"{what} was not provided"


class DomainNotFoundError(SorobanDomainsError):
    """The naming contract has no record for the requested node."""

    def __init__(self, node: Optional[str] = None) -> None:
        self.node = node
        super().__init__("The domain you're trying to fetch doesn't exist")


class DomainDataNotFoundError(SorobanDomainsError):
    """The key/value contract has nothing stored under (node, key)."""

    def __init__(self, node: Optional[str] = None, key: Optional[str] = None) -> None:
        self.node = node
        self.key = key
        super().__init__("The data you're trying to fetch doesn't exist")


@dataclass(slots=True)
class UnsupportedValueTypeError(SorobanDomainsError):
    """
    Raised when a storage value carries a discriminant other than
    ``Bytes``, ``Number`` or ``String``.
    """

    value_type: Any = None

    def __str__(self) -> str:  # pragma: no cover - trivial
        return f"Value type {self.value_type!r} is not supported, use Bytes, Number or String"


@dataclass(slots=True)
class SimulationError(SorobanDomainsError):
    """
    Raised when the RPC reports an error while simulating a contract call.

    `str()` is the RPC's message, unmodified.
    """

    message: str
    function: Optional[str] = None
    contract_id: Optional[str] = None

    def __str__(self) -> str:  # pragma: no cover - trivial
        return self.message


@dataclass(slots=True)
class CodecError(SorobanDomainsError):
    """
    Raised when a value cannot be encoded for, or decoded from, a contract.

    Typical causes: payload of the wrong Python type, an integer outside the
    i128 range, or a record response missing fields.
    """

    message: str
    field: Optional[str] = None

    def __str__(self) -> str:  # pragma: no cover - trivial
        where = f" [field={self.field}]" if self.field else ""
        return f"CodecError{where}: {self.message}"
