"""
SDK configuration: RPC endpoint, network, contract ids and fee/timeout defaults.

- Immutable once built; the client never adds or mutates fields.
- Loads defaults and supports overrides via environment variables
  (SOROBAN_DOMAINS_*).
- Contract ids are optional here; each operation checks for the one it needs.
"""

from __future__ import annotations

import os
from dataclasses import asdict, dataclass, field, replace
from typing import Any, Dict, Optional

from stellar_sdk import Network

from .errors import ConfigurationMissingError

_DEFAULT_RPC = "https://soroban-testnet.stellar.org"
_DEFAULT_FEE = 100


def _env(name: str, default: Optional[str] = None) -> Optional[str]:
    v = os.getenv(name)
    return v if v is not None and v != "" else default


def _ensure_scheme(url: Optional[str], allowed: tuple[str, ...]) -> Optional[str]:
    if not url:
        return url
    lower = url.lower()
    if not any(lower.startswith(f"{sch}://") for sch in allowed):
        raise ValueError(f"URL must start with {allowed}, got: {url!r}")
    return url


@dataclass(frozen=True, slots=True)
class SDKConfig:
    # Network
    rpc_url: str = field(default_factory=lambda: _DEFAULT_RPC)
    network_passphrase: str = Network.TESTNET_NETWORK_PASSPHRASE
    # Throwaway account used only to sequence read-only simulations
    simulation_account: Optional[str] = None
    # Contracts
    vaults_contract_id: Optional[str] = None
    values_database_contract_id: Optional[str] = None
    # Transaction defaults
    default_fee: int = _DEFAULT_FEE
    default_timeout: int = 0

    def __post_init__(self) -> None:
        _ensure_scheme(self.rpc_url, ("http", "https"))
        if int(self.default_fee) < 0:
            raise ValueError("default_fee must be non-negative")
        if int(self.default_timeout) < 0:
            raise ValueError("default_timeout must be non-negative")

    @classmethod
    def from_env(cls, prefix: str = "SOROBAN_DOMAINS_") -> "SDKConfig":
        """
        Create config from environment variables:

        SOROBAN_DOMAINS_RPC_URL                       (http/https)
        SOROBAN_DOMAINS_NETWORK_PASSPHRASE            (str)
        SOROBAN_DOMAINS_SIMULATION_ACCOUNT            (G... strkey)
        SOROBAN_DOMAINS_VAULTS_CONTRACT_ID            (C... strkey)
        SOROBAN_DOMAINS_VALUES_DATABASE_CONTRACT_ID   (C... strkey)
        SOROBAN_DOMAINS_DEFAULT_FEE                   (int, stroops)
        SOROBAN_DOMAINS_DEFAULT_TIMEOUT               (int seconds, 0 = unbounded)
        """
        return cls(
            rpc_url=_env(f"{prefix}RPC_URL", _DEFAULT_RPC) or _DEFAULT_RPC,
            network_passphrase=_env(f"{prefix}NETWORK_PASSPHRASE", Network.TESTNET_NETWORK_PASSPHRASE)
            or Network.TESTNET_NETWORK_PASSPHRASE,
            simulation_account=_env(f"{prefix}SIMULATION_ACCOUNT"),
            vaults_contract_id=_env(f"{prefix}VAULTS_CONTRACT_ID"),
            values_database_contract_id=_env(f"{prefix}VALUES_DATABASE_CONTRACT_ID"),
            default_fee=int(_env(f"{prefix}DEFAULT_FEE", str(_DEFAULT_FEE)) or _DEFAULT_FEE),
            default_timeout=int(_env(f"{prefix}DEFAULT_TIMEOUT", "0") or 0),
        )

    @classmethod
    def with_overrides(cls, base: Optional["SDKConfig"] = None, **overrides: Any) -> "SDKConfig":
        """
        Build from an existing config plus keyword overrides.
        Unknown keys and ``None`` values are ignored.
        """
        base = base or cls.from_env()
        known = base.to_dict()
        return replace(base, **{k: v for k, v in overrides.items() if k in known and v is not None})

    def require(self, option: str, description: Optional[str] = None) -> str:
        """Return the value of ``option`` or raise ConfigurationMissingError."""
        value = getattr(self, option)
        if not value:
            raise ConfigurationMissingError(option, description)
        return value

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


__all__ = ["SDKConfig"]
