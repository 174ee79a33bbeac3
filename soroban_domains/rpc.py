"""
The RPC collaborator.

The SDK only needs three calls from a Soroban RPC client, all awaitable:

- ``load_account(account_id)``               -> ``stellar_sdk.Account``
- ``simulate_transaction(envelope)``         -> ``SimulateTransactionResponse``
- ``prepare_transaction(envelope, sim)``     -> assembled ``TransactionEnvelope``

``stellar_sdk.SorobanServerAsync`` satisfies this protocol. Tests and callers
with their own transport can pass any object that does.
"""

from __future__ import annotations

from typing import Any, Optional, Protocol, runtime_checkable

from stellar_sdk import Account, SorobanServerAsync, TransactionEnvelope

from .config import SDKConfig

__all__ = ["SorobanRpc", "connect"]


@runtime_checkable
class SorobanRpc(Protocol):
    async def load_account(self, account_id: str) -> Account: ...

    async def simulate_transaction(self, transaction_envelope: TransactionEnvelope) -> Any: ...

    async def prepare_transaction(
        self,
        transaction_envelope: TransactionEnvelope,
        simulate_transaction_response: Optional[Any] = None,
    ) -> TransactionEnvelope: ...


def connect(config: SDKConfig) -> SorobanServerAsync:
    """Create the default async RPC client for ``config.rpc_url``."""
    return SorobanServerAsync(config.rpc_url)
