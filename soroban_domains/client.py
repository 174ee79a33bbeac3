"""
soroban_domains.client
======================

The SDK entry point: resolve domains and read/write per-domain key/value data.

Lookups (``search_domain``, ``get_domain_data``) only *simulate*: they are
built against the configured simulation account, never submitted, and cost
nothing on-chain. Writes (``set_domain_data``, ``remove_domain_data``) stop at
an assembled, unsigned envelope; signing and submission belong to the caller.

Example
-------
    from soroban_domains import SDKConfig, SorobanDomainsSDK, StringValue

    config = SDKConfig(
        rpc_url="https://soroban-testnet.stellar.org",
        simulation_account="GB...",
        vaults_contract_id="CA...",
        values_database_contract_id="CB...",
    )

    async with SorobanDomainsSDK(config) as sdk:
        record = await sdk.search_domain("example")
        prepared = await sdk.set_domain_data(
            node=record.node, key="site", value=StringValue("https://…"), source="GC...",
        )
        prepared.tx.sign(keypair)   # caller's responsibility
"""

from __future__ import annotations

import logging
from typing import Any, Optional, Sequence

from stellar_sdk import scval
from stellar_sdk import xdr as stellar_xdr

from .codec import decode_record, decode_storage_value, encode_node, encode_record_key, encode_storage_value
from .config import SDKConfig
from .node import parse_domain
from .rpc import SorobanRpc, connect
from .tx import build_invoke_tx, raise_for_simulation, simulation_retval
from .types import PreparedTransaction, Record, StorageValue

logger = logging.getLogger(__name__)

__all__ = ["SorobanDomainsSDK"]

_VAULTS = ("vaults_contract_id", "Vault's contract id")
_VALUES_DB = ("values_database_contract_id", "KeyValue Database contract id")


class SorobanDomainsSDK:
    """
    Client bound to an immutable :class:`SDKConfig` and a Soroban RPC handle.

    Parameters
    ----------
    config : contract ids, network passphrase, simulation account, fee/timeout.
    rpc : object implementing :class:`SorobanRpc`. When omitted a
        ``SorobanServerAsync`` for ``config.rpc_url`` is created and owned
        (closed by :meth:`aclose`).

    Instances hold no per-call state, so concurrent calls are safe.
    """

    parse_domain = staticmethod(parse_domain)

    def __init__(self, config: SDKConfig, rpc: Optional[SorobanRpc] = None) -> None:
        self._config = config
        self._owns_rpc = rpc is None
        self._rpc = rpc if rpc is not None else connect(config)

    # ------------------------------------------------------------------ Accessors

    @property
    def config(self) -> SDKConfig:
        return self._config

    @property
    def rpc(self) -> SorobanRpc:
        return self._rpc

    # ------------------------------------------------------------------ Lifecycle

    async def aclose(self) -> None:
        if self._owns_rpc:
            await self._rpc.close()

    async def __aenter__(self) -> "SorobanDomainsSDK":
        return self

    async def __aexit__(self, exc_type, exc, tb) -> None:  # noqa: ANN001
        await self.aclose()

    # ------------------------------------------------------------------ Internals

    async def _simulate(
        self,
        *,
        contract_id: str,
        function_name: str,
        parameters: Sequence[stellar_xdr.SCVal],
        source: str,
    ):
        account = await self._rpc.load_account(source)
        tx = build_invoke_tx(
            account,
            contract_id=contract_id,
            function_name=function_name,
            parameters=parameters,
            network_passphrase=self._config.network_passphrase,
            base_fee=self._config.default_fee,
            timeout=self._config.default_timeout,
        )
        sim = await self._rpc.simulate_transaction(tx)
        raise_for_simulation(sim, function=function_name, contract_id=contract_id)
        return tx, sim

    async def _read(self, contract_id: str, function_name: str, parameters: Sequence[stellar_xdr.SCVal]) -> Any:
        source = self._config.require("simulation_account", "Simulation account")
        _, sim = await self._simulate(
            contract_id=contract_id,
            function_name=function_name,
            parameters=parameters,
            source=source,
        )
        return simulation_retval(sim)

    async def _prepare(
        self,
        contract_id: str,
        function_name: str,
        parameters: Sequence[stellar_xdr.SCVal],
        source: str,
    ) -> PreparedTransaction:
        tx, sim = await self._simulate(
            contract_id=contract_id,
            function_name=function_name,
            parameters=parameters,
            source=source,
        )
        assembled = await self._rpc.prepare_transaction(tx, sim)
        logger.debug("assembled %s on %s for %s", function_name, contract_id, source)
        return PreparedTransaction(tx=assembled, sim=sim)

    # ------------------------------------------------------------------ Domains

    async def search_domain(self, domain: str, sub_domain: Optional[str] = None) -> Record:
        """
        Look up the record of ``domain`` (or of ``sub_domain`` under it).

        Does not validate the domain: any string is hashed into a node.

        Raises
        ------
        ConfigurationMissingError if no vaults contract id is configured.
        SimulationError if the RPC rejects the simulation.
        DomainNotFoundError if nothing is registered under the node.
        """
        contract_id = self._config.require(*_VAULTS)
        node = parse_domain(domain, sub_domain)
        logger.debug("searching domain=%r sub_domain=%r node=%s", domain, sub_domain, node)

        record_key = encode_record_key(node, sub_domain=bool(sub_domain))
        result = await self._read(contract_id, "record", [record_key])
        return decode_record(result, node=node)

    # ------------------------------------------------------------------ Key/value data

    async def get_domain_data(self, node: str, key: str) -> StorageValue:
        """
        Read the value stored under ``(node, key)``.

        Raises DomainDataNotFoundError when nothing is stored.
        """
        contract_id = self._config.require(*_VALUES_DB)
        result = await self._read(contract_id, "get", [encode_node(node), scval.to_symbol(key)])
        return decode_storage_value(result, node=node, key=key)

    async def set_domain_data(self, node: str, key: str, value: Any, source: str) -> PreparedTransaction:
        """
        Build, simulate and assemble an unsigned ``set(node, key, value)`` call
        paid and sequenced by ``source``.

        ``value`` is a storage value variant or a ``(discriminant, payload)``
        pair; unknown discriminants raise UnsupportedValueTypeError before any
        RPC call.
        """
        contract_id = self._config.require(*_VALUES_DB)
        encoded = encode_storage_value(value)
        return await self._prepare(contract_id, "set", [encode_node(node), scval.to_symbol(key), encoded], source)

    async def remove_domain_data(self, node: str, key: str, source: str) -> PreparedTransaction:
        """Build, simulate and assemble an unsigned ``remove(node, key)`` call."""
        contract_id = self._config.require(*_VALUES_DB)
        return await self._prepare(contract_id, "remove", [encode_node(node), scval.to_symbol(key)], source)
