from types import SimpleNamespace
from typing import Any, Dict, List, Optional, Tuple

import pytest
from stellar_sdk import Account, Keypair, StrKey, scval
from stellar_sdk import xdr as stellar_xdr

from soroban_domains.config import SDKConfig
from soroban_domains.client import SorobanDomainsSDK


class FakeSorobanRpc:
    """
    In-memory stand-in for SorobanServerAsync.

    Every call is recorded in `calls`. `simulate_transaction` answers with the
    configured `retval` (an SCVal, or None for "no result") or `error`.
    """

    def __init__(self, retval: Optional[stellar_xdr.SCVal] = None, error: Optional[str] = None) -> None:
        self.calls: List[Tuple[Any, ...]] = []
        self.retval = retval
        self.error = error
        self.closed = False

    async def load_account(self, account_id: str) -> Account:
        self.calls.append(("load_account", account_id))
        return Account(account_id, 1)

    async def simulate_transaction(self, transaction_envelope):
        self.calls.append(("simulate_transaction", transaction_envelope))
        results = None
        if self.retval is not None and self.error is None:
            results = [SimpleNamespace(xdr=self.retval.to_xdr(), auth=[])]
        return SimpleNamespace(error=self.error, results=results, min_resource_fee=0, transaction_data=None)

    async def prepare_transaction(self, transaction_envelope, simulate_transaction_response=None):
        self.calls.append(("prepare_transaction", transaction_envelope, simulate_transaction_response))
        return transaction_envelope

    async def close(self) -> None:
        self.closed = True

    def methods(self) -> List[str]:
        return [c[0] for c in self.calls]

    def envelope(self):
        for c in self.calls:
            if c[0] == "simulate_transaction":
                return c[1]
        raise AssertionError("no transaction was simulated")


def invocation(envelope) -> Tuple[bytes, list]:
    """(function name, args) of the single invoke_contract operation."""
    op = envelope.transaction.operations[0]
    invoke = op.host_function.invoke_contract
    return invoke.function_name.sc_symbol, list(invoke.args)


def sc_struct(fields: Dict[str, stellar_xdr.SCVal]) -> stellar_xdr.SCVal:
    entries = [stellar_xdr.SCMapEntry(key=scval.to_symbol(k), val=v) for k, v in sorted(fields.items())]
    return stellar_xdr.SCVal(type=stellar_xdr.SCValType.SCV_MAP, map=stellar_xdr.SCMap(entries))


@pytest.fixture
def simulation_account() -> str:
    return Keypair.random().public_key


@pytest.fixture
def source_account() -> str:
    return Keypair.random().public_key


@pytest.fixture
def vaults_id() -> str:
    return StrKey.encode_contract(b"\x01" * 32)


@pytest.fixture
def values_id() -> str:
    return StrKey.encode_contract(b"\x02" * 32)


@pytest.fixture
def config(simulation_account, vaults_id, values_id) -> SDKConfig:
    return SDKConfig(
        rpc_url="http://127.0.0.1:8000/soroban/rpc",
        simulation_account=simulation_account,
        vaults_contract_id=vaults_id,
        values_database_contract_id=values_id,
        default_fee=100,
    )


@pytest.fixture
def fake_rpc() -> FakeSorobanRpc:
    return FakeSorobanRpc()


@pytest.fixture
def sdk(config, fake_rpc) -> SorobanDomainsSDK:
    return SorobanDomainsSDK(config, rpc=fake_rpc)
