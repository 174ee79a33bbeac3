"""
Transaction plumbing for contract invocations.

Thin wrappers around ``stellar_sdk.TransactionBuilder`` and the simulation
response, so the client reads as a sequence of intent-level steps.

Time bounds
-----------
``TransactionBuilder.set_timeout(n)`` sets ``max_time = now + n``; with ``n == 0``
that is an envelope which expires immediately. A timeout of ``0`` (or ``None``)
is therefore built as explicit unbounded time bounds ``(0, 0)``.
"""

from __future__ import annotations

import logging
from typing import Any, Optional, Sequence

from stellar_sdk import Account, TransactionBuilder, TransactionEnvelope
from stellar_sdk import xdr as stellar_xdr

from .codec import decode_retval
from .errors import SimulationError

logger = logging.getLogger(__name__)

__all__ = ["build_invoke_tx", "raise_for_simulation", "simulation_retval"]


def build_invoke_tx(
    account: Account,
    *,
    contract_id: str,
    function_name: str,
    parameters: Sequence[stellar_xdr.SCVal],
    network_passphrase: str,
    base_fee: int,
    timeout: Optional[int] = 0,
) -> TransactionEnvelope:
    """
    Build an unsigned envelope with a single ``invoke_contract`` operation.
    """
    builder = TransactionBuilder(
        source_account=account,
        network_passphrase=network_passphrase,
        base_fee=int(base_fee),
    )
    if timeout:
        builder.set_timeout(int(timeout))
    else:
        builder.add_time_bounds(0, 0)
    builder.append_invoke_contract_function_op(
        contract_id=contract_id,
        function_name=function_name,
        parameters=list(parameters),
    )
    return builder.build()


def raise_for_simulation(sim: Any, *, function: Optional[str] = None, contract_id: Optional[str] = None) -> None:
    """
    If the simulation response carries an error, raise SimulationError with
    the RPC's message verbatim.
    """
    error = getattr(sim, "error", None)
    if error:
        logger.debug("simulation of %s on %s failed: %s", function, contract_id, error)
        raise SimulationError(str(error), function=function, contract_id=contract_id)


def simulation_retval(sim: Any) -> Any:
    """Native return value of the first host-function result, or None."""
    results = getattr(sim, "results", None) or []
    if not results:
        return None
    return decode_retval(results[0].xdr)
