"""
soroban_domains.cli.main
========================

`soroban-domains` — resolve domains and manage per-domain data from a shell.

Examples
--------
    $ soroban-domains node example
    $ soroban-domains resolve example --sub pay
    $ soroban-domains get dc75a4bc…9eca site
    $ soroban-domains set dc75a4bc…9eca site --type String --value https://x.y --source GC…
    $ soroban-domains remove dc75a4bc…9eca site --source GC…

`set` and `remove` print the assembled, *unsigned* envelope XDR; sign and
submit it with your wallet.

Configuration
-------------
Every option falls back to its SOROBAN_DOMAINS_* environment variable (see
:class:`soroban_domains.config.SDKConfig`).
"""

from __future__ import annotations

import asyncio
import json
import logging
import sys
from typing import Any, Awaitable, Callable, Optional

import typer

from ..client import SorobanDomainsSDK
from ..config import SDKConfig
from ..errors import SorobanDomainsError
from ..node import parse_domain
from ..utils.bytes import from_hex
from ..version import __version__ as SDK_VERSION

logger = logging.getLogger(__name__)

app = typer.Typer(
    name="soroban-domains",
    help="Soroban Domains CLI — resolve domains and manage their key/value data.",
    no_args_is_help=True,
    add_completion=False,
)

__all__ = ["app", "main"]


def _print_json(obj: Any) -> None:
    typer.echo(json.dumps(obj, indent=2, ensure_ascii=False))


@app.callback()
def _root(
    ctx: typer.Context,
    rpc: Optional[str] = typer.Option(None, "--rpc", help="Soroban RPC URL.", envvar="SOROBAN_DOMAINS_RPC_URL"),
    network: Optional[str] = typer.Option(
        None, "--network-passphrase", help="Network passphrase.", envvar="SOROBAN_DOMAINS_NETWORK_PASSPHRASE"
    ),
    simulation_account: Optional[str] = typer.Option(
        None, "--simulation-account", help="Account used to simulate lookups.", envvar="SOROBAN_DOMAINS_SIMULATION_ACCOUNT"
    ),
    vaults: Optional[str] = typer.Option(
        None, "--vaults-contract", help="Naming (vaults) contract id.", envvar="SOROBAN_DOMAINS_VAULTS_CONTRACT_ID"
    ),
    values_db: Optional[str] = typer.Option(
        None,
        "--values-contract",
        help="Key/value database contract id.",
        envvar="SOROBAN_DOMAINS_VALUES_DATABASE_CONTRACT_ID",
    ),
    fee: Optional[int] = typer.Option(None, "--fee", help="Base fee in stroops.", envvar="SOROBAN_DOMAINS_DEFAULT_FEE"),
    timeout: Optional[int] = typer.Option(
        None, "--timeout", help="Transaction validity in seconds (0 = unbounded).", envvar="SOROBAN_DOMAINS_DEFAULT_TIMEOUT"
    ),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging."),
) -> None:
    """
    Build the effective configuration for this CLI process.
    """
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    ctx.obj = SDKConfig.with_overrides(
        SDKConfig.from_env(),
        rpc_url=rpc,
        network_passphrase=network,
        simulation_account=simulation_account,
        vaults_contract_id=vaults,
        values_database_contract_id=values_db,
        default_fee=fee,
        default_timeout=timeout,
    )


def _sdk(ctx: typer.Context) -> SorobanDomainsSDK:
    return SorobanDomainsSDK(ctx.obj)


def _run(ctx: typer.Context, op: Callable[[SorobanDomainsSDK], Awaitable[Any]]) -> Any:
    """Run one SDK operation; SDK errors become a message and exit code 1."""

    async def _go() -> Any:
        async with _sdk(ctx) as sdk:
            return await op(sdk)

    try:
        return asyncio.run(_go())
    except SorobanDomainsError as e:
        typer.secho(f"error: {e}", fg=typer.colors.RED, err=True)
        raise typer.Exit(code=1)


def _parse_value(value_type: str, raw: str) -> Any:
    if value_type == "Number":
        try:
            return (value_type, int(raw, 0))
        except ValueError as e:
            raise typer.BadParameter(f"not an integer: {raw!r}") from e
    if value_type == "Bytes":
        try:
            return (value_type, from_hex(raw))
        except ValueError as e:
            raise typer.BadParameter(str(e)) from e
    # String and unknown types go to the SDK as-is
    return (value_type, raw)


# --- Commands -----------------------------------------------------------------


@app.command("version")
def version() -> None:
    """Print the SDK CLI version."""
    typer.echo(f"soroban-domains {SDK_VERSION}")


@app.command("env")
def env(ctx: typer.Context) -> None:
    """Show the effective configuration."""
    _print_json(ctx.obj.to_dict())


@app.command("node")
def node(
    domain: str = typer.Argument(..., help="Domain name, without the root label."),
    sub: Optional[str] = typer.Option(None, "--sub", "-s", help="Sub-domain label."),
) -> None:
    """Print the node (hex) of a domain or sub-domain. Works offline."""
    typer.echo(parse_domain(domain, sub))


@app.command("resolve")
def resolve(
    ctx: typer.Context,
    domain: str = typer.Argument(..., help="Domain name, without the root label."),
    sub: Optional[str] = typer.Option(None, "--sub", "-s", help="Sub-domain label."),
) -> None:
    """Look up a domain or sub-domain record."""
    record = _run(ctx, lambda sdk: sdk.search_domain(domain, sub))
    _print_json(record.to_dict())


@app.command("get")
def get(
    ctx: typer.Context,
    node_hex: str = typer.Argument(..., metavar="NODE", help="Domain node (hex)."),
    key: str = typer.Argument(..., help="Storage key (symbol)."),
) -> None:
    """Read the value stored under (NODE, KEY)."""
    value = _run(ctx, lambda sdk: sdk.get_domain_data(node_hex, key))
    _print_json(value.to_json())


@app.command("set")
def set_(
    ctx: typer.Context,
    node_hex: str = typer.Argument(..., metavar="NODE", help="Domain node (hex)."),
    key: str = typer.Argument(..., help="Storage key (symbol)."),
    value_type: str = typer.Option(..., "--type", "-t", help="Bytes, Number or String."),
    value: str = typer.Option(..., "--value", help="Value; hex for Bytes, integer for Number."),
    source: str = typer.Option(..., "--source", help="Account that will sign and pay."),
) -> None:
    """Print the unsigned envelope XDR that stores VALUE under (NODE, KEY)."""
    parsed = _parse_value(value_type, value)
    prepared = _run(ctx, lambda sdk: sdk.set_domain_data(node_hex, key, parsed, source))
    typer.echo(prepared.to_xdr())


@app.command("remove")
def remove(
    ctx: typer.Context,
    node_hex: str = typer.Argument(..., metavar="NODE", help="Domain node (hex)."),
    key: str = typer.Argument(..., help="Storage key (symbol)."),
    source: str = typer.Option(..., "--source", help="Account that will sign and pay."),
) -> None:
    """Print the unsigned envelope XDR that removes (NODE, KEY)."""
    prepared = _run(ctx, lambda sdk: sdk.remove_domain_data(node_hex, key, source))
    typer.echo(prepared.to_xdr())


# --- Entrypoint ---------------------------------------------------------------


def main(argv: Optional[list[str]] = None) -> int:
    """
    Run the CLI. Returns an integer exit code.
    """
    try:
        rv = app(prog_name="soroban-domains", standalone_mode=False, args=argv)
        # click hands back typer.Exit codes instead of raising when not standalone
        return rv if isinstance(rv, int) else 0
    except typer.Exit as e:
        return int(e.exit_code)
    except Exception as e:
        logger.debug("unhandled CLI error", exc_info=True)
        typer.echo(f"error: {e}", err=True)
        return 1


if __name__ == "__main__":  # pragma: no cover
    sys.exit(main())
