"""Click CLI: networks, resolve, verify-registry, config, bootstrap."""

from __future__ import annotations

import asyncio
import logging

import click

from chaindeploy.errors import ChainDeployError


@click.group()
@click.version_option(version="1.0.0")
@click.option("-v", "--verbose", is_flag=True, help="Enable debug logging")
def cli(verbose: bool):
    """chaindeploy - Multi-chain deployment config and deterministic factory resolver."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.INFO,
        format="%(asctime)s [%(name)s] %(levelname)s: %(message)s",
    )


@cli.command()
def networks():
    """List configured networks and whether they have a factory bootstrap record."""
    from chaindeploy.bootstrap.registry import lookup
    from chaindeploy.chain.registry import available_networks
    from chaindeploy.config import get_settings

    for name, spec in available_networks(get_settings()).items():
        chain_id = "?" if spec.chain_id is None else str(spec.chain_id)
        bootstrap = "yes" if spec.chain_id is not None and lookup(spec.chain_id) else "no"
        click.echo(f"{name:<20} chain_id={chain_id:<8} bootstrap={bootstrap}")


@cli.command()
@click.option("--chain", "chain", required=True, help="Network name or chain ID (smartbch, 10000, ...)")
def resolve(chain: str):
    """Print the singleton factory bootstrap descriptor for a chain."""
    from chaindeploy.bootstrap.resolver import resolve as resolve_descriptor
    from chaindeploy.chain.registry import resolve_network
    from chaindeploy.config import get_settings

    try:
        if chain.isdigit():
            chain_id = int(chain)
        else:
            chain_id = resolve_network(chain, get_settings()).chain_id
        descriptor = resolve_descriptor(chain_id) if chain_id is not None else None
    except ChainDeployError as e:
        raise click.ClickException(str(e)) from e

    if descriptor is None:
        click.echo(f"No deterministic bootstrap for chain {chain}; use default contract creation.")
        return
    click.echo(descriptor.model_dump_json(indent=2))


@cli.command("verify-registry")
def verify_registry():
    """Decode every bootstrap record and check it against its declared fields."""
    from chaindeploy.bootstrap.resolver import verify_registry as verify_all

    try:
        chain_ids = verify_all()
    except ChainDeployError as e:
        raise click.ClickException(str(e)) from e
    click.echo(f"Verified {len(chain_ids)} bootstrap records: {', '.join(map(str, chain_ids))}")


@cli.command()
@click.option("--network", default="hardhat", help="Network name")
@click.option("--deterministic/--no-deterministic", default=None, help="Override CUSTOM_DETERMINISTIC_DEPLOYMENT")
def config(network: str, deterministic: bool | None):
    """Print the merged config for one network. Secrets are masked."""
    from chaindeploy.config import get_settings
    from chaindeploy.deployment import DefaultCreation, DeterministicFactory, network_config

    settings = get_settings()
    strategy = None
    if deterministic is not None:
        strategy = DeterministicFactory() if deterministic else DefaultCreation()

    try:
        cfg = network_config(network, settings, strategy)
    except ChainDeployError as e:
        raise click.ClickException(str(e)) from e
    click.echo(cfg.model_dump_json(indent=2))


@cli.command()
@click.option("--network", required=True, help="Network name")
@click.option("--broadcast", is_flag=True, default=False, help="Send the pre-signed bootstrap transaction")
def bootstrap(network: str, broadcast: bool):
    """Check the singleton factory on a live network, optionally broadcasting its bootstrap."""
    from chaindeploy.chain.provider import ChainProvider
    from chaindeploy.config import get_settings
    from chaindeploy.deployment import DeterministicFactory, network_config

    try:
        cfg = network_config(network, get_settings(), DeterministicFactory())
        descriptor = cfg.deterministic_deployment
        if descriptor is None:
            click.echo(f"No deterministic bootstrap for {network}; use default contract creation.")
            return
        provider = ChainProvider.from_network(cfg)
    except ChainDeployError as e:
        raise click.ClickException(str(e)) from e

    async def _bootstrap():
        served_chain_id = await provider.get_chain_id()
        if served_chain_id != cfg.chain_id:
            raise click.ClickException(
                f"RPC endpoint for {network} serves chain_id={served_chain_id}, expected {cfg.chain_id}"
            )
        if await provider.is_factory_deployed(descriptor):
            click.echo(f"Factory already deployed at {descriptor.factory_address} on {network}.")
            return
        shortfall = await provider.funding_shortfall(descriptor)
        if shortfall > 0:
            click.echo(f"Deployer {descriptor.deployer_address} needs {shortfall} more wei before bootstrap.")
            return
        if not broadcast:
            click.echo(f"Deployer funded. Re-run with --broadcast to deploy {descriptor.factory_address}.")
            return
        tx_hash = await provider.broadcast_bootstrap(descriptor)
        click.echo(f"Broadcast bootstrap transaction {tx_hash}")

    asyncio.run(_bootstrap())


if __name__ == "__main__":
    cli()
