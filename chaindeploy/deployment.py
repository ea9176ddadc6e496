"""Deployment strategy selection and per-network config merging.

The deterministic deployment toggle is decided here, once, by picking a strategy.
The resolver itself never looks at settings.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from typing import Protocol

from chaindeploy.bootstrap.resolver import resolve
from chaindeploy.chain.registry import LOCAL_NETWORK, get_network, require_credentials
from chaindeploy.config import Settings, get_settings
from chaindeploy.models.schema import DeploymentDescriptor, NetworkUserConfig

logger = logging.getLogger(__name__)


class DeploymentStrategy(Protocol):
    name: str

    def factory_for(self, chain_id: int) -> DeploymentDescriptor | None: ...


class DefaultCreation:
    """Ordinary, nonce-based contract creation. Never supplies a factory."""

    name = "default"

    def factory_for(self, chain_id: int) -> DeploymentDescriptor | None:
        return None


class DeterministicFactory:
    """Replay the pre-signed singleton factory bootstrap where the chain has a record."""

    name = "deterministic"

    def __init__(self, resolver: Callable[[int], DeploymentDescriptor | None] = resolve):
        self._resolve = resolver

    def factory_for(self, chain_id: int) -> DeploymentDescriptor | None:
        return self._resolve(chain_id)


def select_strategy(settings: Settings | None = None) -> DeploymentStrategy:
    settings = settings or get_settings()
    if settings.custom_deterministic_deployment:
        return DeterministicFactory()
    return DefaultCreation()


def network_config(
    name: str,
    settings: Settings | None = None,
    strategy: DeploymentStrategy | None = None,
    enforce_credentials: bool = True,
) -> NetworkUserConfig:
    """Merge a network's URL, shared accounts, overrides and factory descriptor."""
    settings = settings or get_settings()
    strategy = strategy or select_strategy(settings)
    spec = get_network(name, settings)
    if enforce_credentials:
        require_credentials(spec, settings)

    descriptor = None
    if spec.chain_id is not None:
        descriptor = strategy.factory_for(spec.chain_id)
    if strategy.name != DefaultCreation.name and descriptor is None:
        logger.info(f"No singleton factory bootstrap for {name}, using default contract creation")

    return NetworkUserConfig(
        name=spec.name,
        chain_id=spec.chain_id,
        url=spec.render_url(settings.infura_key),
        # The in-process network manages its own funded accounts
        accounts=None if spec.name == LOCAL_NETWORK else settings.shared_accounts(),
        is_poa=spec.is_poa,
        overrides=dict(spec.overrides),
        strategy=strategy.name if descriptor is not None else DefaultCreation.name,
        deterministic_deployment=descriptor,
    )
