"""Whole-project config: compilers, paths, named accounts and every network."""

from __future__ import annotations

import logging

from chaindeploy.chain.registry import LOCAL_NETWORK, available_networks, get_network, require_credentials
from chaindeploy.config import Settings, get_settings
from chaindeploy.deployment import DeploymentStrategy, network_config, select_strategy
from chaindeploy.models.schema import CompilerConfig, ProjectConfig

logger = logging.getLogger(__name__)

DEFAULT_SOLIDITY_VERSION = "0.7.6"
# Kept for contracts that still pin older pragmas
LEGACY_SOLIDITY_VERSIONS = ("0.6.12", "0.5.17")


def compiler_configs(settings: Settings | None = None) -> list[CompilerConfig]:
    settings = settings or get_settings()
    primary = CompilerConfig(
        version=settings.solidity_version or DEFAULT_SOLIDITY_VERSION,
        settings=settings.solidity_settings,
    )
    return [primary, *(CompilerConfig(version=v) for v in LEGACY_SOLIDITY_VERSIONS)]


def build_project_config(
    settings: Settings | None = None,
    active_network: str = LOCAL_NETWORK,
    strategy: DeploymentStrategy | None = None,
) -> ProjectConfig:
    """
    Render the full project config.

    Only the active network has its credentials enforced; the others are rendered as-is
    so that listing or inspecting them never needs every provider key.
    """
    settings = settings or get_settings()
    strategy = strategy or select_strategy(settings)
    require_credentials(get_network(active_network, settings), settings)
    logger.info(f"Building project config for network={active_network} with strategy={strategy.name}")

    networks = {
        name: network_config(name, settings, strategy, enforce_credentials=False)
        for name in available_networks(settings)
    }

    return ProjectConfig(
        compilers=compiler_configs(settings),
        networks=networks,
        default_network=active_network,
        etherscan_api_key=settings.etherscan_api_key or None,
    )
