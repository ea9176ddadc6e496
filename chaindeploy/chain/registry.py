"""Network table mapping network names to chain_id, RPC URL and per-network overrides."""

from dataclasses import dataclass, field
from typing import Any

from chaindeploy.config import Settings
from chaindeploy.errors import MissingCredentialsError, UnknownNetworkError

LOCAL_NETWORK = "hardhat"
CUSTOM_NETWORK = "custom"


@dataclass(frozen=True)
class NetworkSpec:
    name: str
    chain_id: int | None
    url: str | None  # may reference {infura_key}; None for the in-process network
    requires_infura: bool = False
    is_poa: bool = False
    overrides: dict[str, Any] = field(default_factory=dict)

    def render_url(self, infura_key: str) -> str | None:
        if self.url is None:
            return None
        return self.url.format(infura_key=infura_key)


NETWORKS: dict[str, NetworkSpec] = {
    spec.name: spec
    for spec in (
        NetworkSpec(
            LOCAL_NETWORK,
            31337,
            None,
            overrides={"allowUnlimitedContractSize": True, "blockGasLimit": 100_000_000, "gas": 100_000_000},
        ),
        NetworkSpec("mainnet", 1, "https://mainnet.infura.io/v3/{infura_key}", requires_infura=True),
        NetworkSpec("xdai", 100, "https://xdai.poanetwork.dev"),
        NetworkSpec("ewc", 246, "https://rpc.energyweb.org"),
        NetworkSpec("rinkeby", 4, "https://rinkeby.infura.io/v3/{infura_key}", requires_infura=True, is_poa=True),
        NetworkSpec("goerli", 5, "https://goerli.infura.io/v3/{infura_key}", requires_infura=True, is_poa=True),
        NetworkSpec("kovan", 42, "https://kovan.infura.io/v3/{infura_key}", requires_infura=True),
        # Infura URL, but the original toolchain never required the key for polygon
        NetworkSpec("polygon", 137, "https://polygon-mainnet.infura.io/v3/{infura_key}", is_poa=True),
        NetworkSpec("volta", 73799, "https://volta-rpc.energyweb.org"),
        NetworkSpec("bsc", 56, "https://bsc-dataseed.binance.org/", is_poa=True),
        NetworkSpec("arbitrum", 42161, "https://arb1.arbitrum.io/rpc"),
        NetworkSpec("fantomTestnet", 4002, "https://rpc.testnet.fantom.network/"),
        NetworkSpec("smartbch", 10000, "https://smartbch.fountainhead.cash/mainnet"),
        NetworkSpec("smartbch-amber", 10001, "http://moeing.tech:8545"),
        NetworkSpec(
            "dogechain",
            2000,
            "https://rpc.dogechain.dog",
            is_poa=True,
            overrides={"live": True, "saveDeployments": True, "gasPrice": 50_000_000_000},
        ),
        NetworkSpec("dogechain-testnet", 568, "https://rpc-testnet.dogechain.dog", is_poa=True),
    )
}


def available_networks(settings: Settings) -> dict[str, NetworkSpec]:
    """Static table plus the `custom` network when NODE_URL is set."""
    networks = dict(NETWORKS)
    if settings.node_url:
        networks[CUSTOM_NETWORK] = NetworkSpec(CUSTOM_NETWORK, None, settings.node_url)
    return networks


def get_network(name: str, settings: Settings) -> NetworkSpec:
    networks = available_networks(settings)
    if name not in networks:
        raise UnknownNetworkError(f"Unknown network '{name}'. Supported: {list(networks.keys())}")
    return networks[name]


def resolve_network(name_or_id: str | int, settings: Settings) -> NetworkSpec:
    """Resolve a network name or chain ID to its spec."""
    if isinstance(name_or_id, str) and not name_or_id.isdigit():
        return get_network(name_or_id, settings)
    chain_id = int(name_or_id)
    for spec in available_networks(settings).values():
        if spec.chain_id == chain_id:
            return spec
    raise UnknownNetworkError(f"Unknown chain_id={chain_id}. Supported: {sorted(s.chain_id for s in NETWORKS.values())}")


def require_credentials(spec: NetworkSpec, settings: Settings) -> None:
    if spec.requires_infura and not settings.infura_key:
        raise MissingCredentialsError(f"Could not find Infura key in env, unable to connect to network {spec.name}")
