"""Async EVM chain provider using web3.py 7.x. Checks and broadcasts factory bootstraps."""

from __future__ import annotations

from web3 import AsyncWeb3, AsyncHTTPProvider
from web3.middleware import ExtraDataToPOAMiddleware

from chaindeploy.errors import MissingCredentialsError
from chaindeploy.models.schema import DeploymentDescriptor, NetworkUserConfig


class ChainProvider:
    """Async web3 provider for any EVM chain. Never signs; only replays pre-signed bytes."""

    def __init__(self, rpc_url: str, is_poa: bool = False, w3: AsyncWeb3 | None = None):
        self.rpc_url = rpc_url
        self.w3 = w3 or AsyncWeb3(AsyncHTTPProvider(rpc_url))
        if is_poa:
            self.w3.middleware_onion.inject(ExtraDataToPOAMiddleware, layer=0)

    @classmethod
    def from_network(cls, network: NetworkUserConfig) -> ChainProvider:
        if not network.url:
            raise MissingCredentialsError(f"Network {network.name} has no RPC URL")
        return cls(network.url, is_poa=network.is_poa)

    async def get_chain_id(self) -> int:
        return await self.w3.eth.chain_id

    async def is_factory_deployed(self, descriptor: DeploymentDescriptor) -> bool:
        code = await self.w3.eth.get_code(self.w3.to_checksum_address(descriptor.factory_address))
        return len(code) > 0

    async def get_balance(self, address: str) -> int:
        """Balance in wei."""
        return await self.w3.eth.get_balance(self.w3.to_checksum_address(address))

    async def funding_shortfall(self, descriptor: DeploymentDescriptor) -> int:
        """Wei the deployer still needs before the bootstrap transaction can execute."""
        balance = await self.get_balance(descriptor.deployer_address)
        return max(0, descriptor.funding_amount - balance)

    async def broadcast_bootstrap(self, descriptor: DeploymentDescriptor) -> str:
        """Send the pre-signed bootstrap transaction as-is. Returns the tx hash."""
        tx_hash = await self.w3.eth.send_raw_transaction(descriptor.signed_transaction)
        return self.w3.to_hex(tx_hash)
