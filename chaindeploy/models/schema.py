"""Pydantic v2 models for deployment descriptors and rendered network/project config."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, SecretStr


class DeploymentDescriptor(BaseModel):
    """Everything needed to replay a singleton factory bootstrap on one chain."""

    model_config = ConfigDict(frozen=True)

    factory_address: str
    deployer_address: str
    funding_amount: int = Field(description="gas_limit * gas_price, in native base units (wei)")
    signed_transaction: str

    def to_hardhat(self) -> dict[str, str]:
        """Shape expected by hardhat-deploy's `deterministicDeployment` hook."""
        return {
            "factory": self.factory_address,
            "deployer": self.deployer_address,
            "funding": str(self.funding_amount),
            "signedTx": self.signed_transaction,
        }


class AccountsConfig(BaseModel):
    """Shared signer credentials: either explicit private keys or an HD mnemonic."""

    private_keys: list[SecretStr] = Field(default_factory=list)
    mnemonic: SecretStr | None = None


class NetworkUserConfig(BaseModel):
    name: str
    chain_id: int | None = None
    url: str | None = None
    accounts: AccountsConfig | None = None
    is_poa: bool = False
    overrides: dict[str, Any] = Field(default_factory=dict, description="Opaque per-network keys (live, gasPrice, ...)")
    strategy: str = "default"
    deterministic_deployment: DeploymentDescriptor | None = None


class CompilerConfig(BaseModel):
    version: str
    settings: dict[str, Any] | None = None


class ProjectPaths(BaseModel):
    artifacts: str = "build/artifacts"
    cache: str = "build/cache"
    deploy: str = "src/deploy"
    sources: str = "contracts"


class ProjectConfig(BaseModel):
    paths: ProjectPaths = Field(default_factory=ProjectPaths)
    compilers: list[CompilerConfig]
    networks: dict[str, NetworkUserConfig]
    default_network: str = "hardhat"
    named_accounts: dict[str, int] = Field(default_factory=lambda: {"deployer": 0})
    etherscan_api_key: SecretStr | None = None
