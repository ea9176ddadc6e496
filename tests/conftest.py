from collections.abc import Callable

import pytest
from eth_account import Account

from chaindeploy.bootstrap.registry import BootstrapRecord
from chaindeploy.bootstrap.transaction import contract_address
from chaindeploy.config import Settings
from helpers import TEST_CHAIN_ID, TEST_PRIVATE_KEY, sign_bootstrap

ENV_VARS = (
    "NODE_URL",
    "INFURA_KEY",
    "PK",
    "MNEMONIC",
    "ETHERSCAN_API_KEY",
    "SOLIDITY_VERSION",
    "SOLIDITY_SETTINGS",
    "CUSTOM_DETERMINISTIC_DEPLOYMENT",
)


@pytest.fixture
def signer_address() -> str:
    return Account.from_key(TEST_PRIVATE_KEY).address


@pytest.fixture
def make_record(signer_address: str) -> Callable[..., BootstrapRecord]:
    """Build a self-consistent BootstrapRecord; keyword overrides apply to the record only."""

    def _make(
        chain_id: int = TEST_CHAIN_ID,
        gas_price: int = 1_000_000_000,
        gas_limit: int = 100_000,
        **overrides,
    ) -> BootstrapRecord:
        fields = {
            "chain_id": chain_id,
            "gas_price": gas_price,
            "gas_limit": gas_limit,
            "signer_address": signer_address,
            "raw_transaction": sign_bootstrap(chain_id=chain_id, gas_price=gas_price, gas_limit=gas_limit),
            "factory_address": contract_address(signer_address, 0),
        }
        fields.update(overrides)
        return BootstrapRecord(**fields)

    return _make


@pytest.fixture
def clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    for var in ENV_VARS:
        monkeypatch.delenv(var, raising=False)


@pytest.fixture
def make_settings(clean_env: None) -> Callable[..., Settings]:
    def _make(**values) -> Settings:
        return Settings(_env_file=None, **values)

    return _make
