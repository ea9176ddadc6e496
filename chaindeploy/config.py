"""Centralized configuration via pydantic-settings. All secrets and toggles from .env."""

from pathlib import Path
from functools import lru_cache
from typing import Any

from pydantic import SecretStr
from pydantic_settings import BaseSettings, SettingsConfigDict

from chaindeploy.models.schema import AccountsConfig


PROJECT_ROOT = Path(__file__).resolve().parent.parent

# Well-known development mnemonic, used when neither PK nor MNEMONIC is set
DEFAULT_MNEMONIC = "candy maple cake sugar pudding cream honey rich smooth crumble sweet treat"


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=PROJECT_ROOT / ".env",
        env_file_encoding="utf-8",
        extra="ignore",
        # SOLIDITY_SETTINGS= or CUSTOM_DETERMINISTIC_DEPLOYMENT= means unset
        env_ignore_empty=True,
    )

    # RPC
    node_url: str = ""
    infura_key: str = ""

    # Signer credentials (PK wins over MNEMONIC)
    pk: SecretStr | None = None
    mnemonic: SecretStr | None = None

    # Verification
    etherscan_api_key: str = ""

    # Compiler; SOLIDITY_SETTINGS is a JSON object
    solidity_version: str = ""
    solidity_settings: dict[str, Any] | None = None

    # Replay pre-signed singleton factory bootstrap transactions where a record exists
    custom_deterministic_deployment: bool = False

    def shared_accounts(self) -> AccountsConfig:
        """Accounts attached to every remote network."""
        if self.pk is not None and self.pk.get_secret_value():
            return AccountsConfig(private_keys=[self.pk])
        if self.mnemonic is not None and self.mnemonic.get_secret_value():
            return AccountsConfig(mnemonic=self.mnemonic)
        return AccountsConfig(mnemonic=SecretStr(DEFAULT_MNEMONIC))


@lru_cache
def get_settings() -> Settings:
    return Settings()
