"""Static table of pre-signed singleton factory bootstrap transactions, keyed by chain_id.

Records are append-only: once a chain's bootstrap transaction has been broadcast, its
record must never change, otherwise the resolver no longer matches on-chain state.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from dataclasses import dataclass
from types import MappingProxyType
from typing import Final

from eth_utils import is_address

# Account that signed every shipped bootstrap transaction at nonce 0, and the
# CREATE address that nonce produces. Identical on every chain below.
SINGLETON_FACTORY_DEPLOYER: Final[str] = "0xE1CB04A0fA36DdD16a06ea828007E35e1a3cBC37"
SINGLETON_FACTORY_ADDRESS: Final[str] = "0x914d7Fec6aaC8cd542e72Bca78B30650d45643d7"


@dataclass(frozen=True, slots=True)
class BootstrapRecord:
    """A raw signed transaction that deploys the singleton factory on one chain."""

    chain_id: int
    gas_price: int
    gas_limit: int
    signer_address: str
    raw_transaction: str
    factory_address: str

    def __post_init__(self) -> None:
        if self.chain_id <= 0:
            raise ValueError(f"`BootstrapRecord.chain_id` must be positive, got {self.chain_id}")
        if self.gas_price < 0:
            raise ValueError(f"`BootstrapRecord.gas_price` must be non-negative, got {self.gas_price}")
        if self.gas_limit <= 0:
            raise ValueError(f"`BootstrapRecord.gas_limit` must be positive, got {self.gas_limit}")
        if not is_address(self.signer_address):
            raise ValueError(f"`BootstrapRecord.signer_address` is not an address: {self.signer_address!r}")
        if not is_address(self.factory_address):
            raise ValueError(f"`BootstrapRecord.factory_address` is not an address: {self.factory_address!r}")
        if not self.raw_transaction:
            raise ValueError("`BootstrapRecord.raw_transaction` is required")


def build_registry(records: Iterable[BootstrapRecord]) -> Mapping[int, BootstrapRecord]:
    """Index records by chain_id into a read-only mapping. Duplicate chain ids are rejected."""
    indexed: dict[int, BootstrapRecord] = {}
    for record in records:
        if record.chain_id in indexed:
            raise ValueError(f"Duplicate bootstrap record for chain_id={record.chain_id}")
        indexed[record.chain_id] = record
    return MappingProxyType(indexed)


BOOTSTRAP_RECORDS: Final[Mapping[int, BootstrapRecord]] = build_registry([
    # smartBCH mainnet
    BootstrapRecord(
        chain_id=10000,
        gas_price=2046739556,
        gas_limit=100000,
        signer_address=SINGLETON_FACTORY_DEPLOYER,
        raw_transaction="0xf8a6808479fec464830186a08080b853604580600e600039806000f350fe7fffffffffffffffffffffffffffffffffffffffffffffffffffffffffffffffe03601600081602082378035828234f58015156039578182fd5b8082525050506014600cf3824e43a0acd83aeb82fb5be9b50ddb756388b393a4dead90a53d4ad41be337bd7d323331a018c27606339dc54d38df057b870a61a6227d34ece4cc9c52d28738cdffb5caa7",
        factory_address=SINGLETON_FACTORY_ADDRESS,
    ),
    # smartBCH amber testnet
    BootstrapRecord(
        chain_id=10001,
        gas_price=1000000000,
        gas_limit=100000,
        signer_address=SINGLETON_FACTORY_DEPLOYER,
        raw_transaction="0xf8a680843b9aca00830186a08080b853604580600e600039806000f350fe7fffffffffffffffffffffffffffffffffffffffffffffffffffffffffffffffe03601600081602082378035828234f58015156039578182fd5b8082525050506014600cf3824e46a09f7317d9b9d8d37fc4580600acfd4e73686385b107d78e9f9629c59fe96257e8a059e58570c604625c2ee1900ad9aaa30ba844e28da52ea1c2dabd38dcdc6ac636",
        factory_address=SINGLETON_FACTORY_ADDRESS,
    ),
])


def lookup(
    chain_id: int,
    records: Mapping[int, BootstrapRecord] = BOOTSTRAP_RECORDS,
) -> BootstrapRecord | None:
    """Return the bootstrap record for a chain, or None when the chain has none."""
    return records.get(chain_id)
