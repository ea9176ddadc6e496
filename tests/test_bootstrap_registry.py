"""
Unit tests for chaindeploy.bootstrap.registry.

Tests cover:
- BootstrapRecord constructor validation
- BootstrapRecord immutability
- build_registry duplicate detection and read-only mapping
- lookup for known and unknown chain ids
- BOOTSTRAP_RECORDS canonical values
"""

from dataclasses import FrozenInstanceError

import pytest

from chaindeploy.bootstrap.registry import (
    BOOTSTRAP_RECORDS,
    SINGLETON_FACTORY_ADDRESS,
    SINGLETON_FACTORY_DEPLOYER,
    BootstrapRecord,
    build_registry,
    lookup,
)


def _record(**overrides) -> BootstrapRecord:
    fields = {
        "chain_id": 10000,
        "gas_price": 1,
        "gas_limit": 1,
        "signer_address": SINGLETON_FACTORY_DEPLOYER,
        "raw_transaction": "0xf8",
        "factory_address": SINGLETON_FACTORY_ADDRESS,
    }
    fields.update(overrides)
    return BootstrapRecord(**fields)


class TestBootstrapRecord:
    """Tests for BootstrapRecord construction and validation."""

    @pytest.mark.parametrize(
        ("overrides", "field"),
        [
            ({"chain_id": 0}, "chain_id"),
            ({"chain_id": -5}, "chain_id"),
            ({"gas_price": -1}, "gas_price"),
            ({"gas_limit": 0}, "gas_limit"),
            ({"signer_address": "0x1234"}, "signer_address"),
            ({"factory_address": "not-an-address"}, "factory_address"),
            ({"raw_transaction": ""}, "raw_transaction"),
        ],
    )
    def test_rejects_invalid_fields(self, overrides: dict, field: str) -> None:
        with pytest.raises(ValueError, match=field):
            _record(**overrides)

    def test_zero_gas_price_is_allowed(self) -> None:
        assert _record(gas_price=0).gas_price == 0

    def test_instance_is_immutable(self) -> None:
        record = _record()
        with pytest.raises(FrozenInstanceError):
            record.gas_price = 2  # type: ignore[misc]


class TestBuildRegistry:
    def test_indexes_by_chain_id(self) -> None:
        registry = build_registry([_record(chain_id=1), _record(chain_id=2)])
        assert sorted(registry) == [1, 2]
        assert registry[2].chain_id == 2

    def test_rejects_duplicate_chain_ids(self) -> None:
        with pytest.raises(ValueError, match="Duplicate"):
            build_registry([_record(chain_id=7), _record(chain_id=7)])

    def test_result_is_read_only(self) -> None:
        registry = build_registry([_record()])
        with pytest.raises(TypeError):
            registry[99] = _record(chain_id=99)  # type: ignore[index]

    def test_default_registry_is_read_only(self) -> None:
        with pytest.raises(TypeError):
            BOOTSTRAP_RECORDS[1] = _record(chain_id=1)  # type: ignore[index]


class TestLookup:
    @pytest.mark.parametrize("chain_id", [10000, 10001])
    def test_known_chain(self, chain_id: int) -> None:
        record = lookup(chain_id)
        assert record is not None
        assert record.chain_id == chain_id

    @pytest.mark.parametrize("chain_id", [1, 56, 137, 9999, 10002, 2**64])
    def test_unknown_chain_returns_none(self, chain_id: int) -> None:
        assert lookup(chain_id) is None

    def test_custom_records(self) -> None:
        registry = build_registry([_record(chain_id=5)])
        assert lookup(5, registry) is registry[5]
        assert lookup(10000, registry) is None


class TestDefaultRecords:
    def test_shipped_chain_ids(self) -> None:
        assert sorted(BOOTSTRAP_RECORDS) == [10000, 10001]

    @pytest.mark.parametrize(
        ("chain_id", "gas_price", "gas_limit"),
        [(10000, 2046739556, 100000), (10001, 1000000000, 100000)],
    )
    def test_cost_parameters(self, chain_id: int, gas_price: int, gas_limit: int) -> None:
        record = BOOTSTRAP_RECORDS[chain_id]
        assert record.gas_price == gas_price
        assert record.gas_limit == gas_limit

    def test_same_factory_and_signer_everywhere(self) -> None:
        assert {r.factory_address for r in BOOTSTRAP_RECORDS.values()} == {SINGLETON_FACTORY_ADDRESS}
        assert {r.signer_address for r in BOOTSTRAP_RECORDS.values()} == {SINGLETON_FACTORY_DEPLOYER}
