"""Resolve a chain_id to the descriptor needed to bootstrap the singleton factory there."""

from __future__ import annotations

import logging
from collections.abc import Mapping

from chaindeploy.bootstrap.registry import BOOTSTRAP_RECORDS, BootstrapRecord, lookup
from chaindeploy.bootstrap.transaction import contract_address, decode_bootstrap_transaction
from chaindeploy.errors import MalformedRecordError, MalformedTransactionError
from chaindeploy.models.schema import DeploymentDescriptor

logger = logging.getLogger(__name__)


def verify_record(record: BootstrapRecord) -> None:
    """Check that a record's raw transaction matches the fields declared next to it."""
    try:
        tx = decode_bootstrap_transaction(record.raw_transaction)
    except MalformedTransactionError as e:
        raise MalformedRecordError(record.chain_id, str(e)) from e

    if tx.sender.lower() != record.signer_address.lower():
        raise MalformedRecordError(
            record.chain_id,
            f"transaction was signed by {tx.sender}, record declares {record.signer_address}",
        )
    if tx.gas_price != record.gas_price:
        raise MalformedRecordError(
            record.chain_id, f"transaction gas price {tx.gas_price} != record gas price {record.gas_price}"
        )
    if tx.gas_limit != record.gas_limit:
        raise MalformedRecordError(
            record.chain_id, f"transaction gas limit {tx.gas_limit} != record gas limit {record.gas_limit}"
        )
    if tx.chain_id is not None and tx.chain_id != record.chain_id:
        raise MalformedRecordError(record.chain_id, f"transaction is signed for chain_id={tx.chain_id}")
    if not tx.is_contract_creation:
        raise MalformedRecordError(record.chain_id, f"transaction calls {tx.to} instead of creating a contract")
    if tx.value != 0:
        raise MalformedRecordError(
            record.chain_id, f"transaction transfers {tx.value} wei; bootstrap must carry no value"
        )

    created = contract_address(tx.sender, tx.nonce)
    if created.lower() != record.factory_address.lower():
        raise MalformedRecordError(
            record.chain_id,
            f"transaction creates {created}, record declares factory {record.factory_address}",
        )


def resolve(
    chain_id: int,
    records: Mapping[int, BootstrapRecord] = BOOTSTRAP_RECORDS,
) -> DeploymentDescriptor | None:
    """
    Build the deployment descriptor for a chain.

    Returns None when the chain has no bootstrap record; callers fall back to the
    ordinary contract creation path. Raises MalformedRecordError when the record cannot
    be replayed as declared.
    """
    record = lookup(chain_id, records)
    if record is None:
        logger.debug(f"No deterministic bootstrap for chain_id={chain_id}")
        return None

    if record.chain_id != chain_id:
        raise MalformedRecordError(chain_id, f"registry key holds the record for chain_id={record.chain_id}")
    verify_record(record)
    funding = record.gas_limit * record.gas_price
    logger.debug(f"Resolved singleton factory {record.factory_address} on chain_id={chain_id}, funding={funding}")

    return DeploymentDescriptor(
        factory_address=record.factory_address,
        deployer_address=record.signer_address,
        funding_amount=funding,
        signed_transaction=record.raw_transaction,
    )


def verify_registry(records: Mapping[int, BootstrapRecord] = BOOTSTRAP_RECORDS) -> list[int]:
    """Verify every record. Returns the verified chain ids, sorted."""
    for chain_id, record in records.items():
        if record.chain_id != chain_id:
            raise MalformedRecordError(chain_id, f"registry key holds the record for chain_id={record.chain_id}")
        verify_record(record)
    return sorted(records)
