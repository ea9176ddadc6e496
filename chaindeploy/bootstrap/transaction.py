"""Decode pre-signed legacy bootstrap transactions and derive CREATE addresses."""

from __future__ import annotations

from dataclasses import dataclass

import rlp
from eth_account import Account
from eth_keys.exceptions import BadSignature
from eth_keys.exceptions import ValidationError as SignatureValidationError
from eth_utils import big_endian_to_int, keccak, to_bytes, to_checksum_address
from rlp.exceptions import RLPException

from chaindeploy.errors import MalformedTransactionError

# nonce, gasPrice, gas, to, value, data, v, r, s
LEGACY_FIELD_COUNT = 9
# EIP-155: v = chain_id * 2 + 35 (or 36)
EIP155_V_OFFSET = 35


@dataclass(frozen=True, slots=True)
class DecodedTransaction:
    nonce: int
    gas_price: int
    gas_limit: int
    to: str | None  # None for contract creation
    value: int
    data: bytes
    v: int
    chain_id: int | None  # None when the signature is not replay-protected
    sender: str

    @property
    def is_contract_creation(self) -> bool:
        return self.to is None


def _chain_id_from_v(v: int) -> int | None:
    if v in (27, 28):
        return None
    if v < EIP155_V_OFFSET:
        raise MalformedTransactionError(f"Invalid signature v={v}")
    return (v - EIP155_V_OFFSET) // 2


def decode_bootstrap_transaction(raw: str | bytes) -> DecodedTransaction:
    """
    Decode a raw signed legacy transaction and recover its sender.

    Accepts hex (with or without 0x) or bytes. Typed (EIP-2718) envelopes are rejected:
    keyless bootstrap transactions are always legacy RLP lists.
    """
    if isinstance(raw, str):
        hexstr = raw if raw.startswith(("0x", "0X")) else f"0x{raw}"
        try:
            payload = to_bytes(hexstr=hexstr)
        except ValueError as e:
            raise MalformedTransactionError(f"Transaction is not valid hex: {e}") from e
    else:
        payload = bytes(raw)

    if not payload:
        raise MalformedTransactionError("Transaction is empty")
    if payload[0] <= 0x7F:
        raise MalformedTransactionError(
            f"Typed transaction envelope 0x{payload[0]:02x} is not supported, expected a legacy transaction"
        )

    try:
        fields = rlp.decode(payload)
    except RLPException as e:
        raise MalformedTransactionError(f"Transaction is not valid RLP: {e}") from e
    if not isinstance(fields, (list, tuple)):
        raise MalformedTransactionError(f"Expected a {LEGACY_FIELD_COUNT}-field legacy transaction, got a string")
    if len(fields) != LEGACY_FIELD_COUNT:
        raise MalformedTransactionError(
            f"Expected a {LEGACY_FIELD_COUNT}-field legacy transaction, got {len(fields)} fields"
        )
    if any(not isinstance(f, bytes) for f in fields):
        raise MalformedTransactionError("Legacy transaction fields must be byte strings")

    nonce, gas_price, gas_limit, to, value, data, v, _r, _s = fields
    if to and len(to) != 20:
        raise MalformedTransactionError(f"Recipient must be empty or 20 bytes, got {len(to)}")
    v_int = big_endian_to_int(v)
    chain_id = _chain_id_from_v(v_int)

    try:
        sender = Account.recover_transaction(payload)
    except (BadSignature, SignatureValidationError, RLPException, ValueError) as e:
        raise MalformedTransactionError(f"Could not recover transaction sender: {e}") from e

    return DecodedTransaction(
        nonce=big_endian_to_int(nonce),
        gas_price=big_endian_to_int(gas_price),
        gas_limit=big_endian_to_int(gas_limit),
        to=to_checksum_address(to) if to else None,
        value=big_endian_to_int(value),
        data=data,
        v=v_int,
        chain_id=chain_id,
        sender=to_checksum_address(sender),
    )


def contract_address(sender: str, nonce: int) -> str:
    """CREATE address: last 20 bytes of keccak(rlp([sender, nonce]))."""
    encoded = rlp.encode([to_bytes(hexstr=sender), nonce])
    return to_checksum_address(keccak(encoded)[12:])
