from eth_account import Account
from eth_utils import encode_hex

TEST_PRIVATE_KEY = "0x" + "4c" * 32
OTHER_PRIVATE_KEY = "0x" + "1d" * 32
TEST_CHAIN_ID = 424242
# PUSH1 0x00 PUSH1 0x00 RETURN: deploys empty code
INIT_CODE = "0x60006000f3"


def sign_bootstrap(
    chain_id: int | None = TEST_CHAIN_ID,
    gas_price: int = 1_000_000_000,
    gas_limit: int = 100_000,
    nonce: int = 0,
    to: str | None = None,
    value: int = 0,
    private_key: str = TEST_PRIVATE_KEY,
) -> str:
    """Sign a legacy contract-creation transaction and return it as 0x hex."""
    tx = {"nonce": nonce, "gasPrice": gas_price, "gas": gas_limit, "value": value, "data": INIT_CODE}
    if chain_id is not None:
        tx["chainId"] = chain_id
    if to is not None:
        tx["to"] = to
    signed = Account.sign_transaction(tx, private_key)
    return encode_hex(signed.raw_transaction)
