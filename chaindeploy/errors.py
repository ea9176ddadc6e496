from __future__ import annotations


class ChainDeployError(Exception):
    """Base class for all chaindeploy errors."""


class MalformedTransactionError(ChainDeployError, ValueError):
    """Raised when raw signed transaction bytes cannot be decoded or their signature recovered."""


class MalformedRecordError(ChainDeployError, ValueError):
    """
    Raised when a bootstrap record disagrees with its own raw transaction.

    A descriptor built from such a record would underfund the deployer or point at the
    wrong factory address, so resolution aborts instead of returning it.
    """

    def __init__(self, chain_id: int, reason: str) -> None:
        super().__init__(f"Bootstrap record for chain_id={chain_id} is malformed: {reason}")
        self.chain_id = chain_id
        self.reason = reason


class UnknownNetworkError(ChainDeployError, LookupError):
    """Raised when a network name or chain id is not in the network table."""


class MissingCredentialsError(ChainDeployError, RuntimeError):
    """Raised when the selected network needs a credential that is not configured."""
