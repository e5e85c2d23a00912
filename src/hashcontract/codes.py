"""Contract check code constants for hashcontract.api.check_contract().

These constants prevent stringly-typed issue codes and ensure
client code uses the correct contract codes.
"""

from enum import Enum


class ContractCode(str, Enum):
    """Contract error and warning codes."""

    # Errors (contract broken)
    NOT_HASHABLE = "NOT_HASHABLE"
    UNSTABLE_HASH = "UNSTABLE_HASH"
    EQUAL_HASH_MISMATCH = "EQUAL_HASH_MISMATCH"

    # Warnings (contract holds, but keys behave poorly)
    IDENTITY_EQUALITY = "IDENTITY_EQUALITY"
    DEGENERATE_DISTRIBUTION = "DEGENERATE_DISTRIBUTION"
