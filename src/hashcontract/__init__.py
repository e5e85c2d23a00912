"""hashcontract: structural equality and digest for hashable record keys."""

from importlib.metadata import version, PackageNotFoundError

try:
    __version__ = version("hashcontract")
except PackageNotFoundError:
    __version__ = "dev"

# Public API exports
from hashcontract.api import check_contract, digest, equals, objects_hash
from hashcontract.codes import ContractCode
from hashcontract.config import DEFAULT_SETTINGS, DigestSettings
from hashcontract.contracts import ContractIssue, ContractReport
from hashcontract.kernel.record import CachedStructuralRecord, CacheStrategy, Record, StructuralRecord
from hashcontract.kernel.shape import RecordShapeError

__all__ = [
    "__version__",
    "check_contract",
    "digest",
    "equals",
    "objects_hash",
    "ContractCode",
    "ContractIssue",
    "ContractReport",
    "DEFAULT_SETTINGS",
    "DigestSettings",
    "Record",
    "StructuralRecord",
    "CachedStructuralRecord",
    "CacheStrategy",
    "RecordShapeError",
]
