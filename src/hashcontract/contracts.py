"""Public contract report models for hashcontract package."""

from typing import List, Optional
from pydantic import BaseModel

from hashcontract.codes import ContractCode
from hashcontract.kernel.buckets import BucketReport


class ContractIssue(BaseModel):
    """A single contract issue found among the samples."""
    code: ContractCode
    message: str
    left: int  # index of the first sample involved
    right: Optional[int] = None  # index of the second sample, for pairwise issues


class ContractReport(BaseModel):
    """Result of checking the equality/hash contract over a set of samples."""
    ok: bool  # True if no errors (warnings don't block)
    sample_count: int
    errors: List[ContractIssue]
    warnings: List[ContractIssue]
    distribution: Optional[BucketReport] = None  # None when any sample is unhashable
