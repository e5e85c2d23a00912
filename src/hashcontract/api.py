"""Public API for hashcontract package.

High-level functions that return complete, structured results.
"""

from typing import Iterable, List, Optional

from hashcontract.codes import ContractCode
from hashcontract.contracts import ContractIssue, ContractReport
from hashcontract.kernel.buckets import bucket_distribution, validate_bucket_count
from hashcontract.kernel.record import Record, StructuralRecord
from hashcontract.kernel.structural import digest, equals, objects_hash
from hashcontract.logging import get_logger

logger = get_logger(__name__)

__all__ = ["check_contract", "digest", "equals", "objects_hash"]


def _hash_samples(samples: List[object], errors: List[ContractIssue]) -> List[Optional[int]]:
    """Hash every sample twice; record unhashable and unstable samples."""
    hashes: List[Optional[int]] = []
    for index, sample in enumerate(samples):
        try:
            first = hash(sample)
        except TypeError as exc:
            errors.append(ContractIssue(
                code=ContractCode.NOT_HASHABLE,
                message=f"Sample {index} ({type(sample).__name__}) is not hashable: {exc}",
                left=index,
            ))
            hashes.append(None)
            continue

        second = hash(sample)
        if first != second:
            errors.append(ContractIssue(
                code=ContractCode.UNSTABLE_HASH,
                message=f"Sample {index} hashed to {first} then {second}",
                left=index,
            ))
        hashes.append(first)
    return hashes


def _is_identity_only(left: object, right: object) -> bool:
    """Same non-structural Record type, structurally equal, yet unequal."""
    return (
        type(left) is type(right)
        and isinstance(left, Record)
        and not isinstance(left, StructuralRecord)
        and equals(left, right)
        and not left == right
    )


def check_contract(samples: Iterable[object], bucket_count: int = 16) -> ContractReport:
    """Check the equality/hash contract over a set of sample keys.

    Errors:
    - NOT_HASHABLE: hash() raises TypeError
    - UNSTABLE_HASH: two consecutive hash() calls disagree
    - EQUAL_HASH_MISMATCH: ``a == b`` but ``hash(a) != hash(b)``

    Warnings:
    - IDENTITY_EQUALITY: structurally equal records of a type that did not
      opt into structural equality compare unequal
    - DEGENERATE_DISTRIBUTION: unequal samples all share one hash value

    Args:
        samples: Keys to check, ideally including pairs built from equal values
        bucket_count: Table size used for the distribution report (power of two)

    Returns:
        ContractReport with ok=True when there are no errors

    Raises:
        ValueError: If bucket_count is not a positive power of two
    """
    validate_bucket_count(bucket_count)
    samples = list(samples)
    errors: List[ContractIssue] = []
    warnings: List[ContractIssue] = []

    hashes = _hash_samples(samples, errors)

    has_unequal_pair = False
    for i in range(len(samples)):
        for j in range(i + 1, len(samples)):
            left, right = samples[i], samples[j]
            if left == right:
                if hashes[i] is not None and hashes[j] is not None and hashes[i] != hashes[j]:
                    errors.append(ContractIssue(
                        code=ContractCode.EQUAL_HASH_MISMATCH,
                        message=f"Samples {i} and {j} are equal but hash to {hashes[i]} and {hashes[j]}",
                        left=i,
                        right=j,
                    ))
                continue

            has_unequal_pair = True
            if _is_identity_only(left, right):
                warnings.append(ContractIssue(
                    code=ContractCode.IDENTITY_EQUALITY,
                    message=(
                        f"Samples {i} and {j} hold equal field values but {type(left).__name__} "
                        f"compares by identity; inherit StructuralRecord to use it as a lookup key"
                    ),
                    left=i,
                    right=j,
                ))

    distribution = None
    if all(h is not None for h in hashes):
        distribution = bucket_distribution(samples, bucket_count)
        if has_unequal_pair and len(set(hashes)) == 1:
            warnings.append(ContractIssue(
                code=ContractCode.DEGENERATE_DISTRIBUTION,
                message=(
                    f"All {distribution.key_count} samples share hash {hashes[0]} and fall "
                    f"into one bucket of {distribution.bucket_count}"
                ),
                left=0,
            ))

    if errors:
        logger.warning(
            "Contract check failed: %d error(s) over %d sample(s): %s",
            len(errors),
            len(samples),
            ", ".join(sorted({e.code.value for e in errors})),
        )
    else:
        logger.debug("Contract check passed over %d sample(s), %d warning(s)", len(samples), len(warnings))

    return ContractReport(
        ok=not errors,
        sample_count=len(samples),
        errors=errors,
        warnings=warnings,
        distribution=distribution,
    )
