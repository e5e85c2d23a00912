"""Bucket placement model for power-of-two hash tables.

Used to see how a set of keys would spread over a table: a hash that
returns a constant is correct but puts every key in one chain.
"""

from typing import Iterable, List

from pydantic import BaseModel

from hashcontract.kernel.primitives import MASK_32


class BucketReport(BaseModel):
    """Distribution of keys over the buckets of one table size."""
    bucket_count: int
    key_count: int
    occupied_buckets: int
    longest_chain: int
    loads: List[int]  # keys per bucket, indexed by bucket


def validate_bucket_count(bucket_count: int) -> None:
    if bucket_count <= 0 or bucket_count & (bucket_count - 1):
        raise ValueError(f"bucket_count must be a positive power of two, got {bucket_count}")


def bucket_index(hash_value: int, bucket_count: int) -> int:
    """Bucket for a hash value: high bits spread into the low bits, then masked."""
    validate_bucket_count(bucket_count)
    h = hash_value & MASK_32
    h ^= h >> 16
    return h & (bucket_count - 1)


def bucket_distribution(keys: Iterable, bucket_count: int = 16) -> BucketReport:
    """Place each key by ``hash(key)`` and report the load per bucket.

    Raises:
        ValueError: If bucket_count is not a positive power of two
        TypeError: If a key is not hashable
    """
    validate_bucket_count(bucket_count)
    loads = [0] * bucket_count
    key_count = 0
    for key in keys:
        loads[bucket_index(hash(key), bucket_count)] += 1
        key_count += 1

    return BucketReport(
        bucket_count=bucket_count,
        key_count=key_count,
        occupied_buckets=sum(1 for load in loads if load),
        longest_chain=max(loads),
        loads=loads,
    )
