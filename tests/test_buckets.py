"""Tests for bucket placement and distribution reports."""

import pytest

from hashcontract.kernel.buckets import BucketReport, bucket_distribution, bucket_index
from hashcontract.phonebook import BadPhoneNumber, BestPhoneNumber


class TestBucketIndex:

    def test_low_bits_select_bucket(self):
        assert bucket_index(0, 16) == 0
        assert bucket_index(5, 16) == 5
        assert bucket_index(21, 16) == 5

    def test_high_bits_are_spread(self):
        # 0x10000 ^ (0x10000 >> 16) == 0x10001
        assert bucket_index(0x10000, 16) == 1

    def test_negative_hash(self):
        # 0xFFFFFFFF ^ 0x0000FFFF == 0xFFFF0000
        assert bucket_index(-1, 16) == 0

    @pytest.mark.parametrize("bucket_count", [0, -4, 3, 12])
    def test_rejects_non_power_of_two(self, bucket_count):
        with pytest.raises(ValueError, match="power of two"):
            bucket_index(1, bucket_count)


class TestBucketDistribution:

    def test_even_spread(self):
        report = bucket_distribution(range(16), bucket_count=16)

        assert isinstance(report, BucketReport)
        assert report.key_count == 16
        assert report.occupied_buckets == 16
        assert report.longest_chain == 1
        assert report.loads == [1] * 16

    def test_constant_hash_single_chain(self):
        keys = [BadPhoneNumber(number=str(i)) for i in range(10)]
        report = bucket_distribution(keys, bucket_count=8)

        assert report.occupied_buckets == 1
        assert report.longest_chain == 10
        assert report.loads[bucket_index(24, 8)] == 10

    def test_structural_keys_spread(self):
        keys = [BestPhoneNumber(number=f"773,617,{n:04d}") for n in range(64)]
        report = bucket_distribution(keys, bucket_count=16)

        assert report.key_count == 64
        assert sum(report.loads) == 64
        assert report.occupied_buckets > 1

    def test_empty(self):
        report = bucket_distribution([], bucket_count=4)
        assert report.key_count == 0
        assert report.occupied_buckets == 0
        assert report.longest_chain == 0

    def test_unhashable_key(self):
        with pytest.raises(TypeError):
            bucket_distribution([[1, 2]])
