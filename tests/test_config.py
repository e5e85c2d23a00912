import pytest
from hypothesis import given, strategies as st
from pydantic import ValidationError

from hashcontract.config import DEFAULT_SETTINGS, DigestSettings


class TestDigestSettings:
    def test_default_values(self):
        """Defaults reproduce the 23/31 recipe."""
        settings = DigestSettings()
        assert settings.seed == 23
        assert settings.multiplier == 31
        assert settings.null_digest == 0
        assert settings.empty_sequence_digest == 17
        assert DEFAULT_SETTINGS == settings

    def test_custom_values(self):
        settings = DigestSettings(seed=17, multiplier=37, empty_sequence_digest=1)
        assert settings.seed == 17
        assert settings.multiplier == 37
        assert settings.empty_sequence_digest == 1

    def test_frozen(self):
        with pytest.raises(ValidationError):
            DEFAULT_SETTINGS.seed = 1

    def test_unknown_field_rejected(self):
        with pytest.raises(ValidationError):
            DigestSettings(salt=3)

    def test_zero_seed_rejected(self):
        with pytest.raises(ValidationError, match="seed must be nonzero"):
            DigestSettings(seed=0)

    def test_sentinel_must_differ_from_null(self):
        with pytest.raises(ValidationError, match="empty_sequence_digest"):
            DigestSettings(null_digest=17)


class TestMultiplierValidation:
    """
    The multiplier must be odd: an even multiplier is a left shift and drops
    the high bits of earlier fields.
    """

    @given(k=st.integers(min_value=-1000, max_value=1000))
    def test_even_multiplier_rejected(self, k):
        with pytest.raises(ValidationError):
            DigestSettings(multiplier=2 * k)

    @given(k=st.integers(min_value=1, max_value=10000))
    def test_odd_multiplier_accepted(self, k):
        settings = DigestSettings(multiplier=2 * k + 1)
        assert settings.multiplier == 2 * k + 1

    def test_one_rejected(self):
        with pytest.raises(ValidationError, match="greater than 1"):
            DigestSettings(multiplier=1)
