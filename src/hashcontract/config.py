"""Digest configuration."""

from pydantic import BaseModel, ConfigDict, field_validator, model_validator


class DigestSettings(BaseModel):
    """Constants of the multiply-and-add digest.

    The defaults reproduce the classic recipe: a nonzero seed so a leading
    zero-valued field still moves the result, an odd prime multiplier, 0 for
    absent values and a nonzero sentinel for sequences with no present
    elements.
    """
    seed: int = 23
    multiplier: int = 31
    null_digest: int = 0
    empty_sequence_digest: int = 17

    model_config = ConfigDict(frozen=True, extra="forbid")

    @field_validator("seed")
    @classmethod
    def validate_seed(cls, v: int) -> int:
        if v == 0:
            raise ValueError("seed must be nonzero")
        return v

    @field_validator("multiplier")
    @classmethod
    def validate_multiplier(cls, v: int) -> int:
        if v <= 1 or v % 2 == 0:
            raise ValueError(f"multiplier must be odd and greater than 1, got {v}")
        return v

    @model_validator(mode="after")
    def validate_sentinels(self) -> "DigestSettings":
        if self.empty_sequence_digest == self.null_digest:
            raise ValueError(
                "empty_sequence_digest must differ from null_digest so an empty "
                "sequence is distinguishable from an absent one"
            )
        return self


DEFAULT_SETTINGS = DigestSettings()
