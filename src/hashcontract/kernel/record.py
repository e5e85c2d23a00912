"""Record base classes.

Structural equality is a capability a type opts into, never an implicit
default:

- ``Record``: identity equality and hashing. Two records built from the same
  values are distinct keys.
- ``StructuralRecord``: field-wise ``equals`` and ``digest``.
- ``CachedStructuralRecord``: structural, with the digest kept in a
  per-instance cache cell that is dropped on every field assignment and
  on every copy.
"""

from enum import Enum
from typing import Any, ClassVar, Dict, Optional

from pydantic import BaseModel, ConfigDict, PrivateAttr

from hashcontract.logging import get_logger

logger = get_logger(__name__)


class CacheStrategy(str, Enum):
    """When a cached record computes its digest."""
    LAZY = "LAZY"  # on first hash()
    EAGER = "EAGER"  # at construction and after every field assignment


class Record(BaseModel):
    """Base record: typed, ordered fields with identity semantics."""

    model_config = ConfigDict(extra="forbid", validate_assignment=True)

    __eq__ = object.__eq__
    __hash__ = object.__hash__


class StructuralRecord(Record):
    """Record with field-wise equality and a matching structural digest."""

    def __eq__(self, other: Any) -> bool:
        if not isinstance(other, Record):
            return NotImplemented
        from hashcontract.kernel.structural import equals
        return equals(self, other)

    def __hash__(self) -> int:
        from hashcontract.kernel.structural import digest
        return digest(self)


class CachedStructuralRecord(StructuralRecord):
    """Structural record that memoises its digest.

    The cache cell holds ``None`` while invalid. Filling it is a single
    attribute write of a pure result, so two threads racing on first access
    both store the same value.

    Nested records are not watched: mutating a nested record in place leaves
    the outer cache stale.
    """

    digest_strategy: ClassVar[CacheStrategy] = CacheStrategy.LAZY

    _cached_digest: Optional[int] = PrivateAttr(default=None)

    def model_post_init(self, __context: Any) -> None:
        self._refresh_digest()

    def _refresh_digest(self) -> None:
        if self.digest_strategy is CacheStrategy.EAGER:
            self._cached_digest = self._compute_digest()
        else:
            self._cached_digest = None

    def _compute_digest(self) -> int:
        from hashcontract.kernel.structural import digest
        return digest(self)

    @property
    def digest_cached(self) -> bool:
        """True while the cache cell holds a valid digest."""
        return self._cached_digest is not None

    def __setattr__(self, name: str, value: Any) -> None:
        super().__setattr__(name, value)
        if name in type(self).model_fields:
            logger.debug("%s.%s assigned, dropping cached digest", type(self).__name__, name)
            self._refresh_digest()

    def model_copy(self, *, update: Optional[Dict[str, Any]] = None, deep: bool = False):
        # pydantic copies private attributes and writes updates straight into
        # __dict__, bypassing __setattr__
        copied = super().model_copy(update=update, deep=deep)
        copied._refresh_digest()
        return copied

    def __hash__(self) -> int:
        result = self._cached_digest
        if result is None:
            result = self._compute_digest()
            self._cached_digest = result
        return result
