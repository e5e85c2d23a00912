"""Phone book keys, from broken to best practice.

The phone book maps a number to a contact name. Looking up a number with a
freshly built key only works when equal keys hash equally:

- ``PhoneNumber`` never opted into structural equality, so a new key built
  from the same digits is a different key and the lookup misses.
- ``BadPhoneNumber`` is structurally equal and returns a constant hash.
  Lookups succeed, but every entry shares one bucket.
- ``BestPhoneNumber`` combines every equality field with the 23/31 recipe.
- ``CachedPhoneNumber`` stores the digest on first use and drops it when a
  field is reassigned.
"""

from typing import Dict, Generic, Iterator, Optional, TypeVar

from hashcontract.kernel.primitives import Float32, Int16
from hashcontract.kernel.record import CachedStructuralRecord, Record, StructuralRecord
from hashcontract.logging import get_logger

logger = get_logger(__name__)

K = TypeVar("K")


class PhoneNumber(Record):
    """Number key with identity semantics."""
    number: str


class BadPhoneNumber(StructuralRecord):
    """Number key whose hash is the same for every instance."""
    number: str

    def __hash__(self) -> int:
        return 24


class BestPhoneNumber(StructuralRecord):
    """Contact key: number, closeness and sex, digested in that order."""
    number: str
    intimacy: Float32 = 0.0
    sex: bool = False


class CachedPhoneNumber(CachedStructuralRecord):
    """North American number split into its three groups."""
    area: Int16
    prefix: Int16
    line: Int16

    @classmethod
    def parse(cls, number: str) -> "CachedPhoneNumber":
        """Build from ``"773,617,3499"``-style text (comma, dash or space separated).

        Raises:
            ValueError: If the text does not hold exactly three numeric groups
        """
        groups = number.replace("-", ",").replace(" ", ",").split(",")
        groups = [g for g in groups if g]
        if len(groups) != 3 or not all(g.isdigit() for g in groups):
            raise ValueError(f"Expected three numeric groups, got {number!r}")
        area, prefix, line = (int(g) for g in groups)
        return cls(area=area, prefix=prefix, line=line)


class PhoneBook(Generic[K]):
    """Contact names keyed by phone number records."""

    def __init__(self) -> None:
        self._entries: Dict[K, str] = {}

    def put(self, number: K, name: str) -> None:
        self._entries[number] = name
        logger.debug("Stored %r -> %s", number, name)

    def get(self, number: K) -> Optional[str]:
        name = self._entries.get(number)
        if name is None:
            logger.debug("No contact for %r", number)
        return name

    def __contains__(self, number: object) -> bool:
        return number in self._entries

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self) -> Iterator[K]:
        return iter(self._entries)
