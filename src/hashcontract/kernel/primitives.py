"""Canonical scalar-to-int32 digests for record field kinds.

Each primitive kind maps to a fixed, documented integer transform. The
transforms reproduce the boxed-type hashes of the JVM, so digests computed
here match the hash codes Java programs print for the same values:

- BOOLEAN: 1231 for True, 1237 for False
- BYTE, SHORT, INT: the value itself
- CHAR: the UTF-16 code unit
- LONG: high and low 32-bit halves XOR-folded
- FLOAT: raw IEEE-754 single-precision bit pattern
- DOUBLE: raw IEEE-754 double-precision bit pattern, folded like LONG
- STRING: polynomial over UTF-16 code units with multiplier 31

No NaN or signed-zero normalization is applied.
"""

import struct
from enum import Enum
from typing import Annotated, Any

from pydantic import AfterValidator, Field

MASK_32 = 0xFFFFFFFF
MASK_64 = 0xFFFFFFFFFFFFFFFF

INT8_MIN, INT8_MAX = -(1 << 7), (1 << 7) - 1
INT16_MIN, INT16_MAX = -(1 << 15), (1 << 15) - 1
INT32_MIN, INT32_MAX = -(1 << 31), (1 << 31) - 1
INT64_MIN, INT64_MAX = -(1 << 63), (1 << 63) - 1

BOOLEAN_TRUE_DIGEST = 1231
BOOLEAN_FALSE_DIGEST = 1237


class DigestKind(str, Enum):
    """Field kinds understood by the structural digest."""

    BOOLEAN = "BOOLEAN"
    BYTE = "BYTE"
    SHORT = "SHORT"
    INT = "INT"
    LONG = "LONG"
    CHAR = "CHAR"
    FLOAT = "FLOAT"
    DOUBLE = "DOUBLE"
    STRING = "STRING"
    RECORD = "RECORD"
    SEQUENCE = "SEQUENCE"


def to_int32(value: int) -> int:
    """Wrap an arbitrary Python int to a signed 32-bit integer."""
    value &= MASK_32
    return value - (1 << 32) if value & 0x80000000 else value


def _round_float32(value: float) -> float:
    try:
        return struct.unpack(">f", struct.pack(">f", value))[0]
    except OverflowError as exc:
        raise ValueError(f"{value!r} is out of range for a 32-bit float") from exc


def _check_char(value: str) -> str:
    if len(value) != 1 or ord(value) > 0xFFFF:
        raise ValueError(f"{value!r} is not a single UTF-16 code unit")
    return value


# Field markers. The trailing DigestKind is read back by shape resolution;
# the pydantic constraints enforce the range of the narrower kinds.
Int8 = Annotated[int, Field(ge=INT8_MIN, le=INT8_MAX), DigestKind.BYTE]
Int16 = Annotated[int, Field(ge=INT16_MIN, le=INT16_MAX), DigestKind.SHORT]
Int32 = Annotated[int, Field(ge=INT32_MIN, le=INT32_MAX), DigestKind.INT]
Int64 = Annotated[int, Field(ge=INT64_MIN, le=INT64_MAX), DigestKind.LONG]
Char = Annotated[str, AfterValidator(_check_char), DigestKind.CHAR]
Float32 = Annotated[float, AfterValidator(_round_float32), DigestKind.FLOAT]
Float64 = Annotated[float, DigestKind.DOUBLE]


def float32_bits(value: float) -> int:
    """Signed int32 view of the single-precision bit pattern."""
    return struct.unpack(">i", struct.pack(">f", value))[0]


def float64_bits(value: float) -> int:
    """Signed int64 view of the double-precision bit pattern."""
    return struct.unpack(">q", struct.pack(">d", value))[0]


def boolean_digest(value: bool) -> int:
    return BOOLEAN_TRUE_DIGEST if value else BOOLEAN_FALSE_DIGEST


def long_digest(value: int) -> int:
    """Fold a 64-bit value into 32 bits: ``(int)(v ^ (v >>> 32))``."""
    value &= MASK_64
    return to_int32(value ^ (value >> 32))


def float_digest(value: float) -> int:
    return float32_bits(value)


def double_digest(value: float) -> int:
    return long_digest(float64_bits(value))


def string_digest(value: str) -> int:
    """Polynomial hash over UTF-16 code units, wrapped to int32."""
    data = value.encode("utf-16-be", "surrogatepass")
    h = 0
    for i in range(0, len(data), 2):
        h = (31 * h + ((data[i] << 8) | data[i + 1])) & MASK_32
    return to_int32(h)


def scalar_digest(kind: DigestKind, value: Any) -> int:
    """Digest a non-None scalar of the given kind.

    Raises:
        ValueError: If ``kind`` is not a scalar kind
    """
    if kind is DigestKind.BOOLEAN:
        return boolean_digest(value)
    if kind in (DigestKind.BYTE, DigestKind.SHORT, DigestKind.INT):
        return to_int32(value)
    if kind is DigestKind.LONG:
        return long_digest(value)
    if kind is DigestKind.CHAR:
        return ord(value)
    if kind is DigestKind.FLOAT:
        return float_digest(value)
    if kind is DigestKind.DOUBLE:
        return double_digest(value)
    if kind is DigestKind.STRING:
        return string_digest(value)
    raise ValueError(f"Not a scalar digest kind: {kind.value}")


def scalar_equals(kind: DigestKind, left: Any, right: Any) -> bool:
    """Compare two non-None scalars the way their digest sees them.

    Floating kinds compare by bit pattern, not with ``==``: NaN equals an
    identical NaN and 0.0 differs from -0.0. A plain ``==`` would make 0.0
    and -0.0 equal while their digests differ.
    """
    if kind is DigestKind.FLOAT:
        return float32_bits(left) == float32_bits(right)
    if kind is DigestKind.DOUBLE:
        return float64_bits(left) == float64_bits(right)
    return left == right
