"""Structural equality and digest over record shapes.

``equals`` and ``digest`` are the key-comparison and key-hashing callbacks a
hash table needs. They agree by construction: every field kind is compared
the same way it is digested, so ``equals(a, b)`` implies
``digest(a) == digest(b)``. The reverse does not hold; collisions between
unequal records are expected.
"""

from typing import Any, Optional

from hashcontract.config import DEFAULT_SETTINGS, DigestSettings
from hashcontract.kernel.primitives import (
    DigestKind,
    boolean_digest,
    double_digest,
    long_digest,
    scalar_digest,
    scalar_equals,
    string_digest,
    to_int32,
)
from hashcontract.kernel.record import Record
from hashcontract.kernel.shape import FieldSpec, shape_of


def combine(result: int, field_digest: int, settings: DigestSettings = DEFAULT_SETTINGS) -> int:
    """One accumulation step: ``multiplier * result + field_digest`` as int32."""
    return to_int32(settings.multiplier * result + field_digest)


def _value_equals(spec: FieldSpec, left: Any, right: Any) -> bool:
    if left is None or right is None:
        return left is None and right is None

    if spec.kind is DigestKind.RECORD:
        return equals(left, right)

    if spec.kind is DigestKind.SEQUENCE:
        if len(left) != len(right):
            return False
        return all(_value_equals(spec.element, l, r) for l, r in zip(left, right))

    return scalar_equals(spec.kind, left, right)


def _value_digest(spec: FieldSpec, value: Any, settings: DigestSettings) -> int:
    if value is None:
        return settings.null_digest

    if spec.kind is DigestKind.RECORD:
        return digest(value, settings)

    if spec.kind is DigestKind.SEQUENCE:
        present = [item for item in value if item is not None]
        if not present:
            return settings.empty_sequence_digest
        total = 0
        for item in present:
            total = to_int32(total + _value_digest(spec.element, item, settings))
        return total

    return scalar_digest(spec.kind, value)


def equals(a: Record, b: Any) -> bool:
    """Field-wise structural equality.

    False when ``b`` is not an instance of the same record class as ``a``.
    Nested records are compared recursively and sequences element-wise.
    """
    if a is b:
        return True
    if not isinstance(b, Record):
        return False

    # one shape object per class
    shape = shape_of(type(a))
    if shape_of(type(b)) is not shape:
        return False

    return all(
        _value_equals(spec, getattr(a, spec.name), getattr(b, spec.name))
        for spec in shape.fields
    )


def digest(record: Record, settings: Optional[DigestSettings] = None) -> int:
    """Order-sensitive 32-bit digest of a record's fields.

    Starts from ``settings.seed`` and folds each field digest in declaration
    order with ``combine``. Overflow wraps silently.
    """
    if settings is None:
        settings = DEFAULT_SETTINGS

    result = settings.seed
    for spec in shape_of(type(record)).fields:
        result = combine(result, _value_digest(spec, getattr(record, spec.name), settings), settings)
    return result


def _runtime_digest(value: Any) -> int:
    if value is None:
        return 0
    if isinstance(value, Record):
        return digest(value)
    if isinstance(value, bool):
        return boolean_digest(value)
    if isinstance(value, int):
        return long_digest(value)
    if isinstance(value, float):
        return double_digest(value)
    if isinstance(value, str):
        return string_digest(value)
    if isinstance(value, (tuple, list)):
        return _objects_hash(value)
    raise TypeError(f"No runtime digest for {type(value).__name__}")


def _objects_hash(values) -> int:
    result = 1
    for value in values:
        result = to_int32(31 * result + _runtime_digest(value))
    return result


def objects_hash(*values: Any) -> int:
    """Convenience combinator over positional values, seeded with 1.

    Each value is digested by its runtime type (int as LONG, float as DOUBLE),
    nested tuples and lists recursively. Easier to call than declaring a
    record, but every call packs its arguments and dispatches on type.

    Raises:
        TypeError: If a value has no runtime digest
    """
    return _objects_hash(values)
