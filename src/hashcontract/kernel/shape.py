"""Record shape resolution.

A record's shape is its module-qualified name plus the ordered list of typed
fields that participate in equality and digest. Shapes are derived from the
pydantic field declarations of a ``Record`` subclass, in declaration order,
and are memoised per class, so each class owns exactly one shape object.

Annotation rules:
- ``bool`` -> BOOLEAN, ``int`` -> LONG, ``float`` -> DOUBLE, ``str`` -> STRING
- ``Annotated[..., DigestKind.X]`` (see the markers in ``primitives``) -> X
- a ``Record`` subclass -> RECORD
- ``tuple[X, ...]`` -> SEQUENCE of X
- ``Optional[X]`` -> X, nullable

Anything else is rejected with ``RecordShapeError``.
"""

import threading
import types
from typing import Annotated, Any, Dict, Optional, Tuple, Type, Union, get_args, get_origin

from pydantic import BaseModel, ConfigDict

from hashcontract.kernel.primitives import DigestKind
from hashcontract.logging import get_logger

logger = get_logger(__name__)


class RecordShapeError(TypeError):
    """Raised when a record field has no digest kind."""
    pass


class FieldSpec(BaseModel):
    """A single typed slot of a record shape."""
    name: str
    kind: DigestKind
    nullable: bool = False
    record_type: Optional[Type[Any]] = None  # set for RECORD slots
    element: Optional["FieldSpec"] = None  # set for SEQUENCE slots

    model_config = ConfigDict(frozen=True, extra="forbid", arbitrary_types_allowed=True)


class RecordShape(BaseModel):
    """Ordered field layout of a record type."""
    name: str
    fields: Tuple[FieldSpec, ...]

    model_config = ConfigDict(frozen=True, extra="forbid")

    @property
    def field_names(self) -> Tuple[str, ...]:
        return tuple(f.name for f in self.fields)


_SHAPES: Dict[type, RecordShape] = {}
_SHAPES_LOCK = threading.Lock()


def _kind_from_metadata(metadata) -> Optional[DigestKind]:
    kind = None
    for item in metadata:
        if isinstance(item, DigestKind):
            kind = item
    return kind


def _resolve(name: str, annotation: Any, metadata=(), nullable: bool = False) -> FieldSpec:
    """Resolve one annotation (possibly nested) into a FieldSpec."""
    kind = _kind_from_metadata(metadata)
    if kind is not None:
        return FieldSpec(name=name, kind=kind, nullable=nullable)

    origin = get_origin(annotation)

    if origin is Annotated:
        base, *extra = get_args(annotation)
        return _resolve(name, base, extra, nullable)

    if origin is Union or origin is types.UnionType:
        members = [arg for arg in get_args(annotation) if arg is not type(None)]
        if len(members) != 1:
            raise RecordShapeError(
                f"Field '{name}': unions are only supported as Optional[X], got {annotation!r}"
            )
        return _resolve(name, members[0], (), True)

    if origin is tuple:
        args = get_args(annotation)
        if len(args) != 2 or args[1] is not Ellipsis:
            raise RecordShapeError(
                f"Field '{name}': sequences must be declared as tuple[X, ...], got {annotation!r}"
            )
        element = _resolve(f"{name}[]", args[0])
        return FieldSpec(name=name, kind=DigestKind.SEQUENCE, nullable=nullable, element=element)

    # bool is a subclass of int, check it first
    if annotation is bool:
        return FieldSpec(name=name, kind=DigestKind.BOOLEAN, nullable=nullable)
    if annotation is int:
        return FieldSpec(name=name, kind=DigestKind.LONG, nullable=nullable)
    if annotation is float:
        return FieldSpec(name=name, kind=DigestKind.DOUBLE, nullable=nullable)
    if annotation is str:
        return FieldSpec(name=name, kind=DigestKind.STRING, nullable=nullable)

    # Local import: record.py depends on this module
    from hashcontract.kernel.record import Record
    if origin is None and isinstance(annotation, type) and issubclass(annotation, Record):
        return FieldSpec(name=name, kind=DigestKind.RECORD, nullable=nullable, record_type=annotation)

    raise RecordShapeError(f"Field '{name}': no digest kind for annotation {annotation!r}")


def shape_of(record_type: type) -> RecordShape:
    """Return the (memoised) shape of a Record subclass.

    Raises:
        RecordShapeError: If any field annotation is unsupported
    """
    shape = _SHAPES.get(record_type)
    if shape is not None:
        return shape

    with _SHAPES_LOCK:
        shape = _SHAPES.get(record_type)
        if shape is not None:
            return shape
        if not record_type.__pydantic_complete__:
            record_type.model_rebuild()
        fields = tuple(
            _resolve(name, info.annotation, info.metadata)
            for name, info in record_type.model_fields.items()
        )
        shape = RecordShape(name=f"{record_type.__module__}.{record_type.__qualname__}", fields=fields)
        _SHAPES[record_type] = shape
        logger.debug(
            "Resolved shape %s: %s",
            shape.name,
            ", ".join(f"{f.name}:{f.kind.value}" for f in shape.fields),
        )
        return shape
