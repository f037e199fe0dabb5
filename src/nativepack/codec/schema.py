"""Shape resolution from Python type annotations and pydantic models.

This module turns annotations such as ``list[Annotated[int, U8]]`` or a
BaseRecord subclass into the shape descriptors the codec works with.
"""

from __future__ import annotations

from functools import lru_cache
from typing import Annotated, Any, Optional, get_args, get_origin

from pydantic import BaseModel
from pydantic.fields import FieldInfo

from ..exceptions import SchemaError
from .shapes import BOOL, BYTES, F64, TEXT, U8, Record, Sequence, Shape, Tuple


def resolve_shape(annotation: Any) -> Shape:
    """Return the shape described by ``annotation``.

    Args:
        annotation: A Shape instance, a type annotation or a pydantic model class

    Returns:
        The resolved shape

    Raises:
        SchemaError: If the annotation has no unambiguous binary layout

    Examples:
        >>> resolve_shape(list[Annotated[int, U16]])
        Sequence(element=Scalar(name='u16', format='H'), builder=<class 'list'>)
        >>> resolve_shape(tuple[UInt32, str])
        Tuple(members=(Scalar(name='u32', format='I'), Text()))
    """
    if isinstance(annotation, Shape):
        return annotation
    try:
        return _resolve_cached(annotation)
    except TypeError:
        # Unhashable annotation metadata, resolve without memoising
        return _resolve(annotation)


def infer_shape(value: Any) -> Shape:
    """Return the shape of a value whose layout is unambiguous from its type.

    Only pydantic records, str, bytes and bytearray qualify; plain ints,
    lists and tuples need an explicit shape.

    Raises:
        SchemaError: If the value's shape cannot be inferred
    """
    if isinstance(value, BaseModel):
        return resolve_shape(type(value))
    if isinstance(value, str):
        return TEXT
    if isinstance(value, bytes):
        return BYTES
    if isinstance(value, bytearray):
        return Sequence(U8, bytearray)
    raise SchemaError(
        f"Cannot infer a shape for {type(value).__name__}; pass shape= explicitly"
    )


@lru_cache(maxsize=None)
def _resolve_cached(annotation: Any) -> Shape:
    return _resolve(annotation)


def _resolve(annotation: Any) -> Shape:
    origin = get_origin(annotation)
    args = get_args(annotation)

    if origin is Annotated:
        shape = _shape_in_metadata(annotation.__metadata__)
        if shape is not None:
            return shape
        return resolve_shape(args[0])

    if origin is list:
        if len(args) != 1:
            raise SchemaError(f"{annotation}: list needs exactly one element type")
        return Sequence(resolve_shape(args[0]))

    if origin is tuple:
        if len(args) == 2 and args[1] is Ellipsis:
            return Sequence(resolve_shape(args[0]), tuple)
        if not args or args == ((),):
            return Tuple()
        return Tuple(*(resolve_shape(arg) for arg in args))

    if origin is not None:
        raise SchemaError(f"Unsupported annotation: {annotation}")

    # bool before any numeric check, it is an int subclass
    if annotation is bool:
        return BOOL
    if annotation is float:
        return F64
    if annotation is str:
        return TEXT
    if annotation is bytes:
        return BYTES
    if annotation is bytearray:
        return Sequence(U8, bytearray)
    if annotation is int:
        raise SchemaError(
            "int has no fixed width; annotate it, e.g. Annotated[int, U32] or UInt32"
        )
    if isinstance(annotation, type) and issubclass(annotation, BaseModel):
        return record_shape(annotation)

    raise SchemaError(f"Unsupported annotation: {annotation!r}")


def record_shape(model_class: type[BaseModel]) -> Record:
    """Build the record shape of a pydantic model.

    Members follow field declaration order. A field's shape comes from a
    Shape in its ``Annotated`` metadata if present, otherwise from its type.

    Raises:
        SchemaError: If any field cannot be resolved
    """
    fields = []
    for name, field_info in model_class.model_fields.items():
        try:
            shape = _field_shape(field_info)
        except SchemaError as err:
            raise SchemaError(f"{model_class.__name__}.{name}: {err}") from err
        fields.append((name, shape))

    return Record(model_class, fields)


def _field_shape(field_info: FieldInfo) -> Shape:
    # Pydantic v2 moves Annotated extras into metadata and strips them from
    # the annotation
    shape = _shape_in_metadata(field_info.metadata)
    if shape is not None:
        return shape
    if field_info.annotation is None:
        raise SchemaError("field has no type annotation")
    return resolve_shape(field_info.annotation)


def _shape_in_metadata(metadata: Any) -> Optional[Shape]:
    for item in metadata:
        if isinstance(item, Shape):
            return item
    return None
