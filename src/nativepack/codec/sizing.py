"""Encoded size calculation.

This module computes the exact number of bytes a value will occupy once
encoded, without encoding it.
"""

from __future__ import annotations

from typing import Any, Optional

from ..config import CodecConfig
from ..exceptions import EncodeError
from .schema import infer_shape, resolve_shape
from .shapes import COUNT, Shape, ShapeKind


def encoded_size(value: Any, shape: Any = None, *, config: Optional[CodecConfig] = None) -> int:
    """Calculate the encoded size of a value in bytes.

    The result always equals ``len(encode(value, shape))``.

    Args:
        value: Value to measure
        shape: Shape or type annotation of the value; inferred for records,
            str, bytes and bytearray when omitted
        config: Codec configuration (accepted for symmetry with encode/decode;
            no option changes the encoded size)

    Returns:
        Size in bytes

    Raises:
        SchemaError: If no shape is given and none can be inferred
        EncodeError: If the value does not match the shape's structure

    Example:
        >>> encoded_size([1, 2], Sequence(U8))
        10
        >>> encoded_size("hello")
        13
    """
    resolved = infer_shape(value) if shape is None else resolve_shape(shape)
    return _size(resolved, value)


def _size(shape: Shape, value: Any) -> int:
    kind = shape.kind

    # Scalar: fixed width from the declared type
    if kind is ShapeKind.SCALAR:
        return shape.fixed_width  # type: ignore[return-value]

    # Sequence: count prefix plus every element
    if kind is ShapeKind.SEQUENCE:
        try:
            count = len(value)
        except TypeError as err:
            raise EncodeError(f"{shape}: expected a sized collection, got {type(value).__name__}") from err
        element = shape.element  # type: ignore[attr-defined]
        width = element.fixed_width
        if width is not None:
            return COUNT.width + count * width
        return COUNT.width + sum(_size(element, item) for item in value)

    # Text: count prefix plus one byte per character
    if kind is ShapeKind.TEXT:
        return COUNT.width + len(value)

    # Tuple: members back to back
    if kind is ShapeKind.TUPLE:
        members = shape.members  # type: ignore[attr-defined]
        values = shape.values_of(value)  # type: ignore[attr-defined]
        return sum(_size(member, item) for member, item in zip(members, values))

    raise EncodeError(f"Unsupported shape kind: {kind}")
