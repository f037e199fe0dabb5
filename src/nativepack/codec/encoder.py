"""Binary encoder.

This module provides encode_into(), which appends a value's encoding to a
caller-owned bytearray, and encode(), which returns the encoding as bytes.
"""

from __future__ import annotations

from typing import Any, Optional

from ..config import DEFAULT_CONFIG, CodecConfig
from ..exceptions import EncodeError
from .schema import infer_shape, resolve_shape
from .shapes import COUNT, U8, Shape, ShapeKind

_BYTES_LIKE = (bytes, bytearray, memoryview)


def encode_into(
    buffer: bytearray,
    value: Any,
    shape: Any = None,
    *,
    config: Optional[CodecConfig] = None,
) -> None:
    """Append the encoding of ``value`` to ``buffer``.

    Existing buffer content is never read or modified. Successive calls on
    one buffer produce a stream that successive decode_from() calls on one
    cursor read back in the same order. If encoding fails the buffer is left
    untouched.

    Args:
        buffer: Growable buffer to append to
        value: Value to encode
        shape: Shape or type annotation of the value; inferred for records,
            str, bytes and bytearray when omitted
        config: Codec configuration (defaults to DEFAULT_CONFIG)

    Raises:
        SchemaError: If no shape is given and none can be inferred
        EncodeError: If the value cannot be represented by the shape

    Examples:
        ```python
        from nativepack import Cursor, Sequence, U8, decode_from, encode_into

        buffer = bytearray()
        encode_into(buffer, [1, 2], Sequence(U8))
        encode_into(buffer, [3, 4], Sequence(U8))

        cursor = Cursor(buffer)
        decode_from(Sequence(U8), cursor)  # [1, 2]
        decode_from(Sequence(U8), cursor)  # [3, 4]
        ```
    """
    resolved = infer_shape(value) if shape is None else resolve_shape(shape)
    scratch = bytearray()
    _encode(scratch, resolved, value, config or DEFAULT_CONFIG)
    buffer += scratch


def encode(value: Any, shape: Any = None, *, config: Optional[CodecConfig] = None) -> bytes:
    """Encode a value and return its bytes.

    Args:
        value: Value to encode
        shape: Shape or type annotation of the value
        config: Codec configuration (defaults to DEFAULT_CONFIG)

    Returns:
        Encoded bytes

    Example:
        >>> encode(10, U32) == (10).to_bytes(4, sys.byteorder)
        True
    """
    buffer = bytearray()
    encode_into(buffer, value, shape, config=config)
    return bytes(buffer)


def _encode(buffer: bytearray, shape: Shape, value: Any, config: CodecConfig) -> None:
    kind = shape.kind

    # Scalar: raw native-order bytes
    if kind is ShapeKind.SCALAR:
        buffer += shape.pack(value)  # type: ignore[attr-defined]
        return

    # Sequence: element count, then each element
    if kind is ShapeKind.SEQUENCE:
        element = shape.element  # type: ignore[attr-defined]
        try:
            count = len(value)
        except TypeError as err:
            raise EncodeError(
                f"{shape}: expected a sized collection, got {type(value).__name__}"
            ) from err
        buffer += COUNT.pack(count)

        if element == U8 and isinstance(value, _BYTES_LIKE):
            buffer += value
        elif element.kind is ShapeKind.SCALAR and config.bulk_scalars:
            buffer += element.pack_many(value, count)
        else:
            for item in value:
                _encode(buffer, element, item, config)
        return

    # Text: character count, then raw character bytes
    if kind is ShapeKind.TEXT:
        if not isinstance(value, str):
            raise EncodeError(f"text: expected str, got {type(value).__name__}")
        try:
            raw = value.encode(config.text_encoding)
        except UnicodeEncodeError as err:
            raise EncodeError(
                f"text: character {value[err.start]!r} at index {err.start} "
                f"is not encodable with {config.text_encoding}"
            ) from err
        buffer += COUNT.pack(len(value))
        buffer += raw
        return

    # Tuple: members back to back, no framing
    if kind is ShapeKind.TUPLE:
        values = shape.values_of(value)  # type: ignore[attr-defined]
        for member, item in zip(shape.members, values):  # type: ignore[attr-defined]
            _encode(buffer, member, item, config)
        return

    raise EncodeError(f"Unsupported shape kind: {kind}")
