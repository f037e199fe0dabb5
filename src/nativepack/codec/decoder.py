"""Binary decoder.

This module provides decode_from(), which reads one value from a Cursor and
advances it, plus the single-shot decode() and the streaming decode_all().
"""

from __future__ import annotations

from typing import Any, Iterator, Optional

from pydantic import ValidationError

from ..config import DEFAULT_CONFIG, CodecConfig
from ..exceptions import DecodeError, SchemaError, TruncatedInput
from .cursor import BytesLike, Cursor
from .schema import resolve_shape
from .shapes import COUNT, U8, Shape, ShapeKind


def decode_from(shape: Any, cursor: Cursor, *, config: Optional[CodecConfig] = None) -> Any:
    """Decode one value of ``shape`` starting at the cursor position.

    On success the cursor is left on the first unconsumed byte, so repeated
    calls recover successively encoded values. On failure no partial value is
    returned and the cursor is left at the point of failure.

    Args:
        shape: Shape, type annotation or record class to decode
        cursor: Cursor to read from
        config: Codec configuration (defaults to DEFAULT_CONFIG)

    Returns:
        The decoded value

    Raises:
        SchemaError: If the shape annotation cannot be resolved
        TruncatedInput: If the cursor runs out of bytes
        DecodeError: If text bytes or record fields are rejected

    Note:
        Decoding with a shape other than the one that was encoded at the
        cursor position is not detected; the result is meaningless.
    """
    return _decode(resolve_shape(shape), cursor, config or DEFAULT_CONFIG)


def decode(shape: Any, data: BytesLike, *, config: Optional[CodecConfig] = None) -> Any:
    """Decode one value of ``shape`` from the start of ``data``.

    Bytes after the value are ignored.

    Args:
        shape: Shape, type annotation or record class to decode
        data: Encoded bytes
        config: Codec configuration (defaults to DEFAULT_CONFIG)

    Returns:
        The decoded value

    Examples:
        ```python
        from nativepack import I32, Tuple, decode

        decode(Tuple(I32, I32), b"\\x01\\x00\\x00\\x00\\x02\\x00\\x00\\x00")  # (1, 2)
        ```
    """
    return decode_from(shape, Cursor(data), config=config)


def decode_all(
    shape: Any, data: BytesLike, *, config: Optional[CodecConfig] = None
) -> Iterator[Any]:
    """Yield consecutive values of one shape until ``data`` is consumed.

    Raises:
        SchemaError: If the shape can encode to zero bytes
        TruncatedInput: If the last value is incomplete
    """
    resolved = resolve_shape(shape)
    if resolved.min_size == 0:
        raise SchemaError(f"Cannot iterate {resolved}: a value may encode to zero bytes")
    cfg = config or DEFAULT_CONFIG
    cursor = Cursor(data)
    while not cursor.at_end():
        yield _decode(resolved, cursor, cfg)


def _decode(shape: Shape, cursor: Cursor, config: CodecConfig) -> Any:
    kind = shape.kind

    # Scalar: next `width` bytes in native order
    if kind is ShapeKind.SCALAR:
        return shape.unpack(cursor.read(shape.width))  # type: ignore[attr-defined]

    # Sequence: element count, then each element from the same cursor
    if kind is ShapeKind.SEQUENCE:
        element = shape.element  # type: ignore[attr-defined]
        builder = shape.builder  # type: ignore[attr-defined]
        count = COUNT.unpack(cursor.read(COUNT.width))
        needed = count * element.min_size
        if needed > cursor.remaining():
            raise TruncatedInput(needed, cursor.remaining(), cursor.position)

        if element.kind is ShapeKind.SCALAR and config.bulk_scalars:
            raw = cursor.read(count * element.width)
            if element == U8 and builder in (bytes, bytearray):
                return builder(raw)
            return builder(element.unpack_many(raw, count))

        return builder([_decode(element, cursor, config) for _ in range(count)])

    # Text: character count, then exactly that many raw bytes
    if kind is ShapeKind.TEXT:
        offset = cursor.position
        count = COUNT.unpack(cursor.read(COUNT.width))
        raw = cursor.read(count)
        try:
            return bytes(raw).decode(config.text_encoding)
        except UnicodeDecodeError as err:
            raise DecodeError(
                f"text at offset {offset}: not valid {config.text_encoding}: {err}"
            ) from err

    # Tuple: members in declared order from the same cursor
    if kind is ShapeKind.TUPLE:
        values = tuple(_decode(member, cursor, config) for member in shape.members)  # type: ignore[attr-defined]
        try:
            return shape.build(values)  # type: ignore[attr-defined]
        except ValidationError as err:
            raise DecodeError(f"Failed to construct {shape}: {err}") from err

    raise DecodeError(f"Unsupported shape kind: {kind}")
