"""Field type aliases and helpers.

This module provides ``Annotated`` aliases that attach a scalar width to
Python numbers, for use in BaseRecord fields and in shape annotations.
"""

from __future__ import annotations

from typing import Annotated

from ..codec.shapes import F32, F64, I8, I16, I32, I64, U8, U16, U32, U64, Scalar

UInt8 = Annotated[int, U8]
UInt16 = Annotated[int, U16]
UInt32 = Annotated[int, U32]
UInt64 = Annotated[int, U64]
Int8 = Annotated[int, I8]
Int16 = Annotated[int, I16]
Int32 = Annotated[int, I32]
Int64 = Annotated[int, I64]
Float32 = Annotated[float, F32]
Float64 = Annotated[float, F64]

_INTEGER_SCALARS = {
    (8, False): U8,
    (16, False): U16,
    (32, False): U32,
    (64, False): U64,
    (8, True): I8,
    (16, True): I16,
    (32, True): I32,
    (64, True): I64,
}


def FixedInt(*, bits: int, signed: bool = False) -> Scalar:
    """Return the integer scalar of the given width and signedness.

    Args:
        bits: Number of bits (8, 16, 32 or 64)
        signed: Whether the integer is signed (default False)

    Returns:
        Scalar usable as ``Annotated`` metadata

    Example:
        >>> class Message(BaseRecord):
        ...     temperature: Annotated[int, FixedInt(bits=16, signed=True)]
    """
    try:
        return _INTEGER_SCALARS[(bits, signed)]
    except KeyError:
        raise ValueError(f"bits must be 8, 16, 32 or 64, got {bits}") from None
