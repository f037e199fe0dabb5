"""Native-order binary codec for nativepack.

This module provides size calculation, encoding and decoding of scalars,
sequences, text and tuples, plus the shape descriptors they dispatch on.
"""

from __future__ import annotations

from .cursor import Cursor
from .decoder import decode, decode_all, decode_from
from .encoder import encode, encode_into
from .schema import infer_shape, record_shape, resolve_shape
from .shapes import (
    BOOL,
    BYTES,
    COUNT,
    F32,
    F64,
    I8,
    I16,
    I32,
    I64,
    TEXT,
    U8,
    U16,
    U32,
    U64,
    Record,
    Scalar,
    Sequence,
    Shape,
    ShapeKind,
    Text,
    Tuple,
)
from .sizing import encoded_size

__all__ = [
    "encoded_size",
    "encode",
    "encode_into",
    "decode",
    "decode_from",
    "decode_all",
    "Cursor",
    "resolve_shape",
    "infer_shape",
    "record_shape",
    "Shape",
    "ShapeKind",
    "Scalar",
    "Sequence",
    "Text",
    "Tuple",
    "Record",
    "U8",
    "U16",
    "U32",
    "U64",
    "I8",
    "I16",
    "I32",
    "I64",
    "BOOL",
    "F32",
    "F64",
    "COUNT",
    "TEXT",
    "BYTES",
]
