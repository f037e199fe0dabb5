"""nativepack: Native Binary Serialization

A Python library for compact, deterministic binary encoding of numbers,
sequences, text and tuples, using the host's native byte order.

Key Features:
- Exact encoded size without encoding
- Append-only encoding onto caller-owned buffers
- Cursor-based decoding of back-to-back values with no outer framing
- Pydantic-based record modeling (records encode as tuples)

Wire format:
- Scalar: raw bytes, native byte order
- Sequence: 8-byte element count, then each element
- Text: 8-byte character count, then one byte per character
- Tuple: members back to back, no framing

Native byte order is not normalized, so encodings are not portable between
hosts of different endianness.

Quick Start:
    >>> from nativepack import BaseRecord, UInt16, Int32, encode, decode
    >>>
    >>> class Reading(BaseRecord):
    ...     sensor_id: UInt16
    ...     samples: list[Int32]
    ...     label: str
    >>>
    >>> reading = Reading(sensor_id=7, samples=[-1, 2], label="depth")
    >>> data = encode(reading)
    >>> decoded = decode(Reading, data)
"""

from __future__ import annotations

__version__ = "0.1.0"

from .codec import (
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
    Cursor,
    Record,
    Scalar,
    Sequence,
    Shape,
    ShapeKind,
    Text,
    Tuple,
    decode,
    decode_all,
    decode_from,
    encode,
    encode_into,
    encoded_size,
    infer_shape,
    resolve_shape,
)
from .config import DEFAULT_CONFIG, CodecConfig
from .exceptions import (
    DecodeError,
    EncodeError,
    NativepackError,
    SchemaError,
    TruncatedInput,
)
from .models import (
    BaseRecord,
    FixedInt,
    Float32,
    Float64,
    Int8,
    Int16,
    Int32,
    Int64,
    UInt8,
    UInt16,
    UInt32,
    UInt64,
)

__all__ = [
    # Core API
    "encoded_size",
    "encode",
    "encode_into",
    "decode",
    "decode_from",
    "decode_all",
    "Cursor",
    # Shapes
    "Shape",
    "ShapeKind",
    "Scalar",
    "Sequence",
    "Text",
    "Tuple",
    "Record",
    "resolve_shape",
    "infer_shape",
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
    # Records
    "BaseRecord",
    "FixedInt",
    "UInt8",
    "UInt16",
    "UInt32",
    "UInt64",
    "Int8",
    "Int16",
    "Int32",
    "Int64",
    "Float32",
    "Float64",
    # Configuration
    "CodecConfig",
    "DEFAULT_CONFIG",
    # Exceptions
    "NativepackError",
    "SchemaError",
    "EncodeError",
    "DecodeError",
    "TruncatedInput",
    # Version
    "__version__",
]
