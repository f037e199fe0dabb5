"""Pydantic record modeling for nativepack.

This module provides the BaseRecord class and field aliases for defining
records encoded as tuples.
"""

from __future__ import annotations

from .base import BaseRecord
from .fields import (
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
]
