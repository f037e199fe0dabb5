"""Unit tests for shape resolution."""

from __future__ import annotations

from typing import Annotated, Optional

import pytest

from nativepack import (
    BOOL,
    BYTES,
    F32,
    F64,
    I16,
    TEXT,
    U8,
    U32,
    BaseRecord,
    FixedInt,
    Int16,
    Record,
    SchemaError,
    Sequence,
    Tuple,
    UInt8,
    UInt32,
    infer_shape,
    resolve_shape,
)


class Point(BaseRecord):
    """Record with two scalar fields."""

    x: Int16
    y: Int16


class Track(BaseRecord):
    """Record with nested and variable fields."""

    name: str
    points: list[Point]
    flags: bytes


class TestResolveAnnotations:
    """Test annotation to shape resolution."""

    def test_shape_passthrough(self) -> None:
        """Shapes resolve to themselves."""
        shape = Sequence(U8)
        assert resolve_shape(shape) is shape

    def test_builtins(self) -> None:
        """Test types with an unambiguous layout."""
        assert resolve_shape(str) == TEXT
        assert resolve_shape(bytes) == BYTES
        assert resolve_shape(bytearray) == Sequence(U8, bytearray)
        assert resolve_shape(bool) == BOOL
        assert resolve_shape(float) == F64

    def test_annotated(self) -> None:
        """Shapes in Annotated metadata set the width."""
        assert resolve_shape(Annotated[int, U32]) == U32
        assert resolve_shape(UInt8) == U8
        assert resolve_shape(Annotated[float, F32]) == F32
        assert resolve_shape(Annotated[str, "doc"]) == TEXT

    def test_lists(self) -> None:
        """list[E] is a sequence, nested lists nest."""
        assert resolve_shape(list[UInt32]) == Sequence(U32)
        assert resolve_shape(list[list[UInt8]]) == Sequence(Sequence(U8))

    def test_tuples(self) -> None:
        """Fixed tuples are tuples, tuple[E, ...] is a sequence."""
        assert resolve_shape(tuple[UInt32, str]) == Tuple(U32, TEXT)
        assert resolve_shape(tuple[UInt8, ...]) == Sequence(U8, tuple)
        assert resolve_shape(tuple[()]) == Tuple()

    def test_sequence_of_empty_tuples(self) -> None:
        """A list of zero-size elements has no bounded encoding."""
        with pytest.raises(SchemaError, match="zero bytes"):
            resolve_shape(list[tuple[()]])

    def test_unsupported(self) -> None:
        """Test annotations without a binary layout."""
        with pytest.raises(SchemaError, match="no fixed width"):
            resolve_shape(int)

        with pytest.raises(SchemaError, match="Unsupported"):
            resolve_shape(dict[str, UInt8])

        with pytest.raises(SchemaError, match="Unsupported"):
            resolve_shape(Optional[UInt8])

        with pytest.raises(SchemaError):
            resolve_shape(list[int])

    def test_fixed_int(self) -> None:
        """FixedInt picks the matching scalar."""
        assert FixedInt(bits=16, signed=True) == I16
        assert resolve_shape(Annotated[int, FixedInt(bits=32)]) == U32

        with pytest.raises(ValueError, match="bits"):
            FixedInt(bits=12)


class TestRecordShapes:
    """Test record resolution from pydantic models."""

    def test_members_in_declaration_order(self) -> None:
        """Fields become tuple members in order."""
        shape = resolve_shape(Point)

        assert isinstance(shape, Record)
        assert shape.names == ("x", "y")
        assert shape.members == (I16, I16)
        assert shape.fixed_width == 4

    def test_nested_records(self) -> None:
        """Record fields may hold other records."""
        shape = resolve_shape(Track)

        assert shape.members == (TEXT, Sequence(resolve_shape(Point)), BYTES)
        assert shape.fixed_width is None

    def test_resolution_is_memoised(self) -> None:
        """Resolving the same class twice gives the same shape."""
        assert resolve_shape(Point) is resolve_shape(Point)

    def test_bad_field(self) -> None:
        """The failing field is named in the error."""

        class Broken(BaseRecord):
            count: int

        with pytest.raises(SchemaError, match="Broken.count"):
            resolve_shape(Broken)


class TestInferShape:
    """Test shape inference from values."""

    def test_record_instance(self) -> None:
        """Record instances carry their shape."""
        assert infer_shape(Point(x=1, y=2)) == resolve_shape(Point)

    def test_plain_values(self) -> None:
        """Test str and bytes."""
        assert infer_shape("a") == TEXT
        assert infer_shape(b"a") == BYTES

    def test_ambiguous(self) -> None:
        """Test values whose width is unknown."""
        with pytest.raises(SchemaError):
            infer_shape(1)

        with pytest.raises(SchemaError):
            infer_shape((1, 2))
