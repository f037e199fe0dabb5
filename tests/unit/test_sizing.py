"""Unit tests for encoded size calculation."""

from __future__ import annotations

import pytest

from nativepack import (
    BYTES,
    I32,
    TEXT,
    U8,
    U16,
    U32,
    U64,
    EncodeError,
    SchemaError,
    Sequence,
    Tuple,
    encode,
    encoded_size,
)


class TestScalarSize:
    """Test scalar sizes."""

    def test_ints(self) -> None:
        """Size is the type's width regardless of the value."""
        assert encoded_size(2, U16) == 2
        assert encoded_size(10, U32) == 4
        assert encoded_size(0, U64) == 8
        assert encoded_size(2**64 - 1, U64) == 8


class TestSequenceSize:
    """Test sequence sizes."""

    def test_fixed_width_elements(self) -> None:
        """Count prefix plus count * width."""
        assert encoded_size([0, 1, 2], Sequence(U8)) == 8 + 3
        assert encoded_size([0, 8], Sequence(U64)) == 8 + 2 * 8

    def test_empty(self) -> None:
        """An empty sequence is just the count."""
        assert encoded_size([], Sequence(U32)) == 8

    def test_nested_sequences(self) -> None:
        """Every inner sequence carries its own count."""
        value = [[1, 2], [3, 4]]
        assert encoded_size(value, Sequence(Sequence(U8))) == 28

    def test_variable_elements(self) -> None:
        """Sequences of text sum each element's size."""
        assert encoded_size(["a", "bcd", ""], Sequence(TEXT)) == 8 + 9 + 11 + 8

    def test_bytes(self, sample_bytes: bytes) -> None:
        """Bytes values are sequences of u8."""
        assert encoded_size(sample_bytes, BYTES) == 8 + len(sample_bytes)

    def test_not_sized(self) -> None:
        """A value without a length cannot be a sequence."""
        with pytest.raises(EncodeError, match="sized collection"):
            encoded_size(5, Sequence(U8))


class TestTextSize:
    """Test text sizes."""

    def test_text(self) -> None:
        """Count prefix plus one byte per character."""
        assert encoded_size("hello", TEXT) == 8 + 5
        assert encoded_size("", TEXT) == 8

    def test_latin1_characters(self) -> None:
        """Every character is one byte, including non-ASCII ones."""
        assert encoded_size("café", TEXT) == 12
        assert len(encode("café", TEXT)) == 12


class TestTupleSize:
    """Test tuple sizes."""

    def test_no_framing(self) -> None:
        """A tuple is the sum of its members."""
        assert encoded_size((0, "hi"), Tuple(U64, TEXT)) == 8 + 8 + 2
        assert encoded_size(([97, 98, 99], 10, 20), Tuple(Sequence(U16), I32, I32)) == 8 + 6 + 8

    def test_empty_tuple(self) -> None:
        """A zero-arity tuple occupies no bytes."""
        assert encoded_size((), Tuple()) == 0

    def test_arity_mismatch(self) -> None:
        """Arity is part of the shape."""
        with pytest.raises(EncodeError, match="expected 2 members"):
            encoded_size((1, 2, 3), Tuple(I32, I32))


class TestInference:
    """Test shape inference when no shape is given."""

    def test_inferred(self) -> None:
        """str and bytes have unambiguous shapes."""
        assert encoded_size("hello") == 13
        assert encoded_size(b"\x01\x02") == 10
        assert encoded_size(bytearray(3)) == 11

    def test_not_inferred(self) -> None:
        """Plain ints have no width."""
        with pytest.raises(SchemaError, match="shape="):
            encoded_size(5)

        with pytest.raises(SchemaError):
            encoded_size([1, 2])
