"""Property-based tests using hypothesis."""

from __future__ import annotations

from typing import Any

import pytest
from hypothesis import given
from hypothesis import strategies as st

from nativepack import (
    BOOL,
    BYTES,
    F32,
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
    EncodeError,
    Scalar,
    Sequence,
    Shape,
    ShapeKind,
    Tuple,
    TruncatedInput,
    decode,
    decode_from,
    encode,
    encode_into,
    encoded_size,
)

INTEGER_SCALARS = [U8, U16, U32, U64, I8, I16, I32, I64]

latin1_text = st.text(alphabet=st.characters(min_codepoint=0, max_codepoint=255), max_size=40)


def integers_for(scalar: Scalar) -> st.SearchStrategy[int]:
    return st.integers(min_value=scalar.min_value, max_value=scalar.max_value)


def shapes() -> st.SearchStrategy[Shape]:
    """Arbitrarily nested shapes built from integer scalars and text."""
    leaves = st.sampled_from(INTEGER_SCALARS + [TEXT])
    return st.recursive(
        leaves,
        lambda children: st.one_of(
            children.map(Sequence),
            st.lists(children, min_size=1, max_size=4).map(lambda members: Tuple(*members)),
        ),
        max_leaves=8,
    )


def values_for(shape: Shape) -> st.SearchStrategy[Any]:
    """Values matching a shape."""
    if shape.kind is ShapeKind.SCALAR:
        return integers_for(shape)  # type: ignore[arg-type]
    if shape.kind is ShapeKind.TEXT:
        return latin1_text
    if shape.kind is ShapeKind.SEQUENCE:
        return st.lists(values_for(shape.element), max_size=5)  # type: ignore[attr-defined]
    return st.tuples(*(values_for(member) for member in shape.members))  # type: ignore[attr-defined]


shape_and_value = shapes().flatmap(lambda shape: st.tuples(st.just(shape), values_for(shape)))


class TestCodecProperties:
    """Property-based tests for size, encode and decode agreement."""

    @given(case=shape_and_value)
    def test_size_matches_encoding(self, case: tuple[Shape, Any]) -> None:
        """Test encoded_size equals the encoded length."""
        shape, value = case
        assert encoded_size(value, shape) == len(encode(value, shape))

    @given(case=shape_and_value)
    def test_round_trip(self, case: tuple[Shape, Any]) -> None:
        """Test decode inverts encode."""
        shape, value = case
        assert decode(shape, encode(value, shape)) == value

    @given(first=shape_and_value, second=shape_and_value)
    def test_sequential_framing(
        self, first: tuple[Shape, Any], second: tuple[Shape, Any]
    ) -> None:
        """Test two frames decode in order from one cursor."""
        buffer = bytearray()
        encode_into(buffer, first[1], first[0])
        encode_into(buffer, second[1], second[0])

        cursor = Cursor(buffer)
        assert decode_from(first[0], cursor) == first[1]
        assert decode_from(second[0], cursor) == second[1]
        assert cursor.at_end()

    @given(case=shape_and_value, data=st.data())
    def test_truncation_detected(self, case: tuple[Shape, Any], data: st.DataObject) -> None:
        """Test any strict prefix of a non-empty encoding is truncated."""
        shape, value = case
        encoded = encode(value, shape)
        if not encoded:
            return
        cut = data.draw(st.integers(min_value=0, max_value=len(encoded) - 1))

        try:
            decode(shape, encoded[:cut])
        except TruncatedInput:
            pass
        else:
            raise AssertionError(f"prefix of {cut}/{len(encoded)} bytes decoded")

    @given(payload=st.binary(max_size=200))
    def test_bytes_round_trip(self, payload: bytes) -> None:
        """Test bytes survive unchanged."""
        data = encode(payload, BYTES)

        assert len(data) == 8 + len(payload)
        assert decode(BYTES, data) == payload

    @given(value=st.integers(min_value=0, max_value=2**32 - 1))
    def test_encode_deterministic(self, value: int) -> None:
        """Test encoding is deterministic."""
        assert encode(value, U32) == encode(value, U32)

    @given(value=st.floats(width=32, allow_nan=False))
    def test_f32_round_trip(self, value: float) -> None:
        """Test single-precision floats survive unchanged."""
        assert decode(F32, encode(value, F32)) == value

    @given(value=st.floats(allow_nan=False, allow_infinity=False))
    def test_f32_never_narrows_silently(self, value: float) -> None:
        """Test a double either round-trips exactly or is rejected."""
        try:
            data = encode(value, F32)
        except EncodeError:
            return
        assert decode(F32, data) == value

    @given(value=st.integers())
    def test_bool_accepts_only_zero_and_one(self, value: int) -> None:
        """Test integers other than 0 and 1 are not coerced to True."""
        if value in (0, 1):
            assert decode(BOOL, encode(value, BOOL)) == value
        else:
            with pytest.raises(EncodeError):
                encode(value, BOOL)
