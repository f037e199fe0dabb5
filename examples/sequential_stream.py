#!/usr/bin/env python3
"""Sequential framing example for nativepack.

Several values of different shapes are appended to one buffer with no outer
header, then read back in order with a single cursor.
"""

from __future__ import annotations

from nativepack import (
    BYTES,
    I32,
    TEXT,
    U64,
    U8,
    Cursor,
    Sequence,
    TruncatedInput,
    Tuple,
    decode_from,
    encode_into,
)

HEADER = Tuple(I32, U64, BYTES, TEXT)


def main() -> None:
    """Run the sequential framing example."""
    buffer = bytearray()
    encode_into(buffer, (10, 20, bytes(range(10)), "hello cpp-love!"), HEADER)
    encode_into(buffer, [[1, 2], [3, 4]], Sequence(Sequence(U8)))
    encode_into(buffer, "done", TEXT)
    print(f"Stream: {len(buffer)} bytes")

    cursor = Cursor(buffer)
    print(f"Header:  {decode_from(HEADER, cursor)}")
    print(f"Matrix:  {decode_from(Sequence(Sequence(U8)), cursor)}")
    print(f"Trailer: {decode_from(TEXT, cursor)}")
    print(f"Consumed: {cursor.position}/{len(cursor)} bytes")

    try:
        decode_from(TEXT, cursor)
    except TruncatedInput as err:
        print(f"Reading past the end: {err}")


if __name__ == "__main__":
    main()
