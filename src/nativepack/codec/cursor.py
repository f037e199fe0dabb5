"""Read cursor over an encoded byte sequence.

The cursor never owns the underlying bytes; it keeps a reference to the
caller's sequence and a position that decode calls advance. Each read copies
out only the bytes it returns, so a bytearray can keep growing while a cursor
over it is in use.
"""

from __future__ import annotations

from typing import Union

from ..exceptions import TruncatedInput

BytesLike = Union[bytes, bytearray, memoryview]


class Cursor:
    """Position marker into an existing byte sequence.

    Every successful read advances the position by exactly the number of
    bytes returned. A read that needs more bytes than remain raises
    TruncatedInput and leaves the position unchanged.

    Example:
        >>> cursor = Cursor(data)
        >>> first = decode_from(Sequence(U8), cursor)
        >>> second = decode_from(Sequence(U8), cursor)
        >>> cursor.at_end()
        True
    """

    def __init__(self, data: BytesLike, position: int = 0) -> None:
        """Initialize a cursor over ``data``.

        Args:
            data: Byte sequence to read from (not copied)
            position: Starting offset

        Raises:
            ValueError: If position is outside the sequence
        """
        if isinstance(data, memoryview) and data.format != "B":
            data = data.cast("B")
        self._data = data
        if position < 0 or position > len(data):
            raise ValueError(f"position must be 0-{len(data)}, got {position}")
        self._position = position

    def __len__(self) -> int:
        return len(self._data)

    def __repr__(self) -> str:
        return f"Cursor(position={self._position}, length={len(self._data)})"

    @property
    def position(self) -> int:
        """Offset of the first unconsumed byte."""
        return self._position

    def remaining(self) -> int:
        """Return the number of unconsumed bytes."""
        # The caller may have shrunk the sequence below the position
        return max(0, len(self._data) - self._position)

    def at_end(self) -> bool:
        """Return True once every byte has been consumed."""
        return self._position >= len(self._data)

    def peek(self, num_bytes: int) -> bytes:
        """Return the next ``num_bytes`` bytes without consuming them.

        Raises:
            ValueError: If num_bytes is negative
            TruncatedInput: If fewer than num_bytes remain
        """
        if num_bytes < 0:
            raise ValueError(f"num_bytes cannot be negative, got {num_bytes}")
        remaining = self.remaining()
        if num_bytes > remaining:
            raise TruncatedInput(num_bytes, remaining, self._position)
        chunk = self._data[self._position : self._position + num_bytes]
        return chunk if isinstance(chunk, bytes) else bytes(chunk)

    def read(self, num_bytes: int) -> bytes:
        """Consume and return the next ``num_bytes`` bytes.

        Raises:
            ValueError: If num_bytes is negative
            TruncatedInput: If fewer than num_bytes remain
        """
        chunk = self.peek(num_bytes)
        self._position += num_bytes
        return chunk
