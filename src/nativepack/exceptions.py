"""Exception hierarchy for nativepack.

All exceptions inherit from NativepackError for easy catching of any
nativepack-specific error.
"""

from __future__ import annotations


class NativepackError(Exception):
    """Base exception for all nativepack errors."""

    pass


class SchemaError(NativepackError):
    """Raised when a type annotation or record cannot be turned into a shape.

    Examples:
        - Bare ``int`` without a width (use ``Annotated[int, U32]``)
        - Unsupported annotation (dict, set, Optional, ...)
        - Invalid scalar definition
    """

    pass


class EncodeError(NativepackError):
    """Raised when a value cannot be represented by its declared shape.

    Examples:
        - Integer out of range for the scalar width
        - Tuple arity differs from the declared members
        - Character that does not fit in one byte
    """

    pass


class DecodeError(NativepackError):
    """Raised when decoding binary data fails.

    Examples:
        - Truncated data (see TruncatedInput)
        - Text bytes rejected by the configured codec
        - Record fields rejected by model validation
    """

    pass


class TruncatedInput(DecodeError):
    """Raised when a decode step needs more bytes than remain in the cursor.

    Attributes:
        needed: Number of bytes the failing step required
        remaining: Number of bytes left after the cursor position
        position: Cursor position at the point of failure
    """

    def __init__(self, needed: int, remaining: int, position: int) -> None:
        self.needed = needed
        self.remaining = remaining
        self.position = position
        super().__init__(
            f"Truncated input at offset {position}: need {needed} bytes, have {remaining}"
        )
