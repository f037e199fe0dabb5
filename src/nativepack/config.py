"""Codec configuration.

This module provides the configuration dataclass accepted by every size,
encode and decode entry point.
"""

from __future__ import annotations

import codecs
from dataclasses import dataclass

# Canonical codec names (as reported by codecs.lookup) that map every
# character to exactly one byte.
SINGLE_BYTE_ENCODINGS = frozenset({"iso8859-1", "ascii", "cp1252"})


@dataclass(frozen=True)
class CodecConfig:
    """Configuration for size computation, encoding and decoding.

    None of these options changes the wire format of a value that encodes
    successfully.

    Attributes:
        text_encoding: Single-byte codec used to map text characters to bytes
            (default "latin-1"). Accepted: latin-1, ascii, cp1252 and their
            aliases. A multi-byte codec would break the rule that a text's
            count prefix equals its byte length, so it is rejected.

        bulk_scalars: Pack and unpack sequences of fixed-width scalars in a
            single struct call instead of element by element (default True).

    Examples:
        ```python
        from nativepack import CodecConfig, encode, TEXT

        strict = CodecConfig(text_encoding="ascii")
        data = encode("hello", TEXT, config=strict)
        ```
    """

    text_encoding: str = "latin-1"
    bulk_scalars: bool = True

    def __post_init__(self) -> None:
        """Validate configuration parameters."""
        try:
            canonical = codecs.lookup(self.text_encoding).name
        except LookupError as err:
            raise ValueError(f"Unknown text_encoding: {self.text_encoding}") from err

        if canonical not in SINGLE_BYTE_ENCODINGS:
            raise ValueError(
                f"text_encoding must be a single-byte codec "
                f"(latin-1, ascii, cp1252), got {self.text_encoding}"
            )


DEFAULT_CONFIG = CodecConfig()
