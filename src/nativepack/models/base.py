"""Base record class and nativepack-specific Pydantic configuration.

This module provides the BaseRecord class that record types should inherit
from. A record encodes as a tuple of its fields in declaration order.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict


class BaseRecord(BaseModel):
    """Base class for records encoded as fixed-arity tuples.

    Integer fields need an explicit width, given either with a field alias
    (UInt32, Int8, ...) or with a shape in ``Annotated`` metadata. The width
    also bounds the values pydantic accepts.

    Example:
        >>> class Reading(BaseRecord):
        ...     sensor_id: UInt16
        ...     samples: list[Int32]
        ...     label: str
        >>>
        >>> reading = Reading(sensor_id=7, samples=[-1, 2], label="depth")
        >>> data = encode(reading)
        >>> decode(Reading, data) == reading
        True
    """

    model_config = ConfigDict(
        # Coerce compatible input types (e.g. tuple -> list)
        strict=False,
        # Shapes appear as Annotated metadata
        arbitrary_types_allowed=True,
        # Keep width bounds enforced after construction
        validate_assignment=True,
        # Every field is a tuple member, extras would be silently dropped
        extra="forbid",
    )
