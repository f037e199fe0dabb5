"""Shape descriptors.

A shape tells the size calculator, the encoder and the decoder how a value is
laid out on the wire. There are exactly four kinds:

- Scalar: fixed-width raw bytes in native byte order
- Sequence: 8-byte element count, then each element
- Text: 8-byte character count, then one raw byte per character
- Tuple: each member in declared order, no framing

Shapes are immutable and hashable, so they can be shared freely and used as
``Annotated`` metadata on pydantic fields.
"""

from __future__ import annotations

import enum
import math
import struct
from dataclasses import dataclass, field
from functools import cached_property
from typing import Any, Callable, ClassVar, Iterable, Optional

from pydantic import GetCoreSchemaHandler
from pydantic_core import CoreSchema, core_schema

from ..exceptions import EncodeError, SchemaError

_INTEGER_FORMATS = frozenset("bBhHiIqQ")

# Formats struct accepts values for that do not decode back unchanged
_LOSSY_FORMATS = frozenset("?f")


class ShapeKind(enum.Enum):
    """Closed classification every codec component dispatches on."""

    SCALAR = "scalar"
    SEQUENCE = "sequence"
    TEXT = "text"
    TUPLE = "tuple"


class Shape:
    """Base class for all shape descriptors."""

    kind: ClassVar[ShapeKind]

    @property
    def fixed_width(self) -> Optional[int]:
        """Encoded width if it never depends on the value, else None."""
        return None

    @property
    def min_size(self) -> int:
        """Smallest number of bytes any value of this shape encodes to."""
        raise NotImplementedError


@dataclass(frozen=True)
class Scalar(Shape):
    """Fixed-width number encoded as its raw native-order bytes.

    Attributes:
        name: Short type name used in layouts and error messages
        format: struct format character (b, B, h, H, i, I, q, Q, ?, f, d)

    Example:
        >>> U32.width
        4
        >>> U32.pack(10) == (10).to_bytes(4, sys.byteorder)
        True
    """

    kind: ClassVar[ShapeKind] = ShapeKind.SCALAR

    name: str
    format: str
    _struct: struct.Struct = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        if len(self.format) != 1:
            raise SchemaError(f"Scalar {self.name}: format must be one character, got {self.format!r}")
        try:
            # "=" selects native byte order with standard (platform independent) sizes
            packer = struct.Struct("=" + self.format)
        except struct.error as err:
            raise SchemaError(f"Scalar {self.name}: invalid format {self.format!r}") from err
        object.__setattr__(self, "_struct", packer)

    def __str__(self) -> str:
        return self.name

    @property
    def width(self) -> int:
        return self._struct.size

    @property
    def fixed_width(self) -> int:
        return self._struct.size

    @property
    def min_size(self) -> int:
        return self._struct.size

    @property
    def is_integer(self) -> bool:
        return self.format in _INTEGER_FORMATS

    @property
    def signed(self) -> bool:
        return self.format.islower()

    @property
    def min_value(self) -> Optional[int]:
        """Smallest representable integer, None for non-integer scalars."""
        if not self.is_integer:
            return None
        return -(1 << (self.width * 8 - 1)) if self.signed else 0

    @property
    def max_value(self) -> Optional[int]:
        """Largest representable integer, None for non-integer scalars."""
        if not self.is_integer:
            return None
        bits = self.width * 8 - 1 if self.signed else self.width * 8
        return (1 << bits) - 1

    def pack(self, value: Any) -> bytes:
        """Return the raw bytes of a single value.

        Raises:
            EncodeError: If the value does not fit, has the wrong type or
                would not decode back to an equal value
        """
        try:
            raw = self._struct.pack(value)
        except (struct.error, OverflowError) as err:
            raise EncodeError(f"{self.name}: cannot encode {value!r}: {err}") from err
        if self.format in _LOSSY_FORMATS:
            self._check_exact(value, raw)
        return raw

    def pack_many(self, values: Iterable[Any], count: int) -> bytes:
        """Return the raw bytes of ``count`` values packed back to back."""
        if self.format in _LOSSY_FORMATS:
            return b"".join(self.pack(value) for value in values)
        try:
            return struct.pack(f"={count}{self.format}", *values)
        except (struct.error, OverflowError) as err:
            raise EncodeError(f"{self.name}: cannot encode sequence element: {err}") from err

    def unpack(self, data: Any) -> Any:
        return self._struct.unpack(data)[0]

    def unpack_many(self, data: Any, count: int) -> tuple[Any, ...]:
        return struct.unpack(f"={count}{self.format}", data)

    def validate(self, value: Any) -> Any:
        """Check used when the scalar annotates a pydantic field.

        Integers are range checked. f32 values are rounded to the nearest
        single-precision float, which is the value the field will decode to.
        """
        if self.is_integer and not self.min_value <= value <= self.max_value:  # type: ignore[operator]
            raise ValueError(
                f"value {value} out of range for {self.name} [{self.min_value}, {self.max_value}]"
            )
        if self.format == "f":
            try:
                return self.unpack(self._struct.pack(value))
            except OverflowError as err:
                raise ValueError(f"value {value} out of range for {self.name}") from err
        return value

    def _check_exact(self, value: Any, raw: bytes) -> None:
        # struct narrows doubles to f32 and packs any truthy object as True
        if self.format == "?" and not (isinstance(value, int) and value in (0, 1)):
            raise EncodeError(f"{self.name}: cannot encode {value!r}: expected a bool")
        decoded = self.unpack(raw)
        if decoded != value and not (math.isnan(decoded) and math.isnan(value)):
            raise EncodeError(
                f"{self.name}: cannot encode {value!r} exactly (would decode as {decoded!r})"
            )

    def __get_pydantic_core_schema__(
        self, source_type: Any, handler: GetCoreSchemaHandler
    ) -> CoreSchema:
        return core_schema.no_info_after_validator_function(self.validate, handler(source_type))


@dataclass(frozen=True)
class Sequence(Shape):
    """Dynamically sized homogeneous collection.

    Attributes:
        element: Shape of every element
        builder: Callable turning an iterable of decoded elements into the
            collection returned by the decoder (list, tuple, bytes, ...).
            It has no effect on the wire format.
    """

    kind: ClassVar[ShapeKind] = ShapeKind.SEQUENCE

    element: Shape
    builder: Callable[[Iterable[Any]], Any] = list

    def __post_init__(self) -> None:
        if not isinstance(self.element, Shape):
            raise SchemaError(f"Sequence element must be a Shape, got {self.element!r}")
        # A count read from the wire must be bounded by the bytes behind it
        if self.element.min_size == 0:
            raise SchemaError(f"Sequence element {self.element} encodes to zero bytes")

    def __str__(self) -> str:
        return f"seq<{self.element}>"

    @property
    def min_size(self) -> int:
        return COUNT.width


@dataclass(frozen=True)
class Text(Shape):
    """Character string, one byte per character."""

    kind: ClassVar[ShapeKind] = ShapeKind.TEXT

    def __str__(self) -> str:
        return "text"

    @property
    def min_size(self) -> int:
        return COUNT.width


@dataclass(frozen=True, init=False)
class Tuple(Shape):
    """Fixed-arity heterogeneous collection, members in declared order.

    Example:
        >>> point = Tuple(I32, I32)
        >>> point.arity
        2
    """

    kind: ClassVar[ShapeKind] = ShapeKind.TUPLE

    members: tuple[Shape, ...]

    def __init__(self, *members: Shape) -> None:
        for member in members:
            if not isinstance(member, Shape):
                raise SchemaError(f"Tuple member must be a Shape, got {member!r}")
        object.__setattr__(self, "members", tuple(members))

    def __str__(self) -> str:
        return "tuple<" + ", ".join(str(member) for member in self.members) + ">"

    @property
    def arity(self) -> int:
        return len(self.members)

    @cached_property
    def fixed_width(self) -> Optional[int]:  # type: ignore[override]
        widths = [member.fixed_width for member in self.members]
        if any(width is None for width in widths):
            return None
        return sum(widths)  # type: ignore[arg-type]

    @cached_property
    def min_size(self) -> int:  # type: ignore[override]
        return sum(member.min_size for member in self.members)

    def values_of(self, value: Any) -> tuple[Any, ...]:
        """Return the member values of ``value`` in declared order."""
        try:
            values = tuple(value)
        except TypeError as err:
            raise EncodeError(f"{self}: expected a tuple, got {type(value).__name__}") from err
        if len(values) != self.arity:
            raise EncodeError(f"{self}: expected {self.arity} members, got {len(values)}")
        return values

    def build(self, values: tuple[Any, ...]) -> Any:
        """Assemble decoded member values into the output value."""
        return values


@dataclass(frozen=True, init=False)
class Record(Tuple):
    """Tuple whose members are the fields of a pydantic model.

    Values are model instances; members are read by attribute name and the
    decoder constructs the model from the decoded fields.

    Attributes:
        model: The pydantic model class
        names: Field names in declaration order
    """

    model: type
    names: tuple[str, ...]

    def __init__(self, model: type, fields: Iterable[tuple[str, Shape]]) -> None:
        items = list(fields)
        super().__init__(*(shape for _, shape in items))
        object.__setattr__(self, "model", model)
        object.__setattr__(self, "names", tuple(name for name, _ in items))

    def __str__(self) -> str:
        return self.model.__name__

    def values_of(self, value: Any) -> tuple[Any, ...]:
        if not isinstance(value, self.model):
            raise EncodeError(
                f"{self}: expected {self.model.__name__}, got {type(value).__name__}"
            )
        return tuple(getattr(value, name) for name in self.names)

    def build(self, values: tuple[Any, ...]) -> Any:
        return self.model(**dict(zip(self.names, values)))


U8 = Scalar("u8", "B")
U16 = Scalar("u16", "H")
U32 = Scalar("u32", "I")
U64 = Scalar("u64", "Q")
I8 = Scalar("i8", "b")
I16 = Scalar("i16", "h")
I32 = Scalar("i32", "i")
I64 = Scalar("i64", "q")
BOOL = Scalar("bool", "?")
F32 = Scalar("f32", "f")
F64 = Scalar("f64", "d")

# Element/character count prefix of sequences and text
COUNT = U64

TEXT = Text()
BYTES = Sequence(U8, bytes)
