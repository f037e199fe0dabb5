"""Record analysis CLI command."""

from __future__ import annotations

import importlib.util
import inspect
import sys
from pathlib import Path

from structlog import get_logger

from ..codec.schema import record_shape
from ..codec.shapes import Record, Shape, ShapeKind
from ..models.base import BaseRecord

logger = get_logger()


def analyze_file(file_path: Path) -> None:
    """Analyze all BaseRecord classes in a Python file.

    Args:
        file_path: Path to Python file containing record definitions
    """
    # Load the Python module
    spec = importlib.util.spec_from_file_location("user_module", file_path)
    if spec is None or spec.loader is None:
        raise ValueError(f"Could not load module from {file_path}")

    module = importlib.util.module_from_spec(spec)
    sys.modules["user_module"] = module
    spec.loader.exec_module(module)

    # Find all BaseRecord subclasses defined in this file (not imported)
    record_classes = [
        obj
        for _name, obj in inspect.getmembers(module, inspect.isclass)
        if obj is not BaseRecord
        and issubclass(obj, BaseRecord)
        and obj.__module__ == "user_module"
    ]
    logger.debug("records found", file=str(file_path), count=len(record_classes))

    if not record_classes:
        print(f"No BaseRecord classes found in {file_path}")
        return

    print("|" * 7, "nativepack: Native Binary Serialization", "|" * 7)
    print(f"{len(record_classes)} record{'s' if len(record_classes) != 1 else ''} loaded.")
    print("Sizes are in bytes; variable members show their minimum.")
    print()

    for record_class in record_classes:
        analyze_record_class(record_class)


def analyze_record_class(record_class: type[BaseRecord]) -> None:
    """Print the wire layout of a single record class.

    Args:
        record_class: Record class to analyze
    """
    shape = record_shape(record_class)

    print(f"{'=' * 19} {record_class.__name__} {'=' * 19}")
    if shape.fixed_width is not None:
        print(f"Encoded size: {shape.fixed_width} bytes (fixed)")
    else:
        print(f"Encoded size: at least {shape.min_size} bytes (variable)")
    print()

    for i, (name, member) in enumerate(zip(shape.names, shape.members), 1):
        field_desc = f"{i}. {name}"
        size_desc = _size_desc(member)
        dots = "." * max(1, 54 - len(field_desc) - len(size_desc))
        print(f"        {field_desc}{dots}{size_desc} {_layout(member)}")

    print()


def _size_desc(shape: Shape) -> str:
    if shape.fixed_width is not None:
        return f"{shape.fixed_width}"
    return f">={shape.min_size}"


def _layout(shape: Shape) -> str:
    """Describe a member's wire layout, e.g. ``[count:8][u8 * count]``."""
    if shape.kind is ShapeKind.SEQUENCE:
        return f"[count:8][{shape.element} * count]"  # type: ignore[attr-defined]
    if shape.kind is ShapeKind.TEXT:
        return "[count:8][char * count]"
    if isinstance(shape, Record):
        return f"({shape.model.__name__}: {shape.arity} members)"
    return f"({shape})"
