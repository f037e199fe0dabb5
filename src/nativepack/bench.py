"""Comparative benchmark against a textual serializer.

The baseline turns a value into JSON text and back; it is only used to put
nativepack timings in perspective and is not part of the codec.
"""

from __future__ import annotations

import json
import time
from dataclasses import dataclass
from typing import Any, Callable, Optional

from structlog import get_logger

from .codec import BYTES, I32, TEXT, U64, ShapeKind, Tuple, decode, encode_into

logger = get_logger()

BENCH_SHAPE = Tuple(I32, U64, BYTES, TEXT)
BENCH_VALUE = (10, 20, bytes(range(10)), "hello cpp-love!")


@dataclass
class BenchmarkResult:
    """Timings of one benchmark run.

    Attributes:
        iterations: Number of encode+decode round trips per codec
        native_seconds: Wall time spent by nativepack
        baseline_seconds: Wall time spent by the JSON baseline
        native_mismatches: Round trips whose result differed from the input
        baseline_mismatches: Same, for the baseline
        encoded_bytes: Size of one nativepack encoding
        baseline_bytes: Size of one baseline encoding (UTF-8)
    """

    iterations: int
    native_seconds: float
    baseline_seconds: float
    native_mismatches: int
    baseline_mismatches: int
    encoded_bytes: int
    baseline_bytes: int

    @property
    def speedup(self) -> float:
        """How many times faster nativepack was than the baseline."""
        if self.native_seconds <= 0:
            return float("inf")
        return self.baseline_seconds / self.native_seconds


def to_text(value: Any) -> str:
    """Serialize a value to JSON text (bytes become lists of ints)."""
    return json.dumps(_jsonable(value))


def from_text(text: str, shape: Tuple = BENCH_SHAPE) -> tuple[Any, ...]:
    """Rebuild a tuple of ``shape`` from JSON text produced by to_text()."""
    items = json.loads(text)
    return tuple(
        member.builder(item) if member.kind is ShapeKind.SEQUENCE else item  # type: ignore[attr-defined]
        for member, item in zip(shape.members, items)
    )


def run_benchmark(
    iterations: int,
    value: Optional[tuple[Any, ...]] = None,
    shape: Optional[Tuple] = None,
) -> BenchmarkResult:
    """Time ``iterations`` round trips with nativepack and with the baseline.

    Args:
        iterations: Number of round trips per codec (must be > 0)
        value: Tuple value to round-trip (defaults to BENCH_VALUE)
        shape: Tuple shape of the value (defaults to BENCH_SHAPE)

    Returns:
        BenchmarkResult with timings and mismatch counts
    """
    if iterations <= 0:
        raise ValueError(f"iterations must be > 0, got {iterations}")

    if value is None:
        value = BENCH_VALUE
    if shape is None:
        shape = BENCH_SHAPE

    logger.debug("benchmark starting", iterations=iterations, shape=str(shape))

    native_seconds, native_mismatches = _time_round_trips(
        iterations, value, lambda: _native_round_trip(value, shape)
    )
    baseline_seconds, baseline_mismatches = _time_round_trips(
        iterations, value, lambda: from_text(to_text(value), shape)
    )

    buffer = bytearray()
    encode_into(buffer, value, shape)

    result = BenchmarkResult(
        iterations=iterations,
        native_seconds=native_seconds,
        baseline_seconds=baseline_seconds,
        native_mismatches=native_mismatches,
        baseline_mismatches=baseline_mismatches,
        encoded_bytes=len(buffer),
        baseline_bytes=len(to_text(value).encode("utf-8")),
    )
    logger.debug("benchmark finished", speedup=round(result.speedup, 2))
    return result


def _native_round_trip(value: tuple[Any, ...], shape: Tuple) -> Any:
    buffer = bytearray()
    encode_into(buffer, value, shape)
    return decode(shape, buffer)


def _time_round_trips(
    iterations: int, expected: Any, round_trip: Callable[[], Any]
) -> tuple[float, int]:
    mismatches = 0
    start = time.perf_counter()
    for _ in range(iterations):
        if round_trip() != expected:
            mismatches += 1
    return time.perf_counter() - start, mismatches


def _jsonable(value: Any) -> Any:
    if isinstance(value, (bytes, bytearray)):
        return list(value)
    if isinstance(value, (list, tuple)):
        return [_jsonable(item) for item in value]
    return value
