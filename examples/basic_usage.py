#!/usr/bin/env python3
"""Basic usage example for nativepack.

This example demonstrates:
1. Defining a record with Pydantic
2. Calculating its encoded size
3. Encoding to native binary format
4. Decoding back to a Pydantic model
"""

from __future__ import annotations

from nativepack import BaseRecord, Int32, UInt16, decode, encode, encoded_size


class Reading(BaseRecord):
    """Sensor reading.

    Integer fields carry their width; text and lists are count-prefixed.
    """

    sensor_id: UInt16
    samples: list[Int32]
    label: str


def main() -> None:
    """Run the basic usage example."""
    print("=" * 60)
    print("nativepack Basic Usage Example")
    print("=" * 60)
    print()

    print("1. Creating a reading...")
    reading = Reading(sensor_id=7, samples=[-12, 40, 3], label="depth")
    print(f"   {reading!r}")
    print()

    print("2. Calculating the encoded size...")
    size = encoded_size(reading)
    print("   sensor_id: 2 bytes, samples: 8 + 3 * 4 bytes, label: 8 + 5 bytes")
    print(f"   Total: {size} bytes")
    print()

    print("3. Encoding...")
    data = encode(reading)
    print(f"   {len(data)} bytes: {data.hex()}")
    print()

    print("4. Decoding...")
    decoded = decode(Reading, data)
    print(f"   {decoded!r}")
    assert decoded == reading
    print("   Round trip OK")


if __name__ == "__main__":
    main()
