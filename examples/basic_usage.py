#!/usr/bin/env python3
"""Basic usage example for fdbtuple.

This example demonstrates:
1. Building tuples from element models
2. Encoding to order-preserving keys
3. Decoding back to elements
4. Range bounds for a tuple prefix
5. Writing a versionstamped key
"""

from __future__ import annotations

from fdbtuple import (
    IncompleteVersionstamp,
    IncompleteVersionstampElement,
    IntElement,
    NullElement,
    TextElement,
    TupleElement,
    decode,
    encode,
    encode_versionstamped_key,
    pack,
    tuple_range,
    unpack,
)


def main() -> None:
    """Run the basic usage example."""
    print("=" * 60)
    print("fdbtuple Basic Usage Example")
    print("=" * 60)
    print()

    print("1. Building a tuple...")
    elements = [
        TextElement(value="users"),
        IntElement(value=42),
        TupleElement(elements=(NullElement(), TextElement(value="admin"))),
    ]
    for element in elements:
        print(f"   {element!r}")
    print()

    print("2. Encoding...")
    key = encode(elements)
    print(f"   Encoded size: {len(key)} bytes")
    print(f"   Hex: {key.hex()}")
    print()

    print("3. Decoding...")
    decoded = decode(key)
    if decoded == tuple(elements):
        print("   ✓ Round-trip successful! Elements match.")
    else:
        print("   ✗ Round-trip failed! Elements don't match.")
    print()

    print("4. Sorting keys...")
    values = [("users", 10), ("users", -5), ("users", 2**70), ("orders", 1)]
    for packed in sorted(pack(v) for v in values):
        print(f"   {packed.hex():<32} {unpack(packed)}")

    begin, end = tuple_range([TextElement(value="users")])
    print(f"   Range for ('users',): [{begin.hex()}, {end.hex()})")
    print()

    print("5. Versionstamped key...")
    stamped = encode_versionstamped_key(
        b"\x01",
        [
            TextElement(value="log"),
            IncompleteVersionstampElement(value=IncompleteVersionstamp(user_version=7)),
        ],
    )
    offset = int.from_bytes(stamped[-2:], "little")
    print(f"   Key: {stamped.hex()}")
    print(f"   Placeholder offset: {offset}")
    print()

    print("=" * 60)
    print("Example complete!")
    print("=" * 60)


if __name__ == "__main__":
    main()
