"""Key explanation CLI command."""

from __future__ import annotations

from ..codec import encode
from ..config import CodecConfig
from ..keys import decode_key
from ..models.elements import Element, TupleElement


def explain_key(data: bytes, prefix: bytes = b"", config: CodecConfig | None = None) -> None:
    """Decode a key and print a per-element breakdown.

    Args:
        data: Encoded key, including prefix
        prefix: Prefix to strip before decoding
        config: Codec options
    """
    elements = decode_key(prefix, data, config)

    print("|" * 7, "fdbtuple: Order-Preserving Tuple Codec", "|" * 7)
    print(f"{len(elements)} element{'s' if len(elements) != 1 else ''} decoded.")
    if prefix:
        print(f"Prefix: {prefix.hex()} ({len(prefix)} bytes)")
    print()

    offset = len(prefix)
    for element in elements:
        offset = _explain_element(element, offset, indent=0)

    print()
    print(f"Total: {len(data)} bytes")


def _explain_element(element: Element, offset: int, indent: int) -> int:
    """Print one element line (recursing into nested tuples) and return the next offset."""
    encoded = encode([element])
    pad = "  " * indent
    if isinstance(element, TupleElement):
        print(f"{pad}[{offset:>4}] tuple ({len(element.elements)} elements)")
        inner = offset + 1
        for child in element.elements:
            inner = _explain_element(child, inner, indent + 1)
    else:
        value = getattr(element, "value", None)
        print(f"{pad}[{offset:>4}] {element.kind:<12} {encoded.hex():<24} {value!r}")
    # Canonical length; a null inside a nested tuple carries one escape byte
    return offset + len(encoded) + (1 if indent and element.kind == "null" else 0)
