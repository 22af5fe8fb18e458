"""Order-preserving tuple codec.

This module provides the encode/decode pair and the versionstamped-mutation
encoding.
"""

from __future__ import annotations

from .decoder import decode
from .encoder import (
    encode,
    encode_for_versionstamped_mutation,
    encode_with_versionstamp_offset,
    versionstamp_trailer,
)

__all__ = [
    "encode",
    "decode",
    "encode_for_versionstamped_mutation",
    "encode_with_versionstamp_offset",
    "versionstamp_trailer",
]
