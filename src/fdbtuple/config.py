"""Configuration for the tuple codec.

The codec itself has no tunable wire format; these options only bound the
decoder and choose how plain Python values are mapped onto elements.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Literal

NativeFloat = Literal["double", "float"]


@dataclass(frozen=True)
class CodecConfig:
    """Codec options.

    Attributes:
        max_depth: Maximum nested-tuple depth accepted by the decoder (default 64).
            The top-level tuple is depth 0; each nested tuple adds one level.

        native_float: Element type used for Python ``float`` values by
            ``fdbtuple.native`` (default ``"double"``).
            - ``"double"``: 64-bit IEEE-754, exact for every Python float
            - ``"float"``: 32-bit IEEE-754, values are rounded to binary32

    Examples:
        ```python
        from fdbtuple import CodecConfig, decode, pack

        strict = CodecConfig(max_depth=4)
        decode(data, config=strict)

        compact = CodecConfig(native_float="float")
        pack((1.5,), config=compact)  # b' \\xbf\\xc0\\x00\\x00'
        ```
    """

    max_depth: int = 64
    native_float: NativeFloat = "double"

    def __post_init__(self) -> None:
        """Validate configuration parameters."""
        if self.max_depth < 0:
            raise ValueError(f"max_depth must be >= 0, got {self.max_depth}")

        if self.native_float not in ("double", "float"):
            raise ValueError(
                f"native_float must be 'double' or 'float', got {self.native_float!r}"
            )


DEFAULT_CONFIG = CodecConfig()
