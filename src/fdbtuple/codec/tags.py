"""Type tags of the tuple encoding.

Tags are chosen so that they sort, as unsigned bytes, in the same order as the
types they introduce:

    null < bytes < text < nested tuple < negative ints < zero < positive ints
         < float < double < false < true < UUID < versionstamp
"""

from __future__ import annotations

NULL: int = 0x00
BYTES: int = 0x01
TEXT: int = 0x02
NESTED: int = 0x05

# Integers occupy the contiguous range 0x0B..0x1D around INT_ZERO.  The
# distance from INT_ZERO is the magnitude length in bytes; the two extremes
# introduce magnitudes longer than INT_MAX_BYTES with an explicit length byte.
NEG_INT_START: int = 0x0B
INT_ZERO: int = 0x14
POS_INT_END: int = 0x1D
INT_MAX_BYTES: int = 8
INT_MAX_EXTENDED_BYTES: int = 0xFF

FLOAT: int = 0x20
DOUBLE: int = 0x21
FALSE: int = 0x26
TRUE: int = 0x27
UUID: int = 0x30
VERSIONSTAMP: int = 0x33

# 0x00 inside an escaped payload or a nested tuple is followed by this byte.
ESCAPE: int = 0xFF

# Little-endian offset appended by the versionstamped-mutation encoding.
TRAILER_SIZE: int = 2
TRAILER_MAX_OFFSET: int = 0xFFFF
