"""Person UUID layout constants and scheme revisions.

No environment or file lookup. Pure configuration data.

Two revisions of the layout are in circulation and they are not
compatible: they use different node ids and disagree on whether the
identity type is stored. Exactly one revision is active per codec call;
REVISION_TYPED is the canonical one.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import final

# ---------------------------------------------------------------------------
# Digit fields
# ---------------------------------------------------------------------------

NUMBER_DIGITS: int = 12
SERIAL_DIGITS: int = 3

MAX_NUMBER: int = 10**NUMBER_DIGITS - 1
MAX_SERIAL: int = 10**SERIAL_DIGITS - 1

# ---------------------------------------------------------------------------
# Bit layout
#
#   iiiiiiii-iiii-1nnn-9xxt-<node>
#
#   high: 48 bits BCD number | version nybble | 12 bits BCD serial
#   low:  0x9 | 8 reserved zero bits | type nybble | 48 bit node id
# ---------------------------------------------------------------------------

WORD_MASK: int = 0xFFFF_FFFF_FFFF_FFFF

NUMBER_SHIFT: int = 16
VERSION_NYBBLE: int = 0x1
HIGH_MASK: int = 0x0000_0000_0000_F000
HIGH_RESERVED: int = VERSION_NYBBLE << 12
SERIAL_MASK: int = 0x0000_0000_0000_0FFF

TYPE_SHIFT: int = 48
TYPE_MASK: int = 0xF << TYPE_SHIFT
NODE_MASK: int = 0x0000_FFFF_FFFF_FFFF
CLOCK_SEQ_RESERVED: int = 0x9 << 60  # variant 10x, lsb of N forced to 1


@final
@dataclass(frozen=True, slots=True)
class SchemeRevision:
    """One revision of the person UUID bit layout."""

    name: str
    node_id: int
    carries_type: bool

    def __post_init__(self) -> None:
        if not 0 <= self.node_id <= NODE_MASK:
            raise TypeError(
                f"SchemeRevision.node_id must fit in 48 bits, got {self.node_id:#x}"
            )

    @property
    def low_reserved(self) -> int:
        return CLOCK_SEQ_RESERVED | self.node_id


# d5:9a:20:d0:6c:1a, multicast bit set
REVISION_TYPED = SchemeRevision(
    name="typed",
    node_id=0xD59A_20D0_6C1A,
    carries_type=True,
)

# d4:9a:20:d0:6c:1a, type nybble always zero
REVISION_UNTYPED = SchemeRevision(
    name="untyped",
    node_id=0xD49A_20D0_6C1A,
    carries_type=False,
)

DEFAULT_REVISION: SchemeRevision = REVISION_TYPED
