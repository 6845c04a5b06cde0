"""Core types: IdType.

The four identity categories, with the type code each one carries in
the person UUID layout.
"""

from __future__ import annotations

from enum import IntEnum


class IdType(IntEnum):
    """Category of a Swedish identity number.

    The integer value is the type code stored in the low nybble of the
    clock_seq_low byte.
    """

    ORGNR = 0  # organisationsnummer, legal entity
    PERSNR = 1  # personnummer, natural person
    SAMNR = 2  # samordningsnummer, coordination number (day + 60)
    GDNR = 3  # gruppnummer, reserved placeholder "302..." numbers
