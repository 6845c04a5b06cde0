"""Binary-coded decimal: one decimal digit per 4-bit nybble.

encode_digits(number, digit_count) -> int: total for non-negative input.
decode_digits(word, digit_count) -> Result[int, str]: rejects hex digits a-f.
"""

from __future__ import annotations

from personuuid.core.result import Err, Ok


def encode_digits(number: int, digit_count: int) -> int:
    """Pack the low digit_count decimal digits of number into nybbles.

    Nybble i (bit offset 4*i) holds the i-th least significant digit, so
    the hex rendering of the result reads as the decimal number.
    Higher digits are dropped.
    """
    word = 0
    for i in range(digit_count):
        number, digit = divmod(number, 10)
        word |= digit << (i << 2)
    return word


def decode_digits(word: int, digit_count: int) -> Ok[int] | Err[str]:
    """Read digit_count nybbles from bit 0 as a decimal number."""
    result = 0
    for i in range(digit_count - 1, -1, -1):
        digit = (word >> (i << 2)) & 0xF
        if digit > 9:
            return Err(
                f"nybble {i} holds {digit:#x}, not a decimal digit"
            )
        result = result * 10 + digit
    return Ok(result)
