"""Luhn check digit over the 9 digits preceding an identity number's last digit."""

from __future__ import annotations

LUHN_PAYLOAD_MODULUS: int = 10**9


def luhn(payload: int) -> int:
    """Return the digit that makes payload followed by it Luhn-valid.

    Digits are walked from the least significant end, doubling the first
    one and every second one after it; a doubled value above 9
    contributes the sum of its two digits.
    """
    total = 0
    double = True
    while payload:
        payload, d = divmod(payload, 10)
        if double:
            d *= 2
            d = d % 10 + d // 10
        total += d
        double = not double
    return (10 - total % 10) % 10


def check_digit_of(number: int) -> int:
    """Expected check digit for an identity number (century digits ignored)."""
    return luhn((number // 10) % LUHN_PAYLOAD_MODULUS)


def check_digit_ok(number: int) -> bool:
    return number % 10 == check_digit_of(number)
