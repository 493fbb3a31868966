"""
Phone number display formatting for the contact form.
"""

import re

from config import PHONE_MAX_DIGITS

_NON_DIGITS = re.compile(r'[^0-9]')


def phone_digits(value: str) -> str:
    """Strip everything but digits, capped at PHONE_MAX_DIGITS"""
    return _NON_DIGITS.sub('', value or '')[:PHONE_MAX_DIGITS]


def format_phone_input(raw: str) -> str:
    """
    Format raw phone input for display.

    Light US-style formatting that never rejects input:
        <=3 digits   -> digits as typed
        4-6 digits   -> (ddd) ddd
        7-10 digits  -> (ddd) ddd-dddd
        >10 digits   -> +<all digits>

    Formatting strips punctuation first, so re-formatting a formatted
    value returns it unchanged.
    """
    digits = phone_digits(raw)
    if len(digits) <= 3:
        return digits
    if len(digits) <= 6:
        return f"({digits[:3]}) {digits[3:]}"
    if len(digits) <= 10:
        return f"({digits[:3]}) {digits[3:6]}-{digits[6:]}"
    return f"+{digits}"
