"""Casual, self-inverse text obfuscation.

Letters rotate by 13, digits by 5, and ``?``/``=`` swap places; everything
else passes through unchanged. Applying the transform twice returns the
original text. This is not cryptographically secure.
"""

from __future__ import annotations

import string

_LOWER = string.ascii_lowercase
_UPPER = string.ascii_uppercase
_DIGITS = string.digits

_TABLE = str.maketrans(
    _LOWER + _UPPER + _DIGITS + "?=",
    _LOWER[13:] + _LOWER[:13] + _UPPER[13:] + _UPPER[:13] + _DIGITS[5:] + _DIGITS[:5] + "=?",
)


def obfuscate(value: str | None) -> str | None:
    if value is None:
        return None
    return value.translate(_TABLE)


# Every part of the table is an involution.
clarify = obfuscate
