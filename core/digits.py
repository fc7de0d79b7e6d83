"""Positional decoding of digit strings in bases 2..36.

Values are built one digit at a time (acc = acc * base + digit) instead of
going through int(s, base), so every step can be checked by hand.
"""

from core.errors import InvalidBase, InvalidDigit

MIN_BASE = 2
MAX_BASE = 36


def digit_value(ch: str) -> int:
    """Value of a single ASCII digit: 0-9 -> 0..9, a-z / A-Z -> 10..35."""
    if '0' <= ch <= '9':
        return ord(ch) - ord('0')
    if 'a' <= ch <= 'z':
        return 10 + ord(ch) - ord('a')
    if 'A' <= ch <= 'Z':
        return 10 + ord(ch) - ord('A')
    raise InvalidDigit(ch)


def parse_base(text) -> int:
    """Parse a declared base (decimal text or int) and check it is in range."""
    if isinstance(text, bool):
        raise InvalidBase(text)
    if isinstance(text, int):
        base = text
    else:
        try:
            base = int(str(text).strip(), 10)
        except ValueError:
            raise InvalidBase(text) from None
    if not MIN_BASE <= base <= MAX_BASE:
        raise InvalidBase(text, f"base out of range ({MIN_BASE}..{MAX_BASE})")
    return base


def decode_digits(digits: str, base: int) -> int:
    """Decode `digits` written in `base` into an exact non-negative int."""
    if isinstance(base, bool) or not isinstance(base, int) \
            or not MIN_BASE <= base <= MAX_BASE:
        raise InvalidBase(base, f"base out of range ({MIN_BASE}..{MAX_BASE})")
    if not digits:
        raise InvalidDigit('', base)

    acc = 0
    for ch in digits:
        try:
            v = digit_value(ch)
        except InvalidDigit:
            raise InvalidDigit(ch, base) from None
        if v >= base:
            raise InvalidDigit(ch, base)
        acc = acc * base + v
    return acc
