"""Decimal text for integers of any size.

Python refuses int <-> str conversions past ``sys.get_int_max_str_digits()``
digits. Numbers here go through fixed-size digit chunks instead, so reading
and printing never hit that limit.
"""

from __future__ import annotations

CHUNK_DIGITS = 1000
CHUNK = 10 ** CHUNK_DIGITS


def parse_int(text: str) -> int:
    """Parse an optionally negative run of decimal digits."""
    negative = text.startswith("-")
    digits = text[1:] if negative else text
    if len(digits) <= CHUNK_DIGITS:
        value = int(digits)
    else:
        head = len(digits) % CHUNK_DIGITS or CHUNK_DIGITS
        value = int(digits[:head])
        for i in range(head, len(digits), CHUNK_DIGITS):
            value = value * CHUNK + int(digits[i:i + CHUNK_DIGITS])
    return -value if negative else value


def format_int(n: int) -> str:
    """Decimal rendering of `n`."""
    if -CHUNK < n < CHUNK:
        return str(n)
    sign = "-" if n < 0 else ""
    n = abs(n)
    chunks = []
    while n >= CHUNK:
        n, low = divmod(n, CHUNK)
        chunks.append(str(low).zfill(CHUNK_DIGITS))
    chunks.append(str(n))
    return sign + "".join(reversed(chunks))
