"""JavaScript-compatible rendering of numbers as text."""

import math
from decimal import Decimal


def format_number(value: float) -> str:
    """Render a number the way JavaScript's ``String()`` does.

    Whole numbers drop the fractional part (``5.0`` -> ``"5"``), large and
    tiny magnitudes use exponent notation without padding (``1e-7``,
    ``1e+21``). The digits are the shortest ones that round-trip, as in
    ``repr``.
    """
    value = float(value)
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "Infinity" if value > 0 else "-Infinity"
    if value == 0:
        return "0"

    sign = "-" if value < 0 else ""
    _, digit_tuple, exponent = Decimal(repr(abs(value))).normalize().as_tuple()
    digits = "".join(map(str, digit_tuple))
    k = len(digits)
    # Decimal point sits after the first n digits
    n = exponent + k

    if k <= n <= 21:
        return sign + digits + "0" * (n - k)
    if 0 < n <= 21:
        return f"{sign}{digits[:n]}.{digits[n:]}"
    if -6 < n <= 0:
        return f"{sign}0.{'0' * -n}{digits}"

    mantissa = digits if k == 1 else f"{digits[0]}.{digits[1:]}"
    return f"{sign}{mantissa}e{n - 1:+d}"
