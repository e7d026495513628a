# Copyright (c) 2026 Jeroen Visser. All rights reserved.
# Licensed under the MIT License — see LICENSE.
"""Number rounding and formatting compatible with the dashboard's JSON clients.

Rounding is half away from zero on the exact binary value of the float,
which is how JavaScript's Number.prototype.toFixed behaves. Text for
non-finite values follows JavaScript too ("Infinity", "NaN").
"""
from __future__ import annotations

import math
from decimal import ROUND_HALF_UP, Context, Decimal

# Enough digits to quantize any finite double without InvalidOperation.
_WIDE = Context(prec=400)

# String(x) uses exponent notation below 1e-6 and from 1e21 up.
_MAX_PLAIN_EXPONENT = 21
_MIN_PLAIN_EXPONENT = -6


def _non_finite_text(value: float) -> str:
    if math.isnan(value):
        return "NaN"
    return "Infinity" if value > 0 else "-Infinity"


def to_fixed(value: float, places: int) -> str:
    """Fixed-point string with `places` decimals."""
    if not math.isfinite(value):
        return _non_finite_text(value)
    if value == 0:
        value = 0.0  # drop the sign of -0.0
    quantum = Decimal(1).scaleb(-places)
    return str(Decimal(value).quantize(quantum, rounding=ROUND_HALF_UP, context=_WIDE))


def round_half_up(value: float, places: int) -> float:
    """Round to `places` decimals; the float counterpart of to_fixed.

    Non-finite values are returned unchanged.
    """
    if not math.isfinite(value):
        return value
    return float(to_fixed(value, places))


def js_round(value: float) -> int:
    """Nearest integer, halves rounded toward +inf (Math.round)."""
    return math.floor(value + 0.5)


def finite_or_none(value: float) -> float | None:
    """JSON-safe number: non-finite values serialize as null."""
    return value if math.isfinite(value) else None


def format_number(value: float) -> str:
    """Shortest text for a number, as JavaScript's String(number) renders it."""
    if isinstance(value, bool):
        return str(value).lower()
    if isinstance(value, int):
        return str(value)
    if not math.isfinite(value):
        return _non_finite_text(value)
    if value == 0:
        return "0"

    sign = "-" if value < 0 else ""
    # repr gives the shortest digits that round-trip
    _, digit_tuple, exponent = Decimal(repr(abs(value))).normalize().as_tuple()
    digits = "".join(str(d) for d in digit_tuple)
    k = len(digits)
    n = exponent + k  # value = 0.<digits> * 10**n

    if k <= n <= _MAX_PLAIN_EXPONENT:
        return sign + digits + "0" * (n - k)
    if 0 < n <= _MAX_PLAIN_EXPONENT:
        return sign + digits[:n] + "." + digits[n:]
    if _MIN_PLAIN_EXPONENT < n <= 0:
        return sign + "0." + "0" * -n + digits

    e = n - 1
    mantissa = digits if k == 1 else digits[0] + "." + digits[1:]
    return f"{sign}{mantissa}e{'+' if e > 0 else '-'}{abs(e)}"
