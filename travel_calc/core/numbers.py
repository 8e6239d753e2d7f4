"""Number parsing and formatting with JavaScript semantics.

Browsers consume these responses, so query parsing and number rendering follow
``parseFloat``, ``parseInt``, ``Math.round``, ``Number#toFixed`` and
``Number#toString`` rather than Python's own rules.
"""
from __future__ import annotations

import math
import re
from decimal import ROUND_HALF_UP, Decimal
from typing import Optional, Union

_FLOAT_PREFIX = re.compile(r"[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?", re.ASCII)
_INT_PREFIX = re.compile(r"[+-]?\d+", re.ASCII)

NAN = float("nan")


def parse_float(text: Optional[str]) -> float:
    """Parse the leading decimal literal of ``text``.

    Trailing garbage is ignored (``"12km"`` is 12). Returns NaN when there is no
    numeric prefix or the value overflows to infinity.
    """
    if text is None:
        return NAN
    match = _FLOAT_PREFIX.match(text.lstrip())
    if match is None:
        return NAN
    value = float(match.group(0))
    if not math.isfinite(value):
        return NAN
    return value


def parse_int(text: Optional[str]) -> float:
    """Parse the leading base-10 integer of ``text`` as a float, or NaN."""
    if text is None:
        return NAN
    match = _INT_PREFIX.match(text.lstrip())
    if match is None:
        return NAN
    # float() has no digit limit; very long integers become +-inf.
    return float(match.group(0))


def is_truthy(value: float) -> bool:
    """False for 0 and NaN, True otherwise."""
    return not math.isnan(value) and value != 0


def round_half_up(value: float) -> int:
    """Round to the nearest integer, ties towards positive infinity."""
    floor = math.floor(value)
    if value - floor >= 0.5:
        return floor + 1
    return floor


def to_fixed(value: float, digits: int = 2) -> str:
    if not math.isfinite(value) or abs(value) >= 1e21:
        return js_string(value)
    if value == 0:
        value = 0.0  # -0 renders without a sign
    quantum = Decimal(1).scaleb(-digits)
    return str(Decimal(value).quantize(quantum, rounding=ROUND_HALF_UP))


def js_number(value: float) -> Union[int, float, None]:
    """Value as it appears once a JavaScript number is serialized to JSON."""
    if not math.isfinite(value):
        return None
    if float(value).is_integer() and abs(value) < 1e21:
        return int(value)
    return value


def js_string(value: float) -> str:
    """Shortest round-trip decimal rendering, laid out like ``Number#toString``."""
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "Infinity" if value > 0 else "-Infinity"
    if value == 0:
        return "0"
    sign = "-" if value < 0 else ""

    _, digit_tuple, exponent = Decimal(repr(abs(float(value)))).as_tuple()
    digits = list(digit_tuple)
    while len(digits) > 1 and digits[-1] == 0:
        digits.pop()
        exponent += 1
    while len(digits) > 1 and digits[0] == 0:
        digits.pop(0)
    mantissa = "".join(str(d) for d in digits)
    k = len(mantissa)
    n = exponent + k

    if k <= n <= 21:
        body = mantissa + "0" * (n - k)
    elif 0 < n <= 21:
        body = mantissa[:n] + "." + mantissa[n:]
    elif -6 < n <= 0:
        body = "0." + "0" * (-n) + mantissa
    else:
        e = n - 1
        e_str = ("+" if e >= 0 else "-") + str(abs(e))
        if k == 1:
            body = mantissa + "e" + e_str
        else:
            body = mantissa[0] + "." + mantissa[1:] + "e" + e_str
    return sign + body
