# -*- coding: utf-8 -*-
"""
Money Handling Utilities.

Purpose:
- Keep every amount an exact `Decimal`; rounding to cents happens only when
  an amount is shown to the user.
- Turn raw console text into an amount, or raise InvalidAmount.
- Keep balances inside the representable range (MAX_AMOUNT).
- Format amounts with the configured currency symbol.
"""

import re
from decimal import Context, Decimal, ROUND_HALF_EVEN

import accounts.config as cfg
from .errors import InvalidAmount

# Wide enough that sums and cent rounding of in-range amounts never round
# or overflow.
MONEY_CONTEXT = Context(prec=64, rounding=ROUND_HALF_EVEN)

# Plain decimal notation: optional sign (leading or trailing), digits with
# optional ',' group separators, optional fraction. No exponents.
_AMOUNT_RE = re.compile(
    r"^(?P<lead>[+-])?(?P<int>[0-9][0-9,]*)?(?:\.(?P<frac>[0-9]*))?(?P<trail>[+-])?$"
)


def as_money(value) -> Decimal:
    """
    Round any input to Decimal with 2 fractional digits (display only).

    Goes through `str` so floats keep their printed value (0.1 -> 0.10).
    """
    return Decimal(str(value)).quantize(
        Decimal(cfg.MONEY_QUANTUM), rounding=ROUND_HALF_EVEN, context=MONEY_CONTEXT
    )


def check_range(value: Decimal) -> Decimal:
    if value.copy_abs() > Decimal(cfg.MAX_AMOUNT):
        raise InvalidAmount(f"Amount out of range: {value}")
    return value


def parse_amount(text) -> Decimal:
    """
    Parse one line of user input into an exact amount.

    Rules:
    - Surrounding whitespace is ignored.
    - Digits may be grouped with ',' ("1,000.50"); one sign, leading or
      trailing, is allowed. Exponents, NaN and Infinity are not numbers here.
    - The magnitude must not exceed MAX_AMOUNT; sign is not checked.
    - Raises InvalidAmount otherwise.
    """
    if text is None:
        raise InvalidAmount("No amount entered")
    raw = str(text).strip()
    if not raw:
        raise InvalidAmount("No amount entered")

    m = _AMOUNT_RE.match(raw)
    if m is None or not (m.group("int") or m.group("frac")):
        raise InvalidAmount(f"Not a number: {raw!r}")
    if m.group("lead") and m.group("trail"):
        raise InvalidAmount(f"Not a number: {raw!r}")

    sign = m.group("lead") or m.group("trail") or ""
    digits = (m.group("int") or "0").replace(",", "")
    frac = m.group("frac") or ""
    value = Decimal(f"{sign}{digits}.{frac}" if frac else f"{sign}{digits}")
    return check_range(value)


def money_add(a: Decimal, b: Decimal) -> Decimal:
    """Exact a + b; raises InvalidAmount if the result leaves the allowed range."""
    return check_range(MONEY_CONTEXT.add(a, b))


def money_sub(a: Decimal, b: Decimal) -> Decimal:
    """Exact a - b; raises InvalidAmount if the result leaves the allowed range."""
    return check_range(MONEY_CONTEXT.subtract(a, b))


def fmt_money(x) -> str:
    """
    Currency text with thousands separators: '$1,150.50', '-$250.00'.

    Amounts carrying sub-cent digits keep them ('$1,000.005') so the shown
    value is the stored one.
    """
    symbol = cfg.CURRENCY_SYMBOLS.get(cfg.CURRENCY, '$')
    amt = Decimal(str(x))
    sign = "-" if amt < 0 else ""
    amt = amt.copy_abs()
    if amt.as_tuple().exponent >= -2:
        return f"{sign}{symbol}{as_money(amt):,.2f}"
    return f"{sign}{symbol}{amt:,f}"


def fmt_rate(rate) -> str:
    """Percent rate without trailing zeros: 5 -> '5%', 2.50 -> '2.5%'."""
    value = Decimal(str(rate)).normalize()
    return f"{value:f}%"
