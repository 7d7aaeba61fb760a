"""
Units - NEAR / yoctoNEAR formatting and gas conversion.

All amounts travel over the wire as decimal strings of yoctoNEAR
(1 NEAR = 10^24 yocto). Conversions here are pure text/integer work;
floating point is never used for yocto amounts.
"""

from __future__ import annotations

from decimal import ROUND_HALF_UP, Decimal, InvalidOperation
from typing import Union

NEAR_DECIMALS = 24
ONE_NEAR = 10**NEAR_DECIMALS

# Tera-gas to gas: 1 Tgas = 10^12 gas
TGAS_DECIMALS = 12
DEFAULT_TGAS = 200

Yoctos = Union[int, str]


def _split_sign(text: str) -> tuple[str, str]:
    if text.startswith("-"):
        return "-", text[1:]
    return "", text


def _yocto_text(yoctos: Yoctos) -> str:
    text = str(yoctos).strip()
    if "." in text:
        raise ValueError(f"a yocto string can't have a decimal point: {text}")
    sign, digits = _split_sign(text)
    if not digits.isdigit():
        raise ValueError(f"Invalid yocto amount: {text!r}")
    return sign + digits


def yton_full(yoctos: Yoctos) -> str:
    """
    Convert a yocto amount to a NEAR decimal string, keeping all 24 decimals.

    Args:
        yoctos: Amount in yoctoNEAR (int or decimal string)

    Returns:
        NEAR amount as text, e.g. "1.500000000000000000000000"

    Raises:
        ValueError: If the input contains a decimal point or is not an integer
    """
    sign, digits = _split_sign(_yocto_text(yoctos))
    padded = digits.rjust(NEAR_DECIMALS + 1, "0")
    return f"{sign}{padded[:-NEAR_DECIMALS]}.{padded[-NEAR_DECIMALS:]}"


def yton(yoctos: Yoctos) -> str:
    """
    Convert a yocto amount to NEAR, truncated to 4 decimal places.

    Equivalent to near = yoctos / 1e24 truncated, done on the text.
    """
    sign, digits = _split_sign(_yocto_text(yoctos))
    padded = digits.rjust(NEAR_DECIMALS + 1, "0")
    return f"{sign}{padded[:-NEAR_DECIMALS]}.{padded[-NEAR_DECIMALS:-NEAR_DECIMALS + 4]}"


def ntoy(near: Union[int, str, Decimal, float]) -> str:
    """
    Convert a NEAR amount to a yocto decimal string.

    Args:
        near: Amount in NEAR. Floats are converted through their shortest
              repr, so prefer str or Decimal for exact values.

    Returns:
        Amount in yoctoNEAR as a decimal string (no decimal point)

    Raises:
        ValueError: If the amount is not a number or has more than
                    24 fractional digits
    """
    try:
        value = Decimal(str(near))
    except InvalidOperation:
        raise ValueError(f"Invalid NEAR amount: {near!r}") from None
    if not value.is_finite():
        raise ValueError(f"Invalid NEAR amount: {near!r}")

    # Exact integer scaling; Decimal.scaleb would round to context precision
    sign, digits, exponent = value.as_tuple()
    coefficient = int("".join(str(d) for d in digits) or "0")
    shift = exponent + NEAR_DECIMALS
    if shift >= 0:
        result = coefficient * 10**shift
    else:
        result, remainder = divmod(coefficient, 10**-shift)
        if remainder:
            raise ValueError(
                f"NEAR amount has more than {NEAR_DECIMALS} decimals: {near!r}"
            )
    return str(-result if sign else result)


def tgas(amount: Union[int, float, str, Decimal] = DEFAULT_TGAS) -> int:
    """
    Convert tera-gas to gas.

    Fractional tera-gas is rounded half up to a whole number, then 12 zero
    digits are appended to the decimal text instead of multiplying, so the
    value never passes through floating point.
    """
    whole = Decimal(str(amount)).quantize(Decimal(1), rounding=ROUND_HALF_UP)
    return int(f"{whole}" + "0" * TGAS_DECIMALS)
