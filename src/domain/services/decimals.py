"""Raw token amount scaling.

Token contracts report integer amounts in the smallest unit. Display fields
carry the same amount divided by ``10 ** decimals``.

The conversion runs in a dedicated decimal context wide enough for any
uint256 value, so it never rounds and never depends on the caller's
thread-local decimal context. Replays therefore produce identical values.
"""

from __future__ import annotations

from decimal import Context, Decimal

DEFAULT_DECIMALS: int = 18

# uint256 max has 78 digits
_SCALING_CONTEXT = Context(prec=100)


def to_decimal(raw: int, decimals: int = DEFAULT_DECIMALS) -> Decimal:
    """Scale a raw integer amount to its decimal display value.

    Args:
        raw: Amount in the token's smallest unit. May be negative.
        decimals: Token decimal precision.

    Returns:
        ``raw / 10 ** decimals`` as an exact Decimal.
    """
    return Decimal(raw).scaleb(-decimals, context=_SCALING_CONTEXT)


def format_decimal(value: Decimal) -> str:
    """Plain-notation string for a display value.

    Trailing zeros and the exponent are dropped, so numerically equal values
    always serialize to the same text: ``to_decimal(0)`` and ``Decimal(0)``
    both give ``"0"``, ``to_decimal(1000)`` gives ``"0.000000000000001"``.
    """
    return format(value.normalize(_SCALING_CONTEXT), "f")


BIGDECIMAL_ZERO = to_decimal(0)
