"""Integer arithmetic utilities for token balances.

Ledger balances are arbitrary-precision ints in the token's smallest unit
(e8s for ICP). No float, no Decimal: display strings are built from
divmod on Python ints so totals above 2**64 render exactly.
"""

MAX_DECIMALS = 255  # ICRC-1 decimals is a nat8


def validate_decimals(decimals: int) -> None:
    """Validate that decimals is in the range [0, 255]."""
    if not (0 <= decimals <= MAX_DECIMALS):
        raise ValueError(f"Decimals must be between 0 and {MAX_DECIMALS}, got {decimals}")


def format_balance(balance: int, decimals: int) -> str:
    """Render a raw balance as a minimal decimal string.

    123456789, 8 -> '1.23456789'
    100500000, 8 -> '1.005'
    100000000, 8 -> '1'
    """
    if balance < 0:
        raise ValueError(f"Balance must be non-negative, got {balance}")
    validate_decimals(decimals)

    whole, fraction = divmod(balance, 10**decimals)
    if fraction == 0:
        return str(whole)

    # Pad to full width first so leading zeros survive: 500000 @ 8 -> '005'
    fraction_str = str(fraction).rjust(decimals, "0").rstrip("0")
    return f"{whole}.{fraction_str}"
