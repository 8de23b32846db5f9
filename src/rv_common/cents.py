"""Minor-unit helpers for the presentation boundary.

All amounts inside the engine are int (cents). No float, no Decimal.
These helpers are the only place minor units become display strings.
"""

_SYMBOLS = {"USD": "$", "EUR": "€", "GBP": "£", "JPY": "¥"}


def currency_symbol(currency: str) -> str:
    """'USD' -> '$'; unknown codes fall back to the code plus a space."""
    code = currency.upper()
    return _SYMBOLS.get(code, f"{code} ")


def cents_to_display(cents: int, currency: str = "USD", fraction: bool = True) -> str:
    """Convert cents to display string: 6500 -> '$65.00', -1200 -> '-$12.00'.

    With fraction=False the value is rounded half-up to whole units:
    34050 -> '$341'.
    """
    sign = "-" if cents < 0 else ""
    abs_cents = -cents if cents < 0 else cents
    symbol = currency_symbol(currency)
    if not fraction:
        return f"{sign}{symbol}{(abs_cents + 50) // 100:,}"
    return f"{sign}{symbol}{abs_cents // 100:,}.{abs_cents % 100:02d}"
