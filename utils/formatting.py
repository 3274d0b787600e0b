"""
utils/formatting.py
-------------------
Money formatting and amount parsing shared by the command handlers.
"""

from typing import Optional

from config import CURRENCY_SYMBOL


def format_money(amount: int) -> str:
    """Render an integer amount as e.g. ``$1,234``."""
    return f"{CURRENCY_SYMBOL}{amount:,}"


def parse_amount(raw: str) -> Optional[int]:
    """
    Parse a user-typed amount such as ``500``, ``1,000`` or ``-20``.

    Returns:
        The integer value (sign preserved), or None if it is not a whole number.
    """
    cleaned = raw.strip().replace(",", "").replace("_", "")
    try:
        return int(cleaned)
    except ValueError:
        return None
