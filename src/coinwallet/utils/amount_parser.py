"""Coin amount parsing utilities."""

import re


def parse_coin_amount(amount_str: str) -> int:
    """Parse a coin balance string into an int.

    Handles "12345", "12,345", "12 345" and a trailing "coins".

    Args:
        amount_str: Amount string

    Returns:
        Coin amount

    Raises:
        ValueError: If the string is not a non-negative whole number
    """
    if not amount_str or not amount_str.strip():
        raise ValueError("Empty amount string")

    cleaned = re.sub(r"coins?$", "", amount_str.strip().lower())
    cleaned = re.sub(r"[,\s_]", "", cleaned)

    if not cleaned.isdigit():
        raise ValueError(f"Could not parse amount '{amount_str}': expected a whole number of coins")
    return int(cleaned)


def parse_weekday_amounts(values_str: str) -> tuple[int, ...]:
    """Parse seven comma-separated amounts, Sunday first.

    Raises:
        ValueError: If there are not exactly seven valid amounts
    """
    parts = values_str.split(",")
    if len(parts) != 7:
        raise ValueError(
            f"Expected 7 comma-separated amounts (Sun..Sat), got {len(parts)}"
        )
    return tuple(parse_coin_amount(p) for p in parts)
