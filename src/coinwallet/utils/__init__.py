"""Utility functions for coinwallet."""

from coinwallet.utils.date_parser import parse_date
from coinwallet.utils.amount_parser import parse_coin_amount, parse_weekday_amounts

__all__ = ["parse_date", "parse_coin_amount", "parse_weekday_amounts"]
