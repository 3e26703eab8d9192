"""Utility functions for nospend."""

from nospend.utils.date_parser import parse_date
from nospend.utils.amount_parser import parse_amount
from nospend.utils.formatting import format_currency, format_date, format_percent

__all__ = ["parse_date", "parse_amount", "format_currency", "format_date", "format_percent"]
