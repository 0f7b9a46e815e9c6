"""Money helpers: Persian digits, formatting and per-currency rounding."""
import math
import re

from dangi.config import DEFAULT_CURRENCY, IRR_ROUNDING_STEP

_DIGITS = str.maketrans("۰۱۲۳۴۵۶۷۸۹٠١٢٣٤٥٦٧٨٩", "01234567890123456789")

CURRENCY_LABELS = {
    "IRR": "تومان",
    "USD": "دلار",
    "EUR": "یورو",
    "GBP": "پوند",
    "AED": "درهم",
    "TRY": "لیر",
}

CURRENCY_SYMBOLS = {
    "USD": "$",
    "EUR": "€",
    "GBP": "£",
}


def round_half_up(value: float) -> int:
    """Round to the nearest integer, halves toward positive infinity."""
    return math.floor(value + 0.5)


def to_english_digits(text: str) -> str:
    """Convert Persian and Arabic-Indic digits to ASCII digits."""
    return text.translate(_DIGITS)


def format_number(value: float) -> str:
    return f"{round_half_up(value):,}"


def format_input_amount(text: str) -> str:
    """Re-format an amount as the user types it: '۱۰۰۰' -> '1,000'."""
    digits = re.sub(r"[^0-9]", "", to_english_digits(text))
    if not digits:
        return ""
    return f"{int(digits):,}"


def format_money(amount: float, currency: str = DEFAULT_CURRENCY) -> str:
    if currency == "IRR":
        return f"{format_number(amount)} {CURRENCY_LABELS['IRR']}"

    formatted = f"{abs(amount):,.2f}".rstrip("0").rstrip(".")
    sign = "-" if amount < 0 else ""
    symbol = CURRENCY_SYMBOLS.get(currency)
    if symbol:
        return f"{sign}{symbol}{formatted}"
    return f"{sign}{currency} {formatted}"


def get_currency_label(currency: str) -> str:
    return CURRENCY_LABELS.get(currency, currency)


def parse_money(text: str) -> float:
    """Parse a Persian or English amount string; 0 when nothing parses."""
    normalized = re.sub(r"[^0-9.]", "", to_english_digits(text))
    # Leading numeric prefix only, like '1.2.3' -> 1.2
    match = re.match(r"\d*\.?\d+|\d+", normalized)
    if not match:
        return 0.0
    return float(match.group())


def round_money(amount: float, currency: str = DEFAULT_CURRENCY) -> float:
    if currency == "IRR":
        return round_half_up(amount / IRR_ROUNDING_STEP) * IRR_ROUNDING_STEP
    return round_half_up(amount * 100) / 100
