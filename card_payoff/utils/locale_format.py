"""Turkish-locale money and rate formatting ("1.234,56")"""

from typing import Union

Number = Union[int, float]

# swap en-US separators for tr-TR ones in a single pass
_TR_SEPARATORS = str.maketrans({",": ".", ".": ","})


def parse_money(value: Union[str, Number]) -> float:
    """Read an amount typed with `.` grouping and `,` decimals ("50.000" -> 50000.0)"""
    if isinstance(value, (int, float)):
        return float(value)
    if not isinstance(value, str):
        raise ValueError(f"Expected a number or text, got {type(value).__name__}")

    cleaned = value.strip().replace(".", "").replace(",", ".")
    if not cleaned:
        raise ValueError("Amount is empty")
    return float(cleaned)


def parse_rate(value: Union[str, Number]) -> float:
    """Read a rate typed with a decimal comma ("3,75" -> 3.75)"""
    if isinstance(value, (int, float)):
        return float(value)
    if not isinstance(value, str):
        raise ValueError(f"Expected a number or text, got {type(value).__name__}")

    cleaned = value.strip().replace(",", ".")
    if not cleaned:
        raise ValueError("Rate is empty")
    return float(cleaned)


def format_money(value: Number) -> str:
    """1234.5 -> "1.234,50" """
    return f"{value:,.2f}".translate(_TR_SEPARATORS)


def format_money_short(value: Number) -> str:
    """1234.5 -> "1.234" (whole units)"""
    return f"{value:,.0f}".translate(_TR_SEPARATORS)


def format_percent(value: Number, digits: int = 2) -> str:
    """3.75 -> "%3,75" """
    return "%" + f"{value:,.{digits}f}".translate(_TR_SEPARATORS)


def format_currency(value: Number, symbol: str = "₺") -> str:
    return f"{format_money(value)} {symbol}"
