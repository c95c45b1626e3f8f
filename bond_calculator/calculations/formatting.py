"""
Display formatting for calculator figures.

Currency is shown in whole rupees with Indian digit grouping
(12,34,567), percentages with two decimals.
"""

from bond_calculator.calculations.maturity import round_currency


def group_indian(digits: str) -> str:
    """Insert separators as lakh/crore grouping: last three digits, then pairs."""
    if len(digits) <= 3:
        return digits
    head, tail = digits[:-3], digits[-3:]
    pairs = []
    while len(head) > 2:
        pairs.insert(0, head[-2:])
        head = head[:-2]
    if head:
        pairs.insert(0, head)
    return ",".join(pairs + [tail])


def format_currency(value: float, symbol: str = "₹") -> str:
    """Format a currency amount, e.g. 231394 -> '₹2,31,394'."""
    amount = round_currency(value)
    sign = "-" if amount < 0 else ""
    return f"{sign}{symbol}{group_indian(str(abs(amount)))}"


def format_percent(value: float) -> str:
    """Format a percentage with two decimals, e.g. 15.697 -> '15.70%'."""
    return f"{value:.2f}%"
