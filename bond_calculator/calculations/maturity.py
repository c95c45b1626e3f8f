"""
Maturity Value Calculations

Computes gross and after-tax maturity figures for a cumulative bond:
interest compounds annually and is paid out with the principal at maturity.
Tax is charged on the interest (gain) only, never on the principal.
"""

import math
from dataclasses import dataclass


@dataclass(frozen=True)
class InvestmentParameters:
    """Inputs for a single cumulative bond investment."""

    principal: float  # Amount invested, in currency units
    annual_rate_percent: float  # Coupon rate, e.g. 8.6 for 8.6% p.a.
    tenure_years: float  # Holding period in years (fractional allowed)
    tax_rate_percent: float  # Tax on the gain, e.g. 12.5 for 12.5%


@dataclass(frozen=True)
class MaturityResult:
    """Derived figures for an InvestmentParameters value."""

    gross_maturity: int
    total_interest: float
    tax_amount: int
    net_maturity: int
    net_gain: float
    net_gain_percent: float
    annualized_return_percent: float


def round_currency(value: float) -> int:
    """
    Round to the nearest whole currency unit, halves rounded up.

    Python's round() uses banker's rounding; here 4484.5 -> 4485 and
    -2.5 -> -2, the same as JavaScript's Math.round().
    """
    return int(math.floor(value + 0.5))


def calculate_gross_maturity(
    principal: float, annual_rate_percent: float, tenure_years: float
) -> int:
    """Principal compounded annually over the tenure, rounded to whole units."""
    growth_factor = (1 + annual_rate_percent / 100) ** tenure_years
    return round_currency(principal * growth_factor)


def calculate_tax(total_interest: float, tax_rate_percent: float) -> int:
    """Tax on the interest component, rounded to whole units."""
    return round_currency(total_interest * tax_rate_percent / 100)


def calculate_annualized_return(
    principal: float, final_value: float, tenure_years: float
) -> float:
    """
    Calculate the annualized return (CAGR) as a percentage.

    Args:
        principal: Amount invested
        final_value: Amount received at the end of the tenure
        tenure_years: Holding period in years

    Returns:
        Constant yearly growth rate that turns principal into final_value,
        e.g. 7.56 for 7.56%
    """
    return ((final_value / principal) ** (1 / tenure_years) - 1) * 100


def compute_maturity(params: InvestmentParameters) -> MaturityResult:
    """
    Compute all maturity figures for a bond investment.

    Each currency step is rounded on its own: the gross value is rounded
    first, interest is taken from the rounded gross, and tax is rounded on
    that interest.

    The inputs are not validated here. principal and tenure_years must be
    positive (see calculations.validation).

    Args:
        params: Investment inputs

    Returns:
        MaturityResult with gross/net maturity, tax and return ratios
    """
    principal = params.principal

    gross_maturity = calculate_gross_maturity(
        principal, params.annual_rate_percent, params.tenure_years
    )
    total_interest = gross_maturity - principal
    tax_amount = calculate_tax(total_interest, params.tax_rate_percent)
    net_maturity = gross_maturity - tax_amount
    net_gain = net_maturity - principal

    return MaturityResult(
        gross_maturity=gross_maturity,
        total_interest=total_interest,
        tax_amount=tax_amount,
        net_maturity=net_maturity,
        net_gain=net_gain,
        net_gain_percent=net_gain / principal * 100,
        annualized_return_percent=calculate_annualized_return(
            principal, net_maturity, params.tenure_years
        ),
    )
