"""
Growth Schedule

Year-by-year breakdown of how a cumulative bond's value compounds up to
its gross maturity value.
"""

import math
from typing import Dict, List

import numpy as np

from bond_calculator.calculations.maturity import InvestmentParameters


def compounding_points(tenure_years: float) -> np.ndarray:
    """
    Return the elapsed years at the end of each schedule period.

    Whole years first, then the tenure itself when it has a fractional part
    (2.5 -> [1, 2, 2.5], 0.5 -> [0.5]).
    """
    whole_years = int(math.floor(tenure_years))
    points = np.arange(1, whole_years + 1, dtype=float)
    if tenure_years > whole_years:
        points = np.append(points, tenure_years)
    return points


def generate_growth_schedule(params: InvestmentParameters) -> List[Dict]:
    """
    Generate the compounding schedule for a bond investment.

    Args:
        params: Investment inputs (principal and tenure must be positive)

    Returns:
        List of schedule rows, one per period
    """
    points = compounding_points(params.tenure_years)
    growth = 1 + params.annual_rate_percent / 100

    closing_values = params.principal * np.power(growth, points)
    opening_values = np.concatenate(([params.principal], closing_values[:-1]))
    interest = closing_values - opening_values

    schedule = []
    for period, years in enumerate(points, start=1):
        i = period - 1
        schedule.append(
            {
                "period": period,
                "years": float(years),
                "opening_value": round(float(opening_values[i]), 2),
                "interest": round(float(interest[i]), 2),
                "closing_value": round(float(closing_values[i]), 2),
            }
        )

    return schedule


def calculate_total_growth(schedule: List[Dict]) -> float:
    """Calculate total interest accrued over the schedule."""
    return sum(row["interest"] for row in schedule)
