"""
Bond calculation API endpoints.

These endpoints accept inputs and return calculated results.
The HTML page uses the /results partial instead; these serve API clients.
"""

import logging
from typing import Dict, List

from fastapi import APIRouter
from pydantic import BaseModel

from bond_calculator.calculations import formatting, schedule
from bond_calculator.calculations.maturity import (
    InvestmentParameters,
    MaturityResult,
    compute_maturity,
)
from bond_calculator.calculations.validation import validate_parameters
from bond_calculator.config import get_settings

logger = logging.getLogger(__name__)
settings = get_settings()

router = APIRouter()


class BondInput(BaseModel):
    """Input for a bond calculation."""

    principal: float
    rate: float  # Annual coupon rate in percent
    years: float
    tax: float  # Tax on gain in percent

    def to_parameters(self) -> InvestmentParameters:
        """Validate and convert to calculation inputs."""
        return validate_parameters(
            InvestmentParameters(
                principal=self.principal,
                annual_rate_percent=self.rate,
                tenure_years=self.years,
                tax_rate_percent=self.tax,
            )
        )


class MaturityFigures(BaseModel):
    """Calculated maturity figures."""

    gross_maturity: int
    total_interest: float
    tax_amount: int
    net_maturity: int
    net_gain: float
    net_gain_percent: float
    annualized_return_percent: float


class MaturityResponse(BaseModel):
    """Response with inputs, figures and their display strings."""

    inputs: BondInput
    result: MaturityFigures
    formatted: Dict[str, str]


class ScheduleResponse(BaseModel):
    """Response with the year-by-year growth schedule."""

    schedule: List[dict]
    gross_maturity: int
    total_interest: float


def format_result(result: MaturityResult) -> Dict[str, str]:
    """Build display strings for every figure, as shown on the page."""
    symbol = settings.currency_symbol
    return {
        "gross_maturity": formatting.format_currency(result.gross_maturity, symbol),
        "total_interest": formatting.format_currency(result.total_interest, symbol),
        "tax_amount": formatting.format_currency(result.tax_amount, symbol),
        "net_maturity": formatting.format_currency(result.net_maturity, symbol),
        "net_gain": formatting.format_currency(result.net_gain, symbol),
        "net_gain_percent": formatting.format_percent(result.net_gain_percent),
        "annualized_return_percent": formatting.format_percent(
            result.annualized_return_percent
        ),
    }


@router.post("/maturity", response_model=MaturityResponse)
async def calculate_maturity(inputs: BondInput):
    """Calculate gross and after-tax maturity figures."""
    params = inputs.to_parameters()
    result = compute_maturity(params)
    logger.debug(f"Computed maturity for {params}: {result}")

    return MaturityResponse(
        inputs=inputs,
        result=MaturityFigures(
            gross_maturity=result.gross_maturity,
            total_interest=result.total_interest,
            tax_amount=result.tax_amount,
            net_maturity=result.net_maturity,
            net_gain=result.net_gain,
            net_gain_percent=result.net_gain_percent,
            annualized_return_percent=result.annualized_return_percent,
        ),
        formatted=format_result(result),
    )


@router.post("/schedule", response_model=ScheduleResponse)
async def calculate_schedule(inputs: BondInput):
    """Generate the year-by-year growth schedule up to gross maturity."""
    params = inputs.to_parameters()
    rows = schedule.generate_growth_schedule(params)
    result = compute_maturity(params)

    return ScheduleResponse(
        schedule=rows,
        gross_maturity=result.gross_maturity,
        total_interest=schedule.calculate_total_growth(rows),
    )
