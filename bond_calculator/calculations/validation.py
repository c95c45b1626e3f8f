"""
Input validation for maturity calculations.

compute_maturity() trusts its inputs, so callers check them here first:
either reject with DomainInputError (JSON API) or clamp into the page's
slider ranges (HTML form).
"""

import math
from dataclasses import dataclass, replace
from typing import Optional

from bond_calculator.calculations.maturity import InvestmentParameters


class DomainInputError(ValueError):
    """Raised when an input makes the maturity formulas undefined."""

    def __init__(self, field: str, message: str):
        super().__init__(message)
        self.field = field
        self.message = message


@dataclass(frozen=True)
class FieldBounds:
    """Slider range for one input field."""

    minimum: float
    maximum: float
    step: float
    default: float

    def clamp(self, value: float) -> float:
        if not math.isfinite(value):
            return self.default
        return min(max(value, self.minimum), self.maximum)


@dataclass(frozen=True)
class InputBounds:
    """Slider ranges for all four inputs."""

    principal: FieldBounds
    annual_rate_percent: FieldBounds
    tenure_years: FieldBounds
    tax_rate_percent: FieldBounds


DEFAULT_BOUNDS = InputBounds(
    principal=FieldBounds(minimum=1000, maximum=2000000, step=1000, default=200000),
    annual_rate_percent=FieldBounds(minimum=0, maximum=20, step=0.1, default=8.6),
    tenure_years=FieldBounds(minimum=1, maximum=30, step=1, default=2),
    tax_rate_percent=FieldBounds(minimum=0, maximum=30, step=0.1, default=12.5),
)

# Longest tenure the JSON API accepts; the page slider stops at 30
MAX_TENURE_YEARS = 100

DEFAULT_PARAMETERS = InvestmentParameters(
    principal=DEFAULT_BOUNDS.principal.default,
    annual_rate_percent=DEFAULT_BOUNDS.annual_rate_percent.default,
    tenure_years=DEFAULT_BOUNDS.tenure_years.default,
    tax_rate_percent=DEFAULT_BOUNDS.tax_rate_percent.default,
)


def validate_parameters(params: InvestmentParameters) -> InvestmentParameters:
    """
    Check that the inputs are inside the calculation's domain.

    Args:
        params: Investment inputs

    Returns:
        The same params, unchanged

    Raises:
        DomainInputError: If any field is non-finite, principal or tenure is
            not positive, tenure exceeds MAX_TENURE_YEARS, the rate is
            negative, tax is outside 0-100, or the maturity value would not
            fit in a float
    """
    for field in (
        "principal",
        "annual_rate_percent",
        "tenure_years",
        "tax_rate_percent",
    ):
        if not math.isfinite(getattr(params, field)):
            raise DomainInputError(field, f"{field} must be a finite number")

    if params.principal <= 0:
        raise DomainInputError("principal", "principal must be greater than 0")
    if params.tenure_years <= 0:
        raise DomainInputError("tenure_years", "tenure_years must be greater than 0")
    if params.tenure_years > MAX_TENURE_YEARS:
        raise DomainInputError(
            "tenure_years", f"tenure_years cannot exceed {MAX_TENURE_YEARS}"
        )
    if params.annual_rate_percent < 0:
        raise DomainInputError(
            "annual_rate_percent", "annual_rate_percent cannot be negative"
        )
    if not 0 <= params.tax_rate_percent <= 100:
        raise DomainInputError(
            "tax_rate_percent", "tax_rate_percent must be between 0 and 100"
        )

    try:
        gross = params.principal * (1 + params.annual_rate_percent / 100) ** params.tenure_years
    except OverflowError:
        gross = math.inf
    if not math.isfinite(gross):
        raise DomainInputError(
            "annual_rate_percent", "maturity value is too large to compute"
        )

    return params


def clamp_parameters(
    params: InvestmentParameters, bounds: Optional[InputBounds] = None
) -> InvestmentParameters:
    """Clamp every field into its slider range; non-finite values take the default."""
    if bounds is None:
        bounds = DEFAULT_BOUNDS

    return replace(
        params,
        principal=bounds.principal.clamp(params.principal),
        annual_rate_percent=bounds.annual_rate_percent.clamp(params.annual_rate_percent),
        tenure_years=bounds.tenure_years.clamp(params.tenure_years),
        tax_rate_percent=bounds.tax_rate_percent.clamp(params.tax_rate_percent),
    )
