"""
Main FastAPI application entry point.
"""

import logging
from pathlib import Path
from typing import Optional

from fastapi import FastAPI, Form, Request
from fastapi.responses import HTMLResponse, JSONResponse
from fastapi.staticfiles import StaticFiles
from fastapi.templating import Jinja2Templates

from bond_calculator.api import router as api_router
from bond_calculator.api.calculations import format_result
from bond_calculator.calculations.formatting import format_currency
from bond_calculator.calculations.maturity import InvestmentParameters, compute_maturity
from bond_calculator.calculations.schedule import generate_growth_schedule
from bond_calculator.calculations.validation import (
    DEFAULT_BOUNDS,
    DEFAULT_PARAMETERS,
    DomainInputError,
    clamp_parameters,
)
from bond_calculator.config import get_settings
from bond_calculator.services.export import get_export_service, plain_number

settings = get_settings()
logger = logging.getLogger(__name__)

UI_DIR = Path(__file__).resolve().parent / "ui"


def configure_logging() -> None:
    """Apply the configured log level to the root logger."""
    logging.basicConfig(
        level=settings.log_level.upper(),
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
    )


configure_logging()

# Create FastAPI app
app = FastAPI(
    title=settings.app_name,
    description="After-tax maturity calculator for cumulative bonds",
    version=settings.app_version,
    debug=settings.debug,
)

# Mount static files
app.mount("/static", StaticFiles(directory=UI_DIR / "static"), name="static")

# Set up templates
templates = Jinja2Templates(directory=UI_DIR / "templates")
templates.env.filters["plain"] = plain_number
templates.env.filters["currency"] = lambda value: format_currency(
    value, settings.currency_symbol
)

# Include API routes
app.include_router(api_router, prefix="/api")


@app.exception_handler(DomainInputError)
async def domain_input_error_handler(request: Request, exc: DomainInputError):
    """Reject inputs outside the calculation's domain."""
    logger.warning(f"Rejected input on {request.url.path}: {exc.message}")
    return JSONResponse(
        status_code=422,
        content={"detail": exc.message, "field": exc.field},
    )


def parse_number(value: Optional[str], fallback: float) -> float:
    """Parse a form/query value, using fallback for blank or non-numeric input."""
    if value is None or not value.strip():
        return fallback
    try:
        return float(value.replace(",", ""))
    except ValueError:
        return fallback


def parameters_from_raw(
    principal: Optional[str],
    rate: Optional[str],
    years: Optional[str],
    tax: Optional[str],
) -> InvestmentParameters:
    """Build page inputs from raw strings, clamped into the slider ranges."""
    params = InvestmentParameters(
        principal=parse_number(principal, DEFAULT_PARAMETERS.principal),
        annual_rate_percent=parse_number(rate, DEFAULT_PARAMETERS.annual_rate_percent),
        tenure_years=parse_number(years, DEFAULT_PARAMETERS.tenure_years),
        tax_rate_percent=parse_number(tax, DEFAULT_PARAMETERS.tax_rate_percent),
    )
    return clamp_parameters(params, DEFAULT_BOUNDS)


def results_context(params: InvestmentParameters) -> dict:
    """Compute everything the results fragment renders."""
    result = compute_maturity(params)
    exporter = get_export_service()
    return {
        "params": params,
        "result": result,
        "formatted": format_result(result),
        "schedule": generate_growth_schedule(params),
        "clipboard_text": exporter.clipboard_text(params, result),
        "csv_text": exporter.csv_text(params, result),
        "csv_filename": exporter.csv_filename,
        "currency_symbol": settings.currency_symbol,
    }


@app.get("/", response_class=HTMLResponse)
async def home(
    request: Request,
    principal: Optional[str] = None,
    rate: Optional[str] = None,
    years: Optional[str] = None,
    tax: Optional[str] = None,
):
    """Render the calculator page."""
    params = parameters_from_raw(principal, rate, years, tax)
    context = results_context(params)
    context.update(
        {
            "title": settings.app_name,
            "site_url": settings.site_url,
            "bounds": DEFAULT_BOUNDS,
        }
    )
    return templates.TemplateResponse(request, "index.html", context)


@app.post("/results", response_class=HTMLResponse)
async def results(
    request: Request,
    principal: str = Form(""),
    rate: str = Form(""),
    years: str = Form(""),
    tax: str = Form(""),
):
    """Recompute and render the results fragment (HTMX)."""
    params = parameters_from_raw(principal, rate, years, tax)
    return templates.TemplateResponse(request, "_results.html", results_context(params))


@app.get("/health")
async def health_check():
    """Health check endpoint for monitoring."""
    return {"status": "healthy", "version": settings.app_version}
