"""
Export API endpoints.

Return the clipboard payload and the CSV download for a calculation.
"""

import logging

from fastapi import APIRouter, Depends
from fastapi.responses import Response

from bond_calculator.api.calculations import BondInput
from bond_calculator.calculations.maturity import compute_maturity
from bond_calculator.services.export import ExportService, get_export_service

logger = logging.getLogger(__name__)

router = APIRouter()


@router.post("/clipboard")
async def export_clipboard(
    inputs: BondInput,
    exporter: ExportService = Depends(get_export_service),
):
    """Return the object the page copies to the clipboard."""
    params = inputs.to_parameters()
    result = compute_maturity(params)
    logger.info("Exported calculation as clipboard payload")
    return exporter.clipboard_payload(params, result)


@router.post("/csv")
async def export_csv(
    inputs: BondInput,
    exporter: ExportService = Depends(get_export_service),
):
    """Return the calculation as a downloadable CSV file."""
    params = inputs.to_parameters()
    result = compute_maturity(params)
    logger.info(f"Exported calculation as CSV ({exporter.csv_filename})")
    return Response(
        content=exporter.csv_text(params, result),
        media_type="text/csv",
        headers={
            "Content-Disposition": f'attachment; filename="{exporter.csv_filename}"'
        },
    )
