"""
Export service for calculation results.

Builds the "Copy Calculation" clipboard payload and the "Download CSV" file.
The browser does the actual clipboard write / file download; this service
only produces the content.
"""

import csv
import io
import json
import logging
from functools import lru_cache
from typing import Dict, Union

from bond_calculator.calculations.maturity import InvestmentParameters, MaturityResult
from bond_calculator.config import get_settings

logger = logging.getLogger(__name__)
settings = get_settings()

CSV_HEADER = ["Principal", "Rate", "Years", "Tax", "GrossMaturity", "NetMaturity"]


def plain_number(value: float) -> Union[int, float]:
    """Drop the trailing .0 from whole numbers (200000.0 -> 200000)."""
    if isinstance(value, float) and value.is_integer():
        return int(value)
    return value


class ExportService:
    """Produces clipboard and CSV exports of a calculation."""

    def __init__(self):
        self.csv_filename = settings.csv_filename

    def clipboard_payload(
        self, params: InvestmentParameters, result: MaturityResult
    ) -> Dict:
        """
        Build the object copied to the clipboard.

        Args:
            params: Inputs the result was computed from
            result: Computed maturity figures

        Returns:
            Dict with principal, rate, years, tax, maturity and netMaturity
        """
        return {
            "principal": plain_number(params.principal),
            "rate": plain_number(params.annual_rate_percent),
            "years": plain_number(params.tenure_years),
            "tax": plain_number(params.tax_rate_percent),
            "maturity": plain_number(result.gross_maturity),
            "netMaturity": plain_number(result.net_maturity),
        }

    def clipboard_text(
        self, params: InvestmentParameters, result: MaturityResult
    ) -> str:
        """Serialize the clipboard payload as compact JSON."""
        payload = self.clipboard_payload(params, result)
        logger.debug(f"Clipboard payload: {payload}")
        return json.dumps(payload, separators=(",", ":"))

    def csv_text(self, params: InvestmentParameters, result: MaturityResult) -> str:
        """
        Render the calculation as a CSV document.

        One header row and one data row; no trailing newline.
        """
        payload = self.clipboard_payload(params, result)
        buffer = io.StringIO()
        writer = csv.writer(buffer, lineterminator="\n")
        writer.writerow(CSV_HEADER)
        writer.writerow(
            [
                payload["principal"],
                payload["rate"],
                payload["years"],
                payload["tax"],
                payload["maturity"],
                payload["netMaturity"],
            ]
        )
        logger.debug(f"CSV row: {buffer.getvalue().splitlines()[-1]}")
        return buffer.getvalue().rstrip("\n")


@lru_cache()
def get_export_service() -> ExportService:
    """Get cached export service instance."""
    return ExportService()
