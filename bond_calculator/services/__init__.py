"""
Application services module.
"""

from bond_calculator.services.export import ExportService, get_export_service

__all__ = ["ExportService", "get_export_service"]
