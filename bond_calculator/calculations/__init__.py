"""
Bond Calculation Engine

Pure calculation modules for cumulative bond returns. Nothing here performs
I/O, so every function can be tested without the web layer.
"""

from bond_calculator.calculations import formatting, maturity, schedule, validation

__all__ = ["formatting", "maturity", "schedule", "validation"]
