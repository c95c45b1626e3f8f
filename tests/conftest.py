"""
Pytest configuration and shared fixtures.
"""

import pytest
import sys
import os

# Add project root to path
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from fastapi.testclient import TestClient

from bond_calculator.calculations.maturity import InvestmentParameters
from bond_calculator.main import app


def pytest_configure(config):
    """Configure pytest markers."""
    config.addinivalue_line("markers", "slow: marks tests as slow")
    config.addinivalue_line("markers", "integration: marks integration tests")


@pytest.fixture(scope="session")
def anyio_backend():
    """Backend for async tests."""
    return "asyncio"


@pytest.fixture
def client():
    """Create test client."""
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def reference_params():
    """The page's default inputs: 2L at 8.6% for 2 years, 12.5% LTCG."""
    return InvestmentParameters(
        principal=200000,
        annual_rate_percent=8.6,
        tenure_years=2,
        tax_rate_percent=12.5,
    )
