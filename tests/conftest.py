import os
from datetime import date

import pytest

# Set test environment before importing app modules
os.environ.setdefault("CORS_ORIGINS", "*")
os.environ.setdefault("APP_VERSION", "test")


@pytest.fixture
def lmp_date():
    """Reference LMP used across tests (leap year)"""
    return date(2024, 1, 1)


@pytest.fixture
def calculator():
    from services.pregnancy_calculator import PregnancyCalculatorService

    return PregnancyCalculatorService()


@pytest.fixture
def pregnancy_days(calculator, lmp_date):
    return calculator.generate_pregnancy_calendar(lmp_date)


@pytest.fixture
def client():
    from fastapi.testclient import TestClient
    from main import app

    with TestClient(app) as test_client:
        yield test_client
