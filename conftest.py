"""
Global pytest configuration and fixtures.
"""
import datetime as dt
from decimal import Decimal
from typing import Dict

import pytest

from ggsa_export.config import ExportSettings, reload_config
from ggsa_export.models import Activity, Customer, Project, TimesheetEntry, User


@pytest.fixture(scope="session")
def test_env_vars() -> Dict[str, str]:
    """Test environment variables for configuration."""
    return {
        'ENVIRONMENT': 'testing',
        'DEBUG': 'true',
        'LOG_LEVEL': 'DEBUG',
        'LOG_FORMAT': 'standard',
        'GGSA_DEFAULT_CURRENCY': 'EUR',
    }


@pytest.fixture
def mock_env(test_env_vars, monkeypatch):
    """Mock environment variables for testing."""
    for key, value in test_env_vars.items():
        monkeypatch.setenv(key, value)

    # Clear the global config to force reload with test values
    import ggsa_export.config.settings
    ggsa_export.config.settings._config = None

    yield test_env_vars

    ggsa_export.config.settings._config = None


@pytest.fixture
def test_config(mock_env) -> ExportSettings:
    """Test configuration instance."""
    return reload_config()


@pytest.fixture
def user() -> User:
    return User(id=1, username="jdoe", alias="John Doe", api_token="secret-token")


@pytest.fixture
def decimal_user() -> User:
    return User(id=2, username="asmith", export_decimal=True)


@pytest.fixture
def customer() -> Customer:
    return Customer(id=10, name="ACME", currency="EUR", meta={"vat_id": "DE123"})


@pytest.fixture
def project(customer) -> Project:
    return Project(
        id=20,
        name="Website",
        customer=customer,
        budget=Decimal("1000"),
        time_budget=36000,
        meta={"cost_center": "CC-7"},
    )


@pytest.fixture
def activity(project) -> Activity:
    return Activity(id=30, name="Development", project=project, time_budget=7200)


@pytest.fixture
def make_entry(user, project, activity):
    """Factory for timesheet entries with sensible defaults."""
    counter = {"id": 0}

    def _make(
        description="Code review",
        begin=dt.datetime(2024, 3, 4, 9, 0),
        duration=3600,
        **kwargs,
    ) -> TimesheetEntry:
        counter["id"] += 1
        data = dict(
            id=counter["id"],
            begin=begin,
            duration=duration,
            description=description,
            user=user,
            project=project,
            activity=activity,
            rate=Decimal("85.00"),
        )
        data.update(kwargs)
        return TimesheetEntry(**data)

    return _make


# Pytest configuration for different test types
def pytest_configure(config):
    """Configure pytest with custom markers and settings."""
    config.addinivalue_line(
        "markers", "unit: mark test as a unit test"
    )
    config.addinivalue_line(
        "markers", "integration: mark test as an integration test"
    )


def pytest_collection_modifyitems(config, items):
    """Modify test collection to add markers based on location."""
    for item in items:
        if "tests/unit/" in str(item.fspath):
            item.add_marker(pytest.mark.unit)
        elif "tests/integration/" in str(item.fspath):
            item.add_marker(pytest.mark.integration)
