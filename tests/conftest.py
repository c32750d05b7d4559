"""
Pytest Configuration and Shared Fixtures

Provides common test fixtures and configuration for the entire test suite.
"""

from pathlib import Path
import tempfile

import pytest

import cowry.core.config as config_module
from cowry.core.currency import Currency


@pytest.fixture
def temp_dir():
    """Create a temporary directory for test files."""
    with tempfile.TemporaryDirectory() as temp_path:
        yield Path(temp_path)


@pytest.fixture
def ngn() -> Currency:
    """Two-decimal currency used throughout the examples."""
    return Currency("NGN", "₦", 2)


@pytest.fixture
def usd() -> Currency:
    return Currency("USD", "$", 2)


@pytest.fixture
def jpy() -> Currency:
    """Zero-decimal currency."""
    return Currency("JPY", "¥", 0)


@pytest.fixture
def currency_catalog_file(temp_dir) -> Path:
    """YAML catalogue with two extra currencies."""
    path = temp_dir / "currencies.yaml"
    path.write_text(
        "currencies:\n"
        "  - code: KES\n"
        "    symbol: KSh\n"
        "    precision: 2\n"
        "  - code: BHD\n"
        "    symbol: BD\n"
        "    precision: 3\n",
        encoding="utf-8",
    )
    return path


@pytest.fixture(autouse=True)
def setup_test_environment(monkeypatch):
    """Isolate configuration from the developer's environment."""
    monkeypatch.setenv("COWRY_ENV", "test")
    for name in (
        "COWRY_DEFAULT_CURRENCY",
        "COWRY_ROUNDING_MODE",
        "COWRY_DEFAULT_PRECISION",
        "COWRY_CURRENCIES_FILE",
        "LOG_LEVEL",
        "DEBUG",
    ):
        monkeypatch.delenv(name, raising=False)

    # Drop any configuration cached by a previous test
    monkeypatch.setattr(config_module, "_config", None)


# Test markers for categorizing tests
def pytest_configure(config):
    """Configure custom pytest markers."""
    config.addinivalue_line(
        "markers", "unit: Unit tests for individual components"
    )
    config.addinivalue_line(
        "markers", "integration: Integration tests for complete workflows"
    )
    config.addinivalue_line(
        "markers", "currency: Tests for currency handling and precision"
    )
    config.addinivalue_line(
        "markers", "allocation: Tests for ratio allocation and conservation"
    )
