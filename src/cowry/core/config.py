#!/usr/bin/env python3
"""
Configuration Management for Cowry

Handles environment-based configuration with validated defaults. Supplies the
default currency and rounding mode at startup; the money core never reads
configuration itself, callers pass MoneyDefaults explicitly.
"""

import logging
import os
from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import Any, Mapping

from dotenv import load_dotenv

from .currency import BUILTIN_CURRENCIES, MAX_PRECISION, Currency, load_currency_catalog
from .errors import InvalidCurrencyError
from .money import Money
from .rounding import RoundingMode

# Load environment variables from .env file
load_dotenv()

logger = logging.getLogger(__name__)


class Environment(Enum):
    """Application environment types."""

    DEVELOPMENT = "development"
    TEST = "test"
    PRODUCTION = "production"


@dataclass(frozen=True)
class MoneyDefaults:
    """
    Default currency and rounding mode, passed explicitly to whatever needs them.

    Examples:
        >>> defaults = MoneyDefaults(currency=NGN, rounding_mode=RoundingMode.NEAREST)
        >>> defaults.money(500)
        Money(amount=500, currency=NGN)
    """

    currency: Currency
    rounding_mode: RoundingMode = RoundingMode.NEAREST

    def money(self, amount: int, currency: Currency | None = None) -> Money:
        """Create Money in the default currency unless one is given."""
        return Money(amount, currency or self.currency)

    def parse(self, value: str, currency: Currency | None = None) -> Money:
        """Parse a major-unit string using the default currency and rounding mode."""
        return Money.from_major(value, currency or self.currency, self.rounding_mode)


@dataclass
class Config:
    """
    Main configuration class for cowry.

    Loads configuration from environment variables with defaults and
    validation for each environment type.
    """

    environment: Environment

    # Money defaults
    default_currency_code: str = "USD"
    rounding_mode_name: str = "nearest"
    default_precision: int = 2
    currencies_file: Path | None = None

    # Application settings
    debug: bool = False
    log_level: str = "INFO"

    # Catalogue loaded on first use
    _catalog: Mapping[str, Currency] | None = field(default=None, init=False, repr=False, compare=False)

    @classmethod
    def from_environment(cls) -> "Config":
        """Create configuration from environment variables."""
        env = Environment(os.getenv("COWRY_ENV", "development"))

        currencies_file = os.getenv("COWRY_CURRENCIES_FILE")

        return cls(
            environment=env,
            default_currency_code=os.getenv("COWRY_DEFAULT_CURRENCY", "USD").strip().upper(),
            rounding_mode_name=os.getenv("COWRY_ROUNDING_MODE", "nearest").strip().lower(),
            default_precision=int(os.getenv("COWRY_DEFAULT_PRECISION", "2")),
            currencies_file=Path(currencies_file).expanduser() if currencies_file else None,
            debug=os.getenv("DEBUG", "false").lower() == "true",
            log_level=os.getenv("LOG_LEVEL", "INFO").upper(),
        )

    def validate(self) -> list:
        """Validate configuration and return list of errors."""
        errors = []

        try:
            RoundingMode.from_str(self.rounding_mode_name)
        except ValueError as e:
            errors.append(str(e))

        if not 0 <= self.default_precision <= MAX_PRECISION:
            errors.append(f"Default precision must be 0-{MAX_PRECISION}, got {self.default_precision}")

        if self.currencies_file is not None and not self.currencies_file.exists():
            errors.append(f"Currency catalogue does not exist: {self.currencies_file}")

        if not errors:
            try:
                self.default_currency()
            except InvalidCurrencyError as e:
                errors.append(f"Invalid default currency: {e}")

        return errors

    @property
    def rounding_mode(self) -> RoundingMode:
        """Default rounding mode."""
        return RoundingMode.from_str(self.rounding_mode_name)

    def currency_catalog(self) -> Mapping[str, Currency]:
        """Built-in currencies merged with the configured YAML catalogue, loaded once."""
        if self._catalog is None:
            if self.currencies_file is None:
                self._catalog = BUILTIN_CURRENCIES
            else:
                self._catalog = load_currency_catalog(self.currencies_file)
        return self._catalog

    def default_currency(self) -> Currency:
        """
        Resolve the default currency.

        Codes missing from the catalogue get the default precision and use the
        code itself as the symbol.
        """
        catalog = self.currency_catalog()
        code = self.default_currency_code
        if code in catalog:
            return catalog[code]
        logger.debug("Default currency %s not in catalogue, using precision %d", code, self.default_precision)
        return Currency(code=code, symbol=code, precision=self.default_precision)

    @property
    def defaults(self) -> MoneyDefaults:
        """Money defaults to inject into callers."""
        return MoneyDefaults(currency=self.default_currency(), rounding_mode=self.rounding_mode)

    def setup_logging(self) -> None:
        """Configure logging based on configuration."""
        level = getattr(logging, self.log_level, logging.INFO)

        # Configure format based on environment
        if self.environment == Environment.DEVELOPMENT:
            format_str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
        else:
            format_str = "%(asctime)s - %(levelname)s - %(message)s"

        logging.basicConfig(level=level, format=format_str, datefmt="%Y-%m-%d %H:%M:%S")

    def to_dict(self) -> dict[str, Any]:
        """Convert configuration to dictionary."""
        result: dict[str, Any] = {}
        for field_name, field_value in self.__dict__.items():
            if field_name.startswith("_"):
                continue
            if isinstance(field_value, Path):
                result[field_name] = str(field_value)
            elif isinstance(field_value, Enum):
                result[field_name] = field_value.value
            else:
                result[field_name] = field_value
        return result


# Global configuration instance
_config: Config | None = None


def get_config() -> Config:
    """Get the global configuration instance."""
    global _config
    if _config is None:
        _config = Config.from_environment()

        # Validate configuration
        errors = _config.validate()
        if errors:
            raise ValueError(f"Configuration validation failed: {'; '.join(errors)}")

        # Setup logging
        _config.setup_logging()

    return _config


def reload_config() -> Config:
    """Reload configuration from environment (useful for testing)."""
    global _config
    _config = None
    return get_config()
