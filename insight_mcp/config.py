"""
Configuration - environment-driven settings plus the illustrative constants
the simulated tool integrations quote in their answers.
None of the constants below are derived from the dataset.
"""

import os
from typing import Dict, Optional

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

DEFAULT_QUERY_DELAY = 1.2
DEFAULT_TABLE_DELAY = 0.3
DEFAULT_LANGUAGE = 'en'
DEFAULT_LOG_LEVEL = 'INFO'

# Forex MCP: 1 USD expressed in each currency
EXCHANGE_RATES: Dict[str, float] = {'EUR': 0.92, 'MXN': 17.05, 'GBP': 0.79}
CURRENCY_LABELS: Dict[str, str] = {
    'USD': 'USD (Base)',
    'EUR': 'EUR (€)',
    'MXN': 'MXN ($)',
    'GBP': 'GBP (£)',
}

# Revenue distribution pie: modeled cost vs profit share of revenue
COST_FRACTION = 0.65
PROFIT_FRACTION = 0.35

# Market correlation (Alpha Vantage MCP)
CORRELATION_COEFFICIENT = 0.65
CORRELATION_MONTHS = ['Jan', 'Feb', 'Mar', 'Apr', 'May']
CORRELATION_SALES_SERIES = [1200, 1500, 1100, 1800, 2200]
CORRELATION_BTC_SERIES = [42000, 43500, 41000, 44000, 46000]
CORRELATION_QUARTERS = ['Q1', 'Q2', 'Q3']

# Market trend benchmark (Brave Search MCP), percent
INDUSTRY_GROWTH_RATE = 4.5
OUTPERFORMANCE_MARGIN = 2.0
MARKET_SEARCH_URL = "https://search.brave.com/search?q=retail+market+trends+2025"

# Filesystem MCP export
EXPORT_DIRECTORY = '/users/docs/reports/'
EXPORT_FILE_NAME = 'sales_report_2025.csv'
EXPORT_FILE_SIZE = '45KB'

# Payment MCP: probability that a non-cash sale is already settled
PAYMENT_SUCCESS_RATE = 0.8
CASH_PAYMENT_METHOD = 'Efectivo'

# Geo MCP: regions mapped onto Madrid districts
MAP_CENTER = {'lat': 40.4168, 'lon': -3.7038}
MAP_ZOOM = 11
REGION_COORDS: Dict[str, Dict] = {
    'Centro': {'lat': 40.4168, 'lon': -3.7038, 'name': 'Madrid Centro (Sol)'},
    'Oeste': {'lat': 40.4354, 'lon': -3.7300, 'name': 'Moncloa / Casa de Campo'},
    'Este': {'lat': 40.4300, 'lon': -3.6200, 'name': 'San Blas / Ciudad Lineal'},
    'Sur': {'lat': 40.3800, 'lon': -3.7100, 'name': 'Usera / Villaverde'},
    'Norte': {'lat': 40.4800, 'lon': -3.6900, 'name': 'Chamartín / Fuencarral'},
}
MARKER_MAX_SIZE = 50
MARKER_MIN_SIZE = 20

TOY_CATEGORY = 'Juguetes'


ENV_VARS: Dict[str, str] = {
    'query_delay': 'INSIGHT_MCP_QUERY_DELAY',
    'table_delay': 'INSIGHT_MCP_TABLE_DELAY',
    'language': 'INSIGHT_MCP_LANGUAGE',
    'seed': 'INSIGHT_MCP_SEED',
    'log_level': 'INSIGHT_MCP_LOG_LEVEL',
}


class Settings(BaseModel):
    """Runtime settings for the query service and the demo app.

    Built from INSIGHT_MCP_* environment variables by load_settings(); tests
    construct it directly.
    """

    model_config = ConfigDict(frozen=True)

    query_delay: float = Field(
        default=DEFAULT_QUERY_DELAY,
        ge=0,
        description="Seconds to wait before answering a prompt",
    )
    table_delay: float = Field(
        default=DEFAULT_TABLE_DELAY,
        ge=0,
        description="Seconds to wait before returning table data",
    )
    language: str = Field(
        default=DEFAULT_LANGUAGE,
        description="Narrative language used when a call does not pass one",
    )
    seed: Optional[int] = Field(
        default=None,
        description="Seed for the payment-status random source; unseeded when None",
    )
    log_level: str = Field(
        default=DEFAULT_LOG_LEVEL,
        description="Level for logging.basicConfig in the demo app",
    )

    @field_validator('language')
    @classmethod
    def _normalize_language_tag(cls, value: str) -> str:
        return value.strip().lower()

    @field_validator('log_level')
    @classmethod
    def _upper_log_level(cls, value: str) -> str:
        return value.strip().upper()


def load_settings() -> Settings:
    """
    Build Settings from INSIGHT_MCP_* environment variables.
    Unset or blank variables keep their defaults.

    Raises:
        ValueError: naming the offending variable(s) when a value does not validate
    """
    values = {}
    for field_name, env_var in ENV_VARS.items():
        raw = os.environ.get(env_var)
        if raw is not None and raw.strip():
            values[field_name] = raw.strip()

    try:
        return Settings(**values)
    except ValidationError as exc:
        names = ', '.join(sorted({ENV_VARS[str(err['loc'][0])] for err in exc.errors()}))
        raise ValueError(f"Invalid setting in {names}: {exc}") from exc
