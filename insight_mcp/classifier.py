"""
IntentClassifier - keyword rules that map a free-text prompt (English or Spanish)
to a closed set of topics plus an ordering directive.

Rules are evaluated top to bottom and the first match wins. Ordering is derived
independently of the topic; when both descending and ascending cues appear,
descending wins.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Callable, Tuple


class Topic(str, Enum):
    GEO_MAP = 'geo_map'
    CURRENCY_CONVERSION = 'currency_conversion'
    PAYMENT_STATUS = 'payment_status'
    MARKET_CORRELATION = 'market_correlation'
    MARKET_TREND = 'market_trend'
    EXPORT = 'export'
    SCHEMA_DESIGN = 'schema_design'
    EMPLOYEE = 'employee'
    PRODUCT_CATEGORY_TOY = 'product_category_toy'
    PRODUCT = 'product'
    SALE_TOTAL = 'sale_total'
    SALE = 'sale'
    CUSTOMER = 'customer'
    FALLBACK = 'fallback'


class Ordering(str, Enum):
    DESCENDING = 'descending'
    ASCENDING = 'ascending'
    UNORDERED = 'unordered'


DESCENDING_CUES = ('desc', 'top', 'high', 'most', 'mayor')
ASCENDING_CUES = ('asc', 'bottom', 'low', 'least', 'menor', 'cheap')

GEO_KEYWORDS = ('map', 'region', 'ubicacion', 'donde', 'location', 'madrid')
CURRENCY_KEYWORDS = ('euro', 'mxn', 'currency', 'divisa', 'convert')
PAYMENT_KEYWORDS = ('stripe', 'payment', 'pago', 'banco')
MARKET_CORRELATION_KEYWORDS = ('bitcoin', 'crypto', 'stock', 'aapl')
MARKET_TREND_KEYWORDS = ('trend', 'tendencia', 'market', 'mercado')
EXPORT_KEYWORDS = ('export', 'guardar', 'save', 'pdf', 'csv')
SCHEMA_KEYWORDS = ('esquema', 'schema')
DATABASE_KEYWORDS = ('postgres', 'base de datos')
EMPLOYEE_KEYWORDS = ('employee', 'staff', 'salary', 'empleado')
PRODUCT_KEYWORDS = ('product', 'item', 'price', 'producto')
TOY_KEYWORDS = ('toy', 'juguetes')
SALE_KEYWORDS = ('sale', 'revenue', 'sold', 'transaction', 'venta')
TOTAL_KEYWORDS = ('total',)
CUSTOMER_KEYWORDS = ('customer', 'client', 'cliente')


def contains_any(text: str, keywords: Tuple[str, ...]) -> bool:
    return any(k in text for k in keywords)


def detect_ordering(lowered: str) -> Ordering:
    """Descending cues are checked first, so they win ties."""
    if contains_any(lowered, DESCENDING_CUES):
        return Ordering.DESCENDING
    if contains_any(lowered, ASCENDING_CUES):
        return Ordering.ASCENDING
    return Ordering.UNORDERED


@dataclass(frozen=True)
class Classification:
    topic: Topic
    ordering: Ordering


@dataclass(frozen=True)
class Rule:
    topic: Topic
    matches: Callable[[str, Ordering], bool]


def _keywords(*groups: Tuple[str, ...]) -> Callable[[str, Ordering], bool]:
    """Predicate that needs at least one keyword from every group."""
    return lambda text, ordering: all(contains_any(text, g) for g in groups)


def _sale_total(text: str, ordering: Ordering) -> bool:
    return (contains_any(text, SALE_KEYWORDS)
            and contains_any(text, TOTAL_KEYWORDS)
            and ordering is Ordering.UNORDERED)


# Order matters: sub-topics sit ahead of their parent topic
RULES: Tuple[Rule, ...] = (
    Rule(Topic.GEO_MAP, _keywords(GEO_KEYWORDS)),
    Rule(Topic.CURRENCY_CONVERSION, _keywords(CURRENCY_KEYWORDS)),
    Rule(Topic.PAYMENT_STATUS, _keywords(PAYMENT_KEYWORDS)),
    Rule(Topic.MARKET_CORRELATION, _keywords(MARKET_CORRELATION_KEYWORDS)),
    Rule(Topic.MARKET_TREND, _keywords(MARKET_TREND_KEYWORDS)),
    Rule(Topic.EXPORT, _keywords(EXPORT_KEYWORDS)),
    Rule(Topic.SCHEMA_DESIGN, _keywords(SCHEMA_KEYWORDS, DATABASE_KEYWORDS)),
    Rule(Topic.EMPLOYEE, _keywords(EMPLOYEE_KEYWORDS)),
    Rule(Topic.PRODUCT_CATEGORY_TOY, _keywords(PRODUCT_KEYWORDS, TOY_KEYWORDS)),
    Rule(Topic.PRODUCT, _keywords(PRODUCT_KEYWORDS)),
    Rule(Topic.SALE_TOTAL, _sale_total),
    Rule(Topic.SALE, _keywords(SALE_KEYWORDS)),
    Rule(Topic.CUSTOMER, _keywords(CUSTOMER_KEYWORDS)),
)


def classify(prompt: str, language: str = 'en') -> Classification:
    """
    Classify a prompt into exactly one topic and one ordering directive.

    The keyword sets are bilingual, so `language` does not change the outcome;
    it is accepted so callers can pass the active language through unchanged.

    Example:
        >>> classify("Show me the top 5 employees by salary (Descending)")
        Classification(topic=<Topic.EMPLOYEE: 'employee'>, ordering=<Ordering.DESCENDING: 'descending'>)
    """
    lowered = (prompt or '').lower()
    ordering = detect_ordering(lowered)

    for rule in RULES:
        if rule.matches(lowered, ordering):
            return Classification(rule.topic, ordering)

    return Classification(Topic.FALLBACK, ordering)
