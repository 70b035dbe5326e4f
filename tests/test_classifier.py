"""Tests for the keyword-rule intent classifier."""

import pytest

from insight_mcp.classifier import (
    Classification,
    Ordering,
    RULES,
    Topic,
    classify,
    detect_ordering,
)


class TestTopicRules:
    """Each suggested prompt lands on the expected topic."""

    @pytest.mark.parametrize("prompt,topic", [
        ("Show me a map of sales by region (Google Maps MCP)", Topic.GEO_MAP),
        ("Convert total revenue to EUR and MXN (Forex MCP)", Topic.CURRENCY_CONVERSION),
        ("Check Stripe status for recent sales", Topic.PAYMENT_STATUS),
        ("Compare my sales trend with Bitcoin price", Topic.MARKET_CORRELATION),
        ("Compare my sales with global market trends (Brave Search)", Topic.MARKET_TREND),
        ("Export current sales report to CSV on local disk", Topic.EXPORT),
        ("Diseña un esquema de base de datos optimizado en PostgreSQL y graficalo", Topic.SCHEMA_DESIGN),
        ("Show me the top 5 employees by salary (Descending)", Topic.EMPLOYEE),
        ("Show me all products in Juguetes category with prices", Topic.PRODUCT_CATEGORY_TOY),
        ("List the top 5 most expensive products", Topic.PRODUCT),
        ("Calculate total revenue statistics and distribution", Topic.SALE_TOTAL),
        ("Show top 5 sales transactions by total value", Topic.SALE),
        ("List all customers", Topic.CUSTOMER),
        ("hello there", Topic.FALLBACK),
    ])
    def test_prompt_topic(self, prompt, topic):
        assert classify(prompt, 'en').topic is topic

    def test_spanish_keywords(self):
        """Spanish prompts classify without any language-specific branch."""
        assert classify("Muéstrame los empleados con mayor salario", 'es') == Classification(
            Topic.EMPLOYEE, Ordering.DESCENDING)
        assert classify("productos de menor precio", 'es') == Classification(
            Topic.PRODUCT, Ordering.ASCENDING)
        assert classify("lista de clientes", 'es').topic is Topic.CUSTOMER

    def test_first_match_wins(self):
        """'region' is a geo keyword, so a customer prompt naming a region goes to the map."""
        assert classify("List customers from the 'Centro' region").topic is Topic.GEO_MAP

    def test_currency_checked_before_sale_total(self):
        assert classify("convert total sales revenue").topic is Topic.CURRENCY_CONVERSION

    def test_schema_needs_database_keyword(self):
        assert classify("describe the schema").topic is Topic.FALLBACK
        assert classify("design a postgres schema").topic is Topic.SCHEMA_DESIGN

    def test_toy_keyword_without_product_keyword(self):
        """The toy sub-topic only refines a product prompt."""
        assert classify("juguetes").topic is Topic.FALLBACK
        assert classify("list toy products").topic is Topic.PRODUCT_CATEGORY_TOY

    def test_sale_total_requires_unordered(self):
        assert classify("total sales").topic is Topic.SALE_TOTAL
        assert classify("top total sales").topic is Topic.SALE
        assert classify("lowest total sales").topic is Topic.SALE

    def test_case_insensitive(self):
        assert classify("SHOW ME THE STAFF").topic is Topic.EMPLOYEE

    def test_empty_prompt(self):
        assert classify("") == Classification(Topic.FALLBACK, Ordering.UNORDERED)
        assert classify(None) == Classification(Topic.FALLBACK, Ordering.UNORDERED)

    def test_rule_table_is_closed(self):
        """Every topic except fallback has exactly one rule."""
        ruled = [rule.topic for rule in RULES]
        assert len(ruled) == len(set(ruled))
        assert set(ruled) | {Topic.FALLBACK} == set(Topic)


class TestOrdering:
    """Tests for the ordering directive."""

    @pytest.mark.parametrize("text,ordering", [
        ("top 5", Ordering.DESCENDING),
        ("highest paid", Ordering.DESCENDING),
        ("most expensive", Ordering.DESCENDING),
        ("mayor salario", Ordering.DESCENDING),
        ("sort desc", Ordering.DESCENDING),
        ("bottom 5", Ordering.ASCENDING),
        ("lowest", Ordering.ASCENDING),
        ("least sold", Ordering.ASCENDING),
        ("menor precio", Ordering.ASCENDING),
        ("cheapest", Ordering.ASCENDING),
        ("sort asc", Ordering.ASCENDING),
        ("list everything", Ordering.UNORDERED),
    ])
    def test_cues(self, text, ordering):
        assert detect_ordering(text) is ordering

    def test_descending_wins_ties(self):
        """A prompt with both cues resolves to descending."""
        result = classify("show the top products with a low price")
        assert result.ordering is Ordering.DESCENDING

    def test_ordering_independent_of_topic(self):
        assert classify("bottom 5 customers").ordering is Ordering.ASCENDING
        assert classify("cheap stuff").ordering is Ordering.ASCENDING


class TestPurity:

    def test_same_input_same_output(self):
        prompt = "Show me the bottom 5 employees by salary (Ascending)"
        assert classify(prompt, 'en') == classify(prompt, 'en')

    def test_language_does_not_change_outcome(self):
        prompt = "List the top 5 most expensive products"
        assert classify(prompt, 'en') == classify(prompt, 'es')
