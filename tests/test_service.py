"""Tests for the async QueryService facade."""

import asyncio

import pytest

from insight_mcp import service as service_module
from insight_mcp.classifier import Topic
from insight_mcp.config import Settings
from insight_mcp.dataset import PRODUCTS, SALES, TABLES
from insight_mcp.service import QueryService


class TestExecuteQuery:

    @pytest.mark.asyncio
    async def test_employee_scenario(self, service):
        result = await service.execute_natural_language_query(
            "Show me the top 5 employees by salary (Descending)", 'en')
        assert result.columns == ['first_name', 'last_name', 'position', 'salary']
        assert len(result.rows) == 5
        assert 'Ana' in result.analysis

    @pytest.mark.asyncio
    async def test_revenue_scenario(self, service):
        result = await service.execute_natural_language_query(
            "Calculate total revenue statistics and distribution", 'en')
        assert result.rows[0]['total_revenue'].value == pytest.approx(sum(s.total for s in SALES))
        assert result.rows[0]['count'].value == len(SALES)
        assert len(result.chart_config['data'][0]['labels']) == 3

    @pytest.mark.asyncio
    async def test_idempotent(self, service):
        prompt = "List the top 5 most expensive products"
        first = await service.execute_natural_language_query(prompt, 'es')
        second = await service.execute_natural_language_query(prompt, 'es')
        assert first.to_dict() == second.to_dict()

    @pytest.mark.asyncio
    async def test_unrecognized_prompt_resolves(self, service):
        result = await service.execute_natural_language_query("qwerty", 'en')
        assert result.sql.endswith('-- Fallback')

    @pytest.mark.asyncio
    async def test_unsupported_language_reads_as_english(self, service, caplog):
        result = await service.execute_natural_language_query("list all customers", 'fr')
        assert result.explanation == "Fetching customer database."
        assert 'Unsupported language' in caplog.text

    @pytest.mark.asyncio
    async def test_default_language_from_settings(self, rng):
        svc = QueryService(Settings(query_delay=0, table_delay=0, language='es'), rng=rng,
                           sleep=_no_sleep)
        result = await svc.execute_natural_language_query("list all customers")
        assert result.explanation == "Obteniendo base de datos de clientes."

    @pytest.mark.asyncio
    async def test_waits_configured_delay(self, rng):
        waits = []

        async def record(seconds):
            waits.append(seconds)

        svc = QueryService(Settings(query_delay=1.2, table_delay=0.3), rng=rng, sleep=record)
        await svc.execute_natural_language_query("show sales", 'en')
        await svc.get_table_data('sales')
        assert waits == [1.2, 0.3]

    @pytest.mark.asyncio
    async def test_concurrent_queries_are_independent(self, service):
        prompts = ["top employees", "cheapest products", "map of sales", "hello"]
        results = await asyncio.gather(
            *(service.execute_natural_language_query(p, 'en') for p in prompts))
        assert [r.columns[0] for r in results] == ['first_name', 'product_id', 'region', 'employee_id']
        assert len({id(r) for r in results}) == len(results)

    @pytest.mark.asyncio
    async def test_logs_topic(self, service, caplog):
        caplog.set_level('INFO', logger='insight_mcp.service')
        await service.execute_natural_language_query("check payment status", 'en')
        assert Topic.PAYMENT_STATUS.value in caplog.text


class TestGetTableData:

    @pytest.mark.asyncio
    @pytest.mark.parametrize("name", list(TABLES))
    async def test_known_tables(self, service, name):
        records = await service.get_table_data(name)
        assert records == list(TABLES[name])

    @pytest.mark.asyncio
    async def test_unknown_table_is_empty(self, service):
        assert await service.get_table_data('bogus') == []

    @pytest.mark.asyncio
    async def test_returns_fresh_list(self, service):
        records = await service.get_table_data('products')
        records.pop()
        assert len(await service.get_table_data('products')) == len(PRODUCTS)


class TestModuleFunctions:

    @pytest.fixture(autouse=True)
    def default_service(self, service, monkeypatch):
        monkeypatch.setattr(service_module, '_default_service', service)

    @pytest.mark.asyncio
    async def test_execute_natural_language_query(self):
        result = await service_module.execute_natural_language_query("List all customers")
        assert len(result.rows) == 6

    @pytest.mark.asyncio
    async def test_language_defaults_to_settings(self, rng, monkeypatch):
        spanish = QueryService(Settings(query_delay=0, table_delay=0, language='es'), rng=rng,
                               sleep=_no_sleep)
        monkeypatch.setattr(service_module, '_default_service', spanish)
        result = await service_module.execute_natural_language_query("List all customers")
        assert result.explanation == "Obteniendo base de datos de clientes."

    @pytest.mark.asyncio
    async def test_get_table_data(self):
        assert await service_module.get_table_data('bogus') == []
        assert len(await service_module.get_table_data('users')) == 5


async def _no_sleep(seconds):
    return None
