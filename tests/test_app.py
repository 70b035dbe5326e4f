"""Tests for the Flask demo app."""

import pytest

from insight_mcp.config import Settings
from insight_mcp.service import QueryService
from testapp import app as app_module


async def _no_sleep(seconds):
    return None


@pytest.fixture
def client(monkeypatch, rng):
    monkeypatch.setattr(app_module, 'service',
                        QueryService(Settings(query_delay=0, table_delay=0), rng=rng, sleep=_no_sleep))
    app_module.app.config['TESTING'] = True
    return app_module.app.test_client()


class TestQueryRoute:

    def test_query(self, client):
        resp = client.post('/api/query', json={'message': "Show me the top 5 employees by salary (Descending)"})
        assert resp.status_code == 200
        data = resp.get_json()
        assert data['columns'] == ['first_name', 'last_name', 'position', 'salary']
        assert data['display_columns'] == ['First name', 'Last name', 'Position', 'Salary']
        assert data['answer'] == data['explanation']
        assert len(data['rows']) == 5
        assert data['chartConfig']['data'][0]['type'] == 'bar'

    def test_display_rows_format_money(self, client):
        resp = client.post('/api/query', json={'message': "top 5 employees by salary"})
        data = resp.get_json()
        assert data['rows'][0]['salary'] == 3223.8
        assert data['display_rows'][0] == {
            'first_name': 'Ana', 'last_name': 'Suárez', 'position': data['rows'][0]['position'],
            'salary': '$3,223.80',
        }

    def test_spanish(self, client):
        resp = client.post('/api/query', json={'message': "lista de clientes", 'language': 'es'})
        assert resp.get_json()['explanation'] == "Obteniendo base de datos de clientes."

    def test_missing_message(self, client):
        resp = client.post('/api/query', json={'message': '   '})
        assert resp.status_code == 400
        assert resp.get_json()['error'] == 'No message provided'

    def test_failure_is_localized(self, client, monkeypatch):
        class BrokenService:
            async def execute_natural_language_query(self, prompt, language=None):
                raise RuntimeError("boom")

        monkeypatch.setattr(app_module, 'service', BrokenService())
        resp = client.post('/api/query', json={'message': 'hola', 'language': 'es'})
        assert resp.status_code == 500
        assert resp.get_json()['error'] == "Encontré un error al intentar procesar esa solicitud."


class TestTableRoutes:

    def test_list_tables(self, client):
        names = [t['name'] for t in client.get('/api/tables').get_json()]
        assert names == ['products', 'employees', 'customers', 'sales', 'users']

    def test_table_rows(self, client):
        data = client.get('/api/tables/customers').get_json()
        assert data['columns'] == ['customer_id', 'region', 'first_name', 'last_name', 'email']
        assert data['total'] == data['filtered'] == 6

    def test_table_display_rows(self, client):
        data = client.get('/api/tables/products').get_json()
        prices = {r['product_name']: r['unit_price'] for r in data['display_rows']}
        assert prices['Short Deportivo'] == '$473.37'
        assert len(data['display_rows']) == len(data['rows'])

    def test_table_search(self, client):
        data = client.get('/api/tables/customers?q=centro').get_json()
        assert data['filtered'] == 3
        assert {r['region'] for r in data['rows']} == {'Centro'}

    def test_unknown_table(self, client):
        resp = client.get('/api/tables/bogus')
        assert resp.status_code == 200
        assert resp.get_json()['rows'] == []


class TestPromptsRoute:

    def test_spanish_titles(self, client):
        data = client.get('/api/prompts?language=es').get_json()
        titles = [p['title'] for p in data['prompts']]
        assert 'Mapa de Ventas' in titles
        assert data['intro'].startswith('¡Hola!')

    def test_defaults_to_english(self, client):
        titles = [p['title'] for p in client.get('/api/prompts').get_json()['prompts']]
        assert 'Sales Map' in titles
