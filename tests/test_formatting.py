"""Tests for display helpers."""

from insight_mcp.formatting import display_row, format_cell, format_column_name, search_rows
from insight_mcp.models import Cell, make_row


class TestColumnNames:

    def test_underscores_become_spaces(self):
        assert format_column_name('total_sales') == 'Total sales'
        assert format_column_name('first_name') == 'First name'

    def test_single_word(self):
        assert format_column_name('region') == 'Region'


class TestCells:

    def test_monetary_number(self):
        assert format_cell('salary', Cell.number(3223.8)) == '$3,223.80'
        assert format_cell('total_value', Cell.number(10814)) == '$10,814.00'

    def test_plain_number(self):
        assert format_cell('quantity', Cell.number(4)) == '4'

    def test_text_in_monetary_column_is_untouched(self):
        assert format_cell('total', Cell.text('n/a')) == 'n/a'


class TestDisplayRow:

    def test_renders_every_cell_in_column_order(self):
        row = make_row({'sale_id': 2, 'payment_method': 'Paypal', 'total': 7035.11})
        assert display_row(row) == {'sale_id': '2', 'payment_method': 'Paypal', 'total': '$7,035.11'}
        assert list(display_row(row)) == ['sale_id', 'payment_method', 'total']


class TestSearch:

    rows = [
        make_row({'region': 'Centro', 'first_name': 'Roberto'}),
        make_row({'region': 'Sur', 'first_name': 'Diego'}),
    ]

    def test_case_insensitive_match(self):
        assert search_rows(self.rows, 'centro') == [self.rows[0]]

    def test_matches_any_column(self):
        assert search_rows(self.rows, 'dieg') == [self.rows[1]]

    def test_empty_term_keeps_all(self):
        assert search_rows(self.rows, '  ') == self.rows

    def test_numbers_are_searchable(self):
        rows = [make_row({'sale_id': 12}), make_row({'sale_id': 3})]
        assert search_rows(rows, '12') == [rows[0]]
