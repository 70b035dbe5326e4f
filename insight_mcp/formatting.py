"""
Display helpers for result tables: column labels, cell rendering and the
table browser's free-text search.
"""

from typing import Dict, List

from .models import Cell, Row

MONETARY_MARKERS = ('price', 'salary', 'total', 'value', 'amount')


def format_column_name(column: str) -> str:
    """
    Turn an underscore_case column id into a display label.

    Example:
        format_column_name('total_sales')  # 'Total sales'
    """
    label = column.replace('_', ' ').strip()
    return label[:1].upper() + label[1:]


def is_monetary(column: str) -> bool:
    return any(marker in column for marker in MONETARY_MARKERS)


def format_cell(column: str, cell: Cell) -> str:
    """Render a cell; numbers in monetary columns get currency formatting."""
    if cell.is_number and is_monetary(column):
        return f"${cell.value:,.2f}"
    return str(cell.value)


def search_rows(rows: List[Row], term: str) -> List[Row]:
    """
    Keep rows where any cell contains `term` (case-insensitive).

    Args:
        rows: Rows to search
        term: Free text; empty or whitespace keeps every row

    Returns:
        Matching rows in their original order
    """
    needle = (term or '').strip().lower()
    if not needle:
        return list(rows)
    return [
        row for row in rows
        if any(needle in str(cell.value).lower() for cell in row.values())
    ]


def display_row(row: Row) -> Dict[str, str]:
    """Render every cell of a row for display, keyed by column."""
    return {column: format_cell(column, cell) for column, cell in row.items()}
