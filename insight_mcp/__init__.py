from .models import (
    Cell, CellKind, Row, make_row, row_values,
    Product, Employee, Customer, User, Sale,
    TableSchema, ExternalContext, QueryResult,
)
from .dataset import PRODUCTS, EMPLOYEES, CUSTOMERS, USERS, SALES, TABLES, TABLE_SCHEMAS, get_table
from .classifier import Topic, Ordering, Classification, classify
from .synthesizer import synthesize
from .service import QueryService, execute_natural_language_query, get_table_data
from .config import Settings, load_settings
from .formatting import display_row, format_column_name, format_cell, search_rows

__all__ = [
    "Cell",
    "CellKind",
    "Row",
    "make_row",
    "row_values",
    "Product",
    "Employee",
    "Customer",
    "User",
    "Sale",
    "TableSchema",
    "ExternalContext",
    "QueryResult",
    "PRODUCTS",
    "EMPLOYEES",
    "CUSTOMERS",
    "USERS",
    "SALES",
    "TABLES",
    "TABLE_SCHEMAS",
    "get_table",
    "Topic",
    "Ordering",
    "Classification",
    "classify",
    "synthesize",
    "QueryService",
    "execute_natural_language_query",
    "get_table_data",
    "Settings",
    "load_settings",
    "format_column_name",
    "format_cell",
    "display_row",
    "search_rows",
]
