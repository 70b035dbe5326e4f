"""
Models - record types for the fixture tables and the QueryResult bundle the UI renders.
Rows are mappings of column name to a tagged Cell so the presentation layer can
dispatch on the tag instead of inspecting Python types.
"""

from dataclasses import dataclass, field, fields
from enum import Enum
from typing import Any, Dict, List, Optional, Union

CellValue = Union[str, int, float]


class CellKind(str, Enum):
    TEXT = 'text'
    NUMBER = 'number'


@dataclass(frozen=True)
class Cell:
    """A single tagged value inside a result row."""

    kind: CellKind
    value: CellValue

    @classmethod
    def of(cls, value: Any) -> 'Cell':
        """
        Tag a plain Python value.

        Raises:
            ValueError: for booleans, None, or anything that is not str/int/float
        """
        if isinstance(value, bool) or value is None:
            raise ValueError(f"Unsupported cell value: {value!r}")
        if isinstance(value, (int, float)):
            return cls(CellKind.NUMBER, value)
        if isinstance(value, str):
            return cls(CellKind.TEXT, value)
        raise ValueError(f"Unsupported cell value type: {type(value).__name__}")

    @classmethod
    def text(cls, value: str) -> 'Cell':
        return cls(CellKind.TEXT, value)

    @classmethod
    def number(cls, value: Union[int, float]) -> 'Cell':
        return cls(CellKind.NUMBER, value)

    @property
    def is_number(self) -> bool:
        return self.kind is CellKind.NUMBER


Row = Dict[str, Cell]


def make_row(values: Dict[str, Any]) -> Row:
    """Build a Row from a plain dict, tagging every value."""
    return {column: Cell.of(value) for column, value in values.items()}


def row_values(row: Row) -> Dict[str, CellValue]:
    """Strip the tags off a Row, keeping column order."""
    return {column: cell.value for column, cell in row.items()}


class Record:
    """Mixin for the fixture dataclasses: declared column order and row conversion."""

    @classmethod
    def columns(cls) -> List[str]:
        return [f.name for f in fields(cls) if f.metadata.get('column', True)]

    def to_row(self, columns: Optional[List[str]] = None) -> Row:
        """
        Project the record onto `columns` (all declared columns by default).
        """
        columns = columns or self.columns()
        return {column: Cell.of(getattr(self, column)) for column in columns}


@dataclass(frozen=True)
class Product(Record):
    product_id: int
    product_name: str
    category: str
    unit_price: float


@dataclass(frozen=True)
class Employee(Record):
    employee_id: int
    first_name: str
    last_name: str
    position: str
    email: str
    salary: float
    # Optional in the source CSVs and absent from every fixture row
    department: Optional[str] = field(default=None, metadata={'column': False})

    @property
    def full_name(self) -> str:
        return f"{self.first_name} {self.last_name}"


@dataclass(frozen=True)
class Customer(Record):
    customer_id: int
    region: str
    first_name: str
    last_name: str
    email: str


@dataclass(frozen=True)
class User(Record):
    user_id: int
    employee_id: int
    role: str
    email: str


@dataclass(frozen=True)
class Sale(Record):
    sale_id: int
    employee_id: int
    customer_id: int
    product_id: int
    sales_channel: str
    quantity: int
    discount_percentage: float
    payment_method: str
    subtotal: float
    discount_amount: float
    total: float
    date: str

    @property
    def label(self) -> str:
        return f"Sale #{self.sale_id} ({self.sales_channel})"


@dataclass(frozen=True)
class TableSchema:
    name: str
    columns: List[str]
    description: str


@dataclass(frozen=True)
class ExternalContext:
    """Provenance block simulating a third-party tool integration."""

    source: str
    content: str
    url: Optional[str] = None

    def to_dict(self) -> Dict[str, str]:
        data = {'source': self.source, 'content': self.content}
        if self.url is not None:
            data['url'] = self.url
        return data


@dataclass
class QueryResult:
    """
    Response bundle for one natural-language query.

    Every row must carry exactly the declared columns; aggregate outputs are
    one-row tables and schema-style answers have no rows at all.

    Usage:
        result = QueryResult(columns=['total_revenue', 'count'],
                             rows=[make_row({'total_revenue': 11754.26, 'count': 5})])
        payload = result.to_dict()
    """

    columns: List[str]
    rows: List[Row]
    sql: Optional[str] = None
    explanation: Optional[str] = None
    analysis: Optional[str] = None
    chart_config: Optional[Dict[str, Any]] = None
    external_context: Optional[ExternalContext] = None

    def __post_init__(self):
        expected = list(self.columns)
        for i, row in enumerate(self.rows):
            if list(row.keys()) != expected:
                raise ValueError(
                    f"Row {i} has columns {list(row.keys())}, expected {expected}"
                )

    def column_values(self, column: str) -> List[CellValue]:
        """Plain values of one column, in row order."""
        return [row[column].value for row in self.rows]

    def to_dict(self) -> Dict[str, Any]:
        """Serialize to the wire shape the chat UI renders against."""
        data: Dict[str, Any] = {
            'columns': list(self.columns),
            'rows': [row_values(row) for row in self.rows],
        }
        if self.sql is not None:
            data['sql'] = self.sql
        if self.explanation is not None:
            data['explanation'] = self.explanation
        if self.analysis is not None:
            data['analysis'] = self.analysis
        if self.chart_config is not None:
            data['chartConfig'] = self.chart_config
        if self.external_context is not None:
            data['externalContext'] = self.external_context.to_dict()
        return data
