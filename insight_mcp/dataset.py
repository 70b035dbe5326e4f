"""
Fixture dataset - the read-only sample tables every answer is built from.
Samples taken from the retail CSV exports: products, employees, customers, users, sales.

Several sales reference employee and product ids that are not in the sample
tables. Joins treat those as misses; unresolved_references() lists them.
"""

from dataclasses import asdict
from typing import Dict, List, Sequence, Tuple

import pandas as pd

from .models import Customer, Employee, Product, Record, Sale, TableSchema, User

PRODUCTS: Tuple[Product, ...] = (
    Product(1, "Organizador Modular", "Hogar", 355.05),
    Product(2, "Drone Infantil", "Juguetes", 380.52),
    Product(3, "Kit de Manualidades", "Juguetes", 391.14),
    Product(4, "Short Deportivo", "Ropa", 473.37),
    Product(5, "Muñeco Articulado", "Juguetes", 385.09),
    Product(6, "Blusa Elegante", "Ropa", 338.61),
    Product(7, "Mouse Inalámbrico", "Electrónica", 363.50),
    Product(8, "Tablet 10 pulgadas", "Electrónica", 415.74),
    Product(100, "Smartwatch Deportivo", "Electrónica", 450.43),
)

EMPLOYEES: Tuple[Employee, ...] = (
    Employee(1, "Javier", "Rivas", "Operario", "jrivas12@empresa.com", 1299.12),
    Employee(2, "Ana", "Suárez", "Especialista Marketing", "asuarez32@empresa.com", 3223.8),
    Employee(3, "Raúl", "Rivas", "Analista Financiero", "rrivas28@empresa.com", 2955.45),
    Employee(4, "Raúl", "Reyes", "Desarrollador", "rreyes73@empresa.com", 3219.62),
    Employee(5, "Fernando", "Rodríguez", "Supervisor", "frodriguez82@empresa.com", 2160.27),
    Employee(6, "Daniela", "Rodríguez", "Vendedor", "drodriguez12@empresa.com", 2592.83),
)

CUSTOMERS: Tuple[Customer, ...] = (
    Customer(103, "Centro", "Roberto", "Rivas", "roberto.rivas@cliente.com"),
    Customer(436, "Centro", "Marina", "García", "marina.garcía@cliente.com"),
    Customer(349, "Centro", "Carmen", "Ramírez", "carmen.ramírez@cliente.com"),
    Customer(271, "Oeste", "Lucía", "Ramírez", "lucía.ramírez@cliente.com"),
    Customer(107, "Sur", "Diego", "Ruiz", "diego.ruiz@cliente.com"),
    Customer(72, "Este", "Carlos", "Torres", "carlos.torres@cliente.com"),
)

USERS: Tuple[User, ...] = (
    User(1, 1, "administrador", "jrivas12@empresa.com"),
    User(2, 2, "marketing", "asuarez32@empresa.com"),
    User(3, 3, "marketing", "rrivas28@empresa.com"),
    User(4, 4, "administrador", "rreyes73@empresa.com"),
    User(6, 6, "RRHH", "drodriguez12@empresa.com"),
)

SALES: Tuple[Sale, ...] = (
    Sale(1, 92, 103, 5, "Tienda física", 4, 11.67, "Efectivo", 1852.2, 216.15, 1636.05, "2024-05-10"),
    Sale(2, 45, 436, 157, "Distribuidor", 16, 1.23, "Efectivo", 7122.72, 87.61, 7035.11, "2023-04-01"),
    Sale(3, 59, 349, 47, "Distribuidor", 17, 13.11, "Paypal", 2631.09, 344.94, 2286.15, "2025-05-29"),
    Sale(4, 38, 271, 68, "Tienda física", 9, 0.17, "Efectivo", 447.48, 0.76, 446.72, "2025-08-12"),
    Sale(5, 32, 107, 76, "Online", 6, 15.6, "Tarjeta", 414.96, 64.73, 350.23, "2024-11-02"),
)

TABLES: Dict[str, Tuple[Record, ...]] = {
    'products': PRODUCTS,
    'employees': EMPLOYEES,
    'customers': CUSTOMERS,
    'sales': SALES,
    'users': USERS,
}

TABLE_SCHEMAS: Tuple[TableSchema, ...] = (
    TableSchema('products', Product.columns(), "Product catalog with category and unit price."),
    TableSchema('employees', Employee.columns(), "Staff directory with position and monthly salary."),
    TableSchema('customers', Customer.columns(), "Customer base with sales region."),
    TableSchema('sales', Sale.columns(), "Sales transactions with channel, discount and totals."),
    TableSchema('users', User.columns(), "Application users linked to employees by employee_id."),
)


def get_table(name: str) -> List[Record]:
    """Return a copy of the named table's records, or [] for an unknown name."""
    return list(TABLES.get(name, ()))


def to_frame(records: Sequence[Record]) -> pd.DataFrame:
    """Load records into a DataFrame with one column per declared field."""
    if not records:
        return pd.DataFrame()
    columns = type(records[0]).columns()
    return pd.DataFrame([asdict(r) for r in records], columns=columns)


def unresolved_references() -> List[Tuple[str, int, str, int]]:
    """
    List sale foreign keys that do not resolve against the sample tables.

    Returns:
        (table, sale_id, column, value) tuples, in sale order
    """
    known = {
        'employee_id': {e.employee_id for e in EMPLOYEES},
        'customer_id': {c.customer_id for c in CUSTOMERS},
        'product_id': {p.product_id for p in PRODUCTS},
    }
    gaps = []
    for sale in SALES:
        for column, ids in known.items():
            value = getattr(sale, column)
            if value not in ids:
                gaps.append(('sales', sale.sale_id, column, value))
    return gaps
