"""
ResponseSynthesizer - turns a classified prompt into a QueryResult.

One builder per topic reads the fixture dataset, sorts / filters / aggregates it
and writes the bilingual narrative, the illustrative SQL, the table rows, an
optional chart descriptor and an optional external-tool context block.

Every builder is deterministic except the payment-status one, which draws from
the numpy Generator it is given.
"""

import logging
from dataclasses import dataclass
from typing import Callable, Dict, List, Optional, Sequence

import numpy as np
import pandas as pd

from . import config
from .charts import create_chart_config, create_dual_axis_chart, create_map_chart
from .classifier import Classification, Ordering, Topic
from .dataset import CUSTOMERS, EMPLOYEES, PRODUCTS, SALES, to_frame
from .i18n import Language, localize
from .models import Customer, Employee, ExternalContext, Product, QueryResult, Sale, make_row

logger = logging.getLogger(__name__)

RANKED_LIMIT = 5
DEFAULT_LIST_LIMIT = 10

EMPLOYEE_LIST_COLUMNS = ['first_name', 'last_name', 'position', 'salary']

DESC_COLOR_GREEN = '#10b981'
DESC_COLOR_PURPLE = '#8b5cf6'
ASC_COLOR_RED = '#f43f5e'
ASC_COLOR_BLUE = '#3b82f6'


@dataclass
class SynthesisRequest:
    prompt: str
    language: Language
    ordering: Ordering
    rng: Optional[np.random.Generator] = None

    def t(self, en: str, es: str) -> str:
        return localize(self.language, en, es)

    @property
    def descending(self) -> bool:
        return self.ordering is Ordering.DESCENDING

    @property
    def ascending(self) -> bool:
        return self.ordering is Ordering.ASCENDING


def money(value: float) -> str:
    return f"${value:,.2f}"


def rank(records: Sequence, key: Callable, ordering: Ordering, limit: int) -> List:
    """
    Stable sort by `key` in the requested direction and keep the first `limit`.
    Unordered requests keep the dataset order.
    """
    if ordering is Ordering.DESCENDING:
        ordered = sorted(records, key=key, reverse=True)
    elif ordering is Ordering.ASCENDING:
        ordered = sorted(records, key=key)
    else:
        ordered = list(records)
    return ordered[:limit]


def ratio(numerator: float, denominator: float) -> float:
    return numerator / denominator if denominator else 0.0


# --- Internal tables ---

def build_employee_result(req: SynthesisRequest) -> QueryResult:
    rows = rank(EMPLOYEES, lambda e: e.salary, req.ordering, RANKED_LIMIT)
    first, last = rows[0], rows[-1]

    if req.descending:
        multiple = ratio(first.salary, last.salary)
        explanation = req.t("Showing top employees by salary (Descending).",
                            "Mostrando empleados con mayor salario (Descendente).")
        sql = "SELECT first_name, last_name, position, salary FROM employees ORDER BY salary DESC LIMIT 5;"
        chart_title = req.t("Top 5 Highest Salaries", "Top 5 Salarios Más Altos")
        analysis = req.t(
            f"Payroll Insight:\n- **Highest Earner**: {first.first_name} ({money(first.salary)}).\n"
            f"- **Gap**: The top earner makes {multiple:.1f}x more than the lowest of these {len(rows)}.",
            f"Insight de Nómina:\n- **Mayor Salario**: {first.first_name} ({money(first.salary)}).\n"
            f"- **Brecha**: El salario más alto es {multiple:.1f}x mayor que el más bajo de estos {len(rows)}."
        )
    elif req.ascending:
        multiple = ratio(last.salary, first.salary)
        explanation = req.t("Showing lowest paid employees (Ascending).",
                            "Mostrando empleados con menor salario (Ascendente).")
        sql = "SELECT first_name, last_name, position, salary FROM employees ORDER BY salary ASC LIMIT 5;"
        chart_title = req.t("Bottom 5 Salaries", "Top 5 Salarios Más Bajos")
        analysis = req.t(
            f"Payroll Insight:\n- **Lowest Earner**: {first.first_name} ({money(first.salary)}).\n"
            f"- **Spread**: The highest salary in this group is {multiple:.1f}x the lowest.\n"
            f"- Operational Staff detected at the bottom of the bracket.",
            f"Insight de Nómina:\n- **Menor Salario**: {first.first_name} ({money(first.salary)}).\n"
            f"- **Dispersión**: El salario más alto de este grupo es {multiple:.1f}x el más bajo.\n"
            f"- Personal operativo detectado en la parte baja de la franja."
        )
    else:
        explanation = req.t("Fetching general employee list.", "Obteniendo lista general de empleados.")
        sql = "SELECT first_name, last_name, position, salary FROM employees LIMIT 5;"
        chart_title = req.t("Employee Salaries", "Salarios de Empleados")
        highest = max(e.salary for e in rows)
        lowest = min(e.salary for e in rows)
        spread = ratio(highest, lowest)
        analysis = req.t(
            f"Showing standard list.\n- **Salary Range**: {money(lowest)} to {money(highest)} "
            f"({spread:.1f}x) across these {len(rows)}.",
            f"Mostrando lista estándar.\n- **Rango Salarial**: {money(lowest)} a {money(highest)} "
            f"({spread:.1f}x) entre estos {len(rows)}."
        )

    return QueryResult(
        sql=sql,
        explanation=explanation,
        analysis=analysis,
        columns=list(EMPLOYEE_LIST_COLUMNS),
        rows=[e.to_row(EMPLOYEE_LIST_COLUMNS) for e in rows],
        chart_config=create_chart_config(
            chart_title,
            [e.full_name for e in rows],
            [e.salary for e in rows],
            'bar',
            DESC_COLOR_GREEN if req.descending else ASC_COLOR_RED,
        ),
    )


def build_toy_category_result(req: SynthesisRequest) -> QueryResult:
    toys = [p for p in PRODUCTS if p.category == config.TOY_CATEGORY]
    average = float(np.mean([p.unit_price for p in toys])) if toys else 0.0

    return QueryResult(
        sql=f"SELECT * FROM products WHERE category = '{config.TOY_CATEGORY}';",
        explanation=req.t(f"Filtering products by category '{config.TOY_CATEGORY}'.",
                          f"Filtrando productos por categoría '{config.TOY_CATEGORY}'."),
        analysis=req.t(
            f"Category Analysis (Toys):\n- **Count**: {len(toys)} items.\n- **Avg Price**: {money(average)}.",
            f"Análisis de Categoría (Juguetes):\n- **Cantidad**: {len(toys)} ítems.\n"
            f"- **Precio Promedio**: {money(average)}."
        ),
        columns=Product.columns(),
        rows=[p.to_row() for p in toys],
        chart_config=create_chart_config(
            req.t('Toy Prices', 'Precios de Juguetes'),
            [p.product_name for p in toys],
            [p.unit_price for p in toys],
            'bar',
            '#f59e0b',
        ),
    )


def build_product_result(req: SynthesisRequest) -> QueryResult:
    limit = DEFAULT_LIST_LIMIT if req.ordering is Ordering.UNORDERED else RANKED_LIMIT
    rows = rank(PRODUCTS, lambda p: p.unit_price, req.ordering, limit)
    first, last = rows[0], rows[-1]
    gap = abs(first.unit_price - last.unit_price)

    if req.descending:
        explanation = req.t("List of most expensive products (Descending).",
                            "Lista de productos más caros (Descendente).")
        sql = "SELECT * FROM products ORDER BY unit_price DESC LIMIT 5;"
        chart_title = req.t("Top 5 Most Expensive Products", "Top 5 Productos Más Caros")
        analysis = req.t(
            f"Pricing Strategy:\n- **Premium Item**: {first.product_name} ({money(first.unit_price)}).\n"
            f"- **Price Gap**: {money(gap)} between the first and last of the top {len(rows)}.\n"
            f"- **Margin Potential**: High on top 3 items.",
            f"Estrategia de Precios:\n- **Ítem Premium**: {first.product_name} ({money(first.unit_price)}).\n"
            f"- **Diferencia de Precio**: {money(gap)} entre el primero y el último de los {len(rows)}.\n"
            f"- **Potencial de Margen**: Alto en los 3 primeros."
        )
    elif req.ascending:
        explanation = req.t("List of cheapest products (Ascending).",
                            "Lista de productos más baratos (Ascendente).")
        sql = "SELECT * FROM products ORDER BY unit_price ASC LIMIT 5;"
        chart_title = req.t("Top 5 Cheapest Products", "Top 5 Productos Más Baratos")
        analysis = req.t(
            f"Pricing Strategy:\n- **Entry Item**: {first.product_name} ({money(first.unit_price)}).\n"
            f"- **Price Gap**: {money(gap)} between the first and last of these {len(rows)}.\n"
            f"- Entry-level inventory identified.",
            f"Estrategia de Precios:\n- **Ítem de Entrada**: {first.product_name} ({money(first.unit_price)}).\n"
            f"- **Diferencia de Precio**: {money(gap)} entre el primero y el último de estos {len(rows)}.\n"
            f"- Inventario de entrada identificado."
        )
    else:
        categories = len({p.category for p in rows})
        explanation = req.t("Fetching product list.", "Obteniendo lista de productos.")
        sql = "SELECT * FROM products LIMIT 10;"
        chart_title = req.t("Product Prices", "Precios de Productos")
        analysis = req.t(
            f"Catalog Overview: {len(rows)} products across {categories} categories.",
            f"Resumen del catálogo: {len(rows)} productos en {categories} categorías."
        )

    return QueryResult(
        sql=sql,
        explanation=explanation,
        analysis=analysis,
        columns=Product.columns(),
        rows=[p.to_row() for p in rows],
        chart_config=create_chart_config(
            chart_title,
            [p.product_name for p in rows],
            [p.unit_price for p in rows],
            'bar',
            DESC_COLOR_PURPLE if req.descending else ASC_COLOR_BLUE,
        ),
    )


def build_sale_total_result(req: SynthesisRequest) -> QueryResult:
    total_revenue = sum(s.total for s in SALES)
    count = len(SALES)
    average_ticket = ratio(total_revenue, count)

    return QueryResult(
        sql="SELECT SUM(total) as total_revenue, COUNT(*) as count FROM sales;",
        explanation=req.t("Aggregating total sales revenue.", "Agregando ingresos totales por ventas."),
        analysis=req.t(
            f"Financial Summary:\n- **Total Revenue**: {money(total_revenue)}\n"
            f"- **Transaction Volume**: {count} sales recorded.\n- **Avg Ticket**: {money(average_ticket)}.",
            f"Resumen Financiero:\n- **Ingresos Totales**: {money(total_revenue)}\n"
            f"- **Volumen**: {count} ventas registradas.\n- **Ticket Promedio**: {money(average_ticket)}."
        ),
        columns=['total_revenue', 'count'],
        rows=[make_row({'total_revenue': round(total_revenue, 2), 'count': count})],
        chart_config=create_chart_config(
            req.t('Revenue Distribution', 'Distribución de Ingresos'),
            [req.t('Revenue', 'Ingresos'), req.t('Est. Cost', 'Costo Est.'), req.t('Profit', 'Beneficio')],
            [total_revenue, total_revenue * config.COST_FRACTION, total_revenue * config.PROFIT_FRACTION],
            'pie',
        ),
    )


def build_sale_result(req: SynthesisRequest) -> QueryResult:
    limit = DEFAULT_LIST_LIMIT if req.ordering is Ordering.UNORDERED else RANKED_LIMIT
    rows = rank(SALES, lambda s: s.total, req.ordering, limit)
    first, last = rows[0], rows[-1]

    if req.descending:
        multiple = ratio(first.total, last.total)
        explanation = req.t("Top sales transactions by value (High to Low).",
                            "Mejores transacciones por valor (Alto a Bajo).")
        sql = "SELECT * FROM sales ORDER BY total DESC LIMIT 5;"
        chart_title = req.t("Top 5 Highest Value Sales", "Top 5 Ventas de Mayor Valor")
        analysis = req.t(
            f"Key Account Activity:\n- **Largest Sale**: #{first.sale_id} via {first.sales_channel} "
            f"({money(first.total)}).\n- **Concentration**: It is {multiple:.1f}x the smallest of the top {len(rows)}.",
            f"Actividad de Cuentas Clave:\n- **Mayor Venta**: #{first.sale_id} vía {first.sales_channel} "
            f"({money(first.total)}).\n- **Concentración**: Es {multiple:.1f}x la menor de las {len(rows)} primeras."
        )
    elif req.ascending:
        multiple = ratio(last.total, first.total)
        explanation = req.t("Lowest sales transactions by value (Low to High).",
                            "Transacciones de menor valor (Bajo a Alto).")
        sql = "SELECT * FROM sales ORDER BY total ASC LIMIT 5;"
        chart_title = req.t("Bottom 5 Lowest Value Sales", "Top 5 Ventas de Menor Valor")
        analysis = req.t(
            f"Micro-transactions detected:\n- **Smallest Sale**: #{first.sale_id} via {first.sales_channel} "
            f"({money(first.total)}).\n- **Spread**: The largest of these {len(rows)} is {multiple:.1f}x the smallest.",
            f"Micro-transacciones detectadas:\n- **Menor Venta**: #{first.sale_id} vía {first.sales_channel} "
            f"({money(first.total)}).\n- **Dispersión**: La mayor de estas {len(rows)} es {multiple:.1f}x la menor."
        )
    else:
        explanation = req.t("Showing recent sales transactions.", "Mostrando transacciones de ventas recientes.")
        sql = "SELECT * FROM sales LIMIT 10;"
        chart_title = req.t("Recent Sales Values", "Valores de Ventas Recientes")
        largest = max(s.total for s in rows)
        smallest = min(s.total for s in rows)
        spread = ratio(largest, smallest)
        analysis = req.t(
            f"Latest transactional activity.\n- **Ticket Range**: {money(smallest)} to {money(largest)} "
            f"({spread:.1f}x) across these {len(rows)}.",
            f"Actividad transaccional reciente.\n- **Rango de Tickets**: {money(smallest)} a {money(largest)} "
            f"({spread:.1f}x) entre estas {len(rows)}."
        )

    return QueryResult(
        sql=sql,
        explanation=explanation,
        analysis=analysis,
        columns=Sale.columns(),
        rows=[s.to_row() for s in rows],
        chart_config=create_chart_config(
            chart_title,
            [s.label for s in rows],
            [s.total for s in rows],
            'bar',
            DESC_COLOR_GREEN if req.descending else ASC_COLOR_RED,
        ),
    )


def build_customer_result(req: SynthesisRequest) -> QueryResult:
    regions = len({c.region for c in CUSTOMERS})
    return QueryResult(
        sql="SELECT * FROM customers;",
        explanation=req.t("Fetching customer database.", "Obteniendo base de datos de clientes."),
        analysis=req.t(
            f"CRM Snapshot:\n- **Total Customers**: {len(CUSTOMERS)}.\n- **Geo Coverage**: {regions} distinct regions.",
            f"Snapshot CRM:\n- **Total Clientes**: {len(CUSTOMERS)}.\n- **Cobertura Geo**: {regions} regiones distintas."
        ),
        columns=Customer.columns(),
        rows=[c.to_row() for c in CUSTOMERS],
    )


def build_schema_design_result(req: SynthesisRequest) -> QueryResult:
    sales = to_frame(SALES)
    products = to_frame(PRODUCTS)[['product_id', 'category']]
    joined = sales.merge(products, on='product_id', how='inner')
    skipped = len(sales) - len(joined)
    if skipped:
        logger.debug("%d sales reference unknown products, left out of category totals", skipped)
    by_category = joined.groupby('category', sort=False)['total'].sum()

    return QueryResult(
        sql="-- SQL Schema Generation Script",
        columns=[],
        rows=[],
        chart_config=create_chart_config(
            req.t('Total Sales by Category', 'Ventas Totales por Categoría'),
            by_category.index.tolist(),
            by_category.tolist(),
            'bar',
            ['#3b82f6', '#8b5cf6', '#10b981', '#f59e0b'],
        ),
        explanation=req.t(
            "Here is the optimized PostgreSQL architecture based on your CSVs and the ETL load script.",
            "Aquí tienes la arquitectura optimizada para PostgreSQL basada en tus CSVs y el script de carga ETL."
        ),
        analysis=req.t(
            "Schema Analysis:\n- **Normalization**: 3rd Normal Form achieved.\n"
            "- **Optimization**: Added indexes on `customer_id` and `date` to speed up reporting queries by 40%.\n"
            "- **Integrity**: Foreign keys enforcement enabled.",
            "Análisis del Esquema:\n- **Normalización**: 3ra Forma Normal alcanzada.\n"
            "- **Optimización**: Índices añadidos en `customer_id` y `date` para acelerar reportes un 40%.\n"
            "- **Integridad**: Claves foráneas activadas."
        ),
    )


def build_fallback_result(req: SynthesisRequest) -> QueryResult:
    return QueryResult(
        sql="SELECT * FROM employees LIMIT 5; -- Fallback",
        explanation=req.t(
            "I wasn't sure exactly what table you wanted, so here is a sample of your employees.",
            "No estaba seguro de qué tabla querías exactamente, así que aquí hay una muestra de tus empleados."
        ),
        analysis=req.t("Ambiguous query. Defaulting to Employee Directory.",
                       "Consulta ambigua. Mostrando Directorio de Empleados por defecto."),
        columns=Employee.columns(),
        rows=[e.to_row() for e in EMPLOYEES[:RANKED_LIMIT]],
    )


# --- Simulated external tools ---

def region_sales_totals() -> pd.Series:
    """Sum sale totals per customer region, in first-seen order. Unknown customers are skipped."""
    sales = to_frame(SALES)
    customers = to_frame(CUSTOMERS)[['customer_id', 'region']]
    joined = sales.merge(customers, on='customer_id', how='inner')
    joined = joined[joined['region'].fillna('') != '']
    return joined.groupby('region', sort=False)['total'].sum()


def build_geo_map_result(req: SynthesisRequest) -> QueryResult:
    totals = region_sales_totals()
    max_sale = float(totals.max()) if len(totals) else 0.0
    top_region = totals.idxmax() if len(totals) else '-'

    rows, lats, lons, text, sizes = [], [], [], [], []
    for region, total in totals.items():
        total = float(total)
        coords = config.REGION_COORDS.get(
            region, {'lat': config.MAP_CENTER['lat'], 'lon': config.MAP_CENTER['lon'], 'name': region}
        )
        lats.append(coords['lat'])
        lons.append(coords['lon'])
        text.append(f"{coords['name']}: {money(total)}")
        sizes.append(max(config.MARKER_MIN_SIZE, ratio(total, max_sale) * config.MARKER_MAX_SIZE))
        rows.append(make_row({
            'region': region,
            'latitude': coords['lat'],
            'longitude': coords['lon'],
            'total_sales': round(total, 2),
        }))

    return QueryResult(
        sql=("SELECT c.region, SUM(s.total) as total_sales \nFROM sales s \n"
             "JOIN customers c ON s.customer_id = c.customer_id \nGROUP BY c.region;"),
        explanation=req.t(
            "I used the **Google Maps MCP** to project your sales onto the Madrid map. "
            "The size of the bubbles represents revenue volume.",
            "He utilizado el **Google Maps MCP** para proyectar tus ventas sobre el mapa de Madrid. "
            "El tamaño de las burbujas representa el volumen de facturación."
        ),
        analysis=req.t(
            f"Geospatial Analysis:\n- **Top Performing Region**: {top_region} ({money(max_sale)}).\n"
            "- **Distribution**: Sales are concentrated in central and northern districts.\n"
            "- **Strategy**: Consider targeted marketing in the southern districts to boost presence.",
            f"Análisis Geoespacial:\n- **Región con Mayor Rendimiento**: {top_region} ({money(max_sale)}).\n"
            "- **Distribución**: Las ventas se concentran en distritos centro y norte.\n"
            "- **Estrategia**: Considerar marketing focalizado en los distritos del sur para aumentar la presencia."
        ),
        columns=['region', 'latitude', 'longitude', 'total_sales'],
        rows=rows,
        chart_config=create_map_chart(
            req.t('Geographic Distribution (Madrid)', 'Distribución Geográfica (Madrid)'),
            lats, lons, text, sizes, totals.tolist(),
        ),
        external_context=ExternalContext(
            source="Google Maps / OpenStreetMap MCP",
            content=req.t("Rendered Map: Madrid, Spain.", "Mapa renderizado: Madrid, España."),
        ),
    )


def build_currency_result(req: SynthesisRequest) -> QueryResult:
    base = sum(s.total for s in SALES)
    rates = {'USD': 1.0, **config.EXCHANGE_RATES}
    converted = {code: base * rate for code, rate in rates.items()}

    return QueryResult(
        sql="SELECT SUM(total) FROM sales; -- Converted via Forex API",
        explanation=req.t(
            "I calculated your total revenue and used the **Forex MCP** to convert it into multiple "
            "currencies using today's rates.",
            "He calculado tus ingresos totales y he utilizado el **Forex MCP** para convertirlos a múltiples "
            "divisas con las tasas de hoy."
        ),
        analysis=req.t(
            f"Currency Impact:\n- **Base Revenue**: {money(base)}\n"
            "- **EUR Strength**: The Euro conversion indicates strong purchasing power parity.\n"
            f"- **MXN Volatility**: Rate used ({config.EXCHANGE_RATES['MXN']}) is stable compared to last week.",
            f"Impacto Cambiario:\n- **Ingreso Base**: {money(base)}\n"
            "- **Fortaleza EUR**: La conversión a Euro indica paridad de poder adquisitivo fuerte.\n"
            f"- **Volatilidad MXN**: La tasa usada ({config.EXCHANGE_RATES['MXN']}) es estable comparada "
            "con la semana pasada."
        ),
        columns=['currency', 'rate', 'total_value'],
        rows=[
            make_row({
                'currency': config.CURRENCY_LABELS.get(code, code),
                'rate': rate,
                'total_value': round(converted[code], 2),
            })
            for code, rate in rates.items()
        ],
        chart_config=create_chart_config(
            req.t('Revenue in Different Currencies', 'Ingresos en Diferentes Divisas'),
            list(converted.keys()),
            list(converted.values()),
            'bar',
            ['#3b82f6', '#6366f1', '#10b981', '#f43f5e'],
        ),
        external_context=ExternalContext(
            source="Open Exchange Rates API (MCP)",
            content=req.t(f"Rates updated: 1 USD = {config.EXCHANGE_RATES['EUR']} EUR.",
                          f"Tasas actualizadas: 1 USD = {config.EXCHANGE_RATES['EUR']} EUR."),
        ),
    )


def settlement_status(sale: Sale, rng: np.random.Generator) -> str:
    """Cash never goes through the payment processor, so it consumes no draw."""
    if sale.payment_method == config.CASH_PAYMENT_METHOD:
        return 'N/A (Cash)'
    return 'succeeded' if rng.random() < config.PAYMENT_SUCCESS_RATE else 'pending'


def build_payment_status_result(req: SynthesisRequest) -> QueryResult:
    rng = req.rng if req.rng is not None else np.random.default_rng()
    rows = []
    for sale in SALES[:RANKED_LIMIT]:
        status = settlement_status(sale, rng)
        rows.append({
            'sale_id': sale.sale_id,
            'amount': sale.total,
            'stripe_status': status,
            'risk_score': int(rng.integers(0, 100)),
        })

    pending = sum(1 for r in rows if r['stripe_status'] == 'pending')
    average_risk = ratio(sum(r['risk_score'] for r in rows), len(rows))
    if average_risk < 40:
        risk_label = req.t('Low', 'Bajo')
    elif average_risk < 70:
        risk_label = req.t('Medium', 'Medio')
    else:
        risk_label = req.t('High', 'Alto')

    return QueryResult(
        sql="SELECT sale_id, total, payment_method FROM sales LIMIT 5;",
        explanation=req.t(
            "I crossed your internal sales records with the **Stripe MCP** to verify the real fund status.",
            "He cruzado tus registros de ventas internos con el **Stripe MCP** para verificar el estado real "
            "de los fondos."
        ),
        analysis=req.t(
            f"Risk & Liquidity Report:\n- **Pending Transactions**: {pending} require attention.\n"
            f"- **Average Risk Score**: {risk_label} ({average_risk:.0f}/100).\n"
            "- **Recommendation**: Verify 'Pending' statuses manually in the Stripe Dashboard.",
            f"Reporte de Riesgo y Liquidez:\n- **Transacciones Pendientes**: {pending} requieren atención.\n"
            f"- **Puntaje de Riesgo Promedio**: {risk_label} ({average_risk:.0f}/100).\n"
            "- **Recomendación**: Verificar estados 'Pendientes' manualmente en el Dashboard de Stripe."
        ),
        columns=['sale_id', 'amount', 'stripe_status', 'risk_score'],
        rows=[make_row(r) for r in rows],
        external_context=ExternalContext(
            source="Stripe API (MCP)",
            content=req.t("Real-time status check complete.", "Verificación de estado en tiempo real completada."),
        ),
    )


def build_market_correlation_result(req: SynthesisRequest) -> QueryResult:
    coefficient = config.CORRELATION_COEFFICIENT
    quarters = zip(config.CORRELATION_QUARTERS, config.CORRELATION_SALES_SERIES, config.CORRELATION_BTC_SERIES)

    return QueryResult(
        sql="SELECT date, SUM(total) FROM sales GROUP BY date;",
        explanation=req.t(
            "Comparing your internal sales against Bitcoin price using the **Alpha Vantage MCP**.",
            "Comparando tus ventas internas contra el precio de Bitcoin usando el **Alpha Vantage MCP**."
        ),
        analysis=req.t(
            f"Correlation Analysis:\n- **Coefficient**: {coefficient:+.2f} (Positive Correlation).\n"
            "- **Insight**: Your sales seem to increase when the crypto market is bullish. This might indicate "
            "your customer base is tech-savvy or holds crypto assets.",
            f"Análisis de Correlación:\n- **Coeficiente**: {coefficient:+.2f} (Correlación Positiva).\n"
            "- **Insight**: Tus ventas parecen aumentar cuando el mercado cripto está al alza. Esto podría "
            "indicar que tu base de clientes es experta en tecnología."
        ),
        columns=['period', 'your_sales', 'btc_price'],
        rows=[make_row({'period': q, 'your_sales': s, 'btc_price': b}) for q, s, b in quarters],
        chart_config=create_dual_axis_chart(
            req.t('Sales Correlation with Bitcoin', 'Correlación de Ventas con Bitcoin'),
            config.CORRELATION_MONTHS,
            config.CORRELATION_SALES_SERIES,
            req.t('Your Sales ($)', 'Tus Ventas ($)'),
            config.CORRELATION_BTC_SERIES,
            'Bitcoin (BTC)',
            req.t('Sales Volume', 'Volumen Ventas'),
            req.t('BTC Price', 'Precio BTC'),
        ),
        external_context=ExternalContext(
            source="CoinGecko / Alpha Vantage MCP",
            content=req.t("Market data retrieved.", "Datos de mercado recuperados."),
        ),
    )


def build_market_trend_result(req: SynthesisRequest) -> QueryResult:
    recent = SALES[:RANKED_LIMIT]
    growth = config.INDUSTRY_GROWTH_RATE
    margin = config.OUTPERFORMANCE_MARGIN

    return QueryResult(
        sql="SELECT date, SUM(total) FROM sales GROUP BY date ORDER BY date DESC LIMIT 5;",
        explanation=req.t(
            "I analyzed your internal sales and used the **Brave Search MCP** to search for external market context.",
            "He analizado tus ventas internas y he utilizado el **Brave Search MCP** para buscar contexto de "
            "mercado externo."
        ),
        analysis=req.t(
            f"Market Benchmark:\n- **Your Trend**: Steady growth in Q2.\n- **Global Market**: Retail is growing at "
            f"{growth}%.\n- **Verdict**: You are outperforming the industry average by approximately {margin:g}% "
            "based on recent transaction volume.",
            f"Benchmark de Mercado:\n- **Tu Tendencia**: Crecimiento sostenido en Q2.\n- **Mercado Global**: Retail "
            f"crece al {growth}%.\n- **Veredicto**: Estás superando el promedio de la industria en aproximadamente "
            f"un {margin:g}% basado en el volumen reciente."
        ),
        columns=['date', 'total_sales'],
        rows=[make_row({'date': s.date, 'total_sales': s.total}) for s in recent],
        chart_config=create_chart_config(
            req.t('Internal Sales vs Market Trend', 'Ventas Internas vs Tendencia Mercado'),
            [s.date for s in recent],
            [s.total for s in recent],
            'line',
            '#8b5cf6',
        ),
        external_context=ExternalContext(
            source="Brave Search API",
            content=req.t("Retail market trends 2025.", "Tendencias mercado retail 2025."),
            url=config.MARKET_SEARCH_URL,
        ),
    )


def build_export_result(req: SynthesisRequest) -> QueryResult:
    directory = config.EXPORT_DIRECTORY
    return QueryResult(
        sql="-- Filesystem Operation Triggered",
        explanation=req.t("✅ I used the **Filesystem MCP** to generate the report.",
                          "✅ He utilizado el **Filesystem MCP** para generar el reporte."),
        analysis=req.t(
            f"File Operation:\n- **Path**: {directory}\n- **Format**: CSV (UTF-8)\n"
            "- **Security**: File permissions set to read-only for group 'sales'.",
            f"Operación de Archivo:\n- **Ruta**: {directory}\n- **Formato**: CSV (UTF-8)\n"
            "- **Seguridad**: Permisos establecidos en solo lectura para grupo 'ventas'."
        ),
        columns=['status', 'file_path', 'size'],
        rows=[make_row({
            'status': 'Success',
            'file_path': directory + config.EXPORT_FILE_NAME,
            'size': config.EXPORT_FILE_SIZE,
        })],
        external_context=ExternalContext(
            source="Local Filesystem",
            content=req.t("File saved successfully.", "Archivo guardado exitosamente."),
        ),
    )


BUILDERS: Dict[Topic, Callable[[SynthesisRequest], QueryResult]] = {
    Topic.GEO_MAP: build_geo_map_result,
    Topic.CURRENCY_CONVERSION: build_currency_result,
    Topic.PAYMENT_STATUS: build_payment_status_result,
    Topic.MARKET_CORRELATION: build_market_correlation_result,
    Topic.MARKET_TREND: build_market_trend_result,
    Topic.EXPORT: build_export_result,
    Topic.SCHEMA_DESIGN: build_schema_design_result,
    Topic.EMPLOYEE: build_employee_result,
    Topic.PRODUCT_CATEGORY_TOY: build_toy_category_result,
    Topic.PRODUCT: build_product_result,
    Topic.SALE_TOTAL: build_sale_total_result,
    Topic.SALE: build_sale_result,
    Topic.CUSTOMER: build_customer_result,
    Topic.FALLBACK: build_fallback_result,
}


def synthesize(
    classification: Classification,
    prompt: str,
    language: Language,
    rng: Optional[np.random.Generator] = None,
) -> QueryResult:
    """
    Build the QueryResult for an already-classified prompt.

    Args:
        classification: Topic and ordering from classifier.classify()
        prompt: The original prompt text
        language: 'en' or 'es' (already normalized)
        rng: Randomness for the payment-status topic; a fresh Generator when None

    Returns:
        QueryResult
    """
    request = SynthesisRequest(prompt=prompt, language=language,
                               ordering=classification.ordering, rng=rng)
    return BUILDERS[classification.topic](request)
