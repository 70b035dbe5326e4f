"""
Demo content for the insight-mcp test app.
Suggested business prompts for the chat panel and the bilingual UI strings.
"""

BUSINESS_PROMPTS = [
    # External & system MCPs
    {"category": "Financial MCP", "title": {"en": "Convert Currency", "es": "Convertir Divisa"},
     "prompt": "Convert total revenue to EUR and MXN (Forex MCP)"},
    {"category": "Geo MCP", "title": {"en": "Sales Map", "es": "Mapa de Ventas"},
     "prompt": "Show me a map of sales by region (Google Maps MCP)"},
    {"category": "Financial MCP", "title": {"en": "Payment Status", "es": "Estado Pagos"},
     "prompt": "Check Stripe status for recent sales"},
    {"category": "Financial MCP", "title": {"en": "Crypto Correlation", "es": "Cripto Análisis"},
     "prompt": "Compare my sales trend with Bitcoin price"},
    {"category": "External MCP", "title": {"en": "Market Trends", "es": "Tendencias Mercado"},
     "prompt": "Compare my sales with global market trends (Brave Search)"},
    {"category": "System MCP", "title": {"en": "Export Report", "es": "Exportar Reporte"},
     "prompt": "Export current sales report to CSV on local disk"},
    {"category": "Architecture", "title": {"en": "Postgres Schema", "es": "Esquema Postgres"},
     "prompt": "Diseña un esquema de base de datos optimizado en PostgreSQL y graficalo"},

    # Analytics & general
    {"category": "Analytics", "title": {"en": "Revenue Overview", "es": "Resumen Ingresos"},
     "prompt": "Calculate total revenue statistics and distribution"},
    {"category": "Inventory", "title": {"en": "Category: Juguetes", "es": "Cat: Juguetes"},
     "prompt": "Show me all products in Juguetes category with prices"},
    {"category": "CRM", "title": {"en": "Customer Region", "es": "Región Clientes"},
     "prompt": "List customers from the 'Centro' region"},

    # Rankings
    {"category": "HR - High", "title": {"en": "Highest Salaries", "es": "Salarios Altos"},
     "prompt": "Show me the top 5 employees by salary (Descending)"},
    {"category": "HR - Low", "title": {"en": "Entry Level Salaries", "es": "Salarios Bajos"},
     "prompt": "Show me the bottom 5 employees by salary (Ascending)"},
    {"category": "Sales - High", "title": {"en": "Top Transactions", "es": "Top Transacciones"},
     "prompt": "Show top 5 sales transactions by total value"},
    {"category": "Products - High", "title": {"en": "Most Expensive", "es": "Más Caros"},
     "prompt": "List the top 5 most expensive products"},

    # Strategy
    {"category": "Strategy", "title": {"en": "Sales Channels", "es": "Canales Venta"},
     "prompt": "Analyze sales distribution by channel (Online vs Physical)"},
    {"category": "CRM", "title": {"en": "VIP Customers", "es": "Clientes VIP"},
     "prompt": "List the top 5 customers by total purchase volume"},
    {"category": "HR - Performance", "title": {"en": "Top Performers", "es": "Mejores Empleados"},
     "prompt": "Identify employees with the highest generated revenue"},
]

UI_TEXT = {
    "en": {
        "title": "Natural Language Query",
        "thinking": "Thinking & Querying MCPs...",
        "error": "I encountered an error trying to process that request.",
        "fallback_answer": "Here are the results:",
        "intro": "Hello! I'm your SQL Agent. I can help design database schemas, query your sales data, "
                 "or visualize trends.\n\nI am now connected to **Brave Search**, **Stripe**, **Forex API**, "
                 "**Google Maps** and **Filesystem**.",
    },
    "es": {
        "title": "Consulta en Lenguaje Natural",
        "thinking": "Pensando y Consultando MCPs...",
        "error": "Encontré un error al intentar procesar esa solicitud.",
        "fallback_answer": "Aquí están los resultados:",
        "intro": "¡Hola! Soy tu Agente SQL. Puedo ayudarte a diseñar esquemas, consultar datos de ventas "
                 "o visualizar tendencias.\n\nEstoy conectado a **Brave Search**, **Stripe**, **Forex API**, "
                 "**Google Maps** y **Filesystem**.",
    },
}
