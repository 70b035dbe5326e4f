"""
Test app for insight-mcp.
A small Flask app exposing the chat query, the table browser and the prompt library as JSON.
"""

import logging
import os
import sys
from dataclasses import asdict

sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..'))

from flask import Flask, request, jsonify
from dotenv import load_dotenv

load_dotenv()

from insight_mcp import QueryService, TABLE_SCHEMAS, load_settings
from insight_mcp.formatting import display_row, format_column_name, search_rows
from insight_mcp.i18n import normalize_language
from insight_mcp.models import row_values
from testapp.data import BUSINESS_PROMPTS, UI_TEXT

settings = load_settings()
logging.basicConfig(level=settings.log_level, format='%(asctime)s %(levelname)s %(name)s: %(message)s')
logger = logging.getLogger(__name__)

app = Flask(__name__)

service = QueryService(settings)


# --- Tables tab ---

@app.route('/api/tables')
def list_tables():
    return jsonify([asdict(schema) for schema in TABLE_SCHEMAS])


@app.route('/api/tables/<name>')
async def get_table(name):
    records = await service.get_table_data(name)
    rows = search_rows([r.to_row() for r in records], request.args.get('q', ''))
    return jsonify({
        'table': name,
        'columns': records[0].columns() if records else [],
        'rows': [row_values(row) for row in rows],
        'display_rows': [display_row(row) for row in rows],
        'total': len(records),
        'filtered': len(rows),
    })


# --- Chat tab ---

@app.route('/api/query', methods=['POST'])
async def run_query():
    payload = request.get_json(silent=True) or {}
    message = (payload.get('message') or '').strip()
    if not message:
        return jsonify({'error': 'No message provided'}), 400

    language = normalize_language(payload.get('language') or settings.language)

    try:
        result = await service.execute_natural_language_query(message, language)
    except Exception:
        logger.exception("Query failed: %r", message)
        return jsonify({'error': UI_TEXT[language]['error']}), 500

    response = result.to_dict()
    response['answer'] = result.explanation or UI_TEXT[language]['fallback_answer']
    response['display_columns'] = [format_column_name(c) for c in result.columns]
    response['display_rows'] = [display_row(row) for row in result.rows]
    return jsonify(response)


@app.route('/api/prompts')
def list_prompts():
    language = normalize_language(request.args.get('language') or settings.language)
    return jsonify({
        'intro': UI_TEXT[language]['intro'],
        'prompts': [
            {'category': p['category'], 'title': p['title'][language], 'prompt': p['prompt']}
            for p in BUSINESS_PROMPTS
        ],
    })


if __name__ == '__main__':
    print("Test app running at http://localhost:5003")
    print(f"Loaded {len(TABLE_SCHEMAS)} tables, {len(BUSINESS_PROMPTS)} suggested prompts")
    app.run(debug=True, port=5003)
