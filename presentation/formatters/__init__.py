"""Result rendering."""
from .table_formatter import HEADERS, render_json, render_table, table_rows

__all__ = ['HEADERS', 'render_json', 'render_table', 'table_rows']
