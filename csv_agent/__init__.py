"""
Ferramentas analíticas sobre datasets CSV para agentes conversacionais.

Fluxo típico:
    dataset = load_dataset(csv_text)          # catálogo, registros e perfil
    declarations = get_tool_declarations()    # enviado ao LLM
    payload = execute_tool(name, args, dataset.rows)
"""

from .core.csv_parser import ParsedCSV, parse_csv_text, split_csv_line
from .core.column_resolver import resolve_column
from .core.summarizer import (
    DatasetSummarizer,
    build_columns_header,
    compute_dataset_summary,
    load_dataset
)
from .tools.registry import execute_tool, get_tool_declarations, get_tool_registry

__version__ = "0.1.0"

__all__ = [
    'ParsedCSV',
    'parse_csv_text',
    'split_csv_line',
    'resolve_column',
    'DatasetSummarizer',
    'build_columns_header',
    'compute_dataset_summary',
    'load_dataset',
    'execute_tool',
    'get_tool_declarations',
    'get_tool_registry',
]
