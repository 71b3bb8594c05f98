"""
Comparação de engajamento entre linhas que contêm ou não cada palavra-chave.

O resultado já vem no formato de série para gráfico de barras agrupadas
(`chart_type = "engagement"`).
"""

import re
from typing import Any, Dict, List, Optional, Sequence
from datetime import datetime

from ..core.csv_parser import Record
from ..core.column_resolver import catalog_of
from ..models.enums import ToolName
from ..models.tool_args import KeywordEngagementArgs
from ..utils.numbers import round_value
from .base import BaseTool, ToolResult, ToolParameter, COLUMN_NOTE
from .filtering import rows_containing
from .statistics import numeric_values

ENGAGEMENT_PRECISION = 2
CHART_TYPE = "engagement"

# Padrões em ordem de prioridade
TEXT_COLUMN_PATTERNS = [
    re.compile(r"^text$", re.IGNORECASE),
    re.compile(r"text|content|tweet|post|body", re.IGNORECASE),
]
METRIC_COLUMN_PATTERNS = [
    re.compile(r"favorite.?count|likes?_count|like_count", re.IGNORECASE),
    re.compile(r"favorite|like|engagement|retweet", re.IGNORECASE),
]


def detect_column(headers: List[str], patterns: List[re.Pattern], fallback_index: int) -> Optional[str]:
    """Primeiro cabeçalho que casa com o padrão de maior prioridade."""
    for pattern in patterns:
        for header in headers:
            if pattern.search(header):
                return header
    if fallback_index < len(headers):
        return headers[fallback_index]
    return None


def mean_metric(rows: Sequence[Record], column: str) -> float:
    """Média arredondada da métrica; 0 quando não há valores numéricos."""
    values = numeric_values(rows, column)
    if not values:
        return 0
    return round_value(sum(values) / len(values), ENGAGEMENT_PRECISION)


class CompareKeywordEngagementTool(BaseTool):
    """
    Para cada palavra-chave, média da métrica nas linhas cujo texto contém a
    palavra versus nas demais.
    """

    tool_name = ToolName.COMPARE_KEYWORD_ENGAGEMENT
    args_model = KeywordEngagementArgs

    def __init__(self):
        super().__init__()
        self.description = (
            'For each keyword, compare the mean engagement metric for rows whose text column '
            'CONTAINS the keyword (case-insensitive substring match) vs rows that do not. '
            'Returns a grouped bar chart. ' + COLUMN_NOTE
        )
        self.parameters = [
            ToolParameter(
                name="keywords",
                type="array",
                items="string",
                description=(
                    'List of keywords/substrings to compare. Each is matched case-insensitively '
                    'anywhere in the text column.'
                ),
                required=True
            ),
            ToolParameter(
                name="text_column",
                type="string",
                description=(
                    'Column containing the text to search — copied exactly from [CSV columns: ...]. '
                    'Leave blank to auto-detect.'
                ),
                required=False
            ),
            ToolParameter(
                name="metric_column",
                type="string",
                description=(
                    'Numeric engagement column — copied exactly from [CSV columns: ...]. '
                    'Leave blank to auto-detect.'
                ),
                required=False
            )
        ]

    def execute(self, rows: Sequence[Record], args: KeywordEngagementArgs) -> ToolResult:
        start_time = datetime.now()
        headers = catalog_of(rows)

        text_column = args.text_column or detect_column(headers, TEXT_COLUMN_PATTERNS, 0)
        metric_column = args.metric_column or detect_column(headers, METRIC_COLUMN_PATTERNS, 1)

        if not text_column or not metric_column:
            return self._create_error_result(
                'Could not detect text or metric columns. Please specify them.',
                available_columns=headers
            )
        self.logger.debug(f"Colunas em uso: texto='{text_column}', métrica='{metric_column}'")

        series: List[Dict[str, Any]] = []
        for keyword in args.keywords:
            with_keyword = rows_containing(rows, text_column, keyword)
            matched = {id(row) for row in with_keyword}
            without_keyword = [row for row in rows if id(row) not in matched]

            series.append({
                'name': keyword,
                'with_keyword': mean_metric(with_keyword, metric_column),
                'without_keyword': mean_metric(without_keyword, metric_column),
                'with_count': len(with_keyword),
                'without_count': len(without_keyword)
            })

        summary = '; '.join(
            f"{item['name']}: with={item['with_keyword']} (n={item['with_count']}), "
            f"without={item['without_keyword']} (n={item['without_count']})"
            for item in series
        )

        return self._create_success_result(
            data={
                'chart_type': CHART_TYPE,
                'text_column': text_column,
                'metric_column': metric_column,
                'data': series,
                'summary': summary
            },
            execution_time=(datetime.now() - start_time).total_seconds()
        )
