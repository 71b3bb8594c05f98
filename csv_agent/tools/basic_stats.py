"""
Ferramentas de estatísticas descritivas e contagem de valores.
"""

from collections import Counter
from typing import Sequence
from datetime import datetime

from ..core.csv_parser import Record
from ..core.column_resolver import catalog_of
from ..models.enums import ToolName
from ..models.tool_args import ColumnStatsArgs, ValueCountsArgs
from .base import BaseTool, ToolResult, ToolParameter, COLUMN_NOTE
from .statistics import descriptive_stats, numeric_values


class ComputeColumnStatsTool(BaseTool):
    """
    Estatísticas descritivas de uma coluna numérica.

    Média, mediana, desvio padrão populacional, mínimo, máximo e contagem,
    todos arredondados para 4 casas.
    """

    tool_name = ToolName.COMPUTE_COLUMN_STATS
    args_model = ColumnStatsArgs

    def __init__(self):
        super().__init__()
        self.description = (
            'Compute descriptive statistics (mean, median, std, min, max, count) for a numeric column. '
            + COLUMN_NOTE
        )
        self.parameters = [
            ToolParameter(
                name="column",
                type="string",
                description=(
                    'Exact column name copied from [CSV columns: ...]. Example: if the header says '
                    '"Favorite Count" pass "Favorite Count", not "favorite_count".'
                ),
                required=True
            )
        ]

    def execute(self, rows: Sequence[Record], args: ColumnStatsArgs) -> ToolResult:
        start_time = datetime.now()
        values = numeric_values(rows, args.column)

        if not values:
            available = catalog_of(rows)
            return self._create_error_result(
                f'No numeric values found in column "{args.column}". '
                f"Available columns: {', '.join(available)}",
                available_columns=available
            )

        stats = {'column': args.column}
        stats.update(descriptive_stats(values))

        return self._create_success_result(
            data=stats,
            execution_time=(datetime.now() - start_time).total_seconds()
        )


class GetValueCountsTool(BaseTool):
    """Frequência de cada valor não vazio de uma coluna."""

    tool_name = ToolName.GET_VALUE_COUNTS
    args_model = ValueCountsArgs

    def __init__(self):
        super().__init__()
        self.description = (
            'Count occurrences of each unique value in a column (for categorical data). '
            + COLUMN_NOTE
        )
        self.parameters = [
            ToolParameter(
                name="column",
                type="string",
                description='Exact column name copied from [CSV columns: ...]. ' + COLUMN_NOTE,
                required=True
            ),
            ToolParameter(
                name="top_n",
                type="number",
                description=f"How many top values to return (default {self.config.default_top_n})",
                required=False,
                default=self.config.default_top_n
            )
        ]

    def execute(self, rows: Sequence[Record], args: ValueCountsArgs) -> ToolResult:
        start_time = datetime.now()
        top_n = int(args.top_n) if args.top_n else self.config.default_top_n

        counts = Counter(
            row[args.column] for row in rows
            if row.get(args.column) not in (None, '')
        )
        # Empates preservam a ordem de primeira ocorrência
        ranked = sorted(counts.items(), key=lambda item: item[1], reverse=True)[:top_n]

        return self._create_success_result(
            data={
                'column': args.column,
                'total_rows': len(rows),
                'value_counts': dict(ranked)
            },
            execution_time=(datetime.now() - start_time).total_seconds()
        )
