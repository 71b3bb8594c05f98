"""
Ferramentas de filtragem e ordenação de linhas.
"""

from functools import cmp_to_key
from typing import List, Sequence
from datetime import datetime

from ..core.csv_parser import Record
from ..core.column_resolver import catalog_of
from ..models.enums import AggregationOperation, ToolName
from ..models.tool_args import FilterAggregateArgs, TopRowsArgs
from ..utils.numbers import parse_number
from .base import BaseTool, ToolResult, ToolParameter, COLUMN_NOTE
from .statistics import aggregate, numeric_values, resolve_aggregation

DEFAULT_AGGREGATION = AggregationOperation.MEAN


def rows_containing(rows: Sequence[Record], column: str, text: str) -> List[Record]:
    """Linhas cujo valor em `column` contém `text`, sem diferenciar maiúsculas."""
    needle = str(text).lower()
    return [row for row in rows if needle in str(row.get(column) or '').lower()]


def compare_cells(a: str, b: str) -> int:
    """Numérico quando os dois valores são números; senão, comparação de texto."""
    a_number = parse_number(a)
    b_number = parse_number(b)
    if a_number is not None and b_number is not None:
        return (a_number > b_number) - (a_number < b_number)
    a_text, b_text = str(a), str(b)
    return (a_text > b_text) - (a_text < b_text)


class FilterAndAggregateTool(BaseTool):
    """
    Filtra linhas por substring e agrega uma coluna numérica.

    O filtro não diferencia maiúsculas: "mog" casa com "Mog" e "mogmaxxing".
    """

    tool_name = ToolName.FILTER_AND_AGGREGATE
    args_model = FilterAggregateArgs

    def __init__(self):
        super().__init__()
        self.description = (
            'Filter rows where a text column contains a substring (case-insensitive), then compute '
            'an aggregation on a numeric column. filter_value is a substring — "mog" will match rows '
            'containing "Mog", "mogging", "mogmaxxing", etc. ' + COLUMN_NOTE
        )
        self.parameters = [
            ToolParameter(
                name="target_column",
                type="string",
                description='Numeric column to aggregate — copied exactly from [CSV columns: ...].',
                required=True
            ),
            ToolParameter(
                name="filter_column",
                type="string",
                description='Text column to search — copied exactly from [CSV columns: ...].',
                required=True
            ),
            ToolParameter(
                name="filter_value",
                type="string",
                description=(
                    'Substring to search for (case-insensitive). Partial matches are included — '
                    '"mog" matches "mogging", "Mogmaxxing", etc.'
                ),
                required=True
            ),
            ToolParameter(
                name="operation",
                type="string",
                description=f'Aggregation operation (default: {DEFAULT_AGGREGATION.value})',
                required=False,
                default=DEFAULT_AGGREGATION.value,
                enum=[op.value for op in AggregationOperation]
            )
        ]

    def execute(self, rows: Sequence[Record], args: FilterAggregateArgs) -> ToolResult:
        start_time = datetime.now()
        operation = resolve_aggregation(args.operation or DEFAULT_AGGREGATION)
        if args.operation and operation.value != args.operation:
            self.logger.info(f"Operação '{args.operation}' tratada como '{operation.value}'")

        filtered = rows_containing(rows, args.filter_column, args.filter_value)
        if not filtered:
            available = catalog_of(rows)
            return self._create_error_result(
                f'No rows where {args.filter_column} contains "{args.filter_value}" '
                f"(case-insensitive). Available columns: {', '.join(available)}",
                available_columns=available
            )

        values = numeric_values(filtered, args.target_column)
        if not values:
            return self._create_error_result(
                f'No numeric values in "{args.target_column}" for the filtered rows'
            )

        return self._create_success_result(
            data={
                'filter': f'{args.filter_column} = "{args.filter_value}"',
                'filter_column': args.filter_column,
                'filter_value': args.filter_value,
                'target_column': args.target_column,
                'operation': operation.value,
                'result': aggregate(values, operation),
                'matching_rows': len(filtered)
            },
            execution_time=(datetime.now() - start_time).total_seconds()
        )


class GetTopRowsTool(BaseTool):
    """Primeiras N linhas ordenadas por uma coluna."""

    tool_name = ToolName.GET_TOP_ROWS
    args_model = TopRowsArgs

    def __init__(self):
        super().__init__()
        self.description = 'Return the top N rows sorted by a column. ' + COLUMN_NOTE
        self.parameters = [
            ToolParameter(
                name="sort_column",
                type="string",
                description='Column to sort by — copied exactly from [CSV columns: ...].',
                required=True
            ),
            ToolParameter(
                name="n",
                type="number",
                description=f'Number of rows to return (default {self.config.default_row_limit})',
                required=False,
                default=self.config.default_row_limit
            ),
            ToolParameter(
                name="ascending",
                type="boolean",
                description='Sort ascending? Default false (highest first)',
                required=False,
                default=False
            )
        ]

    def execute(self, rows: Sequence[Record], args: TopRowsArgs) -> ToolResult:
        start_time = datetime.now()
        limit = int(args.n) if args.n else self.config.default_row_limit
        ascending = bool(args.ascending)
        column = args.sort_column
        direction = 1 if ascending else -1

        # sorted() é estável: empates mantêm a ordem original
        ordered = sorted(
            rows,
            key=cmp_to_key(lambda a, b: direction * compare_cells(a.get(column), b.get(column)))
        )

        return self._create_success_result(
            data={
                'sort_column': column,
                'ascending': ascending,
                'rows': [dict(row) for row in ordered[:limit]]
            },
            execution_time=(datetime.now() - start_time).total_seconds()
        )
