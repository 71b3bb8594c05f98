"""
Ferramenta de correlação de Pearson entre duas colunas.
"""

from typing import Sequence
from datetime import datetime

from ..core.csv_parser import Record
from ..models.enums import ToolName
from ..models.tool_args import CorrelationArgs
from .base import BaseTool, ToolResult, ToolParameter, COLUMN_NOTE
from .statistics import paired_numeric_values, pearson_correlation

MIN_PAIRS = 2


class ComputeCorrelationTool(BaseTool):
    """
    Correlação de Pearson usando apenas linhas em que as duas colunas
    são numéricas.
    """

    tool_name = ToolName.COMPUTE_CORRELATION
    args_model = CorrelationArgs

    def __init__(self):
        super().__init__()
        self.description = (
            'Compute the Pearson correlation coefficient between two numeric columns. '
            + COLUMN_NOTE
        )
        self.parameters = [
            ToolParameter(
                name="column1",
                type="string",
                description='First column name, copied exactly from [CSV columns: ...].',
                required=True
            ),
            ToolParameter(
                name="column2",
                type="string",
                description='Second column name, copied exactly from [CSV columns: ...].',
                required=True
            )
        ]

    def execute(self, rows: Sequence[Record], args: CorrelationArgs) -> ToolResult:
        start_time = datetime.now()
        pairs = paired_numeric_values(rows, args.column1, args.column2)

        if len(pairs) < MIN_PAIRS:
            return self._create_error_result('Not enough numeric pairs to compute correlation')

        correlation = pearson_correlation(pairs)
        if correlation is None:
            return self._create_error_result(
                f'Correlation is undefined: "{args.column1}" or "{args.column2}" has zero variance'
            )

        return self._create_success_result(
            data={
                'column1': args.column1,
                'column2': args.column2,
                'correlation': correlation,
                'n_pairs': len(pairs)
            },
            execution_time=(datetime.now() - start_time).total_seconds()
        )
