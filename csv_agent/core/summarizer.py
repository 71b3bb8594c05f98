"""
Sumarizador do dataset.

Executado uma vez na carga: classifica cada coluna como numérica ou
categórica e produz um perfil compacto que vai para o contexto do agente,
sempre citando os nomes exatos das colunas.
"""

from collections import Counter
from typing import List, Optional, Sequence, Tuple

from .config import get_config
from .csv_parser import Record, parse_csv_text
from .logger import get_logger, log_data_operation
from ..models.enums import ColumnKind
from ..models.summary import (
    CategoricalColumnProfile,
    DatasetSummary,
    LoadedDataset,
    NumericColumnProfile
)
from ..utils.numbers import format_number, parse_number, round_value

SUMMARY_MEAN_PRECISION = 2
EMPTY_DATASET_ERROR = (
    "The CSV must contain a header row and at least one data row."
)


class DatasetSummarizer:
    """Perfilador de colunas do dataset carregado."""

    def __init__(
        self,
        numeric_ratio_threshold: Optional[float] = None,
        top_values: Optional[int] = None
    ):
        config = get_config()
        self.logger = get_logger("dataset_summarizer")
        self.numeric_ratio_threshold = (
            config.numeric_ratio_threshold
            if numeric_ratio_threshold is None else numeric_ratio_threshold
        )
        self.top_values = config.summary_top_values if top_values is None else top_values

    def classify_column(self, rows: Sequence[Record], column: str) -> ColumnKind:
        """Numérica quando a fração de valores numéricos atinge o limiar."""
        kind, _ = self._classify(self._present_values(rows, column))
        return kind

    def summarize(self, rows: Sequence[Record], headers: Sequence[str]) -> DatasetSummary:
        """
        Constrói o perfil de todas as colunas.

        Args:
            rows: Registros do dataset
            headers: Catálogo de campos

        Returns:
            DatasetSummary (vazio se não há registros ou campos)
        """
        if not rows or not headers:
            self.logger.debug("Dataset vazio; perfil não gerado")
            return DatasetSummary()

        summary = DatasetSummary(row_count=len(rows), column_count=len(headers))

        for header in headers:
            values = self._present_values(rows, header)
            kind, numbers = self._classify(values)

            if kind == ColumnKind.NUMERIC:
                summary.numeric_columns.append(NumericColumnProfile(
                    name=header,
                    count=len(numbers),
                    mean=round_value(sum(numbers) / len(numbers), SUMMARY_MEAN_PRECISION),
                    min=min(numbers),
                    max=max(numbers)
                ))
            else:
                counts = Counter(values)
                # Counter.most_common ordena de forma estável: empates mantêm
                # a ordem em que o valor apareceu primeiro
                summary.categorical_columns.append(CategoricalColumnProfile(
                    name=header,
                    unique=len(counts),
                    top_values=counts.most_common(self.top_values)
                ))

        log_data_operation("summarize", {
            'rows': summary.row_count,
            'numeric': len(summary.numeric_columns),
            'categorical': len(summary.categorical_columns)
        })
        return summary

    def render(self, summary: DatasetSummary) -> str:
        """Converte o perfil em texto para o contexto do agente."""
        if summary.is_empty:
            return ''

        lines = [f"**Dataset: {summary.row_count} rows × {summary.column_count} columns**\n"]

        if summary.numeric_columns:
            lines.append('**Numeric columns** (exact names — use these verbatim in tool calls):')
            for column in summary.numeric_columns:
                lines.append(
                    f'  • "{column.name}": mean={format_number(column.mean)}, '
                    f'min={format_number(column.min)}, max={format_number(column.max)}, '
                    f'n={column.count}'
                )

        if summary.categorical_columns:
            lines.append('\n**Categorical columns** (exact names — use these verbatim in tool calls):')
            for column in summary.categorical_columns:
                top = ', '.join(f"{value} ({count})" for value, count in column.top_values)
                lines.append(f'  • "{column.name}": {column.unique} unique values — top: {top}')

        return '\n'.join(lines)

    def _classify(self, values: List[str]) -> Tuple[ColumnKind, List[float]]:
        numbers = [n for n in (parse_number(v) for v in values) if n is not None]
        ratio = len(numbers) / (len(values) or 1)
        if ratio >= self.numeric_ratio_threshold and numbers:
            return ColumnKind.NUMERIC, numbers
        return ColumnKind.CATEGORICAL, numbers

    @staticmethod
    def _present_values(rows: Sequence[Record], column: str) -> List[str]:
        return [row.get(column) for row in rows if row.get(column) not in ('', None)]


def compute_dataset_summary(rows: Sequence[Record], headers: Sequence[str]) -> str:
    """Perfil textual do dataset; string vazia sem registros ou campos."""
    summarizer = DatasetSummarizer()
    return summarizer.render(summarizer.summarize(rows, headers))


def build_columns_header(headers: Sequence[str]) -> str:
    """Linha de colunas que precede cada mensagem enviada ao agente."""
    return f"[CSV columns: {', '.join(headers)}]"


def load_dataset(text: str) -> LoadedDataset:
    """
    Carrega texto CSV: analisa, perfila e monta o contexto do agente.

    Args:
        text: Conteúdo CSV bruto

    Returns:
        LoadedDataset; com `error` preenchido quando não há dados suficientes
    """
    logger = get_logger("dataset_loader")
    headers, rows = parse_csv_text(text)

    if not rows or not headers:
        logger.warning("Carga de dataset sem linhas de dados")
        return LoadedDataset(error=EMPTY_DATASET_ERROR)

    log_data_operation("load_dataset", {'rows': len(rows), 'columns': len(headers)})
    return LoadedDataset(
        headers=headers,
        rows=rows,
        summary=compute_dataset_summary(rows, headers),
        columns_header=build_columns_header(headers)
    )
