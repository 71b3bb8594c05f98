"""
Modelos de argumentos por ferramenta.

Cada ferramenta recebe uma estrutura tipada em vez de um dicionário solto;
os campos listados em COLUMN_FIELDS passam pela resolução de colunas antes
da execução.
"""

from typing import ClassVar, List, Optional, Tuple, Union
from pydantic import BaseModel, Field, field_validator


class ToolArguments(BaseModel):
    """Base dos argumentos: ignora chaves extras enviadas pelo agente."""

    model_config = {"extra": "ignore"}

    COLUMN_FIELDS: ClassVar[Tuple[str, ...]] = ()


class ColumnStatsArgs(ToolArguments):
    """Argumentos de compute_column_stats."""

    COLUMN_FIELDS: ClassVar[Tuple[str, ...]] = ("column",)

    column: str = Field(description="Coluna numérica a descrever")


class ValueCountsArgs(ToolArguments):
    """Argumentos de get_value_counts."""

    COLUMN_FIELDS: ClassVar[Tuple[str, ...]] = ("column",)

    column: str = Field(description="Coluna a contar")
    top_n: Optional[float] = Field(None, description="Quantidade de valores retornados (truncada)")


class CorrelationArgs(ToolArguments):
    """Argumentos de compute_correlation."""

    COLUMN_FIELDS: ClassVar[Tuple[str, ...]] = ("column1", "column2")

    column1: str = Field(description="Primeira coluna numérica")
    column2: str = Field(description="Segunda coluna numérica")


class FilterAggregateArgs(ToolArguments):
    """Argumentos de filter_and_aggregate.

    `operation` é texto livre: nomes desconhecidos caem para a média.
    """

    COLUMN_FIELDS: ClassVar[Tuple[str, ...]] = ("target_column", "filter_column")

    target_column: str = Field(description="Coluna numérica agregada")
    filter_column: str = Field(description="Coluna de texto filtrada")
    filter_value: str = Field(description="Substring procurada (sem diferenciar maiúsculas)")
    operation: Optional[str] = Field(None, description="Agregação (padrão: mean)")

    @field_validator("filter_value", mode="before")
    @classmethod
    def coerce_filter_value(cls, v: Union[str, int, float]):
        """Aceita números como valor de filtro."""
        if isinstance(v, (int, float)) and not isinstance(v, bool):
            return str(v)
        return v


class TopRowsArgs(ToolArguments):
    """Argumentos de get_top_rows."""

    COLUMN_FIELDS: ClassVar[Tuple[str, ...]] = ("sort_column",)

    sort_column: str = Field(description="Coluna de ordenação")
    n: Optional[float] = Field(None, description="Quantidade de linhas (truncada)")
    ascending: Optional[bool] = Field(None, description="Ordem crescente")


class KeywordEngagementArgs(ToolArguments):
    """Argumentos de compare_keyword_engagement."""

    COLUMN_FIELDS: ClassVar[Tuple[str, ...]] = ("text_column", "metric_column")

    keywords: List[str] = Field(description="Palavras-chave comparadas")
    text_column: Optional[str] = Field(None, description="Coluna de texto (auto-detectada se vazia)")
    metric_column: Optional[str] = Field(None, description="Coluna de engajamento (auto-detectada se vazia)")
