"""
Enumerações das ferramentas, operações de agregação e tipos de coluna.
Definem os conjuntos fechados aceitos pelo despachante.
"""

from enum import Enum


class ToolName(str, Enum):
    """Ferramentas que o agente pode invocar (ordem de declaração)."""

    COMPUTE_COLUMN_STATS = "compute_column_stats"
    GET_VALUE_COUNTS = "get_value_counts"
    COMPUTE_CORRELATION = "compute_correlation"
    FILTER_AND_AGGREGATE = "filter_and_aggregate"
    COMPARE_KEYWORD_ENGAGEMENT = "compare_keyword_engagement"
    GET_TOP_ROWS = "get_top_rows"


class AggregationOperation(str, Enum):
    """Agregações disponíveis em filter_and_aggregate."""

    MEAN = "mean"
    SUM = "sum"
    COUNT = "count"
    MIN = "min"
    MAX = "max"
    MEDIAN = "median"


class ColumnKind(str, Enum):
    """Classificação de coluna produzida pelo sumarizador."""

    NUMERIC = "numeric"
    CATEGORICAL = "categorical"
