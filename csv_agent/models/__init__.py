"""Modelos de dados: enumerações, argumentos das ferramentas e perfil do dataset."""

from .enums import ToolName, AggregationOperation, ColumnKind
from .tool_args import (
    ToolArguments,
    ColumnStatsArgs,
    ValueCountsArgs,
    CorrelationArgs,
    FilterAggregateArgs,
    TopRowsArgs,
    KeywordEngagementArgs
)
from .summary import (
    NumericColumnProfile,
    CategoricalColumnProfile,
    DatasetSummary,
    LoadedDataset
)

__all__ = [
    'ToolName',
    'AggregationOperation',
    'ColumnKind',
    'ToolArguments',
    'ColumnStatsArgs',
    'ValueCountsArgs',
    'CorrelationArgs',
    'FilterAggregateArgs',
    'TopRowsArgs',
    'KeywordEngagementArgs',
    'NumericColumnProfile',
    'CategoricalColumnProfile',
    'DatasetSummary',
    'LoadedDataset',
]
