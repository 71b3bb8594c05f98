"""
Tools module - ferramentas que o agente conversacional invoca sobre o CSV.

Cada ferramenta declara seus parâmetros para o LLM, recebe argumentos
tipados com colunas já resolvidas e devolve resultado ou erro como dado.
"""

from .registry import (
    ToolRegistry,
    get_tool_registry,
    reset_tool_registry,
    get_tool_declarations,
    execute_tool
)
from .base import BaseTool, ToolResult, ToolParameter, COLUMN_NOTE
from .basic_stats import ComputeColumnStatsTool, GetValueCountsTool
from .correlation_analysis import ComputeCorrelationTool
from .filtering import FilterAndAggregateTool, GetTopRowsTool
from .keyword_engagement import CompareKeywordEngagementTool

__all__ = [
    'ToolRegistry',
    'get_tool_registry',
    'reset_tool_registry',
    'get_tool_declarations',
    'execute_tool',
    'BaseTool',
    'ToolResult',
    'ToolParameter',
    'COLUMN_NOTE',
    'ComputeColumnStatsTool',
    'GetValueCountsTool',
    'ComputeCorrelationTool',
    'FilterAndAggregateTool',
    'GetTopRowsTool',
    'CompareKeywordEngagementTool',
]
