"""
Registro central das ferramentas.
Publica as declarações para o agente e despacha as invocações.
"""

from typing import Any, Dict, List, Optional, Sequence, Union
from datetime import datetime

from .base import BaseTool, ToolResult
from ..core.csv_parser import Record
from ..core.logger import get_logger, log_error_with_context, log_tool_call
from ..models.enums import ToolName


class ToolRegistry:
    """
    Registro de todas as ferramentas disponíveis ao agente.

    Responsável por:
    - Registrar ferramentas (uma por membro de ToolName)
    - Fornecer as declarações para o LLM, na ordem de ToolName
    - Executar ferramentas devolvendo sempre um ToolResult
    """

    def __init__(self):
        self.logger = get_logger("tool_registry")
        self._tools: Dict[ToolName, BaseTool] = {}

    def register_tool(self, tool_instance: BaseTool) -> None:
        """
        Registra uma nova ferramenta no registry.

        Args:
            tool_instance: Instância da ferramenta a registrar
        """
        tool_name = tool_instance.tool_name

        if tool_name in self._tools:
            self.logger.warning(f"Ferramenta '{tool_name.value}' já registrada. Sobrescrevendo.")

        self._tools[tool_name] = tool_instance
        self.logger.debug(f"Ferramenta registrada: {tool_name.value}")

    def missing_tools(self) -> List[ToolName]:
        """Membros de ToolName ainda sem ferramenta registrada."""
        return [name for name in ToolName if name not in self._tools]

    def get_tool(self, tool_name: Union[str, ToolName]) -> Optional[BaseTool]:
        """
        Obtém uma ferramenta pelo nome.

        Args:
            tool_name: Nome da ferramenta

        Returns:
            Instância da ferramenta ou None se não encontrada
        """
        try:
            return self._tools.get(ToolName(tool_name))
        except ValueError:
            return None

    def get_all_tools(self) -> Dict[ToolName, BaseTool]:
        """Retorna todas as ferramentas registradas."""
        return self._tools.copy()

    def get_all_tools_description(self) -> List[Dict[str, Any]]:
        """
        Retorna as declarações de todas as ferramentas para o LLM.

        Returns:
            Lista ordenada de declarações
        """
        return [
            self._tools[name].get_description()
            for name in ToolName
            if name in self._tools
        ]

    def execute_tool(
        self,
        tool_name: str,
        rows: Sequence[Record],
        parameters: Optional[Dict[str, Any]] = None
    ) -> ToolResult:
        """
        Executa uma ferramenta com os parâmetros fornecidos.

        Args:
            tool_name: Nome da ferramenta a executar
            rows: Registros do dataset atual
            parameters: Argumentos enviados pelo agente

        Returns:
            ToolResult com resultado da execução (nunca levanta exceção)
        """
        start_time = datetime.now()
        parameters = parameters or {}
        log_tool_call(str(tool_name), parameters, len(rows))

        tool = self.get_tool(tool_name)
        if not tool:
            error_msg = f"Unknown tool: {tool_name}"
            self.logger.error(error_msg)
            return ToolResult(success=False, data={}, error=error_msg)

        try:
            result = tool.run(rows, parameters)
            result.execution_time = (datetime.now() - start_time).total_seconds()

            self.logger.info(
                f"Ferramenta {tool.name} executada "
                f"({'sucesso' if result.success else 'erro'}, tempo: {result.execution_time:.3f}s)"
            )
            return result

        except Exception as e:
            error_msg = f"Error while executing {tool.name}: {str(e)}"
            log_error_with_context(e, {'tool': tool.name, 'args': parameters})
            return ToolResult(
                success=False,
                data={},
                error=error_msg,
                execution_time=(datetime.now() - start_time).total_seconds()
            )


# Instância global do registry
_tool_registry: Optional[ToolRegistry] = None


def get_tool_registry() -> ToolRegistry:
    """
    Obtém instância singleton do ToolRegistry.

    Returns:
        Instância do ToolRegistry
    """
    global _tool_registry
    if _tool_registry is None:
        _tool_registry = ToolRegistry()
        _initialize_default_tools(_tool_registry)
    return _tool_registry


def reset_tool_registry() -> None:
    """Descarta o singleton (útil para testes que alteram a configuração)."""
    global _tool_registry
    _tool_registry = None


def _initialize_default_tools(registry: ToolRegistry) -> None:
    """
    Registra as ferramentas padrão e garante que o conjunto está completo.

    Args:
        registry: Instância do registry
    """
    from .basic_stats import ComputeColumnStatsTool, GetValueCountsTool
    from .correlation_analysis import ComputeCorrelationTool
    from .filtering import FilterAndAggregateTool, GetTopRowsTool
    from .keyword_engagement import CompareKeywordEngagementTool

    registry.register_tool(ComputeColumnStatsTool())
    registry.register_tool(GetValueCountsTool())
    registry.register_tool(ComputeCorrelationTool())
    registry.register_tool(FilterAndAggregateTool())
    registry.register_tool(CompareKeywordEngagementTool())
    registry.register_tool(GetTopRowsTool())

    missing = registry.missing_tools()
    if missing:
        raise RuntimeError(f"Ferramentas sem implementação: {[m.value for m in missing]}")


def get_tool_declarations() -> List[Dict[str, Any]]:
    """Declarações das ferramentas enviadas ao agente."""
    return get_tool_registry().get_all_tools_description()


def execute_tool(
    tool_name: str,
    args: Optional[Dict[str, Any]],
    rows: Sequence[Record]
) -> Dict[str, Any]:
    """
    Ponto de entrada do orquestrador: executa e devolve o payload do agente.

    Args:
        tool_name: Nome da ferramenta
        args: Argumentos enviados pelo agente
        rows: Registros do dataset atual

    Returns:
        Dados da ferramenta ou {'error': ...}
    """
    return get_tool_registry().execute_tool(tool_name, rows, args).to_payload()
