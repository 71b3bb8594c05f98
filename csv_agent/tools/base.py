"""
Classes base para as ferramentas do agente.
Define a interface comum: declaração de parâmetros, validação tipada dos
argumentos, resolução de colunas e resultados padronizados.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Sequence, Type
from abc import ABC, abstractmethod
from datetime import datetime

from pydantic import ValidationError

from ..core.config import get_config
from ..core.csv_parser import Record
from ..core.column_resolver import catalog_of, is_resolved, resolve_column
from ..core.logger import get_logger, log_column_resolution
from ..models.enums import ToolName
from ..models.tool_args import ToolArguments

COLUMN_NOTE = (
    'Use the exact column name as it appears in the [CSV columns: ...] header at the top '
    'of the message — copy it character-for-character, preserving spaces and capitalisation.'
)


@dataclass
class ToolParameter:
    """Definição de um parâmetro de ferramenta."""
    name: str
    type: str  # 'string', 'number', 'boolean', 'array'
    description: str
    required: bool = True
    default: Any = None
    enum: Optional[List[Any]] = None  # Valores permitidos
    items: Optional[str] = None  # Tipo dos itens quando type == 'array'

    def to_schema(self) -> Dict[str, Any]:
        schema: Dict[str, Any] = {'type': self.type, 'description': self.description}
        if self.enum:
            schema['enum'] = list(self.enum)
        if self.items:
            schema['items'] = {'type': self.items}
        return schema


@dataclass
class ToolResult:
    """Resultado da execução de uma ferramenta."""
    success: bool
    data: Dict[str, Any]
    error: Optional[str] = None
    available_columns: Optional[List[str]] = None
    execution_time: float = 0.0
    metadata: Dict[str, Any] = field(default_factory=dict)

    def to_payload(self) -> Dict[str, Any]:
        """Formato devolvido ao agente: dados da ferramenta ou {'error': ...}."""
        if self.success:
            return dict(self.data)
        payload: Dict[str, Any] = {'error': self.error}
        if self.available_columns:
            payload['available_columns'] = list(self.available_columns)
        return payload


class BaseTool(ABC):
    """
    Classe base abstrata para todas as ferramentas.

    Todas as ferramentas devem:
    1. Herdar desta classe
    2. Definir tool_name, description, parameters e args_model
    3. Implementar execute() recebendo argumentos já validados e resolvidos
    """

    tool_name: ToolName
    args_model: Type[ToolArguments] = ToolArguments

    def __init__(self):
        self.name: str = self.tool_name.value
        self.description: str = ''
        self.parameters: List[ToolParameter] = []
        self.config = get_config()
        self.logger = get_logger(f"tool.{self.name}")

    @abstractmethod
    def execute(self, rows: Sequence[Record], args: ToolArguments) -> ToolResult:
        """
        Executa a ferramenta.

        Args:
            rows: Registros do dataset (somente leitura)
            args: Argumentos validados, com colunas já resolvidas

        Returns:
            ToolResult com resultado da execução
        """
        pass

    def run(self, rows: Sequence[Record], arguments: Optional[Dict[str, Any]] = None) -> ToolResult:
        """
        Valida os argumentos, resolve as colunas e executa.

        Args:
            rows: Registros do dataset
            arguments: Argumentos brutos enviados pelo agente

        Returns:
            ToolResult; erros de validação também retornam como dado
        """
        try:
            args = self.args_model.model_validate(arguments or {})
        except ValidationError as e:
            return self._create_error_result(self._describe_validation_error(e))

        resolved: Dict[str, Any] = {}
        for field_name in self.args_model.COLUMN_FIELDS:
            requested = getattr(args, field_name)
            column = resolve_column(rows, requested)
            log_column_resolution(self.name, requested, column)

            if requested and not is_resolved(rows, column):
                self.logger.warning(f"Coluna '{requested}' não encontrada no catálogo")
                if self.config.strict_column_resolution:
                    return self._create_error_result(
                        f'Column "{requested}" not found. '
                        f"Available columns: {', '.join(catalog_of(rows))}",
                        available_columns=catalog_of(rows)
                    )
            resolved[field_name] = column

        return self.execute(rows, args.model_copy(update=resolved))

    def get_description(self) -> Dict[str, Any]:
        """
        Retorna a declaração da ferramenta para o LLM.

        Returns:
            Dicionário com name, description e schema dos parâmetros
        """
        return {
            'name': self.name,
            'description': self.description,
            'parameters': {
                'type': 'object',
                'properties': {p.name: p.to_schema() for p in self.parameters},
                'required': [p.name for p in self.parameters if p.required],
            }
        }

    @staticmethod
    def _describe_validation_error(error: ValidationError) -> str:
        problems = []
        for item in error.errors():
            location = '.'.join(str(part) for part in item['loc']) or 'arguments'
            problems.append(f"{location}: {item['msg']}")
        return f"Invalid arguments: {'; '.join(problems)}"

    def _create_error_result(
        self,
        error_message: str,
        available_columns: Optional[List[str]] = None
    ) -> ToolResult:
        """
        Cria resultado de erro padronizado.

        Args:
            error_message: Mensagem de erro
            available_columns: Colunas válidas, quando ajudam o agente a corrigir

        Returns:
            ToolResult com erro
        """
        self.logger.info(f"{self.name} retornou erro: {error_message}")
        return ToolResult(
            success=False,
            data={},
            error=error_message,
            available_columns=available_columns,
            metadata={'timestamp': datetime.now().isoformat()}
        )

    def _create_success_result(
        self,
        data: Dict[str, Any],
        execution_time: float = 0.0,
        metadata: Optional[Dict[str, Any]] = None
    ) -> ToolResult:
        """
        Cria resultado de sucesso padronizado.

        Args:
            data: Dados do resultado
            execution_time: Tempo de execução em segundos
            metadata: Metadados adicionais

        Returns:
            ToolResult com sucesso
        """
        result_metadata = metadata or {}
        result_metadata['timestamp'] = datetime.now().isoformat()

        return ToolResult(
            success=True,
            data=data,
            error=None,
            execution_time=execution_time,
            metadata=result_metadata
        )
