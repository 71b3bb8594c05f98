"""
Sistema de logging centralizado para as ferramentas CSV.
Configura logs com nível definido pela configuração e fornece
funções específicas para carga de dados, chamadas de ferramentas
e resolução de nomes de colunas.
"""

import logging
import sys
from typing import Any, Dict, Optional
from pathlib import Path
from datetime import datetime

from .config import get_config


class CSVAgentLogger:
    """Logger centralizado para o sistema."""

    _loggers = {}

    @classmethod
    def get_logger(cls, name: str = "csv_agent") -> logging.Logger:
        """Obtém ou cria um logger com configuração padronizada."""
        if name in cls._loggers:
            return cls._loggers[name]

        config = get_config()
        logger = logging.getLogger(name)

        # Evita duplicação de handlers
        if logger.hasHandlers():
            logger.handlers.clear()

        log_level = getattr(logging, config.log_level.upper(), logging.INFO)
        logger.setLevel(log_level)

        console_handler = logging.StreamHandler(sys.stdout)
        console_handler.setLevel(log_level)

        formatter = logging.Formatter(
            fmt='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
            datefmt='%Y-%m-%d %H:%M:%S'
        )
        console_handler.setFormatter(formatter)
        logger.addHandler(console_handler)

        # Handler para arquivo (apenas em produção)
        if config.is_production():
            cls._add_file_handler(logger, log_level, formatter)

        cls._loggers[name] = logger
        return logger

    @classmethod
    def _add_file_handler(cls, logger: logging.Logger, level: int, formatter: logging.Formatter) -> None:
        """Adiciona handler de arquivo para logs."""
        log_dir = Path("logs")
        log_dir.mkdir(exist_ok=True)

        log_file = log_dir / f"csv_agent_{datetime.now().strftime('%Y%m%d')}.log"
        file_handler = logging.FileHandler(log_file)
        file_handler.setLevel(level)
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)

    @classmethod
    def log_data_operation(cls, logger_name: str, operation: str, details: dict) -> None:
        """Log específico para operações de dados."""
        logger = cls.get_logger(logger_name)
        logger.info(f"DATA_OP: {operation} | {details}")

    @classmethod
    def log_tool_call(cls, logger_name: str, tool_name: str, arguments: Dict[str, Any], rows_loaded: int) -> None:
        """Log específico para chamadas de ferramentas."""
        logger = cls.get_logger(logger_name)
        logger.info(f"TOOL_CALL: {tool_name} | args: {arguments} | rows: {rows_loaded}")

    @classmethod
    def log_column_resolution(cls, logger_name: str, tool_name: str, requested: Optional[str], resolved: Optional[str]) -> None:
        """Log de resolução de nome de coluna."""
        logger = cls.get_logger(logger_name)
        if requested == resolved:
            logger.debug(f"COLUMN: [{tool_name}] '{requested}' usado como informado")
        else:
            logger.info(f"COLUMN: [{tool_name}] '{requested}' -> '{resolved}'")

    @classmethod
    def log_error_with_context(cls, logger_name: str, error: Exception, context: dict) -> None:
        """Log de erro com contexto adicional."""
        logger = cls.get_logger(logger_name)
        logger.error(f"ERROR: {type(error).__name__}: {error} | Context: {context}")


def get_logger(name: str = "csv_agent") -> logging.Logger:
    """Função de conveniência para obter logger."""
    return CSVAgentLogger.get_logger(name)


def log_data_operation(operation: str, details: dict, logger_name: str = "csv_agent_data") -> None:
    """Log de operação de dados."""
    CSVAgentLogger.log_data_operation(logger_name, operation, details)


def log_tool_call(tool_name: str, arguments: Dict[str, Any], rows_loaded: int, logger_name: str = "csv_agent_tools") -> None:
    """Log de chamada de ferramenta."""
    CSVAgentLogger.log_tool_call(logger_name, tool_name, arguments, rows_loaded)


def log_column_resolution(tool_name: str, requested: Optional[str], resolved: Optional[str], logger_name: str = "csv_agent_columns") -> None:
    """Log de resolução de coluna."""
    CSVAgentLogger.log_column_resolution(logger_name, tool_name, requested, resolved)


def log_error_with_context(error: Exception, context: dict, logger_name: str = "csv_agent_error") -> None:
    """Log de erro com contexto."""
    CSVAgentLogger.log_error_with_context(logger_name, error, context)
