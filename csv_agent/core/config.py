"""
Centralizador de configurações do sistema de ferramentas CSV.
Gerencia ambiente, nível de log e as constantes de política usadas pelo
sumarizador e pelas ferramentas (limiar numérico, limites padrão,
resolução estrita de colunas).
"""

import os
from typing import Optional
from pathlib import Path
from dotenv import load_dotenv
from pydantic import BaseModel, Field, field_validator


# Constantes de política (valores padrão)
NUMERIC_RATIO_THRESHOLD = 0.8
SUMMARY_TOP_VALUES = 5
DEFAULT_TOP_N = 10
DEFAULT_ROW_LIMIT = 10


class Config(BaseModel):
    """Configuração centralizada do sistema."""

    # Application Configuration
    app_env: str = Field("development", description="Ambiente da aplicação")
    log_level: str = Field("INFO", description="Nível de log")

    # Dataset Profiling
    numeric_ratio_threshold: float = Field(
        NUMERIC_RATIO_THRESHOLD,
        description="Fração mínima de valores numéricos para classificar a coluna como numérica"
    )
    summary_top_values: int = Field(
        SUMMARY_TOP_VALUES,
        description="Quantidade de valores mais frequentes listados por coluna categórica"
    )

    # Tool Defaults
    default_top_n: int = Field(DEFAULT_TOP_N, description="top_n padrão de get_value_counts")
    default_row_limit: int = Field(DEFAULT_ROW_LIMIT, description="n padrão de get_top_rows")
    strict_column_resolution: bool = Field(
        False,
        description="Falhar imediatamente quando uma coluna não é encontrada no catálogo"
    )

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v):
        """Valida se o nível de log é válido."""
        valid_levels = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]
        if v.upper() not in valid_levels:
            raise ValueError(f"LOG_LEVEL deve ser um de: {valid_levels}")
        return v.upper()

    @field_validator("app_env")
    @classmethod
    def validate_app_env(cls, v):
        """Valida o ambiente da aplicação."""
        valid_envs = ["development", "production", "testing"]
        if v.lower() not in valid_envs:
            raise ValueError(f"APP_ENV deve ser um de: {valid_envs}")
        return v.lower()

    @field_validator("numeric_ratio_threshold")
    @classmethod
    def validate_numeric_ratio(cls, v):
        """Valida o limiar de classificação numérica."""
        if not 0 < v <= 1:
            raise ValueError("NUMERIC_RATIO_THRESHOLD deve estar no intervalo (0, 1]")
        return v

    @field_validator("summary_top_values", "default_top_n", "default_row_limit")
    @classmethod
    def validate_positive(cls, v):
        """Valida limites que precisam ser positivos."""
        if v <= 0:
            raise ValueError("Limites de linhas/valores devem ser maiores que 0")
        return v

    def is_development(self) -> bool:
        """Verifica se está em ambiente de desenvolvimento."""
        return self.app_env == "development"

    def is_production(self) -> bool:
        """Verifica se está em ambiente de produção."""
        return self.app_env == "production"


# Singleton instance
_config: Optional[Config] = None


def get_config() -> Config:
    """Obtém a instância singleton da configuração."""
    global _config
    if _config is None:
        # Carregar variáveis do .env
        env_path = Path(".env")
        if env_path.exists():
            load_dotenv(env_path)
        _config = Config(
            app_env=os.getenv("APP_ENV", "development"),
            log_level=os.getenv("LOG_LEVEL", "INFO"),
            numeric_ratio_threshold=float(
                os.getenv("NUMERIC_RATIO_THRESHOLD", str(NUMERIC_RATIO_THRESHOLD))
            ),
            summary_top_values=int(os.getenv("SUMMARY_TOP_VALUES", str(SUMMARY_TOP_VALUES))),
            default_top_n=int(os.getenv("DEFAULT_TOP_N", str(DEFAULT_TOP_N))),
            default_row_limit=int(os.getenv("DEFAULT_ROW_LIMIT", str(DEFAULT_ROW_LIMIT))),
            strict_column_resolution=os.getenv("STRICT_COLUMN_RESOLUTION", "false").lower() == "true"
        )
    return _config


def reset_config() -> None:
    """Descarta o singleton; a próxima chamada a get_config() relê o ambiente."""
    global _config
    _config = None


def reload_config() -> Config:
    """Recarrega a configuração (útil para testes)."""
    reset_config()
    return get_config()
