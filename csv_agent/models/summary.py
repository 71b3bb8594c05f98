"""
Modelos do perfil do dataset gerado no carregamento.
"""

from typing import Any, Dict, List, Optional, Tuple
from pydantic import BaseModel, Field

from .enums import ColumnKind


class NumericColumnProfile(BaseModel):
    """Perfil de coluna classificada como numérica."""

    name: str = Field(description="Nome exato da coluna")
    kind: ColumnKind = Field(ColumnKind.NUMERIC)
    count: int = Field(description="Quantidade de valores numéricos")
    mean: float = Field(description="Média (2 casas decimais)")
    min: float = Field(description="Valor mínimo")
    max: float = Field(description="Valor máximo")


class CategoricalColumnProfile(BaseModel):
    """Perfil de coluna classificada como categórica."""

    name: str = Field(description="Nome exato da coluna")
    kind: ColumnKind = Field(ColumnKind.CATEGORICAL)
    unique: int = Field(description="Quantidade de valores distintos")
    top_values: List[Tuple[str, int]] = Field(
        default_factory=list,
        description="Valores mais frequentes com contagem"
    )


class DatasetSummary(BaseModel):
    """Perfil completo: colunas agrupadas por classificação."""

    row_count: int = Field(0)
    column_count: int = Field(0)
    numeric_columns: List[NumericColumnProfile] = Field(default_factory=list)
    categorical_columns: List[CategoricalColumnProfile] = Field(default_factory=list)

    @property
    def is_empty(self) -> bool:
        return self.row_count == 0 or self.column_count == 0

    def classification(self) -> Dict[str, ColumnKind]:
        """Mapa coluna -> classificação."""
        kinds = {c.name: c.kind for c in self.numeric_columns}
        kinds.update({c.name: c.kind for c in self.categorical_columns})
        return kinds


class LoadedDataset(BaseModel):
    """Resultado da carga de um CSV: catálogo, registros e contexto do agente."""

    headers: List[str] = Field(default_factory=list)
    rows: List[Dict[str, str]] = Field(default_factory=list)
    summary: str = Field("", description="Perfil textual para o contexto do agente")
    columns_header: str = Field("", description="Linha [CSV columns: ...]")
    error: Optional[str] = Field(None)

    @property
    def success(self) -> bool:
        return self.error is None

    def to_payload(self) -> Dict[str, Any]:
        if self.error:
            return {'error': self.error}
        return {
            'headers': self.headers,
            'row_count': len(self.rows),
            'summary': self.summary,
            'columns_header': self.columns_header,
        }
