"""
Resolução de nomes de colunas aproximados.

O agente frequentemente escreve "favorite_count" quando o cabeçalho diz
"Favorite Count". A resolução tenta o nome exato e depois uma forma
normalizada (minúsculas, sem espaços, "_" ou "-").

Nome sem correspondência volta como foi pedido; quem consome o nome trata
a ausência. A política é escolhida por Config.strict_column_resolution
(padrão False, leniente), aplicada em BaseTool.run.
"""

import re
from typing import List, Optional, Sequence

from .csv_parser import Record

_SEPARATORS = re.compile(r"[\s_-]+")


def normalize_column_name(name: str) -> str:
    """Forma canônica usada na comparação aproximada."""
    return _SEPARATORS.sub('', name.lower())


def catalog_of(rows: Sequence[Record]) -> List[str]:
    """Nomes de campo presentes nos registros."""
    return list(rows[0].keys()) if rows else []


def resolve_column(rows: Sequence[Record], name: Optional[str]) -> Optional[str]:
    """
    Retorna o nome real do campo que melhor corresponde a `name`.

    Args:
        rows: Registros do dataset
        name: Nome informado pelo agente

    Returns:
        Nome do catálogo, ou `name` inalterado quando não há correspondência
    """
    if not rows or not name:
        return name

    keys = catalog_of(rows)
    if name in keys:
        return name

    target = normalize_column_name(name)
    for key in keys:
        if normalize_column_name(key) == target:
            return key
    return name


def is_resolved(rows: Sequence[Record], name: Optional[str]) -> bool:
    """Indica se o nome (já resolvido) existe no catálogo."""
    return bool(name) and name in catalog_of(rows)
