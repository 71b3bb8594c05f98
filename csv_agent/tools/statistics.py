"""
Núcleos estatísticos compartilhados pelas ferramentas.

Funções puras sobre registros já carregados: extração numérica, estatísticas
descritivas, correlação de Pearson e agregações nomeadas. Valores que não são
números são descartados em silêncio; quem chama decide se um resultado vazio
é erro.
"""

from typing import Any, Callable, Dict, List, Optional, Sequence, Tuple, Union

import numpy as np

from ..core.csv_parser import Record
from ..models.enums import AggregationOperation
from ..utils.numbers import parse_number, round_value

RESULT_PRECISION = 4

# Política de leniência: operação desconhecida vira média.
UNKNOWN_AGGREGATION_FALLBACK = AggregationOperation.MEAN


def numeric_values(rows: Sequence[Record], column: str) -> List[float]:
    """Valores numéricos da coluna, na ordem dos registros."""
    values = []
    for row in rows:
        number = parse_number(row.get(column))
        if number is not None:
            values.append(number)
    return values


def paired_numeric_values(
    rows: Sequence[Record],
    column_x: str,
    column_y: str
) -> List[Tuple[float, float]]:
    """Pares (x, y) apenas de registros em que as duas colunas são numéricas."""
    pairs = []
    for row in rows:
        x = parse_number(row.get(column_x))
        y = parse_number(row.get(column_y))
        if x is not None and y is not None:
            pairs.append((x, y))
    return pairs


def median(values: Sequence[float]) -> float:
    """Mediana: média dos dois centrais quando a contagem é par."""
    ordered = sorted(values)
    middle = len(ordered) // 2
    if len(ordered) % 2 == 0:
        return (ordered[middle - 1] + ordered[middle]) / 2
    return ordered[middle]


def descriptive_stats(values: Sequence[float]) -> Dict[str, Union[int, float]]:
    """
    Estatísticas descritivas com desvio padrão populacional.

    Args:
        values: Valores numéricos (não vazio)

    Returns:
        Dicionário com count, mean, median, std, min, max arredondados
    """
    array = np.asarray(values, dtype=float)
    return {
        'count': int(array.size),
        'mean': round_value(float(array.mean()), RESULT_PRECISION),
        'median': round_value(median(values), RESULT_PRECISION),
        'std': round_value(float(array.std(ddof=0)), RESULT_PRECISION),
        'min': round_value(float(array.min()), RESULT_PRECISION),
        'max': round_value(float(array.max()), RESULT_PRECISION),
    }


def pearson_correlation(pairs: Sequence[Tuple[float, float]]) -> Optional[float]:
    """
    Coeficiente de Pearson: covariância / (desvio_x * desvio_y), populacional.

    Args:
        pairs: Pares (x, y) numéricos

    Returns:
        Coeficiente arredondado, ou None com menos de 2 pares ou variância nula
    """
    if len(pairs) < 2:
        return None

    xs = np.array([p[0] for p in pairs], dtype=float)
    ys = np.array([p[1] for p in pairs], dtype=float)
    dx = xs - xs.mean()
    dy = ys - ys.mean()

    covariance = float((dx * dy).mean())
    std_x = float(np.sqrt((dx ** 2).mean()))
    std_y = float(np.sqrt((dy ** 2).mean()))

    if std_x == 0 or std_y == 0:
        return None
    return round_value(covariance / (std_x * std_y), RESULT_PRECISION)


_AGGREGATIONS: Dict[AggregationOperation, Callable[[List[float]], Union[int, float]]] = {
    AggregationOperation.MEAN: lambda v: float(np.mean(v)),
    AggregationOperation.SUM: lambda v: float(np.sum(v)),
    AggregationOperation.COUNT: len,
    AggregationOperation.MIN: lambda v: float(np.min(v)),
    AggregationOperation.MAX: lambda v: float(np.max(v)),
    AggregationOperation.MEDIAN: median,
}


def resolve_aggregation(operation: Any) -> AggregationOperation:
    """Nome da operação -> membro do enum; desconhecido cai no fallback."""
    if isinstance(operation, AggregationOperation):
        return operation
    try:
        return AggregationOperation(str(operation).strip().lower())
    except ValueError:
        return UNKNOWN_AGGREGATION_FALLBACK


def aggregate(values: Sequence[float], operation: Any) -> Union[int, float]:
    """Aplica a agregação nomeada; count é inteiro, o resto é arredondado."""
    applied = resolve_aggregation(operation)
    result = _AGGREGATIONS[applied](list(values))
    if applied == AggregationOperation.COUNT:
        return result
    return round_value(result, RESULT_PRECISION)
