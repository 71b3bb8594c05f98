"""
Conversão e formatação de valores numéricos vindos de células CSV.

Todas as células são strings; a conversão segue a regra de prefixo
numérico: "12abc" vale 12, "abc" e "" não são números.
"""

import math
import re
from typing import Any, Optional

_NUMERIC_PREFIX = re.compile(
    r"^\s*([+-]?(?:Infinity|(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:[eE][+-]?[0-9]+)?))"
)


def parse_number(value: Any) -> Optional[float]:
    """
    Converte uma célula em float usando o prefixo numérico do texto.

    Args:
        value: Valor da célula (normalmente str; None é aceito)

    Returns:
        float ou None quando o valor não começa com um número
    """
    if value is None:
        return None
    if isinstance(value, (int, float)) and not isinstance(value, bool):
        number = float(value)
        return None if math.isnan(number) else number

    match = _NUMERIC_PREFIX.match(str(value))
    if not match:
        return None

    literal = match.group(1)
    if literal.endswith("Infinity"):
        return -math.inf if literal.startswith("-") else math.inf
    return float(literal)


def round_value(value: float, digits: int = 4) -> float:
    """Arredonda resultados de ponto flutuante antes de reportá-los."""
    if math.isnan(value) or math.isinf(value):
        return value
    return round(float(value), digits)


def format_number(value: float) -> str:
    """Formata número para texto sem o sufixo '.0' de inteiros."""
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)
