"""
Modulo de utilitarios para as ferramentas CSV.

- Conversao de celulas em numeros e formatacao de resultados (numbers)
"""

from .numbers import (
    parse_number,
    round_value,
    format_number
)

__all__ = [
    'parse_number',
    'round_value',
    'format_number',
]
