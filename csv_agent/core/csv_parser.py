"""
Parser de texto CSV para registros em memória.

Não é um parser RFC-4180 completo: linhas vazias são descartadas (inclusive
dentro de campos entre aspas) e aspas duplicadas ("") não são escapes.
"""

from typing import Dict, List, NamedTuple

from .logger import get_logger

Record = Dict[str, str]

_QUOTE = '"'
_SEPARATOR = ','


class ParsedCSV(NamedTuple):
    """Catálogo de campos (ordem do cabeçalho) e registros."""
    headers: List[str]
    rows: List[Record]


def split_csv_line(line: str) -> List[str]:
    """
    Divide uma linha em campos respeitando aspas.

    Cada aspa alterna o estado "dentro de aspas" e não é copiada para o
    campo; vírgulas só separam campos fora de aspas.

    Args:
        line: Linha de texto CSV

    Returns:
        Lista de campos já sem espaços nas extremidades
    """
    fields: List[str] = []
    current: List[str] = []
    in_quotes = False

    for char in line:
        if char == _QUOTE:
            in_quotes = not in_quotes
        elif char == _SEPARATOR and not in_quotes:
            fields.append(''.join(current).strip())
            current = []
        else:
            current.append(char)

    fields.append(''.join(current).strip())
    return fields


def _strip_quotes(value: str) -> str:
    """Remove uma aspa inicial e uma final, se existirem."""
    if value.startswith(_QUOTE):
        value = value[1:]
    if value.endswith(_QUOTE):
        value = value[:-1]
    return value


def parse_csv_text(text: str) -> ParsedCSV:
    """
    Converte texto CSV em catálogo de campos e lista de registros.

    Args:
        text: Conteúdo CSV bruto

    Returns:
        ParsedCSV; vazio (sem erro) quando há menos de 2 linhas não vazias
    """
    logger = get_logger("csv_parser")
    lines = [line for line in (text or '').split('\n') if line.strip()]

    if len(lines) < 2:
        logger.warning(f"CSV com {len(lines)} linha(s) útil(eis); nada a carregar")
        return ParsedCSV(headers=[], rows=[])

    raw_headers = [_strip_quotes(h) for h in split_csv_line(lines[0])]

    rows: List[Record] = []
    for line in lines[1:]:
        values = split_csv_line(line)
        record: Record = {}
        for index, header in enumerate(raw_headers):
            value = values[index] if index < len(values) else ''
            record[header] = _strip_quotes(value).strip()
        rows.append(record)

    # Cabeçalhos repetidos colapsam em uma única chave
    headers = list(dict.fromkeys(raw_headers))

    logger.debug(f"CSV analisado: {len(rows)} linhas, {len(headers)} colunas")
    return ParsedCSV(headers=headers, rows=rows)
