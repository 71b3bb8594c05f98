"""
Fixtures compartilhados para testes das ferramentas CSV.
Fornece textos CSV, registros já analisados e limpeza dos singletons.
"""

import pytest

from csv_agent.core.config import reset_config
from csv_agent.core.csv_parser import parse_csv_text
from csv_agent.tools.registry import reset_tool_registry


# ============================================================================
# ISOLAMENTO DE CONFIGURACAO
# ============================================================================

@pytest.fixture(autouse=True)
def clean_singletons(monkeypatch):
    """Cada teste parte da configuracao padrao."""
    for var in (
        "APP_ENV",
        "LOG_LEVEL",
        "NUMERIC_RATIO_THRESHOLD",
        "SUMMARY_TOP_VALUES",
        "DEFAULT_TOP_N",
        "DEFAULT_ROW_LIMIT",
        "STRICT_COLUMN_RESOLUTION",
    ):
        monkeypatch.delenv(var, raising=False)
    reset_config()
    reset_tool_registry()
    yield
    reset_config()
    reset_tool_registry()


# ============================================================================
# FIXTURES DE CSV
# ============================================================================

@pytest.fixture
def csv_string_simple():
    """String CSV simples."""
    return 'name,score,city\nAna,10,Rio\nBruno,20,"São Paulo"\nCarlos,30,Rio'


@pytest.fixture
def csv_string_tweets():
    """CSV no formato de exportacao de tweets."""
    return (
        'text,Favorite Count,retweet_count\n'
        '"I love mog, truly",10,1\n'
        'Mogmaxxing daily,20,2\n'
        'nothing here,5,0\n'
        'another post,,3\n'
    )


@pytest.fixture
def simple_rows(csv_string_simple):
    """Registros do CSV simples."""
    return parse_csv_text(csv_string_simple).rows


@pytest.fixture
def tweet_rows(csv_string_tweets):
    """Registros do CSV de tweets."""
    return parse_csv_text(csv_string_tweets).rows


@pytest.fixture
def numeric_rows():
    """Registros totalmente numericos, x e y perfeitamente correlacionados."""
    return [
        {'x': '1', 'y': '2', 'label': 'a'},
        {'x': '2', 'y': '4', 'label': 'a'},
        {'x': '3', 'y': '6', 'label': 'b'},
    ]


@pytest.fixture
def stats_rows():
    """Coluna com valores 1..4 e uma celula nao numerica."""
    return [
        {'value': '1', 'tag': 'Mog'},
        {'value': '2', 'tag': 'mogmaxxing'},
        {'value': '3', 'tag': 'other'},
        {'value': '4', 'tag': 'MOG'},
        {'value': 'n/a', 'tag': 'other'},
    ]
