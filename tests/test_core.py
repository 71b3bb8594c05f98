"""
Testes para componentes core: Config, Logger, parser CSV,
resolucao de colunas e sumarizador do dataset.
"""

import logging

import pytest

from csv_agent.core.config import Config, get_config, reset_config, reload_config
from csv_agent.core.csv_parser import parse_csv_text, split_csv_line
from csv_agent.core.column_resolver import (
    is_resolved,
    normalize_column_name,
    resolve_column
)
from csv_agent.core.logger import get_logger
from csv_agent.core.summarizer import (
    DatasetSummarizer,
    EMPTY_DATASET_ERROR,
    build_columns_header,
    compute_dataset_summary,
    load_dataset
)
from csv_agent.models.enums import ColumnKind


class TestConfig:
    """Testes para Config."""

    def test_defaults(self):
        """Testa valores padrao."""
        config = get_config()
        assert config.numeric_ratio_threshold == 0.8
        assert config.summary_top_values == 5
        assert config.default_top_n == 10
        assert config.default_row_limit == 10
        assert config.strict_column_resolution is False
        assert config.is_development()

    def test_singleton_pattern(self):
        """Testa padrao singleton."""
        assert get_config() is get_config()

    def test_reset_config(self):
        """Testa reset do singleton."""
        config1 = get_config()
        reset_config()
        config2 = get_config()
        assert config1 is not config2

    def test_env_overrides(self, monkeypatch):
        """Testa leitura de variaveis de ambiente."""
        monkeypatch.setenv("LOG_LEVEL", "debug")
        monkeypatch.setenv("NUMERIC_RATIO_THRESHOLD", "0.5")
        monkeypatch.setenv("STRICT_COLUMN_RESOLUTION", "true")
        config = reload_config()
        assert config.log_level == "DEBUG"
        assert config.numeric_ratio_threshold == 0.5
        assert config.strict_column_resolution is True

    def test_invalid_log_level(self):
        """Testa validacao do nivel de log."""
        with pytest.raises(ValueError):
            Config(log_level="VERBOSE")

    def test_invalid_threshold(self):
        """Testa validacao do limiar numerico."""
        with pytest.raises(ValueError):
            Config(numeric_ratio_threshold=1.5)


class TestLogger:
    """Testes para o logger centralizado."""

    def test_get_logger(self):
        """Testa criacao e cache de logger."""
        logger = get_logger("test_logger")
        assert isinstance(logger, logging.Logger)
        assert get_logger("test_logger") is logger
        assert len(logger.handlers) == 1


class TestCSVParser:
    """Testes para o parser CSV."""

    def test_quoted_field_with_comma(self):
        """Campo entre aspas com virgula e um unico valor."""
        assert split_csv_line('a,"b,c",d') == ["a", "b,c", "d"]

    def test_fields_are_trimmed(self):
        """Espacos nas extremidades sao removidos."""
        assert split_csv_line(' a , b ,c\r') == ["a", "b", "c"]

    def test_record_count_and_keys(self, csv_string_simple):
        """N linhas de dados produzem N registros com todas as chaves."""
        headers, rows = parse_csv_text(csv_string_simple)
        assert headers == ["name", "score", "city"]
        assert len(rows) == 3
        for row in rows:
            assert set(row.keys()) == set(headers)
        assert rows[1]["city"] == "São Paulo"

    def test_blank_lines_dropped(self):
        """Linhas vazias ou so com espacos sao ignoradas."""
        headers, rows = parse_csv_text("a,b\n\n1,2\n   \n3,4\n")
        assert len(rows) == 2
        assert rows[1] == {"a": "3", "b": "4"}

    def test_short_line_filled_with_empty(self):
        """Linha com menos campos recebe string vazia nos campos finais."""
        _, rows = parse_csv_text("a,b,c\n1")
        assert rows[0] == {"a": "1", "b": "", "c": ""}

    def test_quoted_header(self):
        """Aspas do cabecalho sao removidas."""
        headers, _ = parse_csv_text('"Favorite Count","text"\n1,hi')
        assert headers == ["Favorite Count", "text"]

    def test_crlf_line_endings(self):
        """Quebra de linha Windows nao vaza para os valores."""
        headers, rows = parse_csv_text("a,b\r\n1,2\r\n")
        assert headers == ["a", "b"]
        assert rows == [{"a": "1", "b": "2"}]

    def test_doubled_quotes_are_not_escapes(self):
        """Aspas duplicadas dentro de campo apenas alternam o estado."""
        assert split_csv_line('a,"x""y",b') == ["a", "xy", "b"]

    def test_blank_line_inside_quoted_field_dropped(self):
        """Linha vazia dentro de campo multilinha e descartada; cada linha vira um registro."""
        headers, rows = parse_csv_text('a,b\n"x\n\ny",1\n')
        assert headers == ["a", "b"]
        assert rows == [
            {"a": "x", "b": ""},
            {"a": "y,1", "b": ""},
        ]

    @pytest.mark.parametrize("text", ["", "a,b", "a,b\n\n   \n", None])
    def test_insufficient_lines(self, text):
        """Menos de duas linhas uteis produz resultado vazio sem erro."""
        headers, rows = parse_csv_text(text)
        assert headers == []
        assert rows == []


class TestColumnResolver:
    """Testes para a resolucao de colunas."""

    def test_exact_match_is_idempotent(self, tweet_rows):
        """Nome exato volta inalterado."""
        assert resolve_column(tweet_rows, "Favorite Count") == "Favorite Count"

    def test_normalized_match(self, tweet_rows):
        """Caixa, espacos, '_' e '-' sao ignorados."""
        assert resolve_column(tweet_rows, "favorite_count") == "Favorite Count"
        assert resolve_column(tweet_rows, "FAVORITE-COUNT") == "Favorite Count"
        assert resolve_column(tweet_rows, "Retweet Count") == "retweet_count"

    def test_unresolved_returns_requested(self, tweet_rows):
        """Sem correspondencia, o nome pedido volta como veio."""
        assert resolve_column(tweet_rows, "likes") == "likes"
        assert not is_resolved(tweet_rows, "likes")

    def test_empty_inputs(self, tweet_rows):
        """Sem registros ou sem nome, retorna o nome informado."""
        assert resolve_column([], "text") == "text"
        assert resolve_column(tweet_rows, "") == ""
        assert resolve_column(tweet_rows, None) is None

    def test_normalize(self):
        """Testa a forma normalizada."""
        assert normalize_column_name("Favorite  Count_-x") == "favoritecountx"


class TestDatasetSummarizer:
    """Testes para o sumarizador."""

    def _rows(self, values):
        return [{"col": v} for v in values]

    def test_boundary_numeric(self):
        """4 de 5 numericos (0.8 exato) e numerica."""
        summarizer = DatasetSummarizer()
        rows = self._rows(["1", "2", "x", "3", "4"])
        assert summarizer.classify_column(rows, "col") == ColumnKind.NUMERIC

    def test_boundary_categorical(self):
        """3 de 4 numericos (0.75) e categorica."""
        summarizer = DatasetSummarizer()
        rows = self._rows(["x", "1", "2", "3"])
        assert summarizer.classify_column(rows, "col") == ColumnKind.CATEGORICAL

    def test_empty_values_ignored(self):
        """Celulas vazias nao contam na fracao."""
        summarizer = DatasetSummarizer()
        rows = self._rows(["1", "", "2", ""])
        assert summarizer.classify_column(rows, "col") == ColumnKind.NUMERIC

    def test_all_empty_is_categorical(self):
        """Coluna sem valores e categorica."""
        summarizer = DatasetSummarizer()
        assert summarizer.classify_column(self._rows(["", ""]), "col") == ColumnKind.CATEGORICAL

    def test_non_ascii_digits_are_categorical(self):
        """Digitos arabico-indicos nao contam como numeros."""
        summarizer = DatasetSummarizer()
        rows = self._rows(["١٢", "٣"])
        assert summarizer.classify_column(rows, "col") == ColumnKind.CATEGORICAL

    def test_custom_threshold(self):
        """Limiar configuravel altera a classificacao."""
        summarizer = DatasetSummarizer(numeric_ratio_threshold=0.7)
        rows = self._rows(["x", "1", "2", "3"])
        assert summarizer.classify_column(rows, "col") == ColumnKind.NUMERIC

    def test_categorical_top_values_tie_order(self):
        """Empates mantem a ordem de primeira ocorrencia."""
        summary = DatasetSummarizer().summarize(
            self._rows(["b", "a", "b", "a", "c"]), ["col"]
        )
        column = summary.categorical_columns[0]
        assert column.unique == 3
        assert column.top_values == [("b", 2), ("a", 2), ("c", 1)]

    def test_top_values_limited(self):
        """No maximo 5 valores no perfil categorico."""
        summary = DatasetSummarizer().summarize(self._rows(list("abcdefg")), ["col"])
        assert len(summary.categorical_columns[0].top_values) == 5

    def test_summary_text(self, simple_rows):
        """Perfil textual cita os nomes exatos."""
        text = compute_dataset_summary(simple_rows, ["name", "score", "city"])
        assert text.startswith("**Dataset: 3 rows × 3 columns**\n")
        assert '  • "score": mean=20, min=10, max=30, n=3' in text
        assert '  • "city": 2 unique values — top: Rio (2), São Paulo (1)' in text
        assert text.index("**Numeric columns**") < text.index("**Categorical columns**")

    def test_mean_rounded_to_two_decimals(self):
        """Media do perfil numerico com 2 casas."""
        summary = DatasetSummarizer().summarize(self._rows(["1", "1", "2"]), ["col"])
        assert summary.numeric_columns[0].mean == 1.33

    def test_empty_dataset(self):
        """Sem registros ou sem campos o perfil e vazio."""
        assert compute_dataset_summary([], ["a"]) == ""
        assert compute_dataset_summary([{"a": "1"}], []) == ""


class TestLoadDataset:
    """Testes para a carga do dataset."""

    def test_load_success(self, csv_string_tweets):
        """Carga completa produz catalogo, registros e contexto."""
        dataset = load_dataset(csv_string_tweets)
        assert dataset.success
        assert dataset.headers == ["text", "Favorite Count", "retweet_count"]
        assert len(dataset.rows) == 4
        assert dataset.columns_header == "[CSV columns: text, Favorite Count, retweet_count]"
        assert '"Favorite Count"' in dataset.summary
        assert dataset.to_payload()["row_count"] == 4

    def test_load_empty(self):
        """CSV sem linhas de dados e erro como dado."""
        dataset = load_dataset("only,a,header")
        assert not dataset.success
        assert dataset.to_payload() == {"error": EMPTY_DATASET_ERROR}

    def test_columns_header(self):
        """Testa a linha de colunas."""
        assert build_columns_header(["a", "b c"]) == "[CSV columns: a, b c]"
