"""Núcleo: configuração, logging, parser CSV, resolução de colunas e sumarizador."""
