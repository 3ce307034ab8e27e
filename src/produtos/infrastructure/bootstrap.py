"""Builds a ProdutoService backed by the JSON catalog file.

The data directory comes from PRODUTOS_DATA_DIR, falling back to the
repository's own data/ folder. The CLI gets its service from here.
"""

from __future__ import annotations

import os
from pathlib import Path

from produtos.application.produto_service import ProdutoService
from produtos.infrastructure.persistence.json_produto_repository import (
    JsonProdutoRepository,
)

DATA_DIR_ENV = "PRODUTOS_DATA_DIR"

# When installed in editable mode the project root is the repo root.
_DEFAULT_DATA_DIR = Path(__file__).resolve().parents[3] / "data"


def data_dir() -> Path:
    override = os.environ.get(DATA_DIR_ENV)
    return Path(override) if override else _DEFAULT_DATA_DIR


def produto_repository() -> JsonProdutoRepository:
    return JsonProdutoRepository(data_dir() / "produtos.json")


def produto_service() -> ProdutoService:
    return ProdutoService(produto_repo=produto_repository())
