"""JSON-file-backed implementation of ProdutoRepository."""

from __future__ import annotations

import json
import logging
from pathlib import Path

from produtos.domain.exceptions import StorageError
from produtos.domain.model.produto import Produto
from produtos.domain.repository.produto_repository import ProdutoRepository

logger = logging.getLogger(__name__)


class JsonProdutoRepository(ProdutoRepository):

    def __init__(self, file_path: Path) -> None:
        self._file_path = file_path
        self._ensure_file()

    # --- ProdutoRepository interface ------------------------------------------

    def get_by_id(self, produto_id: int) -> Produto | None:
        return self._load().get(produto_id)

    def save(self, produto: Produto) -> None:
        produtos = self._load()
        produtos[produto.id] = produto
        self._persist(produtos)

    def update(self, produto: Produto) -> None:
        produtos = self._load()
        produtos[produto.id] = produto
        self._persist(produtos)

    def delete(self, produto_id: int) -> None:
        produtos = self._load()
        if produtos.pop(produto_id, None) is not None:
            self._persist(produtos)

    def get_all(self) -> list[Produto]:
        return list(self._load().values())

    # --- Serialization helpers ------------------------------------------------

    def _load(self) -> dict[int, Produto]:
        try:
            raw = json.loads(self._file_path.read_text(encoding="utf-8"))
            return {
                int(item["id"]): Produto(
                    id=int(item["id"]),
                    nome=item["nome"],
                    preco=float(item["preco"]),
                )
                for item in raw
            }
        except (ValueError, KeyError, TypeError) as exc:
            raise StorageError(
                f"Arquivo de produtos inválido: {self._file_path}"
            ) from exc

    def _persist(self, produtos: dict[int, Produto]) -> None:
        raw = [{"id": p.id, "nome": p.nome, "preco": p.preco} for p in produtos.values()]
        self._file_path.write_text(
            json.dumps(raw, indent=2, ensure_ascii=False, allow_nan=False) + "\n",
            encoding="utf-8",
        )

    def _ensure_file(self) -> None:
        if not self._file_path.exists():
            self._file_path.parent.mkdir(parents=True, exist_ok=True)
            self._file_path.write_text("[]", encoding="utf-8")
            logger.info("Arquivo de produtos criado em %s", self._file_path)
