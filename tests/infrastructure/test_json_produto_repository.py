"""Tests for the JSON-file-backed product repository."""

import json

import pytest

from produtos.domain.exceptions import StorageError
from produtos.domain.model.produto import Produto
from produtos.infrastructure.persistence.json_produto_repository import (
    JsonProdutoRepository,
)


class TestJsonProdutoRepository:

    def test_creates_missing_file(self, tmp_path):
        path = tmp_path / "nested" / "produtos.json"

        repo = JsonProdutoRepository(path)

        assert path.read_text(encoding="utf-8") == "[]"
        assert repo.get_all() == []

    def test_save_and_get_by_id(self, tmp_path):
        repo = JsonProdutoRepository(tmp_path / "produtos.json")

        repo.save(Produto(1, "Cabo USB", 10.0))

        assert repo.get_by_id(1) == Produto(1, "Cabo USB", 10.0)
        assert repo.get_by_id(2) is None

    def test_data_survives_new_instance(self, tmp_path):
        path = tmp_path / "produtos.json"
        JsonProdutoRepository(path).save(Produto(3, "Pão de Queijo", 4.5))

        assert JsonProdutoRepository(path).get_by_id(3) == Produto(3, "Pão de Queijo", 4.5)
        assert json.loads(path.read_text(encoding="utf-8")) == [
            {"id": 3, "nome": "Pão de Queijo", "preco": 4.5}
        ]

    def test_update_replaces_record(self, tmp_path):
        repo = JsonProdutoRepository(tmp_path / "produtos.json")
        repo.save(Produto(1, "Carregador", 50.0))

        repo.update(Produto(1, "Carregador Turbo", 80.0))

        assert repo.get_all() == [Produto(1, "Carregador Turbo", 80.0)]

    def test_delete_removes_record(self, tmp_path):
        repo = JsonProdutoRepository(tmp_path / "produtos.json")
        repo.save(Produto(1, "Produto1", 10.0))
        repo.save(Produto(2, "Produto2", 20.0))

        repo.delete(1)

        assert repo.get_all() == [Produto(2, "Produto2", 20.0)]

    def test_delete_missing_is_noop(self, tmp_path):
        repo = JsonProdutoRepository(tmp_path / "produtos.json")
        repo.save(Produto(1, "Produto1", 10.0))

        repo.delete(99)

        assert len(repo.get_all()) == 1

    def test_listing_preserves_insertion_order(self, tmp_path):
        repo = JsonProdutoRepository(tmp_path / "produtos.json")
        for produto in [Produto(5, "E", 5.0), Produto(2, "B", 2.0), Produto(9, "I", 9.0)]:
            repo.save(produto)

        assert [p.id for p in repo.get_all()] == [5, 2, 9]

    @pytest.mark.parametrize(
        "content", ["{not json", '[{"id": 1}]', '[{"id": "x", "nome": "A", "preco": 1}]']
    )
    def test_malformed_file_raises_storage_error(self, tmp_path, content):
        path = tmp_path / "produtos.json"
        path.write_text(content, encoding="utf-8")
        repo = JsonProdutoRepository(path)

        with pytest.raises(StorageError, match="Arquivo de produtos inválido"):
            repo.get_all()

    def test_non_finite_price_not_written(self, tmp_path):
        path = tmp_path / "produtos.json"
        repo = JsonProdutoRepository(path)

        with pytest.raises(ValueError):
            repo.save(Produto(1, "X", float("nan")))

        assert path.read_text(encoding="utf-8") == "[]"
