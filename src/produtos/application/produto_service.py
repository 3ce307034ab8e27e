"""Application service: product catalog use cases.

Validates input and existence preconditions, then delegates to the
repository. The service never stores data itself.
"""

from __future__ import annotations

import logging

from produtos.domain.exceptions import (
    InvalidArgumentError,
    InvalidOperationError,
    MissingArgumentError,
)
from produtos.domain.model.produto import Produto
from produtos.domain.repository.produto_repository import ProdutoRepository

logger = logging.getLogger(__name__)


class ProdutoService:

    def __init__(self, produto_repo: ProdutoRepository) -> None:
        self._produto_repo = produto_repo

    def get_produto(self, produto_id: int) -> Produto | None:
        """Return the product with the given ID, or None.

        Unlike update and delete, a missing product is not an error here.
        """
        return self._produto_repo.get_by_id(produto_id)

    def salvar_produto(self, produto: Produto | None) -> None:
        """Add a new product to the catalog."""
        self._require_produto(produto)
        self._validate_fields(produto)

        self._produto_repo.save(produto)
        logger.info("Produto #%s salvo", produto.id)

    def atualizar_produto(self, produto: Produto | None) -> None:
        """Replace an existing product.

        Existence is checked before the fields are validated.
        """
        self._require_produto(produto)

        if self._produto_repo.get_by_id(produto.id) is None:
            logger.debug("Atualização rejeitada: produto #%s inexistente", produto.id)
            raise InvalidOperationError(
                f"Não é possível atualizar o produto com ID {produto.id} "
                "porque não foi encontrado."
            )

        self._validate_fields(produto)

        self._produto_repo.update(produto)
        logger.info("Produto #%s atualizado", produto.id)

    def excluir_produto(self, produto_id: int) -> None:
        """Remove a product from the catalog."""
        if self._produto_repo.get_by_id(produto_id) is None:
            logger.debug("Exclusão rejeitada: produto #%s inexistente", produto_id)
            raise InvalidOperationError(
                f"Não é possível excluir o produto com ID {produto_id} "
                "porque não foi encontrado."
            )

        self._produto_repo.delete(produto_id)
        logger.info("Produto #%s excluído", produto_id)

    def obter_todos_produtos(self) -> list[Produto]:
        """Return the full catalog as listed by the repository."""
        return self._produto_repo.get_all()

    # --- Validation -----------------------------------------------------------

    @staticmethod
    def _require_produto(produto: Produto | None) -> None:
        if produto is None:
            logger.debug("Operação rejeitada: produto nulo")
            raise MissingArgumentError("O produto não pode ser nulo.", field="produto")

    @staticmethod
    def _validate_fields(produto: Produto) -> None:
        if not produto.nome or not produto.nome.strip():
            logger.debug("Produto #%s rejeitado: nome vazio", produto.id)
            raise InvalidArgumentError(
                "O nome do produto não pode ser vazio ou nulo.", field="nome"
            )

        if produto.preco <= 0:
            logger.debug("Produto #%s rejeitado: preço %s", produto.id, produto.preco)
            raise InvalidArgumentError(
                "O preço do produto deve ser maior que zero.", field="preco"
            )
