"""Abstract repository for the Produto entity.

Defined in the domain layer so the domain never depends on
infrastructure. Concrete implementations live in the infrastructure layer.
"""

from __future__ import annotations

from abc import ABC, abstractmethod

from produtos.domain.model.produto import Produto


class ProdutoRepository(ABC):

    @abstractmethod
    def get_by_id(self, produto_id: int) -> Produto | None:
        """Return a product by its ID, or None if not found."""

    @abstractmethod
    def save(self, produto: Produto) -> None:
        """Persist a new product."""

    @abstractmethod
    def update(self, produto: Produto) -> None:
        """Persist changes to an existing product."""

    @abstractmethod
    def delete(self, produto_id: int) -> None:
        """Remove a product by its ID."""

    @abstractmethod
    def get_all(self) -> list[Produto]:
        """Return every product in the catalog."""
