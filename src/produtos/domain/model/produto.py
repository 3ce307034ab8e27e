"""Produto entity."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Produto:
    """A sellable item in the catalog.

    No invariants are enforced here: the service validates a product
    before it reaches the repository, so an invalid instance must still
    be constructible in order to be rejected.
    """

    id: int
    nome: str
    preco: float

    def __str__(self) -> str:
        return f"#{self.id} {self.nome} (R$ {self.preco:.2f})"
