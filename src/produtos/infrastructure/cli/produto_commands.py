"""CLI commands for the Produto entity."""

from __future__ import annotations

import math

import click

from produtos.domain.exceptions import DomainException
from produtos.domain.model.produto import Produto
from produtos.infrastructure.bootstrap import produto_service


def _finite_preco(ctx: click.Context, param: click.Parameter, value: float) -> float:
    if not math.isfinite(value):
        raise click.BadParameter(f"{value} is not a finite number.")
    return value


@click.command("show")
@click.option("--id", "produto_id", required=True, type=int, help="Product ID.")
def produto_show(produto_id: int) -> None:
    """Show a single product."""
    try:
        produto = produto_service().get_produto(produto_id)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    if produto is None:
        click.echo(f"Produto #{produto_id} não encontrado.")
        return

    click.echo(str(produto))


@click.command("add")
@click.option("--id", "produto_id", required=True, type=int, help="Product ID.")
@click.option("--nome", required=True, help="Product name.")
@click.option(
    "--preco", required=True, type=float, callback=_finite_preco, help="Price (e.g. 15.00)."
)
def produto_add(produto_id: int, nome: str, preco: float) -> None:
    """Add a new product to the catalog."""
    produto = Produto(id=produto_id, nome=nome, preco=preco)

    try:
        produto_service().salvar_produto(produto)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Produto #{produto.id} '{produto.nome}' adicionado por R$ {produto.preco:.2f}")


@click.command("update")
@click.option("--id", "produto_id", required=True, type=int, help="Product ID.")
@click.option("--nome", required=True, help="New product name.")
@click.option(
    "--preco", required=True, type=float, callback=_finite_preco, help="New price (e.g. 29.99)."
)
def produto_update(produto_id: int, nome: str, preco: float) -> None:
    """Replace a product's name and price."""
    produto = Produto(id=produto_id, nome=nome, preco=preco)

    try:
        produto_service().atualizar_produto(produto)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Produto #{produto_id} atualizado")


@click.command("delete")
@click.option("--id", "produto_id", required=True, type=int, help="Product ID.")
def produto_delete(produto_id: int) -> None:
    """Remove a product from the catalog."""
    try:
        produto_service().excluir_produto(produto_id)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Produto #{produto_id} excluído")


@click.command("list")
def produto_list() -> None:
    """List all products in the catalog."""
    try:
        produtos = produto_service().obter_todos_produtos()
    except DomainException as exc:
        raise click.ClickException(str(exc))

    if not produtos:
        click.echo("Nenhum produto encontrado.")
        return

    click.echo(f"{'ID':<6} {'Nome':<20} {'Preço':>10}")
    click.echo("-" * 38)
    for p in produtos:
        click.echo(f"{p.id:<6} {p.nome:<20} {p.preco:>10.2f}")
