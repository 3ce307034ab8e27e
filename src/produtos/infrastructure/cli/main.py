import logging

import click

from produtos.infrastructure.cli.produto_commands import (
    produto_add,
    produto_delete,
    produto_list,
    produto_show,
    produto_update,
)


@click.group()
@click.option("--verbose", "-v", is_flag=True, help="Log service activity.")
def cli(verbose: bool) -> None:
    """Produtos — product catalog"""
    logging.basicConfig(format="%(asctime)s | %(levelname)s | %(name)s | %(message)s")
    logging.getLogger("produtos").setLevel(logging.INFO if verbose else logging.WARNING)


@cli.group()
def produto() -> None:
    """Manage products."""


# Register subcommands
produto.add_command(produto_add)
produto.add_command(produto_delete)
produto.add_command(produto_list)
produto.add_command(produto_show)
produto.add_command(produto_update)
