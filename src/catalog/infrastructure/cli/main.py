import click

from catalog.infrastructure.bootstrap import product_registry
from catalog.infrastructure.cli.product_commands import product_add, product_describe
from catalog.infrastructure.cli.showcase_commands import showcase
from catalog.infrastructure.config import settings
from catalog.infrastructure.logging_setup import configure_logging, detach_logging


@click.group(invoke_without_command=True)
@click.pass_context
def cli(ctx: click.Context) -> None:
    """Catalog: Online store pattern showcase"""
    try:
        handler = configure_logging(settings.LOG_LEVEL)
    except ValueError as exc:
        raise click.ClickException(f"CATALOG_LOG_LEVEL: {exc}")
    ctx.call_on_close(lambda: detach_logging(handler))

    # One registry per run, shared by every command through the context.
    ctx.obj = product_registry()

    if ctx.invoked_subcommand is None:
        ctx.invoke(showcase)


@cli.group()
def product() -> None:
    """Manage products."""


# Register subcommands
cli.add_command(showcase)
product.add_command(product_add)
product.add_command(product_describe)
