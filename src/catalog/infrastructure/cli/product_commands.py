"""CLI commands for products."""

from __future__ import annotations

import click

from catalog.application.add_product import AddProductHandler
from catalog.domain.decorator.product_details import describe
from catalog.domain.exceptions import DomainException
from catalog.domain.factory.product_factory import factory_for
from catalog.domain.model.product import ProductCategory
from catalog.domain.service.product_registry import ProductRegistry
from catalog.infrastructure.bootstrap import email_notifier

_CATEGORY_CHOICE = click.Choice(
    [c.name.lower() for c in ProductCategory], case_sensitive=False
)


@click.command("add")
@click.option("--category", required=True, type=_CATEGORY_CHOICE, help="Product category.")
@click.option("--name", required=True, help="Product name.")
@click.option("--notify/--no-notify", default=True, help="Send the email notification.")
@click.pass_obj
def product_add(registry: ProductRegistry, category: str, name: str, notify: bool) -> None:
    """Create a product and save it to the catalog."""
    if notify:
        registry.add_observer(email_notifier())

    handler = AddProductHandler(registry=registry)

    try:
        dto = handler.handle(category=category, name=name)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(dto.details)


@click.command("describe")
@click.option("--category", required=True, type=_CATEGORY_CHOICE, help="Product category.")
@click.option("--name", required=True, help="Product name.")
def product_describe(category: str, name: str) -> None:
    """Show a product's description without saving it."""
    try:
        product = factory_for(category).create(name)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(describe(product))
