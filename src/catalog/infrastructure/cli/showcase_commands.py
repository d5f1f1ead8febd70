"""CLI command for the store showcase flow."""

from __future__ import annotations

import click

from catalog.application.showcase import ShowcaseHandler
from catalog.domain.exceptions import DomainException
from catalog.domain.service.product_registry import ProductRegistry
from catalog.infrastructure.bootstrap import email_notifier
from catalog.infrastructure.config import settings


@click.command("showcase")
@click.pass_obj
def showcase(registry: ProductRegistry) -> None:
    """Create, describe and save the demo products."""
    click.echo(settings.WELCOME_MESSAGE)

    handler = ShowcaseHandler(
        registry=registry,
        notifier=email_notifier(),
        echo=click.echo,
    )

    try:
        handler.handle()
    except DomainException as exc:
        raise click.ClickException(str(exc))
