"""CLI interface for the dummyjson product catalog."""

import json
import logging
import sys
from typing import Any

import typer

from .client import Networking
from .client.config import ClientSettings, get_settings
from .decoders import encode_product
from .errors import CatalogError
from .protocol import ProductSource
from .repository import AuthRepository, ProductRepository

app = typer.Typer(help="Browse the dummyjson product catalog")


def setup_logging(settings: ClientSettings, verbose: bool = False) -> None:
    """Configure logging for the CLI."""
    level = logging.DEBUG if verbose else getattr(logging, settings.log_level.upper())
    logging.basicConfig(
        level=level,
        format=settings.log_format,
        handlers=[
            logging.StreamHandler(sys.stderr),
        ],
    )

    # urllib3 connection chatter is only interesting when debugging
    if not verbose:
        logging.getLogger("urllib3").setLevel(logging.WARNING)


def _write_json(data: Any, output: str | None) -> None:
    json_data = json.dumps(data, indent=2)

    # Output to file or stdout
    if output:
        with open(output, "w") as f:
            f.write(json_data)
        typer.echo(f"Results saved to {output}", err=True)
    else:
        typer.echo(json_data)


def _networking(settings: ClientSettings) -> Networking:
    return Networking(base_url=settings.base_url)


def _product_source(settings: ClientSettings) -> ProductSource:
    """Build the product source the commands read from."""
    source = ProductRepository(_networking(settings))
    assert isinstance(source, ProductSource)
    return source


@app.callback()
def main(
    verbose: bool = typer.Option(
        False, "--verbose", "-v", help="Enable debug logging."
    ),
):
    """Browse the dummyjson product catalog."""
    setup_logging(get_settings(), verbose)


@app.command()
def products(
    output: str | None = typer.Option(
        None,
        "--output",
        "-o",
        help="Output file path. If not specified, prints to stdout.",
    ),
):
    """List all products as JSON."""
    repository = _product_source(get_settings())

    try:
        items = repository.fetch_all_products()
    except CatalogError as e:
        typer.echo(f"Error: Could not fetch products: {e}", err=True)
        raise typer.Exit(1)

    _write_json([encode_product(product) for product in items], output)
    typer.echo(f"Fetched {len(items)} products", err=True)


@app.command()
def product(
    product_id: str = typer.Argument(..., help="Identifier of the product"),
    output: str | None = typer.Option(
        None,
        "--output",
        "-o",
        help="Output file path. If not specified, prints to stdout.",
    ),
):
    """Show one product as JSON."""
    repository = _product_source(get_settings())

    try:
        item = repository.fetch_product_by_id(product_id)
    except CatalogError as e:
        typer.echo(f"Error: Could not fetch product '{product_id}': {e}", err=True)
        raise typer.Exit(1)

    _write_json(encode_product(item), output)


@app.command()
def login(
    username: str | None = typer.Option(
        None, "--username", "-u", help="Username. Defaults to CATALOGAPI_USERNAME."
    ),
    password: str | None = typer.Option(
        None, "--password", "-p", help="Password. Defaults to CATALOGAPI_PASSWORD."
    ),
):
    """Log in and print the server response."""
    settings = get_settings()
    repository = AuthRepository(_networking(settings))

    try:
        response = repository.login(
            username or settings.username, password or settings.password
        )
    except CatalogError as e:
        typer.echo(f"Error: Login failed: {e}", err=True)
        raise typer.Exit(1)

    _write_json(response, None)


if __name__ == "__main__":
    app()
