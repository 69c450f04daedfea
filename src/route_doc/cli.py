"""CLI entry point for route-doc."""

import json
import logging
from pathlib import Path
from types import SimpleNamespace

import click
import uvicorn

from route_doc.config import DocConfig, load_config
from route_doc.engine.assembler import build_index, build_resource
from route_doc.engine.grouper import group_routes, select_resource
from route_doc.errors import RouteDocError
from route_doc.parser.base import RouteDescriptor
from route_doc.parser.routes import load_routes
from route_doc.server import create_app

DEFAULT_BASE_URL = "http://localhost"


def _load(routes_path: Path, config_path: Path | None) -> tuple[list[RouteDescriptor], DocConfig]:
    """Load route table and configuration, reporting errors as CLI failures."""
    try:
        return load_routes(routes_path), load_config(config_path)
    except RouteDocError as e:
        raise click.ClickException(str(e)) from e


def _write_document(document: dict, output: Path) -> None:
    output.parent.mkdir(parents=True, exist_ok=True)
    output.write_text(json.dumps(document, indent=2, ensure_ascii=False), encoding="utf-8")
    click.echo(f"Document saved to {output}")


routes_argument = click.argument("routes_path", type=click.Path(exists=True, dir_okay=False, path_type=Path))
config_option = click.option("-c", "--config", "config_path", default=None, type=click.Path(exists=True, dir_okay=False, path_type=Path), help="YAML configuration file.")
base_url_option = click.option("--base-url", default=DEFAULT_BASE_URL, help="Base URL used when no base path is configured.")


@click.group()
@click.option("-v", "--verbose", is_flag=True, help="Enable debug logging.")
def main(verbose: bool):
    """route-doc: Swagger 1.1 descriptions from route tables."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )


@main.command()
@routes_argument
@click.option("-o", "--output", required=True, type=click.Path(path_type=Path), help="Output JSON file.")
@config_option
@base_url_option
def index(routes_path: Path, output: Path, config_path: Path | None, base_url: str):
    """Write the document listing every resource."""
    routes, config = _load(routes_path, config_path)
    click.echo(f"Loaded {len(routes)} routes from {routes_path}.")

    document = build_index(group_routes(routes), config, SimpleNamespace(base_url=base_url))
    _write_document(document, output)


@main.command()
@routes_argument
@click.argument("name")
@click.option("-o", "--output", required=True, type=click.Path(path_type=Path), help="Output JSON file.")
@config_option
@base_url_option
def show(routes_path: Path, name: str, output: Path, config_path: Path | None, base_url: str):
    """Write the document for a single resource."""
    routes, config = _load(routes_path, config_path)
    try:
        resource_routes = select_resource(group_routes(routes), name)
    except RouteDocError as e:
        raise click.ClickException(str(e)) from e

    document = build_resource(resource_routes, config, SimpleNamespace(base_url=base_url))
    _write_document(document, output)


@main.command()
@routes_argument
def resources(routes_path: Path):
    """List resource names and their route counts."""
    routes, _ = _load(routes_path, None)
    for name, group in group_routes(routes).items():
        click.echo(f"{name}\t{len(group)}")


@main.command()
@routes_argument
@config_option
@click.option("--host", default="127.0.0.1", help="Bind address.")
@click.option("--port", default=8000, type=int, help="Bind port.")
def serve(routes_path: Path, config_path: Path | None, host: str, port: int):
    """Serve the documentation endpoints over HTTP."""
    routes, config = _load(routes_path, config_path)
    click.echo(f"Serving {len(routes)} routes at http://{host}:{port}{config.mount_path}")
    uvicorn.run(create_app(routes, config), host=host, port=port)
