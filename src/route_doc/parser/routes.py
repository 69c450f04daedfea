"""Route table loader.

Reads a YAML or JSON route table into RouteDescriptor models.
"""

from pathlib import Path

import yaml
from pydantic import ValidationError

from route_doc.errors import RouteTableError

from .base import RouteDescriptor


def load_routes(file_path: Path) -> list[RouteDescriptor]:
    """Parse a route table file into a list of RouteDescriptor.

    Accepts either ``{routes: [...]}`` or a bare list of route mappings.
    """
    try:
        text = file_path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise RouteTableError(f"{file_path}: {e}") from e

    try:
        doc = yaml.safe_load(text)
    except yaml.YAMLError as e:
        raise RouteTableError(f"{file_path}: {e}") from e

    entries = doc.get("routes", []) if isinstance(doc, dict) else doc
    if entries is None:
        return []
    if not isinstance(entries, list):
        raise RouteTableError(f"{file_path}: expected a list of routes")

    return parse_routes(entries, source=str(file_path))


def parse_routes(entries: list[dict], source: str = "<routes>") -> list[RouteDescriptor]:
    """Validate already-decoded route mappings."""
    routes = []
    for index, entry in enumerate(entries):
        try:
            routes.append(RouteDescriptor.model_validate(entry))
        except ValidationError as e:
            raise RouteTableError(f"{source}: route #{index}: {e}") from e
    return routes
