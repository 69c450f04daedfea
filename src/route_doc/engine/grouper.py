"""Route grouping by resource name."""

import logging
import re

from route_doc.errors import ResourceNotFoundError
from route_doc.parser.base import RouteDescriptor

logger = logging.getLogger(__name__)

_RESOURCE_NAME = re.compile(r"/(\w*?)(?:[./(]|$)")


def resource_name(path_template: str) -> str:
    """Extract the lower-cased resource name of a path, or "" if there is none.

    ``/users/:id(.:format)`` -> ``users``; ``/:version/Orders`` -> ``orders``.
    """
    match = _RESOURCE_NAME.search(path_template)
    return match.group(1).lower() if match else ""


def group_routes(routes: list[RouteDescriptor]) -> dict[str, list[RouteDescriptor]]:
    """Group routes by resource name, keeping route-table order."""
    groups: dict[str, list[RouteDescriptor]] = {}
    for route in routes:
        name = resource_name(route.path_template)
        if not name:
            logger.warning(
                "Skipping %s %s: no resource name in path", route.method, route.path_template
            )
            continue
        groups.setdefault(name, []).append(route)
    return groups


def select_resource(groups: dict[str, list[RouteDescriptor]], name: str) -> list[RouteDescriptor]:
    """Return the routes of one group, raising ResourceNotFoundError if absent."""
    try:
        return groups[name]
    except KeyError:
        raise ResourceNotFoundError(name, sorted(groups)) from None
