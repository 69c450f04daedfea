"""Swagger 1.1 document assembly.

Builds the "all resources" index and the "single resource" document from
grouped routes. Both are plain dicts ready for JSON serialization.
"""

import logging
import re
from typing import Any

from route_doc.config import DocConfig
from route_doc.engine.params import resolve_body_params, resolve_header_params
from route_doc.engine.path import translate_path
from route_doc.parser.base import RouteDescriptor
from route_doc.renderer import NotesRenderer

logger = logging.getLogger(__name__)

SWAGGER_VERSION = "1.1"

_NICKNAME_SEPARATORS = re.compile(r"[/:().]+")


def build_index(
    groups: dict[str, list[RouteDescriptor]],
    config: DocConfig,
    request: Any,
    renderer: NotesRenderer | None = None,
) -> dict[str, Any]:
    """Document listing every route of every visible resource group."""
    apis = []
    for name, routes in groups.items():
        if config.hide_documentation_path and is_documentation_group(name, config):
            logger.debug("Hiding documentation resource %r", name)
            continue
        for route in routes:
            apis.append(build_api(route, config, renderer, group=name))

    return {
        "apiVersion": config.api_version,
        "swaggerVersion": SWAGGER_VERSION,
        "basePath": resolve_base_path(config.base_path, request),
        "operations": [],
        "apis": apis,
    }


def build_resource(
    routes: list[RouteDescriptor],
    config: DocConfig,
    request: Any,
    renderer: NotesRenderer | None = None,
) -> dict[str, Any]:
    """Document for the routes of a single resource."""
    return {
        "apiVersion": config.api_version,
        "swaggerVersion": SWAGGER_VERSION,
        "basePath": resolve_base_path(config.base_path, request),
        "resourcePath": "",
        "apis": [build_api(route, config, renderer) for route in routes],
    }


def build_api(
    route: RouteDescriptor,
    config: DocConfig,
    renderer: NotesRenderer | None = None,
    group: str | None = None,
) -> dict[str, Any]:
    """One API node: the translated path and its single operation."""
    operation: dict[str, Any] = {"notes": render_notes(route.notes, config, renderer)}
    if group is not None:
        operation["group"] = group
    operation.update(
        {
            "summary": route.description or "",
            "nickname": nickname(route.method, route.path_template),
            "httpMethod": route.method,
            "parameters": [
                param.to_swagger()
                for param in resolve_header_params(route.headers, config.default_params)
                + resolve_body_params(
                    route.params, route.path_template, route.method, config.default_params
                )
            ],
        }
    )

    error_responses = parse_http_codes(route.http_codes)
    if error_responses:
        operation["errorResponses"] = error_responses

    return {
        "path": translate_path(route.path_template, config.api_version, config.hide_format),
        "operations": [operation],
    }


def render_notes(notes: str | None, config: DocConfig, renderer: NotesRenderer | None = None) -> str | None:
    if not notes or not config.markdown:
        return notes
    return (renderer or NotesRenderer()).render(notes)


def nickname(method: str, path_template: str) -> str:
    """``GET`` + ``/users/:id(.:format)`` -> ``GET-users-id-format``."""
    return method + _NICKNAME_SEPARATORS.sub("-", path_template).rstrip("-")


def parse_http_codes(codes: dict[int | str, str] | None) -> list[dict[str, Any]]:
    return [{"code": code, "reason": reason} for code, reason in (codes or {}).items()]


def is_documentation_group(name: str, config: DocConfig) -> bool:
    """True if ``name`` is the resource the documentation endpoints live under."""
    return f"/{name}/".startswith(translate_path(config.mount_path) + "/")


def resolve_base_path(base_path: Any, request: Any) -> str:
    """Configured base path (literal or callable), else the request's base URL."""
    value = base_path(request) if callable(base_path) else base_path
    return value if value is not None else str(request.base_url).rstrip("/")
