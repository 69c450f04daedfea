"""FastAPI glue serving the documentation endpoints.

The route table is read through ``route_source`` on every request, so the
documents always reflect the host's current routes.
"""

import logging
from typing import Callable, Iterable

from fastapi import APIRouter, FastAPI, HTTPException, Request, Response

from route_doc.config import DocConfig
from route_doc.engine.assembler import build_index, build_resource
from route_doc.engine.grouper import group_routes, select_resource
from route_doc.errors import ResourceNotFoundError
from route_doc.parser.base import RouteDescriptor
from route_doc.renderer import NotesRenderer

logger = logging.getLogger(__name__)

RouteSource = Callable[[], Iterable[RouteDescriptor]]

CORS_HEADERS = {
    "Access-Control-Allow-Origin": "*",
    "Access-Control-Request-Method": "*",
}


def documentation_routes(config: DocConfig) -> list[RouteDescriptor]:
    """Route descriptors for the two documentation endpoints themselves."""
    return [
        RouteDescriptor(
            method="GET",
            path_template=config.mount_path,
            description="3scale compatible API description",
        ),
        RouteDescriptor(
            method="GET",
            path_template=f"{config.mount_path}/:name",
            description="3scale compatible API description for specific API",
            params={
                "name": {"desc": "Resource name of mounted API", "type": "string", "required": True},
            },
        ),
    ]


def create_doc_router(
    route_source: RouteSource,
    config: DocConfig,
    renderer: NotesRenderer | None = None,
) -> APIRouter:
    """Router exposing ``GET {mount_path}`` and ``GET {mount_path}/{name}``."""
    router = APIRouter(tags=[config.router_name])
    renderer = renderer or NotesRenderer()
    own_routes = documentation_routes(config)

    def current_groups() -> dict[str, list[RouteDescriptor]]:
        return group_routes([*route_source(), *own_routes])

    @router.get(config.mount_path, summary=own_routes[0].description)
    def list_resources(request: Request, response: Response) -> dict:
        response.headers.update(CORS_HEADERS)
        return build_index(current_groups(), config, request, renderer)

    @router.get(config.mount_path + "/{name}", summary=own_routes[1].description)
    def show_resource(name: str, request: Request, response: Response) -> dict:
        response.headers.update(CORS_HEADERS)
        try:
            routes = select_resource(current_groups(), name)
        except ResourceNotFoundError as e:
            raise HTTPException(status_code=404, detail=str(e), headers=CORS_HEADERS) from e
        return build_resource(routes, config, request, renderer)

    return router


def mount_documentation(app: FastAPI, route_source: RouteSource, config: DocConfig) -> APIRouter:
    """Add the documentation endpoints to an existing application."""
    router = create_doc_router(route_source, config)
    app.include_router(router)
    logger.info("Documentation mounted at %s", config.mount_path)
    return router


def create_app(routes: list[RouteDescriptor], config: DocConfig) -> FastAPI:
    """Standalone application documenting a fixed route table."""
    app = FastAPI(title=f"{config.router_name} documentation", version=config.api_version)
    mount_documentation(app, lambda: routes, config)
    return app
