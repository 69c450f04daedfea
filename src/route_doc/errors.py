"""Exceptions raised while loading route tables and serving documents."""


class RouteDocError(Exception):
    """Base class for all route-doc errors."""


class RouteTableError(RouteDocError):
    """A route table file could not be read or validated."""


class ConfigError(RouteDocError):
    """A configuration file could not be read or validated."""


class ResourceNotFoundError(RouteDocError):
    """No resource group matches the requested name."""

    def __init__(self, name: str, known: list[str]):
        self.name = name
        self.known = known
        super().__init__(f"Unknown resource {name!r} (known: {', '.join(known) or 'none'})")
