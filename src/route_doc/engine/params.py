"""Parameter resolution.

Each declared route parameter or header is merged with its entry in the
default-parameter table. Values declared on the route win; the defaults
table fills in the rest.
"""

import logging
from typing import Any

from pydantic import BaseModel, ConfigDict

from route_doc.parser.base import DefaultParam, ParamSpec

logger = logging.getLogger(__name__)

# Type names hosts use for multipart uploads.
FILE_UPLOAD_TYPES = {"UploadFile", "Rack::Multipart::UploadedFile"}


class ResolvedParam(BaseModel):
    """A parameter as it appears in a Swagger 1.1 operation."""

    model_config = ConfigDict(frozen=True)

    param_type: str  # path / query / header
    name: str
    description: str | None
    data_type: str
    required: bool
    third_party_name: Any = None
    default: Any = None
    allowed_values: Any = None

    def to_swagger(self) -> dict[str, Any]:
        data: dict[str, Any] = {
            "paramType": self.param_type,
            "name": self.name,
            "description": self.description,
            "dataType": self.data_type,
            "required": self.required,
        }
        if self.third_party_name is not None and len(str(self.third_party_name)) > 0:
            data["threescale_name"] = self.third_party_name
        if _present(self.default):
            data["defaultValue"] = self.default
        if _present(self.allowed_values):
            data["allowedValues"] = self.allowed_values
        return data


def merge_defaults(name: str, defaults: dict[str, DefaultParam] | None) -> DefaultParam:
    """Return the defaults entry for ``name`` with every fallback filled in.

    A name missing from the table is treated as an empty entry. The table
    itself is never modified.
    """
    entry = (defaults or {}).get(name) or DefaultParam()
    return DefaultParam(
        description=_fallback(entry.description, ""),
        type=_fallback(entry.type, "String"),
        param_type=_fallback(entry.param_type, "query"),
        full_name=_fallback(entry.full_name, name),
        third_party_name=_fallback(entry.third_party_name, ""),
        required=_fallback(entry.required, False),
        default=entry.default,
        allowed_values=entry.allowed_values,
    )


def resolve_body_params(
    params: dict[str, ParamSpec] | None,
    path_template: str,
    method: str,
    defaults: dict[str, DefaultParam] | None,
) -> list[ResolvedParam]:
    """Resolve the body/query/path parameters of one route."""
    result = []
    for name, spec in (params or {}).items():
        base = merge_defaults(name, defaults)
        if spec.type in FILE_UPLOAD_TYPES:
            spec = spec.model_copy(update={"type": "file"})

        if f":{name}" in path_template:
            param_type = "path"
        elif spec.declares("param_type") and spec.param_type:
            param_type = spec.param_type
        else:
            param_type = base.param_type

        result.append(
            ResolvedParam(
                param_type=param_type,
                name=spec.full_name or base.full_name,
                description=_declared(spec, "description", base),
                data_type=(spec.type or "String") if spec.declares("type") else base.type,
                required=bool(spec.required) if spec.declares("required") else base.required,
                third_party_name=_declared(spec, "third_party_name", base),
                default=_declared(spec, "default", base),
                allowed_values=_declared(spec, "allowed_values", base),
            )
        )
    logger.debug("resolved %d params for %s %s", len(result), method, path_template)
    return result


def resolve_header_params(
    headers: dict[str, ParamSpec] | None,
    defaults: dict[str, DefaultParam] | None,
) -> list[ResolvedParam]:
    """Resolve the header parameters of one route.

    Only description, required and the third-party name can be overridden
    per route; name, data type, default and allowed values always come
    from the defaults table.
    """
    result = []
    for name, spec in (headers or {}).items():
        base = merge_defaults(name, defaults)
        result.append(
            ResolvedParam(
                param_type="header",
                name=base.full_name,
                description=_declared(spec, "description", base),
                data_type=base.type,
                required=bool(spec.required) if spec.declares("required") else base.required,
                third_party_name=_declared(spec, "third_party_name", base),
                default=base.default,
                allowed_values=base.allowed_values,
            )
        )
    return result


def _declared(spec: ParamSpec, field: str, base: DefaultParam) -> Any:
    return getattr(spec, field) if spec.declares(field) else getattr(base, field)


def _fallback(value: Any, fallback: Any) -> Any:
    return fallback if value is None else value


def _present(value: Any) -> bool:
    # Only null and false count as absent; 0, "" and [] are emitted.
    return value is not None and value is not False
