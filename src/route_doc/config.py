"""Documentation endpoint configuration.

One DocConfig is built per mounted documentation endpoint and is never
mutated afterwards; every engine function receives it explicitly.
"""

from pathlib import Path
from typing import Any, Callable

import yaml
from pydantic import BaseModel, ConfigDict, ValidationError, field_validator
from pydantic.alias_generators import to_camel

from route_doc.errors import ConfigError
from route_doc.parser.base import DefaultParam

DEFAULT_MOUNT_PATH = "/3scale_doc"
DEFAULT_API_VERSION = "0.1"


class DocConfig(BaseModel):
    """Options recognised when mounting the documentation endpoints."""

    model_config = ConfigDict(frozen=True, populate_by_name=True, alias_generator=to_camel)

    mount_path: str = DEFAULT_MOUNT_PATH
    base_path: str | Callable[[Any], str | None] | None = None
    api_version: str = DEFAULT_API_VERSION
    markdown: bool = False
    hide_documentation_path: bool = False
    hide_format: bool = False
    default_params: dict[str, DefaultParam] = {}
    class_name: str | None = None

    @field_validator("api_version", mode="before")
    @classmethod
    def _version_as_text(cls, value: Any) -> Any:
        # YAML reads ``api_version: 1.0`` as a float.
        return str(value) if isinstance(value, (int, float)) else value

    @field_validator("default_params", mode="before")
    @classmethod
    def _coerce_defaults(cls, value: Any) -> Any:
        if value is None:
            return {}
        if isinstance(value, dict):
            return {name: spec if spec is not None else {} for name, spec in value.items()}
        return value

    @property
    def router_name(self) -> str:
        return self.class_name or self.mount_path.replace("/", "")


def load_config(file_path: Path | None = None) -> DocConfig:
    """Load a DocConfig from a YAML file; no file means all defaults."""
    if file_path is None:
        return DocConfig()

    try:
        text = file_path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise ConfigError(f"{file_path}: {e}") from e

    try:
        data = yaml.safe_load(text) or {}
    except yaml.YAMLError as e:
        raise ConfigError(f"{file_path}: {e}") from e

    if not isinstance(data, dict):
        raise ConfigError(f"{file_path}: expected a mapping of options")

    try:
        return DocConfig.model_validate(data)
    except ValidationError as e:
        raise ConfigError(f"{file_path}: {e}") from e
