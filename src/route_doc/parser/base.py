"""Route metadata models read by the documentation engine.

Route tables (loaded from YAML/JSON or supplied by a host application)
are converted into these models before grouping and rendering.
"""

from typing import Any

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, field_validator


class ParamSpec(BaseModel):
    """Documentation attributes declared on a single route parameter or header.

    Every field is optional. Whether a field was declared at all is tracked
    separately from its value, so an explicit ``required: false`` still
    overrides a default of ``true``.
    """

    model_config = ConfigDict(extra="ignore")

    description: str | None = Field(None, validation_alias=AliasChoices("description", "desc"))
    type: str | None = None
    required: bool | None = None
    param_type: str | None = Field(None, validation_alias=AliasChoices("param_type", "paramType"))
    full_name: str | None = Field(None, validation_alias=AliasChoices("full_name", "fullName"))
    third_party_name: Any = Field(
        None,
        validation_alias=AliasChoices("third_party_name", "thirdPartyName", "threescale_name"),
    )
    default: Any = None
    allowed_values: Any = Field(None, validation_alias=AliasChoices("allowed_values", "allowedValues"))

    def declares(self, field: str) -> bool:
        """True if ``field`` was given explicitly, even with a null value."""
        return field in self.model_fields_set


class DefaultParam(ParamSpec):
    """Entry of the default-parameter table, keyed by parameter name."""


class RouteDescriptor(BaseModel):
    """A single registered endpoint as exposed by the host's route table."""

    model_config = ConfigDict(extra="ignore")

    method: str  # GET / POST / PUT / DELETE / PATCH
    path_template: str = Field(validation_alias=AliasChoices("path_template", "pathTemplate", "path"))
    params: dict[str, ParamSpec] = {}
    headers: dict[str, ParamSpec] = {}
    http_codes: dict[int | str, str] = Field(
        default_factory=dict, validation_alias=AliasChoices("http_codes", "httpCodes")
    )
    notes: str | None = None
    description: str | None = None

    @field_validator("params", "headers", mode="before")
    @classmethod
    def _coerce_specs(cls, value: Any) -> Any:
        # A bare value (``id: Integer``) carries no attributes of its own.
        if value is None:
            return {}
        if isinstance(value, dict):
            return {
                name: spec if isinstance(spec, (dict, ParamSpec)) else {}
                for name, spec in value.items()
            }
        return value

    @field_validator("http_codes", mode="before")
    @classmethod
    def _none_as_empty(cls, value: Any) -> Any:
        return {} if value is None else value
