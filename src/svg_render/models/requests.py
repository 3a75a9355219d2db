"""Request models for the service."""

from typing import Any, Dict, Optional
from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    StrictBool,
    StrictStr,
    TypeAdapter,
    ValidationInfo,
    field_validator,
    model_validator,
)


class RenderRequest(BaseModel):
    """
    Payload accepted by the render endpoint.
    
    Keys are matched case-insensitively; when a key appears in several
    spellings the last one wins. A JSON null stands for the zero value of
    its field, so ``{"replace": {"#A#": null}}`` replaces ``#A#`` with ``""``.
    """

    model_config = ConfigDict(frozen=True, extra="ignore")

    source: StrictStr = Field(default="", description="URL of the SVG document to render")
    remove_hyphens: StrictBool = Field(
        default=False,
        validation_alias="removehyphens",
        description="Strip apostrophes from the fetched document",
    )
    replace: Dict[StrictStr, Optional[StrictStr]] = Field(
        default_factory=dict, description="Placeholder to value substitutions"
    )

    @model_validator(mode="before")
    @classmethod
    def lowercase_keys(cls, data: Any) -> Any:
        """Match payload keys regardless of their capitalisation."""
        if isinstance(data, dict):
            return {key.lower(): value for key, value in data.items()}
        return data

    @field_validator("source", "remove_hyphens", "replace", mode="before")
    @classmethod
    def null_means_default(cls, v: Any, info: ValidationInfo) -> Any:
        """Treat an explicit JSON null like an omitted field."""
        if v is None:
            return cls.model_fields[info.field_name].get_default(call_default_factory=True)
        return v

    @field_validator("replace", mode="after")
    @classmethod
    def null_values_are_empty(cls, v: Dict[str, Optional[str]]) -> Dict[str, str]:
        return {placeholder: value or "" for placeholder, value in v.items()}


# A bare JSON null is an empty payload rather than a malformed one.
RENDER_PAYLOAD = TypeAdapter(Optional[RenderRequest])


def parse_render_payload(body: bytes) -> RenderRequest:
    """Validate a raw JSON body, raising ``ValidationError`` when malformed."""
    payload = RENDER_PAYLOAD.validate_json(body)
    return payload if payload is not None else RenderRequest()
