"""Base classes for the HTTP schemas.

Domain models (``Restaurant``, ``Review``, ``Reply``) are plain Pydantic
models with snake_case fields. Request and response bodies inherit from the
classes below so they are exchanged in camelCase.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class _BaseSchema(BaseModel):
    """Shared configuration. Inherit from a public subclass instead."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        use_enum_values=True,
        validate_default=True,
        validate_assignment=True,
        serialize_by_alias=True,
    )


class APIRequest(_BaseSchema):
    """Incoming request body; unknown properties are ignored."""

    model_config = ConfigDict(
        extra="ignore",
        str_strip_whitespace=True,
    )


class APIResponse(_BaseSchema):
    """Outgoing response body; only declared properties are returned."""

    model_config = ConfigDict(
        extra="forbid",
    )
