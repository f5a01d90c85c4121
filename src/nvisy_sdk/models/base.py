"""Shared model bases for the Nvisy API payloads."""

from __future__ import annotations

from typing import Any
from uuid import UUID

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

# Server-assigned identifier; accepted as a UUID or its string form.
ResourceId = UUID | str


class ApiModel(BaseModel):
    """Base for payloads whose JSON keys are camelCase.

    Python attributes stay snake_case; both spellings are accepted on input.
    """

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    def to_payload(self) -> dict[str, Any]:
        """Serialize to a JSON-ready dict, omitting fields left as ``None``."""
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)


class SnakeModel(BaseModel):
    """Base for payloads whose JSON keys are snake_case."""

    model_config = ConfigDict(populate_by_name=True)

    def to_payload(self) -> dict[str, Any]:
        """Serialize to a JSON-ready dict, omitting fields left as ``None``."""
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)
