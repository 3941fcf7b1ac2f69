"""Restore request body schema."""

from typing import Any

from pydantic import BaseModel, ConfigDict


class RestoreRequestBody(BaseModel):
    """REST-style body accepted by ``RestoreRequest.source``."""

    model_config = ConfigDict(extra="forbid")

    indices: list[str] | str | None = None
    ignore_unavailable: bool | None = None
    allow_no_indices: bool | None = None
    expand_wildcards: list[str] | str | None = None
    include_global_state: bool | None = None
    rename_pattern: str | None = None
    rename_replacement: str | None = None
    settings: dict[str, Any] | str | None = None

    def index_list(self) -> list[str] | None:
        if self.indices is None:
            return None
        if isinstance(self.indices, str):
            return [i.strip() for i in self.indices.split(",") if i.strip()]
        return list(self.indices)
