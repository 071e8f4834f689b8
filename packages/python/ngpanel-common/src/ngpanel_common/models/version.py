"""Version index entry model."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class VersionRecord(BaseModel):
    """Metadata for one immutable snapshot of a site's config.

    Serialized with the camelCase keys used by the on-disk ``index.json``.
    """

    model_config = ConfigDict(populate_by_name=True)

    id: str
    created_at: str = Field(alias="createdAt")
    user: str = "unknown"
    source_address: str = Field(default="unknown", alias="ip")

    def to_index(self) -> dict[str, str]:
        return self.model_dump(by_alias=True)
