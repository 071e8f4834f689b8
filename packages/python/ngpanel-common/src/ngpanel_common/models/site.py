"""Site and template models."""

from __future__ import annotations

from pydantic import BaseModel


class SiteInfo(BaseModel):
    """A config file in the available directory and its activation state."""

    name: str
    enabled: bool = False
    path: str = ""


class Template(BaseModel):
    """A named config skeleton with a ``{{domain}}`` placeholder."""

    id: str
    name: str = ""
    description: str = ""
    content: str = ""
