"""CLI configuration — singleton PanelConfig resolved at startup."""

from __future__ import annotations

from functools import lru_cache

from ngpanel_common import PanelConfig


@lru_cache(maxsize=1)
def get_config() -> PanelConfig:
    """Return the global PanelConfig (resolved once, cached)."""
    return PanelConfig()
