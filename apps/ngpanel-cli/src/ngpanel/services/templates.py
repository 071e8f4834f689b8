"""Site templates stored in ``templates.json``."""

from __future__ import annotations

import json
import logging

from pydantic import ValidationError

from ngpanel_common import TEMPLATE_PLACEHOLDER, PanelConfig, Template

log = logging.getLogger(__name__)


def load_templates(cfg: PanelConfig) -> list[Template]:
    """Return all templates; a missing or unreadable file yields an empty list."""
    path = cfg.templates_file
    if not path.exists():
        return []
    try:
        raw = json.loads(path.read_text(encoding="utf-8"))
        return [Template.model_validate(t) for t in raw]
    except (OSError, TypeError, ValueError, ValidationError) as exc:
        log.warning("Ignoring unreadable templates file %s: %s", path, exc)
        return []


def find_template(cfg: PanelConfig, template_id: str) -> Template | None:
    return next((t for t in load_templates(cfg) if t.id == template_id), None)


def render_template(template: Template, domain: str) -> str:
    return template.content.replace(TEMPLATE_PLACEHOLDER, domain)
