"""Markdown fixtures served by the offline demo backend."""

from pathlib import Path
from typing import Dict

TEMPLATES_DIR = Path(__file__).parent
TEMPLATE_SUFFIX = "_template.md"


def load_template(template_name: str) -> str:
    """Return the raw template text, or an empty string if there is no such template."""
    template_path = TEMPLATES_DIR / f"{template_name}{TEMPLATE_SUFFIX}"
    if not template_path.exists():
        return ""
    return template_path.read_text(encoding="utf-8")


def render_template(template_name: str, values: Dict[str, str]) -> str:
    """Fill ``{placeholders}`` of a template; missing templates render empty."""
    template = load_template(template_name)
    return template.format(**values) if template else ""


__all__ = ["load_template", "render_template", "TEMPLATES_DIR"]
