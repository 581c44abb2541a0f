"""Jinja2 template rendering for example scaffolding.

Provides the TemplateRenderer class which loads Jinja2 templates from the
``fhevm_hub/scaffolder/templates/`` directory and renders them with
example-specific context data. Rendering is pure: nothing here writes to
the file system.
"""

from __future__ import annotations

import re
from pathlib import Path
from typing import Any

from jinja2 import Environment, FileSystemLoader, StrictUndefined, select_autoescape


# ---------------------------------------------------------------------------
# Template directory discovery
# ---------------------------------------------------------------------------

_DEFAULT_TEMPLATE_DIR = Path(__file__).parent / "templates"


# ---------------------------------------------------------------------------
# TemplateRenderer
# ---------------------------------------------------------------------------


class TemplateRenderer:
    """Renders Jinja2 templates for example scaffolding.

    The renderer loads ``.j2`` template files from a configurable
    template directory. Templates are rendered with a context dictionary that
    typically carries the registry entry being scaffolded.
    """

    def __init__(self, template_dir: str | Path | None = None) -> None:
        if template_dir is None:
            template_dir = _DEFAULT_TEMPLATE_DIR
        self.template_dir = Path(template_dir)
        self.env = Environment(
            loader=FileSystemLoader(str(self.template_dir)),
            autoescape=select_autoescape([], default_for_string=False),
            keep_trailing_newline=True,
            trim_blocks=True,
            lstrip_blocks=True,
            undefined=StrictUndefined,
        )
        # Register custom filters
        self.env.filters["title_case"] = _title_case_filter

    def render(self, template_path: str, context: dict[str, Any] | None = None) -> str:
        """Render a single template with the provided context.

        Args:
            template_path: Path relative to the template directory (e.g.
                ``"README.md.j2"``).
            context: Dictionary of variables available inside the template.

        Returns:
            The rendered template content as a string.
        """
        template = self.env.get_template(template_path)
        return template.render(**(context or {}))


# ---------------------------------------------------------------------------
# Jinja2 custom filters
# ---------------------------------------------------------------------------

def _title_case_filter(value: str) -> str:
    """Convert ``music-royalty`` to ``Music Royalty``."""
    parts = re.split(r"[-_\s]+", value)
    return " ".join(word.capitalize() for word in parts if word)
