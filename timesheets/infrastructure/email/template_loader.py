"""
Email template loader and renderer.
Handles Jinja2 templates for timesheet notifications.
"""

import logging
from decimal import Decimal
from pathlib import Path
from typing import Any, Dict, Optional

from jinja2 import Environment, FileSystemLoader, StrictUndefined, TemplateNotFound


logger = logging.getLogger(__name__)


class EmailTemplateLoader:
    """Loads and renders plain-text email templates using Jinja2."""

    def __init__(self, templates_dir: Optional[Path] = None):
        self.templates_dir = templates_dir or Path(__file__).parent / "templates"
        self.env = Environment(
            loader=FileSystemLoader(str(self.templates_dir)),
            autoescape=False,
            undefined=StrictUndefined,
            trim_blocks=True,
            lstrip_blocks=True
        )
        self._register_filters()

    def _register_filters(self):
        """Register custom Jinja2 filters for email templates."""

        def format_hours(value) -> str:
            hours = value if isinstance(value, Decimal) else Decimal(str(value))
            return f"{hours.quantize(Decimal('0.01'))} h"

        self.env.filters["hours"] = format_hours

    def render(self, template_name: str, context: Dict[str, Any]) -> str:
        """Render a template by name; raises TemplateNotFound when it does not exist."""
        try:
            template = self.env.get_template(f"{template_name}.txt")
        except TemplateNotFound:
            logger.error(f"Email template not found: {template_name}")
            raise
        return template.render(**context)
