"""
Template renderer implementation using Jinja2.

Templates live in ``xml_encryption/templates`` as ``<name>.xml``.
"""

from collections.abc import Mapping
from pathlib import Path
from typing import Any

from jinja2 import Environment, FileSystemLoader, StrictUndefined

TEMPLATE_DIR = Path(__file__).parent.parent / "templates"


class JinjaRenderer:
    """
    Renders XML templates with autoescaping enabled.

    Values that are already markup (such as a rendered KeyInfo fragment)
    must be passed as ``markupsafe.Markup`` to be inserted verbatim.
    """

    def __init__(self, template_dir: Path = TEMPLATE_DIR) -> None:
        """
        Args:
            template_dir: Directory holding the ``.xml`` templates.
        """
        self._env = Environment(
            loader=FileSystemLoader(str(template_dir)),
            autoescape=True,
            undefined=StrictUndefined,
        )

    def render(self, template_name: str, params: Mapping[str, Any]) -> str:
        template = self._env.get_template(f"{template_name}.xml")
        return template.render(**params)
