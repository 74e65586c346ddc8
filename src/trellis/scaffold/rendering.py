"""Jinja2 rendering of the boilerplate templates shipped with Trellis.

Templates live under ``trellis/templates/``, one subdirectory per
architecture or frontend framework, and mirror the layout of the files
they produce. ``gitignore.j2`` renders to ``.gitignore`` because dotfiles
are awkward to ship as package data.
"""

from __future__ import annotations

import re
from pathlib import Path
from typing import Any

from jinja2 import Environment, FileSystemLoader, StrictUndefined

from trellis.scaffold.files import write_text

_DEFAULT_TEMPLATE_DIR = Path(__file__).resolve().parent.parent / "templates"

# Template file names that render to dotfiles
_DOTFILE_NAMES: dict[str, str] = {
    "gitignore": ".gitignore",
}


class TemplateRenderer:
    """Renders the bundled Jinja2 templates with project context."""

    def __init__(self, template_dir: str | Path | None = None) -> None:
        if template_dir is None:
            template_dir = _DEFAULT_TEMPLATE_DIR
        self.template_dir = Path(template_dir)
        self.env = Environment(
            loader=FileSystemLoader(str(self.template_dir)),
            autoescape=False,
            keep_trailing_newline=True,
            trim_blocks=True,
            lstrip_blocks=True,
            undefined=StrictUndefined,
        )
        self.env.filters["pascal_case"] = pascal_case
        self.env.filters["camel_case"] = camel_case

    def render(self, template_path: str, context: dict[str, Any]) -> str:
        """Render a single template (path relative to the template root)."""
        template = self.env.get_template(template_path)
        return template.render(**context)

    async def render_to_file(
        self,
        template_path: str,
        output_path: Path,
        context: dict[str, Any],
    ) -> Path:
        """Render a template and write it to *output_path*."""
        content = self.render(template_path, context)
        return await write_text(output_path, content)

    async def render_tree(
        self,
        template_prefix: str,
        output_dir: Path,
        context: dict[str, Any],
    ) -> list[Path]:
        """Render every ``*.j2`` file under *template_prefix* into *output_dir*.

        The directory structure is preserved: ``mvc/src/app.js.j2`` rendered
        with prefix ``mvc`` into ``/tmp/app`` writes ``/tmp/app/src/app.js``.

        Returns:
            List of written file paths, in sorted template order.
        """
        written: list[Path] = []
        for template_key in self.list_templates(template_prefix):
            rel = Path(template_key).relative_to(template_prefix)
            output_name = rel.name[: -len(".j2")]
            output_name = _DOTFILE_NAMES.get(output_name, output_name)
            output_file = output_dir / rel.parent / output_name
            written.append(await self.render_to_file(template_key, output_file, context))
        return written

    def list_templates(self, prefix: str = "") -> list[str]:
        """Return sorted ``.j2`` template paths under *prefix*, relative to the root."""
        search_dir = self.template_dir / prefix if prefix else self.template_dir
        if not search_dir.is_dir():
            return []
        return sorted(
            p.relative_to(self.template_dir).as_posix()
            for p in search_dir.rglob("*.j2")
        )


def pascal_case(value: str) -> str:
    """Convert ``some-thing`` or ``some_thing`` to ``SomeThing``."""
    # str() makes an undefined template variable raise UndefinedError
    parts = re.split(r"[-_\s]+", str(value))
    return "".join(word.capitalize() for word in parts if word)


def camel_case(value: str) -> str:
    """Convert ``some-thing`` or ``some_thing`` to ``someThing``."""
    pascal = pascal_case(value)
    if pascal:
        return pascal[0].lower() + pascal[1:]
    return ""
