"""BaseFrontendGenerator ABC shared by the React, Vue and Angular generators.

A frontend generator renders its framework templates, optionally the
Tailwind configuration, creates the folder layout selected by
``frontend_architecture``, and returns its manifest fragment.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from pathlib import Path
from typing import TYPE_CHECKING, Any, ClassVar

from trellis.models.manifest import Manifest
from trellis.scaffold.files import ensure_dir
from trellis.scaffold.rendering import TemplateRenderer

if TYPE_CHECKING:
    from trellis.models.config import ProjectConfig

# Auxiliary folders created under src/ for each frontend layout.
FRONTEND_LAYOUTS: dict[str, tuple[str, ...]] = {
    "default": (),
    "mvc": ("controllers", "views", "models"),
    "clean": ("domain", "application", "ui"),
    "hexa": ("domain", "application", "adapters", "ports"),
}

TAILWIND_DEV_DEPENDENCIES: dict[str, str] = {
    "tailwindcss": "^3.4.0",
    "postcss": "^8.4.35",
    "autoprefixer": "^10.4.16",
}


class BaseFrontendGenerator(ABC):
    """Abstract base class for frontend framework generators."""

    name: ClassVar[str]
    display_name: ClassVar[str]
    supports_tailwind: ClassVar[bool] = True

    def __init__(self, renderer: TemplateRenderer | None = None) -> None:
        self.renderer = renderer or TemplateRenderer()

    async def generate(self, target_dir: Path, config: ProjectConfig) -> Manifest:
        """Generate the frontend into *target_dir* and return its manifest."""
        context = self.template_context(config)
        await ensure_dir(target_dir / "src")
        await self.renderer.render_tree(self.name, target_dir, context)
        if self.uses_tailwind(config):
            await self.renderer.render_tree("tailwind", target_dir, context)
        await self.create_layout(target_dir, config.frontend_architecture)
        return self.build_manifest(config)

    @abstractmethod
    def base_manifest(self, config: ProjectConfig) -> dict[str, Any]:
        """Return the package.json content before CSS tooling is added."""
        ...

    def build_manifest(self, config: ProjectConfig) -> Manifest:
        data = self.base_manifest(config)
        if self.uses_tailwind(config):
            data.setdefault("devDependencies", {}).update(TAILWIND_DEV_DEPENDENCIES)
        return Manifest.model_validate(data)

    def uses_tailwind(self, config: ProjectConfig) -> bool:
        return self.supports_tailwind and config.css_tool == "tailwind"

    async def create_layout(self, target_dir: Path, frontend_architecture: str) -> None:
        for folder in FRONTEND_LAYOUTS.get(frontend_architecture, ()):
            await ensure_dir(target_dir / "src" / folder)

    def template_context(self, config: ProjectConfig) -> dict[str, Any]:
        return {
            "project_name": config.project_name,
            "description": config.description,
            "framework": self.display_name,
            "tailwind": self.uses_tailwind(config),
            "embedded": config.embed_in_root,
            "package_manager": config.package_manager,
        }
