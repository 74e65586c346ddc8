"""MVC (Model-View-Controller) backend architecture."""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

from trellis.architectures.base import BaseArchitecture

if TYPE_CHECKING:
    from trellis.models.config import ProjectConfig


class MVCArchitecture(BaseArchitecture):
    """Classic Express layout split into models, controllers and routes."""

    name = "mvc"
    display_name = "MVC (Model-View-Controller)"
    description = "Classic layout with a clear split of responsibilities"
    features = (
        "Models/Views/Controllers separation",
        "Flat, predictable folder structure",
        "Express.js routing",
        "Centralized error handling",
    )
    keywords = ("express", "mvc")
    directories = (
        "src/models",
        "src/controllers",
        "src/routes",
        "src/middleware",
        "src/config",
        "src/utils",
    )

    async def create_directory_structure(self, target_dir: Path) -> None:
        await self._ensure_dirs(target_dir)

    async def generate_architecture_files(self, target_dir: Path, config: ProjectConfig) -> None:
        await self.renderer.render_tree("mvc", target_dir, self.template_context(config))
