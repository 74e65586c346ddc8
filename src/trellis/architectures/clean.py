"""Clean Architecture backend layout.

Business rules live in ``domain`` and ``application``; Express, the
database and other frameworks are pushed out to ``infrastructure`` and
``presentation`` so the inner layers never import them.
"""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

from trellis.architectures.base import BaseArchitecture

if TYPE_CHECKING:
    from trellis.models.config import ProjectConfig


class CleanArchitecture(BaseArchitecture):
    """Layered architecture: entities, use cases, interfaces, frameworks."""

    name = "clean"
    display_name = "Clean Architecture"
    description = "Business-centred layers with dependencies pointing inwards"
    features = (
        "Layers: Entities, Use Cases, Interfaces, Frameworks",
        "Framework independence",
        "High testability",
        "Dependency inversion",
    )
    keywords = ("clean-architecture", "ddd")
    directories = (
        "src/domain/entities",
        "src/domain/value-objects",
        "src/domain/repositories",
        "src/application/use-cases",
        "src/application/services",
        "src/application/dto",
        "src/infrastructure/database",
        "src/infrastructure/repositories",
        "src/infrastructure/http",
        "src/infrastructure/config",
        "src/presentation/controllers",
        "src/presentation/middleware",
        "src/presentation/routes",
        "src/shared/utils",
        "src/shared/errors",
    )

    async def create_directory_structure(self, target_dir: Path) -> None:
        await self._ensure_dirs(target_dir)

    async def generate_architecture_files(self, target_dir: Path, config: ProjectConfig) -> None:
        await self.renderer.render_tree("clean", target_dir, self.template_context(config))
