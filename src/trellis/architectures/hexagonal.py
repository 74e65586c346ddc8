"""Hexagonal (ports and adapters) backend architecture."""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

from trellis.architectures.base import BaseArchitecture

if TYPE_CHECKING:
    from trellis.models.config import ProjectConfig


class HexagonalArchitecture(BaseArchitecture):
    """Domain core surrounded by ports, with primary and secondary adapters."""

    name = "hexagonal"
    display_name = "Hexagonal Architecture"
    description = "Ports and adapters around an isolated domain core"
    features = (
        "Domain isolated from the outside world",
        "Ports for every inbound and outbound interaction",
        "Swappable primary and secondary adapters",
        "Tests run against ports, not frameworks",
    )
    keywords = ("hexagonal-architecture", "ports-adapters")
    directories = (
        "src/domain/entities",
        "src/domain/services",
        "src/domain/ports",
        "src/application/use-cases",
        "src/application/ports",
        "src/infrastructure/adapters/primary",
        "src/infrastructure/adapters/secondary",
        "src/infrastructure/config",
        "src/infrastructure/database",
        "src/shared/utils",
        "src/shared/errors",
    )

    async def create_directory_structure(self, target_dir: Path) -> None:
        await self._ensure_dirs(target_dir)

    async def generate_architecture_files(self, target_dir: Path, config: ProjectConfig) -> None:
        await self.renderer.render_tree("hexagonal", target_dir, self.template_context(config))
