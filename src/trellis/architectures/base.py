"""BaseArchitecture ABC shared by every backend architecture generator.

An architecture generator creates its folder layout, renders its
boilerplate templates, and returns the manifest fragment describing its
dependencies and scripts. The dispatcher writes the manifest to disk.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from pathlib import Path
from typing import TYPE_CHECKING, Any, ClassVar

from trellis.models.manifest import Manifest
from trellis.scaffold.files import ensure_dir
from trellis.scaffold.rendering import TemplateRenderer

if TYPE_CHECKING:
    from trellis.models.config import ProjectConfig

# Every backend architecture ships the same Express stack.
BASE_DEPENDENCIES: dict[str, str] = {
    "express": "^4.18.2",
    "cors": "^2.8.5",
    "helmet": "^7.1.0",
    "morgan": "^1.10.0",
    "dotenv": "^16.3.1",
}

BASE_DEV_DEPENDENCIES: dict[str, str] = {
    "nodemon": "^3.0.2",
    "jest": "^29.7.0",
}

BASE_SCRIPTS: dict[str, str] = {
    "start": "node src/server.js",
    "dev": "nodemon src/server.js",
    "test": "jest",
}


@dataclass
class ArchitectureInfo:
    """Public descriptor of a registered architecture."""

    name: str
    display_name: str
    description: str
    features: list[str] = field(default_factory=list)
    aliases: list[str] = field(default_factory=list)


class BaseArchitecture(ABC):
    """Abstract base class for backend architecture generators.

    Subclasses declare their descriptor attributes and implement
    create_directory_structure() and generate_architecture_files().
    generate() drives the whole sequence and returns the manifest.
    """

    name: ClassVar[str]
    display_name: ClassVar[str]
    description: ClassVar[str]
    features: ClassVar[tuple[str, ...]] = ()
    keywords: ClassVar[tuple[str, ...]] = ()
    directories: ClassVar[tuple[str, ...]] = ()

    def __init__(self, renderer: TemplateRenderer | None = None) -> None:
        self.renderer = renderer or TemplateRenderer()

    async def generate(self, target_dir: Path, config: ProjectConfig) -> Manifest:
        """Generate the architecture into *target_dir* and return its manifest."""
        await self.create_directory_structure(target_dir)
        manifest = await self.generate_base_files(target_dir, config)
        await self.generate_architecture_files(target_dir, config)
        return manifest

    @abstractmethod
    async def create_directory_structure(self, target_dir: Path) -> None:
        """Create the architecture's folder layout under *target_dir*."""
        ...

    @abstractmethod
    async def generate_architecture_files(self, target_dir: Path, config: ProjectConfig) -> None:
        """Write the architecture-specific source files."""
        ...

    async def generate_base_files(self, target_dir: Path, config: ProjectConfig) -> Manifest:
        """Write README and .gitignore, and build the manifest fragment."""
        context = self.template_context(config)
        await self.renderer.render_to_file("common/README.md.j2", target_dir / "README.md", context)
        await self.renderer.render_to_file("common/gitignore.j2", target_dir / ".gitignore", context)
        return self.build_manifest(config)

    def build_manifest(self, config: ProjectConfig) -> Manifest:
        return Manifest.model_validate(
            {
                "name": config.project_name,
                "version": "1.0.0",
                "description": config.description,
                "main": "src/server.js",
                "keywords": ["nodejs", *self.keywords, "api"],
                "author": config.author,
                "license": "MIT",
                "engines": {"node": ">=18.0.0"},
                "scripts": dict(BASE_SCRIPTS),
                "dependencies": dict(BASE_DEPENDENCIES),
                "devDependencies": dict(BASE_DEV_DEPENDENCIES),
            }
        )

    def template_context(self, config: ProjectConfig) -> dict[str, Any]:
        return {
            "project_name": config.project_name,
            "description": config.description,
            "author": config.author,
            "package_manager": config.package_manager,
            "database": config.database,
            "architecture": self.name,
            "architecture_display_name": self.display_name,
            "layout": list(self.directories),
        }

    async def _ensure_dirs(self, target_dir: Path) -> None:
        for directory in self.directories:
            await ensure_dir(target_dir / directory)

    def info(self, aliases: list[str] | None = None) -> ArchitectureInfo:
        return ArchitectureInfo(
            name=self.name,
            display_name=self.display_name,
            description=self.description,
            features=list(self.features),
            aliases=list(aliases or []),
        )
