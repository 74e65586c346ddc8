"""Generator dispatch on the resolved project type.

- backend: base tree, architecture generator, database driver, root
  manifest, env files.
- frontend: the framework generator straight into the root.
- fullstack: the backend path, then the frontend generator embedded under
  ``src/frontend`` with its own manifest, which is read back from disk and
  folded into the root manifest.

A failing generator aborts the dispatch with GenerationError. Files it
already wrote stay on disk.
"""

from __future__ import annotations

from collections.abc import Awaitable
from dataclasses import dataclass
from pathlib import Path
from typing import TypeVar

from trellis.architectures.registry import ArchitectureRegistry, default_registry
from trellis.errors import GenerationError, TrellisError, UnrecognizedEnumError
from trellis.frontends import get_frontend_generator
from trellis.logging import get_logger
from trellis.models.config import ProjectConfig
from trellis.models.manifest import Manifest
from trellis.scaffold.files import ensure_dir
from trellis.scaffold.manifest import (
    MANIFEST_FILENAME,
    inject_database_dependency,
    merge_manifests,
    read_manifest,
    write_manifest,
)
from trellis.scaffold.rendering import TemplateRenderer
from trellis.validators import frontend_architecture_for

logger = get_logger(__name__)

T = TypeVar("T")

EMBEDDED_FRONTEND_DIR = Path("src") / "frontend"

# Base folders every backend project gets, whatever its architecture.
BASE_PROJECT_DIRS: tuple[str, ...] = (
    "src",
    "public/css",
    "public/js",
    "public/images",
    "tests/unit",
    "tests/integration",
    "tests/e2e",
    "docs",
    "logs",
    "scripts",
)

ENV_FILENAMES: tuple[str, ...] = (".env.example", ".env")


@dataclass
class DispatchResult:
    """What a dispatch produced on disk."""

    root_dir: Path
    manifest: Manifest
    frontend_dir: Path | None = None
    frontend_manifest: Manifest | None = None


def derive_embedded_config(config: ProjectConfig) -> ProjectConfig:
    """Return the config used for a frontend embedded in a fullstack project.

    The frontend layout follows the backend architecture unless
    ``--frontend-architecture`` was given explicitly.
    """
    update: dict[str, object] = {"embed_in_root": True}
    if not config.is_provided("frontend_architecture"):
        update["frontend_architecture"] = frontend_architecture_for(config.architecture)
    return config.model_copy(update=update)


class GeneratorDispatcher:
    """Routes a ProjectConfig to the matching generator combination."""

    def __init__(
        self,
        registry: ArchitectureRegistry | None = None,
        renderer: TemplateRenderer | None = None,
    ) -> None:
        self.renderer = renderer or TemplateRenderer()
        self.registry = registry or default_registry(self.renderer)

    async def dispatch(self, config: ProjectConfig) -> DispatchResult:
        """Generate the project described by *config* into ``config.directory``.

        Raises:
            UnrecognizedEnumError: If the architecture or framework is unknown.
            GenerationError: If a generator fails mid-write.
        """
        logger.debug(
            "dispatch_started",
            project_type=config.project_type,
            directory=str(config.directory),
        )
        if config.project_type == "backend":
            result = await self._dispatch_backend(config)
        elif config.project_type == "frontend":
            result = await self._dispatch_frontend(config)
        else:
            result = await self._dispatch_fullstack(config)
        logger.debug("dispatch_finished", project_type=config.project_type)
        return result

    async def _dispatch_backend(self, config: ProjectConfig) -> DispatchResult:
        root = config.directory
        manifest = await self._generate_backend(config)
        await self._write_manifest(root, manifest)
        await self._write_env_files(root, config)
        return DispatchResult(root_dir=root, manifest=manifest)

    async def _dispatch_frontend(self, config: ProjectConfig) -> DispatchResult:
        root = config.directory
        manifest = await self._generate_frontend(root, config)
        await self._write_manifest(root, manifest)
        return DispatchResult(root_dir=root, manifest=manifest)

    async def _dispatch_fullstack(self, config: ProjectConfig) -> DispatchResult:
        root = config.directory
        backend_manifest = await self._generate_backend(config)
        await self._write_env_files(root, config)

        frontend_dir = await self._guard(
            "embedded frontend directory", ensure_dir(root / EMBEDDED_FRONTEND_DIR)
        )
        embedded = derive_embedded_config(config)
        generated = await self._generate_frontend(frontend_dir, embedded)
        # the embedded frontend keeps its own manifest so it builds on its own
        await self._write_manifest(frontend_dir, generated)
        frontend_manifest = await self._guard("frontend manifest", read_manifest(frontend_dir))

        manifest = merge_manifests(backend_manifest, frontend_manifest)
        await self._write_manifest(root, manifest)
        return DispatchResult(
            root_dir=root,
            manifest=manifest,
            frontend_dir=frontend_dir,
            frontend_manifest=frontend_manifest,
        )

    async def _generate_backend(self, config: ProjectConfig) -> Manifest:
        """Run the backend path and return its manifest (not yet written)."""
        architecture = self.registry.get(config.architecture or "")
        if architecture is None:
            raise UnrecognizedEnumError(
                "architecture", str(config.architecture), self.registry.names()
            )

        root = config.directory
        await self._guard("project structure", self._create_project_structure(root))
        manifest = await self._guard(
            f"{architecture.name} architecture", architecture.generate(root, config)
        )
        return inject_database_dependency(manifest, config.database)

    async def _generate_frontend(self, target_dir: Path, config: ProjectConfig) -> Manifest:
        generator = get_frontend_generator(config.frontend_framework or "", self.renderer)
        return await self._guard(
            f"{generator.name} frontend", generator.generate(target_dir, config)
        )

    async def _create_project_structure(self, root: Path) -> None:
        for directory in BASE_PROJECT_DIRS:
            await ensure_dir(root / directory)

    async def _write_manifest(self, directory: Path, manifest: Manifest) -> None:
        await self._guard(MANIFEST_FILENAME, write_manifest(directory, manifest))

    async def _write_env_files(self, root: Path, config: ProjectConfig) -> None:
        context = {"project_name": config.project_name, "database": config.database}
        for filename in ENV_FILENAMES:
            await self._guard(
                "environment file",
                self.renderer.render_to_file("common/env.j2", root / filename, context),
            )

    async def _guard(self, step: str, operation: Awaitable[T]) -> T:
        """Await *operation*, wrapping unexpected failures in GenerationError."""
        try:
            return await operation
        except TrellisError:
            raise
        except Exception as exc:
            logger.debug("generation_failed", step=step, error=str(exc))
            raise GenerationError(step, str(exc)) from exc
