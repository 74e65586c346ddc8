"""Manifest merging, database driver injection, and package.json I/O."""

from __future__ import annotations

from pathlib import Path

from trellis.logging import get_logger
from trellis.models.manifest import Manifest
from trellis.scaffold.files import read_text, write_text

logger = get_logger(__name__)

MANIFEST_FILENAME = "package.json"
FRONTEND_SCRIPT_NAMESPACE = "frontend"

# Node driver package for each database kind.
DATABASE_DRIVERS: dict[str, tuple[str, str]] = {
    "postgres": ("pg", "^8.11.0"),
    "mysql": ("mysql2", "^3.9.0"),
    "mongodb": ("mongodb", "^6.3.0"),
    "sqlite": ("sqlite3", "^5.1.7"),
}


def merge_manifests(
    root: Manifest,
    nested: Manifest,
    namespace: str = FRONTEND_SCRIPT_NAMESPACE,
) -> Manifest:
    """Fold a nested (embedded frontend) manifest into the root manifest.

    Dependencies and devDependencies merge key-wise with the nested value
    winning on collision. Nested scripts are renamed to ``<namespace>:<name>``
    so the root's own scripts are never shadowed. Root metadata is kept.

    Args:
        root: The project's root manifest.
        nested: The embedded manifest to fold in.
        namespace: Prefix applied to every nested script name.

    Returns:
        A new merged Manifest; neither input is modified.
    """
    for section, root_deps, nested_deps in (
        ("dependencies", root.dependencies, nested.dependencies),
        ("devDependencies", root.dev_dependencies, nested.dev_dependencies),
    ):
        for name in sorted(root_deps.keys() & nested_deps.keys()):
            if root_deps[name] != nested_deps[name]:
                logger.debug(
                    "dependency_collision",
                    section=section,
                    package=name,
                    root_version=root_deps[name],
                    nested_version=nested_deps[name],
                )

    scripts = dict(root.scripts)
    for name, command in nested.scripts.items():
        scripts[f"{namespace}:{name}"] = command

    merged = root.model_copy(
        update={
            "dependencies": {**root.dependencies, **nested.dependencies},
            "dev_dependencies": {**root.dev_dependencies, **nested.dev_dependencies},
            "scripts": scripts,
        },
        deep=True,
    )
    logger.debug(
        "manifest_merged",
        dependencies=len(merged.dependencies),
        dev_dependencies=len(merged.dev_dependencies),
        scripts=len(merged.scripts),
    )
    return merged


def inject_database_dependency(manifest: Manifest, database: str) -> Manifest:
    """Return *manifest* with the driver for *database* added.

    No-op (returns the manifest unchanged) for ``none``.
    """
    driver = DATABASE_DRIVERS.get(database)
    if driver is None:
        return manifest
    package, version = driver
    return manifest.model_copy(
        update={"dependencies": {**manifest.dependencies, package: version}},
        deep=True,
    )


async def read_manifest(directory: Path) -> Manifest:
    return Manifest.from_json(await read_text(directory / MANIFEST_FILENAME))


async def write_manifest(directory: Path, manifest: Manifest) -> Path:
    return await write_text(directory / MANIFEST_FILENAME, manifest.to_json())
