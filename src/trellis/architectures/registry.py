"""Architecture registry for resolving architecture names to generators.

Lookup is case-insensitive. Aliases (e.g. "hexa") resolve to a canonical
name first, then a single lookup returns the one shared instance, so
"hexa" and "hexagonal" always yield the same object.
"""

from __future__ import annotations

from collections.abc import Iterable

from trellis.architectures.base import ArchitectureInfo, BaseArchitecture
from trellis.scaffold.rendering import TemplateRenderer


class ArchitectureRegistry:
    """Maps canonical architecture names (and their aliases) to generators."""

    def __init__(self) -> None:
        self._architectures: dict[str, BaseArchitecture] = {}
        self._aliases: dict[str, str] = {}

    def register(
        self,
        name: str,
        strategy: BaseArchitecture,
        aliases: Iterable[str] = (),
    ) -> None:
        """Register *strategy* under *name* plus any accepted *aliases*.

        Raises:
            ValueError: If the name or an alias is already taken.
        """
        canonical = name.strip().lower()
        if canonical in self._architectures or canonical in self._aliases:
            raise ValueError(f"Architecture '{canonical}' is already registered.")
        self._architectures[canonical] = strategy
        for alias in aliases:
            key = alias.strip().lower()
            if key in self._architectures or key in self._aliases:
                raise ValueError(f"Architecture alias '{key}' is already registered.")
            self._aliases[key] = canonical

    def canonical_name(self, name: str) -> str | None:
        """Resolve *name* or an alias to its canonical name, or None if unknown."""
        key = name.strip().lower()
        key = self._aliases.get(key, key)
        return key if key in self._architectures else None

    def get(self, name: str) -> BaseArchitecture | None:
        """Return the generator for *name*, or None when it is not recognized."""
        canonical = self.canonical_name(name)
        if canonical is None:
            return None
        return self._architectures[canonical]

    def has(self, name: str) -> bool:
        return self.canonical_name(name) is not None

    def names(self) -> list[str]:
        """Return every accepted name, canonical and alias, sorted."""
        return sorted([*self._architectures, *self._aliases])

    def list(self) -> list[ArchitectureInfo]:
        """Return one descriptor per registered architecture, in registration order."""
        infos: list[ArchitectureInfo] = []
        for canonical, strategy in self._architectures.items():
            aliases = [alias for alias, target in self._aliases.items() if target == canonical]
            infos.append(strategy.info(aliases))
        return infos


def default_registry(renderer: TemplateRenderer | None = None) -> ArchitectureRegistry:
    """Build a registry with the builtin MVC, Clean and Hexagonal generators."""
    from trellis.architectures.clean import CleanArchitecture
    from trellis.architectures.hexagonal import HexagonalArchitecture
    from trellis.architectures.mvc import MVCArchitecture

    renderer = renderer or TemplateRenderer()
    registry = ArchitectureRegistry()
    registry.register("mvc", MVCArchitecture(renderer))
    registry.register("clean", CleanArchitecture(renderer))
    registry.register("hexagonal", HexagonalArchitecture(renderer), aliases=("hexa",))
    return registry
