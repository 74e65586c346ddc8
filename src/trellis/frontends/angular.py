"""Angular frontend generator.

Produces a minimal skeleton only; the project is expected to be
initialized further with the Angular CLI, so no Tailwind wiring is added.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from trellis.frontends.base import BaseFrontendGenerator

if TYPE_CHECKING:
    from trellis.models.config import ProjectConfig


class AngularGenerator(BaseFrontendGenerator):
    name = "angular"
    display_name = "Angular"
    supports_tailwind = False

    def base_manifest(self, config: ProjectConfig) -> dict[str, Any]:
        return {
            "name": f"{config.project_name}-angular",
            "private": True,
            "version": "0.1.0",
            "scripts": {
                "start": 'echo "Set up the Angular CLI (ng) to start this app"',
            },
            "dependencies": {},
            "devDependencies": {},
        }
