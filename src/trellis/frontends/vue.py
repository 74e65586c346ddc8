"""Vue 3 + Vite frontend generator."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from trellis.frontends.base import BaseFrontendGenerator

if TYPE_CHECKING:
    from trellis.models.config import ProjectConfig


class VueGenerator(BaseFrontendGenerator):
    name = "vue"
    display_name = "Vue"

    def base_manifest(self, config: ProjectConfig) -> dict[str, Any]:
        return {
            "name": f"{config.project_name}-vue",
            "private": True,
            "version": "0.1.0",
            "type": "module",
            "scripts": {
                "dev": "vite",
                "build": "vite build",
                "preview": "vite preview",
            },
            "dependencies": {
                "vue": "^3.4.0",
            },
            "devDependencies": {
                "vite": "^5.0.0",
                "@vitejs/plugin-vue": "^5.0.0",
            },
        }
