"""React + Vite frontend generator."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from trellis.frontends.base import BaseFrontendGenerator

if TYPE_CHECKING:
    from trellis.models.config import ProjectConfig


class ReactGenerator(BaseFrontendGenerator):
    name = "react"
    display_name = "React"

    def base_manifest(self, config: ProjectConfig) -> dict[str, Any]:
        return {
            "name": f"{config.project_name}-react",
            "private": True,
            "version": "0.1.0",
            "type": "module",
            "scripts": {
                "dev": "vite",
                "build": "vite build",
                "preview": "vite preview",
            },
            "dependencies": {
                "react": "^18.2.0",
                "react-dom": "^18.2.0",
            },
            "devDependencies": {
                "vite": "^5.0.0",
                "@vitejs/plugin-react": "^4.2.0",
            },
        }
