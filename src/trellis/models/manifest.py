"""package.json manifest model.

Only dependencies, devDependencies and scripts are modeled explicitly.
Every other key (name, version, main, engines, ...) is kept as an extra
field so a manifest read from disk is written back unchanged.
"""

from __future__ import annotations

import json
from typing import Any

from pydantic import BaseModel, Field


class Manifest(BaseModel):
    """Dependency manifest produced by a generator."""

    model_config = {"extra": "allow", "populate_by_name": True}

    scripts: dict[str, str] = Field(default_factory=dict)
    dependencies: dict[str, str] = Field(default_factory=dict)
    dev_dependencies: dict[str, str] = Field(default_factory=dict, alias="devDependencies")

    def to_dict(self) -> dict[str, Any]:
        """Return the manifest as a package.json-shaped dict.

        Metadata keys come first, followed by scripts, dependencies and
        devDependencies.
        """
        data: dict[str, Any] = dict(self.model_extra or {})
        data["scripts"] = dict(self.scripts)
        data["dependencies"] = dict(self.dependencies)
        data["devDependencies"] = dict(self.dev_dependencies)
        return data

    def to_json(self) -> str:
        return json.dumps(self.to_dict(), indent=2, ensure_ascii=False) + "\n"

    @classmethod
    def from_json(cls, text: str) -> Manifest:
        return cls.model_validate(json.loads(text))
