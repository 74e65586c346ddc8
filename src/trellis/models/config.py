"""Configuration models for Trellis.

ProjectConfig is the single resolved configuration passed through the
generation pipeline. TrellisSettings captures user-level defaults loaded
from trellis.yaml.
"""

from __future__ import annotations

import os
from enum import Enum
from pathlib import Path
from typing import Literal

from pydantic import (
    BaseModel,
    Field,
    ValidationError,
    ValidationInfo,
    field_validator,
    model_validator,
)

from trellis.errors import ConfigValidationError, FieldErrorDetail
from trellis.validators import blank_text_error, project_name_errors

DEFAULT_PROJECT_NAME = "my-trellis-app"
DEFAULT_DESCRIPTION = "Node.js project generated with Trellis"
DEFAULT_AUTHOR = "Trellis Developer"
SETTINGS_FILENAME = "trellis.yaml"
SETTINGS_ENV_VAR = "TRELLIS_CONFIG"


class FlagSource(str, Enum):
    """Where a flag's value came from.

    Only EXPLICIT flags count as provided by the caller. DEFAULT marks a
    value filled in by the command-line layer, ABSENT a flag with no value.
    """

    EXPLICIT = "explicit"
    DEFAULT = "default"
    ABSENT = "absent"


class ProjectConfig(BaseModel):
    """Resolved configuration for one generation run.

    Built once by the option resolver and frozen afterwards. The fullstack
    dispatch derives an embedded copy with ``model_copy``.
    """

    model_config = {"extra": "forbid", "frozen": True}

    project_name: str
    description: str = Field(default=DEFAULT_DESCRIPTION, max_length=500)
    author: str = DEFAULT_AUTHOR
    package_manager: Literal["npm", "yarn", "pnpm"] = "npm"
    project_type: Literal["backend", "frontend", "fullstack"] = "backend"
    architecture: Literal["mvc", "clean", "hexagonal"] | None = None
    frontend_framework: Literal["react", "vue", "angular"] | None = None
    css_tool: Literal["tailwind", "none"] = "none"
    database: Literal["postgres", "mysql", "mongodb", "sqlite", "none"] = "none"
    backend_runtime: Literal["node"] = "node"
    frontend_architecture: Literal["default", "mvc", "clean", "hexa"] = "default"
    directory: Path = Field(default_factory=Path.cwd)
    embed_in_root: bool = False
    flag_provenance: dict[str, FlagSource] = Field(default_factory=dict)

    @field_validator("project_name")
    @classmethod
    def _check_project_name(cls, value: str) -> str:
        errors = project_name_errors(value)
        if errors:
            raise ValueError("; ".join(errors))
        return value

    @field_validator("description", "author")
    @classmethod
    def _check_not_blank(cls, value: str, info: ValidationInfo) -> str:
        value = value.strip()
        error = blank_text_error(info.field_name, value)
        if error:
            raise ValueError(error)
        return value

    @model_validator(mode="after")
    def _check_project_shape(self) -> ProjectConfig:
        if self.project_type == "backend" and self.frontend_framework is not None:
            raise ValueError("backend projects do not take a frontend framework")
        if self.project_type != "backend" and self.frontend_framework is None:
            raise ValueError(f"{self.project_type} projects require a frontend framework")
        if self.project_type != "frontend" and self.architecture is None:
            raise ValueError(f"{self.project_type} projects require an architecture")
        return self

    def is_provided(self, flag: str) -> bool:
        """Return True only if *flag* was explicitly given by the caller."""
        return self.flag_provenance.get(flag, FlagSource.ABSENT) is FlagSource.EXPLICIT


class TrellisSettings(BaseModel):
    """User-level defaults loaded from trellis.yaml."""

    model_config = {"extra": "forbid"}

    project_name: str = DEFAULT_PROJECT_NAME
    description: str = DEFAULT_DESCRIPTION
    author: str = DEFAULT_AUTHOR
    package_manager: Literal["npm", "yarn", "pnpm"] = "npm"
    install: bool = True


def field_errors_from_validation(exc: ValidationError) -> list[FieldErrorDetail]:
    """Convert a pydantic ValidationError into one detail per violation."""
    details: list[FieldErrorDetail] = []
    for err in exc.errors():
        loc = err.get("loc", ())
        field = ".".join(str(part) for part in loc) if loc else "config"
        message = err.get("msg", "Validation error")
        # pydantic prefixes custom validator messages
        message = message.removeprefix("Value error, ")
        details.append(FieldErrorDetail(field=field, message=message, value=err.get("input")))
    return details


def find_settings_file(explicit: Path | None = None) -> Path | None:
    """Locate the settings file.

    Checks, in order: the explicit path, the TRELLIS_CONFIG environment
    variable, then trellis.yaml in the current directory.
    """
    if explicit is not None:
        return explicit
    env_path = os.environ.get(SETTINGS_ENV_VAR)
    if env_path:
        return Path(env_path)
    candidate = Path.cwd() / SETTINGS_FILENAME
    if candidate.exists():
        return candidate
    return None


def load_settings(path: Path | None = None) -> TrellisSettings:
    """Load TrellisSettings from YAML. Returns defaults if no file is found.

    Raises:
        ConfigValidationError: If the file is missing when given explicitly,
            or its content does not match the settings schema.
    """
    settings_path = find_settings_file(path)
    if settings_path is None:
        return TrellisSettings()
    if not settings_path.exists():
        raise ConfigValidationError(
            [FieldErrorDetail("config", f"settings file not found: {settings_path}")]
        )
    import yaml

    try:
        raw = yaml.safe_load(settings_path.read_text(encoding="utf-8"))
    except yaml.YAMLError as exc:
        raise ConfigValidationError(
            [FieldErrorDetail("config", f"invalid YAML in {settings_path}: {exc}")]
        ) from exc
    if raw is None:
        return TrellisSettings()
    try:
        return TrellisSettings.model_validate(raw)
    except ValidationError as exc:
        raise ConfigValidationError(field_errors_from_validation(exc)) from None
