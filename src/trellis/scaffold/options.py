"""Option resolution: raw flags + provenance + prompts -> ProjectConfig.

Two modes:

- Direct mode runs when any v2 surface flag (type, frontend, backend,
  database) was given explicitly, or the legacy ``--model`` flag is
  present. Everything comes from the flags, missing fields take fixed
  defaults, and nothing is prompted.
- Interactive mode asks, in order: project type, stack (framework, CSS,
  database), architecture, then project metadata. Explicit flags pre-answer
  their prompt.

Only flags tagged FlagSource.EXPLICIT count as provided, so a value the
command-line layer filled in as a default never forces direct mode.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from pathlib import Path

from pydantic import ValidationError

from trellis.architectures.registry import ArchitectureRegistry, default_registry
from trellis.errors import ConfigValidationError, FieldErrorDetail, UnrecognizedEnumError
from trellis.logging import get_logger
from trellis.models.config import (
    FlagSource,
    ProjectConfig,
    TrellisSettings,
    field_errors_from_validation,
)
from trellis.scaffold.prompts import Choice, Prompter, TextValidator
from trellis.validators import (
    blank_text_error,
    frontend_architecture_for,
    normalize,
    project_name_errors,
    validate_backend_runtime,
    validate_css_tool,
    validate_database,
    validate_frontend_architecture,
    validate_frontend_framework,
    validate_package_manager,
    validate_project_type,
)

logger = get_logger(__name__)

# Flags whose explicit presence selects direct mode.
V2_SURFACE_FLAGS: tuple[str, ...] = ("type", "frontend", "backend", "database")

DEFAULT_ARCHITECTURE = "mvc"

PROJECT_TYPE_CHOICES = [
    Choice("backend", "Backend only (Node.js)"),
    Choice("frontend", "Frontend only (React, Vue, Angular, Tailwind)"),
    Choice("fullstack", "Fullstack (Node + React/Vue/Angular)"),
]
DATABASE_CHOICES = [
    Choice("postgres", "PostgreSQL"),
    Choice("mysql", "MySQL"),
    Choice("mongodb", "MongoDB"),
    Choice("sqlite", "SQLite"),
    Choice("none", "None"),
]
FRONTEND_CHOICES = [
    Choice("react", "React"),
    Choice("vue", "Vue"),
    Choice("angular", "Angular"),
]
CSS_CHOICES = [
    Choice("tailwind", "Tailwind CSS"),
    Choice("none", "None"),
]
FRONTEND_ARCHITECTURE_CHOICES = [
    Choice("default", "Default (no imposed structure)"),
    Choice("mvc", "MVC (views/controllers/models folders)"),
    Choice("clean", "Clean (domain/application/ui folders)"),
    Choice("hexa", "Hexagonal (ports/adapters folders)"),
]
PACKAGE_MANAGER_CHOICES = [
    Choice("npm", "npm"),
    Choice("yarn", "yarn"),
    Choice("pnpm", "pnpm"),
]


@dataclass
class RawOptions:
    """Flag values as received from the command line.

    Values the command-line layer filled in as defaults look the same as
    explicit ones here; the provenance mapping tells them apart.
    """

    model: str | None = None
    type: str | None = None
    frontend: str | None = None
    css: str | None = "none"
    frontend_architecture: str | None = "default"
    backend: str | None = "node"
    database: str | None = "none"
    directory: str = "./"
    name: str | None = None
    description: str | None = None
    author: str | None = None
    package_manager: str | None = None
    yes: bool = False


class OptionResolver:
    """Builds one ProjectConfig per invocation from flags and prompts."""

    def __init__(
        self,
        prompter: Prompter,
        settings: TrellisSettings | None = None,
        registry: ArchitectureRegistry | None = None,
    ) -> None:
        self.prompter = prompter
        self.settings = settings or TrellisSettings()
        self.registry = registry or default_registry()

    @staticmethod
    def is_direct_mode(options: RawOptions, provenance: dict[str, FlagSource]) -> bool:
        """Return True when the flags alone decide the configuration."""
        if any(provenance.get(flag) is FlagSource.EXPLICIT for flag in V2_SURFACE_FLAGS):
            return True
        return bool(options.model)

    def resolve(
        self,
        options: RawOptions,
        provenance: dict[str, FlagSource] | None = None,
    ) -> ProjectConfig:
        """Resolve *options* into a validated ProjectConfig.

        Raises:
            UnrecognizedEnumError: If an enumerated value is outside its set.
            ConfigValidationError: If any field breaks its constraints; lists
                every violated field.
        """
        provenance = dict(provenance or {})
        direct = self.is_direct_mode(options, provenance)
        if direct:
            raw, errors = self._collect_direct(options)
        else:
            raw, errors = self._collect_interactive(options, provenance)

        raw["directory"] = Path(options.directory or ".").expanduser().resolve()
        raw["flag_provenance"] = provenance
        config = self._build(raw, errors)
        logger.debug(
            "options_resolved",
            mode="direct" if direct else "interactive",
            project_type=config.project_type,
            architecture=config.architecture,
            frontend=config.frontend_framework,
            database=config.database,
        )
        return config

    # -- Direct mode ---------------------------------------------------------

    def _collect_direct(self, options: RawOptions) -> tuple[dict[str, object], list[FieldErrorDetail]]:
        errors: list[FieldErrorDetail] = []
        project_type = validate_project_type(options.type or "backend")

        architecture = None
        if project_type != "frontend":
            architecture = self._canonical_architecture(options.model or DEFAULT_ARCHITECTURE)

        frontend = None
        if project_type != "backend":
            if options.frontend:
                frontend = validate_frontend_framework(options.frontend)
            else:
                errors.append(
                    FieldErrorDetail(
                        "frontend_framework",
                        f"--frontend is required for {project_type} projects",
                    )
                )
        elif options.frontend:
            logger.debug("frontend_ignored_for_backend", frontend=options.frontend)

        raw: dict[str, object] = {
            "project_type": project_type,
            "architecture": architecture,
            "frontend_framework": frontend,
            "css_tool": validate_css_tool(options.css or "none"),
            "database": validate_database(options.database or "none"),
            "backend_runtime": validate_backend_runtime(options.backend or "node"),
            "frontend_architecture": validate_frontend_architecture(
                options.frontend_architecture or "default"
            ),
        }
        raw.update(self._default_metadata(options))
        return raw, errors

    def _default_metadata(self, options: RawOptions) -> dict[str, object]:
        """Project metadata from flags, falling back to settings.

        A flag given as an empty string is kept so validation rejects it.
        """
        def pick(value: str | None, fallback: str) -> str:
            return (fallback if value is None else value).strip()

        return {
            "project_name": pick(options.name, self.settings.project_name),
            "description": pick(options.description, self.settings.description),
            "author": pick(options.author, self.settings.author),
            "package_manager": validate_package_manager(
                pick(options.package_manager, self.settings.package_manager)
            ),
        }

    # -- Interactive mode ----------------------------------------------------

    def _collect_interactive(
        self,
        options: RawOptions,
        provenance: dict[str, FlagSource],
    ) -> tuple[dict[str, object], list[FieldErrorDetail]]:
        def explicit(flag: str) -> str | None:
            if provenance.get(flag) is FlagSource.EXPLICIT:
                return getattr(options, flag)
            return None

        def ask(flag: str, name: str, message: str, choices: list[Choice], default: str) -> str:
            preset = explicit(flag)
            if preset is not None:
                return normalize(preset)
            return self.prompter.select(name, message, choices, default=default)

        project_type = validate_project_type(
            self.prompter.select(
                "project_type", "What kind of project do you want to create?", PROJECT_TYPE_CHOICES
            )
        )

        frontend = None
        css_tool = validate_css_tool(options.css or "none")
        database = "none"
        if project_type in ("frontend", "fullstack"):
            frontend = validate_frontend_framework(
                ask("frontend", "frontend_framework", "Pick a frontend framework:", FRONTEND_CHOICES, "react")
            )
            css_tool = validate_css_tool(
                ask("css", "css_tool", "Pick a CSS tool:", CSS_CHOICES, "none")
            )
        if project_type in ("backend", "fullstack"):
            database = validate_database(
                ask("database", "database", "Pick a database:", DATABASE_CHOICES, "none")
            )

        if project_type == "frontend":
            architecture = None
            frontend_architecture = validate_frontend_architecture(
                ask(
                    "frontend_architecture",
                    "frontend_architecture",
                    "Frontend architecture?",
                    FRONTEND_ARCHITECTURE_CHOICES,
                    "default",
                )
            )
        else:
            answer = ask(
                "model",
                "architecture",
                "Which architecture do you want to use?",
                self._architecture_choices(),
                DEFAULT_ARCHITECTURE,
            )
            architecture = self._canonical_architecture(answer)
            preset = explicit("frontend_architecture")
            if preset is not None:
                frontend_architecture = validate_frontend_architecture(preset)
            elif project_type == "fullstack":
                # one architecture drives both layers
                frontend_architecture = frontend_architecture_for(architecture)
            else:
                frontend_architecture = "default"

        raw: dict[str, object] = {
            "project_type": project_type,
            "architecture": architecture,
            "frontend_framework": frontend,
            "css_tool": css_tool,
            "database": database,
            "backend_runtime": validate_backend_runtime(options.backend or "node"),
            "frontend_architecture": frontend_architecture,
        }
        if options.yes:
            raw.update(self._default_metadata(options))
        else:
            raw.update(self._prompt_metadata(explicit))
        return raw, []

    def _prompt_metadata(self, explicit: Callable[[str], str | None]) -> dict[str, object]:
        def text(flag: str, message: str, default: str, validate: TextValidator | None = None) -> str:
            preset = explicit(flag)
            if preset is not None:
                return preset.strip()
            return self.prompter.text(flag, message, default=default, validate=validate)

        project_name = text(
            "name",
            "Project name:",
            self.settings.project_name,
            validate=lambda value: "; ".join(project_name_errors(value)) or None,
        )
        description = text(
            "description",
            "Project description:",
            self.settings.description,
            validate=lambda value: blank_text_error("description", value),
        )
        author = text(
            "author",
            "Author:",
            self.settings.author,
            validate=lambda value: blank_text_error("author", value),
        )

        package_manager = explicit("package_manager")
        if package_manager is None:
            package_manager = self.prompter.select(
                "package_manager",
                "Package manager:",
                PACKAGE_MANAGER_CHOICES,
                default=self.settings.package_manager,
            )
        return {
            "project_name": project_name,
            "description": description,
            "author": author,
            "package_manager": validate_package_manager(package_manager),
        }

    # -- Shared --------------------------------------------------------------

    def _architecture_choices(self) -> list[Choice]:
        return [
            Choice(info.name, f"{info.display_name} - {info.description}")
            for info in self.registry.list()
        ]

    def _canonical_architecture(self, name: str) -> str:
        canonical = self.registry.canonical_name(name)
        if canonical is None:
            raise UnrecognizedEnumError("architecture", name, self.registry.names())
        return canonical

    def _build(self, raw: dict[str, object], errors: list[FieldErrorDetail]) -> ProjectConfig:
        """Validate *raw*, reporting field errors together with *errors*."""
        try:
            config = ProjectConfig.model_validate(raw)
        except ValidationError as exc:
            found = field_errors_from_validation(exc)
            if errors:
                # the shape check repeats what collection already reported
                found = [err for err in found if err.field != "config"]
            raise ConfigValidationError([*errors, *found]) from None
        if errors:
            raise ConfigValidationError(errors)
        return config
