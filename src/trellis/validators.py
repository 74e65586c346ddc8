"""Pure validators for enumerated options and the project name.

Each ``validate_*`` function trims and lower-cases its input, checks it
against a fixed allowed set, and returns the canonical value. Values
outside the set raise UnrecognizedEnumError. Architecture names are not
handled here: they resolve through the architecture registry so aliases
stay in one place.
"""

from __future__ import annotations

import re

from trellis.errors import UnrecognizedEnumError

PROJECT_TYPES: tuple[str, ...] = ("backend", "frontend", "fullstack")
DATABASES: tuple[str, ...] = ("postgres", "mysql", "mongodb", "sqlite", "none")
FRONTEND_FRAMEWORKS: tuple[str, ...] = ("react", "vue", "angular")
CSS_TOOLS: tuple[str, ...] = ("tailwind", "none")
FRONTEND_ARCHITECTURES: tuple[str, ...] = ("default", "mvc", "clean", "hexa")
PACKAGE_MANAGERS: tuple[str, ...] = ("npm", "yarn", "pnpm")
BACKEND_RUNTIMES: tuple[str, ...] = ("node",)

# Accepted spellings that map onto a canonical frontend layout name.
_FRONTEND_ARCHITECTURE_ALIASES: dict[str, str] = {"hexagonal": "hexa"}

PROJECT_NAME_PATTERN = re.compile(r"[a-z0-9-]+")
PROJECT_NAME_MIN_LENGTH = 3
PROJECT_NAME_MAX_LENGTH = 50
RESERVED_PROJECT_NAMES: frozenset[str] = frozenset(
    {"node", "npm", "yarn", "pnpm", "package", "module", "test", "src", "dist", "build"}
)


def normalize(value: str) -> str:
    """Trim and lower-case a raw option value."""
    return value.strip().lower()


def _check(field: str, value: str, allowed: tuple[str, ...]) -> str:
    normalized = normalize(value)
    if normalized not in allowed:
        raise UnrecognizedEnumError(field, value, allowed)
    return normalized


def validate_project_type(value: str) -> str:
    return _check("project type", value, PROJECT_TYPES)


def validate_database(value: str) -> str:
    return _check("database", value, DATABASES)


def validate_frontend_framework(value: str) -> str:
    return _check("frontend framework", value, FRONTEND_FRAMEWORKS)


def validate_css_tool(value: str) -> str:
    return _check("CSS tool", value, CSS_TOOLS)


def validate_package_manager(value: str) -> str:
    return _check("package manager", value, PACKAGE_MANAGERS)


def validate_backend_runtime(value: str) -> str:
    return _check("backend runtime", value, BACKEND_RUNTIMES)


def validate_frontend_architecture(value: str) -> str:
    normalized = normalize(value)
    normalized = _FRONTEND_ARCHITECTURE_ALIASES.get(normalized, normalized)
    return _check("frontend architecture", normalized, FRONTEND_ARCHITECTURES)


def frontend_architecture_for(architecture: str | None) -> str:
    """Map a backend architecture name onto the matching frontend layout.

    Used by fullstack projects so both layers share one folder story.
    """
    if architecture is None:
        return "default"
    normalized = normalize(architecture)
    normalized = _FRONTEND_ARCHITECTURE_ALIASES.get(normalized, normalized)
    return normalized if normalized in FRONTEND_ARCHITECTURES else "default"


def project_name_errors(name: str) -> list[str]:
    """Return every rule a project name breaks (empty list when valid).

    A valid name is 3-50 characters of lowercase letters, digits and
    hyphens, and is not a reserved word.
    """
    if not name:
        return ["project name is required"]

    errors: list[str] = []
    if not PROJECT_NAME_PATTERN.fullmatch(name):
        errors.append("must contain only lowercase letters, digits and hyphens")
    if len(name) < PROJECT_NAME_MIN_LENGTH:
        errors.append(f"must be at least {PROJECT_NAME_MIN_LENGTH} characters long")
    if len(name) > PROJECT_NAME_MAX_LENGTH:
        errors.append(f"must be at most {PROJECT_NAME_MAX_LENGTH} characters long")
    if name in RESERVED_PROJECT_NAMES:
        errors.append(f"'{name}' is a reserved name")
    return errors


def blank_text_error(label: str, value: str) -> str | None:
    """Return an error message when *value* is empty after trimming."""
    if not value.strip():
        return f"{label} must not be empty"
    return None
