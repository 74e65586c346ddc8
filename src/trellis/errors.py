"""Error types raised along the resolve -> validate -> dispatch -> install pipeline.

Resolution and enum errors are raised before anything touches the
filesystem. Directory and generation errors abort the run. InstallError is
the only recoverable kind: finalization downgrades it to a warning.
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass


class TrellisError(Exception):
    """Base class for every error the CLI reports to the user."""


@dataclass
class FieldErrorDetail:
    """A single violated ProjectConfig field.

    Attributes:
        field: The field name (e.g. 'project_name').
        message: Human-readable description of the violation.
        value: The rejected input value, if available.
    """

    field: str
    message: str
    value: object = None

    def __str__(self) -> str:
        return f"{self.field}: {self.message}"


class ConfigValidationError(TrellisError):
    """Raised when one or more ProjectConfig fields violate their constraints.

    Carries every violated field, not just the first one found.
    """

    def __init__(self, errors: list[FieldErrorDetail]) -> None:
        self.errors = errors
        lines = "\n".join(f"  - {err}" for err in errors)
        super().__init__(f"Invalid project configuration:\n{lines}")

    @property
    def fields(self) -> list[str]:
        return [err.field for err in self.errors]


class UnrecognizedEnumError(TrellisError, ValueError):
    """Raised when an enumerated option has a value outside its allowed set."""

    def __init__(self, field: str, value: str, allowed: Iterable[str]) -> None:
        self.field = field
        self.value = value
        self.allowed = list(allowed)
        super().__init__(
            f"Unrecognized {field} '{value}'. "
            f"Use one of: {', '.join(self.allowed)}"
        )


class DirectoryError(TrellisError):
    """Raised when the target directory is unsafe to write into."""


class GenerationError(TrellisError):
    """Raised when a generator fails mid-write.

    Files already written by the failing generator are left on disk.
    """

    def __init__(self, generator: str, reason: str) -> None:
        self.generator = generator
        self.reason = reason
        super().__init__(f"Generation failed in {generator}: {reason}")


class InstallError(TrellisError):
    """Raised when the dependency install step fails."""

    def __init__(self, package_manager: str, directory: str, reason: str) -> None:
        self.package_manager = package_manager
        self.directory = directory
        self.reason = reason
        super().__init__(
            f"'{package_manager} install' failed in {directory}: {reason}"
        )

    @property
    def manual_command(self) -> str:
        return f"cd {self.directory} && {self.package_manager} install"
