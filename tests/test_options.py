"""Tests for trellis.scaffold.options.OptionResolver."""

from __future__ import annotations

from pathlib import Path

import pytest
from scripted_prompter import AnswerPrompter

from trellis.errors import ConfigValidationError, UnrecognizedEnumError
from trellis.models.config import FlagSource, ProjectConfig, TrellisSettings
from trellis.scaffold.options import OptionResolver, RawOptions

EXPLICIT = FlagSource.EXPLICIT
DEFAULT = FlagSource.DEFAULT


def resolve(
    options: RawOptions,
    provenance: dict[str, FlagSource] | None = None,
    answers: dict[str, object] | None = None,
    settings: TrellisSettings | None = None,
) -> tuple[ProjectConfig, AnswerPrompter]:
    prompter = AnswerPrompter(answers)
    config = OptionResolver(prompter, settings).resolve(options, provenance or {})
    return config, prompter


class TestModeSelection:
    """Direct vs interactive mode is decided by flag provenance."""

    def test_defaulted_database_stays_interactive(self, tmp_path: Path) -> None:
        """A database value filled in as a default must not force direct mode."""
        options = RawOptions(database="none", directory=str(tmp_path))
        config, prompter = resolve(
            options,
            {"database": DEFAULT, "backend": DEFAULT},
            answers={"project_type": "backend", "database": "postgres", "name": "shop-api"},
        )

        assert "project_type" in prompter.asked
        assert config.database == "postgres"

    def test_explicit_database_selects_direct_mode(self, tmp_path: Path) -> None:
        """An explicit --database resolves without a single prompt."""
        options = RawOptions(database="postgres", directory=str(tmp_path))
        config, prompter = resolve(options, {"database": EXPLICIT})

        assert prompter.asked == []
        assert config.project_type == "backend"
        assert config.architecture == "mvc"
        assert config.database == "postgres"

    def test_model_flag_selects_direct_mode(self, tmp_path: Path) -> None:
        """The legacy --model flag also selects direct mode."""
        options = RawOptions(model="hexa", directory=str(tmp_path))
        config, prompter = resolve(options, {"model": EXPLICIT})

        assert prompter.asked == []
        assert config.architecture == "hexagonal"

    @pytest.mark.parametrize("flag", ["type", "frontend", "backend", "database"])
    def test_any_explicit_surface_flag_is_direct(self, flag: str) -> None:
        """Each v2 surface flag selects direct mode on its own."""
        assert OptionResolver.is_direct_mode(RawOptions(), {flag: EXPLICIT})

    def test_defaults_alone_are_interactive(self) -> None:
        """Defaulted and absent flags never select direct mode."""
        provenance = {"type": FlagSource.ABSENT, "database": DEFAULT, "backend": DEFAULT}
        assert not OptionResolver.is_direct_mode(RawOptions(), provenance)


class TestDirectMode:
    """Tests for configuration taken straight from flags."""

    def test_fullstack_from_flags(self, tmp_path: Path) -> None:
        """Flag values are normalized into the config."""
        options = RawOptions(
            type="fullstack",
            frontend="React",
            css="tailwind",
            model="clean",
            name="shop-api",
            directory=str(tmp_path),
        )
        config, _ = resolve(options, {"type": EXPLICIT, "frontend": EXPLICIT, "model": EXPLICIT})

        assert config.project_type == "fullstack"
        assert config.frontend_framework == "react"
        assert config.css_tool == "tailwind"
        assert config.architecture == "clean"
        assert config.directory == tmp_path.resolve()
        assert config.is_provided("frontend")

    def test_frontend_flag_ignored_for_backend(self, tmp_path: Path) -> None:
        """A backend project drops a stray --frontend."""
        options = RawOptions(type="backend", frontend="vue", directory=str(tmp_path))
        config, _ = resolve(options, {"type": EXPLICIT, "frontend": EXPLICIT})
        assert config.frontend_framework is None

    def test_frontend_project_has_no_architecture(self, tmp_path: Path) -> None:
        """Frontend-only projects carry no backend architecture."""
        options = RawOptions(type="frontend", frontend="vue", directory=str(tmp_path))
        config, _ = resolve(options, {"type": EXPLICIT, "frontend": EXPLICIT})
        assert config.architecture is None
        assert config.frontend_framework == "vue"

    def test_metadata_falls_back_to_settings(self, tmp_path: Path) -> None:
        """Metadata flags that were not given come from the settings."""
        settings = TrellisSettings(author="Ada Lovelace", package_manager="yarn")
        options = RawOptions(type="backend", directory=str(tmp_path))
        config, _ = resolve(options, {"type": EXPLICIT}, settings=settings)

        assert config.author == "Ada Lovelace"
        assert config.package_manager == "yarn"
        assert config.project_name == "my-trellis-app"

    def test_empty_name_flag_not_replaced_by_default(self, tmp_path: Path) -> None:
        """An explicit empty --name is rejected instead of falling back."""
        options = RawOptions(type="backend", name="", directory=str(tmp_path))
        with pytest.raises(ConfigValidationError) as exc_info:
            resolve(options, {"type": EXPLICIT, "name": EXPLICIT})
        assert "project_name" in exc_info.value.fields

    @pytest.mark.parametrize("flag", ["description", "author"])
    def test_blank_metadata_flag_rejected(self, tmp_path: Path, flag: str) -> None:
        """Whitespace-only description or author flags fail validation."""
        options = RawOptions(type="backend", directory=str(tmp_path), **{flag: "   "})
        with pytest.raises(ConfigValidationError) as exc_info:
            resolve(options, {"type": EXPLICIT, flag: EXPLICIT})
        assert exc_info.value.fields == [flag]

    def test_unknown_architecture(self, tmp_path: Path) -> None:
        """An unknown --model lists the accepted names."""
        options = RawOptions(model="layered", directory=str(tmp_path))
        with pytest.raises(UnrecognizedEnumError) as exc_info:
            resolve(options, {"model": EXPLICIT})
        assert exc_info.value.field == "architecture"
        assert "hexa" in exc_info.value.allowed

    def test_unknown_project_type(self, tmp_path: Path) -> None:
        """An unknown --type is rejected."""
        options = RawOptions(type="desktop", directory=str(tmp_path))
        with pytest.raises(UnrecognizedEnumError, match="project type"):
            resolve(options, {"type": EXPLICIT})

    def test_reports_every_invalid_field(self, tmp_path: Path) -> None:
        """A missing framework and a bad name are reported together."""
        options = RawOptions(type="fullstack", name="AB", directory=str(tmp_path))
        with pytest.raises(ConfigValidationError) as exc_info:
            resolve(options, {"type": EXPLICIT, "name": EXPLICIT})

        fields = exc_info.value.fields
        assert "frontend_framework" in fields
        assert "project_name" in fields
        assert "config" not in fields


class TestInteractiveMode:
    """Tests for the prompt flow."""

    def test_prompt_order_for_fullstack(self, tmp_path: Path) -> None:
        """Type, stack and architecture come before the metadata prompts."""
        answers = {
            "project_type": "fullstack",
            "frontend_framework": "vue",
            "css_tool": "tailwind",
            "database": "mysql",
            "architecture": "hexagonal",
            "name": "shop-api",
            "package_manager": "pnpm",
        }
        config, prompter = resolve(RawOptions(directory=str(tmp_path)), answers=answers)

        assert prompter.asked == [
            "project_type",
            "frontend_framework",
            "css_tool",
            "database",
            "architecture",
            "name",
            "description",
            "author",
            "package_manager",
        ]
        assert config.architecture == "hexagonal"
        assert config.frontend_architecture == "hexa"
        assert config.package_manager == "pnpm"

    def test_frontend_asks_frontend_architecture(self, tmp_path: Path) -> None:
        """Frontend projects ask for a folder layout instead of an architecture."""
        answers = {
            "project_type": "frontend",
            "frontend_framework": "react",
            "frontend_architecture": "clean",
            "name": "web-app",
        }
        config, prompter = resolve(RawOptions(directory=str(tmp_path)), answers=answers)

        assert "architecture" not in prompter.asked
        assert "database" not in prompter.asked
        assert config.frontend_architecture == "clean"
        assert config.architecture is None

    def test_explicit_flag_pre_answers_prompt(self, tmp_path: Path) -> None:
        """Explicit flags skip their prompt."""
        options = RawOptions(css="tailwind", name="web-app", directory=str(tmp_path))
        answers = {"project_type": "frontend", "frontend_framework": "react"}
        config, prompter = resolve(options, {"css": EXPLICIT, "name": EXPLICIT}, answers=answers)

        assert "css_tool" not in prompter.asked
        assert "name" not in prompter.asked
        assert config.css_tool == "tailwind"
        assert config.project_name == "web-app"

    def test_yes_skips_metadata_prompts(self, tmp_path: Path) -> None:
        """With yes the stack is still asked but metadata uses defaults."""
        options = RawOptions(yes=True, directory=str(tmp_path))
        config, prompter = resolve(options, {"yes": EXPLICIT})

        assert prompter.asked == ["project_type", "database", "architecture"]
        assert config.project_type == "backend"
        assert config.architecture == "mvc"
        assert config.project_name == "my-trellis-app"

    def test_invalid_prompted_name(self, tmp_path: Path) -> None:
        """A reserved project name fails the prompt's own check."""
        answers = {"project_type": "backend", "name": "npm"}
        with pytest.raises(ConfigValidationError) as exc_info:
            resolve(RawOptions(directory=str(tmp_path)), answers=answers)
        assert exc_info.value.fields == ["name"]

    def test_blank_prompted_author(self, tmp_path: Path) -> None:
        """A blank author answer is rejected at the prompt."""
        answers = {"project_type": "backend", "name": "shop-api", "author": "  "}
        with pytest.raises(ConfigValidationError) as exc_info:
            resolve(RawOptions(directory=str(tmp_path)), answers=answers)
        assert exc_info.value.fields == ["author"]
