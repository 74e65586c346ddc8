"""Tests for trellis.scaffold.project.scaffold_project()."""

from __future__ import annotations

import io
import json
from pathlib import Path

import pytest
from rich.console import Console
from scripted_prompter import AnswerPrompter

from trellis.errors import DirectoryError, InstallError
from trellis.models.config import FlagSource
from trellis.scaffold import project as project_module
from trellis.scaffold.options import RawOptions
from trellis.scaffold.project import scaffold_project


@pytest.fixture
def quiet_console() -> Console:
    return Console(file=io.StringIO(), force_terminal=False)


class TestScaffoldProject:
    """Tests for the resolve -> validate -> dispatch -> install pipeline."""

    @pytest.mark.asyncio
    async def test_direct_backend_without_install(
        self, tmp_path: Path, quiet_console: Console
    ) -> None:
        """Direct mode generates the project and skips installation."""
        target = tmp_path / "shop-api"
        options = RawOptions(type="backend", model="clean", name="shop-api", directory=str(target))

        outcome = await scaffold_project(
            options,
            {"type": FlagSource.EXPLICIT, "model": FlagSource.EXPLICIT},
            prompter=AnswerPrompter(),
            install=False,
            console=quiet_console,
        )

        assert outcome.directory == target.resolve()
        assert outcome.installed is False
        assert outcome.install_error is None
        manifest = json.loads((target / "package.json").read_text(encoding="utf-8"))
        assert manifest["name"] == "shop-api"

    @pytest.mark.asyncio
    async def test_interactive_decline_writes_nothing(
        self, tmp_path: Path, quiet_console: Console
    ) -> None:
        """Declining the non-empty directory prompt leaves the directory untouched."""
        (tmp_path / "keep.txt").write_text("x")
        prompter = AnswerPrompter({"project_type": "backend", "name": "shop-api", "proceed": False})

        with pytest.raises(DirectoryError, match="cancelled"):
            await scaffold_project(
                RawOptions(directory=str(tmp_path)),
                prompter=prompter,
                install=False,
                console=quiet_console,
            )

        assert prompter.asked[-1] == "proceed"
        assert [p.name for p in tmp_path.iterdir()] == ["keep.txt"]

    @pytest.mark.asyncio
    async def test_direct_mode_auto_confirms(self, tmp_path: Path, quiet_console: Console) -> None:
        """Direct mode writes into a non-empty directory without asking."""
        (tmp_path / "keep.txt").write_text("x")
        prompter = AnswerPrompter()

        await scaffold_project(
            RawOptions(type="backend", directory=str(tmp_path)),
            {"type": FlagSource.EXPLICIT},
            prompter=prompter,
            install=False,
            console=quiet_console,
        )

        assert "proceed" not in prompter.asked
        assert (tmp_path / "package.json").exists()
        assert (tmp_path / "keep.txt").exists()

    @pytest.mark.asyncio
    async def test_yes_auto_confirms_interactive_run(
        self, tmp_path: Path, quiet_console: Console
    ) -> None:
        """With yes the stack is asked but the directory prompt is not."""
        (tmp_path / "keep.txt").write_text("x")
        prompter = AnswerPrompter({"project_type": "backend"})

        await scaffold_project(
            RawOptions(yes=True, directory=str(tmp_path)),
            {"yes": FlagSource.EXPLICIT},
            prompter=prompter,
            install=False,
            console=quiet_console,
        )

        assert prompter.asked == ["project_type", "database", "architecture"]
        assert (tmp_path / "package.json").exists()

    @pytest.mark.asyncio
    async def test_install_failure_is_recorded(
        self, tmp_path: Path, quiet_console: Console, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        """A failed install is kept on the outcome; the scaffold stays on disk."""

        async def failing_install(directory: Path, package_manager: str, *, verbose: bool = False) -> None:
            raise InstallError(package_manager, str(directory), "registry unreachable")

        monkeypatch.setattr(project_module, "install_dependencies", failing_install)

        outcome = await scaffold_project(
            RawOptions(type="backend", directory=str(tmp_path / "app")),
            {"type": FlagSource.EXPLICIT},
            prompter=AnswerPrompter(),
            install=True,
            console=quiet_console,
        )

        assert outcome.installed is False
        assert outcome.install_error is not None
        assert outcome.install_error.reason == "registry unreachable"
        assert (tmp_path / "app" / "package.json").exists()

    @pytest.mark.asyncio
    async def test_install_success(
        self, tmp_path: Path, quiet_console: Console, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        """The chosen package manager installs in the generated root."""
        calls: list[tuple[Path, str]] = []

        async def fake_install(directory: Path, package_manager: str, *, verbose: bool = False) -> None:
            calls.append((directory, package_manager))

        monkeypatch.setattr(project_module, "install_dependencies", fake_install)

        outcome = await scaffold_project(
            RawOptions(type="backend", package_manager="yarn", directory=str(tmp_path / "app")),
            {"type": FlagSource.EXPLICIT, "package_manager": FlagSource.EXPLICIT},
            prompter=AnswerPrompter(),
            console=quiet_console,
        )

        assert outcome.installed is True
        assert calls == [((tmp_path / "app").resolve(), "yarn")]
