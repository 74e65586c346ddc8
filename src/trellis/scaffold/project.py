"""End-to-end project scaffolding: resolve, validate, dispatch, install.

The stages run strictly in sequence; any error before installation
unwinds the whole run. A failed install is recorded on the outcome and
reported as a warning because the scaffold on disk is already complete.
"""

from __future__ import annotations

from contextlib import nullcontext
from dataclasses import dataclass
from pathlib import Path

from rich.console import Console

from trellis.errors import InstallError
from trellis.logging import bind_run_context, get_logger
from trellis.models.config import FlagSource, ProjectConfig, TrellisSettings
from trellis.scaffold.directory import validate_directory
from trellis.scaffold.dispatcher import DispatchResult, GeneratorDispatcher
from trellis.scaffold.install import install_dependencies
from trellis.scaffold.options import OptionResolver, RawOptions
from trellis.scaffold.progress import progress_step
from trellis.scaffold.prompts import Prompter

logger = get_logger(__name__)


@dataclass
class ScaffoldOutcome:
    """Result of one scaffolding run."""

    config: ProjectConfig
    result: DispatchResult
    installed: bool = False
    install_error: InstallError | None = None

    @property
    def directory(self) -> Path:
        return self.result.root_dir


async def scaffold_project(
    options: RawOptions,
    provenance: dict[str, FlagSource] | None = None,
    *,
    prompter: Prompter,
    settings: TrellisSettings | None = None,
    force: bool = False,
    install: bool = True,
    verbose: bool = False,
    console: Console | None = None,
    dispatcher: GeneratorDispatcher | None = None,
) -> ScaffoldOutcome:
    """Generate a project from command-line options.

    Args:
        options: Raw flag values.
        provenance: Source of each flag value; only EXPLICIT flags count
            as provided.
        prompter: Answers interactive questions, including the non-empty
            directory confirmation.
        settings: User defaults from trellis.yaml.
        force: Write into a non-empty directory without asking.
        install: Run the package manager's install after generation.
        verbose: Stream install output.
        console: Console used for progress spinners.
        dispatcher: Generator dispatcher (a default one is built if None).

    Returns:
        ScaffoldOutcome describing what was generated.

    Raises:
        UnrecognizedEnumError: If an option value is outside its allowed set.
        ConfigValidationError: If the resolved configuration is invalid.
        DirectoryError: If the target directory may not be written to.
        GenerationError: If a generator fails mid-write.
    """
    provenance = dict(provenance or {})
    console = console or Console(stderr=True)
    dispatcher = dispatcher or GeneratorDispatcher()

    resolver = OptionResolver(prompter, settings, dispatcher.registry)
    config = resolver.resolve(options, provenance)
    bind_run_context(project=config.project_name, project_type=config.project_type)

    # direct mode is non-interactive, so it never stops to ask
    auto_confirm = options.yes or resolver.is_direct_mode(options, provenance)
    await validate_directory(
        config.directory,
        auto_confirm=auto_confirm,
        force=force,
        confirm=lambda message: prompter.confirm("proceed", message, default=False),
    )

    with progress_step(console, "Generating project structure..."):
        result = await dispatcher.dispatch(config)

    outcome = ScaffoldOutcome(config=config, result=result)
    if not install:
        return outcome

    spinner = (
        nullcontext()
        if verbose
        else progress_step(console, f"Installing dependencies with {config.package_manager}...")
    )
    with spinner:
        try:
            await install_dependencies(result.root_dir, config.package_manager, verbose=verbose)
            outcome.installed = True
        except InstallError as exc:
            logger.debug("install_failed", error=str(exc))
            outcome.install_error = exc
    return outcome
