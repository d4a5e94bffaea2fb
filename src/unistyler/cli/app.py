"""CLI application entry point for unistyler.

This module provides the main CLI interface using Typer.
"""

from pathlib import Path
from typing import Annotated

import typer

from unistyler import __version__
from unistyler.cli.output import (
    console,
    print_error,
    print_failures,
    print_header,
    print_load_failure,
    print_pack_invalid,
    print_pack_valid,
    print_packs_table,
    print_step,
    print_styled_results,
    print_validation_summary,
    print_warning,
)
from unistyler.config import (
    BUNDLED_PACKS_DIR,
    EngineConfig,
    LoggingConfig,
    PacksConfig,
    UnistylerSettings,
    ValidationConfig,
)
from unistyler.core import (
    PackRegistry,
    PackValidator,
    StyleEngine,
    sanitize_text,
    validate_text_input,
)
from unistyler.domain import PackCategory
from unistyler.exceptions import (
    PackLoadError,
    PackNotFoundError,
    PackValidationError,
    UnistylerError,
)
from unistyler.io import PackReader
from unistyler.utils import ValidationLogger, configure_logging

# Create the Typer app
app = typer.Typer(
    name="unistyler",
    help="Decorate text with Unicode font packs and validate pack files.",
    add_completion=False,
    no_args_is_help=True,
)

PacksDirOption = Annotated[
    Path,
    typer.Option(
        "--packs-dir",
        "-d",
        help="Directory holding *.json font packs",
    ),
]


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        console.print(f"[bold blue]Unistyler[/bold blue] v{__version__}")
        raise typer.Exit()


@app.callback()
def main_callback(
    ctx: typer.Context,
    log_file: Annotated[
        Path | None,
        typer.Option(
            "--log-file",
            help="Write detailed logs to file",
        ),
    ] = None,
    log_level: Annotated[
        str,
        typer.Option(
            "--log-level",
            help="Logging level (DEBUG|INFO|WARNING|ERROR)",
        ),
    ] = "WARNING",
    _version: Annotated[  # noqa: ARG001
        bool | None,
        typer.Option(
            "--version",
            "-V",
            help="Show version and exit",
            callback=version_callback,
            is_eager=True,
        ),
    ] = None,
) -> None:
    """Decorate text with Unicode font packs and validate pack files."""
    ctx.obj = UnistylerSettings(
        logging=LoggingConfig(log_file=log_file, log_level=log_level),
    )


def _settings(ctx: typer.Context) -> UnistylerSettings:
    if isinstance(ctx.obj, UnistylerSettings):
        return ctx.obj
    return UnistylerSettings()


@app.command()
def validate(
    ctx: typer.Context,
    packs: Annotated[
        list[str] | None,
        typer.Argument(
            help="Pack names to validate (.json optional). Default: every pack in the directory",
            show_default=False,
        ),
    ] = None,
    packs_dir: PacksDirOption = BUNDLED_PACKS_DIR,
    lenient: Annotated[
        bool,
        typer.Option(
            "--lenient",
            help="Only run the base registry checks, skipping the strict authoring checks",
        ),
    ] = False,
    quiet: Annotated[
        bool,
        typer.Option(
            "--quiet",
            "-q",
            help="Only print failures and the summary",
        ),
    ] = False,
) -> None:
    """Validate font pack files.

    Exits with status 0 when every targeted pack is valid and 1 when any file
    cannot be read or any validation error is found.

    Example:
        unistyler validate default
    """
    settings = _settings(ctx).model_copy(
        update={
            "validation": ValidationConfig(strict=not lenient),
            "packs": PacksConfig(packs_dir=packs_dir),
        }
    )
    logger = configure_logging(
        log_file=settings.logging.log_file,
        console_level=settings.logging.log_level,
        file_level=settings.logging.file_log_level,
        quiet=quiet,
    )
    run_logger = ValidationLogger(logger)
    validator = PackValidator(strict=settings.validation.strict)
    reader = PackReader(settings.packs.packs_dir)

    if not quiet:
        print_header(__version__, "pack validator")

    try:
        pack_files = reader.resolve(packs)
    except PackLoadError as e:
        print_error(f"Failed to read packs directory: {e.path}", details=e.reason)
        raise typer.Exit(code=1)

    if not pack_files:
        print_error("No pack files found to validate")
        raise typer.Exit(code=1)

    if not quiet:
        print_step(f"Found {len(pack_files)} pack(s) to validate\n")

    for path in pack_files:
        try:
            data = reader.read(path)
        except PackLoadError as e:
            if not quiet:
                print_load_failure(str(path), e.reason)
            run_logger.log_load_failed(str(path), e)
            continue

        result = validator.validate(data)
        if result.valid:
            if not quiet:
                print_pack_valid(data)
            run_logger.log_pack_valid(str(path), str(data.get("id")), len(data["styles"]))
        else:
            if not quiet:
                print_pack_invalid(data, result.issues)
            run_logger.log_pack_invalid(str(path), str(data.get("id")), result.issues)

    stats = run_logger.stats
    if quiet:
        print_failures(stats.failures)
    print_validation_summary(stats, len(pack_files))

    if not stats.all_valid:
        raise typer.Exit(code=1)


@app.command()
def style(
    ctx: typer.Context,
    text: Annotated[
        str,
        typer.Argument(
            help="Text to style",
            show_default=False,
        ),
    ],
    style_ids: Annotated[
        list[str] | None,
        typer.Option(
            "--style",
            "-s",
            help="Style id to apply (repeatable). Default: every style in the pack",
        ),
    ] = None,
    pack_id: Annotated[
        str,
        typer.Option(
            "--pack",
            "-p",
            help="Pack holding the styles",
        ),
    ] = "default",
    decorator_id: Annotated[
        str | None,
        typer.Option(
            "--decorator",
            "-D",
            help="Decorator to wrap each result in",
        ),
    ] = None,
    packs_dir: PacksDirOption = BUNDLED_PACKS_DIR,
    max_length: Annotated[
        int,
        typer.Option(
            "--max-length",
            help="Longest text accepted",
            min=1,
            max=10_000,
        ),
    ] = 200,
) -> None:
    """Apply one or more styles to TEXT.

    Example:
        unistyler style "Hello" -s bold -D stars
    """
    settings = _settings(ctx).model_copy(
        update={
            "engine": EngineConfig(default_pack_id=pack_id, max_text_length=max_length),
            "packs": PacksConfig(packs_dir=packs_dir),
        }
    )
    configure_logging(
        log_file=settings.logging.log_file,
        console_level=settings.logging.log_level,
        file_level=settings.logging.file_log_level,
    )

    try:
        if settings.engine.sanitize_input:
            text = sanitize_text(text)
        validate_text_input(text, settings.engine.max_text_length)

        registry = _load_registry(settings)
        engine = StyleEngine.from_registry(registry, config=settings.engine)

        if style_ids:
            ids = style_ids
        else:
            pack = engine.get_pack(engine.default_pack_id)
            if pack is None:
                raise PackNotFoundError(engine.default_pack_id)
            ids = [s.id for s in pack.styles]

        if decorator_id is None:
            results = engine.apply_multiple_styles(text, ids)
        else:
            results = [
                engine.apply_style(text, style_id, decorator_id=decorator_id)
                for style_id in ids
            ]
    except UnistylerError as e:
        print_error(str(e))
        raise typer.Exit(code=1)

    print_styled_results(results)


@app.command("packs")
def list_packs(
    ctx: typer.Context,
    category: Annotated[
        PackCategory | None,
        typer.Option(
            "--category",
            "-c",
            help="Only list packs in this category",
            case_sensitive=False,
        ),
    ] = None,
    free: Annotated[
        bool,
        typer.Option("--free", help="Only list free packs"),
    ] = False,
    premium: Annotated[
        bool,
        typer.Option("--premium", help="Only list premium packs"),
    ] = False,
    packs_dir: PacksDirOption = BUNDLED_PACKS_DIR,
) -> None:
    """List the font packs that load cleanly from the packs directory."""
    if free and premium:
        print_error("Cannot use --free and --premium together")
        raise typer.Exit(code=1)

    settings = _settings(ctx).model_copy(update={"packs": PacksConfig(packs_dir=packs_dir)})
    configure_logging(
        log_file=settings.logging.log_file,
        console_level=settings.logging.log_level,
        file_level=settings.logging.file_log_level,
    )

    try:
        registry = _load_registry(settings)
    except UnistylerError as e:
        print_error(str(e))
        raise typer.Exit(code=1)

    if free:
        packs = registry.get_free_packs()
    elif premium:
        packs = registry.get_premium_packs()
    else:
        packs = registry.get_installed_packs()

    if category is not None:
        by_category = {p.id for p in registry.get_packs_by_category(category)}
        packs = [p for p in packs if p.id in by_category]

    print_packs_table(packs)


def _load_registry(settings: UnistylerSettings) -> PackRegistry:
    """Load every pack file into a fresh registry.

    Each pack is loaded on its own so a bad file is reported and skipped
    without hiding the others.

    Raises:
        PackLoadError: If the packs directory cannot be scanned
    """
    registry = PackRegistry(config=settings.validation)
    reader = PackReader(settings.packs.packs_dir)

    for path, data in reader.read_all():
        if isinstance(data, PackLoadError):
            print_warning(f"Skipped {path.name}: {data.reason}")
            continue
        try:
            registry.load_pack(data)
        except PackValidationError as e:
            print_warning(f"Skipped {path.name}: {len(e.errors)} validation error(s)")

    return registry


def cli() -> None:
    """Entry point for the CLI application."""
    app()


def main() -> None:
    """Entry point for the CLI application (alias for cli)."""
    cli()


if __name__ == "__main__":
    cli()
