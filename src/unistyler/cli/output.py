"""Rich console output helpers for the CLI.

This module provides user-friendly console output using Rich library
with tables and formatted messages. Pack content (names, messages, styled
text) is always wrapped in ``Text`` so brackets are never read as markup.
"""

from rich.console import Console
from rich.table import Table
from rich.text import Text

from unistyler.domain import FontPack, StyledResult, ValidationIssue
from unistyler.utils import ValidationStats

console = Console()

# Unicode symbols for consistent visual language
SYM_STEP = "▸"  # Step indicator
SYM_OK = "✓"  # Success
SYM_ERR = "✗"  # Error
SYM_DOT = "·"  # Separator/secondary info
SYM_BULLET = "•"  # List item


def print_header(version: str, title: str) -> None:
    """Print application header.

    Args:
        version: Application version string
        title: Name of the running command
    """
    console.print(f"\n[bold]Unistyler[/bold] v{version} {SYM_DOT} {title}")
    console.print("─" * 44)


def print_step(message: str) -> None:
    """Print a processing step indicator."""
    console.print(f"\n{SYM_STEP} {message}")


def print_pack_valid(pack: dict) -> None:
    """Print a pack that passed validation.

    Args:
        pack: Parsed pack JSON
    """
    decorators = pack.get("decorators")
    line = Text(f"{SYM_OK} ", style="bold green")
    line.append(f"{pack.get('name')} ({pack.get('id')})", style="bold")
    console.print(line)
    console.print(Text(f"  Version: {pack.get('version')}"))
    console.print(f"  Styles: {len(pack.get('styles') or [])}")
    console.print(f"  Decorators: {len(decorators) if isinstance(decorators, list) else 0}")
    console.print()


def print_pack_invalid(pack: dict, issues: list[ValidationIssue]) -> None:
    """Print a pack that failed validation with one bullet per issue.

    Args:
        pack: Parsed pack JSON
        issues: Validation issues for the pack
    """
    line = Text(f"{SYM_ERR} ", style="bold red")
    line.append(f"{pack.get('name') or 'Unknown'} ({pack.get('id') or 'unknown'})", style="bold")
    console.print(line)
    for issue in issues:
        console.print(Text(f"  {SYM_BULLET} [{issue.field}] {issue.message}"))
    console.print()


def print_load_failure(path: str, reason: str) -> None:
    """Print a pack file that could not be read."""
    line = Text(f"{SYM_ERR} Failed to load pack file: ", style="bold red")
    line.append(path)
    console.print(line)
    console.print(Text(f"  Error: {reason}"))
    console.print()


def print_failures(failures: list[tuple[str, str]]) -> None:
    """Print one line per recorded failure as ``path: message``."""
    for path, message in failures:
        line = Text(f"{SYM_ERR} ", style="bold red")
        line.append(f"{path}: {message}")
        console.print(line)
    if failures:
        console.print()


def print_validation_summary(stats: ValidationStats, total_files: int) -> None:
    """Print the validation summary block.

    Args:
        stats: Accumulated validation statistics
        total_files: Number of pack files targeted
    """
    console.print("━" * 60)
    console.print("\n[bold]Validation Summary[/bold]")
    console.print(f"  Valid packs: {stats.valid_count}/{total_files}")
    error_style = "red" if stats.error_count > 0 else "green"
    console.print(f"  Total errors: [{error_style}]{stats.error_count}[/{error_style}]\n")

    if stats.error_count > 0:
        console.print(f"[bold red]{SYM_ERR} Validation failed with errors[/bold red]")
    else:
        console.print(f"[bold green]{SYM_OK} All packs are valid![/bold green]")


def print_styled_results(results: list[StyledResult]) -> None:
    """Print one line per styled result, labelled with its composite id."""
    width = max((len(r.style_id) for r in results), default=0)
    for result in results:
        line = Text(f"  {result.style_id.ljust(width)}  ", style="dim")
        line.append(result.styled)
        console.print(line)


def print_packs_table(packs: list[FontPack]) -> None:
    """Print a table of loaded packs."""
    if not packs:
        console.print("\nNo packs match.")
        return

    table = Table(show_edge=False, pad_edge=False)
    table.add_column("ID", style="bold")
    table.add_column("Name")
    table.add_column("Category")
    table.add_column("Version")
    table.add_column("Price", justify="right")
    table.add_column("Styles", justify="right")
    table.add_column("Decorators", justify="right")

    for pack in packs:
        if pack.is_free:
            price = "free"
        elif pack.is_premium:
            price = f"{pack.price:g}"
        else:
            price = str(pack.price)
        table.add_row(
            Text(pack.id),
            Text(pack.name),
            Text(str(pack.category)),
            Text(pack.version),
            Text(price),
            str(len(pack.styles)),
            str(len(pack.decorators)),
        )
    console.print(table)


def print_warning(message: str) -> None:
    """Print a non-fatal warning."""
    line = Text(f"{SYM_DOT} ", style="yellow")
    line.append(message)
    console.print(line)


def print_error(message: str, details: str | None = None) -> None:
    """Print error message.

    Args:
        message: Main error message
        details: Optional detailed error information
    """
    line = Text(f"\n{SYM_ERR} Error: ", style="bold red")
    line.append(message)
    console.print(line)
    if details:
        console.print(Text(f"  {details}"))
