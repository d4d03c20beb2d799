"""Rich console output helpers for the CLI.

This module provides user-friendly console output using Rich library
with formatted messages.
"""


from rich.console import Console
from rich.text import Text

console = Console()

# Unicode symbols for consistent visual language
SYM_STEP = "▸"  # Step indicator
SYM_OK = "✓"  # Success
SYM_ERR = "✗"  # Error
SYM_DOT = "·"  # Separator/secondary info


def print_header(version: str) -> None:
    """Print application header.

    Args:
        version: Application version string
    """
    console.print(f"\n[bold]Panelcut[/bold] v{version}")
    console.print("─" * 44)


def print_step(message: str) -> None:
    """Print a processing step indicator.

    Args:
        message: Step description message
    """
    console.print(f"\n{SYM_STEP} {message}")


def print_layout_info(layout: str, variant: str | None, width: float, height: float) -> None:
    """Print which template is being built.

    Args:
        layout: Layout name
        variant: Mode or preset name, if any
        width: Sheet width in millimeters
        height: Sheet height in millimeters
    """
    name = layout if variant is None else f"{layout} ({variant})"
    console.print(f"  {name} {SYM_DOT} {width:g} × {height:g} mm sheet")


def _format_time(seconds: float) -> str:
    """Format seconds into human-readable time string."""
    if seconds < 1:
        return f"{seconds * 1000:.0f}ms"
    return f"{seconds:.1f}s"


def _format_size(size_bytes: int) -> str:
    """Format a byte count in human-readable form."""
    if size_bytes < 1024:
        return f"{size_bytes} B"
    elif size_bytes < 1024 * 1024:
        return f"{size_bytes / 1024:.0f} KB"
    return f"{size_bytes / (1024 * 1024):.1f} MB"


def print_success(
    output_path: str,
    size_bytes: int,
    total_time_s: float,
    parts: int,
    paths: int,
    circles: int,
) -> None:
    """Print success message with summary.

    Args:
        output_path: Path to output file
        size_bytes: Size of the written file
        total_time_s: Total generation time in seconds
        parts: Number of parts laid out
        paths: Number of paths drawn
        circles: Number of circles drawn
    """
    console.print(f"\n[bold green]{SYM_OK} Complete[/bold green] in {_format_time(total_time_s)}")

    line = Text("  ")
    line.append(output_path, style="bold")
    line.append(f" ({_format_size(size_bytes)})")
    console.print(line)

    console.print(f"  {parts} parts {SYM_DOT} {paths} paths {SYM_DOT} {circles} circles")


def print_error(message: str, details: str | None = None) -> None:
    """Print error message.

    Args:
        message: Main error message
        details: Optional detailed error information
    """
    console.print(f"\n[bold red]{SYM_ERR} Error:[/bold red] {message}")
    if details:
        console.print(f"  {details}")
