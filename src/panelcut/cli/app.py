"""CLI application entry point for panelcut.

This module provides the main CLI interface using Typer.
"""

from pathlib import Path
from typing import Annotated

import typer
from pydantic import ValidationError

from panelcut import __version__
from panelcut.cli.output import (
    console,
    print_error,
    print_header,
    print_layout_info,
    print_step,
    print_success,
)
from panelcut.config import CardboardConfig, LanternMode, PanelcutSettings
from panelcut.core import TemplateGenerator, TemplateKind
from panelcut.exceptions import PanelcutError, TemplateSaveError

# Create the Typer app
app = typer.Typer(
    name="panelcut",
    help="Generate SVG construction templates with finger joints for laser cutting and cardboard.",
    add_completion=False,
    no_args_is_help=True,
)

OutputOption = Annotated[
    Path | None,
    typer.Option(
        "--output",
        "-o",
        help="Output path (default: {layout}[-{mode}].svg)",
    ),
]
LogFileOption = Annotated[
    Path | None,
    typer.Option(
        "--log-file",
        help="Write detailed logs to file",
    ),
]
LogLevelOption = Annotated[
    str,
    typer.Option(
        "--log-level",
        help="Logging level (DEBUG|INFO|WARNING|ERROR)",
    ),
]
QuietOption = Annotated[
    bool,
    typer.Option(
        "--quiet",
        "-q",
        help="Minimal console output",
    ),
]


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        console.print(f"[bold blue]Panelcut[/bold blue] v{__version__}")
        raise typer.Exit()


@app.callback()
def main_callback(
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
    """Generate SVG construction templates."""


@app.command()
def lantern(
    mode: Annotated[
        str,
        typer.Option(
            "--mode",
            "-m",
            help="Parts to lay out (print-once|print-five)",
        ),
    ] = LanternMode.PRINT_ONCE.value,
    papercraft: Annotated[
        bool,
        typer.Option(
            "--papercraft",
            help="Straight edges instead of finger joints",
        ),
    ] = False,
    hole_radius: Annotated[
        float,
        typer.Option(
            "--hole-radius",
            help="Radius of the hole in base and top plates (0 = no hole)",
        ),
    ] = 113 / 2,
    width: Annotated[
        float | None,
        typer.Option(
            "--width",
            help="Sheet width in mm (default: 300, or 800 for print-five)",
            min=1.0,
        ),
    ] = None,
    height: Annotated[float, typer.Option("--height", help="Sheet height in mm", min=1.0)] = 400.0,
    output: OutputOption = None,
    log_file: LogFileOption = None,
    log_level: LogLevelOption = "WARNING",
    quiet: QuietOption = False,
) -> None:
    """Lay out the laser-cut lantern.

    Example:
        panelcut lantern --mode print-five

    This will create lantern-print-five.svg with the parts needed once per side.
    """
    try:
        lantern_mode = LanternMode(mode.lower())
    except ValueError:
        print_error(
            f"Invalid mode: {mode}",
            details="Valid values: print-once, print-five",
        )
        raise typer.Exit(code=1)

    settings = _build_settings(
        lantern={
            "mode": lantern_mode,
            "papercraft": papercraft,
            "central_circle_radius": hole_radius,
            "canvas_width": width or _default_lantern_width(lantern_mode),
            "canvas_height": height,
        },
        logging={"log_file": log_file, "log_level": log_level.upper()},
    )
    _generate(TemplateKind.LANTERN, settings, output, quiet, variant=lantern_mode.value)


def _default_lantern_width(mode: LanternMode) -> float:
    """Sheet width that fits all parts of a lantern mode."""
    return 800.0 if mode == LanternMode.PRINT_FIVE else 300.0


@app.command()
def cardboard(
    preset: Annotated[
        str,
        typer.Option(
            "--preset",
            "-p",
            help="Dimension preset (default|a4)",
        ),
    ] = "a4",
    sides: Annotated[
        int | None,
        typer.Option(
            "--sides",
            "-n",
            help="Number of sides (overrides the preset)",
            min=3,
            max=12,
        ),
    ] = None,
    width: Annotated[float, typer.Option("--width", help="Sheet width in mm", min=1.0)] = 397.0,
    height: Annotated[float, typer.Option("--height", help="Sheet height in mm", min=1.0)] = 210.0,
    output: OutputOption = None,
    log_file: LogFileOption = None,
    log_level: LogLevelOption = "WARNING",
    quiet: QuietOption = False,
) -> None:
    """Lay out the foldable cardboard lantern.

    Example:
        panelcut cardboard --preset a4

    This will create cardboard.svg sized for a landscape A4 sheet.
    """
    if preset.lower() == "a4":
        config = CardboardConfig.a4()
    elif preset.lower() == "default":
        config = CardboardConfig()
    else:
        print_error(
            f"Invalid preset: {preset}",
            details="Valid values: default, a4",
        )
        raise typer.Exit(code=1)

    values = config.model_dump()
    values.update(canvas_width=width, canvas_height=height)
    if sides is not None:
        values["number_of_sides"] = sides

    settings = _build_settings(
        cardboard=values,
        logging={"log_file": log_file, "log_level": log_level.upper()},
    )
    _generate(TemplateKind.CARDBOARD, settings, output, quiet, variant=preset.lower())


def _build_settings(**sections: dict[str, object]) -> PanelcutSettings:
    """Validate CLI values into settings, exiting with an error message on failure."""
    try:
        return PanelcutSettings.model_validate(sections)
    except ValidationError as e:
        error = e.errors()[0]
        field = ".".join(str(part) for part in error["loc"])
        print_error(f"Invalid value for {field}", details=error["msg"])
        raise typer.Exit(code=1)


def _generate(
    kind: TemplateKind,
    settings: PanelcutSettings,
    output: Path | None,
    quiet: bool,
    variant: str | None = None,
) -> None:
    """Build and save a template, reporting progress on the console.

    Args:
        kind: Template to build
        settings: Panelcut settings
        output: Output path (None = default name)
        quiet: Suppress output
        variant: Mode or preset name for display
    """
    if not quiet:
        print_header(__version__)
        print_step("Building layout")
        sheet = settings.lantern if kind == TemplateKind.LANTERN else settings.cardboard
        print_layout_info(kind.value, variant, sheet.canvas_width, sheet.canvas_height)

    try:
        generator = TemplateGenerator(settings, quiet=quiet)
        output_path = output or generator.default_output_path(kind)
        stats = generator.generate(kind, output_path)
    except TemplateSaveError as e:
        print_error(f"Could not save template: {e.reason}")
        raise typer.Exit(code=1)
    except PanelcutError as e:
        print_error(str(e))
        raise typer.Exit(code=1)

    if not quiet:
        print_success(
            output_path=str(output_path),
            size_bytes=stats.bytes_written,
            total_time_s=stats.duration_seconds,
            parts=len(stats.parts),
            paths=stats.path_count,
            circles=stats.circle_count,
        )


def cli() -> None:
    """Entry point for the CLI application."""
    app()


def main() -> None:
    """Entry point for the CLI application (alias for cli)."""
    cli()


if __name__ == "__main__":
    cli()
