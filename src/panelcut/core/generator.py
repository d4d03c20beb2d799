"""Template generation orchestration.

Builds one of the template layouts from settings, writes it to disk and
reports statistics.

Key components:
- TemplateKind: The available template layouts
- TemplateGenerator: Main orchestrator class
"""

import time
from enum import Enum
from pathlib import Path

from panelcut.config import PanelcutSettings
from panelcut.core.cardboard import CardboardLayout
from panelcut.core.lantern import LanternLayout
from panelcut.exceptions import PanelcutError
from panelcut.io import DrawingSurface, TemplateWriter
from panelcut.utils import LayoutLogger, LayoutStats, configure_logging


class TemplateKind(str, Enum):
    """Available template layouts."""

    LANTERN = "lantern"
    CARDBOARD = "cardboard"


class TemplateGenerator:
    """Orchestrates building and saving a template.

    Example:
        settings = PanelcutSettings()
        generator = TemplateGenerator(settings)
        stats = generator.generate(TemplateKind.LANTERN, Path("lantern.svg"))
    """

    def __init__(self, config: PanelcutSettings, quiet: bool = True) -> None:
        """Initialize the generator.

        Args:
            config: Settings for all layouts and logging
            quiet: Suppress log output on the console
        """
        self.config = config
        self.logger = configure_logging(
            log_file=config.logging.log_file,
            console_level=config.logging.log_level,
            file_level=config.logging.file_log_level,
            quiet=quiet,
        )
        self.layout_logger = LayoutLogger(self.logger)

    def default_output_path(self, kind: TemplateKind) -> Path:
        """Output path used when none is given."""
        if kind == TemplateKind.LANTERN:
            return TemplateWriter.get_default_path(kind.value, self.config.lantern.mode.value)
        return TemplateWriter.get_default_path(kind.value)

    def build(self, kind: TemplateKind) -> tuple[DrawingSurface, list[str]]:
        """Build a layout without writing it.

        Args:
            kind: Which template to build

        Returns:
            Tuple of (surface, part names)
        """
        if kind == TemplateKind.LANTERN:
            lantern = LanternLayout(self.config.lantern)
            return lantern.build(), lantern.parts
        cardboard = CardboardLayout(self.config.cardboard)
        return cardboard.build(), cardboard.parts

    def generate(self, kind: TemplateKind, output_path: Path | None = None) -> LayoutStats:
        """Build a template and save it as SVG.

        Args:
            kind: Which template to build
            output_path: Destination (default: derived from the layout name)

        Returns:
            LayoutStats with shape counts, file size and timing

        Raises:
            PanelcutError: If the layout cannot be built or saved
        """
        stats = self.layout_logger.stats
        stats.start_time = time.time()
        variant = self.config.lantern.mode.value if kind == TemplateKind.LANTERN else None
        self.layout_logger.log_layout_start(kind.value, variant)

        try:
            surface, parts = self.build(kind)
        except PanelcutError as e:
            self.layout_logger.log_layout_error(e)
            raise

        self.layout_logger.log_layout_complete(
            parts=parts,
            path_count=len(surface.shapes("path")),
            circle_count=len(surface.shapes("circle")),
            duration_ms=(time.time() - stats.start_time) * 1000,
        )

        path = output_path or self.default_output_path(kind)
        size = TemplateWriter(surface, path).save()
        self.layout_logger.log_file_written(path, size)

        stats.end_time = time.time()
        return stats
