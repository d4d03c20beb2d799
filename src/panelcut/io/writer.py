"""Template writer for saving drawing surfaces.

This module provides the TemplateWriter class for writing serialized
surfaces to SVG files.
"""

from pathlib import Path

from panelcut.exceptions import TemplateSaveError
from panelcut.io.surface import DrawingSurface


class TemplateWriter:
    """Writes a drawing surface to an SVG file.

    Example:
        writer = TemplateWriter(surface, Path("lantern.svg"))
        writer.save()
    """

    def __init__(self, surface: DrawingSurface, output_path: Path) -> None:
        """Initialize the template writer.

        Args:
            surface: The surface to serialize
            output_path: Path where the SVG will be saved
        """
        self._surface = surface
        self._output_path = output_path

    @property
    def output_path(self) -> Path:
        """Destination of the SVG file."""
        return self._output_path

    def save(self) -> int:
        """Serialize the surface and write it to the output path.

        Returns:
            Number of bytes written

        Raises:
            TemplateSaveError: If the file cannot be written
        """
        content = self._surface.serialize()
        try:
            self._output_path.parent.mkdir(parents=True, exist_ok=True)
            self._output_path.write_text(content, encoding="utf-8")
        except OSError as e:
            raise TemplateSaveError(str(self._output_path), str(e)) from e
        return len(content.encode("utf-8"))

    @staticmethod
    def get_default_path(layout: str, variant: str | None = None, directory: Path | None = None) -> Path:
        """Generate the default output path for a layout.

        Converts: ("lantern", "print-once") -> lantern-print-once.svg
                  ("cardboard", None) -> cardboard.svg

        Args:
            layout: Layout name
            variant: Optional variant (mode or preset) name
            directory: Target directory (default: current directory)

        Returns:
            Path of the SVG file
        """
        stem = layout if variant is None else f"{layout}-{variant}"
        return (directory or Path(".")) / f"{stem}.svg"
