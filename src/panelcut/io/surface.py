"""Drawing surface that collects shapes and serializes them as SVG.

The surface declares a physical sheet size in millimeters; one design unit
equals one millimeter through the matching view box.
"""

import io

import svgwrite

from panelcut.domain import CircleShape, PathShape, Shape, format_number


class DrawingSurface:
    """Append-only collection of shapes with a physical sheet size.

    Shapes are grouped by kind (paths, circles) and keep their insertion
    order within each group. Groups are written in the order they were
    first used.

    Example:
        surface = DrawingSurface(300, 400)
        surface.append(path_of(outline))
        surface.append(circle_of(center, 7.5))
        svg_text = surface.serialize()
    """

    def __init__(self, width: float, height: float) -> None:
        """Initialize an empty surface.

        Args:
            width: Sheet width in millimeters
            height: Sheet height in millimeters
        """
        self.width = width
        self.height = height
        self._shapes: dict[str, list[Shape]] = {}

    def append(self, shape: Shape | None) -> None:
        """Add a shape; None is ignored."""
        if shape is None:
            return
        self._shapes.setdefault(shape.kind, []).append(shape)

    def extend(self, shapes: "list[Shape | None]") -> None:
        """Add several shapes in order."""
        for shape in shapes:
            self.append(shape)

    def shapes(self, kind: str | None = None) -> list[Shape]:
        """Get accumulated shapes, optionally only those of one kind."""
        if kind is not None:
            return list(self._shapes.get(kind, []))
        return [shape for group in self._shapes.values() for shape in group]

    def __len__(self) -> int:
        return sum(len(group) for group in self._shapes.values())

    def to_drawing(self) -> svgwrite.Drawing:
        """Build the svgwrite document for the current shapes."""
        width = format_number(self.width)
        height = format_number(self.height)
        drawing = svgwrite.Drawing(
            size=(f"{width}mm", f"{height}mm"),
            viewBox=f"0 0 {width} {height}",
            debug=False,
        )

        for group in self._shapes.values():
            for shape in group:
                if isinstance(shape, PathShape):
                    element = drawing.path(d=shape.path_data(), **shape.style.attributes())
                elif isinstance(shape, CircleShape):
                    element = drawing.circle(
                        center=tuple(format_number(c) for c in shape.center.to_tuple()),
                        r=format_number(shape.radius),
                        **shape.style.attributes(),
                    )
                else:
                    raise TypeError(f"Unsupported shape: {shape!r}")
                drawing.add(element)

        return drawing

    def serialize(self, pretty: bool = True) -> str:
        """Render the surface as an SVG document.

        Can be called repeatedly; each call reflects the shapes added so far.

        Args:
            pretty: Indent the XML output

        Returns:
            SVG document text including the XML declaration
        """
        buffer = io.StringIO()
        self.to_drawing().write(buffer, pretty=pretty)
        return buffer.getvalue()
