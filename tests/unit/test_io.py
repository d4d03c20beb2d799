"""Unit tests for the drawing surface and template writer."""

import xml.etree.ElementTree as ET
from pathlib import Path

import pytest

from panelcut.core.assembly import circle_of, path_of
from panelcut.domain import StyleProfile, Vector
from panelcut.exceptions import TemplateSaveError
from panelcut.io import DrawingSurface, TemplateWriter

SVG_NS = "{http://www.w3.org/2000/svg}"


def parse(surface: DrawingSurface) -> ET.Element:
    """Serialize a surface and parse the result."""
    return ET.fromstring(surface.serialize())


class TestDrawingSurface:
    """Tests for DrawingSurface class."""

    def test_empty_surface(self):
        """Test a new surface has no shapes."""
        surface = DrawingSurface(300, 400)
        assert len(surface) == 0
        assert surface.shapes() == []

    def test_append_none_is_ignored(self):
        """Test that appending None does nothing."""
        surface = DrawingSurface(300, 400)
        surface.append(None)
        surface.append(circle_of(Vector(0, 0), 0))
        assert len(surface) == 0

    def test_shapes_grouped_by_kind(self):
        """Test shapes are grouped by kind and keep insertion order."""
        surface = DrawingSurface(300, 400)
        first = path_of([Vector(0, 0), Vector(1, 1)])
        circle = circle_of(Vector(5, 5), 2)
        second = path_of([Vector(2, 2), Vector(3, 3)])
        surface.extend([first, circle, second])

        assert len(surface) == 3
        assert surface.shapes("path") == [first, second]
        assert surface.shapes("circle") == [circle]
        assert surface.shapes() == [first, second, circle]
        assert surface.shapes("ellipse") == []

    def test_document_size(self):
        """Test the sheet size is declared in millimeters with a matching view box."""
        root = parse(DrawingSurface(300, 400))

        assert root.tag == f"{SVG_NS}svg"
        assert root.get("width") == "300mm"
        assert root.get("height") == "400mm"
        assert root.get("viewBox") == "0 0 300 400"

    def test_fractional_size(self):
        """Test fractional sheet sizes are kept."""
        root = parse(DrawingSurface(397.5, 210))
        assert root.get("width") == "397.5mm"
        assert root.get("viewBox") == "0 0 397.5 210"

    def test_path_element(self):
        """Test a path is written with its data and style attributes."""
        surface = DrawingSurface(300, 400)
        surface.append(path_of([Vector(0, 0), Vector(10, 0), Vector(10, 10)], StyleProfile.CUT))

        paths = parse(surface).findall(f"{SVG_NS}path")
        assert len(paths) == 1
        assert paths[0].get("d") == "M 0 0 L10 0 10 10"
        assert paths[0].get("stroke") == "#000000"
        assert paths[0].get("stroke-width") == "0.001mm"
        assert paths[0].get("style") == "fill:none;stroke-width:1.5"

    def test_circle_element(self):
        """Test a circle is written with center, radius and style."""
        surface = DrawingSurface(300, 400)
        surface.append(circle_of(Vector(150, 200), 56.5))

        circles = parse(surface).findall(f"{SVG_NS}circle")
        assert len(circles) == 1
        assert circles[0].get("cx") == "150"
        assert circles[0].get("cy") == "200"
        assert circles[0].get("r") == "56.5"
        assert circles[0].get("stroke") == "#ff0000"

    def test_groups_written_in_first_use_order(self):
        """Test circles come first when a circle was added first."""
        surface = DrawingSurface(300, 400)
        surface.append(circle_of(Vector(5, 5), 2))
        surface.append(path_of([Vector(0, 0), Vector(1, 1)]))

        shape_tags = {f"{SVG_NS}circle", f"{SVG_NS}path"}
        tags = [child.tag for child in parse(surface) if child.tag in shape_tags]
        assert tags == [f"{SVG_NS}circle", f"{SVG_NS}path"]

    def test_serialize_reflects_later_shapes(self):
        """Test serializing repeatedly picks up new shapes."""
        surface = DrawingSurface(300, 400)
        surface.append(path_of([Vector(0, 0), Vector(1, 1)]))
        first = surface.serialize()
        surface.append(path_of([Vector(2, 2), Vector(3, 3)]))
        second = surface.serialize()

        assert first.count("<path") == 1
        assert second.count("<path") == 2

    def test_serialize_declaration(self):
        """Test the document starts with an XML declaration."""
        text = DrawingSurface(10, 10).serialize(pretty=False)
        assert text.startswith("<?xml")


class TestTemplateWriter:
    """Tests for TemplateWriter class."""

    def test_save(self, tmp_path):
        """Test saving writes the serialized surface."""
        surface = DrawingSurface(300, 400)
        surface.append(path_of([Vector(0, 0), Vector(1, 1)]))
        output = tmp_path / "nested" / "template.svg"

        size = TemplateWriter(surface, output).save()

        assert output.exists()
        content = output.read_text(encoding="utf-8")
        assert size == len(content.encode("utf-8"))
        assert "<path" in content

    def test_save_failure_raises(self, tmp_path):
        """Test that an unwritable destination raises TemplateSaveError."""
        surface = DrawingSurface(300, 400)
        with pytest.raises(TemplateSaveError) as exc_info:
            TemplateWriter(surface, tmp_path).save()
        assert exc_info.value.path == str(tmp_path)

    def test_output_path(self):
        """Test output_path property."""
        writer = TemplateWriter(DrawingSurface(1, 1), Path("out.svg"))
        assert writer.output_path == Path("out.svg")

    def test_get_default_path(self):
        """Test default path generation."""
        assert TemplateWriter.get_default_path("cardboard") == Path("cardboard.svg")
        assert TemplateWriter.get_default_path("lantern", "print-once") == Path(
            "lantern-print-once.svg"
        )
        assert TemplateWriter.get_default_path("lantern", "print-five", Path("out")) == Path(
            "out/lantern-print-five.svg"
        )
