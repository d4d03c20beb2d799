"""Integration tests for the template layouts and the generator."""

import math
import xml.etree.ElementTree as ET

import pytest

from panelcut.config import (
    CardboardConfig,
    LanternConfig,
    LanternMode,
    LoggingConfig,
    PanelcutSettings,
)
from panelcut.core import CardboardLayout, LanternLayout, TemplateGenerator, TemplateKind
from panelcut.core.regularoid import edge_length_for_sides
from panelcut.domain import ORIGIN, StyleProfile, Vector
from panelcut.exceptions import LayoutError

SVG_NS = "{http://www.w3.org/2000/svg}"

# Base plate slots per side: floor((108 + 0.1) / (3.1 + 2.9))
BASE_SLOTS_PER_SIDE = 18


class TestLanternLayout:
    """Tests for the laser-cut lantern."""

    def test_print_once_parts(self):
        """Test print-once lays out the plates that are cut once."""
        layout = LanternLayout(LanternConfig())
        surface = layout.build()

        assert layout.parts == ["base_plate", "top_plate", "end_plate", "end_plate"]
        assert len(surface.shapes("circle")) == 4
        # base: outline, slots, crown slots; top: outline, crown slots; two end plates
        expected_paths = (1 + 5 * BASE_SLOTS_PER_SIDE + 10) + (1 + 10) + 2
        assert len(surface.shapes("path")) == expected_paths

    def test_print_five_parts(self):
        """Test print-five lays out the parts cut once per side."""
        layout = LanternLayout(LanternConfig(mode=LanternMode.PRINT_FIVE))
        surface = layout.build()

        assert layout.parts == [
            "top_rect",
            "main_plate",
            "triangle",
            "triangle",
            "crown_plate",
            "crown_plate",
        ]
        assert len(surface.shapes("path")) == 6
        assert surface.shapes("circle") == []

    def test_top_rect_starts_at_offset(self):
        """Test the top rectangle's straight first edge is passed through."""
        surface = LanternLayout(LanternConfig(mode=LanternMode.PRINT_FIVE)).build()
        top_rect = surface.shapes("path")[0]

        assert top_rect.points[0].is_close(Vector(28.5, 0))
        assert top_rect.points[1].is_close(Vector(28.5, 66))

    def test_build_is_repeatable(self):
        """Test building twice yields the same shapes."""
        layout = LanternLayout(LanternConfig())
        first = layout.build().shapes()
        second = layout.build().shapes()

        assert first == second
        assert len(layout.parts) == 4

    def test_no_central_hole(self):
        """Test a zero hole radius leaves only the end plate holes."""
        surface = LanternLayout(LanternConfig(central_circle_radius=0)).build()
        circles = surface.shapes("circle")

        assert len(circles) == 2
        assert all(c.radius == 7.5 for c in circles)

    def test_hole_overlapping_crown_slots(self):
        """Test an oversized central hole is rejected."""
        with pytest.raises(LayoutError) as exc_info:
            LanternLayout(LanternConfig(central_circle_radius=60)).build()
        assert exc_info.value.layout == "lantern"

    def test_papercraft_top_plate_is_plain(self):
        """Test papercraft mode draws the top plate without teeth."""
        toothed = LanternLayout(LanternConfig())
        toothed.add_top_plate(ORIGIN, 93)
        plain = LanternLayout(LanternConfig(papercraft=True))
        plain.add_top_plate(ORIGIN, 93)

        assert len(plain.surface.shapes("path")[0].points) == 6
        assert len(toothed.surface.shapes("path")[0].points) > 6

    def test_top_plate_teeth_depth(self):
        """Test the top plate fingers reach one and a half plate widths out."""
        layout = LanternLayout(LanternConfig())
        layout.add_top_plate(ORIGIN, 93)
        outline = layout.surface.shapes("path")[0].points
        center = layout.surface.shapes("circle")[0].center
        apothem_outer = 93 / (2 * math.tan(math.pi / 5))

        farthest = max(_distance_to_edges(p, center) for p in outline)
        assert farthest == pytest.approx(apothem_outer + 4.5, abs=1e-6)

    def test_crown_plate_length(self):
        """Test the crown plate is shorter than the ring edge it sits on."""
        layout = LanternLayout(LanternConfig())
        length = layout.crown_plate_length(93)

        assert 0 < length < 93 - 10
        assert length == pytest.approx(83 - 2 * math.sin(2 * math.pi / 5))

    def test_all_points_finite(self):
        """Test no layout produces NaN coordinates."""
        for mode in LanternMode:
            surface = LanternLayout(LanternConfig(mode=mode)).build()
            for shape in surface.shapes("path"):
                assert all(math.isfinite(p.x) and math.isfinite(p.y) for p in shape.points)


def _distance_to_edges(point: Vector, center: Vector) -> float:
    """Largest projection of a point onto the pentagon's edge normals."""
    offset = point.sub(center)
    normals = [Vector(0, -1).rotate(-72 * i) for i in range(5)]
    return max(offset.x * n.x + offset.y * n.y for n in normals)


class TestCardboardLayout:
    """Tests for the foldable cardboard lantern."""

    @pytest.mark.parametrize("sides", [5, 6])
    def test_parts_and_paths(self, sides):
        """Test one strip per side plus the two plates."""
        layout = CardboardLayout(CardboardConfig(number_of_sides=sides))
        surface = layout.build()

        assert layout.parts.count("side") == sides
        assert layout.parts.count("top_plate") == 1
        assert layout.parts.count("bottom_plate") == 1
        assert len(surface.shapes("path")) == 13 * sides - 4
        assert surface.shapes("circle") == []

    def test_uses_cut_and_fold_lines(self):
        """Test slits are cut and strips are folded."""
        surface = CardboardLayout(CardboardConfig.a4()).build()
        styles = [shape.style for shape in surface.shapes()]

        assert styles.count(StyleProfile.CUT) == 5 * 5 - 3
        assert StyleProfile.FOLD in styles

    def test_plate_rotation(self):
        """Test strips lean by the slope of the front bottom trapezoid."""
        config = CardboardConfig.a4()
        layout = CardboardLayout(config)
        width = layout.mid_width - edge_length_for_sides(5, config.base_diameter)
        expected = math.degrees(math.atan(width / layout.bottom_plate_height()))

        assert layout.plate_rotation() == pytest.approx(expected)
        assert 0 < layout.plate_rotation() < 90

    def test_slanted_heights(self):
        """Test slanted heights follow the diameter differences."""
        layout = CardboardLayout(CardboardConfig.a4())
        assert layout.bottom_plate_height() == pytest.approx(math.hypot(12, 70))
        assert layout.top_plate_height() == pytest.approx(math.hypot(7, 25))

    def test_bottom_plate_meets_front_bottom(self):
        """Test the bottom plate's first edge is the front bottom's lower edge."""
        layout = CardboardLayout(CardboardConfig())
        bottom = layout.bottom_plate()
        front = layout.front_plate_bottom()

        assert bottom[0].is_close(front[3])
        assert bottom[1].is_close(front[2])

    def test_top_plate_meets_crown_plate(self):
        """Test the top plate, moved up by the crown base, sits on the crown plate."""
        config = CardboardConfig()
        layout = CardboardLayout(config)
        top = [v.add_xy(0, -config.minirect_width) for v in layout.top_plate()]
        crown = layout.crown_plate()

        assert top[0].is_close(crown[3])
        assert top[1].is_close(crown[2])

    def test_crown_base_joins_front_top(self):
        """Test the crown base starts on the front top's upper edge."""
        layout = CardboardLayout(CardboardConfig())
        crown_base = layout.crown_base()
        front_top = layout.front_plate_top()

        assert crown_base[0].is_close(front_top[2])
        assert crown_base[1].is_close(front_top[3])

    def test_degenerate_crown_rejected(self):
        """Test a crown ring without size is rejected."""
        config = CardboardConfig(top_diameter=15, minirect_width=15)
        with pytest.raises(LayoutError) as exc_info:
            CardboardLayout(config).build()
        assert exc_info.value.layout == "cardboard"


class TestTemplateGenerator:
    """Tests for TemplateGenerator class."""

    def test_generate_lantern(self, tmp_path):
        """Test generating the lantern writes a parseable SVG."""
        output = tmp_path / "lantern.svg"
        stats = TemplateGenerator(PanelcutSettings()).generate(TemplateKind.LANTERN, output)

        assert output.exists()
        assert stats.layout == "lantern"
        assert stats.bytes_written == output.stat().st_size
        assert stats.circle_count == 4
        assert stats.shape_count == stats.path_count + 4
        assert stats.duration_seconds >= 0

        root = ET.parse(output).getroot()
        assert root.get("width") == "300mm"
        assert len(root.findall(f"{SVG_NS}path")) == stats.path_count

    def test_generate_cardboard(self, tmp_path):
        """Test generating the cardboard template."""
        output = tmp_path / "cardboard.svg"
        settings = PanelcutSettings(cardboard=CardboardConfig.a4())
        stats = TemplateGenerator(settings).generate(TemplateKind.CARDBOARD, output)

        assert stats.path_count == 61
        assert len(stats.parts) == 7
        assert ET.parse(output).getroot().get("height") == "210mm"

    def test_build_without_writing(self, tmp_path):
        """Test build returns the surface and part names."""
        surface, parts = TemplateGenerator(PanelcutSettings()).build(TemplateKind.CARDBOARD)
        assert len(surface) == 61
        assert "bottom_plate" in parts

    def test_layout_error_propagates(self, tmp_path):
        """Test layout errors are raised to the caller."""
        settings = PanelcutSettings(lantern=LanternConfig(central_circle_radius=60))
        with pytest.raises(LayoutError):
            TemplateGenerator(settings).generate(TemplateKind.LANTERN, tmp_path / "x.svg")
        assert not (tmp_path / "x.svg").exists()

    def test_log_file(self, tmp_path):
        """Test generation events are written to the log file."""
        log_file = tmp_path / "run.log"
        settings = PanelcutSettings(logging=LoggingConfig(log_file=log_file))
        TemplateGenerator(settings).generate(TemplateKind.LANTERN, tmp_path / "lantern.svg")

        assert "Layout built" in log_file.read_text(encoding="utf-8")

    def test_default_output_path(self):
        """Test default file names include the lantern mode."""
        settings = PanelcutSettings(lantern=LanternConfig(mode=LanternMode.PRINT_FIVE))
        generator = TemplateGenerator(settings)

        assert generator.default_output_path(TemplateKind.LANTERN).name == "lantern-print-five.svg"
        assert generator.default_output_path(TemplateKind.CARDBOARD).name == "cardboard.svg"
