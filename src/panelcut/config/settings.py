"""Configuration settings for Panelcut."""

from enum import Enum
from pathlib import Path
from typing import Literal

from pydantic import BaseModel, ConfigDict, Field

LogLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR"]


class LanternMode(str, Enum):
    """Which set of lantern parts to lay out."""

    PRINT_ONCE = "print-once"
    PRINT_FIVE = "print-five"


class JointConfig(BaseModel):
    """Finger-joint settings for a single polygon edge.

    The pattern alternates a baseline segment of ``tooth_width`` with an
    excursion of ``gap_width`` pushed ``depth`` away from the edge.
    """

    model_config = ConfigDict(frozen=True)

    tooth_width: float = Field(
        gt=0.0,
        description="Length of each baseline segment",
    )
    gap_width: float | None = Field(
        default=None,
        gt=0.0,
        description="Length of each notch (None = same as tooth_width)",
    )
    depth: float = Field(
        description="Protrusion distance of the notch",
    )
    angle_degrees: float = Field(
        default=90.0,
        description="Protrusion angle relative to the edge direction",
    )
    reversed: bool = Field(
        default=False,
        description="Start the pattern from the far end of the edge",
    )
    no_gap: bool = Field(
        default=False,
        description="Emit one extra tooth and shift back so teeth sit flush",
    )

    @property
    def gap(self) -> float:
        """Notch length with the default applied."""
        return self.gap_width if self.gap_width is not None else self.tooth_width

    @property
    def period(self) -> float:
        """Distance between consecutive tooth starts."""
        return self.tooth_width + self.gap


class LanternConfig(BaseModel):
    """Configuration for the laser-cut lantern template.

    All lengths are in millimeters.
    """

    mode: LanternMode = Field(
        default=LanternMode.PRINT_ONCE,
        description="Which set of parts to lay out",
    )
    canvas_width: float = Field(default=300.0, gt=0.0, description="Sheet width")
    canvas_height: float = Field(default=400.0, gt=0.0, description="Sheet height")
    central_circle_radius: float = Field(
        default=113 / 2,
        description="Radius of the hole in base and top plates (<= 0 omits it)",
    )
    plate_width: float = Field(
        default=3.0,
        gt=0.0,
        description="Material thickness",
    )
    tooth_width: float = Field(default=3.1, gt=0.0, description="Finger width")
    gap_width: float = Field(default=2.9, gt=0.0, description="Notch width between fingers")
    depth: float = Field(default=3.0, gt=0.0, description="Finger depth")
    crown_connect_width: float = Field(
        default=5.0,
        gt=0.0,
        description="Length of the slots holding the crown plates",
    )
    small_hole_radius: float = Field(
        default=7.5,
        description="Radius of the hole in the end plates",
    )
    base_plate_length: float = Field(
        default=150 - 21 * 2,
        gt=10.0,
        description="Edge length of the pentagonal base plate",
    )
    top_plate_length: float = Field(
        default=93.0,
        gt=10.0,
        description="Edge length of the pentagonal top plate",
    )
    papercraft: bool = Field(
        default=False,
        description="Draw straight edges instead of finger joints",
    )

    def joint(self, **overrides: object) -> JointConfig:
        """Build the standard finger joint, optionally overriding fields."""
        values: dict[str, object] = {
            "tooth_width": self.tooth_width,
            "gap_width": self.gap_width,
            "depth": self.depth,
        }
        values.update(overrides)
        return JointConfig(**values)


class CardboardConfig(BaseModel):
    """Configuration for the foldable cardboard lantern.

    Diameters are the circumradii of the regular polygons at the base, the
    widest ring and the top. Heights are measured vertically.
    """

    canvas_width: float = Field(default=397.0, gt=0.0, description="Sheet width")
    canvas_height: float = Field(default=210.0, gt=0.0, description="Sheet height")
    number_of_sides: int = Field(default=5, ge=3, le=12, description="Number of side panels")
    base_diameter: float = Field(default=70.0, gt=0.0)
    mid_diameter: float = Field(default=100.0, gt=0.0)
    base_to_mid_height: float = Field(
        default=125.0,
        gt=0.0,
        description="Vertical distance from the base plate to the widest ring",
    )
    top_diameter: float = Field(default=75.0, gt=0.0)
    mid_to_top_height: float = Field(
        default=50.0,
        gt=0.0,
        description="Vertical distance from the widest ring to the top",
    )
    minirect_width: float = Field(
        default=15.0,
        gt=0.0,
        description="Height of the crown base strip",
    )
    crown_height: float = Field(default=40.0, gt=0.0)
    origin_x: float = Field(default=10.0, description="Layout offset on the sheet")
    origin_y: float = Field(default=62.0, description="Layout offset on the sheet")

    @classmethod
    def a4(cls) -> "CardboardConfig":
        """Preset that fits a landscape A4 sheet."""
        return cls(
            number_of_sides=5,
            base_diameter=35,
            mid_diameter=47,
            base_to_mid_height=70,
            top_diameter=40,
            mid_to_top_height=25,
            minirect_width=10,
            crown_height=20,
        )


class LoggingConfig(BaseModel):
    """Logging configuration."""

    log_file: Path | None = Field(
        default=None,
        description="Path to log file",
    )
    log_level: LogLevel = Field(
        default="WARNING",
        description="Console log level",
    )
    file_log_level: LogLevel = Field(
        default="DEBUG",
        description="File log level (more verbose)",
    )


class PanelcutSettings(BaseModel):
    """Main application settings."""

    lantern: LanternConfig = Field(default_factory=LanternConfig)
    cardboard: CardboardConfig = Field(default_factory=CardboardConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)


def get_default_settings() -> PanelcutSettings:
    """Get default application settings."""
    return PanelcutSettings()
