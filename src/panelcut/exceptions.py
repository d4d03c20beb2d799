"""Exception hierarchy for Panelcut."""


class PanelcutError(Exception):
    """Base exception for all Panelcut errors."""

    pass


class GeometryError(PanelcutError):
    """Errors in geometric construction."""

    pass


class JointConfigCountError(GeometryError):
    """Number of joint configurations does not match the number of edges."""

    def __init__(self, expected: int, actual: int) -> None:
        self.expected = expected
        self.actual = actual
        super().__init__(
            f"Invalid number of joint configs, expected {expected} but got {actual}"
        )


class DegenerateGeometryError(GeometryError):
    """Requested geometry is too small to be meaningful."""

    def __init__(self, radius: float) -> None:
        self.radius = radius
        super().__init__(f"Radius {radius} is too small for a regular polygon")


class LayoutError(PanelcutError):
    """Template layout settings cannot be drawn."""

    def __init__(self, layout: str, reason: str) -> None:
        self.layout = layout
        self.reason = reason
        super().__init__(f"Cannot lay out '{layout}': {reason}")


class TemplateSaveError(PanelcutError):
    """Error saving a template file."""

    def __init__(self, path: str, reason: str) -> None:
        self.path = path
        self.reason = reason
        super().__init__(f"Failed to save template '{path}': {reason}")
