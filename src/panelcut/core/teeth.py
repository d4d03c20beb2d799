"""Finger-joint ("teeth") generation along polygon edges.

Two panels are joined by cutting matching tooth patterns into their edges.
Along a jointed edge the outline alternates between a baseline segment of
``tooth_width`` and a notch of ``gap_width`` pushed ``depth`` away from the
edge:

    A----B        A----B        E
         |        |    |
         C--------D    C-- ...

Per tooth ``j`` with period ``P = tooth_width + gap_width``:
- A = start + m * (j * P)
- B = start + m * (j * P + tooth_width)
- C = B + p * depth
- D = C + m * gap_width
where ``m`` is the unit edge direction and ``p`` is ``m`` rotated by the
joint angle. Only whole periods are laid out (``floor(length / P)``); the
remainder of the edge stays straight.

Key functions:
- apply_teeth: Replace configured edges of a polyline by tooth patterns
- edge_teeth: Tooth pattern for a single edge
- tooth_spans: Start/end points of each tooth, for placing separate slots
"""

import logging
import math
from collections.abc import Sequence
from dataclasses import dataclass

from panelcut.config import JointConfig
from panelcut.domain import ORIGIN, Vector
from panelcut.exceptions import JointConfigCountError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class _EdgeFrame:
    """Resolved geometry of one jointed edge.

    ``start``/``end`` are already swapped for reversed joints, and
    ``shift`` moves every pattern point back by one tooth for no-gap joints.
    """

    start: Vector
    end: Vector
    direction: Vector
    protrusion: Vector
    tooth_width: float
    gap_width: float
    depth: float
    iterations: int
    shift: Vector

    @property
    def period(self) -> float:
        return self.tooth_width + self.gap_width

    def at(self, offset: float) -> Vector:
        """Baseline point ``offset`` along the edge, shifted."""
        return self.start.add(self.direction.scale(offset)).add(self.shift)

    def tooth(self, j: int) -> list[Vector]:
        """The four corner points A, B, C, D of tooth ``j``."""
        segment_start = self.at(j * self.period)
        segment_stop = self.at(j * self.period + self.tooth_width)
        perp_start = segment_stop.add(self.protrusion.scale(self.depth))
        perp_end = perp_start.add(self.direction.scale(self.gap_width))
        return [segment_start, segment_stop, perp_start, perp_end]

    def closer(self, j: int) -> Vector:
        """Baseline point where tooth ``j``'s period ends."""
        return self.at((j + 1) * self.period)


def _edge_frame(start: Vector, end: Vector, config: JointConfig) -> _EdgeFrame:
    if config.reversed:
        start, end = end, start

    length = start.distance(end)
    direction = end.sub(start).scale(1 / length)
    degrees = -config.angle_degrees if config.reversed else config.angle_degrees

    iterations = math.floor(length / config.period)
    if config.no_gap:
        iterations += 1

    return _EdgeFrame(
        start=start,
        end=end,
        direction=direction,
        protrusion=direction.rotate(degrees),
        tooth_width=config.tooth_width,
        gap_width=config.gap,
        depth=config.depth,
        iterations=iterations,
        shift=direction.scale(-config.tooth_width) if config.no_gap else ORIGIN,
    )


def _plain_teeth(frame: _EdgeFrame) -> list[Vector]:
    points: list[Vector] = []
    for j in range(frame.iterations):
        points.extend(frame.tooth(j))
    if frame.iterations > 0:
        points.append(frame.closer(frame.iterations - 1))
    points.append(frame.end)
    return points


def _reversed_teeth(frame: _EdgeFrame) -> list[Vector]:
    points: list[Vector] = []
    for j in range(frame.iterations):
        points.extend(frame.tooth(j))
        points.append(frame.closer(j))
    points.extend([frame.end, frame.end])
    points.reverse()
    return points


def _no_gap_teeth(frame: _EdgeFrame) -> list[Vector]:
    # The shifted edge end would overshoot the vertex, so it is left out.
    points: list[Vector] = []
    for j in range(frame.iterations):
        points.extend(frame.tooth(j))
    points.append(frame.closer(frame.iterations - 1))
    return points


def _reversed_no_gap_teeth(frame: _EdgeFrame) -> list[Vector]:
    # Tooth 0 starts one tooth before the vertex; its B point is the vertex.
    points: list[Vector] = []
    for j in range(frame.iterations):
        points.extend(frame.tooth(j))
        points.append(frame.closer(j))
    del points[0]
    points.reverse()
    return points


def edge_teeth(start: Vector, end: Vector, config: JointConfig) -> list[Vector]:
    """Build the tooth pattern for the edge ``start`` -> ``end``.

    The returned points always run in the original edge direction, even for
    reversed joints. The edge must not have zero length.

    Args:
        start: Edge start
        end: Edge end
        config: Joint settings

    Returns:
        Pattern points, starting at (or just before) ``start``
    """
    frame = _edge_frame(start, end, config)

    if config.reversed and config.no_gap:
        return _reversed_no_gap_teeth(frame)
    if config.reversed:
        return _reversed_teeth(frame)
    if config.no_gap:
        return _no_gap_teeth(frame)
    return _plain_teeth(frame)


def apply_teeth(
    points: Sequence[Vector], configs: Sequence[JointConfig | None]
) -> list[Vector]:
    """Replace configured edges of a polyline by finger-joint patterns.

    Edges without a config are passed through as straight lines.

    Args:
        points: Polyline vertices
        configs: One entry per edge (``len(points) - 1``); None = straight

    Returns:
        New polyline

    Raises:
        JointConfigCountError: If the number of configs does not match the
            number of edges

    Examples:
        >>> square = [Vector(0, 0), Vector(60, 0), Vector(60, 60), Vector(0, 0)]
        >>> joint = JointConfig(tooth_width=10, depth=3)
        >>> len(apply_teeth(square, [joint, None, None]))
        16
    """
    if len(configs) != len(points) - 1:
        raise JointConfigCountError(len(points) - 1, len(configs))

    result: list[Vector] = []
    for i in range(1, len(points)):
        start = points[i - 1]
        end = points[i]
        config = configs[i - 1]

        if config is None:
            if i == 1:
                result.append(start)
            result.append(end)
            continue

        pattern = edge_teeth(start, end, config)
        logger.debug("Edge %d: %d pattern points", i - 1, len(pattern))
        result.extend(pattern)

    return result


def tooth_spans(
    start: Vector,
    end: Vector,
    tooth_width: float,
    gap_width: float | None = None,
    no_gap: bool = False,
) -> list[tuple[Vector, Vector]]:
    """Find where each tooth of a joint along ``start`` -> ``end`` sits.

    Uses the same period and tooth count as :func:`edge_teeth`, but returns
    one ``(tooth_start, tooth_end)`` pair per tooth instead of an outline.
    Each span covers the last ``tooth_width`` of its period.

    Args:
        start: Edge start
        end: Edge end
        tooth_width: Length of each span
        gap_width: Space before each span (None = same as tooth_width)
        no_gap: Add one more span, as for no-gap joints

    Returns:
        List of (tooth_start, tooth_end) pairs
    """
    gap = gap_width if gap_width is not None else tooth_width
    period = tooth_width + gap
    length = start.distance(end)

    iterations = math.floor(length / period)
    if no_gap:
        iterations += 1

    direction = end.sub(start).scale(1 / length)
    spans: list[tuple[Vector, Vector]] = []
    for j in range(iterations):
        span_start = start.add(direction.scale(j * period + gap))
        span_stop = start.add(direction.scale((j + 1) * period))
        spans.append((span_start, span_stop))

    return spans
