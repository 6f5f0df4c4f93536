"""
layout.py
---------
Weighted circular layout of the wheel.

Every choice gets a contiguous angular span proportional to its weight,
starting at the current rotation. Each wedge is approximated by a fan of
points (the center plus samples along its arc); the fan is what gets
painted, and the plain average of the fan points is the wedge centroid used
to pick the winner.

All angles are radians and all points are screen coordinates (y grows
downward), so a growing angle turns clockwise on screen.
"""
import math

from constants import (
    FULL_TURN,
    MAX_RANGE_TEXT_LENGTH,
    MAX_TEXT_SIZE,
    MIN_TEXT_SIZE,
    PALETTE,
    STEPS,
    TEXT_CHORD_RATIO,
    TEXT_RADIUS_RATIO,
    TRUNCATION_SUFFIX,
)


class Segment:
    """Everything the presentation layer needs to draw one wedge."""

    def __init__(self, choice, start, end, points, centroid, color, text, font_size, text_anchor):
        self.choice_id = choice.id
        self.label = choice.label
        self.weight = choice.weight
        self.start = start
        self.end = end
        self.points = points
        self.centroid = centroid
        self.color = color
        self.text = text
        self.font_size = font_size
        self.text_anchor = text_anchor

    @property
    def span(self):
        return self.end - self.start

    @property
    def text_angle(self):
        return self.start + self.span / 2

    def __repr__(self):
        return (
            f"Segment(choice_id={self.choice_id}, span={self.span:.4f}, "
            f"centroid=({self.centroid[0]:.1f}, {self.centroid[1]:.1f}))"
        )


def total_weight(choices):
    return sum(choice.weight for choice in choices)


def segment_spans(choices, rotation):
    """Return the (start, end) angle of every choice, in registry order."""
    total = total_weight(choices)
    angle_step = FULL_TURN / total

    spans = []
    last_angle = rotation
    for choice in choices:
        start_angle = last_angle
        end_angle = start_angle + angle_step * choice.weight
        spans.append((start_angle, end_angle))
        last_angle = end_angle
    return spans


def arc_steps(weight, total):
    """Share of the global sampling budget given to one wedge (at least 1)."""
    return max(1, STEPS * weight // total)


def wedge_points(center, radius, start, end, steps):
    """Center of the wheel followed by ``steps + 1`` points along the arc."""
    cx, cy = center
    points = [(cx, cy)]
    for j in range(steps + 1):
        angle = start + (j / steps) * (end - start)
        points.append((cx + radius * math.cos(angle), cy + radius * math.sin(angle)))
    return points


def wedge_centroid(points):
    # Mean of the fan, not the analytic sector centroid
    x_sum = sum(p[0] for p in points)
    y_sum = sum(p[1] for p in points)
    return (x_sum / len(points), y_sum / len(points))


def distance(a, b):
    return math.hypot(a[0] - b[0], a[1] - b[1])


def segment_color_index(index, count):
    """Palette index for segment ``index`` of ``count``.

    When the count leaves exactly one segment past a full palette cycle, the
    last segment would share the first one's color across the seam, so it
    skips ahead by one.
    """
    color_index = index
    if count % len(PALETTE) == 1 and index + 1 == count:
        color_index += 1
    return color_index % len(PALETTE)


def truncate_label(text):
    if len(text) > MAX_RANGE_TEXT_LENGTH:
        return text[:MAX_RANGE_TEXT_LENGTH] + TRUNCATION_SUFFIX
    return text


def estimate_text_size(text, size):
    """Rough text box for a proportional font, used when no renderer is attached."""
    return (len(text) * size * 0.55, size * 1.2)


def fit_label(label, radius, chord, measure_text=None):
    """Return the label text to draw and the largest font size that fits.

    The text must fit in ``TEXT_RADIUS_RATIO`` of the radius by width and in
    ``TEXT_CHORD_RATIO`` of the wedge chord by height. The size never goes
    below ``MIN_TEXT_SIZE``, even if the text still overflows.
    """
    measure_text = measure_text or estimate_text_size
    text = truncate_label(label)

    text_radius = radius * TEXT_RADIUS_RATIO
    # A single choice has both arc ends on the same spot
    real_width = radius if chord < 1.0 else chord

    font_size = MAX_TEXT_SIZE
    while True:
        width, height = measure_text(text, font_size)
        if (width <= text_radius and height <= real_width * TEXT_CHORD_RATIO) or font_size <= MIN_TEXT_SIZE:
            break
        font_size -= 1
    return text, font_size


def update_centroids(choices, rotation, radius, center):
    """Recompute every choice's centroid without doing any text work."""
    if not choices:
        return
    total = total_weight(choices)
    for choice, (start, end) in zip(choices, segment_spans(choices, rotation)):
        points = wedge_points(center, radius, start, end, arc_steps(choice.weight, total))
        choice.centroid = wedge_centroid(points)


def lay_out(choices, rotation, radius, center, measure_text=None):
    """Compute the drawable segments for ``choices``.

    Also stores each choice's centroid, which is what winner selection reads.
    An empty list of choices gives an empty layout.
    """
    if not choices:
        return []

    total = total_weight(choices)
    count = len(choices)
    cx, cy = center

    segments = []
    for i, (choice, (start, end)) in enumerate(zip(choices, segment_spans(choices, rotation))):
        points = wedge_points(center, radius, start, end, arc_steps(choice.weight, total))
        centroid = wedge_centroid(points)
        choice.centroid = centroid

        chord = distance(points[1], points[-1])
        text, font_size = fit_label(choice.label, radius, chord, measure_text)

        text_angle = start + (end - start) / 2
        text_radius = radius * TEXT_RADIUS_RATIO
        text_anchor = (cx + text_radius * math.cos(text_angle), cy + text_radius * math.sin(text_angle))

        segments.append(Segment(
            choice, start, end, points, centroid,
            PALETTE[segment_color_index(i, count)],
            text, font_size, text_anchor,
        ))
    return segments


def pointer_position(center, radius):
    """The fixed pointer sits due east of the wheel, whatever the rotation."""
    return (center[0] + radius, center[1])


def nearest_choice(choices, point):
    """Choice whose centroid is closest to ``point``; ties go to the first one."""
    winner = None
    min_distance = None
    for choice in choices:
        new_distance = distance(choice.centroid, point)
        if min_distance is None or new_distance < min_distance:
            min_distance = new_distance
            winner = choice
    return winner
