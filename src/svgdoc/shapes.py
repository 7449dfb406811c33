"""Example drawables built from svgdoc primitives."""
from __future__ import annotations

import math
from typing import List

from .svg import (
    Circle,
    Document,
    Drawable,
    ObjectContainer,
    Point,
    Polyline,
    StrokeLineCap,
    StrokeLineJoin,
    Text,
    draw_picture,
)

SNOWMAN_FILL = "rgb(240,240,240)"
SNOWMAN_STROKE = "black"


class Triangle(Drawable):
    def __init__(self, p1: Point, p2: Point, p3: Point) -> None:
        self.p1 = p1
        self.p2 = p2
        self.p3 = p3

    def draw(self, container: ObjectContainer) -> None:
        container.add(
            Polyline().add_point(self.p1).add_point(self.p2).add_point(self.p3).add_point(self.p1)
        )


class Star(Drawable):
    """Closed star outline alternating between outer and inner radius."""

    def __init__(self, center: Point, outer_rad: float, inner_rad: float, num_rays: int) -> None:
        self._polyline = _create_star(center, outer_rad, inner_rad, num_rays)

    def draw(self, container: ObjectContainer) -> None:
        container.add(self._polyline)


def _create_star(center: Point, outer_rad: float, inner_rad: float, num_rays: int) -> Polyline:
    polyline = Polyline().set_fill_color("red").set_stroke_color("black")
    for i in range(num_rays + 1):
        angle = 2 * math.pi * (i % num_rays) / num_rays
        polyline.add_point(_polar(center, outer_rad, angle))
        if i == num_rays:
            break
        angle += math.pi / num_rays
        polyline.add_point(_polar(center, inner_rad, angle))
    return polyline


def _polar(center: Point, radius: float, angle: float) -> Point:
    # Angle 0 points up; y grows downward in SVG.
    return Point(center.x + radius * math.sin(angle), center.y - radius * math.cos(angle))


class Snowman(Drawable):
    """Three stacked circles, drawn bottom-up so the head ends on top."""

    HEAD_TO_TORSO_RADIUS_RATIO = 1.5
    HEAD_TO_LEGS_RADIUS_RATIO = 2.0
    TORSO_TO_HEAD_POINT_DELTA = 2.0
    LEGS_TO_TORSO_POINT_DELTA = 3.0

    def __init__(self, head_center: Point, head_radius: float) -> None:
        self.head_center = head_center
        self.head_radius = head_radius

    def draw(self, container: ObjectContainer) -> None:
        x, y, r = self.head_center.x, self.head_center.y, self.head_radius
        torso_y = y + r * self.TORSO_TO_HEAD_POINT_DELTA
        legs_y = torso_y + r * self.LEGS_TO_TORSO_POINT_DELTA

        container.add(_snowball(Point(x, legs_y), r * self.HEAD_TO_LEGS_RADIUS_RATIO))
        container.add(_snowball(Point(x, torso_y), r * self.HEAD_TO_TORSO_RADIUS_RATIO))
        container.add(_snowball(Point(x, y), r))


def _snowball(center: Point, radius: float) -> Circle:
    return (
        Circle()
        .set_fill_color(SNOWMAN_FILL)
        .set_stroke_color(SNOWMAN_STROKE)
        .set_center(center)
        .set_radius(radius)
    )


def demo_picture() -> List[Drawable]:
    return [
        Triangle(Point(100, 20), Point(120, 50), Point(80, 40)),
        Star(Point(50.0, 20.0), 10.0, 4.0, 5),
        Snowman(Point(30, 20), 10.0),
    ]


def demo_document() -> Document:
    """Build the holiday card scene: shapes plus an outlined greeting."""
    doc = Document()
    draw_picture(demo_picture(), doc)

    base_text = (
        Text()
        .set_font_family("Verdana")
        .set_font_size(12)
        .set_position(Point(10, 100))
        .set_data("Happy New Year!")
    )
    doc.add(
        base_text.copy()
        .set_stroke_color("yellow")
        .set_fill_color("yellow")
        .set_stroke_line_join(StrokeLineJoin.ROUND)
        .set_stroke_line_cap(StrokeLineCap.ROUND)
        .set_stroke_width(3)
    )
    doc.add(base_text.copy().set_fill_color("red"))
    return doc


__all__ = ["Snowman", "Star", "Triangle", "demo_document", "demo_picture"]
