"""Public API for svgdoc."""
from .svg import (
    NONE_COLOR,
    Circle,
    Color,
    Document,
    Drawable,
    Object,
    ObjectContainer,
    PathProps,
    Point,
    Polyline,
    RenderContext,
    Rgb,
    Rgba,
    StrokeLineCap,
    StrokeLineJoin,
    SvgdocError,
    Text,
    UnsetColorError,
    draw_picture,
    escape_text,
    format_color,
)

__all__ = [
    "Circle",
    "Color",
    "Document",
    "Drawable",
    "NONE_COLOR",
    "Object",
    "ObjectContainer",
    "PathProps",
    "Point",
    "Polyline",
    "RenderContext",
    "Rgb",
    "Rgba",
    "StrokeLineCap",
    "StrokeLineJoin",
    "SvgdocError",
    "Text",
    "UnsetColorError",
    "draw_picture",
    "escape_text",
    "format_color",
]
