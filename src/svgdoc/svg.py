"""Object model and serializer for flat SVG documents."""
from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from copy import deepcopy
from dataclasses import dataclass
from enum import Enum
from io import StringIO
from typing import Iterable, List, Optional, TextIO, TypeVar, Union

logger = logging.getLogger(__name__)

XML_DECLARATION = '<?xml version="1.0" encoding="UTF-8" ?>'
SVG_OPEN_TAG = '<svg xmlns="http://www.w3.org/2000/svg" version="1.1">'
SVG_CLOSE_TAG = "</svg>"

DOCUMENT_INDENT = 2
DOCUMENT_INDENT_STEP = 2


class SvgdocError(ValueError):
    """Base class for errors raised by svgdoc."""


class UnsetColorError(SvgdocError):
    """Raised when an unset color reaches the formatter."""


@dataclass(frozen=True)
class Point:
    x: float = 0.0
    y: float = 0.0


@dataclass(frozen=True)
class Rgb:
    red: int = 0
    green: int = 0
    blue: int = 0


@dataclass(frozen=True)
class Rgba:
    red: int = 0
    green: int = 0
    blue: int = 0
    opacity: float = 1.0


# None is the unset case, str a color keyword.
Color = Union[None, str, Rgb, Rgba]

NONE_COLOR: Color = "none"


def format_color(color: Color) -> str:
    """Return the attribute value for ``color``.

    Named colors are emitted verbatim; they are trusted keywords and are not
    escaped. An unset color has no textual form and raises UnsetColorError.
    """
    if color is None:
        raise UnsetColorError("unset color cannot be serialized")
    if isinstance(color, str):
        return color
    if isinstance(color, Rgba):
        return f"rgba({color.red},{color.green},{color.blue},{_fmt(color.opacity)})"
    if isinstance(color, Rgb):
        return f"rgb({color.red},{color.green},{color.blue})"
    raise TypeError(f"unsupported color value: {color!r}")


class StrokeLineCap(Enum):
    BUTT = "butt"
    ROUND = "round"
    SQUARE = "square"

    def __str__(self) -> str:
        return self.value


class StrokeLineJoin(Enum):
    ARCS = "arcs"
    BEVEL = "bevel"
    MITER = "miter"
    MITER_CLIP = "miter-clip"
    ROUND = "round"

    def __str__(self) -> str:
        return self.value


_ESCAPES = str.maketrans(
    {
        '"': "&quot;",
        "'": "&apos;",
        "`": "&apos;",
        "<": "&lt;",
        ">": "&gt;",
        "&": "&amp;",
    }
)


def escape_text(text: str) -> str:
    """Escape markup-significant characters in text content."""
    return text.translate(_ESCAPES)


def _fmt(value: float) -> str:
    # Shortest general form with six significant digits: 10.0 -> "10", 1e7 -> "1e+07".
    return f"{value:g}"


@dataclass
class RenderContext:
    """Output sink plus indentation state for one render pass."""

    out: TextIO
    indent_step: int = 0
    indent: int = 0

    def indented(self) -> "RenderContext":
        return RenderContext(self.out, self.indent_step, self.indent + self.indent_step)

    def render_indent(self) -> None:
        self.out.write(" " * self.indent)


class Object(ABC):
    """Base class for every element that can be stored in a document.

    ``render`` fixes the line layout (indent, tag, newline); subclasses only
    supply the tag itself through ``_render_object``.
    """

    def render(self, context: RenderContext) -> None:
        context.render_indent()
        self._render_object(context)
        context.out.write("\n")

    def copy(self: _O) -> _O:
        return deepcopy(self)

    @abstractmethod
    def _render_object(self, context: RenderContext) -> None:
        raise NotImplementedError


_O = TypeVar("_O", bound=Object)
_P = TypeVar("_P", bound="PathProps")


class PathProps:
    """Fill and stroke attributes shared by all primitives."""

    def __init__(self) -> None:
        self._fill_color: Color = None
        self._stroke_color: Color = None
        self._stroke_width: Optional[float] = None
        self._stroke_line_cap: Optional[StrokeLineCap] = None
        self._stroke_line_join: Optional[StrokeLineJoin] = None

    def set_fill_color(self: _P, color: Color) -> _P:
        self._fill_color = color
        return self

    def set_stroke_color(self: _P, color: Color) -> _P:
        self._stroke_color = color
        return self

    def set_stroke_width(self: _P, width: float) -> _P:
        self._stroke_width = width
        return self

    def set_stroke_line_cap(self: _P, line_cap: StrokeLineCap) -> _P:
        self._stroke_line_cap = line_cap
        return self

    def set_stroke_line_join(self: _P, line_join: StrokeLineJoin) -> _P:
        self._stroke_line_join = line_join
        return self

    def render_attrs(self, out: TextIO) -> None:
        if self._fill_color is not None:
            out.write(f'fill="{format_color(self._fill_color)}" ')
        if self._stroke_color is not None:
            out.write(f'stroke="{format_color(self._stroke_color)}" ')
        if self._stroke_width is not None:
            out.write(f'stroke-width="{_fmt(self._stroke_width)}" ')
        if self._stroke_line_cap is not None:
            out.write(f'stroke-linecap="{self._stroke_line_cap}" ')
        if self._stroke_line_join is not None:
            out.write(f'stroke-linejoin="{self._stroke_line_join}" ')


class Circle(Object, PathProps):
    """The <circle> element."""

    def __init__(self) -> None:
        super().__init__()
        self._center = Point()
        self._radius = 1.0

    def set_center(self, center: Point) -> "Circle":
        self._center = center
        return self

    def set_radius(self, radius: float) -> "Circle":
        self._radius = radius
        return self

    def _render_object(self, context: RenderContext) -> None:
        out = context.out
        out.write(f'<circle cx="{_fmt(self._center.x)}" cy="{_fmt(self._center.y)}" ')
        out.write(f'r="{_fmt(self._radius)}" ')
        self.render_attrs(out)
        out.write("/>")


class Polyline(Object, PathProps):
    """The <polyline> element."""

    def __init__(self) -> None:
        super().__init__()
        self._points: List[Point] = []

    def add_point(self, point: Point) -> "Polyline":
        self._points.append(point)
        return self

    def _render_object(self, context: RenderContext) -> None:
        out = context.out
        points = " ".join(f"{_fmt(p.x)},{_fmt(p.y)}" for p in self._points)
        out.write(f'<polyline points="{points}" ')
        self.render_attrs(out)
        out.write("/>")


class Text(Object, PathProps):
    """The <text> element.

    Content, font family and weight are stored raw and escaped each time the
    element is rendered.
    Font family and weight are omitted while empty.
    """

    def __init__(self) -> None:
        super().__init__()
        self._position = Point()
        self._offset = Point()
        self._font_size = 1
        self._font_family = ""
        self._font_weight = ""
        self._data = ""

    def set_position(self, pos: Point) -> "Text":
        self._position = pos
        return self

    def set_offset(self, offset: Point) -> "Text":
        self._offset = offset
        return self

    def set_font_size(self, size: int) -> "Text":
        self._font_size = size
        return self

    def set_font_family(self, font_family: str) -> "Text":
        self._font_family = font_family
        return self

    def set_font_weight(self, font_weight: str) -> "Text":
        self._font_weight = font_weight
        return self

    def set_data(self, data: str) -> "Text":
        self._data = data
        return self

    def _render_object(self, context: RenderContext) -> None:
        out = context.out
        out.write(
            f'<text x="{_fmt(self._position.x)}" y="{_fmt(self._position.y)}" '
            f'dx="{_fmt(self._offset.x)}" dy="{_fmt(self._offset.y)}" '
            f'font-size="{int(self._font_size)}" '
        )
        if self._font_family:
            out.write(f'font-family="{escape_text(self._font_family)}" ')
        if self._font_weight:
            out.write(f'font-weight="{escape_text(self._font_weight)}" ')
        self.render_attrs(out)
        out.write(">")
        out.write(escape_text(self._data))
        out.write("</text>")


class ObjectContainer(ABC):
    """Write-only collection of owned objects."""

    def add(self, obj: Object) -> None:
        # Containers own their objects; later edits to ``obj`` must not leak in.
        self.add_object(deepcopy(obj))

    @abstractmethod
    def add_object(self, obj: Object) -> None:
        raise NotImplementedError


class Drawable(ABC):
    """Anything that can draw itself into an ObjectContainer."""

    @abstractmethod
    def draw(self, container: ObjectContainer) -> None:
        raise NotImplementedError


def draw_picture(drawables: Iterable[Drawable], target: ObjectContainer) -> None:
    for drawable in drawables:
        drawable.draw(target)


class Document(ObjectContainer):
    """An SVG document; objects render in the order they were added."""

    def __init__(self) -> None:
        self._objects: List[Object] = []

    def add_object(self, obj: Object) -> None:
        self._objects.append(obj)

    def render(self, out: TextIO) -> None:
        logger.debug("rendering svg document with %d objects", len(self._objects))
        context = RenderContext(out, DOCUMENT_INDENT_STEP, DOCUMENT_INDENT)
        out.write(XML_DECLARATION)
        out.write("\n")
        out.write(SVG_OPEN_TAG)
        out.write("\n")
        for obj in self._objects:
            obj.render(context)
        out.write(SVG_CLOSE_TAG)

    def to_string(self) -> str:
        buffer = StringIO()
        self.render(buffer)
        return buffer.getvalue()


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
