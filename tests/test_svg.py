from __future__ import annotations

import io
import sys
import unittest
from pathlib import Path

TESTS_DIR = Path(__file__).resolve().parent
PROJECT_ROOT = TESTS_DIR.parent
sys.path.insert(0, str(PROJECT_ROOT / "src"))

from svgdoc import (
    NONE_COLOR,
    Circle,
    Document,
    Drawable,
    Point,
    Polyline,
    RenderContext,
    Rgb,
    Rgba,
    StrokeLineCap,
    StrokeLineJoin,
    Text,
    UnsetColorError,
    draw_picture,
    escape_text,
    format_color,
)


def render_one(obj, indent: int = 0) -> str:
    out = io.StringIO()
    obj.render(RenderContext(out, 2, indent))
    return out.getvalue()


class ColorTests(unittest.TestCase):
    def test_named_color_is_verbatim(self) -> None:
        self.assertEqual(format_color("red"), "red")
        self.assertEqual(format_color(NONE_COLOR), "none")
        self.assertEqual(format_color("a&b"), "a&b")

    def test_rgb(self) -> None:
        self.assertEqual(format_color(Rgb(255, 16, 0)), "rgb(255,16,0)")
        self.assertEqual(format_color(Rgb()), "rgb(0,0,0)")

    def test_rgba_keeps_channel_order_and_opacity(self) -> None:
        self.assertEqual(format_color(Rgba(1, 2, 3, 0.5)), "rgba(1,2,3,0.5)")
        self.assertEqual(format_color(Rgba(10, 20, 30)), "rgba(10,20,30,1)")
        self.assertEqual(format_color(Rgba(0, 0, 0, 0.25)), "rgba(0,0,0,0.25)")

    def test_unset_color_is_not_serializable(self) -> None:
        with self.assertRaises(UnsetColorError):
            format_color(None)
        self.assertTrue(issubclass(UnsetColorError, ValueError))


class StyleAttributeTests(unittest.TestCase):
    def test_no_attributes_emits_nothing(self) -> None:
        out = io.StringIO()
        Circle().render_attrs(out)
        self.assertEqual(out.getvalue(), "")

    def test_attribute_order_is_fixed(self) -> None:
        circle = (
            Circle()
            .set_stroke_line_join(StrokeLineJoin.MITER_CLIP)
            .set_stroke_line_cap(StrokeLineCap.SQUARE)
            .set_stroke_width(2.5)
            .set_stroke_color(Rgb(1, 2, 3))
            .set_fill_color(NONE_COLOR)
        )
        out = io.StringIO()
        circle.render_attrs(out)
        self.assertEqual(
            out.getvalue(),
            'fill="none" stroke="rgb(1,2,3)" stroke-width="2.5" '
            'stroke-linecap="square" stroke-linejoin="miter-clip" ',
        )

    def test_zero_width_is_still_emitted(self) -> None:
        out = io.StringIO()
        Polyline().set_stroke_width(0).render_attrs(out)
        self.assertEqual(out.getvalue(), 'stroke-width="0" ')

    def test_unset_color_removes_attribute(self) -> None:
        out = io.StringIO()
        Circle().set_fill_color("red").set_fill_color(None).set_stroke_color("blue").render_attrs(out)
        self.assertEqual(out.getvalue(), 'stroke="blue" ')

    def test_enum_tokens(self) -> None:
        self.assertEqual([str(c) for c in StrokeLineCap], ["butt", "round", "square"])
        self.assertEqual(
            [str(j) for j in StrokeLineJoin],
            ["arcs", "bevel", "miter", "miter-clip", "round"],
        )


class PrimitiveTests(unittest.TestCase):
    def test_circle_defaults(self) -> None:
        self.assertEqual(render_one(Circle()), '<circle cx="0" cy="0" r="1" />\n')

    def test_circle_with_attrs(self) -> None:
        circle = Circle().set_center(Point(1.5, -2)).set_radius(3).set_stroke_color("black")
        self.assertEqual(
            render_one(circle, indent=4),
            '    <circle cx="1.5" cy="-2" r="3" stroke="black" />\n',
        )

    def test_setters_return_same_object(self) -> None:
        circle = Circle()
        self.assertIs(circle.set_radius(2), circle)
        self.assertIs(circle.set_fill_color("red"), circle)
        text = Text()
        self.assertIs(text.set_stroke_width(1).set_data("x"), text)

    def test_empty_polyline(self) -> None:
        self.assertEqual(render_one(Polyline()), '<polyline points="" />\n')

    def test_polyline_points_in_order(self) -> None:
        line = Polyline().add_point(Point(1, 2)).add_point(Point(3.25, 4)).add_point(Point(0, 0))
        self.assertEqual(render_one(line), '<polyline points="1,2 3.25,4 0,0" />\n')

    def test_polyline_with_attrs(self) -> None:
        line = Polyline().add_point(Point(0, 0)).set_fill_color("red").set_stroke_color("black")
        self.assertEqual(render_one(line), '<polyline points="0,0" fill="red" stroke="black" />\n')

    def test_text_defaults(self) -> None:
        self.assertEqual(
            render_one(Text()),
            '<text x="0" y="0" dx="0" dy="0" font-size="1" ></text>\n',
        )

    def test_text_full(self) -> None:
        text = (
            Text()
            .set_position(Point(10, 100))
            .set_offset(Point(1, -1))
            .set_font_size(12)
            .set_font_family("Verdana")
            .set_font_weight("bold")
            .set_data("Hi")
            .set_fill_color("red")
        )
        self.assertEqual(
            render_one(text),
            '<text x="10" y="100" dx="1" dy="-1" font-size="12" font-family="Verdana" '
            'font-weight="bold" fill="red" >Hi</text>\n',
        )

    def test_text_escapes_content_on_render(self) -> None:
        text = Text().set_data('He said "hi" <ok>')
        rendered = render_one(text)
        self.assertIn(">He said &quot;hi&quot; &lt;ok&gt;</text>", rendered)
        self.assertEqual(render_one(text), rendered)

    def test_font_attributes_are_escaped(self) -> None:
        text = Text().set_font_family('A"B').set_font_weight("<b>").set_data("x")
        self.assertEqual(
            render_one(text),
            '<text x="0" y="0" dx="0" dy="0" font-size="1" font-family="A&quot;B" '
            'font-weight="&lt;b&gt;" >x</text>\n',
        )

    def test_plain_font_attributes_are_unchanged(self) -> None:
        text = Text().set_font_family("Times New Roman").set_font_weight("700")
        self.assertIn('font-family="Times New Roman" font-weight="700" >', render_one(text))

    def test_numbers_use_short_general_format(self) -> None:
        circle = Circle().set_center(Point(0.1 + 0.2, 1e7)).set_radius(2.0)
        self.assertEqual(render_one(circle), '<circle cx="0.3" cy="1e+07" r="2" />\n')

    def test_copy_is_independent(self) -> None:
        base = Text().set_data("a")
        variant = base.copy().set_data("b").set_fill_color("red")
        self.assertIn(">a</text>", render_one(base))
        self.assertNotIn("fill", render_one(base))
        self.assertIn('fill="red" >b</text>', render_one(variant))


class EscapeTests(unittest.TestCase):
    def test_table(self) -> None:
        self.assertEqual(escape_text("\"'`<>&"), "&quot;&apos;&apos;&lt;&gt;&amp;")

    def test_other_characters_pass_through(self) -> None:
        self.assertEqual(escape_text("Привет, мир! 1+1=2"), "Привет, мир! 1+1=2")
        self.assertEqual(escape_text(""), "")

    def test_second_pass_double_escapes(self) -> None:
        once = escape_text('"')
        self.assertEqual(once, "&quot;")
        self.assertEqual(escape_text(once), "&amp;quot;")


class RenderContextTests(unittest.TestCase):
    def test_indented_adds_one_step(self) -> None:
        out = io.StringIO()
        ctx = RenderContext(out, 2, 2)
        child = ctx.indented()
        self.assertEqual((child.indent_step, child.indent), (2, 4))
        self.assertIs(child.out, out)
        self.assertEqual(ctx.indent, 2)
        child.render_indent()
        self.assertEqual(out.getvalue(), "    ")


class DocumentTests(unittest.TestCase):
    def test_empty_document(self) -> None:
        self.assertEqual(
            Document().to_string(),
            '<?xml version="1.0" encoding="UTF-8" ?>\n'
            '<svg xmlns="http://www.w3.org/2000/svg" version="1.1">\n'
            "</svg>",
        )

    def test_single_circle(self) -> None:
        doc = Document()
        doc.add(Circle().set_center(Point(10, 10)).set_radius(5).set_fill_color("red"))
        out = io.StringIO()
        doc.render(out)
        self.assertEqual(
            out.getvalue(),
            '<?xml version="1.0" encoding="UTF-8" ?>\n'
            '<svg xmlns="http://www.w3.org/2000/svg" version="1.1">\n'
            '  <circle cx="10" cy="10" r="5" fill="red" />\n'
            "</svg>",
        )

    def test_insertion_order_is_render_order(self) -> None:
        doc = Document()
        doc.add(Text().set_data("first"))
        doc.add(Polyline())
        doc.add(Circle())
        doc.add(Text().set_data("last"))
        lines = doc.to_string().split("\n")[2:-1]
        self.assertEqual(len(lines), 4)
        self.assertTrue(lines[0].startswith("  <text") and "first" in lines[0])
        self.assertTrue(lines[1].startswith("  <polyline"))
        self.assertTrue(lines[2].startswith("  <circle"))
        self.assertTrue(lines[3].startswith("  <text") and "last" in lines[3])

    def test_add_takes_a_copy(self) -> None:
        circle = Circle().set_radius(5)
        doc = Document()
        doc.add(circle)
        circle.set_radius(7).set_fill_color("red")
        doc.add(circle)
        lines = doc.to_string().split("\n")
        self.assertEqual(lines[2], '  <circle cx="0" cy="0" r="5" />')
        self.assertEqual(lines[3], '  <circle cx="0" cy="0" r="7" fill="red" />')

    def test_render_logs_object_count(self) -> None:
        doc = Document()
        doc.add(Circle())
        doc.add(Polyline())
        with self.assertLogs("svgdoc.svg", "DEBUG") as logs:
            doc.to_string()
        self.assertEqual(logs.records[0].levelname, "DEBUG")
        self.assertIn("rendering svg document with 2 objects", logs.output[0])

    def test_draw_picture_uses_shared_target(self) -> None:
        class Dot(Drawable):
            def __init__(self, x: float) -> None:
                self.x = x

            def draw(self, container) -> None:
                container.add(Circle().set_center(Point(self.x, 0)))

        doc = Document()
        draw_picture([Dot(1), Dot(2)], doc)
        text = doc.to_string()
        self.assertLess(text.index('cx="1"'), text.index('cx="2"'))


if __name__ == "__main__":
    unittest.main()
