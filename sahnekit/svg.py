"""Reading rectangles and circles from SVG documents."""

from __future__ import annotations

import argparse
import sys
import xml.etree.ElementTree as ET
from collections.abc import Sequence
from dataclasses import dataclass, field
from os import PathLike


class SvgError(ValueError):
    """The document is malformed or holds an unparsable number."""


@dataclass
class SvgRect:
    x: float = 0.0
    y: float = 0.0
    width: float = 0.0
    height: float = 0.0
    fill: str = ""


@dataclass
class SvgCircle:
    cx: float = 0.0
    cy: float = 0.0
    r: float = 0.0
    fill: str = ""


SvgElement = SvgRect | SvgCircle

_RECT_NUMBERS = {"x", "y", "width", "height"}
_CIRCLE_NUMBERS = {"cx", "cy", "r"}


def _local(name: str) -> str:
    return name.rpartition("}")[2]


def _parse_float(value: str) -> float:
    if value != value.strip() or "_" in value:
        raise SvgError(f"invalid number: {value!r}")
    try:
        return float(value)
    except ValueError as exc:
        raise SvgError(f"invalid number: {value!r}") from exc


def _attributes(elem: ET.Element) -> list[tuple[str, str]]:
    return [(_local(name), value) for name, value in elem.attrib.items()]


def _build_rect(elem: ET.Element) -> SvgRect:
    rect = SvgRect()
    for name, value in _attributes(elem):
        if name in _RECT_NUMBERS:
            setattr(rect, name, _parse_float(value))
        elif name == "fill":
            rect.fill = value
    return rect


def _build_circle(elem: ET.Element) -> SvgCircle:
    circle = SvgCircle()
    for name, value in _attributes(elem):
        if name in _CIRCLE_NUMBERS:
            setattr(circle, name, _parse_float(value))
        elif name == "fill":
            circle.fill = value
    return circle


@dataclass
class Svg:
    """Size and shape elements of an SVG document."""

    width: float = 0.0
    height: float = 0.0
    elements: list[SvgElement] = field(default_factory=list)

    @classmethod
    def from_str(cls, svg_content: str) -> "Svg":
        parser = ET.XMLPullParser(events=("start", "end"))
        try:
            parser.feed(svg_content)
            parser.close()
        except ET.ParseError as exc:
            raise SvgError(f"invalid XML: {exc}") from exc

        svg = cls()
        current: SvgElement | None = None
        for event, elem in parser.read_events():
            name = _local(elem.tag)
            if event == "start":
                if name == "svg":
                    for attr, value in _attributes(elem):
                        if attr == "width":
                            svg.width = _parse_float(value)
                        elif attr == "height":
                            svg.height = _parse_float(value)
                elif name == "rect":
                    current = _build_rect(elem)
                elif name == "circle":
                    current = _build_circle(elem)
            elif name in ("rect", "circle") and current is not None:
                svg.elements.append(current)
                current = None
        return svg

    @classmethod
    def from_file(cls, path: str | PathLike[str]) -> "Svg":
        with open(path, "rb") as handle:
            raw = handle.read()
        try:
            text = raw.decode("utf-8")
        except UnicodeDecodeError as exc:
            raise SvgError(f"invalid UTF-8 in {path}") from exc
        return cls.from_str(text)


def _fmt(value: float) -> str:
    if value == value and value not in (float("inf"), float("-inf")):
        if value.is_integer():
            return str(int(value))
    return repr(value)


def main(argv: Sequence[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Show the shapes in an SVG file.")
    parser.add_argument("path", nargs="?", default="/example.svg")
    args = parser.parse_args(argv)
    try:
        svg = Svg.from_file(args.path)
    except (SvgError, OSError) as exc:
        print(f"SVG parse error: {exc}", file=sys.stderr)
        return 0
    print(f"SVG Width: {_fmt(svg.width)}")
    print(f"SVG Height: {_fmt(svg.height)}")
    print("Elements:")
    for element in svg.elements:
        if isinstance(element, SvgRect):
            print(
                f"  Rect: x={_fmt(element.x)}, y={_fmt(element.y)}, "
                f"width={_fmt(element.width)}, height={_fmt(element.height)}, "
                f"fill={element.fill}"
            )
        else:
            print(
                f"  Circle: cx={_fmt(element.cx)}, cy={_fmt(element.cy)}, "
                f"r={_fmt(element.r)}, fill={element.fill}"
            )
    return 0


if __name__ == "__main__":
    sys.exit(main())