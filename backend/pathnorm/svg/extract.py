"""Pull path data out of an SVG document.

Every drawable shape (path, line, circle, ellipse, rect, polyline, polygon)
is turned into a path-data string the normalizer understands. Attributes are
read order-independently from each tag.
"""

from __future__ import annotations

import logging
import re

logger = logging.getLogger(__name__)

DEFAULT_CANVAS = (24.0, 24.0)

_VIEWBOX_RE = re.compile(r"""viewBox\s*=\s*(["'])(.+?)\1""")
_WIDTH_RE = re.compile(r"""<svg[^>]*\swidth\s*=\s*(["'])(.*?)\1""", re.IGNORECASE)
_HEIGHT_RE = re.compile(r"""<svg[^>]*\sheight\s*=\s*(["'])(.*?)\1""", re.IGNORECASE)
_COMMENT_RE = re.compile(r"<!--.*?-->", re.DOTALL)
# Containers whose children are referenced, not drawn in place
_NON_RENDERED_RE = re.compile(
    r"<\s*(defs|clipPath|mask|symbol|marker|pattern)\b[^>]*(?<!/)>.*?<\s*/\s*\1\s*>",
    re.IGNORECASE | re.DOTALL,
)
_SHAPE_TAG_RE = re.compile(
    r"<\s*(path|line|circle|ellipse|rect|polyline|polygon)\b[^>]*?/?\s*>",
    re.IGNORECASE,
)
_ATTR_RE = re.compile(r"""([\w:-]+)\s*=\s*(?:"([^"]*)"|'([^']*)')""")
_UNIT_RE = re.compile(r"^\s*([-+]?(?:\d+\.?\d*|\.\d+)(?:[eE][-+]?\d+)?)\s*(?:px|pt)?\s*$")
_POINTS_SPLIT_RE = re.compile(r"[\s,]+")


def _extract_attrs(tag_text: str) -> dict[str, str]:
    attrs: dict[str, str] = {}
    for m in _ATTR_RE.finditer(tag_text):
        attrs[m.group(1)] = m.group(2) if m.group(2) is not None else m.group(3)
    return attrs


def _num(attrs: dict[str, str], name: str, default: float = 0.0) -> float:
    raw = attrs.get(name)
    if raw is None:
        return default
    m = _UNIT_RE.match(raw)
    if m is None:
        return default
    return float(m.group(1))


def _fmt(value: float) -> str:
    return f"{value:.12g}"


def viewbox_size(svg_text: str) -> tuple[float, float]:
    """Canvas (width, height) from viewBox, then width/height, then 24x24."""
    vb_match = _VIEWBOX_RE.search(svg_text)
    if vb_match:
        parts = _POINTS_SPLIT_RE.split(vb_match.group(2).strip())
        if len(parts) >= 4:
            try:
                return (float(parts[2]), float(parts[3]))
            except ValueError:
                logger.debug("Unreadable viewBox %r", vb_match.group(2))

    width, height = DEFAULT_CANVAS
    w_match = _WIDTH_RE.search(svg_text)
    h_match = _HEIGHT_RE.search(svg_text)
    if w_match and (m := _UNIT_RE.match(w_match.group(2))):
        width = float(m.group(1))
    if h_match and (m := _UNIT_RE.match(h_match.group(2))):
        height = float(m.group(1))
    return (width, height)


def _line_path(attrs: dict[str, str]) -> str | None:
    x1, y1 = _num(attrs, "x1"), _num(attrs, "y1")
    x2, y2 = _num(attrs, "x2"), _num(attrs, "y2")
    return f"M {_fmt(x1)} {_fmt(y1)} L {_fmt(x2)} {_fmt(y2)}"


def _ellipse_path(cx: float, cy: float, rx: float, ry: float) -> str | None:
    if rx <= 0 or ry <= 0:
        return None
    # Two half-ellipse arcs: left extreme -> right extreme -> back
    left, right = _fmt(cx - rx), _fmt(cx + rx)
    r = f"{_fmt(rx)} {_fmt(ry)}"
    return f"M {left} {_fmt(cy)} A {r} 0 1 0 {right} {_fmt(cy)} A {r} 0 1 0 {left} {_fmt(cy)} Z"


def _circle_path(attrs: dict[str, str]) -> str | None:
    r = _num(attrs, "r")
    return _ellipse_path(_num(attrs, "cx"), _num(attrs, "cy"), r, r)


def _ellipse_tag_path(attrs: dict[str, str]) -> str | None:
    return _ellipse_path(_num(attrs, "cx"), _num(attrs, "cy"), _num(attrs, "rx"), _num(attrs, "ry"))


def _rect_path(attrs: dict[str, str]) -> str | None:
    x, y = _num(attrs, "x"), _num(attrs, "y")
    w, h = _num(attrs, "width"), _num(attrs, "height")
    if w <= 0 or h <= 0:
        return None

    # A lone rx or ry is used for both radii
    rx = _num(attrs, "rx", -1.0)
    ry = _num(attrs, "ry", -1.0)
    if rx < 0 and ry < 0:
        rx = ry = 0.0
    elif rx < 0:
        rx = ry
    elif ry < 0:
        ry = rx
    rx = min(rx, w / 2)
    ry = min(ry, h / 2)

    if rx <= 0 or ry <= 0:
        return (
            f"M {_fmt(x)} {_fmt(y)} L {_fmt(x + w)} {_fmt(y)} "
            f"L {_fmt(x + w)} {_fmt(y + h)} L {_fmt(x)} {_fmt(y + h)} Z"
        )

    r = f"{_fmt(rx)} {_fmt(ry)} 0 0 1"
    return (
        f"M {_fmt(x + rx)} {_fmt(y)} "
        f"L {_fmt(x + w - rx)} {_fmt(y)} A {r} {_fmt(x + w)} {_fmt(y + ry)} "
        f"L {_fmt(x + w)} {_fmt(y + h - ry)} A {r} {_fmt(x + w - rx)} {_fmt(y + h)} "
        f"L {_fmt(x + rx)} {_fmt(y + h)} A {r} {_fmt(x)} {_fmt(y + h - ry)} "
        f"L {_fmt(x)} {_fmt(y + ry)} A {r} {_fmt(x + rx)} {_fmt(y)} Z"
    )


def _points_path(attrs: dict[str, str], closed: bool) -> str | None:
    raw = attrs.get("points", "").strip()
    if not raw:
        return None
    values = [v for v in _POINTS_SPLIT_RE.split(raw) if v]
    # An odd trailing coordinate is dropped
    pairs = [(values[i], values[i + 1]) for i in range(0, len(values) - 1, 2)]
    if not pairs:
        return None
    d = f"M {pairs[0][0]} {pairs[0][1]}"
    for px, py in pairs[1:]:
        d += f" L {px} {py}"
    if closed:
        d += " Z"
    return d


def _path_tag(attrs: dict[str, str]) -> str | None:
    d = attrs.get("d", "").strip()
    return d or None


_SHAPE_BUILDERS = {
    "path": _path_tag,
    "line": _line_path,
    "circle": _circle_path,
    "ellipse": _ellipse_tag_path,
    "rect": _rect_path,
    "polyline": lambda attrs: _points_path(attrs, closed=False),
    "polygon": lambda attrs: _points_path(attrs, closed=True),
}


def extract_path_data(svg_text: str) -> list[str]:
    """Return one path-data string per drawable shape, in document order.

    Shapes inside defs, clipPath, mask, symbol, marker and pattern are not
    drawn where they stand and are skipped.
    """
    svg_text = _COMMENT_RE.sub("", svg_text)
    svg_text = _NON_RENDERED_RE.sub("", svg_text)
    paths: list[str] = []

    for match in _SHAPE_TAG_RE.finditer(svg_text):
        tag = match.group(1).lower()
        attrs = _extract_attrs(match.group(0))
        d = _SHAPE_BUILDERS[tag](attrs)
        if d is None:
            logger.debug("Skipping empty <%s>", tag)
            continue
        paths.append(d)

    logger.info("Extracted %d path(s) from SVG", len(paths))
    return paths
