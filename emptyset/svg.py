# -*- coding: utf-8 -*-
"""
SVG markup for the ∅ variants.

- Stroke variants: circle + rotated <line>, round caps, non-scaling strokes.
- Ring variants: even-odd filled annulus with a masked-out rounded slash.

All marks paint with `currentColor` so color can be set from CSS.
"""

from __future__ import annotations

import uuid
from typing import List, Optional
from xml.sax.saxutils import quoteattr

from emptyset.config import GeometryConfig
from emptyset.geometry import SlashPolicy, knockout_length, segment_endpoints, slash_length
from emptyset.variants import RING, Variant

DEFAULT_LABEL = "Empty set symbol"
SVG_NS = "http://www.w3.org/2000/svg"


def fmt(x: float) -> str:
    s = f"{x:.3f}".rstrip("0").rstrip(".")
    if s in ("", "-0"):
        return "0"
    return s


def svg_doc(lines: List[str], canvas: float = 100.0, label: str = DEFAULT_LABEL) -> str:
    parts: List[str] = []
    parts.append('<?xml version="1.0" encoding="UTF-8"?>')
    parts.append(
        f'<svg xmlns="{SVG_NS}" role="img" aria-label={quoteattr(label)} '
        f'viewBox="0 0 {fmt(canvas)} {fmt(canvas)}">'
    )
    parts.extend(lines)
    parts.append("</svg>")
    parts.append("")
    return "\n".join(parts)


def stroke_group_open() -> str:
    return (
        '<g fill="none" stroke="currentColor" stroke-linecap="round" '
        'stroke-linejoin="round" vector-effect="non-scaling-stroke">'
    )


def new_mask_id() -> str:
    # unique per render
    return f"cut-{uuid.uuid4().hex}"


def rotate(cfg: GeometryConfig) -> str:
    return f"rotate({fmt(cfg.angle)} {fmt(cfg.cx)} {fmt(cfg.cy)})"


def ring_path_d(cx: float, cy: float, r_outer: float, r_inner: float) -> str:
    # outer circle clockwise, inner counter-clockwise; evenodd leaves the ring
    return (
        f"M {fmt(cx)},{fmt(cy - r_outer)} "
        f"a {fmt(r_outer)},{fmt(r_outer)} 0 1 1 0,{fmt(2 * r_outer)} "
        f"a {fmt(r_outer)},{fmt(r_outer)} 0 1 1 0,{fmt(-2 * r_outer)} "
        f"M {fmt(cx)},{fmt(cy - r_inner)} "
        f"a {fmt(r_inner)},{fmt(r_inner)} 0 1 0 0,{fmt(2 * r_inner)} "
        f"a {fmt(r_inner)},{fmt(r_inner)} 0 1 0 0,{fmt(-2 * r_inner)}"
    )


# -----------------------------
# Variants
# -----------------------------
def stroke_svg(
    cfg: GeometryConfig,
    policy: SlashPolicy = SlashPolicy.CUT_THROUGH,
    *,
    label: str = DEFAULT_LABEL,
    canvas: float = 100.0,
    comment: Optional[str] = None,
) -> str:
    length = slash_length(cfg, policy)
    (x1, y1), (x2, y2) = segment_endpoints(cfg.cx, cfg.cy, length)
    if comment is None:
        if policy is SlashPolicy.CUT_THROUGH:
            comment = "U+2205 cut-through: slash extends beyond the circle to intersect the ring"
        else:
            comment = "U+2205 interior slash with rounded ends, no edge contact"

    lines = [
        f"  <!-- {comment} -->",
        "  " + stroke_group_open(),
        f'    <circle cx="{fmt(cfg.cx)}" cy="{fmt(cfg.cy)}" r="{fmt(cfg.radius_bold)}" '
        f'stroke-width="{fmt(cfg.circle_stroke)}"/>',
        f'    <g transform="{rotate(cfg)}">',
        f'      <line x1="{fmt(x1)}" y1="{fmt(y1)}" x2="{fmt(x2)}" y2="{fmt(y2)}" '
        f'stroke-width="{fmt(cfg.slash_stroke)}"/>',
        "    </g>",
        "  </g>",
    ]
    return svg_doc(lines, canvas=canvas, label=label)


def ring_svg(
    cfg: GeometryConfig,
    *,
    label: str = DEFAULT_LABEL,
    canvas: float = 100.0,
    comment: str = "Solid ring with an interior knocked-out slash (contained; no overshoot)",
    mask_id: Optional[str] = None,
) -> str:
    mask_id = mask_id or new_mask_id()
    length = knockout_length(cfg)
    h = cfg.slash_stroke
    x = cfg.cx - length / 2.0
    y = cfg.cy - h / 2.0

    # no vector-effect here: the ring is a filled path
    lines = [
        f"  <!-- {comment} -->",
        "  <defs>",
        f'    <mask id="{mask_id}">',
        f'      <rect x="0" y="0" width="{fmt(canvas)}" height="{fmt(canvas)}" fill="white"/>',
        f'      <g transform="{rotate(cfg)}">',
        f'        <rect x="{fmt(x)}" y="{fmt(y)}" width="{fmt(length)}" height="{fmt(h)}" '
        f'rx="{fmt(cfg.knock_radius)}" ry="{fmt(cfg.knock_radius)}" fill="black"/>',
        "      </g>",
        "    </mask>",
        "  </defs>",
        f'  <g fill="currentColor" mask="url(#{mask_id})">',
        f'    <path d="{ring_path_d(cfg.cx, cfg.cy, cfg.ring_outer, cfg.ring_inner)}" fill-rule="evenodd"/>',
        "  </g>",
    ]
    return svg_doc(lines, canvas=canvas, label=label)


def variant_svg(variant: Variant, *, label: str = DEFAULT_LABEL) -> str:
    """Legacy variants: strokes always cut through, rings always stay contained."""
    if variant.kind == RING:
        return ring_svg(variant.geometry, label=label, canvas=variant.canvas, comment=variant.comment)
    return stroke_svg(
        variant.geometry,
        SlashPolicy.CUT_THROUGH,
        label=label,
        canvas=variant.canvas,
        comment=variant.comment,
    )
