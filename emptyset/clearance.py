# -*- coding: utf-8 -*-
"""
Measure how the drawn slash actually sits against its circle.

The slash is rebuilt as a polygon the same way it is painted (round caps,
buffered by half its thickness, rotated about the center) and compared with
the circle edge. `margin` is the distance from the farthest slash point to the
edge: positive when the slash stays inside, negative when it cuts through.

Dependencies:
  pip install shapely
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Union

from shapely import affinity
from shapely.geometry import LineString, MultiPolygon, Point, Polygon

from emptyset.config import GeometryConfig
from emptyset.geometry import SlashPolicy, knockout_length, segment_endpoints, slash_length

Geom = Union[Polygon, MultiPolygon]

# arc resolution (segments per quarter circle)
QUAD_SEGS = 64


@dataclass(frozen=True)
class Clearance:
    margin: float
    contained: bool


def _disk(cx: float, cy: float, r: float) -> Polygon:
    return Point(cx, cy).buffer(r, quad_segs=QUAD_SEGS)


def stroked_segment(cx: float, cy: float, length: float, thickness: float, angle: float) -> Geom:
    """Centered horizontal segment with round caps, rotated by `angle` degrees (SVG sense)."""
    radius = thickness / 2.0
    if length <= 1e-9:
        geom = _disk(cx, cy, radius)
    else:
        p1, p2 = segment_endpoints(cx, cy, length)
        geom = LineString([p1, p2]).buffer(radius, cap_style="round", join_style="round", quad_segs=QUAD_SEGS)
    return affinity.rotate(geom, angle, origin=(cx, cy))


def rounded_bar(cx: float, cy: float, length: float, height: float, rx: float, angle: float) -> Geom:
    """Rounded rectangle as painted by <rect rx=..>, rotated by `angle` degrees."""
    r = max(0.0, min(rx, length / 2.0, height / 2.0))
    core_w = length - 2.0 * r
    core_h = height - 2.0 * r
    if r <= 1e-9:
        geom = Polygon([
            (cx - length / 2.0, cy - height / 2.0),
            (cx + length / 2.0, cy - height / 2.0),
            (cx + length / 2.0, cy + height / 2.0),
            (cx - length / 2.0, cy + height / 2.0),
        ])
    elif core_h <= 1e-9 or core_w <= 1e-9:
        # fully rounded ends: a capsule (or a dot)
        if core_w <= 1e-9 and core_h <= 1e-9:
            geom = _disk(cx, cy, r)
        elif core_h <= 1e-9:
            geom = LineString([(cx - core_w / 2.0, cy), (cx + core_w / 2.0, cy)]).buffer(
                r, cap_style="round", join_style="round", quad_segs=QUAD_SEGS
            )
        else:
            geom = LineString([(cx, cy - core_h / 2.0), (cx, cy + core_h / 2.0)]).buffer(
                r, cap_style="round", join_style="round", quad_segs=QUAD_SEGS
            )
    else:
        core = Polygon([
            (cx - core_w / 2.0, cy - core_h / 2.0),
            (cx + core_w / 2.0, cy - core_h / 2.0),
            (cx + core_w / 2.0, cy + core_h / 2.0),
            (cx - core_w / 2.0, cy + core_h / 2.0),
        ])
        geom = core.buffer(r, join_style="round", quad_segs=QUAD_SEGS)
    return affinity.rotate(geom, angle, origin=(cx, cy))


def measure(geom: Geom, cx: float, cy: float, radius: float) -> Clearance:
    if geom.is_empty:
        return Clearance(margin=radius, contained=True)
    reach = Point(cx, cy).hausdorff_distance(geom)
    return Clearance(margin=radius - reach, contained=_disk(cx, cy, radius).contains(geom))


def slash_clearance(cfg: GeometryConfig, policy: SlashPolicy) -> Clearance:
    """Clearance of the stroke variant's slash from the circle of `radius_bold`."""
    geom = stroked_segment(cfg.cx, cfg.cy, slash_length(cfg, policy), cfg.slash_stroke, cfg.angle)
    return measure(geom, cfg.cx, cfg.cy, cfg.radius_bold)


def knockout_clearance(cfg: GeometryConfig) -> Clearance:
    """Clearance of the knockout bar from the ring's outer edge."""
    length = knockout_length(cfg)
    if length <= 1e-9:
        return Clearance(margin=cfg.ring_outer, contained=True)
    geom = rounded_bar(cfg.cx, cfg.cy, length, cfg.slash_stroke, cfg.knock_radius, cfg.angle)
    return measure(geom, cfg.cx, cfg.cy, cfg.ring_outer)
