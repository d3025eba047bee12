# -*- coding: utf-8 -*-
"""
Slash / knockout length math.

Two policies for the diagonal element centered on the circle:

- contained:   endpoints stay `gap` inside the circle edge, including the
               half-thickness that the stroke adds around its centerline.
- cut-through: endpoints extend `overshoot` past the circle edge.

Everything here is pure and total: degenerate input floors at zero.
"""

from __future__ import annotations

from enum import Enum
from typing import Tuple

from emptyset.config import GeometryConfig

Point = Tuple[float, float]


class SlashPolicy(Enum):
    CONTAINED = "contained"
    CUT_THROUGH = "cut-through"

    @classmethod
    def from_name(cls, name: str) -> "SlashPolicy":
        v = (name or "").strip().lower()
        for p in cls:
            if p.value == v:
                return p
        raise ValueError(f"Unknown slash policy: {name!r}")


def safe_length(radius: float, thickness: float, gap: float) -> float:
    """
    Longest symmetric segment whose stroked outline stays `gap` inside `radius`.

    Half-length + half-thickness + gap must not exceed the radius.
    """
    safe_radius = radius - (gap + thickness / 2.0)
    return max(0.0, 2.0 * safe_radius)


def overshoot_length(radius: float, overshoot: float) -> float:
    """Segment length that crosses the circle and extends `overshoot` past it on both ends."""
    return max(0.0, 2.0 * (radius + overshoot))


def knockout_length(cfg: GeometryConfig) -> float:
    # the knockout rect is rounded by its own rx, so only the gap counts
    return safe_length(cfg.ring_outer, 0.0, cfg.knock_gap)


def slash_length(cfg: GeometryConfig, policy: SlashPolicy) -> float:
    if policy is SlashPolicy.CUT_THROUGH:
        return overshoot_length(cfg.radius_bold, cfg.overshoot)
    return safe_length(cfg.radius_bold, cfg.slash_stroke, cfg.edge_gap)


def segment_endpoints(cx: float, cy: float, length: float) -> Tuple[Point, Point]:
    """Horizontal segment centered on (cx, cy), before rotation."""
    half = length / 2.0
    return (cx - half, cy), (cx + half, cy)
