# -*- coding: utf-8 -*-
"""
Geometry configuration for the precise ∅ set.

A run resolves exactly one GeometryConfig, in this order:

    base  ->  preset  ->  explicit overrides (clamped)  ->  derived fields

Every step returns a new frozen value; nothing is mutated after construction.
Resolution never fails: bad numbers are clamped, unknown presets are a no-op.
"""

from __future__ import annotations

from dataclasses import dataclass, fields, replace
from enum import Enum
from typing import Dict, Optional, Tuple

# -----------------------------
# Ranges for explicit overrides
# -----------------------------
SLASH_STROKE_RANGE = (4.0, 24.0)
EDGE_GAP_RANGE = (2.0, 16.0)
ANGLE_RANGE = (-60.0, -10.0)
RADIUS_BOLD_RANGE = (20.0, 46.0)
RING_OUTER_RANGE = (26.0, 48.0)
RING_INNER_MIN = 14.0
OVERSHOOT_RANGE = (0.0, 20.0)

# ring never thinner than this
RING_MIN_THICKNESS = 6.0

KNOCK_GAP_MIN = 5.0


def clamp(n: float, lo: float, hi: float) -> float:
    return min(hi, max(lo, n))


# -----------------------------
# Data structures
# -----------------------------
@dataclass(frozen=True)
class GeometryConfig:
    cx: float = 50.0
    cy: float = 50.0
    circle_stroke: float = 14.0  # outline thickness (stroke variant)
    radius_bold: float = 32.0    # circle radius (stroke variant)
    slash_stroke: float = 12.0   # slash / knockout thickness
    edge_gap: float = 6.0        # outer edge -> slash ends (contained)
    angle: float = -35.0         # degrees, negative tilts up-left to down-right
    ring_outer: float = 38.0
    ring_inner: float = 24.0
    knock_gap: float = 7.0       # ring outer edge -> knockout ends (derived)
    knock_radius: float = 6.0
    overshoot: float = 6.0       # slash extension past the edge (cut-through)

    @property
    def ring_thickness(self) -> float:
        return self.ring_outer - self.ring_inner


@dataclass(frozen=True)
class GeometryOverrides:
    """Partial record: None means "not given"."""
    angle: Optional[float] = None
    edge_gap: Optional[float] = None
    slash_stroke: Optional[float] = None
    radius_bold: Optional[float] = None
    ring_outer: Optional[float] = None
    ring_inner: Optional[float] = None
    overshoot: Optional[float] = None

    def present(self) -> Dict[str, float]:
        return {f.name: getattr(self, f.name) for f in fields(self) if getattr(self, f.name) is not None}


DEFAULT_CONFIG = GeometryConfig()


# -----------------------------
# Presets
# -----------------------------
class Preset(Enum):
    NONE = ""
    INTER = "inter"
    SF = "sf"
    HELVETICA = "helvetica"

    @classmethod
    def from_name(cls, name: Optional[str]) -> "Preset":
        v = (name or "").strip().lower()
        for p in cls:
            if p.value == v:
                return p
        return cls.NONE


# Approximate the look of U+2205 in common UI fonts.
PRESETS: Dict[Preset, GeometryOverrides] = {
    # steeper slash, clean modern weight
    Preset.INTER: GeometryOverrides(angle=-35.0, slash_stroke=12.0, edge_gap=6.0),
    # a touch less steep, slightly lighter
    Preset.SF: GeometryOverrides(angle=-33.0, slash_stroke=11.0, edge_gap=6.0),
    # shallower angle, a hair more gap
    Preset.HELVETICA: GeometryOverrides(angle=-30.0, slash_stroke=11.0, edge_gap=7.0),
}

PRESET_NAMES: Tuple[str, ...] = tuple(p.value for p in Preset if p is not Preset.NONE)


def preset_overrides(preset: Preset) -> Optional[GeometryOverrides]:
    if preset is Preset.NONE:
        return None
    return PRESETS.get(preset)


# -----------------------------
# Resolution steps
# -----------------------------
def apply_preset(base: GeometryConfig, preset: Preset) -> GeometryConfig:
    table = preset_overrides(preset)
    if table is None:
        return base
    return replace(base, **table.present())


def apply_overrides(cfg: GeometryConfig, ov: GeometryOverrides) -> GeometryConfig:
    """
    Clamp each given override to its range and replace the merged value.

    ring_outer is settled before ring_inner so the inner clamp can use it.
    """
    if ov.slash_stroke is not None:
        cfg = replace(cfg, slash_stroke=clamp(ov.slash_stroke, *SLASH_STROKE_RANGE))
    if ov.edge_gap is not None:
        cfg = replace(cfg, edge_gap=clamp(ov.edge_gap, *EDGE_GAP_RANGE))
    if ov.angle is not None:
        cfg = replace(cfg, angle=clamp(ov.angle, *ANGLE_RANGE))
    if ov.radius_bold is not None:
        cfg = replace(cfg, radius_bold=clamp(ov.radius_bold, *RADIUS_BOLD_RANGE))
    if ov.ring_outer is not None:
        cfg = replace(cfg, ring_outer=clamp(ov.ring_outer, *RING_OUTER_RANGE))
    if ov.ring_inner is not None:
        cfg = replace(
            cfg,
            ring_inner=clamp(ov.ring_inner, RING_INNER_MIN, cfg.ring_outer - RING_MIN_THICKNESS),
        )
    if ov.overshoot is not None:
        cfg = replace(cfg, overshoot=clamp(ov.overshoot, *OVERSHOOT_RANGE))
    return cfg


def derive_fields(cfg: GeometryConfig) -> GeometryConfig:
    # knock_gap is never set directly: keep it a little larger than edge_gap
    knock_gap = max(cfg.edge_gap + 1.0, KNOCK_GAP_MIN)
    ring_inner = min(cfg.ring_inner, cfg.ring_outer - RING_MIN_THICKNESS)
    if knock_gap == cfg.knock_gap and ring_inner == cfg.ring_inner:
        return cfg
    return replace(cfg, knock_gap=knock_gap, ring_inner=ring_inner)


def resolve_config(
    base: GeometryConfig = DEFAULT_CONFIG,
    preset: Preset = Preset.NONE,
    overrides: Optional[GeometryOverrides] = None,
) -> GeometryConfig:
    cfg = apply_preset(base, preset)
    cfg = apply_overrides(cfg, overrides or GeometryOverrides())
    return derive_fields(cfg)
