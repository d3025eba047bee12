# -*- coding: utf-8 -*-

from __future__ import annotations

from typing import List, Optional

from emptyset.clearance import Clearance
from emptyset.config import GeometryConfig, Preset
from emptyset.geometry import SlashPolicy
from emptyset.svg import fmt
from emptyset.variants import LEGACY_VARIANTS

PRECISE_FILES = ["emptyset_bold.svg", "emptyset_filled_outline.svg"]


def _clearance_line(name: str, c: Clearance) -> str:
    if c.contained:
        return f"- Measured {name}: {fmt(c.margin)} inside the edge."
    return f"- Measured {name}: reaches {fmt(-c.margin)} past the edge."


def readme_precise(
    cfg: GeometryConfig,
    policy: SlashPolicy,
    preset: Preset = Preset.NONE,
    slash: Optional[Clearance] = None,
    knockout: Optional[Clearance] = None,
) -> str:
    lines: List[str] = [
        "Empty Set (∅) – Unicode U+2205",
        "====================================",
    ]
    if policy is SlashPolicy.CUT_THROUGH:
        lines.append("- Stroke variant: diagonal slash **cuts through** (overshoots) the circle.")
    else:
        lines.append("- Stroke variant: diagonal slash stays **inside** the circle with rounded ends.")
    lines.append("- Filled variant: knockout slash is **contained** within the ring (no overshoot).")

    if policy is SlashPolicy.CUT_THROUGH:
        detail = f"overshoot {fmt(cfg.overshoot)}"
    else:
        detail = f"edge gap {fmt(cfg.edge_gap)}"
    lines.append(f"- Angle ≈ {fmt(abs(cfg.angle))}°, {detail}, slash stroke {fmt(cfg.slash_stroke)}.")
    lines.append(
        f"- Ring {fmt(cfg.ring_outer)}/{fmt(cfg.ring_inner)} "
        f"(thickness {fmt(cfg.ring_thickness)}), knock-out gap {fmt(cfg.knock_gap)}."
    )
    if preset is not Preset.NONE:
        lines.append(f"- Preset: {preset.value}.")
    if slash is not None:
        lines.append(_clearance_line("slash", slash))
    if knockout is not None:
        lines.append(_clearance_line("knock-out", knockout))
    lines.append('- Stroke groups use vector-effect="non-scaling-stroke".')
    lines.append("Files:")
    lines.extend(f"- {name}" for name in PRECISE_FILES)
    lines.append("")
    return "\n".join(lines)


def readme_legacy() -> str:
    lines: List[str] = [
        "Empty Set (∅) SVG Pack – Legacy Set",
        "======================================",
        "Variants:",
    ]
    lines.extend(f"- {v.filename} — {v.description}" for v in LEGACY_VARIANTS)
    lines.append('Stroke-based variants include vector-effect="non-scaling-stroke".')
    lines.append("")
    return "\n".join(lines)
