# -*- coding: utf-8 -*-
"""
Legacy ∅ styles as fixed geometry records.

Each legacy look is just a GeometryConfig rendered with one of the two slash
policies; only `overshoot` follows the run's resolved configuration.
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import List

from emptyset.config import GeometryConfig

STROKE = "stroke"
RING = "ring"


@dataclass(frozen=True)
class Variant:
    filename: str
    kind: str       # stroke | ring
    comment: str
    geometry: GeometryConfig
    canvas: float = 100.0
    description: str = ""

    def with_overshoot(self, overshoot: float) -> "Variant":
        return replace(self, geometry=replace(self.geometry, overshoot=overshoot))


def _stroke(r: float, stroke: float, angle: float, cx: float = 50.0, cy: float = 50.0) -> GeometryConfig:
    # legacy strokes share one width between circle and slash
    return GeometryConfig(
        cx=cx,
        cy=cy,
        circle_stroke=stroke,
        radius_bold=r,
        slash_stroke=stroke,
        angle=angle,
    )


LEGACY_VARIANTS: List[Variant] = [
    Variant(
        filename="emptyset_basic.svg",
        kind=STROKE,
        comment="Legacy: circle + diagonal slash (cut-through)",
        geometry=_stroke(34.0, 8.0, -45.0),
        description="stroke slash **cuts through** the circle (overshoot).",
    ),
    Variant(
        filename="emptyset_round.svg",
        kind=STROKE,
        comment="Legacy: rounded caps/joins (cut-through)",
        geometry=_stroke(33.0, 10.0, -45.0),
        description="rounded stroke slash **cuts through**.",
    ),
    Variant(
        filename="emptyset_bold_legacy.svg",
        kind=STROKE,
        comment="Legacy: bold diagonal (cut-through)",
        geometry=_stroke(30.0, 14.0, -45.0),
        description="bold stroke slash **cuts through**.",
    ),
    Variant(
        filename="emptyset_tilted.svg",
        kind=STROKE,
        comment="Legacy: rotated line group (cut-through)",
        geometry=_stroke(33.0, 10.0, -40.0),
        description="rotated stroke slash **cuts through**.",
    ),
    Variant(
        filename="emptyset_filled_outline_legacy.svg",
        kind=RING,
        comment="Legacy: solid ring with knockout slash",
        geometry=GeometryConfig(
            angle=-45.0,
            ring_outer=40.0,
            ring_inner=28.0,
            slash_stroke=10.0,
            knock_gap=5.0,
            knock_radius=5.0,
        ),
        description="solid ring with knocked-out slash (mask).",
    ),
    Variant(
        filename="emptyset_monogram.svg",
        kind=STROKE,
        comment="Legacy: monogram lockup on 120 box (cut-through)",
        geometry=_stroke(35.0, 10.0, -45.0, cx=60.0, cy=50.0),
        canvas=120.0,
        description="taller canvas for pairing with a wordmark.",
    ),
]
