# -*- coding: utf-8 -*-
"""
Write the ∅ SVG pack.

Usage:
  python tools/generate-emptyset.py ./emptyset_svg [--set=precise|legacy|all] [--label="Empty set symbol"]
                                    [--preset=inter|sf|helvetica] [--slash=cut-through|contained]
                                    [--angle=-35] [--edge-gap=6] [--slash-stroke=12]
                                    [--radius-bold=32] [--ring-outer=38] [--ring-inner=24]
                                    [--overshoot=6] [--dry-run]

Notes:
- `--overshoot` applies to every stroke variant (precise + legacy).
- The other geometry flags only affect the precise set.
- Malformed numbers are ignored; out-of-range numbers are clamped.
"""

from __future__ import annotations

import argparse
import math
from pathlib import Path
from typing import Dict, List, Optional

from emptyset.clearance import knockout_clearance, slash_clearance
from emptyset.config import (
    DEFAULT_CONFIG,
    PRESET_NAMES,
    GeometryConfig,
    GeometryOverrides,
    Preset,
    resolve_config,
)
from emptyset.geometry import SlashPolicy
from emptyset.readme import readme_legacy, readme_precise
from emptyset.svg import DEFAULT_LABEL, ring_svg, stroke_svg, variant_svg
from emptyset.variants import LEGACY_VARIANTS

SETS = ("precise", "legacy", "all")
DEFAULT_OUT_DIR = "emptyset_svg"


def parse_number(s: Optional[str]) -> Optional[float]:
    """Lenient float: anything unparseable or non-finite counts as not given."""
    if s is None:
        return None
    try:
        v = float(s)
    except ValueError:
        return None
    if not math.isfinite(v):
        return None
    return v


def write_text_lf(path: Path, text: str) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    with open(path, "w", encoding="utf-8", newline="\n") as f:
        f.write(text)


# -----------------------------
# File sets
# -----------------------------
def precise_files(
    cfg: GeometryConfig,
    policy: SlashPolicy,
    preset: Preset = Preset.NONE,
    label: str = DEFAULT_LABEL,
) -> Dict[str, str]:
    return {
        "emptyset_bold.svg": stroke_svg(cfg, policy, label=label),
        "emptyset_filled_outline.svg": ring_svg(cfg, label=label),
        "README-precise.txt": readme_precise(
            cfg,
            policy,
            preset,
            slash=slash_clearance(cfg, policy),
            knockout=knockout_clearance(cfg),
        ),
    }


def legacy_files(overshoot: float, label: str = DEFAULT_LABEL) -> Dict[str, str]:
    files: Dict[str, str] = {}
    for v in LEGACY_VARIANTS:
        files[v.filename] = variant_svg(v.with_overshoot(overshoot), label=label)
    files["README-legacy.txt"] = readme_legacy()
    return files


def build_files(
    set_name: str,
    cfg: GeometryConfig,
    policy: SlashPolicy = SlashPolicy.CUT_THROUGH,
    preset: Preset = Preset.NONE,
    label: str = DEFAULT_LABEL,
) -> Dict[str, str]:
    if set_name not in SETS:
        raise ValueError(f"Unknown set: {set_name!r} (expected one of {', '.join(SETS)})")
    files: Dict[str, str] = {}
    if set_name in ("precise", "all"):
        files.update(precise_files(cfg, policy, preset, label))
    if set_name in ("legacy", "all"):
        files.update(legacy_files(cfg.overshoot, label))
    return files


def write_files(out_dir: Path, files: Dict[str, str]) -> int:
    out_dir.mkdir(parents=True, exist_ok=True)
    written = 0
    for name, text in files.items():
        write_text_lf(out_dir / name, text)
        written += 1
        print(f"✓ {name}")
    return written


# -----------------------------
# Main
# -----------------------------
def build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(
        description="Generate empty-set (U+2205) SVG marks plus a README into OUT_DIR."
    )
    ap.add_argument("out_dir", nargs="?", default=DEFAULT_OUT_DIR, help=f"Output directory (default: {DEFAULT_OUT_DIR})")
    ap.add_argument("--set", dest="set_name", choices=SETS, default="precise", help="Which set to write (default: precise)")
    ap.add_argument("--label", default=DEFAULT_LABEL, help=f"aria-label for every SVG (default: {DEFAULT_LABEL!r})")
    ap.add_argument("--preset", default="", help=f"Font-inspired preset: {', '.join(PRESET_NAMES)} (unknown names are ignored)")
    ap.add_argument(
        "--slash",
        choices=[p.value for p in SlashPolicy],
        default=SlashPolicy.CUT_THROUGH.value,
        help="Precise stroke variant: slash cuts through the circle or stays inside (default: cut-through)",
    )

    ap.add_argument("--angle", type=parse_number, help="Slash angle in degrees, clamped to [-60, -10]")
    ap.add_argument("--edge-gap", type=parse_number, help="Gap from circle edge to slash ends, clamped to [2, 16]")
    ap.add_argument("--slash-stroke", type=parse_number, help="Slash thickness, clamped to [4, 24]")
    ap.add_argument("--radius-bold", type=parse_number, help="Stroke circle radius, clamped to [20, 46]")
    ap.add_argument("--ring-outer", type=parse_number, help="Filled ring outer radius, clamped to [26, 48]")
    ap.add_argument("--ring-inner", type=parse_number, help="Filled ring inner radius, clamped to [14, ring-outer - 6]")
    ap.add_argument("--overshoot", type=parse_number, help="Cut-through extension past the circle, clamped to [0, 20]")

    ap.add_argument("--dry-run", action="store_true", help="Print what would be written, but don't write files")
    return ap


def overrides_from_args(args: argparse.Namespace) -> GeometryOverrides:
    return GeometryOverrides(
        angle=args.angle,
        edge_gap=args.edge_gap,
        slash_stroke=args.slash_stroke,
        radius_bold=args.radius_bold,
        ring_outer=args.ring_outer,
        ring_inner=args.ring_inner,
        overshoot=args.overshoot,
    )


def main(argv: Optional[List[str]] = None) -> None:
    args = build_parser().parse_args(argv)

    preset = Preset.from_name(args.preset)
    policy = SlashPolicy.from_name(args.slash)
    cfg = resolve_config(DEFAULT_CONFIG, preset, overrides_from_args(args))

    files = build_files(args.set_name, cfg, policy=policy, preset=preset, label=args.label)
    out_dir = Path(args.out_dir).resolve()

    if args.dry_run:
        for name in files:
            print(f"[DRY] {name} -> {(out_dir / name).as_posix()}")
        return

    try:
        written = write_files(out_dir, files)
    except OSError as e:
        raise SystemExit(f"Failed to write into {out_dir.as_posix()}\nReason: {e}") from e

    print(f"\nDone. Wrote {written} file(s) to: {out_dir}")


if __name__ == "__main__":
    main()
