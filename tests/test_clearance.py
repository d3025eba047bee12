import dataclasses

import pytest

from emptyset.clearance import knockout_clearance, rounded_bar, slash_clearance, stroked_segment
from emptyset.config import DEFAULT_CONFIG, GeometryOverrides, Preset, resolve_config
from emptyset.geometry import SlashPolicy


def test_contained_slash_keeps_edge_gap():
    c = slash_clearance(DEFAULT_CONFIG, SlashPolicy.CONTAINED)
    assert c.contained
    assert c.margin == pytest.approx(DEFAULT_CONFIG.edge_gap, abs=1e-3)


def test_cut_through_slash_crosses_the_circle():
    c = slash_clearance(DEFAULT_CONFIG, SlashPolicy.CUT_THROUGH)
    assert not c.contained
    # overshoot plus the round cap
    assert c.margin == pytest.approx(-(6.0 + 6.0), abs=1e-3)


@pytest.mark.parametrize("preset", [Preset.INTER, Preset.SF, Preset.HELVETICA])
@pytest.mark.parametrize("edge_gap", [2.0, 6.0, 9.5])
def test_contained_margin_matches_edge_gap_for_any_angle(preset, edge_gap):
    cfg = resolve_config(DEFAULT_CONFIG, preset, GeometryOverrides(edge_gap=edge_gap, angle=-52.0))
    c = slash_clearance(cfg, SlashPolicy.CONTAINED)
    assert c.contained
    assert c.margin == pytest.approx(edge_gap, abs=1e-3)


def test_degenerate_slash_is_a_dot():
    cfg = dataclasses.replace(DEFAULT_CONFIG, radius_bold=20.0, slash_stroke=24.0, edge_gap=16.0)
    c = slash_clearance(cfg, SlashPolicy.CONTAINED)
    # zero-length slash leaves just the round cap at the center
    assert c.margin == pytest.approx(20.0 - 12.0, abs=1e-3)


def test_knockout_keeps_knock_gap_from_ring_edge():
    c = knockout_clearance(DEFAULT_CONFIG)
    assert c.contained
    assert c.margin == pytest.approx(DEFAULT_CONFIG.knock_gap, abs=1e-3)


def test_knockout_square_corners_reach_further():
    cfg = dataclasses.replace(DEFAULT_CONFIG, knock_radius=0.0)
    c = knockout_clearance(cfg)
    assert c.margin < DEFAULT_CONFIG.knock_gap


def test_stroked_segment_area():
    # 40 long, 12 thick, round caps: rectangle + full disk
    geom = stroked_segment(50.0, 50.0, 40.0, 12.0, -35.0)
    assert geom.area == pytest.approx(40.0 * 12.0 + 3.14159265 * 36.0, rel=1e-3)


def test_rounded_bar_capsule_matches_stroked_segment():
    bar = rounded_bar(50.0, 50.0, 62.0, 12.0, 6.0, -35.0)
    seg = stroked_segment(50.0, 50.0, 50.0, 12.0, -35.0)
    assert bar.symmetric_difference(seg).area == pytest.approx(0.0, abs=0.5)
