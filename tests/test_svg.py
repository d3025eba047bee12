import xml.etree.ElementTree as ET

import pytest

from emptyset.config import DEFAULT_CONFIG
from emptyset.geometry import SlashPolicy
from emptyset.svg import fmt, ring_path_d, ring_svg, stroke_svg, variant_svg
from emptyset.variants import LEGACY_VARIANTS, RING

NS = "{http://www.w3.org/2000/svg}"


def parse(svg: str) -> ET.Element:
    return ET.fromstring(svg.encode("utf-8"))


def legacy(filename):
    return next(v for v in LEGACY_VARIANTS if v.filename == filename)


def test_fmt_strips_trailing_zeros():
    assert fmt(40.0) == "40"
    assert fmt(12.5) == "12.5"
    assert fmt(1.23456) == "1.235"
    assert fmt(-0.0) == "0"
    assert fmt(-35.0) == "-35"


def test_stroke_svg_contained_slash_endpoints():
    root = parse(stroke_svg(DEFAULT_CONFIG, SlashPolicy.CONTAINED))
    line = root.find(f".//{NS}line")
    assert line is not None
    # length 40 centered on 50
    assert line.get("x1") == "30"
    assert line.get("x2") == "70"
    assert line.get("y1") == line.get("y2") == "50"
    assert line.get("stroke-width") == "12"


def test_stroke_svg_cut_through_slash_endpoints():
    root = parse(stroke_svg(DEFAULT_CONFIG, SlashPolicy.CUT_THROUGH))
    line = root.find(f".//{NS}line")
    # length 2 * (32 + 6) = 76
    assert line.get("x1") == "12"
    assert line.get("x2") == "88"


def test_stroke_svg_circle_and_rotation():
    root = parse(stroke_svg(DEFAULT_CONFIG))
    assert root.get("viewBox") == "0 0 100 100"
    assert root.get("role") == "img"
    circle = root.find(f".//{NS}circle")
    assert circle.get("r") == "32"
    assert circle.get("stroke-width") == "14"
    group = root.find(f"{NS}g")
    assert group.get("stroke") == "currentColor"
    assert group.get("vector-effect") == "non-scaling-stroke"
    rotated = group.find(f"{NS}g")
    assert rotated.get("transform") == "rotate(-35 50 50)"


def test_label_is_escaped():
    label = 'Empty & "null" <set>'
    root = parse(stroke_svg(DEFAULT_CONFIG, label=label))
    assert root.get("aria-label") == label


def test_ring_svg_mask_is_referenced():
    svg = ring_svg(DEFAULT_CONFIG, mask_id="cut-test")
    root = parse(svg)
    mask = root.find(f".//{NS}mask")
    assert mask.get("id") == "cut-test"
    painted = [g for g in root.findall(f"{NS}g") if g.get("mask")]
    assert painted[0].get("mask") == "url(#cut-test)"
    assert painted[0].find(f"{NS}path").get("fill-rule") == "evenodd"


def test_ring_svg_knockout_rect():
    root = parse(ring_svg(DEFAULT_CONFIG))
    rects = root.findall(f".//{NS}mask/{NS}g/{NS}rect")
    assert len(rects) == 1
    knock = rects[0]
    # length 2 * (38 - 7) = 62, thickness = slash stroke
    assert knock.get("width") == "62"
    assert knock.get("x") == "19"
    assert knock.get("height") == "12"
    assert knock.get("y") == "44"
    assert knock.get("rx") == "6"
    assert knock.get("fill") == "black"


def test_ring_svg_masks_are_unique_per_render():
    a = parse(ring_svg(DEFAULT_CONFIG)).find(f".//{NS}mask").get("id")
    b = parse(ring_svg(DEFAULT_CONFIG)).find(f".//{NS}mask").get("id")
    assert a.startswith("cut-")
    assert a != b


def test_ring_path_outer_then_inner():
    d = ring_path_d(50.0, 50.0, 38.0, 24.0)
    assert d.startswith("M 50,12 a 38,38 0 1 1 0,76")
    assert "M 50,26 a 24,24 0 1 0 0,48" in d


@pytest.mark.parametrize("variant", LEGACY_VARIANTS, ids=lambda v: v.filename)
def test_legacy_variants_are_valid_xml(variant):
    root = parse(variant_svg(variant))
    assert root.tag == f"{NS}svg"
    if variant.kind == RING:
        assert root.find(f".//{NS}mask") is not None
    else:
        assert root.find(f".//{NS}line") is not None


def test_legacy_monogram_uses_tall_canvas():
    root = parse(variant_svg(legacy("emptyset_monogram.svg")))
    assert root.get("viewBox") == "0 0 120 120"
    circle = root.find(f".//{NS}circle")
    assert circle.get("cx") == "60"
    assert circle.get("r") == "35"
    line = root.find(f".//{NS}line")
    # cut-through: 2 * (35 + 6) = 82 centered on 60
    assert line.get("x1") == "19"
    assert line.get("x2") == "101"


def test_legacy_filled_outline_knockout():
    root = parse(variant_svg(legacy("emptyset_filled_outline_legacy.svg")))
    knock = root.find(f".//{NS}mask/{NS}g/{NS}rect")
    assert knock.get("x") == "15"
    assert knock.get("y") == "45"
    assert knock.get("width") == "70"
    assert knock.get("height") == "10"
    assert knock.get("rx") == "5"


def test_legacy_overshoot_follows_run():
    basic = legacy("emptyset_basic.svg").with_overshoot(10.0)
    line = parse(variant_svg(basic)).find(f".//{NS}line")
    # 2 * (34 + 10) = 88
    assert line.get("x1") == "6"
    assert line.get("x2") == "94"
