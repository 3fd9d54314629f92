"""Tests for galaxy parameters, color helpers and the command line."""

import pytest

from galaxy import GalaxyParameters, ParameterCommitted
from galaxy.parameters import parse_color, shift_brightness, shift_hue, to_hex
from main import build_parser, params_from_args


def test_defaults():
    params = GalaxyParameters()
    assert params.count == 100_000
    assert params.size == pytest.approx(0.01)
    assert params.radius == pytest.approx(6.0)
    assert params.branches == 4
    assert params.spin == pytest.approx(1.2)
    assert params.randomness == pytest.approx(0.45)
    assert params.randomness_power == pytest.approx(0.144)
    assert to_hex(params.inside_color) == "#ff6030"
    assert to_hex(params.outside_color) == "#1b3984"
    assert params.size_attenuation is True


@pytest.mark.parametrize("value, expected", [
    ("#ff0000", (1.0, 0.0, 0.0)),
    ("white", (1.0, 1.0, 1.0)),
    ((0, 255, 0), (0.0, 1.0, 0.0)),
    ((0.25, 0.5, 0.75), (0.25, 0.5, 0.75)),
    ((1.5, -0.2, 0.5), (1.0, 0.0, 0.5)),
])
def test_parse_color(value, expected):
    assert parse_color(value) == pytest.approx(expected)


def test_parse_color_rejects_wrong_arity():
    with pytest.raises(ValueError):
        parse_color((0.1, 0.2))


def test_hue_and_brightness_shift():
    assert shift_hue((1.0, 0.0, 0.0), 120.0) == pytest.approx((0.0, 1.0, 0.0), abs=1 / 255)
    assert shift_hue((1.0, 0.0, 0.0), -120.0) == pytest.approx((0.0, 0.0, 1.0), abs=1 / 255)
    dimmer = shift_brightness((1.0, 1.0, 1.0), -50.0)
    assert dimmer == pytest.approx((0.5, 0.5, 0.5), abs=2 / 255)
    assert shift_brightness((1.0, 1.0, 1.0), 30.0) == pytest.approx((1.0, 1.0, 1.0))


def test_with_value_coerces_types():
    params = GalaxyParameters()
    assert params.with_value("count", "1500.4").count == 1500
    assert params.with_value("count", -20).count == 0
    assert params.with_value("branches", 7.0).branches == 7
    assert params.with_value("spin", "2").spin == 2.0
    assert params.with_value("size_attenuation", 0).size_attenuation is False
    assert params.with_value("inside_color", "#000000").inside_color == (0.0, 0.0, 0.0)
    # Original value untouched
    assert params.count == 100_000


def test_with_value_rejects_unknown_field():
    with pytest.raises(ValueError):
        GalaxyParameters().with_value("arms", 3)


def test_apply_commit_event():
    params = GalaxyParameters().apply(ParameterCommitted("radius", 12.5))
    assert params.radius == 12.5


def test_clamped_respects_bounds():
    params = GalaxyParameters(count=5, size=1.0, radius=50.0, branches=1, spin=-9.0,
                              randomness=0.0, randomness_power=-3.0).clamped()
    assert params.count == 100
    assert params.size == pytest.approx(0.1)
    assert params.radius == pytest.approx(20.0)
    assert params.branches == 2
    assert params.spin == pytest.approx(-5.0)
    assert params.randomness == pytest.approx(0.01)
    assert params.randomness_power == pytest.approx(-1.0)
    assert isinstance(params.count, int)


def test_presets():
    assert GalaxyParameters.from_preset("classic") == GalaxyParameters()
    pinwheel = GalaxyParameters.from_preset("pinwheel")
    assert pinwheel.branches == 6
    with pytest.raises(ValueError):
        GalaxyParameters.from_preset("does-not-exist")


def test_cli_overrides_and_clamps():
    args = build_parser().parse_args([
        "--preset", "nebula", "--count", "999999", "--spin", "-2",
        "--inside-color", "#ffffff", "--no-attenuation",
    ])
    params = params_from_args(args)
    assert params.count == 200_000
    assert params.spin == pytest.approx(-2.0)
    assert params.branches == 3
    assert params.inside_color == (1.0, 1.0, 1.0)
    assert params.size_attenuation is False


def test_cli_defaults_match_parameters():
    assert params_from_args(build_parser().parse_args([])) == GalaxyParameters()
