# tests/test_options.py

import math

import pytest

from demopts.arglist import ArgList
from demopts.errors import (
    ConfigurationError, InvalidBand, InvalidParameter, UnsupportedAlgorithm,
    ConflictingOptions, EncodingError, ParseError
)
from demopts.features import FeatureMatrix
from demopts.options import (
    DemSlopeAlg, DemTriAlg, ShadingMode, ColorMatchingMode, SlopeOptions,
    AspectOptions, HillshadeOptions, TriOptions, TpiOptions, RoughnessOptions,
    ColorReliefOptions
)


def test_slope_options():
    opts = SlopeOptions()
    opts.with_input_band(2) \
        .with_algorithm(DemSlopeAlg.ZevenbergenThorne) \
        .with_scale(98473.0) \
        .with_compute_edges(True) \
        .with_percentage_results(True) \
        .with_output_format("GTiff") \
        .with_additional_options(ArgList.parse("CPL_DEBUG=ON"))

    expected = ArgList.parse(
        "-compute_edges -b 2 -of GTiff CPL_DEBUG=ON -alg ZevenbergenThorne -s 98473 -p"
    )
    assert opts.to_options_list().render() == expected.render()


def test_tri_options_gate_open():
    opts = TriOptions()
    opts.with_input_band(2) \
        .with_compute_edges(True) \
        .with_algorithm(DemTriAlg.Wilson) \
        .with_output_format("GTiff") \
        .with_additional_options("CPL_DEBUG=ON")

    assert str(opts.to_options_list()) == "-compute_edges -b 2 -of GTiff CPL_DEBUG=ON -alg Wilson"


def test_tri_options_gate_closed(gdal_32):
    opts = TriOptions()
    opts.with_input_band(2) \
        .with_compute_edges(True) \
        .with_algorithm(DemTriAlg.Wilson) \
        .with_output_format("GTiff") \
        .with_additional_options("CPL_DEBUG=ON")

    assert str(opts.to_options_list(features=gdal_32)) == "-compute_edges -b 2 -of GTiff CPL_DEBUG=ON"


def test_tri_riley_needs_gdal_33(gdal_32):
    opts = TriOptions().with_algorithm(DemTriAlg.Riley)
    assert str(opts.to_options_list()) == "-alg Riley"

    with pytest.raises(UnsupportedAlgorithm) as excinfo:
        opts.to_options_list(features=gdal_32)
    assert excinfo.value.version == (3, 2)


def test_slope_unsupported_algorithm_is_an_error():
    matrix = FeatureMatrix((3, 8), features={("slope", "ZevenbergenThorne"): (9, 0)})
    opts = SlopeOptions().with_algorithm(DemSlopeAlg.ZevenbergenThorne)

    with pytest.raises(UnsupportedAlgorithm):
        opts.to_options_list(features=matrix)
    assert str(opts.with_algorithm(DemSlopeAlg.Horn).to_options_list(features=matrix)) == "-alg Horn"


def test_common_option_order():
    opts = TpiOptions() \
        .with_additional_options(["-co", "TILED=YES"]) \
        .with_output_format("COG") \
        .with_input_band(3) \
        .with_compute_edges()

    assert opts.to_options_list().to_list() == [
        "-compute_edges", "-b", "3", "-of", "COG", "-co", "TILED=YES"
    ]


def test_empty_options():
    for cls in (SlopeOptions, AspectOptions, HillshadeOptions, TriOptions,
                TpiOptions, RoughnessOptions, ColorReliefOptions):
        assert len(cls().to_options_list()) == 0


def test_boolean_flags_only_when_true():
    opts = SlopeOptions().with_compute_edges(False)
    assert "-compute_edges" not in opts.to_options_list()

    assert opts.percentage_results is None
    assert "-p" not in opts.to_options_list()

    opts.with_percentage_results(False)
    assert opts.percentage_results is False
    assert "-p" not in opts.to_options_list()

    opts.with_percentage_results()
    assert opts.to_options_list().to_list() == ["-p"]


@pytest.mark.parametrize("band", [0, -1, 1.5, "2", True])
def test_invalid_band(band):
    opts = SlopeOptions().with_input_band(band)
    assert opts.input_band == band

    with pytest.raises(InvalidBand):
        opts.to_options_list()


def test_band_rendering():
    opts = RoughnessOptions().with_input_band(2)
    assert str(opts.to_options_list()) == "-b 2"


def test_invalid_band_is_a_configuration_error():
    with pytest.raises(ConfigurationError):
        TriOptions().with_input_band(0).to_options_list()


def test_compile_is_deterministic():
    opts = HillshadeOptions() \
        .with_compute_edges() \
        .with_algorithm("ZevenbergenThorne") \
        .with_z_factor(2.5) \
        .with_azimuth(315) \
        .with_altitude(45) \
        .with_shading_mode(ShadingMode.Combined)

    first = opts.to_options_list()
    assert opts.to_options_list().render() == first.render()
    assert str(first) == "-compute_edges -alg ZevenbergenThorne -z 2.5 -az 315 -alt 45 -combined"


@pytest.mark.parametrize("scale, rendered", [
    (98473.0, "98473"),
    (111120, "111120"),
    (0.5, "0.5"),
    (1e-07, "1e-07"),
    (1e20, "1e+20"),
    (-3.25, "-3.25"),
])
def test_scale_rendering(scale, rendered):
    opts = SlopeOptions().with_scale(scale)
    tokens = opts.to_options_list().to_list()

    assert tokens == ["-s", rendered]
    assert float(tokens[1]) == scale


@pytest.mark.parametrize("scale", [math.nan, math.inf, "111120", "abc"])
def test_invalid_scale(scale):
    with pytest.raises(InvalidParameter):
        SlopeOptions().with_scale(scale).to_options_list()


def test_algorithm_by_name():
    assert str(SlopeOptions().with_algorithm("horn").to_options_list()) == "-alg Horn"
    assert str(TriOptions().with_algorithm("Riley").to_options_list()) == "-alg Riley"

    with pytest.raises(InvalidParameter):
        SlopeOptions().with_algorithm("Wilson").to_options_list()


def test_setters_do_not_validate():
    opts = SlopeOptions().with_input_band(-4).with_algorithm("nope").with_scale(math.nan)
    assert opts.input_band == -4
    assert opts.algorithm == "nope"


def test_additional_options_are_copied():
    extra = ArgList.parse("CPL_DEBUG=ON")
    opts = SlopeOptions().with_additional_options(extra)
    extra.append("-q")

    assert opts.additional_options == ArgList.parse("CPL_DEBUG=ON")
    opts.additional_options.append("-x")
    assert str(opts.to_options_list()) == "CPL_DEBUG=ON"


def test_additional_options_errors_surface_immediately():
    with pytest.raises(ParseError):
        SlopeOptions().with_additional_options('"unterminated')

    with pytest.raises(EncodingError):
        SlopeOptions().with_additional_options(['say "hi"'])


def test_creation_options():
    opts = SlopeOptions() \
        .with_output_format("GTiff") \
        .with_creation_option("COMPRESS", "DEFLATE") \
        .with_creation_option("TILED", "YES") \
        .with_scale(2)

    assert str(opts.to_options_list()) == "-of GTiff -co COMPRESS=DEFLATE -co TILED=YES -s 2"


def test_bad_creation_option_leaves_options_unchanged():
    opts = SlopeOptions().with_creation_option("TILED", "YES")
    with pytest.raises(EncodingError):
        opts.with_creation_option("COMPRESS", '"DEFLATE"')

    assert opts.to_options_list().to_list() == ["-co", "TILED=YES"]

    with pytest.raises(EncodingError):
        opts.with_additional_options(True)


def test_aspect_options():
    opts = AspectOptions() \
        .with_algorithm(DemSlopeAlg.Horn) \
        .with_zero_for_flat() \
        .with_trigonometric_angle()

    assert str(opts.to_options_list()) == "-alg Horn -trigonometric -zero_for_flat"
    assert opts.zero_for_flat and opts.trigonometric_angle

    opts.with_zero_for_flat(False).with_trigonometric_angle(False)
    assert str(opts.to_options_list()) == "-alg Horn"


def test_hillshade_options():
    opts = HillshadeOptions() \
        .with_input_band(1) \
        .with_scale(111120) \
        .with_z_factor(3) \
        .with_shading_mode("multidirectional")

    assert str(opts.to_options_list()) == "-b 1 -s 111120 -z 3 -multidirectional"


def test_hillshade_multidirectional_excludes_azimuth():
    opts = HillshadeOptions().with_azimuth(315).with_shading_mode(ShadingMode.Multidirectional)
    with pytest.raises(ConflictingOptions):
        opts.to_options_list()


def test_hillshade_shading_is_version_gated():
    opts = HillshadeOptions().with_shading_mode(ShadingMode.Igor)
    assert str(opts.to_options_list(features=FeatureMatrix((3, 0)))) == "-igor"

    with pytest.raises(UnsupportedAlgorithm):
        opts.to_options_list(features=FeatureMatrix((2, 4)))


def test_color_relief_options():
    opts = ColorReliefOptions() \
        .with_color_configuration("colors.txt") \
        .with_alpha() \
        .with_color_matching_mode(ColorMatchingMode.NEAREST_COLOR_ENTRY)

    assert str(opts.to_options_list()) == "-alpha -nearest_color_entry"
    assert opts.color_configuration == "colors.txt"
    assert "colors.txt" not in opts.to_options_list()

    opts.with_color_matching_mode("exact_color_entry")
    assert str(opts.to_options_list()) == "-alpha -exact_color_entry"


def test_modes():
    assert SlopeOptions.mode == "slope"
    assert TriOptions.mode == "tri"
    assert TpiOptions.mode == "tpi"
    assert ColorReliefOptions.mode == "color-relief"
