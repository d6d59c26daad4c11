# tests/test_factory.py

import pytest

from demopts import factory
from demopts.errors import InvalidBand
from demopts.options import SlopeOptions, TriOptions, HillshadeOptions, DemTriAlg


def test_fmod2dict():
    d = factory.fmod2dict('slope:alg=Horn:p=true:band=none:options="CPL_DEBUG=ON -q":co=TILED=YES')
    assert d == {
        "_module": "slope",
        "alg": "Horn",
        "p": True,
        "band": None,
        "options": "CPL_DEBUG=ON -q",
        "co": "TILED=YES",
    }


def test_fmod2dict_lists():
    d = factory.fmod2dict('tpi:co="TILED=YES;COMPRESS=LZW"')
    assert d["co"] == ["TILED=YES", "COMPRESS=LZW"]


def test_dict2fmod_round_trip():
    d = {"_module": "hillshade", "z": "2", "options": "CPL_DEBUG=ON", "compute_edges": True}
    fmod = factory.dict2fmod(d)
    assert fmod == 'hillshade:z=2:options="CPL_DEBUG=ON":compute_edges=True'
    assert factory.fmod2dict(fmod) == d


def test_acquire_slope():
    opts = factory.DemOptionsFactory(
        mod='slope:b=2:alg=ZevenbergenThorne:s=98473:compute_edges=true:p=true:of=GTiff:options="CPL_DEBUG=ON"'
    )._acquire_module()

    assert isinstance(opts, SlopeOptions)
    assert str(opts.to_options_list()) == \
        "-compute_edges -b 2 -of GTiff CPL_DEBUG=ON -alg ZevenbergenThorne -s 98473 -p"


def test_acquire_with_kwargs():
    f = factory.DemOptionsFactory(mod="tri:alg=Riley", algorithm="Wilson", input_band=1)
    opts = f._acquire_module()

    assert isinstance(opts, TriOptions)
    assert opts.input_band == 1
    assert opts.algorithm == "Riley"
    assert str(opts.to_options_list()) == "-b 1 -alg Riley"


def test_acquire_creation_options():
    opts = factory.DemOptionsFactory(
        mod='hillshade:co="TILED=YES;COMPRESS=LZW":az=300:alt=30'
    )._acquire_module()

    assert isinstance(opts, HillshadeOptions)
    assert str(opts.to_options_list()) == "-co TILED=YES -co COMPRESS=LZW -az 300 -alt 30"


def test_acquire_bad_values_fail_at_render():
    opts = factory.DemOptionsFactory(mod="slope:band=zero")._acquire_module()
    assert opts.input_band == "zero"

    with pytest.raises(InvalidBand):
        opts.to_options_list()


def test_invalid_module(capsys):
    f = factory.DemOptionsFactory(mod="curvature:alg=Horn")
    assert f.mod_name is None
    assert f._acquire_module() is None
    assert "invalid module name" in capsys.readouterr().err


def test_invalid_parameter_warns(capsys):
    opts = factory.DemOptionsFactory(mod="roughness:alg=Horn")._acquire_module()
    assert len(opts.to_options_list()) == 0
    assert "alg is not a valid parameter" in capsys.readouterr().err


def test_unparseable_options(capsys):
    f = factory.DemOptionsFactory(mod="slope", options='CPL_DEBUG="ON')
    assert f._acquire_module() is None
    assert "could not acquire module" in capsys.readouterr().err


def test_parameter_file(tmp_path):
    param_file = tmp_path / "slope.json"
    factory.DemOptionsFactory(mod="slope:alg=Horn", scale=2).write_parameter_file(str(param_file))

    f = factory.DemOptionsFactory().open_parameter_file(str(param_file))
    assert f.mod_name == "slope"
    assert str(f._acquire_module().to_options_list()) == "-alg Horn -s 2"


def test_echo_modules(capsys):
    factory.echo_modules(factory.DemOptionsFactory._modules, None)
    err = capsys.readouterr().err
    assert "slope" in err and "color-relief" in err

    factory.echo_modules(factory.DemOptionsFactory._modules, "nope")
    assert "Invalid Module Key" in capsys.readouterr().err


def test_tri_enum_from_factory_is_gated(gdal_32):
    opts = factory.DemOptionsFactory(mod="tri:alg=Wilson")._acquire_module()
    assert opts.to_options_list(features=gdal_32).to_list() == []
    assert factory.DemOptionsFactory(mod="tri")._acquire_module().algorithm is None
    assert DemTriAlg("Wilson") is DemTriAlg.Wilson


@pytest.mark.parametrize("mod", ["slope:p=nope", "aspect:zero_for_flat=2", "color-relief:alpha=none"])
def test_bad_flags_are_rejected(mod, capsys):
    assert factory.DemOptionsFactory(mod=mod)._acquire_module() is None
    assert "expected true or false" in capsys.readouterr().err


def test_shading_and_color_matching_aliases():
    opts = factory.DemOptionsFactory(mod="hillshade:shading=igor")._acquire_module()
    assert opts.shading_mode == "igor"
    assert str(opts.to_options_list()) == "-igor"

    opts = factory.DemOptionsFactory(mod="color-relief:color_matching=exact_color_entry")._acquire_module()
    assert str(opts.to_options_list()) == "-exact_color_entry"
