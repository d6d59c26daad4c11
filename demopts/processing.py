### processing.py - run gdaldem processing
##
## Copyright (c) 2010 - 2025 Regents of the University of Colorado
##
## processing.py is part of DEMOPTS
##
## Permission is hereby granted, free of charge, to any person obtaining a copy 
## of this software and associated documentation files (the "Software"), to deal 
## in the Software without restriction, including without limitation the rights 
## to use, copy, modify, merge, publish, distribute, sublicense, and/or sell copies 
## of the Software, and to permit persons to whom the Software is furnished to do so, 
## subject to the following conditions:
##
## The above copyright notice and this permission notice shall be included in all
## copies or substantial portions of the Software.
##
## THE SOFTWARE IS PROVIDED "AS IS", WITHOUT WARRANTY OF ANY KIND, EXPRESS OR IMPLIED, 
## INCLUDING BUT NOT LIMITED TO THE WARRANTIES OF MERCHANTABILITY, FITNESS FOR A PARTICULAR 
## PURPOSE AND NONINFRINGEMENT. IN NO EVENT SHALL THE AUTHORS OR COPYRIGHT HOLDERS BE LIABLE 
## FOR ANY CLAIM, DAMAGES OR OTHER LIABILITY, WHETHER IN AN ACTION OF CONTRACT, TORT OR OTHERWISE, 
## ARISING FROM, OUT OF OR IN CONNECTION WITH THE SOFTWARE OR THE USE OR OTHER DEALINGS IN THE
## SOFTWARE.
##
###############################################################################
### Commentary:
##
## Hand a set of gdaldem options to gdal.DEMProcessing.
##
## gdal does all of the actual work here; this module only registers the
## gdal drivers (once per process), renders the options and turns a gdal
## failure into an ExternalError.
##
## slope_ds = slope('dem.tif', 'dem_slope.tif', SlopeOptions().with_scale(111120))
##
### Code:

import os
import threading

from demopts import utils
from demopts import options
from demopts.errors import ConfigurationError, ExternalError

try:
    from osgeo import gdal
except ImportError:
    gdal = None

_register_lock = threading.Lock()
_registered_drivers = False


def _require_gdal():
    if gdal is None:
        raise ExternalError('the GDAL python bindings (osgeo) are not installed')

    
def register_drivers():
    """register all the gdal drivers, exactly once per process"""

    global _registered_drivers
    
    _require_gdal()
    with _register_lock:
        if not _registered_drivers:
            gdal.AllRegister()
            _registered_drivers = True

            
def version_info(key='RELEASE_NAME'):
    """return gdal.VersionInfo for `key`, e.g. `RELEASE_NAME`, `VERSION_NUM` or `--version`"""
    
    _require_gdal()
    return(gdal.VersionInfo(key))


def _gdal_src(src_dem):
    """gdal wants a dataset or a plain `str` path"""
    
    if isinstance(src_dem, (str, bytes)) or hasattr(src_dem, '__fspath__'):
        return(os.fsdecode(src_dem))

    return(src_dem)


def dem_processing(src_dem, dst_fn, dem_options, color_filename=None, verbose=False):
    """run gdal.DEMProcessing with the mode and options of `dem_options`

    Args:
      src_dem (str|gdal.Dataset): the source DEM
      dst_fn (str): the output filename
      dem_options (DemOptions): the processing options
      color_filename (str): the color configuration, for color-relief only;
                            defaults to the one set on `dem_options`
      verbose (bool): increase verbosity

    Returns:
      gdal.Dataset: the output dataset

    Raises:
      ConfigurationError: the options can not be rendered
      ExternalError: gdal is missing or the processing failed
    """

    opts = dem_options.to_options_list()
    if dem_options.mode == 'color-relief':
        if color_filename is None:
            color_filename = dem_options.color_configuration
            
        if color_filename is None:
            raise ConfigurationError('color-relief requires a color configuration file')

    register_drivers()
    if verbose:
        utils.echo_msg(
            'gdaldem {} {} {} {}'.format(dem_options.mode, src_dem, dst_fn, opts)
        )

    gdal.ErrorReset()
    try:
        dst_ds = gdal.DEMProcessing(
            os.fsdecode(dst_fn), _gdal_src(src_dem), dem_options.mode,
            options=opts.to_list(), colorFilename=color_filename
        )
    except RuntimeError as e:
        raise ExternalError(f'gdaldem {dem_options.mode} failed, {e}') from e
    
    if dst_ds is None:
        raise ExternalError(
            'gdaldem {} failed, {}'.format(dem_options.mode, gdal.GetLastErrorMsg())
        )

    return(dst_ds)


def _run_mode(options_cls, src_dem, dst_fn, dem_options, **kwargs):
    if dem_options is None:
        dem_options = options_cls()
    elif not isinstance(dem_options, options_cls):
        raise TypeError(
            f'expected {options_cls.__name__}, got {type(dem_options).__name__}'
        )
    
    return(dem_processing(src_dem, dst_fn, dem_options, **kwargs))


def slope(src_dem, dst_fn, dem_options=None, **kwargs):
    """generate a slope map from `src_dem`, see `options.SlopeOptions`"""
    
    return(_run_mode(options.SlopeOptions, src_dem, dst_fn, dem_options, **kwargs))


def aspect(src_dem, dst_fn, dem_options=None, **kwargs):
    """generate an aspect map from `src_dem`, see `options.AspectOptions`"""
    
    return(_run_mode(options.AspectOptions, src_dem, dst_fn, dem_options, **kwargs))


def hillshade(src_dem, dst_fn, dem_options=None, **kwargs):
    """generate a shaded relief map from `src_dem`, see `options.HillshadeOptions`"""
    
    return(_run_mode(options.HillshadeOptions, src_dem, dst_fn, dem_options, **kwargs))


def terrain_ruggedness_index(src_dem, dst_fn, dem_options=None, **kwargs):
    """generate a TRI map from `src_dem`, see `options.TriOptions`"""
    
    return(_run_mode(options.TriOptions, src_dem, dst_fn, dem_options, **kwargs))


def topographic_position_index(src_dem, dst_fn, dem_options=None, **kwargs):
    return(_run_mode(options.TpiOptions, src_dem, dst_fn, dem_options, **kwargs))


def roughness(src_dem, dst_fn, dem_options=None, **kwargs):
    return(_run_mode(options.RoughnessOptions, src_dem, dst_fn, dem_options, **kwargs))


def color_relief(src_dem, color_filename, dst_fn, dem_options=None, **kwargs):
    """generate a color relief map from `src_dem` using the color
    configuration in `color_filename`
    """
    
    return(_run_mode(
        options.ColorReliefOptions, src_dem, dst_fn, dem_options,
        color_filename=color_filename, **kwargs
    ))

### End
