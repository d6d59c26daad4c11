### options.py - gdaldem processing options
##
## Copyright (c) 2010 - 2025 Regents of the University of Colorado
##
## options.py is part of DEMOPTS
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
## Options for the gdaldem processing modes (slope, aspect, hillshade,
## tri, tpi, roughness and color-relief), rendered into the ArgList
## that gdal.DEMProcessing (or the gdaldem utility) expects.
##
## Each options class is a small builder; set what you need and leave the
## rest for gdal to default:
##
## >>> opts = SlopeOptions().with_input_band(2).with_scale(111120).with_percentage_results()
## >>> str(opts.to_options_list())
## '-b 2 -s 111120 -p'
##
## Common options are always rendered first, in this order:
## -compute_edges, -b <band>, -of <format>, then the additional options;
## the mode specific options follow. Nothing is validated until
## `to_options_list` is called.
##
### Code:

import enum
import math
import numbers

from demopts.arglist import ArgList
from demopts.errors import (
    InvalidBand, InvalidParameter, UnsupportedAlgorithm, ConflictingOptions
)
from demopts.features import feature_matrix


class DemSlopeAlg(enum.Enum):
    """Algorithm for slope, aspect and hillshade.

    Horn is recommended for rougher terrain, ZevenbergenThorne for
    smoother landscapes.
    """
    
    Horn = 'Horn'
    ZevenbergenThorne = 'ZevenbergenThorne'

    def to_gdal_option(self):
        return(self.value)

    
class DemTriAlg(enum.Enum):
    """Algorithm for the Terrain Ruggedness Index (TRI).

    Wilson (Wilson et al 2007, Marine Geodesy 30:3-35) uses the mean difference
    between a central pixel and its surrounding cells, and is recommended for
    bathymetric use cases. Riley (Riley, S.J., De Gloria, S.D., Elliot, R. 1999)
    uses the square root of the sum of the squared differences and is recommended
    for terrestrial use cases; only available in GDAL >= 3.3.
    """
    
    Wilson = 'Wilson'
    Riley = 'Riley'

    def to_gdal_option(self):
        return(self.value)

    
class ShadingMode(enum.Enum):
    """Hillshade shading, in place of the default single light source."""
    
    Combined = 'combined'
    Multidirectional = 'multidirectional'
    Igor = 'igor'

    def to_gdal_option(self):
        return('-{}'.format(self.value))

    
class ColorMatchingMode(enum.Enum):
    """How color-relief matches elevations to the color configuration."""
    
    EXACT_COLOR_ENTRY = 'exact_color_entry'
    NEAREST_COLOR_ENTRY = 'nearest_color_entry'

    def to_gdal_option(self):
        return('-{}'.format(self.value))

    
def _as_enum(enum_cls, value, name):
    """return `value` as a member of `enum_cls`, matching a member, its value
    or its (case-insensitive) name.
    """
    
    if isinstance(value, enum_cls):
        return(value)

    for member in enum_cls:
        if value == member.value:
            return(member)
        
        if isinstance(value, str) and value.lower() == member.name.lower():
            return(member)
        
    raise InvalidParameter(
        name, value, 'expected one of ({}), got'.format(', '.join(m.name for m in enum_cls))
    )


def _fmt_num(name, value):
    """render a number as a minimal decimal string, e.g. 98473.0 => `98473`"""
    
    if isinstance(value, bool) or not isinstance(value, numbers.Real):
        raise InvalidParameter(name, value, 'expected a number, got')

    value = float(value)
    if not math.isfinite(value):
        raise InvalidParameter(name, value, 'non-finite value')

    if value.is_integer() and abs(value) < 1e16:
        return(str(int(value)))

    return(repr(value))


class DemOptions:
    """Options common to every gdaldem processing mode.

    Sub-classes set `mode` and extend `store_options_to` with their
    own options.

    Attributes:
      input_band (int): the band to process, numbered from 1 (gdal uses band 1 if unset)
      compute_edges (bool): process the edge pixels using approximated neighbor data
      output_format (str): the gdal driver short name of the output (e.g. `GTiff`)
      additional_options (ArgList): extra tokens merged in verbatim
    """
    
    mode = None
    
    def __init__(self):
        self._input_band = None
        self._compute_edges = False
        self._output_format = None
        self._additional_options = ArgList()

        
    def __repr__(self):
        return('<{} {}>'.format(type(self).__name__, self.__dict__))

    
    def with_input_band(self, band):
        """select the input band to process, numbered from 1"""
        
        self._input_band = band
        return(self)

    
    @property
    def input_band(self):
        return(self._input_band)

    
    def with_compute_edges(self, state=True):
        """process edge pixels using approximated neighbor data"""
        
        self._compute_edges = bool(state)
        return(self)

    
    @property
    def compute_edges(self):
        return(self._compute_edges)

    
    def with_output_format(self, output_format):
        """set the output gdal driver, e.g. `GTiff`

        the name is passed through as-is, gdal checks it against its drivers.
        """
        
        self._output_format = output_format
        return(self)

    
    @property
    def output_format(self):
        return(self._output_format)

    
    def with_additional_options(self, options):
        """set extra tokens to be merged in verbatim after the common options

        Args:
          options (ArgList|str|list): an ArgList, a string to parse or a list of tokens
        """

        if isinstance(options, str):
            self._additional_options = ArgList.parse(options)
        else:
            self._additional_options = ArgList(options)
            
        return(self)

    
    def with_creation_option(self, name, value):
        """add a `-co NAME=value` driver creation option to the additional options"""

        self._additional_options.extend(['-co', f'{name}={value}'])
        return(self)

    
    @property
    def additional_options(self):
        return(ArgList(self._additional_options))

    
    def _features(self, features=None):
        return(feature_matrix() if features is None else features)

    
    def _require(self, feature, features=None):
        """raise UnsupportedAlgorithm if `feature` is gated off for this mode"""
        
        features = self._features(features)
        if not features.is_supported(self.mode, feature):
            raise UnsupportedAlgorithm(self.mode, feature, features.version)

        
    def store_common_options_to(self, opts):
        """render the common options into the ArgList `opts`"""
        
        if self._compute_edges:
            opts.append('-compute_edges')

        if self._input_band is not None:
            band = self._input_band
            if isinstance(band, bool) \
               or not isinstance(band, numbers.Integral) \
               or band <= 0:
                raise InvalidBand(band)

            opts.extend(['-b', str(int(band))])

        if self._output_format is not None:
            opts.extend(['-of', str(self._output_format)])

        opts.merge(self._additional_options)

        
    def store_options_to(self, opts, features=None):
        """render the mode specific options into the ArgList `opts`"""
        
        pass

    
    def to_options_list(self, features=None):
        """render the options into a new ArgList, as used by gdal.DEMProcessing

        Args:
          features (FeatureMatrix): the gdal feature gates to check against,
                                    defaults to the process-wide matrix

        Returns:
          ArgList: the rendered options

        Raises:
          ConfigurationError: the options can not be rendered
        """
        
        opts = ArgList()
        self.store_common_options_to(opts)
        self.store_options_to(opts, features=features)
        
        return(opts)

    
class SlopeOptions(DemOptions):
    """Generate a slope map from a DEM

    < slope:alg=Horn:scale=111120:percentage_results=true >
    """

    mode = 'slope'
    
    def __init__(self):
        super().__init__()
        self._algorithm = None
        self._scale = None
        self._percentage_results = None

        
    def with_algorithm(self, algorithm):
        """set the slope algorithm, a DemSlopeAlg"""
        
        self._algorithm = algorithm
        return(self)

    
    @property
    def algorithm(self):
        return(self._algorithm)

    
    def with_scale(self, scale):
        """set the ratio of vertical units to horizontal.

        gdal assumes x, y and z units are identical. For LatLong rasters near
        the equator use 111120 for elevations in meters and 370400 for
        elevations in feet; elsewhere it is best to reproject the raster first.
        """
        
        self._scale = scale
        return(self)

    
    @property
    def scale(self):
        return(self._scale)

    
    def with_percentage_results(self, state=True):
        """express the slope as percent slope rather than degrees"""
        
        self._percentage_results = bool(state)
        return(self)

    
    @property
    def percentage_results(self):
        return(self._percentage_results)

    
    def store_options_to(self, opts, features=None):
        if self._algorithm is not None:
            alg = _as_enum(DemSlopeAlg, self._algorithm, 'algorithm')
            self._require(alg.value, features)
            opts.extend(['-alg', alg.to_gdal_option()])

        if self._scale is not None:
            opts.extend(['-s', _fmt_num('scale', self._scale)])

        ## only `-p` exists; degrees are gdal's default
        if self._percentage_results is True:
            opts.append('-p')

            
class AspectOptions(DemOptions):
    """Generate an aspect map from a DEM

    < aspect:alg=ZevenbergenThorne:trigonometric=true:zero_for_flat=true >
    """

    mode = 'aspect'
    
    def __init__(self):
        super().__init__()
        self._algorithm = None
        self._trigonometric_angle = None
        self._zero_for_flat = None

        
    def with_algorithm(self, algorithm):
        """set the aspect algorithm, a DemSlopeAlg"""
        
        self._algorithm = algorithm
        return(self)

    
    @property
    def algorithm(self):
        return(self._algorithm)

    
    def with_trigonometric_angle(self, state=True):
        """return the trigonometric angle (0 east, 90 north) instead of the azimuth"""
        
        self._trigonometric_angle = bool(state)
        return(self)

    
    @property
    def trigonometric_angle(self):
        return(self._trigonometric_angle)

    
    def with_zero_for_flat(self, state=True):
        """return 0 for flat areas with slope=0, instead of -9999"""
        
        self._zero_for_flat = bool(state)
        return(self)

    
    @property
    def zero_for_flat(self):
        return(self._zero_for_flat)

    
    def store_options_to(self, opts, features=None):
        if self._algorithm is not None:
            alg = _as_enum(DemSlopeAlg, self._algorithm, 'algorithm')
            self._require(alg.value, features)
            opts.extend(['-alg', alg.to_gdal_option()])

        if self._trigonometric_angle is True:
            opts.append('-trigonometric')

        if self._zero_for_flat is True:
            opts.append('-zero_for_flat')

            
class HillshadeOptions(DemOptions):
    """Generate a shaded relief map from a DEM

    < hillshade:alg=Horn:z_factor=2:azimuth=315:altitude=45:shading_mode=combined >
    """

    mode = 'hillshade'
    
    def __init__(self):
        super().__init__()
        self._algorithm = None
        self._scale = None
        self._z_factor = None
        self._azimuth = None
        self._altitude = None
        self._shading_mode = None

        
    def with_algorithm(self, algorithm):
        """set the hillshade algorithm, a DemSlopeAlg"""
        
        self._algorithm = algorithm
        return(self)

    
    @property
    def algorithm(self):
        return(self._algorithm)

    
    def with_scale(self, scale):
        """set the ratio of vertical units to horizontal, see `SlopeOptions.with_scale`"""
        
        self._scale = scale
        return(self)

    
    @property
    def scale(self):
        return(self._scale)

    
    def with_z_factor(self, z_factor):
        """vertical exaggeration used to pre-multiply the elevations"""
        
        self._z_factor = z_factor
        return(self)

    
    @property
    def z_factor(self):
        return(self._z_factor)

    
    def with_azimuth(self, azimuth):
        """azimuth of the light, in degrees. 0 if it comes from the top of the raster"""
        
        self._azimuth = azimuth
        return(self)

    
    @property
    def azimuth(self):
        return(self._azimuth)

    
    def with_altitude(self, altitude):
        """altitude of the light, in degrees. 90 if the light comes from above the DEM"""
        
        self._altitude = altitude
        return(self)

    
    @property
    def altitude(self):
        return(self._altitude)

    
    def with_shading_mode(self, shading_mode):
        """set the shading mode, a ShadingMode"""
        
        self._shading_mode = shading_mode
        return(self)

    
    @property
    def shading_mode(self):
        return(self._shading_mode)

    
    def store_options_to(self, opts, features=None):
        if self._algorithm is not None:
            alg = _as_enum(DemSlopeAlg, self._algorithm, 'algorithm')
            self._require(alg.value, features)
            opts.extend(['-alg', alg.to_gdal_option()])

        if self._scale is not None:
            opts.extend(['-s', _fmt_num('scale', self._scale)])

        if self._z_factor is not None:
            opts.extend(['-z', _fmt_num('z_factor', self._z_factor)])

        if self._azimuth is not None:
            opts.extend(['-az', _fmt_num('azimuth', self._azimuth)])

        if self._altitude is not None:
            opts.extend(['-alt', _fmt_num('altitude', self._altitude)])

        if self._shading_mode is not None:
            shading = _as_enum(ShadingMode, self._shading_mode, 'shading_mode')
            if shading is ShadingMode.Multidirectional and self._azimuth is not None:
                raise ConflictingOptions('-multidirectional', '-az')
            
            self._require(shading.value, features)
            opts.append(shading.to_gdal_option())

            
class TriOptions(DemOptions):
    """Generate a Terrain Ruggedness Index (TRI) map from a DEM

    < tri:alg=Riley >
    """

    mode = 'tri'
    
    def __init__(self):
        super().__init__()
        self._algorithm = None

        
    def with_algorithm(self, algorithm):
        """set the TRI algorithm, a DemTriAlg"""
        
        self._algorithm = algorithm
        return(self)

    
    @property
    def algorithm(self):
        return(self._algorithm)

    
    def store_options_to(self, opts, features=None):
        if self._algorithm is None:
            return

        alg = _as_enum(DemTriAlg, self._algorithm, 'algorithm')
        features = self._features(features)
        if features.is_supported(self.mode, 'alg'):
            self._require(alg.value, features)
            opts.extend(['-alg', alg.to_gdal_option()])
            
        ## before GDAL 3.3 Wilson is the only algorithm and there is no `-alg`
        elif alg is not DemTriAlg.Wilson:
            raise UnsupportedAlgorithm(self.mode, alg.value, features.version)

        
class TpiOptions(DemOptions):
    """Generate a Topographic Position Index (TPI) map from a DEM

    < tpi >
    """

    mode = 'tpi'

    
class RoughnessOptions(DemOptions):
    """Generate a roughness map from a DEM

    < roughness >
    """

    mode = 'roughness'

    
class ColorReliefOptions(DemOptions):
    """Generate a color relief map from a DEM

    The color configuration file is handed to gdal separately, see
    `processing.color_relief`.

    < color-relief:color_configuration=colors.txt:alpha=true:color_matching_mode=nearest_color_entry >
    """

    mode = 'color-relief'
    
    def __init__(self):
        super().__init__()
        self._color_configuration = None
        self._alpha = None
        self._color_matching_mode = None

        
    def with_color_configuration(self, path):
        """set the color configuration file (elevation r g b [a] per line)"""
        
        self._color_configuration = path
        return(self)

    
    @property
    def color_configuration(self):
        return(self._color_configuration)

    
    def with_alpha(self, state=True):
        """add an alpha channel to the output raster"""
        
        self._alpha = bool(state)
        return(self)

    
    @property
    def alpha(self):
        return(self._alpha)

    
    def with_color_matching_mode(self, mode):
        """set how elevations are matched to the color table, a ColorMatchingMode"""
        
        self._color_matching_mode = mode
        return(self)

    
    @property
    def color_matching_mode(self):
        return(self._color_matching_mode)

    
    def store_options_to(self, opts, features=None):
        if self._alpha is True:
            opts.append('-alpha')

        if self._color_matching_mode is not None:
            mode = _as_enum(ColorMatchingMode, self._color_matching_mode, 'color_matching_mode')
            opts.append(mode.to_gdal_option())

### End
