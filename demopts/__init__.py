### __init__.py - DEMOPTS gdaldem processing options
##
## Copyright (c) 2010 - 2025 Regents of the University of Colorado
##
## __init__.py is part of DEMOPTS
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
### Code:

__version__ = "0.1.0"
__author__ = "Matthew Love"
__credits__ = "CIRES"

from .arglist import ArgList
from .errors import (
    DemOptsError, ParseError, EncodingError, ConfigurationError, InvalidBand,
    UnsupportedAlgorithm, InvalidParameter, ConflictingOptions, ExternalError
)
from .features import FeatureMatrix, feature_matrix, set_feature_matrix
from .options import (
    DemSlopeAlg, DemTriAlg, ShadingMode, ColorMatchingMode, DemOptions,
    SlopeOptions, AspectOptions, HillshadeOptions, TriOptions, TpiOptions,
    RoughnessOptions, ColorReliefOptions
)

### End
