### features.py - GDAL version gated features
##
## Copyright (c) 2010 - 2025 Regents of the University of Colorado
##
## features.py is part of DEMOPTS
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
## Some gdaldem algorithms and flags only exist in newer GDAL releases,
## e.g. TRI only grew its `-alg` switch (and the Riley algorithm) in 3.3.
##
## The FeatureMatrix maps (operation, feature) to whether that feature is
## legal for a given GDAL (major, minor) version. The process-wide matrix
## is built once, on first use, from the GDAL version found by
## `utils.config_check`, which reads ~/.demopts_config.json when present
## (set DEMOPTS_GDAL_VERSION to override either), and is
## read-only afterwards.
##
### Code:

import threading

from demopts import utils

## (operation, feature): minimum (major, minor) GDAL version
_gdal_features = {
    ('tri', 'alg'): (3, 3),
    ('tri', 'Riley'): (3, 3),
    ('hillshade', 'combined'): (2, 0),
    ('hillshade', 'multidirectional'): (2, 2),
    ('hillshade', 'igor'): (3, 0),
}


class FeatureMatrix:
    """Which gated gdaldem features the linked GDAL supports.

    Attributes:
      version (tuple): the GDAL (major, minor) version, or None if unknown;
                       an unknown version allows every feature
    """
    
    def __init__(self, version=None, features=None):
        self.version = tuple(version) if version is not None else None
        self._features = dict(_gdal_features if features is None else features)

        
    def is_supported(self, operation, feature):
        """check if `feature` of `operation` is legal under this GDAL version

        Features without a gate are always supported.
        """
        
        min_version = self._features.get((operation, feature))
        if min_version is None or self.version is None:
            return(True)

        return(self.version >= tuple(min_version))

    
    def __repr__(self):
        return('<FeatureMatrix GDAL {}>'.format(
            '.'.join(str(x) for x in self.version) if self.version is not None else 'unknown'
        ))

    
_matrix_lock = threading.Lock()
_matrix = None


def load_feature_matrix(config=None):
    """build a FeatureMatrix from a `utils.config_check` style dict"""

    if config is None:
        config = utils.config_check()
        
    version = utils.parse_version(config.get('GDAL'))
    if version is None:
        utils.echo_warning_msg(
            'could not determine the GDAL version, all gdaldem features are enabled'
        )
        
    return(FeatureMatrix(version))


def feature_matrix():
    """return the process-wide FeatureMatrix, building it on first use"""

    global _matrix
    
    with _matrix_lock:
        if _matrix is None:
            _matrix = load_feature_matrix()
            
        return(_matrix)

    
def set_feature_matrix(matrix):
    """install `matrix` as the process-wide FeatureMatrix

    Use at configuration time, before any options are compiled. Passing
    None will rebuild the matrix from the environment on next use.
    """

    global _matrix
    
    with _matrix_lock:
        _matrix = matrix

### End
