### errors.py - DEMOPTS exceptions
##
## Copyright (c) 2010 - 2025 Regents of the University of Colorado
##
## errors.py is part of DEMOPTS
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
## Exceptions raised by demopts. Everything subclasses DemOptsError
## together with the matching built-in, so callers may catch either.
##
## ParseError and EncodingError come from ArgList, the ConfigurationError
## family from compiling a set of options and ExternalError from the
## gdal processing boundary.
##
### Code:


class DemOptsError(Exception):
    """Base exception for all demopts errors."""


class ParseError(DemOptsError, ValueError):
    """Malformed argument list source text.

    `pos` is the offset in the source of the quote that was never closed.
    """

    def __init__(self, msg, source=None, pos=None):
        super().__init__(msg)
        self.source = source
        self.pos = pos


class EncodingError(DemOptsError, ValueError):
    """A token can not be represented in the gdal argument syntax."""

    def __init__(self, msg, token=None):
        super().__init__(msg)
        self.token = token


class ConfigurationError(DemOptsError, ValueError):
    """Invalid processing options, raised when compiling an options list."""


class InvalidBand(ConfigurationError):
    """The input band is not a positive (1-indexed) band number."""

    def __init__(self, band):
        super().__init__(f'invalid input band `{band}`, bands are numbered from 1')
        self.band = band


class UnsupportedAlgorithm(ConfigurationError):
    """The selected algorithm or mode is not available in the linked GDAL."""

    def __init__(self, operation, algorithm, version=None):
        msg = f'{operation}: `{algorithm}` is not supported'
        if version is not None:
            msg += ' by GDAL {}.{}'.format(*version)
            
        super().__init__(msg)
        self.operation = operation
        self.algorithm = algorithm
        self.version = version


class InvalidParameter(ConfigurationError):
    """A parameter value can not be rendered for gdal."""

    def __init__(self, name, value, reason='invalid value'):
        super().__init__(f'{name}: {reason} `{value}`')
        self.name = name
        self.value = value


class ConflictingOptions(ConfigurationError):
    """Two mutually exclusive options were both set."""

    def __init__(self, first, second):
        super().__init__(f'`{first}` and `{second}` are mutually exclusive')
        self.options = (first, second)


class ExternalError(DemOptsError, RuntimeError):
    """GDAL is unavailable or the gdal processing routine failed."""

### End
