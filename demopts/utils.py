### utils.py - DEMOPTS utilities and functions
##
## Copyright (c) 2010 - 2025 Regents of the University of Colorado
##
## utils.py is part of DEMOPTS
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
## General utility functions used in the other demopts modules...
## includes value coercion, version parsing, configuration checks
## and the stderr message functions.
##
### Code:

import os
import sys
import json

from tqdm import tqdm

import demopts

###############################################################################
##
## General Utility Functions, definitions, etc.
##
###############################################################################

## the demopts config file, written by `config_check` when asked
demopts_config = lambda: os.path.join(os.path.expanduser('~'), '.demopts_config.json')

## environment variable to force the GDAL version used for feature gating
GDAL_VERSION_ENV = 'DEMOPTS_GDAL_VERSION'


def int_or(val, or_val=None):
    """return val if val is integer

    Args:
      val (?): input value to test
      or_val (?): value to return if val is not an int

    Returns:
      ?: val as int otherwise returns or_val
    """
    
    try:
        return(int(float_or(val)))
    except (TypeError, ValueError, OverflowError):
        return(or_val)

    
def float_or(val, or_val=None):
    """return val if val is a float

    Args:
      val (?): input value to test
      or_val (?): value to return if val is not a float

    Returns:
      ?: val as float otherwise returns or_val
    """
    
    try:
        return(float(val))
    except (TypeError, ValueError):
        return(or_val)

    
def str_or(instr, or_val=None, replace_quote=True):
    """return instr if instr is a string, else or_val"""

    if instr is None:
        return(or_val)
    
    if replace_quote:
        return(str(instr).replace('"', ''))
    else:
        return(str(instr))


def bool_or(val, or_val=None):
    """return val as a bool if it looks like one, else or_val

    >> bool_or('true')
    True
    >> bool_or('nope', False)
    False
    """

    if isinstance(val, bool):
        return(val)

    if isinstance(val, str):
        if val.lower() in ('true', 'yes', 'on', '1'):
            return(True)
        elif val.lower() in ('false', 'no', 'off', '0'):
            return(False)

    return(or_val)


def parse_version(version_str):
    """parse a version string (e.g. `3.8.4`) into a (major, minor) tuple

    Args:
      version_str (str): a version string, such as returned by `gdal-config --version`

    Returns:
      tuple: (major, minor) or None if `version_str` is not a version
    """

    version_str = str_or(version_str)
    if version_str is None:
        return(None)

    parts = version_str.strip().split('.')
    major = int_or(parts[0])
    if major is None:
        return(None)

    minor = int_or(parts[1], 0) if len(parts) > 1 else 0
    return((major, minor))


def gdal_version():
    """return the release name of the linked GDAL (e.g. `3.8.4`), or None
    if the osgeo bindings are not installed.
    """

    try:
        from osgeo import gdal
    except ImportError:
        return(None)

    return(gdal.VersionInfo('RELEASE_NAME'))


def config_check(chk_config_file=True, generate_config_file=False,
                 config_file=None, verbose=False):
    """check for the linked GDAL version and record the demopts version

    The GDAL version may be forced with the DEMOPTS_GDAL_VERSION
    environment variable, which overrides both the config file and
    the installed osgeo bindings.

    Args:
      chk_config_file (bool): read `config_file` if it exists
      generate_config_file (bool): write the gathered results to `config_file`
      config_file (str): path to the json config file
      verbose (bool): increase verbosity

    Returns:
      dict: a dictionary of gathered results.
    """

    if config_file is None:
        config_file = demopts_config()
    
    if chk_config_file and os.path.exists(config_file):
        with open(config_file, 'r') as ccc:
            _demopts_co = json.load(ccc)
    else:
        _demopts_co = {}
        _demopts_co['platform'] = sys.platform
        _demopts_co['python'] = str(sys.version_info[0])
        _demopts_co['GDAL'] = gdal_version()
        _demopts_co['DEMOPTS'] = str(demopts.__version__)

        if generate_config_file:
            with open(config_file, 'w') as ccc:
                ccc.write(json.dumps(_demopts_co, indent=4, sort_keys=True))

    env_gdal = os.environ.get(GDAL_VERSION_ENV)
    if env_gdal:
        _demopts_co['GDAL'] = env_gdal

    if verbose:
        echo_msg(json.dumps(_demopts_co, indent=4, sort_keys=True))
        
    return(_demopts_co)


###############################################################################
##
## verbosity functions
##
###############################################################################
def echo_warning_msg2(msg, prefix='demopts'):
    """echo warning msg to stderr using `prefix`

    >> echo_warning_msg2('message', 'test')
    test: warning, message
    
    Args:
      msg (str): a message
      prefix (str): a prefix for the message
    """

    sys.stderr.write('\x1b[2K\r')
    tqdm.write(
        '{}: \033[33m\033[1mwarning\033[m, {}'.format(prefix, msg),
        file=sys.stderr
    )
    sys.stderr.flush()

    
def echo_error_msg2(msg, prefix='demopts'):
    """echo error msg to stderr using `prefix`

    >> echo_error_msg2('message', 'test')
    test: error, message

    Args:
      msg (str): a message
      prefix (str): a prefix for the message
    """

    sys.stderr.write('\x1b[2K\r')
    tqdm.write(
        '{}: \033[31m\033[1merror\033[m, {}'.format(prefix, msg),
        file=sys.stderr
    )
    sys.stderr.flush()

    
def echo_msg2(msg, prefix='demopts', bold=False):
    """echo `msg` to stderr using `prefix`

    >> echo_msg2('message', 'test')
    test: message
    
    Args:
      msg (str): a message
      prefix (str): a prefix for the message
      bold (bool): embolden the message
    """
    
    sys.stderr.write('\x1b[2K\r')
    if bold:
        tqdm.write(
            '{}: \033[1m{}\033[m'.format(prefix, msg),
            file=sys.stderr
        )
    else:
        tqdm.write(
            '{}: {}'.format(prefix, msg),
            file=sys.stderr
        )
    sys.stderr.flush()


###############################################################################    
##
## echo message `m` to sys.stderr using
## auto-generated prefix
##
###############################################################################
_command_name = lambda: os.path.basename(sys.argv[0])
echo_msg = lambda m: echo_msg2(m, prefix = _command_name())
echo_error_msg = lambda m: echo_error_msg2(m, prefix = _command_name())
echo_warning_msg = lambda m: echo_warning_msg2(m, prefix = _command_name())

### End
