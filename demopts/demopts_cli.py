### demopts_cli.py - DEMOPTS command-line
##
## Copyright (c) 2010 - 2025 Regents of the University of Colorado
##
## demopts_cli.py is part of DEMOPTS
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
## Render gdaldem options from a factory module string, and optionally
## run them against a DEM.
##
## $ demopts 'slope:alg=Horn:s=111120:p=true'
## -alg Horn -s 111120 -p
##
## $ demopts 'hillshade:z=2:compute_edges=true' --run dem.tif dem_hs.tif
##
### Code:

import sys
import argparse

from demopts import utils
from demopts import factory
from demopts import processing
from demopts.errors import DemOptsError
from demopts import __version__


## ==============================================
## Command-line Interface (CLI)
## $ demopts
##
## demopts cli
## ==============================================
def demopts_cli(argv=None):
    """Run demopts from command-line using argparse."""
    
    parser = argparse.ArgumentParser(
        description=f"%(prog)s ({__version__}): Render and run gdaldem processing options.",
        formatter_class=argparse.RawTextHelpFormatter,
        epilog="Available modules: {}".format(
            factory._demopts_module_short_desc(factory.DemOptionsFactory._modules)
        )
    )

    parser.add_argument(
        'module',
        nargs='?',
        help="The gdaldem MODULE and its options \n"
             "Where MODULE is mod_name[:key=val[:key=val...]]\n"
             "e.g. slope:alg=Horn:s=111120:p=true"
    )
    
    parser.add_argument(
        '-r', '--run',
        nargs=2,
        metavar=('SRC_DEM', 'DST'),
        help="RUN the options with gdal against SRC_DEM, writing DST."
    )

    parser.add_argument(
        '-c', '--color-file',
        help="The COLOR configuration file, for color-relief."
    )
    
    parser.add_argument(
        '-m', '--modules',
        action='store_true',
        help="Display the available MODULES and their descriptions."
    )
    
    parser.add_argument(
        '-q', '--quiet',
        action='store_true',
        help="Lower the verbosity to a quiet."
    )
    
    parser.add_argument(
        '--version',
        action='version',
        version=f'DEMOPTS {__version__}'
    )

    args = parser.parse_args(args=argv)

    if args.modules:
        factory.echo_modules(
            factory.DemOptionsFactory._modules,
            None if args.module is None else factory.fmod2dict(args.module)['_module']
        )
        return(0)
    
    if args.module is None:
        utils.echo_error_msg('You must specify a module')
        parser.print_usage(sys.stderr)
        return(-1)

    dem_options = factory.DemOptionsFactory(mod=args.module)._acquire_module()
    if dem_options is None:
        return(-1)

    try:
        if args.run is not None:
            src_dem, dst_fn = args.run
            processing.dem_processing(
                src_dem, dst_fn, dem_options,
                color_filename=args.color_file, verbose=not args.quiet
            )
            if not args.quiet:
                utils.echo_msg(f'generated {dst_fn}')
        else:
            print(dem_options.to_options_list())
            
    except DemOptsError as e:
        utils.echo_error_msg(e)
        return(-1)

    return(0)


def main():
    sys.exit(demopts_cli())


if __name__ == '__main__':
    main()

### End
