### factory.py - DEMOPTS module factory
##
## Copyright (c) 2010 - 2025 Regents of the University of Colorado
##
## factory.py is part of DEMOPTS
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
## Module factory...
##
## Build a set of gdaldem options from a factory module string, where
## the module is the gdaldem mode and the arguments are its options:
##
## 'slope:alg=Horn:s=111120:p=true:options="CPL_DEBUG=ON"'
##
## >>> opts = DemOptionsFactory(mod='slope:alg=Horn:s=111120:p=true')._acquire_module()
## >>> str(opts.to_options_list())
## '-alg Horn -s 111120 -p'
##
## Arguments may be the option names (`scale`), their gdaldem flags (`s`)
## or a few aliases (`band`, `format`). A value holding `:` or `=`
## must be double-quoted.
##
### Code:

import os
import sys
import re
import json

from demopts import utils
from demopts import options
from demopts.errors import DemOptsError, InvalidParameter


## a factory module string is
## 'mod_name:mod_arg=arg_val:mod_arg1=arg_val'
def fmod2dict(fmod, dict_args=None):
    """convert factory module string to a dict
    
    Parameter:
      fmod (str): a factory module string
      dict_args (dict): a dict to append to

    Returns:
      dict_args: a dictionary of the key/values
    """

    if dict_args is None:
        dict_args = {}
        
    args_list = re.split(r':(?=(?:[^"]*"[^"]*")*[^"]*$)', fmod)
    for arg in args_list:
        p_arg = re.split(
            r'=(?=(?:[^"]*"[^"]*")*[^"]*$)',
            arg
        )
        if len(p_arg) == 1:
            if '_module' not in dict_args.keys():
                dict_args['_module'] = p_arg[0]
                
        elif len(p_arg) > 1:
            dict_args[p_arg[0]] = False \
                if p_arg[1].lower() == 'false' \
                   else True if p_arg[1].lower() == 'true' \
                        else None if p_arg[1].lower() == 'none' \
                             else '='.join(p_arg[1:]) if len(p_arg) > 2 \
                                  else p_arg[1].strip('"').split(';') if ';' in p_arg[1] \
                                       else p_arg[1].strip('"')
        
    return(dict_args)


def dict2fmod(in_dict):
    """convert a dict of key:val pairs to a module factory string

    Parameter:
      in_dict (dict): the dictionary to convert

    Returns:
      out_args (str): a string representation of in_dict, 
                      suitable for a factory cli
    """

    out_args = []
    if '_module' in in_dict.keys():
        out_args.append(f'{in_dict["_module"]}')
        
    for key, val in in_dict.items():
        if key == '_module':
            continue
        elif isinstance(val, list):
            out_args.append(f'{key}="{";".join(str(x) for x in val)}"')
        elif isinstance(val, str) and (':' in val or '=' in val or ' ' in val):
            out_args.append(f'{key}="{val}"')
        else:
            out_args.append(f'{key}={val}')

    return(':'.join(out_args))


## module argument aliases => option names (the `with_<name>` setters)
_param_aliases = {
    'b': 'input_band',
    'band': 'input_band',
    'of': 'output_format',
    'format': 'output_format',
    'options': 'additional_options',
    'co': 'creation_option',
    'alg': 'algorithm',
    's': 'scale',
    'p': 'percentage_results',
    'z': 'z_factor',
    'az': 'azimuth',
    'alt': 'altitude',
    'trigonometric': 'trigonometric_angle',
    'color_file': 'color_configuration',
    'shading': 'shading_mode',
    'color_matching': 'color_matching_mode',
}

## option names => value coercion; numbers that fail coercion are passed
## through as-is, to be reported when the options are rendered; flags
## that fail coercion are rejected here
_param_types = {
    'input_band': utils.int_or,
    'scale': utils.float_or,
    'z_factor': utils.float_or,
    'azimuth': utils.float_or,
    'altitude': utils.float_or,
    'compute_edges': utils.bool_or,
    'percentage_results': utils.bool_or,
    'trigonometric_angle': utils.bool_or,
    'zero_for_flat': utils.bool_or,
    'alpha': utils.bool_or,
}


###############################################################################
## echo demopts module options
## modules are a dictionary with the module name
## as the key and at least a 'call' key which
## points to the options class for the module
## uses <class>.__doc__ as description
###############################################################################
_demopts_module_short_desc = lambda m: ', '.join(
    ['{}'.format(key) for key in m])
_demopts_module_long_desc \
    = lambda m: '{cmd} modules:\n% {cmd} ... <mod>:key=val:key=val...\n\n  '.format(
        cmd=os.path.basename(sys.argv[0])
    ) + '\n  '.join(
        ['\033[1m{:20}\033[0m{}\n'.format(str(key), m[key]['call'].__doc__) for key in m]
    ) + '\n'


def echo_modules(module_dict, key):
    """print out the existing modules from module_dict and 
    their descriptions.
    """
    
    if key is None:
        sys.stderr.write(_demopts_module_long_desc(module_dict))
    elif key in module_dict.keys():
        sys.stderr.write(
            _demopts_module_long_desc(
                {k: module_dict[k] for k in (key,)}
            )
        )
    else:
        sys.stderr.write(
            'Invalid Module Key: {}\nValid Modules: {}\n'.format(
                key, _demopts_module_short_desc(module_dict)
            )
        )

    sys.stderr.flush()

    
class DemOptionsFactory:
    """gdaldem options factory.

    `_modules` is a dictionary of dictionaries where each key is the
    module name and has at least a 'name', 'description' and 'call' key
    pointing to the options class of that gdaldem mode.
    """
    
    _modules = {
        'slope': {'name': 'slope',
                  'description': 'slope map',
                  'call': options.SlopeOptions},
        'aspect': {'name': 'aspect',
                   'description': 'aspect map',
                   'call': options.AspectOptions},
        'hillshade': {'name': 'hillshade',
                      'description': 'shaded relief map',
                      'call': options.HillshadeOptions},
        'tri': {'name': 'TRI',
                'description': 'terrain ruggedness index',
                'call': options.TriOptions},
        'tpi': {'name': 'TPI',
                'description': 'topographic position index',
                'call': options.TpiOptions},
        'roughness': {'name': 'roughness',
                      'description': 'roughness map',
                      'call': options.RoughnessOptions},
        'color-relief': {'name': 'color-relief',
                         'description': 'color relief map',
                         'call': options.ColorReliefOptions},
    }

    
    def __init__(self, mod=None, **kwargs):
        """Initialize the factory
        
        Parameters:
          mod - A string of a module name and optional module arguments in the format: 
                'mod_name:mod_arg0=mod_val0:mod_arg1=mod_val1'
          kwargs - module arguments can be passed as key-word arguments 
                   here instead of in the mod string if wanted;
                   however arguments from the mod string will over-ride arguments 
                   from the key-word arguments.
        """
        
        self.mod = mod
        self.mod_name = None
        self.mod_args = {}
        self.kwargs = kwargs
        if self.mod is not None:
            self._parse_mod(self.mod)

            
    def __repr__(self):
        return('<{}>'.format(self.__dict__))

    
    def _parse_mod(self, mod):
        """parse the module string.

        Returns:
          (module-name, module-arguments)
        """
        
        opts = fmod2dict(mod, {})
        mod_name = opts['_module'].lower()
        if mod_name in self._modules.keys():
            self.mod_name = mod_name
            self.mod_args = {i:opts[i] for i in opts if i!='_module'}
        else:
            utils.echo_error_msg(
                'invalid module name `{}`, available modules are: {}'.format(
                    opts['_module'], _demopts_module_short_desc(self._modules)
                )
            )
            
        return(self.mod_name, self.mod_args)

    
    def add_module(self, type_def={}):
        """Add a module to the factory `_modules` dict"""

        self._modules = dict(self._modules)
        for key in type_def.keys():
            self._modules[key] = type_def[key]

            
    def _set_param(self, mm, key, val):
        name = _param_aliases.get(key, key)
        if name in _param_types:
            coerced = _param_types[name](val)
            if coerced is None and _param_types[name] is utils.bool_or:
                raise InvalidParameter(name, val, 'expected true or false, got')

            val = val if coerced is None else coerced

        if name == 'creation_option':
            for co in (val if isinstance(val, list) else [val]):
                co_name, _, co_val = str(co).partition('=')
                mm.with_creation_option(co_name, co_val)
                
            return(True)

        setter = getattr(mm, f'with_{name}', None)
        if setter is None:
            return(False)

        setter(val)
        return(True)

    
    def _acquire_module(self):
        """Acquire the options from the factory.

        Returns:
          DemOptions: the populated options, or None if the module
                      is invalid or its arguments can not be set
        """
        
        if self.mod_name is None:
            return(None)

        args = dict(self.kwargs)
        args.update(self.mod_args)
        mm = self._modules[self.mod_name]['call']()
        try:
            for key, val in args.items():
                if not self._set_param(mm, key, val):
                    utils.echo_warning_msg(
                        f'{key} is not a valid parameter of {self.mod_name}...'
                    )
                    
        except DemOptsError as e:
            utils.echo_error_msg(
                'could not acquire module, {}'.format(e)
            )
            return(None)

        return(mm)

    
    def write_parameter_file(self, param_file):
        """write the module string and arguments to a json parameter file."""

        with open(param_file, 'w') as outfile:
            json.dump(
                {'mod': dict2fmod({'_module': self.mod_name, **self.kwargs, **self.mod_args})},
                outfile, indent=4
            )
            
        utils.echo_msg(
            f'New DemOptionsFactory file written to {param_file}'
        )

        
    def open_parameter_file(self, param_file):
        """Open and read a saved parameter file"""
        
        with open(param_file, 'r') as infile:
            try:
                data = json.load(infile)
            except ValueError:
                raise ValueError(
                    f'DemOptionsFactory: Unable to read data from {param_file} as json'
                )

        if 'mod' in data.keys():
            self.mod = data['mod']
            self.kwargs = {}
            self._parse_mod(self.mod)
            utils.echo_msg(
                f'DemOptionsFactory read successfully from {param_file}'
            )
        else:
            utils.echo_warning_msg(
                f'Unable to find any valid data in {param_file}'
            )

        return(self)

### End
