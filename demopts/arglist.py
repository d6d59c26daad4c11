### arglist.py - GDAL argument lists
##
## Copyright (c) 2010 - 2025 Regents of the University of Colorado
##
## arglist.py is part of DEMOPTS
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
## An ordered list of string tokens, as handed to the gdal utility
## functions (gdal.DEMProcessing and friends) in place of a command-line.
##
## The string form is a flat, whitespace-delimited token stream where a
## double-quoted segment may hold whitespace:
##
## >>> str(ArgList.parse('-compute_edges -b 2 -of GTiff "a b"'))
## '-compute_edges -b 2 -of GTiff "a b"'
##
## There are no escape sequences, so a token may never hold a double-quote.
##
### Code:

from demopts.errors import ParseError, EncodingError

_QUOTE = '"'


def _needs_quotes(token):
    return(token == '' or any(c.isspace() for c in token))


def _check_token(token):
    """raise EncodingError if `token` can not be represented"""

    if not isinstance(token, str):
        raise EncodingError(
            f'tokens must be strings, got {type(token).__name__}', token=token
        )
        
    if _QUOTE in token:
        raise EncodingError(f'token {token!r} contains a double-quote', token=token)

    if '\x00' in token:
        raise EncodingError(f'token {token!r} contains a NUL character', token=token)


class ArgList:
    """An ordered list of gdal argument tokens.

    Attributes:
      tokens (list): the tokens, in order (read with `to_list`)
    """
    
    def __init__(self, tokens=None):
        self._tokens = []
        if tokens is not None:
            self.extend(tokens)

            
    @classmethod
    def parse(cls, source):
        """tokenize a shell-like string into a new ArgList

        whitespace separates tokens, double-quoted segments are part of
        the current token and keep their whitespace.

        Args:
          source (str): the string to tokenize

        Returns:
          ArgList: the parsed tokens

        Raises:
          ParseError: a quote is never closed
        """

        tokens = []
        current = []
        in_token = False
        quote_pos = None
        for pos, c in enumerate(source):
            if quote_pos is not None:
                if c == _QUOTE:
                    quote_pos = None
                else:
                    current.append(c)
                    
            elif c == _QUOTE:
                quote_pos = pos
                in_token = True
            elif c.isspace():
                if in_token:
                    tokens.append(''.join(current))
                    current = []
                    in_token = False
            else:
                current.append(c)
                in_token = True

        if quote_pos is not None:
            raise ParseError(
                f'unterminated quote at position {quote_pos}', source=source, pos=quote_pos
            )

        if in_token:
            tokens.append(''.join(current))

        return(cls(tokens))

    
    def append(self, token):
        """add `token` to the end of the list

        Raises:
          EncodingError: the token is not a string, or holds a quote or NUL
        """

        _check_token(token)
        self._tokens.append(token)

        
    def extend(self, tokens):
        """append each of `tokens` in order; nothing is added if any token is bad

        Raises:
          EncodingError: `tokens` is not a sequence of representable tokens
        """

        if isinstance(tokens, str):
            raise EncodingError(
                f'expected a sequence of tokens, got the string {tokens!r}', token=tokens
            )

        try:
            tokens = list(tokens)
        except TypeError:
            raise EncodingError(
                f'expected a sequence of tokens, got {type(tokens).__name__}', token=tokens
            ) from None

        for token in tokens:
            _check_token(token)

        self._tokens.extend(tokens)

            
    def merge(self, other):
        """append all the tokens of the ArgList `other`, in order"""
        
        self.extend(other.to_list())

        
    def render(self):
        """join the tokens with single spaces, quoting any that hold whitespace"""
        
        return(' '.join(
            f'{_QUOTE}{t}{_QUOTE}' if _needs_quotes(t) else t for t in self._tokens
        ))

    
    def to_list(self):
        return(list(self._tokens))

    
    ## name=value tokens, as in gdal's CSL string lists
    def _name_index(self, name):
        prefix = f'{name}='.lower()
        for i, token in enumerate(self._tokens):
            if token.lower().startswith(prefix):
                return(i)
            
        return(-1)

    
    def set_name_value(self, name, value):
        """set a `NAME=value` token, replacing an existing one in place"""

        token = f'{name}={value}'
        if '=' in name:
            raise EncodingError(f'name {name!r} contains `=`', token=token)

        idx = self._name_index(name)
        if idx < 0:
            self.append(token)
        else:
            _check_token(token)
            self._tokens[idx] = token

            
    def fetch_name_value(self, name, default=None):
        """return the value of the first `NAME=value` token (case-insensitive name)"""
        
        idx = self._name_index(name)
        if idx < 0:
            return(default)
        
        return(self._tokens[idx].split('=', 1)[1])

    
    def find_string(self, token):
        """return the index of `token` (case-insensitive), or -1"""
        
        for i, t in enumerate(self._tokens):
            if t.lower() == token.lower():
                return(i)
            
        return(-1)

    
    def partial_find_string(self, fragment):
        """return the index of the first token containing `fragment`, or -1"""
        
        for i, t in enumerate(self._tokens):
            if fragment in t:
                return(i)
            
        return(-1)

    
    def __len__(self):
        return(len(self._tokens))

    
    def __iter__(self):
        return(iter(self._tokens))

    
    def __getitem__(self, idx):
        return(self._tokens[idx])

    
    def __contains__(self, token):
        return(token in self._tokens)

    
    def __eq__(self, other):
        if isinstance(other, ArgList):
            return(self._tokens == other._tokens)
        
        return(NotImplemented)

    
    def __str__(self):
        return(self.render())

    
    def __repr__(self):
        return('<ArgList {}>'.format(self._tokens))

### End
