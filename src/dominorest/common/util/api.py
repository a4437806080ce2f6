# -*- coding: utf-8 -*-

"""
Copyright (C) 2026, Zato Source s.r.o. https://zato.io

Licensed under AGPLv3, see LICENSE.txt for terms and conditions.
"""

# dominorest
from dominorest.common.exception import EmptyParamError, MissingParamError

# ################################################################################################################################
# ################################################################################################################################

if 0:
    from dominorest.common.typing_ import any_

# ################################################################################################################################
# ################################################################################################################################

# (c) 2005 Ian Bicking and contributors; written for Paste (http://pythonpaste.org)
# Licensed under the MIT license: http://www.opensource.org/licenses/mit-license.php

true_values  =  'true', 'yes',  'on', 'y', 't', '1' # noqa: E222
false_values = 'false',  'no', 'off', 'n', 'f', '0'

def as_bool(data:'any_') -> 'bool':

    if isinstance(data, (str, bytes)):
        if isinstance(data, bytes):
            data = data.decode('utf8')
        data = data.strip().lower()
        if data in true_values:
            return True
        elif data in false_values:
            return False
        elif data == '':
            return False
        else:
            raise ValueError('String is not true/false: %r' % data)

    return bool(data)

asbool = as_bool

# ################################################################################################################################
# ################################################################################################################################

def is_empty(value:'any_') -> 'bool':
    """ Returns True if value is None, a blank string or an empty collection.
    """
    if value is None:
        return True

    if isinstance(value, str):
        return not value.strip()

    if isinstance(value, (dict, list, tuple, set, frozenset)):
        return len(value) == 0

    return False

# ################################################################################################################################

def require_not_empty(name:'str', value:'any_') -> 'any_':
    """ Raises an exception if a value was not given or was given but is blank, returns it otherwise.
    """
    if value is None:
        raise MissingParamError(name)

    if is_empty(value):
        raise EmptyParamError(name)

    return value

# ################################################################################################################################

def param_to_str(value:'any_') -> 'str':
    """ Turns a parameter value into its form on the wire.
    """
    if isinstance(value, bool):
        return 'true' if value else 'false'

    if isinstance(value, bytes):
        return value.decode('utf8')

    return str(value)

# ################################################################################################################################
# ################################################################################################################################
