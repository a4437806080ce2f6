# -*- coding: utf-8 -*-

"""
Copyright (C) 2026, Zato Source s.r.o. https://zato.io

Licensed under AGPLv3, see LICENSE.txt for terms and conditions.
"""

# ################################################################################################################################
# ################################################################################################################################

# stdlib
from typing import           \
    Any as any_,             \
    Callable as callable_,   \
    Dict as dict_,           \
    Generator as generator_, \
    Iterable as iterable_,   \
    Iterator as iterator_,   \
    List as list_,           \
    Mapping as mapping_,     \
    Optional as optional,    \
    Union as union_

# ################################################################################################################################
# ################################################################################################################################

# For flake8
optional = optional

# ################################################################################################################################
# ################################################################################################################################

intnone       = optional[int]
strnone       = optional[str]
floatnone     = optional[float]
boolnone      = optional[bool]
bytesnone     = optional[bytes]

anydict       = dict_[any_, any_]
anydictnone   = optional[anydict]
anylist       = list_[any_]
anynone       = optional[any_]
callable_     = callable_[..., any_]
callnone      = optional[callable_]
strdict       = dict_[str, any_]
stranydict    = dict_[str, any_]
strstrdict    = dict_[str, str]
strlist       = list_[str]
strmap        = mapping_[str, any_]
strmapnone    = optional[strmap]
byteiter      = iterable_[bytes]
byteiternone  = optional[iterator_[bytes]]
striter       = iterable_[str]
anygen        = generator_[any_, None, None]
strgen        = generator_[str, None, None]
strorbytes    = union_[str, bytes]
verify_       = union_[bool, str, None]

# ################################################################################################################################
# ################################################################################################################################
