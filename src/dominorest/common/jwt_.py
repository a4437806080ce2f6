# -*- coding: utf-8 -*-

"""
Copyright (C) 2026, Zato Source s.r.o. https://zato.io

Licensed under AGPLv3, see LICENSE.txt for terms and conditions.
"""

# stdlib
from time import time

# JWT
import jwt

# dominorest
from dominorest.common.exception import TokenDecodeError

# ################################################################################################################################
# ################################################################################################################################

if 0:
    from dominorest.common.typing_ import floatnone, stranydict

# ################################################################################################################################
# ################################################################################################################################

# Tokens are only read here, never trusted, so their signatures are not checked.
_decode_options = {
    'verify_signature': False,
    'verify_exp': False,
    'verify_nbf': False,
    'verify_iat': False,
    'verify_aud': False,
    'verify_iss': False,
}

# ################################################################################################################################
# ################################################################################################################################

def get_claims(token:'str') -> 'stranydict':
    """ Returns all the claims of a JWT without verifying it.
    """
    try:
        claims = jwt.decode(token, options=_decode_options)
    except jwt.PyJWTError:
        raise TokenDecodeError(token)

    if not isinstance(claims, dict):
        raise TokenDecodeError(token)

    return claims

# ################################################################################################################################

def get_expiry(token:'str') -> 'int':
    """ Returns the expiration time of a token in seconds since the epoch, or 0 if it has no "exp" claim.
    """
    claims = get_claims(token)
    expiry = claims.get('exp') or 0

    # Booleans are ints in Python but they are not epoch times
    if isinstance(expiry, bool) or not isinstance(expiry, (int, float)):
        raise TokenDecodeError(token)

    return expiry

# ################################################################################################################################

def is_jwt_expired(token:'str', now:'floatnone'=None) -> 'bool':
    """ Returns True if the token's expiration time is already in the past.
    """
    expiry = get_expiry(token)
    now = time() if now is None else now

    return expiry <= now

# ################################################################################################################################
# ################################################################################################################################
