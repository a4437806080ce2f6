# -*- coding: utf-8 -*-

"""
Copyright (C) 2026, Zato Source s.r.o. https://zato.io

Licensed under AGPLv3, see LICENSE.txt for terms and conditions.
"""

# stdlib
import os
from dataclasses import dataclass, field
from logging import getLogger

# dominorest
from dominorest.common.api import CREDENTIAL_TYPE
from dominorest.common.model import RestCredentials
from dominorest.common.util.api import as_bool

# ################################################################################################################################
# ################################################################################################################################

if 0:
    from dominorest.common.typing_ import floatnone, strmap, verify_

# ################################################################################################################################
# ################################################################################################################################

logger = getLogger(__name__)

# ################################################################################################################################
# ################################################################################################################################

class ENV_KEY:
    Prefix = 'DOMINOREST_'

    Base_URL      = 'BASE_URL'
    Timeout       = 'TIMEOUT'
    TLS_Verify    = 'TLS_VERIFY'
    Cred_Type     = 'CRED_TYPE'
    Username      = 'USERNAME'
    Password      = 'PASSWORD'
    App_ID        = 'APP_ID'
    App_Secret    = 'APP_SECRET'
    Refresh_Token = 'REFRESH_TOKEN'
    Scope         = 'SCOPE'

# ################################################################################################################################
# ################################################################################################################################

@dataclass
class ClientConfig:
    """ Everything needed to connect to a Domino REST API server.
    """
    base_url: 'str' = ''
    credentials: 'RestCredentials' = field(default_factory=RestCredentials)
    timeout: 'floatnone' = None

    # Passed as-is to requests - True, False or a path to a CA bundle
    tls_verify: 'verify_' = True

# ################################################################################################################################

    @classmethod
    def from_dict(class_, data:'strmap') -> 'ClientConfig':
        """ Builds a configuration object out of a {"baseUrl":..., "credentials":{...}} mapping.
        """
        out = class_()
        out.base_url = data.get('baseUrl') or data.get('base_url') or ''
        out.credentials = RestCredentials.from_dict(data.get('credentials') or {})

        if (timeout := data.get('timeout')) is not None:
            out.timeout = float(timeout)

        if (tls_verify := data.get('tlsVerify', data.get('tls_verify'))) is not None:
            out.tls_verify = tls_verify

        return out

# ################################################################################################################################

    @classmethod
    def from_env(class_, prefix:'str'=ENV_KEY.Prefix, environ:'strmap | None'=None) -> 'ClientConfig':
        """ Builds a configuration object out of environment variables, e.g. DOMINOREST_BASE_URL.
        """
        # Local variables
        environ = os.environ if environ is None else environ

        def _get(key:'str', default:'str'='') -> 'str':
            return environ.get(prefix + key, default)

        # Build the credentials first ..
        credentials = RestCredentials()
        credentials.type = _get(ENV_KEY.Cred_Type, CREDENTIAL_TYPE.Basic).strip().lower()
        credentials.username = _get(ENV_KEY.Username) or None
        credentials.password = _get(ENV_KEY.Password) or None
        credentials.app_id = _get(ENV_KEY.App_ID) or None
        credentials.app_secret = _get(ENV_KEY.App_Secret) or None
        credentials.refresh_token = _get(ENV_KEY.Refresh_Token) or None
        credentials.scope = _get(ENV_KEY.Scope)

        # .. now, the rest of the configuration ..
        out = class_()
        out.base_url = _get(ENV_KEY.Base_URL)
        out.credentials = credentials

        if timeout := _get(ENV_KEY.Timeout):
            out.timeout = float(timeout)

        # .. TLS verification can be either a boolean or a path to a CA bundle ..
        if tls_verify := _get(ENV_KEY.TLS_Verify):
            try:
                out.tls_verify = as_bool(tls_verify)
            except ValueError:
                out.tls_verify = tls_verify

        logger.debug('Config read from environment; base_url=%s; cred_type=%s', out.base_url, credentials.type)

        # .. and return the result to our caller.
        return out

# ################################################################################################################################
# ################################################################################################################################
