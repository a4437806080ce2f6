# -*- coding: utf-8 -*-

"""
Copyright (C) 2026, Zato Source s.r.o. https://zato.io

Licensed under AGPLv3, see LICENSE.txt for terms and conditions.
"""

# stdlib
from dataclasses import replace
from json import dumps
from logging import getLogger
from time import time

# requests
import requests

# dominorest
from dominorest.common.api import CONTENT_TYPE, CREDENTIAL_TYPE, HEADER, URL_PATH
from dominorest.common.exception import HttpResponseError, MissingBearerError
from dominorest.common.jwt_ import get_expiry
from dominorest.common.model import RestCredentials
from dominorest.common.util.api import require_not_empty

# ################################################################################################################################
# ################################################################################################################################

if 0:
    from requests import Session
    from dominorest.common.config import ClientConfig
    from dominorest.common.typing_ import any_, floatnone, intnone, stranydict, strnone, verify_
    Session = Session

# ################################################################################################################################
# ################################################################################################################################

logger = getLogger(__name__)

# ################################################################################################################################
# ################################################################################################################################

class DominoAccess:
    """ Obtains access tokens from a Domino REST API server, or another identity provider with the same interface,
    and keeps the current one for as long as it is valid.

    The check-then-fetch sequence in access_token is not guarded by a lock - two callers that find no valid token
    at the same time will each fetch one and the one that completes last is kept.
    """
    def __init__(
        self,
        base_url,         # type: str
        credentials,      # type: RestCredentials
        session=None,     # type: Session | None
        timeout=None,     # type: floatnone
        verify=True,      # type: verify_
    ) -> 'None':

        self.base_url = require_not_empty('base_url', base_url).rstrip('/')
        self.credentials = credentials.validate()
        self.session = session or requests.Session()
        self.timeout = timeout
        self.verify = verify

        # Populated each time a new token is obtained
        self.token = None       # type: strnone
        self.expiry_time = None # type: intnone

# ################################################################################################################################

    @classmethod
    def from_config(class_, config:'ClientConfig', session:'Session | None'=None) -> 'DominoAccess':
        return class_(config.base_url, config.credentials, session, config.timeout, config.tls_verify)

# ################################################################################################################################

    def scope(self) -> 'strnone':
        return self.credentials.scope or None

# ################################################################################################################################

    def expiry(self) -> 'intnone':
        """ Returns the expiration time of the current token, in seconds since the epoch,
        or None if no token has been obtained yet.
        """
        return self.expiry_time

# ################################################################################################################################

    def has_valid_token(self) -> 'bool':
        return bool(self.token) and self.expiry_time is not None and time() < self.expiry_time

# ################################################################################################################################

    def update_credentials(self, credentials:'RestCredentials') -> 'RestCredentials':
        """ Replaces current credentials with new ones. Note that an already obtained token is kept
        and it will be returned by access_token until it expires.
        """
        self.credentials = credentials.validate()
        return self.credentials

# ################################################################################################################################

    def clone(self, scope:'str') -> 'DominoAccess':
        """ Returns a new object with the same credentials but a different scope. The clone does not share
        the current token and it will obtain its own.
        """
        credentials = replace(self.credentials, scope=scope)
        return self.__class__(self.base_url, credentials, self.session, self.timeout, self.verify)

# ################################################################################################################################

    def _get_request(self) -> 'tuple[str, stranydict, any_]':
        """ Returns a URL, headers and body to obtain a new token with, depending on what kind of credentials we have.
        """
        # Local variables
        credentials = self.credentials

        # Basic credentials are sent as JSON ..
        if credentials.type == CREDENTIAL_TYPE.Basic:
            url = self.base_url + URL_PATH.Auth
            content_type = CONTENT_TYPE.JSON

            request = {
                'username': credentials.username,
                'password': credentials.password,
            }

            # .. scopes are optional ..
            if credentials.scope:
                request['scope'] = credentials.scope

            data = dumps(request)

        # .. whereas OAuth uses a refresh token flow with a form.
        else:
            url = self.base_url + URL_PATH.OAuthToken
            content_type = CONTENT_TYPE.Form

            data = {
                'grant_type': 'refresh_token',
                'refresh_token': credentials.refresh_token,
                'scope': credentials.scope or '',
                'client_id': credentials.app_id,
                'client_secret': credentials.app_secret,
            }

        headers = {
            HEADER.Cache_Control: 'no-cache',
            HEADER.Content_Type: content_type,
        }

        return url, headers, data

# ################################################################################################################################

    def _get_token_from_server(self) -> 'tuple[str, int]':

        url, headers, data = self._get_request()

        # Send the request to the remote end, any transport-level exception is propagated as is ..
        response = self.session.post(url, data=data, headers=headers, timeout=self.timeout, verify=self.verify)

        # .. raise an exception if the invocation was not successful ..
        if not response.ok:
            raise HttpResponseError.from_response(response)

        # .. if we are here, it means that we can load the JSON response ..
        data = response.json()

        # .. which needs to have the token ..
        if not isinstance(data, dict) or not (token := data.get('bearer')):
            raise MissingBearerError()

        # .. the token itself knows when it will expire ..
        expiry_time = get_expiry(token)

        logger.info('Bearer token received from %s; expiry=%s; scope=%s', url, expiry_time, self.credentials.scope or '(None)')

        return token, expiry_time

# ################################################################################################################################

    def access_token(self) -> 'str':
        """ Returns a token that is still valid, obtaining a new one from the server if needed.
        """
        # If we have a token that has not expired yet, we can return it immediately ..
        if self.has_valid_token():
            logger.debug('Returning cached bearer token; expiry=%s', self.expiry_time)
            return self.token # type: ignore

        # .. otherwise, we need a new one ..
        token, expiry_time = self._get_token_from_server()

        # .. which always replaces whatever we had previously ..
        self.token = token
        self.expiry_time = expiry_time

        # .. and now, we can return it to our caller.
        return token

# ################################################################################################################################

    def __repr__(self) -> 'str':
        return '<{} at {} base_url:`{}`, type:`{}`, scope:`{}`, expiry:`{}`>'.format(
            self.__class__.__name__, hex(id(self)), self.base_url, self.credentials.type, self.credentials.scope,
            self.expiry_time)

# ################################################################################################################################
# ################################################################################################################################
