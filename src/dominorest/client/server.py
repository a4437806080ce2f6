# -*- coding: utf-8 -*-

"""
Copyright (C) 2026, Zato Source s.r.o. https://zato.io

Licensed under AGPLv3, see LICENSE.txt for terms and conditions.
"""

# stdlib
from logging import getLogger

# requests
import requests

# dominorest
from dominorest.client.connector import DominoConnector
from dominorest.common.api import URL_PATH
from dominorest.common.exception import ApiNotAvailable, HttpResponseError
from dominorest.common.model import ApiMeta

# ################################################################################################################################
# ################################################################################################################################

if 0:
    from types import MappingProxyType
    from requests import Session
    from dominorest.common.model import Operation
    from dominorest.common.typing_ import floatnone, strlist, verify_
    MappingProxyType = MappingProxyType
    Session = Session

# ################################################################################################################################
# ################################################################################################################################

logger = getLogger(__name__)

# ################################################################################################################################
# ################################################################################################################################

class DominoServer:
    """ Lists the APIs that a server offers and gives access to a connector for each of them.
    """
    def __init__(
        self,
        base_url,     # type: str
        session=None, # type: Session | None
        timeout=None, # type: floatnone
        verify=True,  # type: verify_
    ) -> 'None':
        self.base_url = base_url.rstrip('/')
        self.session = session or requests.Session()
        self.timeout = timeout
        self.verify = verify

        # API name -> where its OpenAPI document is
        self.api_map = {} # type: dict[str, ApiMeta]

        # API name -> a connector built for it
        self.connector_map = {} # type: dict[str, DominoConnector]

# ################################################################################################################################

    def _load_apis(self) -> 'None':

        url = self.base_url + URL_PATH.Catalogue
        response = self.session.get(url, timeout=self.timeout, verify=self.verify)

        if not response.ok:
            raise HttpResponseError.from_response(response)

        for name, data in response.json().items():
            self.api_map[name] = ApiMeta.from_dict(data, name)

        logger.debug('Loaded %d API(s) from %s -> %s', len(self.api_map), url, sorted(self.api_map))

# ################################################################################################################################

    def available_apis(self) -> 'strlist':
        if not self.api_map:
            self._load_apis()
        return list(self.api_map)

# ################################################################################################################################

    def get_connector(self, api_name:'str') -> 'DominoConnector':

        if not self.api_map:
            self._load_apis()

        # Reuse connectors that we already have ..
        if connector := self.connector_map.get(api_name):
            return connector

        # .. make sure that this API exists at all ..
        if not (meta := self.api_map.get(api_name)):
            raise ApiNotAvailable(api_name)

        # .. build a new connector, which loads its OpenAPI document ..
        connector = DominoConnector(self.base_url, meta, self.session, timeout=self.timeout, verify=self.verify)
        self.connector_map[api_name] = connector

        # .. and return it to our caller.
        return connector

# ################################################################################################################################

    def available_operations(self, api_name:'str') -> 'MappingProxyType[str, Operation]':
        return self.get_connector(api_name).get_operations()

# ################################################################################################################################
# ################################################################################################################################
