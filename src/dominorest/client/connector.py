# -*- coding: utf-8 -*-

"""
Copyright (C) 2026, Zato Source s.r.o. https://zato.io

Licensed under AGPLv3, see LICENSE.txt for terms and conditions.
"""

# stdlib
from logging import getLogger
from types import MappingProxyType
from urllib.parse import quote, urlencode, urlsplit, urlunsplit

# requests
import requests

# dominorest
from dominorest.common.api import DATA_SOURCE_PARAM, HEADER, NO_BODY_STATUS, PARAM_LOCATION
from dominorest.common.exception import HttpResponseError, InvalidParamError, MissingParamError, OperationNotAvailable
from dominorest.common.model import FetchOptions, Operation, OperationParam, RequestOptions, ResponseEnvelope
from dominorest.common.util.api import param_to_str

# ################################################################################################################################
# ################################################################################################################################

if 0:
    from requests import Response, Session
    from dominorest.client.access import DominoAccess
    from dominorest.common.model import ApiMeta
    from dominorest.common.typing_ import any_, anydict, byteiternone, floatnone, stranydict, strnone, verify_
    Response = Response
    Session = Session

# ################################################################################################################################
# ################################################################################################################################

logger = getLogger(__name__)

# ################################################################################################################################
# ################################################################################################################################

# How large each chunk read from response bodies can be
_chunk_size = 8192

# ################################################################################################################################
# ################################################################################################################################

class OperationLoader:
    """ Fetches an OpenAPI document of a single API and compiles it into a table of operations keyed by their IDs.
    """
    def __init__(
        self,
        base_url,     # type: str
        meta,         # type: ApiMeta
        session=None, # type: Session | None
        timeout=None, # type: floatnone
        verify=True,  # type: verify_
    ) -> 'None':
        self.base_url = base_url.rstrip('/')
        self.meta = meta
        self.session = session or requests.Session()
        self.timeout = timeout
        self.verify = verify

# ################################################################################################################################

    @property
    def url(self) -> 'str':
        return f'{self.base_url}{self.meta.mount_path}{self.meta.file_name}'

# ################################################################################################################################

    def fetch(self) -> 'stranydict':

        response = self.session.get(self.url, timeout=self.timeout, verify=self.verify)

        if not response.ok:
            raise HttpResponseError.from_response(response)

        return response.json()

# ################################################################################################################################

    def _load_params(self, source:'stranydict', out:'dict[str, OperationParam]') -> 'None':
        for item in source.get('parameters') or []:

            # References to shared components, e.g. {"$ref": "#/components/parameters/..."}, are not resolved
            if not isinstance(item, dict) or not item.get('name'):
                logger.debug('Skipping parameter without a name -> %s', item)
                continue

            param = OperationParam.from_dict(item)
            out[param.name] = param

# ################################################################################################################################

    def compile(self, document:'stranydict') -> 'dict[str, Operation]':

        # Our response to produce
        out = {} # type: dict[str, Operation]

        for url, path_item in (document.get('paths') or {}).items():

            # Path-level entries other than operations, e.g. "summary" or "parameters", are not dicts with an operationId
            for method, config in path_item.items():

                if not isinstance(config, dict):
                    continue

                if not (operation_id := config.get('operationId')):
                    continue

                if operation_id in out:
                    raise InvalidParamError(f'Duplicate operation ID `{operation_id}` in `{method} {url}`')

                # Parameters from the path level apply to all the methods ..
                params = {} # type: dict[str, OperationParam]
                self._load_params(path_item, params)

                # .. whereas these can extend or override them for this particular method ..
                self._load_params(config, params)

                operation = Operation()
                operation.operation_id = operation_id
                operation.method = method.upper()
                operation.url = url
                operation.params = params
                operation.mime_type = None

                # .. everything else is kept as it is, for callers to inspect ..
                operation.attrs = {key: value for key, value in config.items() if key not in ('operationId', 'parameters')}

                # .. the first declared media type of the request body is what we will send ..
                if content := (config.get('requestBody') or {}).get('content'):
                    operation.mime_type = next(iter(content))

                out[operation_id] = operation

        logger.debug('Compiled %d operation(s) from %s', len(out), self.url)

        return out

# ################################################################################################################################

    def load(self) -> 'dict[str, Operation]':
        return self.compile(self.fetch())

# ################################################################################################################################
# ################################################################################################################################

class DominoConnector:
    """ Knows the OpenAPI definition of each operation of a single API and can build and send requests
    to any of them. Holds no user-specific information so a single instance can be used by many users.
    """
    def __init__(
        self,
        base_url,      # type: str
        meta,          # type: ApiMeta
        session=None,  # type: Session | None
        document=None, # type: anydict | None
        timeout=None,  # type: floatnone
        verify=True,   # type: verify_
    ) -> 'None':

        self.base_url = base_url.rstrip('/')
        self.meta = meta
        self.session = session or requests.Session()
        self.timeout = timeout
        self.verify = verify

        # The table is built only once and it is never modified afterwards
        loader = OperationLoader(self.base_url, meta, self.session, timeout, verify)
        schema = loader.compile(document) if document is not None else loader.load()
        self.schema = MappingProxyType(schema)

# ################################################################################################################################

    def get_operation(self, operation_id:'str') -> 'Operation':
        if operation := self.schema.get(operation_id):
            return operation
        else:
            raise OperationNotAvailable(operation_id)

# ################################################################################################################################

    def get_operations(self) -> 'MappingProxyType[str, Operation]':
        return self.schema

# ################################################################################################################################

    def _check_mandatory(self, param:'OperationParam', data_source:'strnone', params:'stranydict') -> 'any_':
        """ Returns a value for a parameter, raising an exception if the parameter is required but it has no value.
        """
        # A data source (scope) can be given explicitly or as a parameter ..
        if param.name == DATA_SOURCE_PARAM:
            value = data_source
            if value is None or not str(value).strip():
                value = params.get(param.name)

        # .. whereas all the other parameters can be only given as such.
        else:
            value = params.get(param.name)

        if param.required:
            if value is None or not param_to_str(value).strip():
                raise MissingParamError(param.name)

        return value

# ################################################################################################################################

    def get_url(self, operation:'Operation', data_source:'strnone', params:'stranydict') -> 'str':
        """ Returns a full URL for the operation, with path parameters filled in and query parameters appended.
        """
        # Local variables
        path = operation.url
        query = []

        for param in operation.params.values():

            # These are never part of a URL
            if param.location in PARAM_LOCATION.Not_In_URL:
                continue

            value = self._check_mandatory(param, data_source, params)

            # Optional parameters without a value are simply skipped
            if value is None:
                continue

            value = param_to_str(value)

            if param.location == PARAM_LOCATION.Path:
                path = path.replace('{%s}' % param.name, quote(value, safe=''))
            else:
                query.append((param.name, value))

        # The path is always relative to the API's mount point
        scheme, netloc, _, _, _ = urlsplit(self.base_url)
        path = self.meta.mount_path + path

        return urlunsplit((scheme, netloc, path, urlencode(query), ''))

# ################################################################################################################################

    def get_fetch_options(self, access:'DominoAccess', operation:'Operation', options:'RequestOptions') -> 'FetchOptions':
        """ Returns everything, apart from the URL, that is needed to send a request for the operation.
        """
        # Local variables
        params = options.params
        headers = {} # type: dict[str, str]

        out = FetchOptions(operation.method)

        # The body is sent as it is, the caller is responsible for its serialization
        if options.body is not None:
            out.body = options.body

        # If the operation expects a specific content type, this is our default ..
        if operation.mime_type:
            headers[HEADER.Content_Type] = operation.mime_type

        # .. though parameters that are headers take precedence over it.
        for param in operation.params.values():

            if param.location != PARAM_LOCATION.Header:
                continue

            # None means the same as not given at all
            if (value := params.get(param.name)) is None:
                if param.required:
                    raise MissingParamError(param.name)
                continue

            headers[param.name] = param_to_str(value)

        # This may issue a request of its own if no valid token is available
        headers[HEADER.Authorization] = 'Bearer ' + access.access_token()

        out.headers = headers
        return out

# ################################################################################################################################

    def _get_stream(self, response:'Response') -> 'byteiternone':
        """ Returns an iterator over the body of a response or None if there is no body at all.
        """
        if response.status_code in NO_BODY_STATUS:
            return None

        if response.request is not None and response.request.method == 'HEAD':
            return None

        if response.headers.get('Content-Length') == '0':
            return None

        return response.iter_content(chunk_size=_chunk_size)

# ################################################################################################################################

    def request(self, access:'DominoAccess', operation_id:'str', options:'RequestOptions | None'=None) -> 'ResponseEnvelope':
        """ Invokes an operation and returns the response with the body not read yet.
        """
        options = options or RequestOptions()

        operation = self.get_operation(operation_id)
        url = self.get_url(operation, options.data_source, options.params)
        fetch_options = self.get_fetch_options(access, operation, options)

        logger.debug('Invoking `%s` -> %s %s', operation_id, fetch_options.method, url)

        response = self.session.request(
            fetch_options.method,
            url,
            data=fetch_options.body,
            headers=fetch_options.headers,
            stream=True,
            timeout=self.timeout,
            verify=self.verify,
        )

        logger.debug('Response from `%s` -> %s %s', operation_id, response.status_code, response.reason)

        return ResponseEnvelope(response.status_code, response.reason or '', response.headers,
            self._get_stream(response), response)

# ################################################################################################################################

    def __repr__(self) -> 'str':
        return '<{} at {} base_url:`{}`, api:`{}`, operations:`{}`>'.format(
            self.__class__.__name__, hex(id(self)), self.base_url, self.meta.name, len(self.schema))

# ################################################################################################################################
# ################################################################################################################################
