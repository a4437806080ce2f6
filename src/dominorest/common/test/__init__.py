# -*- coding: utf-8 -*-

"""
Copyright (C) 2026, Zato Source s.r.o. https://zato.io

Licensed under AGPLv3, see LICENSE.txt for terms and conditions.
"""

# stdlib
from http.client import responses as HTTP_RESPONSES
from io import BytesIO
from json import dumps
from time import time
from uuid import uuid4

# JWT
import jwt

# requests
from requests import Response
from requests.structures import CaseInsensitiveDict

# ################################################################################################################################
# ################################################################################################################################

if 0:
    from dominorest.common.typing_ import any_, anydictnone, anylist, callnone, intnone

# ################################################################################################################################
# ################################################################################################################################

# Used to sign tokens in tests only
test_jwt_secret = 'dominorest-test-secret'

# ################################################################################################################################
# ################################################################################################################################

def rand_string(prefix:'str'='') -> 'str':
    prefix = ('-' + prefix + '-') if prefix else ''
    return 'a' + prefix + uuid4().hex

# ################################################################################################################################

def make_jwt(exp:'intnone'=None, expires_in:'int'=3600, **claims:'any_') -> 'str':
    """ Returns a signed JWT that expires either at a given time or a given number of seconds from now.
    """
    claims.setdefault('sub', rand_string('user'))

    if exp is None:
        exp = int(time()) + expires_in

    if exp:
        claims['exp'] = exp

    token = jwt.encode(claims, test_jwt_secret, algorithm='HS256')
    return token if isinstance(token, str) else token.decode('utf8')

# ################################################################################################################################

def make_response(
    status_code:'int'=200,
    data:'any_'=None,
    headers:'anydictnone'=None,
    reason:'str'='',
) -> 'Response':
    """ Returns a real response object from the requests library, with its body set to data.
    Dicts and lists become JSON, strings and bytes are used as they are.
    """
    headers = dict(headers or {})

    if isinstance(data, (dict, list)):
        content = dumps(data).encode('utf8')
        headers.setdefault('Content-Type', 'application/json')
    elif isinstance(data, str):
        content = data.encode('utf8')
    elif data is None:
        content = b''
    else:
        content = data

    response = Response()
    response.status_code = status_code
    response.reason = reason or HTTP_RESPONSES.get(status_code, '')
    response.headers = CaseInsensitiveDict(headers)
    response.raw = BytesIO(content)
    response.encoding = 'utf-8'

    return response

# ################################################################################################################################
# ################################################################################################################################

class FakeSession:
    """ Stands in for requests.Session - returns responses that tests queue up and records each call made.
    """
    def __init__(self, responses:'anylist | None'=None) -> 'None':
        self.responses = list(responses or [])
        self.calls = [] # type: anylist

        # If given, it is called before a response is returned, with the call's details on input
        self.on_call = None # type: callnone

    def add(self, *responses:'Response') -> 'FakeSession':
        self.responses.extend(responses)
        return self

    def request(self, method:'str', url:'str', **kwargs:'any_') -> 'Response':

        call = {'method': method.upper(), 'url': url}
        call.update(kwargs)
        self.calls.append(call)

        response = self.responses.pop(0)

        if self.on_call:
            self.on_call(call)

        if isinstance(response, Exception):
            raise response

        return response

    def get(self, url:'str', **kwargs:'any_') -> 'Response':
        return self.request('GET', url, **kwargs)

    def post(self, url:'str', **kwargs:'any_') -> 'Response':
        return self.request('POST', url, **kwargs)

    @property
    def call_count(self) -> 'int':
        return len(self.calls)

# ################################################################################################################################
# ################################################################################################################################

# A small OpenAPI document with a few operations that tests use
openapi_document = {
    'openapi': '3.0.1',
    'info': {'title': 'Test API', 'version': '1.0.0'},
    'paths': {
        '/document/{unid}': {
            'parameters': [
                {'name': 'dataSource', 'in': 'query', 'required': True, 'schema': {'type': 'string'}},
                {'name': 'unid', 'in': 'path', 'required': True, 'schema': {'type': 'string'}},
            ],
            'get': {
                'operationId': 'getDocument',
                'summary': 'Returns a single document',
                'tags': ['data'],
                'parameters': [
                    {'name': 'meta', 'in': 'query', 'required': False, 'schema': {'type': 'boolean'}},
                    {'name': 'If-None-Match', 'in': 'header', 'required': False},
                ],
            },
            'put': {
                'operationId': 'updateDocument',
                'parameters': [
                    {'name': 'revision', 'in': 'query', 'required': False},
                ],
                'requestBody': {
                    'content': {
                        'application/json': {'schema': {'type': 'object'}},
                        'application/xml': {'schema': {'type': 'object'}},
                    },
                },
            },
            'delete': {
                'operationId': 'deleteDocument',
                'parameters': [
                    {'name': 'unid', 'in': 'path', 'required': True},
                    {'name': 'mode', 'in': 'query', 'required': False},
                    {'name': 'X-Request-Token', 'in': 'header', 'required': True},
                    {'name': 'session', 'in': 'cookie', 'required': True},
                ],
            },
        },
        '/lists/{name}': {
            'summary': 'View entries',
            'get': {
                'operationId': 'fetchViewEntries',
                'parameters': [
                    {'name': 'dataSource', 'in': 'query', 'required': True},
                    {'name': 'name', 'in': 'path', 'required': True},
                    {'name': 'count', 'in': 'query', 'required': False},
                ],
            },
            'post': {
                'summary': 'Not an operation as it has no operationId',
            },
        },
        '/scope': {
            'post': {
                'operationId': 'createUpdateScope',
                'requestBody': {
                    'content': {
                        'application/json': {'schema': {'type': 'object'}},
                    },
                },
                'responses': {'200': {'description': 'OK'}},
            },
        },
    },
}

# The number of unique operation IDs above
openapi_document_operation_count = 5

# What a server's /api endpoint returns
api_catalogue = {
    'basis': {
        'fileName': '/schema/openapi.basis.json',
        'mountPath': '/api/v1',
        'name': 'basis',
        'title': 'Domino REST API',
        'version': '1.0.0',
    },
    'setup': {
        'fileName': '/schema/openapi.setup.json',
        'mountPath': '/api/setup-v1',
        'name': 'setup',
        'title': 'Domino REST API setup',
        'version': '1.0.0',
    },
}

# ################################################################################################################################
# ################################################################################################################################
