# -*- coding: utf-8 -*-

"""
Copyright (C) 2026, Zato Source s.r.o. https://zato.io

Licensed under AGPLv3, see LICENSE.txt for terms and conditions.
"""

# stdlib
from http.client import responses as HTTP_RESPONSES
from json import loads

# ################################################################################################################################
# ################################################################################################################################

if 0:
    from requests import Response
    from dominorest.common.typing_ import any_, intnone
    Response = Response

# ################################################################################################################################
# ################################################################################################################################

class DominoRestException(Exception):
    """ Base class for all the exceptions raised by this library.
    """
    def __init__(self, msg:'str'='') -> 'None':
        super().__init__(msg)
        self.msg = msg

    def __repr__(self) -> 'str':
        return '<{} at {} msg:`{}`>'.format(self.__class__.__name__, hex(id(self)), self.msg)

# ################################################################################################################################

class MissingParamError(DominoRestException):
    """ A required parameter, header or credential field was not given.
    """
    def __init__(self, param:'str') -> 'None':
        super().__init__(f"Parameter '{param}' is required.")
        self.param = param

# ################################################################################################################################

class EmptyParamError(DominoRestException):
    """ A parameter was given but it is blank.
    """
    def __init__(self, param:'str') -> 'None':
        super().__init__(f"Parameter '{param}' should not be empty.")
        self.param = param

# ################################################################################################################################

class InvalidParamError(DominoRestException):
    pass

# ################################################################################################################################

class OperationNotAvailable(DominoRestException):
    def __init__(self, operation_id:'str') -> 'None':
        super().__init__(f"Operation ID '{operation_id}' is not available.")
        self.operation_id = operation_id

# ################################################################################################################################

class ApiNotAvailable(DominoRestException):
    def __init__(self, api_name:'str') -> 'None':
        super().__init__(f"API '{api_name}' not available on this server.")
        self.api_name = api_name

# ################################################################################################################################

class TokenDecodeError(DominoRestException):
    def __init__(self, token:'str') -> 'None':
        super().__init__(f"Can't decode token '{token}'.")
        self.token = token

# ################################################################################################################################

class MissingBearerError(DominoRestException):
    def __init__(self) -> 'None':
        super().__init__('No Bearer Found')

# ################################################################################################################################

class NoResponseBody(DominoRestException):
    def __init__(self, operation_id:'str') -> 'None':
        super().__init__(f"Operation '{operation_id}' received no response body.")
        self.operation_id = operation_id

# ################################################################################################################################

class CallbackError(DominoRestException):
    def __init__(self, msg:'str') -> 'None':
        super().__init__(f'Callback Error: {msg}')

# ################################################################################################################################
# ################################################################################################################################

class HttpResponseError(DominoRestException):
    """ Raised when a remote server replies with a non-success status.
    """
    def __init__(self, msg:'str', status_code:'int', error_id:'intnone'=None) -> 'None':
        super().__init__(msg)
        self.status_code = status_code
        self.error_id = error_id
        self.reason = HTTP_RESPONSES.get(status_code, '')

    def __repr__(self) -> 'str':
        return '<{} at {} status_code:`{}`, error_id:`{}`, msg:`{}`>'.format(
            self.__class__.__name__, hex(id(self)), self.status_code, self.error_id, self.msg)

# ################################################################################################################################

    @classmethod
    def from_json(class_, data:'any_', status_code:'int', reason:'str'='') -> 'HttpResponseError':
        """ Builds an exception out of a JSON error document, e.g. {"message":..., "status":..., "errorId":...}.
        """
        # Anything that is not a dict with a message cannot be used ..
        if not isinstance(data, dict) or not data.get('message'):
            return class_(reason or HTTP_RESPONSES.get(status_code, ''), status_code)

        # .. the server may return its own idea of what the status was ..
        for key in ('statusCode', 'status'):
            value = data.get(key)
            if isinstance(value, int):
                status_code = value
                break

        # .. and we can build the exception now.
        return class_(data['message'], status_code, data.get('errorId'))

# ################################################################################################################################

    @classmethod
    def from_content(class_, content:'bytes | str', status_code:'int', reason:'str'='') -> 'HttpResponseError':
        """ Builds an exception out of a raw response body which may or may not be JSON.
        """
        try:
            data = loads(content) if content else None
        except ValueError:
            data = None

        return class_.from_json(data, status_code, reason)

# ################################################################################################################################

    @classmethod
    def from_response(class_, response:'Response') -> 'HttpResponseError':
        """ Builds an exception out of a response from the requests library.
        """
        return class_.from_content(response.content, response.status_code, response.reason or '')

# ################################################################################################################################
# ################################################################################################################################
