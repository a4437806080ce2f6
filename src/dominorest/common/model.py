# -*- coding: utf-8 -*-

"""
Copyright (C) 2026, Zato Source s.r.o. https://zato.io

Licensed under AGPLv3, see LICENSE.txt for terms and conditions.
"""

# stdlib
from dataclasses import dataclass, field, fields

# dominorest
from dominorest.common.api import CREDENTIAL_TYPE
from dominorest.common.exception import InvalidParamError, MissingParamError
from dominorest.common.util.api import param_to_str

# ################################################################################################################################
# ################################################################################################################################

if 0:
    from dominorest.common.typing_ import any_, anydict, byteiternone, strmap, strnone, stranydict

# ################################################################################################################################
# ################################################################################################################################

# camelCase keys of JSON credentials, mapped to our attribute names
_credentials_aliases = {
    'userName': 'username',
    'passWord': 'password',
    'appId': 'app_id',
    'appSecret': 'app_secret',
    'refreshToken': 'refresh_token',
}

# ################################################################################################################################
# ################################################################################################################################

@dataclass
class RestCredentials:
    """ Credentials needed to obtain access tokens. What is required depends on the type:
    "basic" needs username and password, "oauth" needs app_id, app_secret and refresh_token.
    """
    type: 'str' = CREDENTIAL_TYPE.Basic
    username: 'strnone' = None
    password: 'strnone' = None
    app_id: 'strnone' = None
    app_secret: 'strnone' = None
    refresh_token: 'strnone' = None
    scope: 'str' = ''

    def validate(self) -> 'RestCredentials':

        required = getattr(CREDENTIAL_TYPE.Required, self.type or '', None)

        if required is None:
            raise InvalidParamError(f"Credentials type '{self.type}' is not supported.")

        for name in required:
            value = getattr(self, name)
            if not value or (isinstance(value, str) and not value.strip()):
                raise MissingParamError(name)

        return self

    @classmethod
    def from_dict(class_, data:'strmap') -> 'RestCredentials':
        out = class_()
        names = {item.name for item in fields(class_)}

        for key, value in data.items():
            key = _credentials_aliases.get(key, key)
            if key in names:
                setattr(out, key, value)
        if out.scope is None:
            out.scope = ''
        return out

# ################################################################################################################################
# ################################################################################################################################

@dataclass(init=False)
class ApiMeta:
    """ Describes where one API's OpenAPI document can be found.
    """
    name: 'str'
    title: 'str'
    version: 'str'
    file_name: 'str'
    mount_path: 'str'

    @classmethod
    def from_dict(class_, data:'stranydict', name:'str'='') -> 'ApiMeta':
        out = class_()
        out.name = data.get('name') or name
        out.title = data.get('title') or ''
        out.version = data.get('version') or ''
        out.file_name = data.get('fileName') or ''
        out.mount_path = data.get('mountPath') or ''
        return out

# ################################################################################################################################
# ################################################################################################################################

@dataclass(init=False)
class OperationParam:
    name: 'str'
    location: 'str'
    required: 'bool'
    raw: 'stranydict'

    @classmethod
    def from_dict(class_, data:'stranydict') -> 'OperationParam':
        out = class_()
        out.name = data['name']
        out.location = data.get('in') or 'query'
        out.required = bool(data.get('required'))
        out.raw = data
        return out

# ################################################################################################################################
# ################################################################################################################################

@dataclass(init=False)
class Operation:
    operation_id: 'str'
    method: 'str'
    url: 'str'
    params: 'dict[str, OperationParam]'
    attrs: 'anydict'
    mime_type: 'strnone' = None

# ################################################################################################################################
# ################################################################################################################################

class ParamsModel:
    """ Base class for closed, typed sets of options of an operation family.
    Subclasses are dataclasses whose field names are the operation's parameter names.
    """
    def to_params(self) -> 'dict[str, str]':
        out = {}
        for item in fields(self): # type: ignore
            value = getattr(self, item.name)
            if value is not None:
                out[item.name] = param_to_str(value)
        return out

# ################################################################################################################################
# ################################################################################################################################

@dataclass
class RequestOptions:
    """ What a caller wants to send with a single operation.
    """
    data_source: 'strnone' = None
    params: 'stranydict' = field(default_factory=dict)
    body: 'any_' = None

    @classmethod
    def from_model(class_, model:'ParamsModel', data_source:'strnone'=None, body:'any_'=None) -> 'RequestOptions':
        return class_(data_source=data_source, params=model.to_params(), body=body)

# ################################################################################################################################
# ################################################################################################################################

@dataclass
class FetchOptions:
    method: 'str'
    headers: 'dict[str, str]' = field(default_factory=dict)
    body: 'any_' = None

# ################################################################################################################################
# ################################################################################################################################

class ResponseEnvelope:
    """ What a remote server returned, with the body not read yet.
    """
    def __init__(
        self,
        status:'int',
        reason:'str',
        headers:'strmap',
        stream:'byteiternone',
        inner:'any_'=None,
    ) -> 'None':
        self.status = status
        self.reason = reason
        self.headers = headers
        self.stream = stream
        self.inner = inner # Actual response from the requests library

    @property
    def is_ok(self) -> 'bool':
        return 200 <= self.status < 300

    @property
    def content_type(self) -> 'str':
        return self.headers.get('Content-Type') or ''

    def close(self) -> 'None':
        if self.inner is not None:
            self.inner.close()

    def __repr__(self) -> 'str':
        return '<{} at {} status:`{}`, content_type:`{}`, has_stream:`{}`>'.format(
            self.__class__.__name__, hex(id(self)), self.status, self.content_type, self.stream is not None)

# ################################################################################################################################
# ################################################################################################################################
