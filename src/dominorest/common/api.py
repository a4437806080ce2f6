# -*- coding: utf-8 -*-

"""
Copyright (C) 2026, Zato Source s.r.o. https://zato.io

Licensed under AGPLv3, see LICENSE.txt for terms and conditions.
"""

# ################################################################################################################################
# ################################################################################################################################

# Marks a value that was not given at all, as opposed to one that was given and is None
NOT_GIVEN = b'DOMINOREST_NOT_GIVEN'

# ################################################################################################################################
# ################################################################################################################################

class CREDENTIAL_TYPE:
    Basic = 'basic'
    OAuth = 'oauth'

    class Required:
        basic = ('username', 'password')
        oauth = ('app_id', 'app_secret', 'refresh_token')

# ################################################################################################################################
# ################################################################################################################################

class PARAM_LOCATION:
    Path   = 'path'
    Query  = 'query'
    Header = 'header'
    Cookie = 'cookie'

    # Parameters in these locations are never part of a URL
    Not_In_URL = Header, Cookie

# ################################################################################################################################
# ################################################################################################################################

class URL_PATH:
    Auth       = '/api/v1/auth'
    OAuthToken = '/oauth/token'
    Catalogue  = '/api'

# ################################################################################################################################
# ################################################################################################################################

class CONTENT_TYPE:
    JSON = 'application/json'
    Form = 'application/x-www-form-urlencoded'

# ################################################################################################################################
# ################################################################################################################################

class HEADER:
    Authorization = 'Authorization'
    Content_Type  = 'Content-Type'
    Cache_Control = 'Cache-Control'

# ################################################################################################################################
# ################################################################################################################################

# A parameter of this name is filled in from the request's data source (scope) if not given explicitly
DATA_SOURCE_PARAM = 'dataSource'

# Statuses that never carry a response body
NO_BODY_STATUS = 204, 205, 304

# The default delimiter of records in JSON streams
DEFAULT_STREAM_DELIMITER = '\n'

# ################################################################################################################################
# ################################################################################################################################
