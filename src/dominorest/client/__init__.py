# -*- coding: utf-8 -*-

"""
Copyright (C) 2026, Zato Source s.r.o. https://zato.io

Licensed under AGPLv3, see LICENSE.txt for terms and conditions.
"""

# dominorest
from dominorest.client.access import DominoAccess
from dominorest.client.connector import DominoConnector, OperationLoader
from dominorest.client.operations import execute_operation, json_stream_decoder
from dominorest.client.server import DominoServer
from dominorest.client.session import DominoUserSession
from dominorest.common.config import ClientConfig
from dominorest.common.model import ApiMeta, Operation, ParamsModel, RequestOptions, ResponseEnvelope, RestCredentials
from dominorest.common.util.stream import iter_json_records, JSONStreamPipeline, stream_to_json, stream_to_text

# ################################################################################################################################
# ################################################################################################################################

__all__ = (
    'ApiMeta',
    'ClientConfig',
    'DominoAccess',
    'DominoConnector',
    'DominoServer',
    'DominoUserSession',
    'execute_operation',
    'iter_json_records',
    'json_stream_decoder',
    'JSONStreamPipeline',
    'Operation',
    'OperationLoader',
    'ParamsModel',
    'RequestOptions',
    'ResponseEnvelope',
    'RestCredentials',
    'stream_to_json',
    'stream_to_text',
)

# ################################################################################################################################
# ################################################################################################################################
