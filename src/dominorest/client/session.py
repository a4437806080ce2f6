# -*- coding: utf-8 -*-

"""
Copyright (C) 2026, Zato Source s.r.o. https://zato.io

Licensed under AGPLv3, see LICENSE.txt for terms and conditions.
"""

# dominorest
from dominorest.client.operations import execute_operation, json_stream_decoder
from dominorest.common.api import DEFAULT_STREAM_DELIMITER
from dominorest.common.util.stream import stream_to_json, stream_to_text

# ################################################################################################################################
# ################################################################################################################################

if 0:
    from dominorest.client.access import DominoAccess
    from dominorest.client.connector import DominoConnector
    from dominorest.client.server import DominoServer
    from dominorest.common.model import RequestOptions, ResponseEnvelope
    from dominorest.common.typing_ import any_, callable_

# ################################################################################################################################
# ################################################################################################################################

class DominoUserSession:
    """ Binds a user's access to the connector of one API.
    """
    def __init__(self, access:'DominoAccess', connector:'DominoConnector') -> 'None':
        self.access = access
        self.connector = connector

    @classmethod
    def from_server(class_, access:'DominoAccess', server:'DominoServer', api_name:'str') -> 'DominoUserSession':
        return class_(access, server.get_connector(api_name))

    def request(self, operation_id:'str', options:'RequestOptions | None'=None) -> 'ResponseEnvelope':
        """ Returns a raw response, it is the caller's responsibility to read and close it.
        """
        return self.connector.request(self.access, operation_id, options)

    def request_json(self, operation_id:'str', options:'RequestOptions') -> 'any_':
        return execute_operation(self.connector, self.access, operation_id, options, stream_to_json)

    def request_text(self, operation_id:'str', options:'RequestOptions') -> 'str':
        return execute_operation(self.connector, self.access, operation_id, options, stream_to_text)

    def request_json_stream(
        self,
        operation_id,                       # type: str
        options,                            # type: RequestOptions
        sink,                               # type: callable_
        delimiter=DEFAULT_STREAM_DELIMITER, # type: str
    ) -> 'int':
        """ Pushes each JSON record of the response to a sink and returns the number of records.
        """
        decoder = json_stream_decoder(sink, delimiter)
        return execute_operation(self.connector, self.access, operation_id, options, decoder)

# ################################################################################################################################
# ################################################################################################################################
