# -*- coding: utf-8 -*-

"""
Copyright (C) 2026, Zato Source s.r.o. https://zato.io

Licensed under AGPLv3, see LICENSE.txt for terms and conditions.
"""

# stdlib
from logging import getLogger

# dominorest
from dominorest.common.api import DEFAULT_STREAM_DELIMITER
from dominorest.common.exception import CallbackError, HttpResponseError, NoResponseBody
from dominorest.common.util.stream import JSONStreamPipeline, stream_to_bytes

# ################################################################################################################################
# ################################################################################################################################

if 0:
    from dominorest.client.access import DominoAccess
    from dominorest.client.connector import DominoConnector
    from dominorest.common.model import RequestOptions, ResponseEnvelope
    from dominorest.common.typing_ import any_, byteiter, callable_

# ################################################################################################################################
# ################################################################################################################################

logger = getLogger(__name__)

# ################################################################################################################################
# ################################################################################################################################

def json_stream_decoder(sink:'callable_', delimiter:'str'=DEFAULT_STREAM_DELIMITER) -> 'callable_':
    """ Returns a decoder that pushes each JSON record of a stream to a sink and returns the number of records.
    """
    if not callable(sink):
        raise CallbackError(f'Sink `{sink!r}` is not callable')

    def _decode(stream:'byteiter') -> 'int':
        pipeline = JSONStreamPipeline(sink, delimiter)
        return pipeline.consume(stream)

    return _decode

# ################################################################################################################################

def error_from_envelope(envelope:'ResponseEnvelope') -> 'HttpResponseError':
    """ Builds an exception out of an error response, reading its whole body, if there is any.
    """
    content = stream_to_bytes(envelope.stream) if envelope.stream is not None else b''
    return HttpResponseError.from_content(content, envelope.status, envelope.reason)

# ################################################################################################################################

def execute_operation(
    connector,         # type: DominoConnector
    access,            # type: DominoAccess
    operation_id,      # type: str
    options,           # type: RequestOptions
    decoder,           # type: callable_
    needs_body=True,   # type: bool
) -> 'any_':
    """ Invokes an operation and decodes its response using the decoder given on input.
    Error statuses are turned into HttpResponseError exceptions.
    """
    envelope = connector.request(access, operation_id, options)

    try:

        # A response without a body is an error only if our caller expects one ..
        if envelope.stream is None:
            if envelope.is_ok and not needs_body:
                return None
            elif envelope.is_ok:
                raise NoResponseBody(operation_id)

        # .. we have an error to report ..
        if not envelope.is_ok:
            error = error_from_envelope(envelope)
            logger.debug('Operation `%s` returned an error -> %r', operation_id, error)
            raise error

        # .. otherwise, the body can be decoded now.
        return decoder(envelope.stream)

    finally:
        envelope.close()

# ################################################################################################################################
# ################################################################################################################################
