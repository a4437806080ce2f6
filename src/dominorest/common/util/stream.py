# -*- coding: utf-8 -*-

"""
Copyright (C) 2026, Zato Source s.r.o. https://zato.io

Licensed under AGPLv3, see LICENSE.txt for terms and conditions.
"""

# stdlib
from codecs import getincrementaldecoder
from json import loads
from logging import getLogger

# dominorest
from dominorest.common.api import DEFAULT_STREAM_DELIMITER, NOT_GIVEN

# ################################################################################################################################
# ################################################################################################################################

if 0:
    from dominorest.common.typing_ import any_, anygen, byteiter, callable_, strgen, striter, strlist

# ################################################################################################################################
# ################################################################################################################################

logger = getLogger(__name__)

# ################################################################################################################################
# ################################################################################################################################

class StreamSplitter:
    """ Splits a continuous text stream into records on a delimiter. A record may span any number of chunks
    and the last, possibly incomplete, segment is kept until either more data arrives or the stream ends.
    """
    def __init__(self, delimiter:'str'=DEFAULT_STREAM_DELIMITER) -> 'None':
        if not delimiter:
            raise ValueError('Delimiter must not be empty')

        self.delimiter = delimiter
        self.buffer = ''

    def feed(self, chunk:'str') -> 'strlist':

        self.buffer += chunk
        parts = self.buffer.split(self.delimiter)

        # The last part is either empty or incomplete, either way, it waits for more data
        self.buffer = parts.pop()

        return parts

    def flush(self) -> 'strlist':
        out = [self.buffer] if self.buffer else []
        self.buffer = ''
        return out

# ################################################################################################################################
# ################################################################################################################################

class JSONRecordTransformer:
    """ Parses individual records of a stream into JSON values. A trailing separator is stripped,
    and records that end neither with it nor with a closing brace, such as array brackets
    or blank lines, are skipped.
    """
    def __init__(self, separator:'str'=',') -> 'None':
        self.separator = separator

    def transform(self, record:'str') -> 'any_':

        record = record.rstrip()

        if self.separator and record.endswith(self.separator):
            return loads(record[:-len(self.separator)])

        elif record.endswith('}'):
            return loads(record)

        return NOT_GIVEN

# ################################################################################################################################
# ################################################################################################################################

class JSONStreamPipeline:
    """ Push-based pipeline - raw bytes -> text -> records -> JSON values -> sink.
    """
    def __init__(
        self,
        sink:'callable_',
        delimiter:'str'=DEFAULT_STREAM_DELIMITER,
        encoding:'str'='utf-8',
    ) -> 'None':
        self.sink = sink
        self.splitter = StreamSplitter(delimiter)
        self.transformer = JSONRecordTransformer()
        self.decoder = getincrementaldecoder(encoding)(errors='strict')
        self.is_closed = False
        self.count = 0

# ################################################################################################################################

    def _emit(self, records:'strlist') -> 'None':
        for record in records:
            value = self.transformer.transform(record)
            if value is not NOT_GIVEN:
                self.count += 1
                self.sink(value)

# ################################################################################################################################

    def write(self, chunk:'bytes | str') -> 'None':

        if self.is_closed:
            raise ValueError('Pipeline is already closed')

        if isinstance(chunk, bytes):
            chunk = self.decoder.decode(chunk)

        self._emit(self.splitter.feed(chunk))

# ################################################################################################################################

    def close(self) -> 'None':

        if self.is_closed:
            return

        # Whatever the decoder still holds belongs to the very last record ..
        tail = self.decoder.decode(b'', final=True)
        records = self.splitter.feed(tail) if tail else []

        # .. which is followed by anything the splitter kept back.
        records.extend(self.splitter.flush())

        self.is_closed = True
        self._emit(records)

        logger.debug('JSON stream closed after %d record(s)', self.count)

# ################################################################################################################################

    def consume(self, chunks:'byteiter') -> 'int':
        """ Pushes all the chunks through the pipeline, closes it and returns the number of values sent to the sink.
        """
        for chunk in chunks:
            self.write(chunk)

        self.close()
        return self.count

# ################################################################################################################################
# ################################################################################################################################

def iter_split(chunks:'striter', delimiter:'str'=DEFAULT_STREAM_DELIMITER) -> 'strgen':
    """ Pull-based equivalent of StreamSplitter - yields records out of an iterable of text chunks.
    """
    splitter = StreamSplitter(delimiter)

    for chunk in chunks:
        yield from splitter.feed(chunk)

    yield from splitter.flush()

# ################################################################################################################################

def iter_json_records(chunks:'byteiter', delimiter:'str'=DEFAULT_STREAM_DELIMITER, encoding:'str'='utf-8') -> 'anygen':
    """ Yields JSON values out of an iterable of bytes chunks.
    """
    decoder = getincrementaldecoder(encoding)(errors='strict')
    transformer = JSONRecordTransformer()

    def _text():
        for chunk in chunks:
            yield decoder.decode(chunk) if isinstance(chunk, bytes) else chunk
        yield decoder.decode(b'', final=True)

    for record in iter_split(_text(), delimiter):
        value = transformer.transform(record)
        if value is not NOT_GIVEN:
            yield value

# ################################################################################################################################
# ################################################################################################################################

def stream_to_bytes(stream:'byteiter') -> 'bytes':
    """ Reads the whole of a stream and returns it as bytes.
    """
    return b''.join(chunk if isinstance(chunk, bytes) else chunk.encode('utf8') for chunk in stream)

# ################################################################################################################################

def stream_to_text(stream:'byteiter', encoding:'str'='utf-8') -> 'str':
    """ Reads the whole of a stream and returns it as a string.
    """
    return stream_to_bytes(stream).decode(encoding)

# ################################################################################################################################

def stream_to_json(stream:'byteiter', encoding:'str'='utf-8') -> 'any_':
    """ Reads the whole of a stream and returns it as a single JSON value.
    """
    return loads(stream_to_text(stream, encoding))

# ################################################################################################################################
# ################################################################################################################################
