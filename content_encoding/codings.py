# -*- coding: utf-8; -*-

"""Decoding message bodies according to their ``Content-Encoding``."""

import gzip
import logging
import zlib

import brotli

from content_encoding.known import canonical
from content_encoding.parse import parse_encodings
from content_encoding.structure import StdEncoding
from content_encoding.util.text import nicely_join


logger = logging.getLogger(__name__)


class DecodeError(Exception):

    def __init__(self, coding, message):
        super(DecodeError, self).__init__(u'%s: %s' % (coding, message))
        self.coding = coding


class UnsupportedEncoding(DecodeError):

    def __init__(self, coding):
        super(UnsupportedEncoding, self).__init__(
            coding,
            u'cannot decode this coding (can only decode %s)' %
            nicely_join([str(c) for c in decoders] + [u'identity']))


def decode_gzip(data):
    return gzip.decompress(data)


def decode_deflate(data):
    return zlib.decompress(data)


def decode_brotli(data):
    return brotli.decompress(data)


decoders = {
    StdEncoding.brotli: decode_brotli,
    StdEncoding.deflate: decode_deflate,
    StdEncoding.gzip: decode_gzip,
}


def decoder_for(encoding):
    """Return a function that removes one layer of `encoding`.

    Returns `None` for ``identity``, which needs no decoding.
    """
    encoding = canonical(encoding)
    if encoding.is_identity:
        return None
    if encoding.is_std and encoding.coding in decoders:
        return decoders[encoding.coding]
    raise UnsupportedEncoding(encoding.token)


def decode_body(body, header_value):
    """Undo all the codings listed in `header_value`, outermost first."""
    for encoding in parse_encodings(header_value):
        decode = decoder_for(encoding)
        if decode is None:
            continue
        logger.debug(u'decoding %s layer of %d bytes',
                     encoding.token, len(body))
        try:
            body = decode(body)
        except (zlib.error, brotli.error, gzip.BadGzipFile, EOFError) as e:
            raise DecodeError(encoding.token, str(e)) from e
    return body
