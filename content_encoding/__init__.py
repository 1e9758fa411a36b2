# -*- coding: utf-8; -*-

from content_encoding.__metadata__ import version as __version__
from content_encoding.codings import (DecodeError, UnsupportedEncoding,
                                      decode_body)
from content_encoding.parse import (applied_order, parse_encoding,
                                    parse_encodings)
from content_encoding.structure import (ContentCoding, Encoding, Other, Std,
                                        StdEncoding)

__all__ = [
    'ContentCoding',
    'DecodeError',
    'Encoding',
    'Other',
    'Std',
    'StdEncoding',
    'UnsupportedEncoding',
    'applied_order',
    'decode_body',
    'parse_encoding',
    'parse_encodings',
]
