# -*- coding: utf-8; -*-

"""Parsing the value of a ``Content-Encoding`` header field.

The header lists codings in the order they were applied,
so the outermost coding comes last (RFC 7231 Section 3.1.2.2).
:func:`parse_encodings` yields them in the order they must be decoded.

Parsing never fails. A coding that is not in :class:`StdEncoding`
comes out as :class:`Other`, and it is up to the caller to reject it.
"""

from content_encoding.structure import Other, Std, StdEncoding
from content_encoding.util.text import WHITESPACE, force_unicode


def parse_encoding(token):
    """Classify a single coding token.

    >>> parse_encoding(u'  GZip ')
    Std(StdEncoding.gzip)
    >>> parse_encoding(u'\\tcustom-enc')
    Other('custom-enc')
    >>> parse_encoding(u'')
    Std(StdEncoding.identity)
    """
    token = force_unicode(token).strip(WHITESPACE)
    if not token:
        # An empty value means no coding at all (RFC 7231 Section 5.3.4).
        return Std(StdEncoding.identity)
    std = StdEncoding.from_token(token)
    if std is None:
        return Other(token)
    return Std(std)


def parse_encodings(header_value):
    """Iterate over the layers of `header_value`, outermost first.

    `header_value` is the field value alone, as :class:`str` or as
    :class:`bytes` (which are taken to be ISO-8859-1).
    Every comma-separated field yields exactly one layer, empty ones included.

    >>> list(parse_encodings(u' gzip, identity, custom-enc'))
    [Other('custom-enc'), Std(StdEncoding.identity), Std(StdEncoding.gzip)]
    """
    for token in reversed(force_unicode(header_value).split(u',')):
        yield parse_encoding(token)


def applied_order(header_value):
    """Return the layers of `header_value` in the order they were applied."""
    return [parse_encoding(token)
            for token in force_unicode(header_value).split(u',')]
