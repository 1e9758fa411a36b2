# -*- coding: utf-8; -*-

import io


_ASCII_LOWER = {code: code + 0x20 for code in range(ord(u'A'), ord(u'Z') + 1)}

# Unicode White_Space. Unlike `str.strip`, this leaves U+001C..U+001F alone.
WHITESPACE = (u' \t\n\r\x0b\x0c\x85\xa0\u1680' +
              u''.join(chr(code) for code in range(0x2000, 0x200B)) +
              u'\u2028\u2029\u202f\u205f\u3000')


def ascii_lower(s):
    u"""Lowercase only the ASCII letters in `s`.

    HTTP tokens are compared case-insensitively in ASCII only.
    :meth:`str.lower` would also fold characters such as the Kelvin sign,
    which would then look like an ordinary ``k``.

    >>> print(ascii_lower(u'PaCK200-GZip'))
    pack200-gzip
    >>> print(ascii_lower(u'ÆØБД❤'))
    ÆØБД❤
    >>> ascii_lower(u'PAC\\u212a200-GZIP') == u'pack200-gzip'
    False
    """
    return s.translate(_ASCII_LOWER)


def nicely_join(strings):
    """
    >>> print(nicely_join([u'foo']))
    foo
    >>> print(nicely_join([u'foo', u'bar baz']))
    foo and bar baz
    >>> print(nicely_join([u'foo', u'bar baz', u'qux']))
    foo, bar baz, and qux
    """
    joined = u''
    for i, s in enumerate(strings):
        if i == len(strings) - 1:
            if len(strings) > 2:
                joined += u'and '
            elif len(strings) > 1:
                joined += u' and '
        joined += s
        if len(strings) > 2 and i < len(strings) - 1:
            joined += u', '
    return joined


def force_unicode(x):
    """
    >>> print(force_unicode(b'x-gzip, caf\\xe9'))
    x-gzip, café
    """
    if isinstance(x, bytes):
        return x.decode('iso-8859-1')
    else:
        return str(x)


class MockStdio(object):

    """Suitable as a mock stdout/stderr for tests."""

    def __init__(self, data=b''):
        self.buffer = io.BytesIO(data)

    def write(self, s):
        self.buffer.write(s.encode('utf-8'))
