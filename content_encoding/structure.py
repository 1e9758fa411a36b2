# -*- coding: utf-8; -*-

"""Classes for representing content codings and the layers built from them."""

from collections import namedtuple
from enum import Enum

from content_encoding.util.text import ascii_lower, force_unicode


class ProtocolString(str):

    """Base class for various constant strings used in HTTP."""

    __slots__ = ()

    def __repr__(self):
        return '%s(%s)' % (self.__class__.__name__, str.__repr__(self))


class CaseInsensitive(ProtocolString):

    __slots__ = ()

    def __eq__(self, other):
        if isinstance(other, str):
            return ascii_lower(self) == ascii_lower(other)
        return NotImplemented

    def __ne__(self, other):
        return not (self == other)

    def __hash__(self):
        return hash(ascii_lower(self))

    def startswith(self, other):
        return ascii_lower(self).startswith(ascii_lower(other))

    def endswith(self, other):
        return ascii_lower(self).endswith(ascii_lower(other))


class ContentCoding(CaseInsensitive):

    """A content coding name (RFC 7231 Section 3.1.2.1)."""

    __slots__ = ()


class StdEncoding(Enum):

    """A content coding from the IANA HTTP Content Coding Registry."""

    brotli = ContentCoding(u'br')
    compress = ContentCoding(u'compress')
    deflate = ContentCoding(u'deflate')
    efficient_xml = ContentCoding(u'exi')
    gzip = ContentCoding(u'gzip')
    identity = ContentCoding(u'identity')
    pack200_gzip = ContentCoding(u'pack200-gzip')

    def __str__(self):
        return str(self.value)

    @classmethod
    def from_token(cls, token):
        """Look up a token that has already been trimmed.

        Returns `None` if `token` does not name one of the members.
        Unlike :func:`content_encoding.parse.parse_encoding`,
        an empty token is not taken to mean ``identity`` here.
        """
        return _by_token.get(ascii_lower(force_unicode(token)))


_by_token = {ascii_lower(member.value): member for member in StdEncoding}


class Encoding(tuple):

    """One layer of a ``Content-Encoding``: either :class:`Std` or :class:`Other`.

    Both variants are tuples, but a variant only ever compares equal
    to an instance of the same variant with the same payload.
    """

    __slots__ = ()

    is_std = False

    def __eq__(self, other):
        if isinstance(other, Encoding):
            return type(self) is type(other) and tuple.__eq__(self, other)
        if isinstance(other, tuple):
            return False
        return NotImplemented

    def __ne__(self, other):
        return not (self == other)

    def __hash__(self):
        return hash((type(self).__name__, tuple(self)))

    @property
    def is_identity(self):
        return False

    @property
    def token(self):
        raise NotImplementedError


class Std(Encoding, namedtuple('Std', ('coding',))):

    """A coding from :class:`StdEncoding`."""

    __slots__ = ()

    is_std = True

    def __repr__(self):
        return 'Std(StdEncoding.%s)' % self.coding.name

    @property
    def is_identity(self):
        return self.coding is StdEncoding.identity

    @property
    def token(self):
        return self.coding.value


class Other(Encoding, namedtuple('Other', ('name',))):

    """A coding that is not in :class:`StdEncoding`.

    :attr:`name` is the coding exactly as it appeared in the header,
    minus surrounding whitespace. It is a plain string that compares
    case-sensitively, so ``Other(u'foo') != Other(u'FOO')``.
    Coding names are case-insensitive in HTTP, though:
    to match an `Other` against a known name, use :attr:`coding`.
    """

    __slots__ = ()

    def __repr__(self):
        return 'Other(%r)' % self.name

    @property
    def coding(self):
        return ContentCoding(self.name)

    @property
    def token(self):
        return self.coding
