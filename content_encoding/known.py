# -*- coding: utf-8; -*-

"""What we know about the standard content codings.

The vocabulary itself lives in :class:`StdEncoding`.
This module adds a human-readable title and a citation for every member,
and the legacy aliases that recipients treat as standard codings.
"""

from content_encoding.citation import RFC, Citation
from content_encoding.structure import ContentCoding, Other, Std, StdEncoding


registry = Citation(u'HTTP Content Coding Registry',
                    u'https://www.iana.org/assignments/http-parameters/'
                    u'http-parameters.xhtml#content-coding')


_info = {
    StdEncoding.brotli: {
        'title': u'Brotli compressed data format',
        'citation': RFC(7932),
    },
    StdEncoding.compress: {
        'title': u'UNIX "compress" data format',
        'citation': RFC(7230, section=(4, 2, 1)),
    },
    StdEncoding.deflate: {
        'title': u'"deflate" compressed data inside the "zlib" data format',
        'citation': RFC(7230, section=(4, 2, 2)),
    },
    StdEncoding.efficient_xml: {
        'title': u'W3C Efficient XML Interchange',
        'citation': Citation(u'W3C Recommendation: '
                             u'Efficient XML Interchange (EXI) Format',
                             u'http://www.w3.org/TR/exi/'),
    },
    StdEncoding.gzip: {
        'title': u'GZIP file format',
        'citation': RFC(7230, section=(4, 2, 3)),
    },
    StdEncoding.identity: {
        'title': u'No transformation',
        'citation': RFC(7231, section=(5, 3, 4)),
    },
    StdEncoding.pack200_gzip: {
        'title': u'Network Transfer Format for Java Archives',
        'citation': Citation(u'JSR 200: Network Transfer Format for Java',
                             u'http://www.jcp.org/en/jsr/detail?id=200'),
    },
}

assert set(_info) == set(StdEncoding)


# Recipients SHOULD consider these equivalent (RFC 7230 Section 4.2.1, 4.2.3).
aliases = {
    ContentCoding(u'x-compress'): StdEncoding.compress,
    ContentCoding(u'x-gzip'): StdEncoding.gzip,
}


def info(coding):
    return _info[coding]


def title(coding, with_citation=False):
    t = _info[coding]['title']
    if with_citation:
        cite = _info[coding]['citation']
        if cite.title:
            t = u'%s (%s)' % (t, cite.title)
    return t


def citation(coding):
    return _info[coding]['citation']


def canonical(encoding):
    """Resolve a legacy alias to the standard coding it stands for.

    >>> canonical(Other(u'X-GZip'))
    Std(StdEncoding.gzip)
    >>> canonical(Other(u'x-foo'))
    Other('x-foo')
    """
    if isinstance(encoding, Other) and encoding.coding in aliases:
        return Std(aliases[encoding.coding])
    return encoding
