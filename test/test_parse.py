# -*- coding: utf-8; -*-

import doctest

import content_encoding.parse
from content_encoding.parse import (applied_order, parse_encoding,
                                    parse_encodings)
from content_encoding.structure import Other, Std, StdEncoding


brotli = Std(StdEncoding.brotli)
compress = Std(StdEncoding.compress)
deflate = Std(StdEncoding.deflate)
exi = Std(StdEncoding.efficient_xml)
gzip = Std(StdEncoding.gzip)
identity = Std(StdEncoding.identity)
pack200 = Std(StdEncoding.pack200_gzip)


def test_doctests():
    (failures, _) = doctest.testmod(content_encoding.parse)
    assert failures == 0


def test_parse_encoding():
    assert parse_encoding(u'br') == brotli
    assert parse_encoding(u'\t\t\rBr  ') == brotli
    assert parse_encoding(u'compress') == compress
    assert parse_encoding(u'  COMpress ') == compress
    assert parse_encoding(u'deflate') == deflate
    assert parse_encoding(u'\t\n dEFLAte ') == deflate
    assert parse_encoding(u'exi') == exi
    assert parse_encoding(u'\tEXI\t') == exi
    assert parse_encoding(u'gzip') == gzip
    assert parse_encoding(u'  \tgZIP') == gzip
    assert parse_encoding(u'identity') == identity
    assert parse_encoding(u'\niDENtiTY\r\r\r ') == identity
    assert parse_encoding(u'pack200-gzip') == pack200
    assert parse_encoding(u'  PaCK200-GZip ') == pack200


def test_parse_encoding_empty():
    assert parse_encoding(u'') == identity
    assert parse_encoding(u'    \t ') == identity
    assert parse_encoding(u'\r\n') == identity


def test_parse_encoding_other():
    assert parse_encoding(u'ÆØБД❤') == Other(u'ÆØБД❤')
    assert parse_encoding(u' Custom-Enc\t') == Other(u'Custom-Enc')
    assert parse_encoding(u'x-gzip') == Other(u'x-gzip')
    assert parse_encoding(u'gzip;q=1') == Other(u'gzip;q=1')
    assert parse_encoding(u'g zip') == Other(u'g zip')


def test_parse_encoding_ascii_only():
    # KELVIN SIGN lowercases to an ASCII "k" with `str.lower`.
    assert parse_encoding(u'PAC\u212a200-GZIP') == \
        Other(u'PAC\u212a200-GZIP')


def test_parse_encoding_control_chars_kept():
    # Only Unicode White_Space is trimmed; separators like U+001C are not.
    assert parse_encoding(u'\x1c') == Other(u'\x1c')
    assert parse_encoding(u' \x1fgzip\x1f ') == Other(u'\x1fgzip\x1f')
    assert parse_encoding(u'\u3000gzip\xa0') == gzip


def test_parse_encoding_bytes():
    assert parse_encoding(b' GZIP ') == gzip
    assert parse_encoding(b'caf\xe9') == Other(u'café')


def test_parse_encodings():
    assert list(parse_encodings(u'deflate, br, identity')) == \
        [identity, brotli, deflate]
    assert list(parse_encodings(u'identity')) == [identity]
    assert list(parse_encodings(u'\t\t\t   gzip')) == [gzip]
    assert list(parse_encodings(u' gzip, identity, custom-enc')) == \
        [Other(u'custom-enc'), identity, gzip]
    assert list(parse_encodings(u'Br, exi,pack200-GZip   ')) == \
        [pack200, exi, brotli]
    assert list(parse_encodings(u'\tabc\t\t, def  ')) == \
        [Other(u'def'), Other(u'abc')]


def test_parse_encodings_empty():
    assert list(parse_encodings(u'')) == [identity]
    assert list(parse_encodings(u',')) == [identity, identity]
    assert list(parse_encodings(u'\t\t,,            ,     ,')) == \
        [identity] * 5


def test_parse_encodings_bytes():
    assert list(parse_encodings(b'gzip, x-foo')) == [Other(u'x-foo'), gzip]


def test_parse_encodings_is_lazy():
    encs = parse_encodings(u'gzip, br')
    assert next(encs) == brotli
    assert next(encs) == gzip
    assert next(encs, None) is None
    # Exhausted for good; parse again to start over.
    assert list(encs) == []
    assert list(parse_encodings(u'gzip, br')) == [brotli, gzip]


def test_applied_order():
    assert applied_order(u'deflate, br, custom') == \
        [deflate, brotli, Other(u'custom')]
    assert applied_order(u'') == [identity]
