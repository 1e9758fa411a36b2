# -*- coding: utf-8; -*-

"""The command-line interface to ContentEncoding."""

import argparse
import io
import logging
import sys
import traceback

import content_encoding
from content_encoding import known
from content_encoding.codings import DecodeError, decode_body
from content_encoding.parse import applied_order, parse_encodings


def parse_args(argv):
    parser = argparse.ArgumentParser(
        description=u'List the layers of a Content-Encoding header value, '
                    u'outermost first, and optionally decode a body.')
    parser.add_argument(u'--version', action='version',
                        version=u'ContentEncoding %s' %
                        content_encoding.__version__)
    parser.add_argument(u'-v', u'--verbose', action='store_true',
                        help=u'log what is being done to stderr')
    parser.add_argument(u'--full-traceback', action='store_true',
                        help=u'do not hide the traceback on exceptions')
    parser.add_argument(u'--applied-order', action='store_true',
                        help=u'list layers in the order they were applied '
                             u'instead of the order they must be decoded')
    parser.add_argument(u'-d', u'--decode', metavar=u'FILE',
                        help=u'decode the body from this file '
                             u'("-" for stdin) instead of listing layers')
    parser.add_argument(u'-o', u'--output', metavar=u'FILE',
                        help=u'write the decoded body here '
                             u'instead of stdout')
    parser.add_argument(u'header_value')
    return parser.parse_args(argv[1:])


def describe(encoding):
    if encoding.is_std:
        return u'%s\t%s' % (encoding.token,
                            known.title(encoding.coding, with_citation=True))
    canon = known.canonical(encoding)
    if canon.is_std:
        return u'%s\talias for %s' % (encoding.token, canon.token)
    return u'%s\t(unknown)' % encoding.token


def list_layers(args, stdout):
    if args.applied_order:
        encodings = applied_order(args.header_value)
    else:
        encodings = parse_encodings(args.header_value)
    for encoding in encodings:
        stdout.write(describe(encoding) + u'\n')


def decode_file(args, stdin, stdout):
    if args.decode == u'-':
        body = stdin.buffer.read()
    else:
        with io.open(args.decode, 'rb') as f:
            body = f.read()
    decoded = decode_body(body, args.header_value)
    if args.output:
        with io.open(args.output, 'wb') as f:
            f.write(decoded)
    else:
        stdout.buffer.write(decoded)


def setup_logging(stream):
    handler = logging.StreamHandler(stream)
    handler.setFormatter(logging.Formatter(u'%(name)s: %(message)s'))
    logger = logging.getLogger(u'content_encoding')
    old_level = logger.level
    logger.addHandler(handler)
    logger.setLevel(logging.DEBUG)
    return (handler, old_level)


def run_cli(args, stdin, stdout, stderr):
    saved = setup_logging(stderr) if args.verbose else None
    try:
        if args.decode is None:
            list_layers(args, stdout)
        else:
            decode_file(args, stdin, stdout)
    except (EnvironmentError, DecodeError) as exc:
        if args.full_traceback:
            traceback.print_exc(file=stderr)
        stderr.write(u'content-encoding: %s\n' % exc)
        return 1
    finally:
        if saved is not None:
            (handler, old_level) = saved
            logger = logging.getLogger(u'content_encoding')
            logger.removeHandler(handler)
            logger.setLevel(old_level)
    return 0


def excepthook(_type, exc, _traceback):     # pragma: no cover
    sys.stderr.write('content-encoding: unhandled exception: %r\n' % exc)


def main():     # pragma: no cover
    args = parse_args(sys.argv)
    if not args.full_traceback:
        sys.excepthook = excepthook
    sys.exit(run_cli(args, sys.stdin, sys.stdout, sys.stderr))

if __name__ == '__main__':
    main()
