import gzip
import io
import sys

import content_encoding
from content_encoding.known import canonical

responses = [
    (b'x-gzip', gzip.compress(b'Hello world!\n')),
    (b'gzip, my-fancy-coding', b'...'),
]

for (header_value, body) in responses:
    layers = [canonical(enc)
              for enc in content_encoding.parse_encodings(header_value)]
    unknown = [enc.name for enc in layers if not enc.is_std]
    if unknown:
        print('skipping body with unknown codings: %s' % ', '.join(unknown))
        continue
    try:
        decoded = content_encoding.decode_body(body, header_value)
    except content_encoding.DecodeError as exc:
        print('cannot decode: %s' % exc, file=sys.stderr)
        continue
    with io.open('body.out', 'wb') as f:
        f.write(decoded)
