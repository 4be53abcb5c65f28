# -*- coding: utf-8 -*-
# gzip + base64 packing used for free text sent to, and subtitle files
# received from, the XML-RPC service.

import base64
import codecs
import gzip
import io

from charset_normalizer import from_bytes


def pack_text(text, encoding='utf-8'):
    raw = text.encode(encoding)
    return base64.b64encode(gzip.compress(raw)).decode('ascii')


def unpack_bytes(packed):
    if isinstance(packed, str):
        packed = packed.encode('ascii')
    return gzip.decompress(base64.b64decode(packed))


def unpack_text(packed, encoding='utf-8'):
    return unpack_bytes(packed).decode(encoding)


def pack_texts(texts, encoding='utf-8'):
    codecs.lookup(encoding)
    return [pack_text(text, encoding) for text in texts]


def detect_encoding(core, raw_bytes, where='subtitle'):
    """Picks an encoding for downloaded subtitle bytes; falls back to utf-8."""
    if raw_bytes[:3] == codecs.BOM_UTF8:
        return 'utf-8-sig'
    best = from_bytes(raw_bytes).best()
    if best is not None and best.encoding:
        core.logger.debug(f"[{where}] Detected by charset-normalizer: {best.encoding}")
        return best.encoding
    core.logger.debug(f"[{where}] charset-normalizer did not yield an encoding. Using utf-8.")
    return 'utf-8'


def decode_subtitle(core, packed, where='subtitle'):
    raw_bytes = unpack_bytes(packed)
    encoding = detect_encoding(core, raw_bytes, where)
    with io.TextIOWrapper(io.BytesIO(raw_bytes), encoding=encoding, errors='replace', newline='') as stream:
        return stream.read()
