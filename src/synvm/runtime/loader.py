''' Program image: little-endian 16-bit words, no header '''

import struct
import logging as lg
from pathlib import Path
from typing import Iterable

from synvm.common.hwconf import MEMORY_SIZE, WORD_SIZE, WORD_FORMAT, WORD_MASK
from synvm.runtime.errors import LoadError


def parse_image(data: bytes) -> list[int]:
    if len(data) % WORD_SIZE != 0:
        raise LoadError(f'Truncated program image ({len(data)} bytes)')

    words = [w for (w,) in struct.iter_unpack(WORD_FORMAT, data)]

    if len(words) > MEMORY_SIZE:
        raise LoadError(f'Program image too large ({len(words)} words)')

    return words


def load_image(path: str | Path) -> list[int]:
    if isinstance(path, str):
        path = Path(path)

    try:
        data = path.read_bytes()
    except OSError as e:
        raise LoadError(f'Unable to read {path}: {e.strerror}') from e

    words = parse_image(data)
    lg.debug(f'Loaded {len(words)} words from {path}')
    return words


def pack_image(words: Iterable[int]) -> bytes:
    bytestr = bytearray()

    for word in words:
        if word < 0 or word > WORD_MASK:
            raise ValueError(f'Word {word} does not fit 16 bits')

        bytestr += struct.pack(WORD_FORMAT, word)

    return bytes(bytestr)
