''' Byte I/O capabilities used by the in/out instructions '''

import sys
from typing import BinaryIO, Protocol

from synvm.common.hwconf import BYTE_MASK
from synvm.runtime.errors import InputExhausted


class ByteInput(Protocol):
    def read_byte(self) -> int:
        ...


class ByteOutput(Protocol):
    def write_byte(self, value: int):
        ...


class StreamInput:
    # Blocks on the underlying stream; stdin is looked up on every read
    def __init__(self, stream: BinaryIO | None = None):
        self.stream = stream

    def read_byte(self) -> int:
        stream = self.stream if self.stream is not None else sys.stdin.buffer

        try:
            buf = stream.read(1)
        except (OSError, ValueError) as e:
            raise InputExhausted(f'Input stream failed: {e}') from e

        if not buf:
            raise InputExhausted('Input stream exhausted')

        return buf[0]


class ScriptedInput:
    def __init__(self, data: bytes | str = b''):
        if isinstance(data, str):
            data = data.encode()

        self.data = bytes(data)
        self.pos = 0

    def feed(self, data: bytes | str):
        if isinstance(data, str):
            data = data.encode()

        self.data += data
        return self

    def read_byte(self) -> int:
        if self.pos >= len(self.data):
            raise InputExhausted('Scripted input exhausted')

        value = self.data[self.pos]
        self.pos += 1
        return value


class StreamOutput:
    def __init__(self, stream: BinaryIO | None = None):
        self.stream = stream

    def write_byte(self, value: int):
        stream = self.stream if self.stream is not None else sys.stdout.buffer
        stream.write(bytes([value & BYTE_MASK]))
        stream.flush()


class BufferOutput:
    def __init__(self):
        self.buffer = bytearray()

    def write_byte(self, value: int):
        self.buffer.append(value & BYTE_MASK)

    @property
    def data(self) -> bytes:
        return bytes(self.buffer)

    def text(self) -> str:
        return self.buffer.decode('latin-1')
