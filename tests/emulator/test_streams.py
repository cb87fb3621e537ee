import io

import pytest

from synvm.runtime.streams import StreamInput, StreamOutput, ScriptedInput, BufferOutput
from synvm.runtime.errors import InputExhausted


def test_stream_input():
    stdin = StreamInput(io.BytesIO(b'ab'))

    assert stdin.read_byte() == ord('a')
    assert stdin.read_byte() == ord('b')

    with pytest.raises(InputExhausted):
        stdin.read_byte()


def test_scripted_input_feed():
    stdin = ScriptedInput('a').feed(b'b')

    assert [stdin.read_byte(), stdin.read_byte()] == [97, 98]

    with pytest.raises(InputExhausted):
        stdin.read_byte()


def test_stream_output():
    buf = io.BytesIO()
    stdout = StreamOutput(buf)
    stdout.write_byte(ord('o'))
    stdout.write_byte(0x100 + ord('k'))

    assert buf.getvalue() == b'ok'


def test_buffer_output():
    stdout = BufferOutput()
    stdout.write_byte(0xE9)

    assert stdout.data == b'\xe9'
    assert stdout.text() == '\xe9'


def test_closed_stream_input():
    stream = io.BytesIO(b'a')
    stream.close()

    with pytest.raises(InputExhausted):
        StreamInput(stream).read_byte()
