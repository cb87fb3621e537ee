import pytest

from synvm.runtime.loader import pack_image
from synvm.sasm.asm import compile_source

import unit_utils


@pytest.fixture
def with_hello_image(tmp_path):
    image = tmp_path / 'hello.bin'
    image.write_bytes(pack_image(compile_source("out 'H'\nout 'i'\nhalt")))
    yield image


@pytest.fixture
def with_echo_image(tmp_path):
    image = tmp_path / 'echo.bin'
    source = unit_utils.load_file('testdata/reverse.sasm')
    image.write_bytes(pack_image(compile_source(source)))
    yield image
