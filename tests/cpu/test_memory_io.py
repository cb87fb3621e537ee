import pytest

import synvm.common.ops as ops
from synvm.runtime.errors import OperandError, InputExhausted

from unit_utils import reg, make_cpu, assemble_cpu, run_until_halt


def test_wmem_rmem_through_register():
    proc = run_until_halt(assemble_cpu('set r0 100\nwmem r0 42\nrmem r1 r0\nhalt'))

    assert proc.memory.read(100) == 42
    assert proc.gp[1] == 42


def test_wmem_literal_address():
    proc = run_until_halt(assemble_cpu('set r3 7\nwmem 200 r3\nrmem r4 200\nhalt'))

    assert proc.memory.read(200) == 7
    assert proc.gp[4] == 7
    assert proc.gp[0] == 0


def test_wmem_self_modifying():
    # Overwrites the halt below with noop, falling through to set
    source = '''
        wmem &patch 21
    patch:
        halt
        set r0 1
        halt
    '''
    proc = run_until_halt(assemble_cpu(source))
    assert proc.gp[0] == 1


def test_rmem_wide_word():
    proc = assemble_cpu('rmem r0 &data\nhalt\ndata: dw 40000')

    with pytest.raises(OperandError):
        proc.exec_next()


def test_out():
    proc = run_until_halt(assemble_cpu("out 'H'\nset r0 'i'\nout r0\nhalt"))
    assert proc.stdout.data == b'Hi'


def test_out_truncates():
    proc = run_until_halt(make_cpu([ops.OUT, 321, ops.HALT]))
    assert proc.stdout.data == b'A'


def test_in():
    proc = make_cpu([ops.IN, reg(2), ops.IN, reg(3)], data='A\n')
    proc.exec_next()
    proc.exec_next()

    assert proc.gp[2] == 65
    assert proc.gp[3] == 10
    assert proc.ip == 4


def test_in_exhausted():
    proc = make_cpu([ops.IN, reg(0)], data='')

    with pytest.raises(InputExhausted) as e:
        proc.exec_next()

    assert e.value.ip == 0
    assert e.value.opcode == ops.IN


def test_in_high_byte():
    proc = make_cpu([ops.IN, reg(0)], data=b'\xff')
    proc.exec_next()
    assert proc.gp[0] == 255
