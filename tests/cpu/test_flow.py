import pytest

import synvm.common.ops as ops
from synvm.runtime.errors import StackUnderflow, OperandError

from unit_utils import reg, make_cpu, assemble_cpu, run_until_halt


def test_halt():
    proc = make_cpu([ops.HALT])
    proc.exec_next()

    assert proc.halted
    assert proc.ip == 0


def test_jmp():
    proc = make_cpu([ops.JMP, 42])
    proc.exec_next()
    assert proc.ip == 42


def test_jmp_through_register():
    proc = assemble_cpu('set r0 100\njmp r0')
    proc.exec_next()
    proc.exec_next()
    assert proc.ip == 100


@pytest.mark.parametrize('op, value, ip', [
    (ops.JT, 1, 50),
    (ops.JT, 0, 3),
    (ops.JF, 0, 50),
    (ops.JF, 7, 3),
])
def test_conditional_jumps(op, value, ip):
    proc = make_cpu([op, value, 50])
    proc.exec_next()
    assert proc.ip == ip


def test_push_pop():
    proc = assemble_cpu('push 1234\npop r5\nhalt')
    proc.exec_next()
    assert proc.stack == [1234]

    proc.exec_next()
    assert proc.gp[5] == 1234
    assert proc.stack == []
    assert proc.ip == 4


def test_stack_order():
    proc = run_until_halt(assemble_cpu('push 1\npush 2\npop r0\npop r1\nhalt'))
    assert (proc.gp[0], proc.gp[1]) == (2, 1)


def test_pop_empty_stack():
    proc = make_cpu([ops.POP, reg(0)])

    with pytest.raises(StackUnderflow) as e:
        proc.exec_next()

    assert e.value.ip == 0
    assert e.value.opcode == ops.POP
    assert not proc.halted


def test_ret_empty_stack_halts():
    proc = make_cpu([ops.RET])
    proc.exec_next()
    assert proc.halted


def test_call_ret():
    source = '''
        noop
        call &sub
        halt
    sub:
        ret
    '''
    proc = assemble_cpu(source)
    proc.exec_next()
    proc.exec_next()

    assert proc.ip == 4
    assert proc.stack == [3]

    proc.exec_next()
    assert proc.ip == 3
    assert proc.stack == []

    proc.exec_next()
    assert proc.halted


def test_call_through_register():
    proc = run_until_halt(assemble_cpu('set r7 &sub\ncall r7\nhalt\nsub: set r0 1\nret'))
    assert proc.gp[0] == 1
    assert proc.ip == 5


def test_nested_calls():
    source = '''
        call &a
        halt
    a:
        call &b
        add r0 r0 1
        ret
    b:
        add r0 r0 10
        ret
    '''
    proc = run_until_halt(assemble_cpu(source))
    assert proc.gp[0] == 11
    assert proc.stack == []


def test_noop():
    proc = make_cpu([ops.NOOP, ops.NOOP])
    proc.exec_next()
    assert proc.ip == 1


@pytest.mark.parametrize('op, cond', [(ops.JT, 0), (ops.JF, 1)])
def test_untaken_jump_checks_target(op, cond):
    proc = make_cpu([op, cond, 40000, ops.HALT])

    with pytest.raises(OperandError) as e:
        proc.exec_next()

    assert e.value.operand == 40000
    assert e.value.ip == 0
