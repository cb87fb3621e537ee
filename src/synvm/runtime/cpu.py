import logging as lg
from typing import Callable

import synvm.common.ops as ops
from synvm.common.hwconf import MODULUS, VALUE_MASK, WORD_MASK, BYTE_MASK, REGISTER_COUNT
from synvm.runtime.memory import Memory
from synvm.runtime.decoder import Operation, decode
from synvm.runtime.operands import Literal, Register, classify
from synvm.runtime.streams import ByteInput, ByteOutput, StreamInput, StreamOutput
from synvm.runtime.errors import (
    VMError, OperandError, DestinationError, StackUnderflow, DivisionByZero
)


class CPU():
    ip: int  # Instruction pointer
    gp: list[int]  # General purpose registers
    stack: list[int]
    halted: bool
    steps: int  # Executed instructions

    def __init__(
        self, memory: Memory,
        stdin: ByteInput | None = None,
        stdout: ByteOutput | None = None,
        trace: bool = False
    ):
        self.memory = memory    # Ref. to memory
        self.stdin = stdin if stdin is not None else StreamInput()
        self.stdout = stdout if stdout is not None else StreamOutput()
        self.trace = trace

        self.ip = 0             # Execution starts at the first word
        self.gp = [0] * REGISTER_COUNT
        self.stack = []
        self.halted = False
        self.steps = 0

    # - Helpers - #

    def debug_dump(self):
        state = [f'IP:{self.ip}', f'SP:{len(self.stack)}']
        state.extend([f'r{i}:{self.gp[i]}' for i in range(len(self.gp))])
        lg.debug(' '.join(state))

    def resolve_value(self, raw: int) -> int:
        operand = classify(raw)

        if isinstance(operand, Register):
            return self.gp[operand.index]

        return operand.value

    def resolve_destination(self, raw: int) -> int:
        operand = classify(raw)

        if isinstance(operand, Literal):
            raise DestinationError('Destination must be a register', operand=raw)

        return operand.index

    def set_register(self, raw: int, value: int):
        index = self.resolve_destination(raw)

        if value < 0 or value > VALUE_MASK:
            raise OperandError('Value does not fit into a register', operand=value)

        self.gp[index] = value

    def values(self, op: Operation) -> list[int]:
        # Every operand after the destination
        return [self.resolve_value(raw) for raw in op.args[1:]]

    def arithm_pair(self, op: Operation, func: Callable[[int, int], int]):
        a, b = self.values(op)
        self.set_register(op.args[0], func(a, b))

    def do_pop(self) -> int:
        if not self.stack:
            raise StackUnderflow('Pop from an empty stack')

        return self.stack.pop()

    # - Operations - #

    def hlt(self, op: Operation):
        self.halted = True
        return op.ip

    def assign(self, op: Operation):
        (a,) = self.values(op)
        self.set_register(op.args[0], a)

    def psh(self, op: Operation):
        self.stack.append(self.resolve_value(op.args[0]))

    def pop(self, op: Operation):
        self.set_register(op.args[0], self.do_pop())

    def eq(self, op: Operation):
        self.arithm_pair(op, lambda a, b: 1 if a == b else 0)

    def gt(self, op: Operation):
        self.arithm_pair(op, lambda a, b: 1 if a > b else 0)

    def jmp(self, op: Operation):
        return self.resolve_value(op.args[0])

    def jt(self, op: Operation):
        cond, target = (self.resolve_value(raw) for raw in op.args)

        if cond != 0:
            return target

    def jf(self, op: Operation):
        cond, target = (self.resolve_value(raw) for raw in op.args)

        if cond == 0:
            return target

    def rmem(self, op: Operation):
        addr = self.resolve_value(op.args[1])
        self.set_register(op.args[0], self.memory.read(addr))

    def wmem(self, op: Operation):
        # Address is a value operand: writes go through registers indirectly
        addr = self.resolve_value(op.args[0])
        value = self.resolve_value(op.args[1])
        self.memory.write(addr, value)

    def cll(self, op: Operation):
        target = self.resolve_value(op.args[0])
        self.stack.append(op.next_ip)
        return target

    def ret(self, op: Operation):
        if not self.stack:
            lg.debug(f'Return with an empty stack at {op.ip}')
            self.halted = True
            return op.ip

        return self.stack.pop()

    def out(self, op: Operation):
        value = self.resolve_value(op.args[0])
        self.stdout.write_byte(value & BYTE_MASK)

    def inp(self, op: Operation):
        self.resolve_destination(op.args[0])
        value = self.stdin.read_byte()
        self.set_register(op.args[0], value & BYTE_MASK)

    def nop(self, op: Operation):
        pass

    # - Arithmetic - #

    def add(self, op: Operation):
        self.arithm_pair(op, lambda a, b: (a + b) % MODULUS)

    def mult(self, op: Operation):
        self.arithm_pair(op, lambda a, b: (a * b) % MODULUS)

    def mod(self, op: Operation):
        a, b = self.values(op)

        if b == 0:
            raise DivisionByZero('Modulo by zero')

        self.set_register(op.args[0], a % b)

    def band(self, op: Operation):
        self.arithm_pair(op, lambda a, b: a & b)

    def bor(self, op: Operation):
        self.arithm_pair(op, lambda a, b: a | b)

    def inv(self, op: Operation):
        (a,) = self.values(op)
        self.set_register(op.args[0], (a ^ WORD_MASK) & VALUE_MASK)

    HANDLERS = {
        ops.HALT: hlt,
        ops.SET: assign,
        ops.PUSH: psh,
        ops.POP: pop,
        ops.EQ: eq,
        ops.GT: gt,
        ops.JMP: jmp,
        ops.JT: jt,
        ops.JF: jf,
        ops.ADD: add,
        ops.MULT: mult,
        ops.MOD: mod,
        ops.AND: band,
        ops.OR: bor,
        ops.NOT: inv,
        ops.RMEM: rmem,
        ops.WMEM: wmem,
        ops.CALL: cll,
        ops.RET: ret,
        ops.OUT: out,
        ops.IN: inp,
        ops.NOOP: nop
    }

    # -- Implementation -- #

    def execute(self, op: Operation):
        handler = self.HANDLERS[op.opcode]

        try:
            target = handler(self, op)
        except VMError as e:
            raise e.annotate(op.ip, op.opcode)

        self.ip = op.next_ip if target is None else target
        self.steps += 1

        if self.trace:
            lg.debug(f'{op.ip}: {op}')
            self.debug_dump()

    def exec_next(self):
        op = decode(self.memory, self.ip)
        self.execute(op)
