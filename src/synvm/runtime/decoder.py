from dataclasses import dataclass

import synvm.common.ops as ops
from synvm.common.hwconf import MEMORY_SIZE
from synvm.runtime.memory import Memory
from synvm.runtime.errors import InvalidOpcode


@dataclass(frozen=True)
class Operation:
    ip: int
    opcode: int
    args: tuple[int, ...]  # Raw operand words, not yet resolved

    @property
    def size(self) -> int:
        return 1 + len(self.args)

    @property
    def next_ip(self) -> int:
        return self.ip + self.size

    @property
    def mnemonic(self) -> str:
        return ops.MNEMONICS[self.opcode]

    def __str__(self) -> str:
        return ' '.join([self.mnemonic] + [str(a) for a in self.args])


def decode(memory: Memory, ip: int) -> Operation:
    if ip < 0 or ip >= MEMORY_SIZE:
        raise InvalidOpcode('Instruction pointer out of memory', ip=ip)

    opcode = memory.read(ip)
    arity = ops.ARITY.get(opcode)

    if arity is None:
        raise InvalidOpcode('Unknown opcode', ip=ip, opcode=opcode)

    if ip + arity >= MEMORY_SIZE:
        raise InvalidOpcode('Instruction runs past the end of memory', ip=ip, opcode=opcode)

    args = tuple(memory.read(ip + 1 + i) for i in range(arity))
    return Operation(ip, opcode, args)
