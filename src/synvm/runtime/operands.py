''' Operand addressing modes '''

from dataclasses import dataclass
from typing import TypeAlias

from synvm.common.hwconf import REGISTER_BASE, INVALID_OPERAND_BASE
from synvm.runtime.errors import OperandError


@dataclass(frozen=True)
class Literal:
    value: int

    def __str__(self) -> str:
        return str(self.value)


@dataclass(frozen=True)
class Register:
    index: int

    def __str__(self) -> str:
        return f'r{self.index}'


Operand: TypeAlias = Literal | Register


def classify(raw: int) -> Operand:
    if raw < 0 or raw >= INVALID_OPERAND_BASE:
        raise OperandError('Invalid operand encoding', operand=raw)

    if raw >= REGISTER_BASE:
        return Register(raw - REGISTER_BASE)

    return Literal(raw)
