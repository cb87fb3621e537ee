''' Fatal machine conditions '''

from synvm.common.ops import MNEMONICS


class VMError(Exception):
    ip: int | None
    opcode: int | None
    operand: int | None

    def __init__(
        self, message: str,
        ip: int | None = None,
        opcode: int | None = None,
        operand: int | None = None
    ):
        super().__init__(message)
        self.message = message
        self.ip = ip
        self.opcode = opcode
        self.operand = operand

    def annotate(self, ip: int, opcode: int):
        if self.ip is None:
            self.ip = ip

        if self.opcode is None:
            self.opcode = opcode

        return self

    def __str__(self) -> str:
        context = []

        if self.ip is not None:
            context.append(f'ip={self.ip}')

        if self.opcode is not None:
            name = MNEMONICS.get(self.opcode, '?')
            context.append(f'opcode={self.opcode}({name})')

        if self.operand is not None:
            context.append(f'operand={self.operand}')

        if not context:
            return self.message

        return f'{self.message} [{" ".join(context)}]'


class LoadError(VMError):
    pass


class InvalidOpcode(VMError):
    pass


class OperandError(VMError):
    pass


class DestinationError(VMError):
    pass


class StackUnderflow(VMError):
    pass


class DivisionByZero(VMError):
    pass


class InputExhausted(VMError):
    pass


class MemoryAccessError(VMError):
    pass
