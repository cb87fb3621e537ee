# Basic
HALT = 0    # stop execution
SET = 1     # R1 <- V2
PUSH = 2    # V1 -> stack
POP = 3     # stack -> R1
EQ = 4      # R1 <- V2 == V3
GT = 5      # R1 <- V2 > V3
JMP = 6     # goto V1
JT = 7      # if V1 != 0 goto V2
JF = 8      # if V1 == 0 goto V2

# Arithmetic
ADD = 9     # R1 <- V2 + V3 (mod 32768)
MULT = 10   # R1 <- V2 * V3 (mod 32768)
MOD = 11    # R1 <- V2 % V3
AND = 12    # R1 <- V2 & V3
OR = 13     # R1 <- V2 | V3
NOT = 14    # R1 <- ~V2 (15 bits)

# Memory
RMEM = 15   # R1 <- M[V2]
WMEM = 16   # M[V1] <- V2

# Subroutines
CALL = 17   # push IP + 2; goto V1
RET = 18    # goto [stack]; halt if empty

# I/O
OUT = 19    # write byte V1
IN = 20     # read byte -> R1

NOOP = 21

ARITY = {
    HALT: 0,
    SET: 2,
    PUSH: 1,
    POP: 1,
    EQ: 3,
    GT: 3,
    JMP: 1,
    JT: 2,
    JF: 2,
    ADD: 3,
    MULT: 3,
    MOD: 3,
    AND: 3,
    OR: 3,
    NOT: 2,
    RMEM: 2,
    WMEM: 2,
    CALL: 1,
    RET: 0,
    OUT: 1,
    IN: 1,
    NOOP: 0
}

MNEMONICS = {
    HALT: 'halt',
    SET: 'set',
    PUSH: 'push',
    POP: 'pop',
    EQ: 'eq',
    GT: 'gt',
    JMP: 'jmp',
    JT: 'jt',
    JF: 'jf',
    ADD: 'add',
    MULT: 'mult',
    MOD: 'mod',
    AND: 'and',
    OR: 'or',
    NOT: 'not',
    RMEM: 'rmem',
    WMEM: 'wmem',
    CALL: 'call',
    RET: 'ret',
    OUT: 'out',
    IN: 'in',
    NOOP: 'noop'
}

OPCODES = {mnemonic: op for op, mnemonic in MNEMONICS.items()}
