# Memory
MEMORY_SIZE = 32768         # 15-bit address space, in words
WORD_SIZE = 2               # bytes per word in a program image
WORD_FORMAT = '<H'          # little-endian unsigned 16-bit

# Registers
REGISTER_BASE = 32768       # raw operand of r0
REGISTER_COUNT = 8
INVALID_OPERAND_BASE = REGISTER_BASE + REGISTER_COUNT

# Arithmetic
MODULUS = 32768
VALUE_MASK = 0x7FFF
WORD_MASK = 0xFFFF
BYTE_MASK = 0xFF
