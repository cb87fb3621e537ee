# Emulated word memory

from typing import Iterable

from synvm.common.hwconf import MEMORY_SIZE, WORD_MASK
from synvm.runtime.errors import MemoryAccessError, LoadError


class Memory:
    words: list[int]

    def __init__(self):
        self.words = [0] * MEMORY_SIZE

    def __len__(self) -> int:
        return len(self.words)

    def check(self, addr: int):
        if addr < 0 or addr >= MEMORY_SIZE:
            raise MemoryAccessError('Address out of range', operand=addr)

    def read(self, addr: int) -> int:
        self.check(addr)
        return self.words[addr]

    def write(self, addr: int, value: int):
        self.check(addr)
        self.words[addr] = value & WORD_MASK

    def load(self, words: Iterable[int]):
        count = 0

        for addr, word in enumerate(words):
            if addr >= MEMORY_SIZE:
                raise LoadError(f'Program does not fit into {MEMORY_SIZE} words')

            self.words[addr] = word & WORD_MASK
            count += 1

        return count
