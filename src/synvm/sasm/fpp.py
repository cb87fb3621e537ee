import logging as lg
from typing import List, Tuple, Dict, Any, cast

from synvm.common.hwconf import WORD_MASK, REGISTER_BASE, MEMORY_SIZE

Tokens = List[Any]


class AsmError(Exception):
    pass


class FPP:
    ''' First pass processor '''
    cmd_list: List[Tuple[str, int | Tuple[int, str]]]
    label_dict: Dict[str, int]

    def __init__(self):
        self.cmd_list = list()
        self.offset = 0  # in words
        self.label_dict = dict()

    # Handlers
    def issue_word(self, word: int):
        if word < 0 or word > WORD_MASK:
            raise AsmError(f'Word {word} does not fit 16 bits')

        if self.offset >= MEMORY_SIZE:
            raise AsmError('Program does not fit into memory')

        self.cmd_list.append(('word', word))
        self.offset += 1

    def issue_op(self, op: int):
        lg.debug(f'Issuing command {op} @ {self.offset}')
        self.issue_word(op)

    def on_literal(self, tokens: Tokens):
        self.issue_word(int(tokens[0]))

    def on_char(self, tokens: Tokens):
        text = tokens[0]

        if len(text) != 1:
            raise AsmError(f'Bad character literal {text!r}')

        self.issue_word(ord(text))

    def on_reg(self, index: int):
        self.issue_word(REGISTER_BASE + index)

    def on_label(self, tokens: Tokens):
        labelname = tokens[0]

        if labelname in self.label_dict:
            raise AsmError(f'Duplicate label {labelname}')

        self.label_dict[labelname] = self.offset
        lg.debug(f'Label {labelname} @ {self.offset}')

    def on_ref(self, tokens: Tokens):
        labelname = tokens[0]
        lg.debug(f'Ref {labelname}')

        self.cmd_list.append(('ref', (self.offset, labelname)))
        self.offset += 1  # placeholder-word

    # DT "<text>"
    def issue_dt(self, tokens: Tokens):
        for c in tokens[0].encode('latin-1'):
            self.issue_word(c)

    def on_fail(self, rest: Tokens):
        raise AsmError(f'Unknown command {rest[0]}')

    def resolve(self) -> List[int]:
        words = []

        for (t, d) in self.cmd_list:
            if t == 'word':
                words.append(cast(int, d))

            if t == 'ref':
                (_, labelname) = cast(Tuple[int, str], d)

                if labelname not in self.label_dict:
                    raise AsmError(f'Undefined label {labelname}')

                words.append(self.label_dict[labelname])

        return words
