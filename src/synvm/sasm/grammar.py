''' Assembler grammar '''

import pyparsing as pp

import synvm.common.ops as ops
from synvm.sasm.fpp import FPP


def g_cmd(mnemonic: str, op: int):
    return pp.Keyword(mnemonic).set_parse_action(lambda _: (FPP.issue_op, op))


id = pp.Word(pp.alphas + '_', pp.alphanums + '_')
comment = pp.Suppress(pp.Regex(r'//.*'))

label = (id + pp.Suppress(':')).set_parse_action(lambda r: (FPP.on_label, r))

reg_op = pp.Regex(r'r[0-7]\b').set_parse_action(lambda r: (FPP.on_reg, int(r[0][1])))
us_const = pp.Regex('[0-9]+').set_parse_action(lambda r: (FPP.on_literal, r))
char_const = pp.QuotedString("'", esc_char='\\').set_parse_action(lambda r: (FPP.on_char, r))
ref = (pp.Suppress('&') + id).set_parse_action(lambda r: (FPP.on_ref, r))

value = reg_op | ref | char_const | us_const


def g_instr(op: int):
    cmd = g_cmd(ops.MNEMONICS[op], op)

    for _ in range(ops.ARITY[op]):
        cmd = cmd + value

    return cmd


asm_cmd = pp.Or([g_instr(op) for op in ops.MNEMONICS])

# Data
dw = pp.Suppress(pp.Keyword('dw')) + pp.OneOrMore(value)
text = pp.QuotedString('"', esc_char='\\')
dt = (pp.Suppress(pp.Keyword('dt')) + text).set_parse_action(lambda r: (FPP.issue_dt, r))

# Fail on unknown command, up to the last non-blank character of the line
unknown = pp.Regex(r'[^\n]*\S').set_parse_action(lambda r: (FPP.on_fail, r))

cmd = asm_cmd \
    ^ dw \
    ^ dt

statement = pp.Optional(label) + cmd + pp.Optional(comment)
program = pp.ZeroOrMore(statement ^ comment ^ label ^ unknown)
