import logging as lg

from synvm.runtime.loader import pack_image
from synvm.sasm.fpp import FPP
import synvm.sasm.grammar as grammar


class CompilationItem:
    modulename: str
    contents: str

    def __init__(self, modulename: str = '<source>', contents: str = ''):
        self.modulename = modulename
        self.contents = contents


def compile_words(compile_items: list[CompilationItem]) -> list[int]:
    # First pass
    first_pass = FPP()

    for compile_item in compile_items:
        lg.info(f'Processing {compile_item.modulename}')
        actions = grammar.program.parse_string(compile_item.contents, parse_all=True)

        for (func, arg) in actions:  # type: ignore
            func(first_pass, arg)

    # Second pass
    words = first_pass.resolve()
    lg.debug(f'Assembled {len(words)} words')
    return words


def compile_source(contents: str) -> list[int]:
    return compile_words([CompilationItem(contents=contents)])


def compile_items(compile_items: list[CompilationItem]) -> bytes:
    return pack_image(compile_words(compile_items))
