from pathlib import Path
import logging as lg
from typing import Tuple

import click

from synvm.sasm.asm import CompilationItem, compile_items


def collect_file(filepath: str | Path) -> CompilationItem:
    if isinstance(filepath, str):
        filepath = Path(filepath)

    lg.debug(f'Collecting file {filepath}')
    return CompilationItem(filepath.stem, filepath.read_text())


def collect_files(filepaths: list[Path]) -> list[CompilationItem]:
    return [collect_file(path) for path in filepaths]


def compile_files(filepaths: list[Path]) -> bytes:
    return compile_items(collect_files(filepaths))


@click.command()
@click.option('-v', '--verbose', is_flag=True, help='Sets logging level to debug')
@click.argument('sources', nargs=-1, required=True, type=Path)
@click.argument('binary', type=Path)
def compile(verbose: bool, sources: Tuple[Path], binary: Path):
    lg.basicConfig(level=lg.DEBUG if verbose else lg.INFO)
    lg.info('SYNVM ASM')

    bytestr = compile_files(list(sources))
    binary.parent.mkdir(parents=True, exist_ok=True)
    binary.write_bytes(bytestr)


if __name__ == '__main__':
    compile()
