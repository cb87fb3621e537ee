import sys
from pathlib import Path
import logging as lg
import traceback
from dataclasses import dataclass
from typing import Iterable, TypeAlias

import click

from synvm.runtime.memory import Memory
from synvm.runtime.loader import load_image
from synvm.runtime.settings import RunSettings
from synvm.runtime.streams import ByteInput, ByteOutput, StreamInput
from synvm.runtime.errors import VMError, LoadError
import synvm.runtime.cpu as cpu


EXIT_HALT = 0
EXIT_LOAD_FAIL = 2
EXIT_KEYBOARD = 3
EXIT_ABORT = 100


@dataclass(frozen=True)
class Halted:
    ip: int
    steps: int


@dataclass(frozen=True)
class Aborted:
    error: VMError
    steps: int


RunResult: TypeAlias = Halted | Aborted


def execute(
    words: Iterable[int],
    stdin: ByteInput | None = None,
    stdout: ByteOutput | None = None,
    settings: RunSettings | None = None
) -> RunResult:
    if settings is None:
        settings = RunSettings()

    memory = Memory()
    proc = cpu.CPU(memory, stdin, stdout, trace=settings.trace)

    try:
        loaded = memory.load(words)
        lg.debug(f'Program of {loaded} words loaded')

        while not proc.halted:
            proc.exec_next()

    except VMError as e:
        lg.error(f'Execution aborted: {e}')
        proc.debug_dump()
        return Aborted(e, proc.steps)

    lg.info(f'Execution halted gracefully after {proc.steps} steps')
    return Halted(proc.ip, proc.steps)


def execute_file(
    path: str | Path,
    stdin: ByteInput | None = None,
    stdout: ByteOutput | None = None,
    settings: RunSettings | None = None
) -> RunResult:
    try:
        words = load_image(path)
    except LoadError as e:
        lg.error(f'Unable to load program: {e}')
        return Aborted(e, 0)

    return execute(words, stdin, stdout, settings)


def exit_code(result: RunResult) -> int:
    if isinstance(result, Halted):
        return EXIT_HALT

    if isinstance(result.error, LoadError):
        return EXIT_LOAD_FAIL

    return EXIT_ABORT


@click.command()
@click.option('-v', '--verbose', is_flag=True, help='Sets logging level to debug')
@click.option('--trace', is_flag=True, help='Dump machine state after every instruction')
@click.option(
    '-i', '--input', 'input_path',
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    help='Read program input from a file instead of stdin'
)
@click.argument('rom_filename', type=Path)
def run(verbose: bool, trace: bool, input_path: Path | None, rom_filename: Path):
    settings = RunSettings().update(verbose=verbose, trace=trace, input_path=input_path)

    lg.basicConfig(level=lg.DEBUG if settings.verbose or settings.trace else lg.INFO)
    lg.info('SYNVM')

    try:
        if settings.input_path is not None:
            with settings.input_path.open('rb') as stream:
                result = execute_file(rom_filename, StreamInput(stream), settings=settings)
        else:
            result = execute_file(rom_filename, settings=settings)

    except KeyboardInterrupt:
        lg.info('Execution halted by the user')
        return sys.exit(EXIT_KEYBOARD)

    except Exception as e:
        lg.info(f'Execution halted on general error {e}')
        traceback.print_exc()
        return sys.exit(EXIT_ABORT)

    sys.exit(exit_code(result))


if __name__ == '__main__':
    run()
