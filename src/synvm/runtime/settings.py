from pathlib import Path


class RunSettings:
    verbose: bool
    trace: bool
    input_path: Path | None

    def __init__(self):
        self.verbose = False
        self.trace = False
        self.input_path = None

    def update(
        self,
        verbose: bool | None = None,
        trace: bool | None = None,
        input_path: Path | None = None
    ):
        if verbose is not None:
            self.verbose = verbose

        if trace is not None:
            self.trace = trace

        if input_path is not None:
            self.input_path = input_path

        return self
