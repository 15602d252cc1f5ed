import sys
import time
from collections.abc import Sequence
from typing import TextIO

from suzuka_build.builder import Builder
from suzuka_build.config import BuildConfiguration, BuildTarget, ConfigError

from .types import RunResult, RunState, TargetOutcome


class BuildOrchestrator:
    """Builds targets one at a time, in declared order, stopping at the first failure.

    ``state`` walks NOT_STARTED -> RUNNING -> SUCCEEDED | FAILED during each
    call to :meth:`run`. While RUNNING, ``current_index`` is the position of
    the target being built; after a failure it stays on the failing target
    and ``failed_code`` holds its exit code.
    """

    def __init__(self, builder: Builder, *, out: TextIO | None = None):
        self.builder = builder
        self.out = out
        self.state = RunState.NOT_STARTED
        self.current_index: int | None = None
        self.failed_code: int | None = None

    def run(
        self, targets: Sequence[BuildTarget], config: BuildConfiguration
    ) -> RunResult:
        _validate(targets)

        self.current_index = None
        self.failed_code = None

        outcomes: list[TargetOutcome] = []
        self.state = RunState.RUNNING

        for index, target in enumerate(targets):
            self.current_index = index
            self._emit(f"Building {target.name}...")

            start = time.monotonic()
            try:
                returncode = self.builder.build(target, config)
            except BaseException:
                # The run is over either way; never leave it looking RUNNING
                self.state = RunState.FAILED
                raise
            duration = time.monotonic() - start

            outcomes.append(TargetOutcome(target, returncode, duration))

            if returncode != 0:
                self.state = RunState.FAILED
                self.failed_code = returncode
                return RunResult(tuple(outcomes), returncode)

            self._emit(f"Built {target.name}!")

        self.state = RunState.SUCCEEDED
        return RunResult(tuple(outcomes), 0)

    def _emit(self, line: str) -> None:
        # The builder writes to the same terminal, so flush before handing over
        print(line, file=self.out or sys.stdout, flush=True)


def _validate(targets: Sequence[BuildTarget]) -> None:
    if len(targets) < 1:
        raise ConfigError("There must be at least one target to build")

    seen: set[str] = set()
    for target in targets:
        if target.name in seen:
            raise ConfigError(f"Duplicate target name: {target.name}")
        seen.add(target.name)
