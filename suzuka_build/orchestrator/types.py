from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto

from suzuka_build.config import BuildTarget


class RunState(Enum):
    NOT_STARTED = auto()
    RUNNING = auto()
    SUCCEEDED = auto()
    FAILED = auto()


class BuildInvocationFailed(Exception):
    def __init__(self, target: BuildTarget, code: int):
        super().__init__(f"Build of '{target.name}' failed with exit code {code}")
        self.target = target
        self.code = code


@dataclass(frozen=True)
class TargetOutcome:
    target: BuildTarget
    returncode: int
    duration_s: float

    @property
    def ok(self) -> bool:
        return self.returncode == 0


@dataclass(frozen=True)
class RunResult:
    outcomes: tuple[TargetOutcome, ...]
    exit_code: int

    @property
    def succeeded(self) -> bool:
        return self.exit_code == 0

    @property
    def attempted(self) -> list[str]:
        return [outcome.target.name for outcome in self.outcomes]

    @property
    def failure(self) -> BuildInvocationFailed | None:
        for outcome in self.outcomes:
            if not outcome.ok:
                return BuildInvocationFailed(outcome.target, outcome.returncode)
        return None

    def raise_for_status(self) -> None:
        failure = self.failure
        if failure is not None:
            raise failure
