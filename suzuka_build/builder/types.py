from typing import Protocol

from suzuka_build.config import BuildConfiguration, BuildTarget


class Builder(Protocol):
    def build(self, target: BuildTarget, config: BuildConfiguration) -> int:
        """Build one target, blocking until done. Returns the tool's exit code."""
        ...


class BuilderError(Exception):
    def __init__(self, *args: object) -> None:
        super().__init__(*args)


class BuilderUnavailableError(BuilderError):
    def __init__(self, executable: str):
        super().__init__(f"Build tool not found: {executable}")
        self.executable = executable
