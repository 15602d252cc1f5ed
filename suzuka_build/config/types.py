import shlex
from dataclasses import dataclass
from enum import Enum


class SelectorKind(str, Enum):
    BIN = "bin"
    PACKAGE = "package"


@dataclass(frozen=True)
class Selector:
    kind: SelectorKind
    value: str

    def args(self) -> list[str]:
        match self.kind:
            case SelectorKind.BIN:
                return ["--bin", self.value]
            case SelectorKind.PACKAGE:
                return ["-p", self.value]
            case _:
                raise AssertionError("Unreachable")


@dataclass(frozen=True)
class BuildTarget:
    name: str
    selector: Selector
    ordinal: int


@dataclass(frozen=True)
class BuildConfiguration:
    profile_flags: str = ""
    cargo: str = "cargo"
    working_dir: str | None = None

    def profile_args(self) -> list[str]:
        # Word-split like an unquoted $CARGO_PROFILE_FLAGS in a shell
        try:
            return shlex.split(self.profile_flags)
        except ValueError as exc:
            raise ConfigError(
                f"Invalid profile flags {self.profile_flags!r}: {exc}"
            ) from exc


class ConfigError(Exception):
    def __init__(self, *args: object) -> None:
        super().__init__(*args)


class UnsupportedConfigFormatError(ConfigError):
    def __init__(self, *args: object) -> None:
        super().__init__(*args)
