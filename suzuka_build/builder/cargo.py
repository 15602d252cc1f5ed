import subprocess

from suzuka_build.config import BuildConfiguration, BuildTarget

from .types import BuilderUnavailableError


class CargoBuilder:
    def command(self, target: BuildTarget, config: BuildConfiguration) -> list[str]:
        return [
            config.cargo,
            "build",
            *config.profile_args(),
            *target.selector.args(),
        ]

    def build(self, target: BuildTarget, config: BuildConfiguration) -> int:
        argv = self.command(target, config)
        # Output is not captured: cargo's diagnostics go straight to the terminal
        try:
            result = subprocess.run(argv, cwd=config.working_dir or None)
        except FileNotFoundError as exc:
            raise BuilderUnavailableError(config.cargo) from exc

        return _exit_status(result.returncode)


def _exit_status(returncode: int) -> int:
    # subprocess reports death by signal N as -N; a shell reports 128 + N
    if returncode < 0:
        return 128 - returncode
    return returncode
