# tests/conftest.py
from __future__ import annotations

import os
import stat
import sys
from dataclasses import dataclass
from pathlib import Path

import pytest

_FAKE_CARGO = """\
#!{exe}
import os
import signal
import sys

args = sys.argv[1:]
with open(os.environ["FAKE_CARGO_LOG"], "a", encoding="utf-8") as fh:
    fh.write(" ".join(args) + "\\n")

cwd_log = os.environ.get("FAKE_CARGO_CWD_LOG")
if cwd_log:
    with open(cwd_log, "a", encoding="utf-8") as fh:
        fh.write(os.getcwd() + "\\n")

kill_on = os.environ.get("FAKE_CARGO_KILL_ON")
if kill_on and " ".join(args[-2:]) == kill_on:
    os.kill(os.getpid(), signal.SIGKILL)

fail_on = os.environ.get("FAKE_CARGO_FAIL_ON")
if fail_on and " ".join(args[-2:]) == fail_on:
    raise SystemExit(int(os.environ.get("FAKE_CARGO_FAIL_CODE", "1")))
"""


@dataclass
class FakeCargo:
    path: Path
    log: Path

    def calls(self) -> list[str]:
        if not self.log.exists():
            return []
        return self.log.read_text(encoding="utf-8").splitlines()


@pytest.fixture
def fake_cargo(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> FakeCargo:
    """
    An executable standing in for cargo. It appends its arguments to a log
    file, and exits with FAKE_CARGO_FAIL_CODE when its trailing selector
    arguments equal FAKE_CARGO_FAIL_ON. Matching FAKE_CARGO_KILL_ON makes it
    die from SIGKILL instead.
    """
    if os.name != "posix":
        pytest.skip("fake cargo relies on a shebang script")

    script = tmp_path / "cargo"
    script.write_text(_FAKE_CARGO.format(exe=sys.executable), encoding="utf-8")
    script.chmod(script.stat().st_mode | stat.S_IXUSR)

    log = tmp_path / "cargo.log"
    monkeypatch.setenv("FAKE_CARGO_LOG", str(log))
    monkeypatch.delenv("FAKE_CARGO_FAIL_ON", raising=False)
    monkeypatch.delenv("FAKE_CARGO_FAIL_CODE", raising=False)
    monkeypatch.delenv("FAKE_CARGO_KILL_ON", raising=False)
    monkeypatch.delenv("FAKE_CARGO_CWD_LOG", raising=False)

    return FakeCargo(script, log)
