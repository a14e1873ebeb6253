"""Root conftest.py for test configuration.

Ensures local src/ directory takes priority over any installed packages, and
provides fake CppUTest executables for tests that spawn processes.
"""

import stat
import sys
from collections.abc import Callable
from dataclasses import dataclass
from pathlib import Path

import pytest

# Insert local src directory at the beginning of sys.path
# This ensures that the local testbridge package is used, not any installed one
_src_dir = Path(__file__).parent.parent / "src"
if str(_src_dir) not in sys.path:
    sys.path.insert(0, str(_src_dir))

# Force reimport of testbridge modules if already imported
for module_name in list(sys.modules.keys()):
    if module_name.startswith("testbridge"):
        del sys.modules[module_name]


# =============================================================================
# Fake Test Executables
# =============================================================================
# Python scripts with a shebang that speak the CppUTest command line:
#   -ln      prints LISTING on stdout
#   -ojunit  writes REPORTS into the working directory, then sleeps
# Every invocation appends its arguments to an invocation log.

_FAKE_TEMPLATE = """#!{python}
# {marker}
import sys
import time

LISTING = {listing!r}
REPORTS = {reports!r}
SLEEP = {sleep!r}
EXIT_CODE = {exit_code!r}
INVOCATIONS = {invocations!r}
READY = {ready!r}

with open(INVOCATIONS, "a") as log:
    log.write(" ".join(sys.argv[1:]) + "\\n")

args = sys.argv[1:]
if args == ["-ln"]:
    sys.stdout.write(LISTING)
    sys.stdout.flush()
    time.sleep(SLEEP)
    sys.exit(0)
if args == ["-ojunit"]:
    for name, content in REPORTS.items():
        with open(name, "w") as report:
            report.write(content)
    with open(READY, "w") as ready:
        ready.write("ready")
    time.sleep(SLEEP)
    sys.exit(EXIT_CODE)
sys.exit(2)
"""

SIGNATURE_TEXT = "Thanks for using CppUTest."


@dataclass
class FakeExecutable:
    """A generated fake test executable and its side-channel files."""

    path: Path
    invocations_path: Path
    ready_path: Path

    @property
    def source(self) -> str:
        return str(self.path)

    @property
    def invocations(self) -> list[str]:
        if not self.invocations_path.exists():
            return []
        return self.invocations_path.read_text().splitlines()


MakeExecutable = Callable[..., FakeExecutable]


@pytest.fixture
def make_executable(tmp_path: Path) -> MakeExecutable:
    """Factory for fake CppUTest executables."""
    if sys.platform == "win32":
        pytest.skip("fake executables rely on a shebang line")

    def _make(
        name: str = "NativeTestExe",
        *,
        listing: str = "",
        reports: dict[str, str] | None = None,
        sleep: float = 0.0,
        exit_code: int = 0,
        compatible: bool = True,
    ) -> FakeExecutable:
        bin_dir = tmp_path / "bin"
        bin_dir.mkdir(exist_ok=True)
        path = bin_dir / name
        invocations_path = bin_dir / f"{name}.invocations"
        ready_path = bin_dir / f"{name}.ready"
        path.write_text(
            _FAKE_TEMPLATE.format(
                python=sys.executable,
                marker=SIGNATURE_TEXT if compatible else "plain script",
                listing=listing,
                reports=reports or {},
                sleep=sleep,
                exit_code=exit_code,
                invocations=str(invocations_path),
                ready=str(ready_path),
            )
        )
        path.chmod(path.stat().st_mode | stat.S_IXUSR | stat.S_IXGRP | stat.S_IXOTH)
        return FakeExecutable(path=path, invocations_path=invocations_path, ready_path=ready_path)

    return _make
