import sys
from pathlib import Path
from typing import Dict, Iterable, List, Optional, Sequence, Tuple

import pytest

# Make src importable without an editable install
REPO_ROOT = Path(__file__).resolve().parent.parent
SRC = REPO_ROOT / "src"
sys.path.insert(0, str(SRC))

from clipany.exceptions import PipeCloseError  # noqa: E402
from clipany.services.clipboard_service import ClipboardService  # noqa: E402
from clipany.utils.process import CommandResult  # noqa: E402

KLIPPER = ("qdbus", "org.kde.klipper", "/klipper")


def klipper(*args: str) -> Tuple[str, ...]:
    return KLIPPER + tuple(args)


class FakeRunner:
    """Stands in for ProcessRunner: scripted results, every call recorded."""

    def __init__(
        self,
        paths: Iterable[str] = (),
        processes: Optional[Dict[str, List[int]]] = None,
    ) -> None:
        self.paths = set(paths)
        self.processes = processes or {}
        self.results: Dict[Tuple[str, ...], CommandResult] = {}
        self.write_failures: Dict[Tuple[str, ...], int] = {}
        self.calls: List[tuple] = []

    def script(self, command: Sequence[str], stdout: str = "", returncode: int = 0,
               stderr: str = "") -> None:
        args = tuple(command)
        self.results[args] = CommandResult(args, returncode, stdout, stderr)

    def fail_write(self, command: Sequence[str], returncode: int) -> None:
        self.write_failures[tuple(command)] = returncode

    def which(self, name: str) -> Optional[str]:
        self.calls.append(("which", name))
        return f"/usr/bin/{name}" if name in self.paths else None

    def run(self, command: Sequence[str]) -> CommandResult:
        args = tuple(command)
        self.calls.append(("run", args))
        return self.results.get(args, CommandResult(args, 0, ""))

    def write(self, command: Sequence[str], data: str) -> None:
        args = tuple(command)
        self.calls.append(("write", args, data))
        if args in self.write_failures:
            raise PipeCloseError(args, self.write_failures[args])

    def find_processes(self, name: str) -> List[int]:
        self.calls.append(("find_processes", name))
        return list(self.processes.get(name, []))

    def commands(self, kind: str = "run") -> List[tuple]:
        return [call[1:] if kind == "write" else call[1]
                for call in self.calls if call[0] == kind]


@pytest.fixture
def runner() -> FakeRunner:
    return FakeRunner()


@pytest.fixture
def service(runner: FakeRunner) -> ClipboardService:
    return ClipboardService(runner=runner)
