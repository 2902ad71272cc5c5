import logging
import shutil
import subprocess
from dataclasses import dataclass
from typing import List, Optional, Sequence, Tuple

import psutil

from clipany.exceptions import PipeCloseError

logger = logging.getLogger(__name__)

# Exit code reported when a command could not be launched or timed out.
LAUNCH_FAILED = -1


@dataclass(frozen=True)
class CommandResult:
    args: Tuple[str, ...]
    returncode: int
    stdout: str = ""
    stderr: str = ""

    @property
    def ok(self) -> bool:
        return self.returncode == 0


def chomp(text: str) -> str:
    """Remove a single trailing line terminator."""
    if text.endswith("\r\n"):
        return text[:-2]
    if text.endswith("\n"):
        return text[:-1]
    return text


class ProcessRunner:
    """Every external call made by the clipboard backends goes through here.

    Tests substitute an object with the same four methods.
    """

    def __init__(self, timeout: Optional[float] = None):
        self.timeout = timeout

    def which(self, name: str) -> Optional[str]:
        return shutil.which(name)

    def run(self, command: Sequence[str]) -> CommandResult:
        args = tuple(str(part) for part in command)
        logger.debug(f"Running {' '.join(args)}")
        try:
            result = subprocess.run(
                args,
                stdout=subprocess.PIPE,
                stderr=subprocess.PIPE,
                stdin=subprocess.DEVNULL,
                timeout=self.timeout,
            )
        except subprocess.TimeoutExpired:
            logger.warning(f"{args[0]} timed out after {self.timeout}s")
            return CommandResult(args, LAUNCH_FAILED, "", "timed out")
        except (OSError, ValueError) as e:
            logger.warning(f"Could not run {args[0]}: {e}")
            return CommandResult(args, LAUNCH_FAILED, "", str(e))

        return CommandResult(
            args,
            result.returncode,
            result.stdout.decode("utf-8", errors="replace"),
            result.stderr.decode("utf-8", errors="replace"),
        )

    def write(self, command: Sequence[str], data: str) -> None:
        """Feed ``data`` to ``command`` through a stdin pipe.

        Raises ``PipeCloseError`` when the command cannot be started or
        does not exit 0 once the pipe is closed.
        """
        args = tuple(str(part) for part in command)
        logger.debug(f"Piping {len(data)} chars into {' '.join(args)}")
        try:
            payload = data.encode("utf-8")
        except UnicodeEncodeError as e:
            logger.warning(f"Cannot encode input for {args[0]}: {e}")
            raise PipeCloseError(args, LAUNCH_FAILED, str(e)) from e

        try:
            # xclip forks a child that keeps serving the selection, so its
            # output streams must not be pipes we wait on.
            process = subprocess.Popen(
                args,
                stdin=subprocess.PIPE,
                stdout=subprocess.DEVNULL,
                stderr=subprocess.DEVNULL,
                close_fds=True,
            )
        except (OSError, ValueError) as e:
            logger.warning(f"Could not run {args[0]}: {e}")
            raise PipeCloseError(args, LAUNCH_FAILED, str(e)) from e

        try:
            process.communicate(payload, timeout=self.timeout)
        except subprocess.TimeoutExpired as e:
            process.kill()
            process.communicate()
            logger.warning(f"{args[0]} timed out after {self.timeout}s")
            raise PipeCloseError(args, LAUNCH_FAILED, "timed out") from e

        if process.returncode != 0:
            raise PipeCloseError(args, process.returncode)

    def find_processes(self, name: str) -> List[int]:
        pids: List[int] = []
        for proc in psutil.process_iter(["pid", "name"]):
            try:
                if proc.info["name"] == name:
                    pids.append(proc.info["pid"])
            except (psutil.NoSuchProcess, psutil.AccessDenied):
                continue
        return pids
