import logging

from clipany.clipboard.base import ClipboardManager
from clipany.config import ClipboardConfig
from clipany.models import Capability, ClipboardManagerName, Operation
from clipany.utils.process import ProcessRunner, chomp

logger = logging.getLogger(__name__)


class _DaemonClipboardManager(ClipboardManager):
    """Managers that run as a daemon and print the clipboard with ``-c``.

    Only reading is wired up; the rest is declared not implemented.
    """

    executable: str = ""
    capabilities = {
        operation: Capability.NOT_IMPLEMENTED for operation in Operation
    }
    capabilities[Operation.GET_CONTENT] = Capability.SUPPORTED

    @classmethod
    def probe(cls, runner: ProcessRunner, config: ClipboardConfig) -> bool:
        logger.debug(f"Checking whether clipboard manager {cls.executable} is running ...")
        pids = runner.find_processes(cls.executable)
        if not pids:
            return False
        logger.debug(f"Concluding {cls.executable} is active (pid {pids[0]})")
        return True

    def get_content(self) -> str:
        result = self.runner.run([self.executable, "-c"])
        return chomp(self._check(
            result, f"{Operation.GET_CONTENT.description}: {self.executable} -c failed"))


class ParcelliteManager(_DaemonClipboardManager):
    name = ClipboardManagerName.PARCELLITE
    executable = "parcellite"


class ClipitManager(_DaemonClipboardManager):
    name = ClipboardManagerName.CLIPIT
    executable = "clipit"
