import logging
from typing import List, Optional

from clipany.clipboard.base import ClipboardManager
from clipany.config import ClipboardConfig
from clipany.exceptions import PipeCloseError
from clipany.models import Capability, ClipboardManagerName, Operation
from clipany.utils.process import ProcessRunner, chomp

logger = logging.getLogger(__name__)

PRIMARY = "primary"
CLIPBOARD = "clipboard"

# xclip keeps no history; the two X selections stand in for history slots.
HISTORY_SELECTIONS = (PRIMARY, CLIPBOARD)


class XclipManager(ClipboardManager):
    name = ClipboardManagerName.XCLIP
    capabilities = {operation: Capability.SUPPORTED for operation in Operation}

    @classmethod
    def probe(cls, runner: ProcessRunner, config: ClipboardConfig) -> bool:
        logger.debug("Checking whether xclip is available ...")
        return runner.which("xclip") is not None

    def _read(self, selection: str, operation: Operation, index: Optional[int] = None) -> str:
        result = self.runner.run(["xclip", "-o", "-selection", selection])
        argument = f" ({index})" if index is not None else ""
        return chomp(self._check(
            result,
            f"{operation.description}{argument}: xclip -o -selection {selection} failed"))

    def _write(self, selection: str, content: str, operation: Operation) -> None:
        command = ["xclip", "-i", "-selection", selection]
        try:
            self.runner.write(command, content)
        except PipeCloseError as e:
            raise PipeCloseError(
                command, e.exit_code, e.stderr,
                message=(f"{operation.description} ({len(content)} chars): "
                         f"can't close pipe to {' '.join(command)}"),
            ) from e

    def get_content(self) -> str:
        return self._read(PRIMARY, Operation.GET_CONTENT)

    def add_content(self, content: str) -> None:
        self._write(PRIMARY, content, Operation.ADD_CONTENT)

    def clear_content(self) -> None:
        self._write(PRIMARY, "", Operation.CLEAR_CONTENT)

    def clear_history(self) -> None:
        for selection in HISTORY_SELECTIONS:
            self._write(selection, "", Operation.CLEAR_HISTORY)

    def list_history(self) -> List[str]:
        return [self._read(selection, Operation.LIST_HISTORY, index)
                for index, selection in enumerate(HISTORY_SELECTIONS)]

    def get_history_item(self, index: int) -> Optional[str]:
        if index >= len(HISTORY_SELECTIONS):
            return None
        return self._read(HISTORY_SELECTIONS[index], Operation.GET_HISTORY_ITEM, index)
