import logging
from typing import List

from clipany.clipboard.base import ClipboardManager
from clipany.config import ClipboardConfig
from clipany.models import Capability, ClipboardManagerName, Operation
from clipany.utils.process import ProcessRunner, chomp

logger = logging.getLogger(__name__)

KLIPPER_SERVICE = "org.kde.klipper"
KLIPPER_OBJECT = "/klipper"


class KlipperManager(ClipboardManager):
    """KDE Plasma's Klipper, driven over D-Bus with ``qdbus``.

    Klipper only exposes text items: non-text entries are skipped by
    ``getClipboardContents`` and come back empty from
    ``getClipboardHistoryItem``.
    """

    name = ClipboardManagerName.KLIPPER
    capabilities = {operation: Capability.SUPPORTED for operation in Operation}

    @classmethod
    def probe(cls, runner: ProcessRunner, config: ClipboardConfig) -> bool:
        logger.debug("Checking whether clipboard manager klipper is running ...")
        if not runner.which(config.qdbus):
            logger.debug(f"{config.qdbus} not found in PATH, system is probably not using klipper")
            return False

        # The /klipper object disappears when klipper is disabled in the
        # system tray settings, so having qdbus around is not enough.
        result = runner.run([config.qdbus, KLIPPER_SERVICE, KLIPPER_OBJECT])
        if not result.ok:
            logger.debug(
                f"Failed listing {KLIPPER_SERVICE} {KLIPPER_OBJECT} methods, "
                "system is probably not using klipper")
            return False

        logger.debug("Concluding klipper is active")
        return True

    def _call(self, method: str, *args: str, label: str = "") -> str:
        result = self.runner.run(
            [self.config.qdbus, KLIPPER_SERVICE, KLIPPER_OBJECT, method, *args])
        return self._check(result, f"{KLIPPER_OBJECT}'s {label or method} failed")

    def get_content(self) -> str:
        return chomp(self._call("getClipboardContents"))

    def add_content(self, content: str) -> None:
        self._call("setClipboardContents", content,
                   label=f"setClipboardContents({len(content)} chars)")

    def clear_content(self) -> None:
        self._call("clearClipboardContents")

    def clear_history(self) -> None:
        self._call("clearClipboardHistory")

    def get_history_item(self, index: int) -> str:
        return chomp(self._call("getClipboardHistoryItem", str(index),
                                label=f"getClipboardHistoryItem({index})"))

    def list_history(self) -> List[str]:
        # Klipper has no call for the history length. Fetch items one by one
        # and treat two consecutive empty strings as the end of the history.
        rows: List[str] = []
        index = 0
        previous_empty = False
        while True:
            item = self.get_history_item(index)
            if item == "":
                logger.debug(f"Got empty result at index {index}")
                if previous_empty:
                    break
                previous_empty = True
            else:
                logger.debug(f"Got result {item!r} at index {index}")
                previous_empty = False
            rows.append(item)
            index += 1

        # index 0 and 1 both empty: klipper has nothing stored
        if rows == [""]:
            return []
        return rows
