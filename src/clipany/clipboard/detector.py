import logging
from typing import Optional, Sequence

from clipany.clipboard.factory import get_manager_class
from clipany.config import ClipboardConfig
from clipany.models import ClipboardManagerName
from clipany.utils.process import ProcessRunner

logger = logging.getLogger(__name__)

# Managers are assumed mutually exclusive on a desktop; the most specific
# probe goes first.
DETECTION_ORDER = (
    ClipboardManagerName.KLIPPER,
    ClipboardManagerName.PARCELLITE,
    ClipboardManagerName.CLIPIT,
    ClipboardManagerName.XCLIP,
)


def detect_clipboard_manager(
    runner: Optional[ProcessRunner] = None,
    order: Sequence[ClipboardManagerName] = DETECTION_ORDER,
    config: Optional[ClipboardConfig] = None,
) -> Optional[ClipboardManagerName]:
    """Return the first manager in ``order`` whose probe succeeds, else None.

    A probe that errors counts as not matching.
    """
    runner = runner or ProcessRunner()
    config = config or ClipboardConfig()

    for name in order:
        try:
            matched = get_manager_class(name).probe(runner, config)
        except Exception as e:
            logger.debug(f"Probe for {name.value} failed: {e}")
            matched = False
        if matched:
            logger.debug(f"Detected clipboard manager {name.value}")
            return name

    logger.debug("No known clipboard manager is detected")
    return None
