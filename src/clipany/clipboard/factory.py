"""
Clipboard-manager backend registry.

Maps each known manager name to the class implementing it.
"""

from typing import Dict, Optional, Type

from clipany.clipboard.base import ClipboardManager
from clipany.clipboard.klipper import KlipperManager
from clipany.clipboard.parcellite import ClipitManager, ParcelliteManager
from clipany.clipboard.xclip import XclipManager
from clipany.config import ClipboardConfig
from clipany.models import ClipboardManagerName
from clipany.utils.process import ProcessRunner

BACKENDS: Dict[ClipboardManagerName, Type[ClipboardManager]] = {
    ClipboardManagerName.KLIPPER: KlipperManager,
    ClipboardManagerName.PARCELLITE: ParcelliteManager,
    ClipboardManagerName.CLIPIT: ClipitManager,
    ClipboardManagerName.XCLIP: XclipManager,
}


def get_manager_class(name: ClipboardManagerName) -> Type[ClipboardManager]:
    """
    Get the backend class for a clipboard manager.

    Raises:
        KeyError: If ``name`` has no registered backend
    """
    return BACKENDS[ClipboardManagerName(name)]


def get_manager(
    name: ClipboardManagerName,
    runner: ProcessRunner,
    config: Optional[ClipboardConfig] = None,
) -> ClipboardManager:
    manager_class = get_manager_class(name)
    return manager_class(runner, config)
