"""
Clipboard-manager backends.

Each supported manager (klipper, parcellite, clipit, xclip) is reached
through the same ``ClipboardManager`` interface.
"""

from clipany.clipboard.base import ClipboardManager
from clipany.clipboard.detector import DETECTION_ORDER, detect_clipboard_manager
from clipany.clipboard.factory import BACKENDS, get_manager, get_manager_class

__all__ = [
    'BACKENDS',
    'ClipboardManager',
    'DETECTION_ORDER',
    'detect_clipboard_manager',
    'get_manager',
    'get_manager_class',
]
