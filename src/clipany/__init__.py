"""
Common interface to clipboard manager functions.

Detects which clipboard manager is running (klipper, parcellite, clipit or
plain xclip) and routes clipboard operations to it. Clipboard history is
presented as a list with the current item at index 0.
"""

from clipany.models import ClipboardManagerName, Outcome
from clipany.services.clipboard_service import (
    ClipboardService,
    add_clipboard_content,
    clear_clipboard_content,
    clear_clipboard_history,
    detect_clipboard_manager,
    get_clipboard_content,
    get_clipboard_history_item,
    list_clipboard_history,
)

__version__ = "0.1.0"

__all__ = [
    'ClipboardManagerName',
    'ClipboardService',
    'Outcome',
    'add_clipboard_content',
    'clear_clipboard_content',
    'clear_clipboard_history',
    'detect_clipboard_manager',
    'get_clipboard_content',
    'get_clipboard_history_item',
    'list_clipboard_history',
]
